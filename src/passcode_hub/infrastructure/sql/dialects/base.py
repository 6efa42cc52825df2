"""
Shared behaviour for the per-dialect statement builders.

Each concrete dialect only has to say how it writes an upsert; lookups and
deletes keyed by a single column read the same everywhere apart from the
placeholder token.
"""

from typing import Any, List, Protocol, Sequence, Tuple

from ..core.parameters import BoundParameters, bind_parameters, build_param
from ..core.types import Dialect
from ..rows import RowDecoder


class SQLDialect(Protocol):
    """Protocol for passcode SQL dialects."""

    name: Dialect

    def param(self, index: int) -> str: ...
    def bind(self, values: Sequence[Any]) -> BoundParameters: ...
    def build_upsert(
        self, table: str, columns: List[str], key_column: str
    ) -> Tuple[str, List[str]]: ...
    def build_select(self, table: str, key_column: str) -> str: ...
    def build_delete(self, table: str, key_column: str) -> str: ...
    def row_decoder(self) -> RowDecoder: ...


class BaseDialect:
    """Common SELECT/DELETE generation and parameter handling."""

    name: Dialect

    def param(self, index: int) -> str:
        """Placeholder token for the 1-based parameter ``index``."""
        return build_param(index, self.name)

    def bind(self, values: Sequence[Any]) -> BoundParameters:
        return bind_parameters(values, self.name)

    def build_select(self, table: str, key_column: str) -> str:
        return f"SELECT * FROM {table} WHERE {key_column} = {self.param(1)}"

    def build_delete(self, table: str, key_column: str) -> str:
        return f"DELETE FROM {table} WHERE {key_column} = {self.param(1)}"

    def row_decoder(self) -> RowDecoder:
        return RowDecoder(self.name.value)

    def _set_list(self, columns: List[str], start: int) -> Tuple[str, int]:
        """Build ``col=<param>, ...`` continuing the parameter counter."""
        assignments = []
        index = start
        for column in columns:
            assignments.append(f"{column}={self.param(index)}")
            index += 1
        return ", ".join(assignments), index
