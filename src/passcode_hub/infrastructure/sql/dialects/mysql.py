"""MySQL/MariaDB dialect: ``INSERT ... ON DUPLICATE KEY UPDATE`` with qmarks."""

from typing import List, Tuple

from ..core.parameters import build_indexed_params
from ..core.types import Dialect
from .base import BaseDialect


class MySQLDialect(BaseDialect):
    """MySQL SQL dialect implementation."""

    name = Dialect.MYSQL

    def build_upsert(
        self, table: str, columns: List[str], key_column: str
    ) -> Tuple[str, List[str]]:
        # The duplicate key is implied by the table's unique index on key_column.
        placeholders, next_index = build_indexed_params(len(columns), self.name)
        set_list, _ = self._set_list(columns, next_index)
        sql = (
            f"INSERT INTO {table} ({', '.join(columns)}) "
            f"VALUES ({','.join(placeholders)}) "
            f"ON DUPLICATE KEY UPDATE {set_list}"
        )
        return sql, list(columns) + list(columns)
