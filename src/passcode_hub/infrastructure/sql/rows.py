"""
Typed decoding of name-keyed result rows.

Drivers disagree on how they hand values back: some return text columns as
raw bytes, and Oracle reports column names upper-cased no matter how they
were declared. SQLAlchemy normalizes those names back to lower case, a raw
DBAPI cursor does not, so lookups accept either spelling. ``RowDecoder``
keeps those quirks out of the store logic.
"""

from datetime import datetime
from typing import Any, Callable, Mapping, Optional

from passcode_hub.exceptions import PasscodeDecodeError


def _identity(name: str) -> str:
    return name


class RowDecoder:
    """Read typed values out of a column-name-keyed row."""

    def __init__(self, dialect: str, fold_column: Callable[[str], str] = _identity):
        self.dialect = dialect
        self.fold_column = fold_column

    def _key(self, row: Mapping[str, Any], column: str) -> Optional[str]:
        for key in (self.fold_column(column), column):
            if key in row:
                return key
        if self.fold_column is _identity:
            return None
        folded = self.fold_column(column)
        for key in row:
            if isinstance(key, str) and self.fold_column(key) == folded:
                return key
        return None

    def value(self, row: Mapping[str, Any], column: str) -> Any:
        key = self._key(row, column)
        if key is None:
            raise PasscodeDecodeError(self.dialect, column, None, "present column")
        return row[key]

    def text(self, row: Mapping[str, Any], column: str) -> str:
        """Decode a text column, accepting byte sequences as UTF-8."""
        raw = self.value(row, column)
        if isinstance(raw, str):
            return raw
        if isinstance(raw, (bytes, bytearray, memoryview)):
            try:
                return bytes(raw).decode("utf-8")
            except UnicodeDecodeError as exc:
                raise PasscodeDecodeError(
                    self.dialect, column, raw, "utf-8 text"
                ) from exc
        raise PasscodeDecodeError(self.dialect, column, raw, "text")

    def timestamp(self, row: Mapping[str, Any], column: str) -> datetime:
        raw = self.value(row, column)
        if not isinstance(raw, datetime):
            raise PasscodeDecodeError(self.dialect, column, raw, "datetime")
        return raw
