"""
Passcode domain models.

``StoreConfig`` describes where passcodes live; names are lower-cased and
validated once, at construction, and the object is immutable afterwards.
"""

from datetime import datetime, timedelta, timezone
from typing import List, NamedTuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from passcode_hub.infrastructure.sql.core.identifier import normalize_identifier

NOT_FOUND_AGE = timedelta(hours=24)


class StoreConfig(BaseModel):
    """Table and column names used by the passcode store."""

    model_config = ConfigDict(frozen=True)

    table_name: str = Field(..., description="Table holding one row per subject")
    id_column: str = Field(default="id", description="Unique subject identifier")
    code_column: str = Field(default="passcode", description="Passcode value")
    expiry_column: str = Field(default="expiredat", description="Expiry timestamp")

    @field_validator("table_name")
    @classmethod
    def _normalize_table(cls, value: str) -> str:
        return normalize_identifier(value, allow_schema=True)

    @field_validator("id_column", "code_column", "expiry_column")
    @classmethod
    def _normalize_column(cls, value: str) -> str:
        return normalize_identifier(value)

    @property
    def columns(self) -> List[str]:
        """Columns in write order: id, code, expiry."""
        return [self.id_column, self.code_column, self.expiry_column]


class LoadResult(NamedTuple):
    """Outcome of a lookup; ``found`` is False when no row matched."""

    code: str
    expires_at: datetime
    found: bool

    @classmethod
    def not_found(cls) -> "LoadResult":
        return cls("", datetime.now(timezone.utc) - NOT_FOUND_AGE, False)
