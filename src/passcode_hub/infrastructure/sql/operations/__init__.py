"""SQL statement builders."""

from .upsert import Statement, UpsertBuilder

__all__ = ["Statement", "UpsertBuilder"]
