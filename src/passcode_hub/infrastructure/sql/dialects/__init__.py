"""Per-dialect statement builders and handle resolution."""

from .base import BaseDialect, SQLDialect
from .mssql import MSSQLDialect
from .mysql import MySQLDialect
from .oracle import OracleDialect
from .postgresql import PostgreSQLDialect
from .resolver import (
    NATIVE_PLACEHOLDERS_OPTION,
    SUPPORTED_DRIVERS,
    coerce_dialect,
    describe_driver,
    get_dialect,
    resolve_dialect,
)

__all__ = [
    "BaseDialect",
    "SQLDialect",
    "PostgreSQLDialect",
    "MySQLDialect",
    "MSSQLDialect",
    "OracleDialect",
    "NATIVE_PLACEHOLDERS_OPTION",
    "SUPPORTED_DRIVERS",
    "coerce_dialect",
    "describe_driver",
    "get_dialect",
    "resolve_dialect",
]
