"""
SQL module for dialect-aware passcode statements.

This module builds bound-parameter tokens, upsert/select/delete statements
and typed row decoders for every supported database dialect.
"""

from .core.identifier import normalize_identifier
from .core.parameters import bind_parameters, build_indexed_params, build_param
from .core.types import Dialect
from .dialects import (
    NATIVE_PLACEHOLDERS_OPTION,
    MSSQLDialect,
    MySQLDialect,
    OracleDialect,
    PostgreSQLDialect,
    coerce_dialect,
    describe_driver,
    get_dialect,
    resolve_dialect,
)
from .operations.upsert import Statement, UpsertBuilder
from .rows import RowDecoder

__all__ = [
    "Dialect",
    "normalize_identifier",
    "build_param",
    "build_indexed_params",
    "bind_parameters",
    "PostgreSQLDialect",
    "MySQLDialect",
    "MSSQLDialect",
    "NATIVE_PLACEHOLDERS_OPTION",
    "OracleDialect",
    "coerce_dialect",
    "describe_driver",
    "get_dialect",
    "resolve_dialect",
    "Statement",
    "UpsertBuilder",
    "RowDecoder",
]
