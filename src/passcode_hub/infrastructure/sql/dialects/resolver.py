"""
Dialect resolution for live database handles.

A handle is classified from the SQLAlchemy dialect bound to it. Only
synchronous drivers whose native placeholder syntax matches ``build_param``
are recognized; any other driver, a missing handle or an object without a
dialect resolves to ``Dialect.UNSUPPORTED``.

psycopg 3 only accepts ``$n`` through its raw cursor, so a ``postgresql+psycopg``
handle also has to carry the ``NATIVE_PLACEHOLDERS_OPTION`` execution option
that ``create_store_engine`` sets alongside the raw cursor.
"""

from typing import Any, Dict, FrozenSet, Optional, Tuple, Union

from passcode_hub.exceptions import UnsupportedDialectError

from ..core.types import Dialect
from .base import SQLDialect
from .mssql import MSSQLDialect
from .mysql import MySQLDialect
from .oracle import OracleDialect
from .postgresql import PostgreSQLDialect

NATIVE_PLACEHOLDERS_OPTION = "passcode_native_placeholders"

SUPPORTED_DRIVERS: Dict[Tuple[str, str], Dialect] = {
    ("postgresql", "psycopg"): Dialect.POSTGRES,
    ("mysql", "mariadbconnector"): Dialect.MYSQL,
    ("mariadb", "mariadbconnector"): Dialect.MYSQL,
    ("mssql", "pyodbc"): Dialect.MSSQL,
    ("oracle", "oracledb"): Dialect.ORACLE,
    ("oracle", "cx_oracle"): Dialect.ORACLE,
}

# Drivers that take native placeholders only when the engine opted in.
OPT_IN_DRIVERS: FrozenSet[Tuple[str, str]] = frozenset({("postgresql", "psycopg")})

_DIALECTS: Dict[Dialect, SQLDialect] = {
    Dialect.POSTGRES: PostgreSQLDialect(),
    Dialect.MYSQL: MySQLDialect(),
    Dialect.MSSQL: MSSQLDialect(),
    Dialect.ORACLE: OracleDialect(),
}


def _driver_identity(handle: Any) -> Optional[Tuple[str, str]]:
    sa_dialect = getattr(handle, "dialect", None)
    if sa_dialect is None:
        return None
    name = getattr(sa_dialect, "name", None)
    driver = getattr(sa_dialect, "driver", None)
    if not isinstance(name, str) or not isinstance(driver, str):
        return None
    return name.lower(), driver.lower()


def _has_native_placeholders(handle: Any) -> bool:
    get_options = getattr(handle, "get_execution_options", None)
    if not callable(get_options):
        return False
    return get_options().get(NATIVE_PLACEHOLDERS_OPTION) is True


def resolve_dialect(handle: Any) -> Dialect:
    """
    Classify a database handle into a supported dialect.

    Args:
        handle: SQLAlchemy Engine or Connection (or None)

    Returns:
        Matching Dialect, or Dialect.UNSUPPORTED
    """
    identity = _driver_identity(handle)
    if identity is None:
        return Dialect.UNSUPPORTED
    if identity in OPT_IN_DRIVERS and not _has_native_placeholders(handle):
        return Dialect.UNSUPPORTED
    return SUPPORTED_DRIVERS.get(identity, Dialect.UNSUPPORTED)


def describe_driver(handle: Any) -> str:
    """Human-readable ``backend+driver`` name for error messages."""
    identity = _driver_identity(handle)
    if identity is None:
        return "none"
    return "+".join(identity)


def coerce_dialect(value: Union[Dialect, str]) -> Dialect:
    """Accept a Dialect or its string value."""
    if isinstance(value, Dialect):
        return value
    return Dialect(value.strip().lower())


def get_dialect(dialect: Dialect, driver: Optional[str] = None) -> SQLDialect:
    """
    Look up the statement builder for a dialect.

    Raises:
        UnsupportedDialectError: For Dialect.UNSUPPORTED
    """
    try:
        return _DIALECTS[dialect]
    except KeyError:
        raise UnsupportedDialectError(driver or dialect.value) from None
