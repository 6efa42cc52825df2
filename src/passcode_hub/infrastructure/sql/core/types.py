"""Dialect tags shared across the SQL package."""

from enum import Enum


class Dialect(str, Enum):
    """SQL syntax variants the passcode store can speak."""

    POSTGRES = "postgres"
    MYSQL = "mysql"
    MSSQL = "mssql"
    ORACLE = "oracle"
    UNSUPPORTED = "unsupported"
