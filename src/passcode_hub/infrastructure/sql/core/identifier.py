"""
SQL identifier handling utilities.

Table and column names are interpolated into statement text unquoted, so they
are normalized to lowercase and checked against a plain identifier pattern
before any SQL is built.
"""

import re

_IDENTIFIER = r"[a-z_][a-z0-9_$#]*"
IDENTIFIER_PATTERN = re.compile(rf"^{_IDENTIFIER}$")
TABLE_PATTERN = re.compile(rf"^(?:{_IDENTIFIER}\.)?{_IDENTIFIER}$")


def normalize_identifier(name: str, allow_schema: bool = False) -> str:
    """
    Lowercase and validate a table or column name.

    Args:
        name: The identifier to normalize
        allow_schema: Accept one ``schema.`` prefix (table names only)

    Returns:
        Lowercased identifier

    Raises:
        ValueError: If the name is empty or contains characters that are not
            valid in an unquoted identifier

    Examples:
        >>> normalize_identifier("ExpiredAt")
        'expiredat'
        >>> normalize_identifier("Auth.OTP", allow_schema=True)
        'auth.otp'
    """
    normalized = name.strip().lower()
    pattern = TABLE_PATTERN if allow_schema else IDENTIFIER_PATTERN
    if not pattern.match(normalized):
        raise ValueError(f"invalid SQL identifier: {name!r}")
    return normalized
