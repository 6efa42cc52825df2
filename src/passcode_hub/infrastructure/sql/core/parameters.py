"""
SQL parameter binding utilities.

Each dialect's driver expects its own bound-parameter token: PostgreSQL takes
``$1``-style numbers, Oracle takes named ``:val1`` markers and the qmark
drivers take a bare ``?``. Indexes are 1-based and must grow monotonically
within a single statement so that bound values line up with the tokens.
"""

from typing import Any, Dict, List, Sequence, Tuple, Union

from .types import Dialect

ORACLE_PARAM_PREFIX = "val"

BoundParameters = Union[Tuple[Any, ...], Dict[str, Any]]


def build_param(index: int, dialect: Dialect) -> str:
    """
    Build the placeholder token for one positional parameter.

    Args:
        index: 1-based ordinal of the parameter within the statement
        dialect: Target dialect

    Returns:
        Placeholder token

    Examples:
        >>> build_param(2, Dialect.POSTGRES)
        '$2'
        >>> build_param(2, Dialect.ORACLE)
        ':val2'
        >>> build_param(2, Dialect.MYSQL)
        '?'
    """
    if index < 1:
        raise ValueError(f"parameter index must be >= 1, got {index}")
    if dialect == Dialect.POSTGRES:
        return f"${index}"
    if dialect == Dialect.ORACLE:
        return f":{ORACLE_PARAM_PREFIX}{index}"
    return "?"


def build_indexed_params(
    count: int, dialect: Dialect, start: int = 1
) -> Tuple[List[str], int]:
    """
    Build ``count`` consecutive placeholders starting at ``start``.

    Returns:
        Tuple of (placeholder list, next unused index)

    Examples:
        >>> build_indexed_params(3, Dialect.POSTGRES, start=4)
        (['$4', '$5', '$6'], 7)
    """
    placeholders = [build_param(start + i, dialect) for i in range(count)]
    return placeholders, start + count


def bind_parameters(values: Sequence[Any], dialect: Dialect) -> BoundParameters:
    """
    Shape ordered values into the parameter object the driver expects.

    Oracle placeholders are named, so the values are keyed by the same
    ``val<n>`` names ``build_param`` emits. Every other dialect binds
    positionally from a tuple.

    Examples:
        >>> bind_parameters(["a", "b"], Dialect.ORACLE)
        {'val1': 'a', 'val2': 'b'}
        >>> bind_parameters(["a", "b"], Dialect.MYSQL)
        ('a', 'b')
    """
    if dialect == Dialect.ORACLE:
        return {
            f"{ORACLE_PARAM_PREFIX}{i}": value for i, value in enumerate(values, 1)
        }
    return tuple(values)
