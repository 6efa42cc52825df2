"""
Passcode statement builders.

Provides a high-level builder that turns a table layout plus the values to
bind into ready-to-execute statements, keeping bound values in the order the
dialect's placeholders expect.
"""

from dataclasses import dataclass
from typing import Any, List, Mapping

from ..core.parameters import BoundParameters
from ..dialects.base import SQLDialect


@dataclass(frozen=True)
class Statement:
    """SQL text and the parameters bound to its placeholders."""

    sql: str
    parameters: BoundParameters


class UpsertBuilder:
    """
    High-level builder for passcode statements.

    Example:
        >>> from passcode_hub.infrastructure.sql import MySQLDialect, UpsertBuilder
        >>> builder = UpsertBuilder(MySQLDialect())
        >>> stmt = builder.upsert("otp", ["id", "passcode", "expiredat"], "id",
        ...                       {"id": "u1", "passcode": "1", "expiredat": None})
        >>> stmt.parameters
        ('u1', '1', None, 'u1', '1', None)
    """

    def __init__(self, dialect: SQLDialect):
        """
        Initialize the UpsertBuilder.

        Args:
            dialect: SQL dialect to use for statement generation
        """
        self.dialect = dialect

    def upsert(
        self,
        table: str,
        columns: List[str],
        key_column: str,
        values: Mapping[str, Any],
    ) -> Statement:
        """
        Build an insert-or-update statement keyed by ``key_column``.

        Args:
            table: Table name
            columns: Columns to write, in order
            key_column: Unique column identifying the record
            values: Value for each column, keyed by column name

        Returns:
            Statement whose parameters follow the placeholder order
        """
        sql, bound_columns = self.dialect.build_upsert(table, columns, key_column)
        return Statement(sql, self.dialect.bind([values[c] for c in bound_columns]))

    def select(self, table: str, key_column: str, key: Any) -> Statement:
        return Statement(
            self.dialect.build_select(table, key_column), self.dialect.bind([key])
        )

    def delete(self, table: str, key_column: str, key: Any) -> Statement:
        return Statement(
            self.dialect.build_delete(table, key_column), self.dialect.bind([key])
        )
