"""
PostgreSQL-specific SQL dialect implementation.

Upserts use ``INSERT ... ON CONFLICT (key) DO UPDATE`` with ``$n``
placeholders; the update list binds its own copy of the values.
"""

from typing import List, Tuple

from ..core.parameters import build_indexed_params
from ..core.types import Dialect
from .base import BaseDialect


class PostgreSQLDialect(BaseDialect):
    """PostgreSQL SQL dialect implementation."""

    name = Dialect.POSTGRES

    def build_upsert(
        self, table: str, columns: List[str], key_column: str
    ) -> Tuple[str, List[str]]:
        """
        Build INSERT ... ON CONFLICT DO UPDATE statement.

        Args:
            table: Table name
            columns: Columns to insert, in bind order
            key_column: Unique column used for conflict detection

        Returns:
            Tuple of (SQL text, column bound by each placeholder in order)
        """
        placeholders, next_index = build_indexed_params(len(columns), self.name)
        set_list, _ = self._set_list(columns, next_index)
        sql = (
            f"INSERT INTO {table} ({', '.join(columns)}) "
            f"VALUES ({','.join(placeholders)}) "
            f"ON CONFLICT ({key_column}) DO UPDATE SET {set_list}"
        )
        return sql, list(columns) + list(columns)
