"""
SQL Server dialect implementation.

SQL Server has no INSERT-level conflict clause, so upserts are written as a
``MERGE`` against an inline ``VALUES`` row aliased ``temp``. The statement
must end with a semicolon.
"""

from typing import List, Tuple

from ..core.parameters import build_indexed_params
from ..core.types import Dialect
from .base import BaseDialect


class MSSQLDialect(BaseDialect):
    """SQL Server SQL dialect implementation."""

    name = Dialect.MSSQL

    def build_upsert(
        self, table: str, columns: List[str], key_column: str
    ) -> Tuple[str, List[str]]:
        """
        Build MERGE INTO ... USING (VALUES ...) statement.

        Returns:
            Tuple of (SQL text, column bound by each placeholder in order)
        """
        source, next_index = build_indexed_params(len(columns), self.name)
        insert_values, _ = build_indexed_params(
            len(columns), self.name, start=next_index
        )
        column_list = ", ".join(columns)
        updates = ", ".join(f"{column}=temp.{column}" for column in columns)
        sql = (
            f"MERGE INTO {table} USING (VALUES ({','.join(source)})) "
            f"AS temp ({column_list}) "
            f"ON {table}.{key_column} = temp.{key_column} "
            f"WHEN MATCHED THEN UPDATE SET {updates} "
            f"WHEN NOT MATCHED THEN INSERT ({column_list}) "
            f"VALUES ({','.join(insert_values)});"
        )
        return sql, list(columns) + list(columns)
