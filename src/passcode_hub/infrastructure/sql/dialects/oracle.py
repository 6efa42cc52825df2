"""
Oracle dialect implementation.

Upserts are a ``MERGE`` from a one-row ``SELECT ... FROM dual``. Oracle
refuses to update a column referenced in the ``ON`` clause, so the key is
left out of the update list. Oracle also reports result column names in
upper case; the row decoder matches them in either case.
"""

from typing import List, Tuple

from ..core.parameters import build_indexed_params
from ..core.types import Dialect
from ..rows import RowDecoder
from .base import BaseDialect


class OracleDialect(BaseDialect):
    """Oracle SQL dialect implementation."""

    name = Dialect.ORACLE

    def build_upsert(
        self, table: str, columns: List[str], key_column: str
    ) -> Tuple[str, List[str]]:
        source, next_index = build_indexed_params(len(columns), self.name)
        insert_values, _ = build_indexed_params(
            len(columns), self.name, start=next_index
        )
        selected = ", ".join(
            f"{param} AS {column}" for param, column in zip(source, columns)
        )
        updates = ", ".join(
            f"{column}=temp.{column}" for column in columns if column != key_column
        )
        sql = (
            f"MERGE INTO {table} USING (SELECT {selected} FROM dual) temp "
            f"ON ({table}.{key_column} = temp.{key_column}) "
            f"WHEN MATCHED THEN UPDATE SET {updates} "
            f"WHEN NOT MATCHED THEN INSERT ({', '.join(columns)}) "
            f"VALUES ({','.join(insert_values)})"
        )
        return sql, list(columns) + list(columns)

    def row_decoder(self) -> RowDecoder:
        return RowDecoder(self.name.value, fold_column=str.upper)
