"""
Passcode Store for one-time passcode persistence.

Saves, loads and deletes one passcode per subject against an externally
owned SQLAlchemy Engine or Connection. SQL text is built per dialect and run
verbatim through ``exec_driver_sql``, so each dialect's own placeholder
tokens reach the driver unchanged.
"""

from __future__ import annotations

from contextlib import contextmanager
from datetime import datetime
from typing import Any, Iterator, Mapping, Optional, Union

from sqlalchemy.engine import Connection, Engine

from passcode_hub.domain.passcode.models import LoadResult, StoreConfig
from passcode_hub.exceptions import UnsupportedDialectError
from passcode_hub.infrastructure.sql import (
    Dialect,
    Statement,
    UpsertBuilder,
    coerce_dialect,
    describe_driver,
    get_dialect,
    resolve_dialect,
)
from passcode_hub.infrastructure.sql.dialects.base import SQLDialect
from passcode_hub.utils.logging import get_logger

logger = get_logger(__name__)

Handle = Union[Engine, Connection]


@contextmanager
def _connection_scope(handle: Handle, write: bool) -> Iterator[Connection]:
    """
    Yield a connection for one round trip.

    An Engine lends a pooled connection for the duration of the block, inside
    a transaction when ``write`` is set. A Connection is used as-is and its
    transaction stays with the caller.
    """
    if isinstance(handle, Connection):
        yield handle
    elif write:
        with handle.begin() as conn:
            yield conn
    else:
        with handle.connect() as conn:
            yield conn


class PasscodeStore:
    """
    Store for short-lived passcodes, one row per subject.

    The dialect is either fixed at construction or resolved from the handle
    on every call. Nothing is cached between calls, so one instance can be
    shared by concurrent callers as long as the handle is a pooled Engine.

    Usage:
        store = PasscodeStore(engine, StoreConfig(table_name="otp"))
        store.save("user-42", "839201", expires_at)
        code, expires_at, found = store.load("user-42")
        store.delete("user-42")

    ``execution_options`` on every operation is forwarded to the driver call
    untouched; callers use it (or a Connection they configured) to carry
    their own deadlines.

    Handles must be synchronous. A ``postgresql+psycopg`` engine has to come
    from ``create_store_engine`` (or carry its raw cursor and the
    ``passcode_native_placeholders`` execution option); otherwise it resolves
    as unsupported.
    """

    def __init__(
        self,
        handle: Optional[Handle],
        config: StoreConfig,
        dialect: Optional[Union[Dialect, str]] = None,
    ):
        """
        Initialize the store.

        Args:
            handle: SQLAlchemy Engine or Connection owned by the caller
            config: Table and column names
            dialect: Explicit dialect tag; resolved from ``handle`` when None
        """
        self.handle = handle
        self.config = config
        self.dialect = coerce_dialect(dialect) if dialect is not None else None

    def current_dialect(self) -> Dialect:
        """Dialect used for the next call."""
        if self.dialect is not None:
            return self.dialect
        return resolve_dialect(self.handle)

    def _sql_dialect(self) -> SQLDialect:
        dialect = self.current_dialect()
        if dialect == Dialect.UNSUPPORTED or self.handle is None:
            driver = describe_driver(self.handle)
            logger.warning("passcode_unsupported_dialect", driver=driver)
            raise UnsupportedDialectError(driver)
        return get_dialect(dialect)

    def _execute(
        self,
        statement: Statement,
        write: bool,
        execution_options: Optional[Mapping[str, Any]],
    ) -> int:
        with _connection_scope(self.handle, write) as conn:
            result = conn.exec_driver_sql(
                statement.sql, statement.parameters, execution_options=execution_options
            )
            return result.rowcount

    def save(
        self,
        subject_id: str,
        code: str,
        expire_at: datetime,
        *,
        execution_options: Optional[Mapping[str, Any]] = None,
    ) -> int:
        """
        Insert the passcode or replace the subject's existing one.

        Returns:
            Rows affected as reported by the driver

        Raises:
            UnsupportedDialectError: Before any statement is sent
        """
        sql_dialect = self._sql_dialect()
        cfg = self.config
        statement = UpsertBuilder(sql_dialect).upsert(
            cfg.table_name,
            cfg.columns,
            cfg.id_column,
            {
                cfg.id_column: subject_id,
                cfg.code_column: code,
                cfg.expiry_column: expire_at,
            },
        )
        rows = self._execute(statement, True, execution_options)
        logger.debug(
            "passcode_saved",
            subject_id=subject_id,
            dialect=sql_dialect.name.value,
            rows_affected=rows,
        )
        return rows

    def load(
        self,
        subject_id: str,
        *,
        execution_options: Optional[Mapping[str, Any]] = None,
    ) -> LoadResult:
        """
        Look up the subject's passcode.

        A missing row is not an error: the result has ``found=False``, an
        empty code and an expiry 24 hours in the past.

        Raises:
            PasscodeDecodeError: When a stored value has the wrong type
        """
        sql_dialect = self._sql_dialect()
        cfg = self.config
        statement = UpsertBuilder(sql_dialect).select(
            cfg.table_name, cfg.id_column, subject_id
        )
        with _connection_scope(self.handle, False) as conn:
            result = conn.exec_driver_sql(
                statement.sql, statement.parameters, execution_options=execution_options
            )
            try:
                rows = result.mappings().all()
            finally:
                result.close()

        if not rows:
            logger.debug("passcode_loaded", subject_id=subject_id, found=False)
            return LoadResult.not_found()

        row = rows[-1]
        decoder = sql_dialect.row_decoder()
        loaded = LoadResult(
            code=decoder.text(row, cfg.code_column),
            expires_at=decoder.timestamp(row, cfg.expiry_column),
            found=True,
        )
        logger.debug("passcode_loaded", subject_id=subject_id, found=True)
        return loaded

    def delete(
        self,
        subject_id: str,
        *,
        execution_options: Optional[Mapping[str, Any]] = None,
    ) -> int:
        """Remove the subject's passcode; returns rows affected (0 if absent)."""
        sql_dialect = self._sql_dialect()
        cfg = self.config
        statement = UpsertBuilder(sql_dialect).delete(
            cfg.table_name, cfg.id_column, subject_id
        )
        rows = self._execute(statement, True, execution_options)
        logger.debug(
            "passcode_deleted",
            subject_id=subject_id,
            dialect=sql_dialect.name.value,
            rows_affected=rows,
        )
        return rows
