"""
Unit tests for the per-dialect statement builders and UpsertBuilder.
"""

from datetime import datetime, timezone

import pytest

from passcode_hub.exceptions import UnsupportedDialectError
from passcode_hub.infrastructure.sql import (
    Dialect,
    MSSQLDialect,
    MySQLDialect,
    OracleDialect,
    PostgreSQLDialect,
    UpsertBuilder,
    get_dialect,
)

COLUMNS = ["id", "passcode", "expiredat"]
EXPIRES = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)
VALUES = {"id": "user-42", "passcode": "839201", "expiredat": EXPIRES}


class TestPostgreSQLDialect:
    """Tests for PostgreSQL dialect."""

    @pytest.fixture
    def dialect(self):
        return PostgreSQLDialect()

    def test_dialect_name(self, dialect):
        """Builder reports its dialect tag."""
        assert dialect.name == Dialect.POSTGRES

    def test_build_upsert(self, dialect):
        """Postgres upsert uses ON CONFLICT with numbered binds."""
        sql, bound = dialect.build_upsert("otp", COLUMNS, "id")

        assert sql == (
            "INSERT INTO otp (id, passcode, expiredat) VALUES ($1,$2,$3) "
            "ON CONFLICT (id) DO UPDATE SET id=$4, passcode=$5, expiredat=$6"
        )
        assert bound == COLUMNS + COLUMNS

    def test_build_select(self, dialect):
        """Postgres select binds $1."""
        assert dialect.build_select("otp", "id") == "SELECT * FROM otp WHERE id = $1"

    def test_build_delete(self, dialect):
        """Postgres delete binds $1."""
        assert dialect.build_delete("otp", "id") == "DELETE FROM otp WHERE id = $1"


class TestMySQLDialect:
    """Tests for MySQL dialect."""

    @pytest.fixture
    def dialect(self):
        return MySQLDialect()

    def test_build_upsert(self, dialect):
        """MySQL upsert uses ON DUPLICATE KEY UPDATE."""
        sql, bound = dialect.build_upsert("otp", COLUMNS, "id")

        assert sql == (
            "INSERT INTO otp (id, passcode, expiredat) VALUES (?,?,?) "
            "ON DUPLICATE KEY UPDATE id=?, passcode=?, expiredat=?"
        )
        assert bound == COLUMNS + COLUMNS

    def test_build_select_uses_qmark(self, dialect):
        """MySQL select uses a qmark bind."""
        assert dialect.build_select("otp", "id") == "SELECT * FROM otp WHERE id = ?"


class TestMSSQLDialect:
    """Tests for SQL Server dialect."""

    @pytest.fixture
    def dialect(self):
        return MSSQLDialect()

    def test_build_upsert(self, dialect):
        """SQL Server merges from a VALUES row and binds six values."""
        sql, bound = dialect.build_upsert("otp", COLUMNS, "id")

        assert sql == (
            "MERGE INTO otp USING (VALUES (?,?,?)) AS temp (id, passcode, expiredat) "
            "ON otp.id = temp.id "
            "WHEN MATCHED THEN UPDATE SET id=temp.id, passcode=temp.passcode, "
            "expiredat=temp.expiredat "
            "WHEN NOT MATCHED THEN INSERT (id, passcode, expiredat) VALUES (?,?,?);"
        )
        assert sql.count("?") == len(bound) == 6

    def test_build_delete(self, dialect):
        """SQL Server delete uses a qmark bind."""
        assert dialect.build_delete("otp", "id") == "DELETE FROM otp WHERE id = ?"


class TestOracleDialect:
    """Tests for Oracle dialect."""

    @pytest.fixture
    def dialect(self):
        return OracleDialect()

    def test_build_upsert(self, dialect):
        """Oracle merges from a one-row select on dual."""
        sql, bound = dialect.build_upsert("otp", COLUMNS, "id")

        assert sql == (
            "MERGE INTO otp USING (SELECT :val1 AS id, :val2 AS passcode, "
            ":val3 AS expiredat FROM dual) temp ON (otp.id = temp.id) "
            "WHEN MATCHED THEN UPDATE SET passcode=temp.passcode, "
            "expiredat=temp.expiredat "
            "WHEN NOT MATCHED THEN INSERT (id, passcode, expiredat) "
            "VALUES (:val4,:val5,:val6)"
        )
        assert bound == COLUMNS + COLUMNS

    def test_update_list_skips_key_column(self, dialect):
        """Oracle cannot update a column referenced in the ON clause."""
        sql, _ = dialect.build_upsert("otp", COLUMNS, "id")
        update_clause = sql.split("UPDATE SET ")[1].split(" WHEN")[0]
        assert "id=" not in update_clause

    def test_build_select(self, dialect):
        """Oracle select uses a named bind."""
        assert dialect.build_select("otp", "id") == "SELECT * FROM otp WHERE id = :val1"

    def test_row_decoder_folds_to_upper(self, dialect):
        """Oracle decoders fold column names to upper case first."""
        assert dialect.row_decoder().fold_column("passcode") == "PASSCODE"


class TestGetDialect:
    """Tests for the dialect registry."""

    @pytest.mark.parametrize(
        "tag,cls",
        [
            (Dialect.POSTGRES, PostgreSQLDialect),
            (Dialect.MYSQL, MySQLDialect),
            (Dialect.MSSQL, MSSQLDialect),
            (Dialect.ORACLE, OracleDialect),
        ],
    )
    def test_returns_builder(self, tag, cls):
        """Each dialect tag maps to its builder."""
        assert isinstance(get_dialect(tag), cls)

    def test_unsupported_raises_with_driver(self):
        """Unsupported lookups name the driver in the error."""
        with pytest.raises(UnsupportedDialectError) as exc_info:
            get_dialect(Dialect.UNSUPPORTED, driver="sqlite+pysqlite")
        assert "sqlite+pysqlite" in str(exc_info.value)


class TestUpsertBuilder:
    """Tests for UpsertBuilder."""

    def test_mysql_example_statement(self):
        """Bound values repeat for the insert list and the update list."""
        stmt = UpsertBuilder(MySQLDialect()).upsert("otp", COLUMNS, "id", VALUES)

        assert stmt.sql == (
            "INSERT INTO otp (id, passcode, expiredat) VALUES (?,?,?) "
            "ON DUPLICATE KEY UPDATE id=?, passcode=?, expiredat=?"
        )
        assert stmt.parameters == (
            "user-42", "839201", EXPIRES, "user-42", "839201", EXPIRES,
        )

    def test_oracle_parameters_are_named(self):
        """Oracle values are bound by name in placeholder order."""
        stmt = UpsertBuilder(OracleDialect()).upsert("otp", COLUMNS, "id", VALUES)

        assert stmt.parameters == {
            "val1": "user-42",
            "val2": "839201",
            "val3": EXPIRES,
            "val4": "user-42",
            "val5": "839201",
            "val6": EXPIRES,
        }

    def test_select_binds_key_once(self):
        """Select binds the key once."""
        stmt = UpsertBuilder(PostgreSQLDialect()).select("otp", "id", "user-42")
        assert stmt.sql == "SELECT * FROM otp WHERE id = $1"
        assert stmt.parameters == ("user-42",)

    def test_delete_never_inlines_key(self):
        """Keys are bound, never spliced into the SQL."""
        stmt = UpsertBuilder(MSSQLDialect()).delete("otp", "id", "x' OR '1'='1")
        assert "OR" not in stmt.sql
        assert stmt.parameters == ("x' OR '1'='1",)
