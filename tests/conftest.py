"""Pytest configuration: opt-in live database suite and shared fixtures.

The live suite talks to a real database named by PASSCODE_TEST_DATABASE_URL
and only runs with RUN_E2E_TESTS=1 or --run-e2e-tests.
"""

from __future__ import annotations

import os

import pytest

from passcode_hub.config import get_settings
from passcode_hub.domain.passcode.models import StoreConfig
from passcode_hub.infrastructure.sql import Dialect
from tests.fixtures.fake_backend import FakeEngine

E2E_OPTION = "run_e2e_tests"
E2E_MARK = "e2e_suite"
E2E_ENV = "RUN_E2E_TESTS"

SUPPORTED_DIALECTS = [
    Dialect.POSTGRES,
    Dialect.MYSQL,
    Dialect.MSSQL,
    Dialect.ORACLE,
]


def _env_enabled(name: str) -> bool:
    """Return True when the opt-in environment flag is set to '1'."""
    return os.getenv(name) == "1"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register the CLI flag that mirrors the RUN_E2E_TESTS toggle."""
    parser.addoption(
        "--run-e2e-tests",
        action="store_true",
        dest=E2E_OPTION,
        default=_env_enabled(E2E_ENV),
        help="Run the live database suite "
        "(set RUN_E2E_TESTS=1 or pass --run-e2e-tests).",
    )


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Skip the live suite unless its flag is enabled."""
    if config.getoption(E2E_OPTION):
        return
    skip_e2e = pytest.mark.skip(
        reason="Set RUN_E2E_TESTS=1 or pass --run-e2e-tests to run the E2E suite."
    )
    for item in items:
        if E2E_MARK in item.keywords:
            item.add_marker(skip_e2e)


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Drop the cached Settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def otp_config() -> StoreConfig:
    return StoreConfig(
        table_name="otp", id_column="id", code_column="passcode", expiry_column="expiredat"
    )


@pytest.fixture(params=SUPPORTED_DIALECTS, ids=lambda d: d.value)
def fake_engine(request) -> FakeEngine:
    """Emulated backend for each supported dialect."""
    return FakeEngine.for_dialect(request.param)
