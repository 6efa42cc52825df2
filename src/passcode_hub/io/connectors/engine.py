"""
Engine factory for passcode stores.

The store sends dialect-native placeholders, so the engine must use a driver
that accepts them. psycopg 3 only does so through its raw cursor, which this
factory installs for ``postgresql+psycopg`` URLs and flags on the engine so the
dialect resolver recognizes it. Bound parameters carry passcodes, so they are
kept out of SQLAlchemy's error messages.
"""

from typing import Any, Dict

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine, make_url

from passcode_hub.infrastructure.sql import NATIVE_PLACEHOLDERS_OPTION


def create_store_engine(url: str, **kwargs: Any) -> Engine:
    """
    Create a pooled engine suitable for ``PasscodeStore``.

    Args:
        url: SQLAlchemy database URL
        **kwargs: Extra ``create_engine`` arguments (pool sizing etc.)

    Returns:
        SQLAlchemy Engine
    """
    parsed = make_url(url)
    options: Dict[str, Any] = {"pool_pre_ping": True, "hide_parameters": True}
    if parsed.get_backend_name() == "postgresql" and parsed.get_driver_name() == "psycopg":
        import psycopg

        connect_args = dict(kwargs.pop("connect_args", {}))
        connect_args.setdefault("cursor_factory", psycopg.RawCursor)
        options["connect_args"] = connect_args
        execution_options = dict(kwargs.pop("execution_options", {}))
        execution_options[NATIVE_PLACEHOLDERS_OPTION] = True
        options["execution_options"] = execution_options
        # hstore probing issues pyformat queries the raw cursor cannot run
        options["use_native_hstore"] = False
    options.update(kwargs)
    return create_engine(parsed, **options)
