"""
Passcode store commands.

Connection and table layout come from Settings (DATABASE_URL and the
PASSCODE_* variables); results are printed as JSON.
"""

import argparse
import json
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List, Optional

from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError, StatementError

from passcode_hub.config import get_settings
from passcode_hub.exceptions import PasscodeStoreError
from passcode_hub.io.connectors.engine import create_store_engine
from passcode_hub.io.repositories.passcode_repository import PasscodeStore
from passcode_hub.utils.logging import get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_STORE_ERROR = 1
EXIT_NOT_CONFIGURED = 2


def _parse_expiry(value: str) -> datetime:
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="passcode_hub.cli",
        description="PasscodeHub CLI - save, load and delete one-time passcodes",
    )
    subparsers = parser.add_subparsers(
        title="commands", dest="command", required=True
    )

    save = subparsers.add_parser("save", help="Save or replace a passcode")
    save.add_argument("subject_id")
    save.add_argument("code")
    expiry = save.add_mutually_exclusive_group()
    expiry.add_argument(
        "--ttl", type=int, default=300, help="Seconds until expiry (default: 300)"
    )
    expiry.add_argument(
        "--expires-at",
        type=_parse_expiry,
        help="Absolute ISO-8601 expiry; UTC when no offset is given",
    )

    load = subparsers.add_parser("load", help="Look up a passcode")
    load.add_argument("subject_id")
    load.add_argument(
        "--show-code", action="store_true", help="Include the passcode in the output"
    )

    delete = subparsers.add_parser("delete", help="Delete a passcode")
    delete.add_argument("subject_id")

    return parser


def _run(args: argparse.Namespace, store: PasscodeStore) -> Dict[str, Any]:
    if args.command == "save":
        expires_at = args.expires_at or (
            datetime.now(timezone.utc) + timedelta(seconds=args.ttl)
        )
        rows = store.save(args.subject_id, args.code, expires_at)
        return {"rows_affected": rows, "expires_at": expires_at.isoformat()}

    if args.command == "load":
        result = store.load(args.subject_id)
        output: Dict[str, Any] = {
            "found": result.found,
            "expires_at": result.expires_at.isoformat(),
        }
        if args.show_code:
            output["code"] = result.code
        return output

    return {"rows_affected": store.delete(args.subject_id)}


def _describe_error(exc: Exception) -> str:
    """Error text without the statement's bound parameters."""
    if isinstance(exc, StatementError) and exc.orig is not None:
        return f"{type(exc).__name__}: {exc.orig}"
    return str(exc)


def main(
    argv: Optional[List[str]] = None,
    engine_factory: Callable[[str], Engine] = create_store_engine,
) -> int:
    """
    Run one store command.

    Args:
        argv: Command line arguments (defaults to sys.argv[1:])
        engine_factory: Builds the engine from DATABASE_URL

    Returns:
        Exit code (0 success, 1 store/database error, 2 not configured)
    """
    args = build_parser().parse_args(argv)
    settings = get_settings()
    if not settings.DATABASE_URL:
        print("DATABASE_URL is not configured")
        return EXIT_NOT_CONFIGURED

    engine = engine_factory(settings.DATABASE_URL)
    store = PasscodeStore(engine, settings.store_config(), dialect=settings.dialect)
    try:
        output = _run(args, store)
    except (PasscodeStoreError, SQLAlchemyError) as exc:
        error = _describe_error(exc)
        logger.error("passcode_cli_failed", command=args.command, error=error)
        print(json.dumps({"error": error}))
        return EXIT_STORE_ERROR
    finally:
        engine.dispose()

    print(json.dumps(output))
    return EXIT_OK
