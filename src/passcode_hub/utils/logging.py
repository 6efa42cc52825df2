"""Structured logging framework using structlog.

This module provides centralized logging configuration with:
- ISO-8601 timestamps
- JSON rendering for structured logs
- Automatic redaction of credentials and passcodes
- Optional file output next to stdout

Configuration:
- LOG_LEVEL: DEBUG, INFO, WARNING, ERROR, CRITICAL. Default: INFO
- LOG_TO_FILE: Enable file logging (1, true, yes). Default: disabled
- LOG_FILE_DIR: Directory for log files. Default: logs/

Usage:
    >>> from passcode_hub.utils.logging import get_logger
    >>> logger = get_logger(__name__)
    >>> logger.info("passcode_saved", subject_id="user-42")
"""

import logging
import os
import re
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any, Dict, MutableMapping

import structlog
from pydantic import ValidationError
from structlog.types import EventDict, Processor

from passcode_hub.config import get_settings

SENSITIVE_PATTERNS = [
    re.compile(r".*password.*", re.IGNORECASE),
    re.compile(r".*passcode.*", re.IGNORECASE),
    re.compile(r"^code$", re.IGNORECASE),
    re.compile(r".*token.*", re.IGNORECASE),
    re.compile(r".*api_key.*", re.IGNORECASE),
    re.compile(r".*secret.*", re.IGNORECASE),
    re.compile(r"^DATABASE_URL$", re.IGNORECASE),
]

REDACTED_VALUE = "[REDACTED]"


def sanitize_for_logging(data: Dict[str, Any]) -> Dict[str, Any]:
    """Redact sensitive values from a dictionary before logging.

    Example:
        >>> sanitize_for_logging({"code": "839201", "subject_id": "user-42"})
        {'code': '[REDACTED]', 'subject_id': 'user-42'}
    """
    sanitized: Dict[str, Any] = {}
    for key, value in data.items():
        if any(pattern.match(key) for pattern in SENSITIVE_PATTERNS):
            sanitized[key] = REDACTED_VALUE
        elif isinstance(value, dict):
            sanitized[key] = sanitize_for_logging(value)
        else:
            sanitized[key] = value
    return sanitized


def sanitization_processor(
    logger: logging.Logger, method_name: str, event_dict: EventDict
) -> MutableMapping[str, Any]:
    """Structlog processor that redacts sensitive fields in event_dict."""
    return sanitize_for_logging(dict(event_dict))


def _get_log_level() -> int:
    try:
        level_name = get_settings().LOG_LEVEL
    except ValidationError:
        # A broken .env must not take logging down with it
        level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    return getattr(logging, level_name, logging.INFO)


def _should_log_to_file() -> bool:
    return os.getenv("LOG_TO_FILE", "").lower() in ("1", "true", "yes")


def _get_log_file_path() -> Path:
    log_dir = Path(os.getenv("LOG_FILE_DIR", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    # Format: passcodehub-YYYYMMDD.log
    date_str = datetime.now().strftime("%Y%m%d")
    return log_dir / f"passcodehub-{date_str}.log"


def _configure_structlog() -> None:
    """Configure structlog with JSON rendering and sanitization."""
    level = _get_log_level()
    logging.basicConfig(format="%(message)s", level=level, handlers=[])

    stdout_handler = logging.StreamHandler()
    stdout_handler.setLevel(level)
    logging.root.addHandler(stdout_handler)

    if _should_log_to_file():
        file_handler = TimedRotatingFileHandler(
            filename=str(_get_log_file_path()),
            when="midnight",
            interval=1,
            backupCount=30,
            encoding="utf-8",
        )
        file_handler.setLevel(level)
        logging.root.addHandler(file_handler)

    processors: list[Processor] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        sanitization_processor,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.JSONRenderer(),
    ]

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


# Configure structlog on module import
_configure_structlog()


def get_logger(name: str) -> Any:
    """Get a structlog BoundLogger instance.

    Args:
        name: Logger name (typically __name__ of the calling module)
    """
    return structlog.get_logger(name)


def bind_context(**kwargs: Any) -> Any:
    """Create a logger with bound context fields.

    Example:
        >>> logger = bind_context(subject_id="user-42", dialect="mysql")
        >>> logger.debug("passcode_loaded", found=True)
    """
    return structlog.get_logger().bind(**kwargs)
