"""
Delivery collaborator contract.

Sending (email, SMS, ...) happens outside this package. Implementations
raise on failure; retries and idempotency are their concern.
"""

from datetime import datetime
from typing import Any, Mapping, Optional, Protocol

from passcode_hub.utils.logging import get_logger

logger = get_logger(__name__)


class PasscodeSender(Protocol):
    def send(
        self,
        destination: str,
        code: str,
        expires_at: datetime,
        params: Optional[Mapping[str, Any]] = None,
    ) -> None: ...


class LoggingPasscodeSender:
    """Sender for local runs: records the delivery request, never the code."""

    def send(
        self,
        destination: str,
        code: str,
        expires_at: datetime,
        params: Optional[Mapping[str, Any]] = None,
    ) -> None:
        logger.info(
            "passcode_delivery_requested",
            destination=destination,
            expires_at=expires_at.isoformat(),
            params=dict(params or {}),
        )
