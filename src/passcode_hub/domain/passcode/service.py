"""
Passcode issuing and verification flow.

The store only persists; expiry is advisory metadata that this flow checks.
Passcode generation is left to the caller.
"""

import hmac
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from passcode_hub.domain.passcode.sender import PasscodeSender
from passcode_hub.io.repositories.passcode_repository import PasscodeStore
from passcode_hub.utils.logging import get_logger

logger = get_logger(__name__)


def _comparable_now(now: Optional[datetime], expires_at: datetime) -> datetime:
    """Current UTC time, naive when the stored timestamp is naive."""
    if now is None:
        now = datetime.now(timezone.utc)
    if expires_at.tzinfo is None and now.tzinfo is not None:
        return now.astimezone(timezone.utc).replace(tzinfo=None)
    if expires_at.tzinfo is not None and now.tzinfo is None:
        return now.replace(tzinfo=timezone.utc)
    return now


class PasscodeService:
    """
    Issue passcodes and verify submitted ones.

    Usage:
        service = PasscodeService(store, sender)
        service.issue("user-42", "user@example.com", "839201", expires_at)
        ok = service.verify("user-42", "839201")
    """

    def __init__(self, store: PasscodeStore, sender: PasscodeSender):
        self.store = store
        self.sender = sender

    def issue(
        self,
        subject_id: str,
        destination: str,
        code: str,
        expires_at: datetime,
        params: Optional[Mapping[str, Any]] = None,
    ) -> int:
        """
        Save a passcode, then hand it to the sender.

        The sender is only called once the save succeeded. Errors from
        either side propagate.

        Returns:
            Rows affected by the save
        """
        rows = self.store.save(subject_id, code, expires_at)
        self.sender.send(destination, code, expires_at, params)
        logger.info("passcode_issued", subject_id=subject_id, destination=destination)
        return rows

    def verify(
        self, subject_id: str, code: str, now: Optional[datetime] = None
    ) -> bool:
        """
        Check a submitted passcode.

        A matching, unexpired passcode is consumed. Expired passcodes are
        removed; a mismatch leaves the stored passcode in place.
        """
        result = self.store.load(subject_id)
        if not result.found:
            logger.info("passcode_verify_failed", subject_id=subject_id, reason="missing")
            return False

        if result.expires_at <= _comparable_now(now, result.expires_at):
            self.store.delete(subject_id)
            logger.info("passcode_verify_failed", subject_id=subject_id, reason="expired")
            return False

        if not hmac.compare_digest(result.code.encode(), code.strip().encode()):
            logger.info("passcode_verify_failed", subject_id=subject_id, reason="mismatch")
            return False

        self.store.delete(subject_id)
        logger.info("passcode_verified", subject_id=subject_id)
        return True
