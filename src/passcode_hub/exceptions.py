"""Errors raised by the passcode store.

Execution failures from the database are not wrapped: SQLAlchemy's
``DBAPIError`` reaches the caller unchanged.
"""

from typing import Any, Dict


class PasscodeStoreError(Exception):
    """Base class for passcode store errors."""


class UnsupportedDialectError(PasscodeStoreError):
    """Raised before any statement is sent when the driver is not supported."""

    def __init__(self, driver: str):
        self.driver = driver
        super().__init__(f"unsupported db vendor, current vendor is {driver}")

    def to_dict(self) -> Dict[str, str]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "UnsupportedDialectError",
            "driver": self.driver,
            "message": str(self),
        }


class PasscodeDecodeError(PasscodeStoreError):
    """Raised when a row value does not have the type its column requires."""

    def __init__(self, dialect: str, column: str, value: Any, expected: str):
        self.dialect = dialect
        self.column = column
        self.value_type = type(value).__name__
        self.expected = expected
        super().__init__(
            f"cannot decode column '{column}' for {dialect}: "
            f"expected {expected}, got {self.value_type}"
        )

    def to_dict(self) -> Dict[str, str]:
        """Convert to structured dict for logging."""
        return {
            "error_type": "PasscodeDecodeError",
            "dialect": self.dialect,
            "column": self.column,
            "value_type": self.value_type,
            "expected": self.expected,
            "message": str(self),
        }
