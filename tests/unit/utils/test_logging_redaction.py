"""Unit tests for log sanitization."""

from passcode_hub.utils.logging import (
    REDACTED_VALUE,
    sanitization_processor,
    sanitize_for_logging,
)


class TestSanitizeForLogging:
    def test_redacts_passcodes(self):
        """Passcode fields are redacted."""
        result = sanitize_for_logging(
            {"code": "839201", "passcode": "839201", "subject_id": "user-42"}
        )
        assert result == {
            "code": REDACTED_VALUE,
            "passcode": REDACTED_VALUE,
            "subject_id": "user-42",
        }

    def test_redacts_credentials(self):
        """Credentials and connection URLs are redacted."""
        result = sanitize_for_logging({"DATABASE_URL": "mysql://u:p@h/db", "db_password": "x"})
        assert set(result.values()) == {REDACTED_VALUE}

    def test_nested(self):
        """Nested mappings are redacted too."""
        result = sanitize_for_logging({"params": {"api_key": "k", "lang": "en"}})
        assert result == {"params": {"api_key": REDACTED_VALUE, "lang": "en"}}

    def test_column_names_are_not_secrets(self):
        """Keys that only mention a secret word are kept."""
        assert sanitize_for_logging({"code_column": "passcode"}) == {
            "code_column": "passcode"
        }


def test_processor_keeps_event():
    """The processor redacts fields and keeps the event name."""
    event = {"event": "passcode_saved", "code": "839201"}
    assert sanitization_processor(None, "info", event) == {
        "event": "passcode_saved",
        "code": REDACTED_VALUE,
    }
