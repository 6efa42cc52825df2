"""Command-line interface for PasscodeHub."""
