"""Configuration management for PasscodeHub.

Usage:
    >>> from passcode_hub.config import get_settings
    >>> settings = get_settings()
    >>> settings.store_config().table_name
    'passcode'
"""

from passcode_hub.config.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
