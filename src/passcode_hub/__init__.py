"""
PasscodeHub - one-time passcode persistence.

Saves, loads and deletes short-lived passcodes against a relational store,
hiding placeholder, upsert and column-casing differences between database
dialects.
"""

__version__ = "0.1.0"
