"""Repositories backed by a relational store."""

from .passcode_repository import PasscodeStore

__all__ = ["PasscodeStore"]
