"""Passcode domain: models, delivery contract and issue/verify flow."""

from .models import LoadResult, StoreConfig

__all__ = ["LoadResult", "StoreConfig"]
