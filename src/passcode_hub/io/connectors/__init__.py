"""Database connection helpers."""

from .engine import create_store_engine

__all__ = ["create_store_engine"]
