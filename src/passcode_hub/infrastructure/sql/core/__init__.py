"""Core SQL utilities package."""

from .identifier import normalize_identifier
from .parameters import bind_parameters, build_indexed_params, build_param
from .types import Dialect

__all__ = [
    "Dialect",
    "normalize_identifier",
    "build_param",
    "build_indexed_params",
    "bind_parameters",
]
