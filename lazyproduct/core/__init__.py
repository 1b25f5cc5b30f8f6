"""Core types, errors and configuration for lazyproduct."""

from lazyproduct.core.types import Record, Value
from lazyproduct.core.errors import ExhaustedError, ProductError, TypeMismatchError
from lazyproduct.core.config import MAX_ESTIMATE, ProductConfig, configure_logging

__all__ = [
    "Record",
    "Value",
    "ProductError",
    "TypeMismatchError",
    "ExhaustedError",
    "MAX_ESTIMATE",
    "ProductConfig",
    "configure_logging",
]
