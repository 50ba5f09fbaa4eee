"""Shared utilities for generic value reading.

This module provides the configuration objects, exception types and logging
helpers used across the tokenization, tree and API layers.
"""

from .config import (
    ConfigError,
    ConfigValidationError,
    Feature,
    ReaderConfig,
)
from .errors import (
    DuplicateKeyError,
    JSONObjectError,
    NestingDepthError,
    TypeMismatchError,
    UnexpectedTokenError,
)
from .logging import (
    CorrelationLogger,
    configure_logging,
    get_logger,
)

__all__ = [
    "ConfigError",
    "ConfigValidationError",
    "Feature",
    "ReaderConfig",
    "DuplicateKeyError",
    "JSONObjectError",
    "NestingDepthError",
    "TypeMismatchError",
    "UnexpectedTokenError",
    "CorrelationLogger",
    "configure_logging",
    "get_logger",
]
