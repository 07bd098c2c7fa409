"""
Core functionality for mockfn.
"""

from .config import MockConfig
from .exceptions import (
    ConfigurationError,
    MissingAttributeError,
    MockFnError,
    MockRejection,
    NotCallableError,
    SpyError,
    format_error_message,
)
from .logging import get_logger, setup_logging

__all__ = [
    "ConfigurationError",
    "MissingAttributeError",
    "MockConfig",
    "MockFnError",
    "MockRejection",
    "NotCallableError",
    "SpyError",
    "format_error_message",
    "get_logger",
    "setup_logging",
]
