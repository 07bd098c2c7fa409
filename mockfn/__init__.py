"""
mockfn - recording mock and spy functions.

Example:
    from mockfn import fn, spy_on

    fetch = fn().mock_resolved_value({"ok": True})
    assert (await fetch("/health")) == {"ok": True}
    assert fetch.calls[0].args == ("/health",)
"""

from .core import (
    ConfigurationError,
    MockConfig,
    MockFnError,
    MockRejection,
    SpyError,
    get_logger,
    setup_logging,
)
from .mock import (
    Call,
    MockFunction,
    MockRegistry,
    MockResult,
    ResultType,
    SettledResult,
    clear_all_mocks,
    fn,
    get_default_registry,
    is_mock_function,
    reset_all_mocks,
    restore_all_mocks,
    spy_on,
)

__version__ = "0.1.0"

__all__ = [
    "Call",
    "ConfigurationError",
    "MockConfig",
    "MockFnError",
    "MockFunction",
    "MockRegistry",
    "MockRejection",
    "MockResult",
    "ResultType",
    "SettledResult",
    "SpyError",
    "__version__",
    "clear_all_mocks",
    "fn",
    "get_default_registry",
    "get_logger",
    "is_mock_function",
    "reset_all_mocks",
    "restore_all_mocks",
    "setup_logging",
    "spy_on",
]
