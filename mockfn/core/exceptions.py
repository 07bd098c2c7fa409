"""
Custom exceptions for mockfn.

Provides specific exception types for better error handling and user feedback.
"""

from typing import Any


class MockFnError(Exception):
    """Base exception for mockfn errors."""


class ConfigurationError(MockFnError):
    """Error in configuration."""


class SpyError(MockFnError):
    """A spy could not be installed on the requested attribute."""

    def __init__(self, message: str, name: str | None = None):
        super().__init__(message)
        self.name = name
        self.user_message = message
        self.recovery_hint = "Spy on a callable attribute that exists on the owner object."


class MissingAttributeError(SpyError):
    """The attribute to spy on does not exist."""

    def __init__(self, name: str):
        super().__init__(f"Property `{name}` does not exist in the provided object", name)
        self.recovery_hint = "Check the attribute name, or assign a function to it first."


class NotCallableError(SpyError):
    """The attribute to spy on is not a function."""

    def __init__(self, name: str, value: Any):
        super().__init__(
            f"Cannot spy the `{name}` property because it is not a function; "
            f"{type(value).__name__} given instead",
            name,
        )
        self.recovery_hint = "Use access='get' or access='set' to spy on a property."


class MockRejection(Exception):
    """
    Raised when awaiting a rejected value that is not itself an exception.

    The rejected value is available as ``value``.
    """

    def __init__(self, value: Any):
        super().__init__(f"Mock rejected with {value!r}")
        self.value = value


def format_error_message(error: Exception) -> str:
    """
    Format an error message for display to user.

    Args:
        error: Exception to format

    Returns:
        Formatted error message with recovery hints
    """
    if isinstance(error, MockFnError) and hasattr(error, "user_message"):
        message = error.user_message
        if hasattr(error, "recovery_hint"):
            message += f"\n\nHint: {error.recovery_hint}"
        return message
    return str(error)
