"""Mock function runtime."""

from .behaviors import (
    BehaviorQueue,
    Delegate,
    Implementation,
    PendingBehavior,
    RejectedValue,
    ResolvedValue,
    ReturnThis,
    ReturnValue,
)
from .function import DEFAULT_MOCK_NAME, BoundMock, MockFunction, fn, is_mock_function
from .invocation import Invocation, InvocationShape, MockInstance
from .ledger import INCOMPLETE, Call, MockResult, MockState, ResultType
from .registry import (
    MockRegistry,
    clear_all_mocks,
    get_default_registry,
    reset_all_mocks,
    restore_all_mocks,
)
from .settled import SettledResult
from .spy import SpyBinding, spy_on

__all__ = [
    "BehaviorQueue",
    "BoundMock",
    "Call",
    "DEFAULT_MOCK_NAME",
    "Delegate",
    "INCOMPLETE",
    "Implementation",
    "Invocation",
    "InvocationShape",
    "MockFunction",
    "MockInstance",
    "MockRegistry",
    "MockResult",
    "MockState",
    "PendingBehavior",
    "RejectedValue",
    "ResolvedValue",
    "ResultType",
    "ReturnThis",
    "ReturnValue",
    "SettledResult",
    "SpyBinding",
    "clear_all_mocks",
    "fn",
    "get_default_registry",
    "is_mock_function",
    "reset_all_mocks",
    "restore_all_mocks",
    "spy_on",
]
