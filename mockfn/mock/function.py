"""
Mock functions: the call interceptor, behavior configuration and lifecycle.

Example::

    from mockfn import fn

    greet = fn(lambda name: f"hello {name}")
    greet.mock_return_value_once("hi")

    assert greet("ada") == "hi"
    assert greet("bob") == "hello bob"
    assert greet.calls == [(("ada",), {}), (("bob",), {})]
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable

from ..core.exceptions import MockFnError
from ..core.logging import get_logger
from .behaviors import (
    BehaviorQueue,
    Implementation,
    PendingBehavior,
    RejectedValue,
    ResolvedValue,
    ReturnThis,
    ReturnValue,
)
from .invocation import Invocation, InvocationShape
from .ledger import Call, MockResult, MockState
from .registry import MockRegistry, get_default_registry

if TYPE_CHECKING:
    from .spy import SpyBinding

logger = get_logger(__name__)

DEFAULT_MOCK_NAME = "mockfn()"


class MockFunction:
    """
    Callable proxy that records every invocation and substitutes configured
    behavior for (or in front of) a spied callable.

    Parameters:
        implementation: Optional persistent implementation.
        name:           Display name used in diagnostics.
        constructs:     Treat plain calls as construction, as when the mock
                        stands in for a class.
    """

    def __init__(
        self,
        implementation: Callable[..., Any] | None = None,
        *,
        name: str | None = None,
        constructs: bool = False,
    ) -> None:
        self._state = MockState()
        self._behaviors = BehaviorQueue(
            Implementation(implementation) if implementation is not None else None
        )
        self._name = name
        self._constructs = constructs
        self._spy: SpyBinding | None = None

    # ── Invocation ────────────────────────────────────────────────────

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        if self._constructs:
            return self._invoke(Invocation.construct(args, kwargs))
        return self._invoke(Invocation.plain(args, kwargs))

    def __get__(self, obj: Any, objtype: type | None = None) -> Any:
        if obj is None:
            return self
        return BoundMock(self, obj)

    def call_with(self, receiver: Any, *args: Any, **kwargs: Any) -> Any:
        """Invoke with an explicit receiver."""
        return self._invoke(Invocation.bound(receiver, args, kwargs))

    def bind(self, receiver: Any) -> BoundMock:
        """Return a callable that invokes this mock with ``receiver`` bound."""
        return BoundMock(self, receiver)

    def new(self, *args: Any, **kwargs: Any) -> Any:
        """Invoke in construct shape and return the constructed instance."""
        return self._invoke(Invocation.construct(args, kwargs))

    def _invoke(self, invocation: Invocation) -> Any:
        # Bind the ledger up front: a re-entrant mock_clear() swaps in a new
        # state, and this slot must still be finalized in the one it was reserved in.
        state = self._state
        handle = state.reserve(invocation.call, invocation.receiver)
        try:
            behavior = self._behaviors.resolve(self._spy)
            value = behavior.run(invocation)
        except BaseException as error:
            state.finalize(handle, MockResult.thrown(error))
            raise
        state.finalize(handle, MockResult.returned(value))

        if invocation.shape is InvocationShape.CONSTRUCT:
            value = invocation.constructed(value)
            state.record_constructed(value)
        return value

    # ── Ledger ────────────────────────────────────────────────────────

    @property
    def mock(self) -> MockState:
        return self._state

    @property
    def calls(self) -> list[Call]:
        return self._state.calls

    @property
    def results(self) -> list[MockResult]:
        return self._state.results

    @property
    def contexts(self) -> list[Any]:
        return self._state.contexts

    @property
    def instances(self) -> list[Any]:
        return self._state.instances

    @property
    def invocation_call_order(self) -> list[int]:
        return self._state.invocation_call_order

    @property
    def last_call(self) -> Call | None:
        return self._state.last_call

    @property
    def call_count(self) -> int:
        return len(self._state)

    def get_mock_name(self) -> str:
        return self._name or DEFAULT_MOCK_NAME

    def mock_name(self, name: str) -> MockFunction:
        self._name = name
        return self

    # ── Behavior configuration ────────────────────────────────────────

    def mock_implementation(self, implementation: Callable[..., Any]) -> MockFunction:
        return self._set(Implementation(implementation))

    def mock_implementation_once(self, implementation: Callable[..., Any]) -> MockFunction:
        return self._push(Implementation(implementation))

    def mock_return_value(self, value: Any) -> MockFunction:
        return self._set(ReturnValue(value))

    def mock_return_value_once(self, value: Any) -> MockFunction:
        return self._push(ReturnValue(value))

    def mock_resolved_value(self, value: Any) -> MockFunction:
        return self._set(ResolvedValue(value))

    def mock_resolved_value_once(self, value: Any) -> MockFunction:
        return self._push(ResolvedValue(value))

    def mock_rejected_value(self, value: Any) -> MockFunction:
        return self._set(RejectedValue(value))

    def mock_rejected_value_once(self, value: Any) -> MockFunction:
        return self._push(RejectedValue(value))

    def mock_return_this(self) -> MockFunction:
        return self._set(ReturnThis())

    def get_mock_implementation(self) -> Callable[..., Any] | None:
        """The persistent implementation, or ``None`` when the slot holds a value kind."""
        persistent = self._behaviors.persistent
        if isinstance(persistent, Implementation):
            return persistent.fn
        return None

    def with_implementation(self, implementation: Callable[..., Any]) -> TemporaryImplementation:
        """
        Use ``implementation`` for every call made inside a ``with`` block.

        Queued one-shot behaviors are suspended for the duration of the
        block and come back, together with the previous persistent
        behavior, when it exits.
        """
        return TemporaryImplementation(self, implementation)

    def _set(self, behavior: PendingBehavior) -> MockFunction:
        self._behaviors.set_persistent(behavior)
        return self

    def _push(self, behavior: PendingBehavior) -> MockFunction:
        self._behaviors.push_once(behavior)
        return self

    # ── Lifecycle ─────────────────────────────────────────────────────

    def mock_clear(self) -> MockFunction:
        """Forget recorded invocations; keep configured behavior."""
        self._state = MockState()
        return self

    def mock_reset(self) -> MockFunction:
        """Forget recorded invocations and configured behavior."""
        self.mock_clear()
        self._behaviors.clear()
        return self

    def mock_restore(self) -> MockFunction:
        """Reset, then put the original back if this mock is a spy."""
        self.mock_reset()
        if self._spy is not None and self._spy.restore():
            logger.debug("Restored %s", self._spy.describe())
        return self

    # ── Introspection ─────────────────────────────────────────────────

    @property
    def spy_binding(self) -> SpyBinding | None:
        return self._spy

    def _attach_spy(self, binding: SpyBinding) -> None:
        self._spy = binding

    def __repr__(self) -> str:
        return f"<MockFunction {self.get_mock_name()} calls={len(self._state)}>"


class BoundMock:
    """A mock bound to a receiver, the way a function becomes a bound method."""

    __slots__ = ("__func__", "__self__")

    def __init__(self, mock: MockFunction, receiver: Any) -> None:
        self.__func__ = mock
        self.__self__ = receiver

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        return self.__func__._invoke(Invocation.bound(self.__self__, args, kwargs))

    def __getattr__(self, name: str) -> Any:
        if name in BoundMock.__slots__:
            raise AttributeError(name)
        return getattr(self.__func__, name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BoundMock):
            return NotImplemented
        return self.__func__ is other.__func__ and self.__self__ is other.__self__

    def __hash__(self) -> int:
        return hash((id(self.__func__), id(self.__self__)))

    def __repr__(self) -> str:
        return f"<bound {self.__func__.get_mock_name()} of {self.__self__!r}>"


class TemporaryImplementation:
    """Context manager behind ``MockFunction.with_implementation``."""

    def __init__(self, mock: MockFunction, implementation: Callable[..., Any]) -> None:
        self._mock = mock
        self._implementation = implementation
        self._saved: tuple[PendingBehavior | None, tuple[PendingBehavior, ...]] | None = None

    def __enter__(self) -> MockFunction:
        behaviors = self._mock._behaviors
        self._saved = (behaviors.persistent, behaviors.pending)
        behaviors.clear()
        behaviors.set_persistent(Implementation(self._implementation))
        return self._mock

    def __exit__(self, *exc_info: Any) -> None:
        if self._saved is None:
            raise MockFnError("with_implementation block exited without being entered")
        persistent, pending = self._saved
        behaviors = self._mock._behaviors
        behaviors.clear()
        behaviors.set_persistent(persistent)
        for behavior in pending:
            behaviors.push_once(behavior)
        self._saved = None

    async def __aenter__(self) -> MockFunction:
        return self.__enter__()

    async def __aexit__(self, *exc_info: Any) -> None:
        self.__exit__(*exc_info)


def fn(
    implementation: Callable[..., Any] | None = None,
    *,
    name: str | None = None,
    constructs: bool = False,
    registry: MockRegistry | None = None,
) -> MockFunction:
    """
    Create a mock function.

    Args:
        implementation: Optional persistent implementation
        name: Display name for diagnostics
        constructs: Plain calls are recorded as construction
        registry: Registry to track the mock in (defaults to the global one)

    Returns:
        A new ``MockFunction`` with an empty ledger
    """
    mock = MockFunction(implementation, name=name, constructs=constructs)
    if registry is None:
        registry = get_default_registry()
    registry.register(mock)
    logger.debug("Created %r", mock)
    return mock


def is_mock_function(obj: Any) -> bool:
    return isinstance(obj, (MockFunction, BoundMock))
