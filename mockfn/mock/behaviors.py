"""
Configured behaviors and their per-invocation resolution.

Every ``*_once`` configuration call appends to a single FIFO queue, whatever
its kind, so ordering across kinds is plain registration order.  Persistent
configuration calls replace one slot wholesale: the last writer wins.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable

from .invocation import Invocation
from .settled import SettledResult

if TYPE_CHECKING:
    from .spy import SpyBinding


class PendingBehavior:
    """Base class for anything the mock can do when invoked."""

    #: False for value kinds, which produce a result without running a body.
    runs_body: bool = False

    def run(self, invocation: Invocation) -> Any:
        raise NotImplementedError


@dataclass(frozen=True)
class Implementation(PendingBehavior):
    fn: Callable[..., Any]

    runs_body = True

    def run(self, invocation: Invocation) -> Any:
        return self.fn(*invocation.positional, **invocation.kwargs)


def _return_receiver(this: Any = None, *args: Any, **kwargs: Any) -> Any:
    return this


@dataclass(frozen=True)
class ReturnThis(Implementation):
    """Implementation that returns the receiver the mock was invoked on."""

    fn: Callable[..., Any] = _return_receiver

    def run(self, invocation: Invocation) -> Any:
        return invocation.receiver


@dataclass(frozen=True)
class ReturnValue(PendingBehavior):
    value: Any = None

    def run(self, invocation: Invocation) -> Any:
        return self.value


@dataclass(frozen=True)
class ResolvedValue(PendingBehavior):
    value: Any = None

    def run(self, invocation: Invocation) -> SettledResult:
        return SettledResult.fulfilled(self.value)


@dataclass(frozen=True)
class RejectedValue(PendingBehavior):
    value: Any = None

    def run(self, invocation: Invocation) -> SettledResult:
        return SettledResult.failed(self.value)


@dataclass(frozen=True)
class Delegate(PendingBehavior):
    """Forward to the original callable a spy replaced."""

    binding: SpyBinding

    runs_body = True

    def run(self, invocation: Invocation) -> Any:
        return self.binding.invoke(invocation)


DEFAULT_BEHAVIOR = ReturnValue(None)


class BehaviorQueue:
    """One-shot FIFO plus a single persistent slot."""

    def __init__(self, persistent: PendingBehavior | None = None) -> None:
        self._once: deque[PendingBehavior] = deque()
        self.persistent: PendingBehavior | None = persistent

    def push_once(self, behavior: PendingBehavior) -> None:
        self._once.append(behavior)

    def set_persistent(self, behavior: PendingBehavior | None) -> None:
        self.persistent = behavior

    def resolve(self, binding: SpyBinding | None = None) -> PendingBehavior:
        """
        Pick the behavior for one invocation.

        Precedence: queued one-shot (consumed), persistent slot, spy
        delegation, then the default of returning ``None``.
        """
        if self._once:
            return self._once.popleft()
        if self.persistent is not None:
            return self.persistent
        if binding is not None:
            return Delegate(binding)
        return DEFAULT_BEHAVIOR

    def clear(self) -> None:
        self._once.clear()
        self.persistent = None

    @property
    def pending(self) -> tuple[PendingBehavior, ...]:
        """Queued one-shot behaviors, head first."""
        return tuple(self._once)

    def __len__(self) -> int:
        return len(self._once)
