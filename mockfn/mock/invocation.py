"""Invocation shapes captured at the call boundary."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from .ledger import Call

_PRIMITIVES = (type(None), bool, int, float, complex, str, bytes)


class InvocationShape(Enum):
    PLAIN = "plain"
    BOUND = "bound"
    CONSTRUCT = "construct"


class MockInstance:
    """Default object allocated for construct-shaped invocations."""

    def __repr__(self) -> str:
        attrs = ", ".join(f"{k}={v!r}" for k, v in vars(self).items())
        return f"MockInstance({attrs})"


@dataclass(slots=True)
class Invocation:
    """One call into a mock: its shape, arguments and receiver."""

    shape: InvocationShape
    args: tuple[Any, ...] = ()
    kwargs: dict[str, Any] = field(default_factory=dict)
    receiver: Any = None

    @classmethod
    def plain(cls, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Invocation:
        return cls(InvocationShape.PLAIN, args, kwargs)

    @classmethod
    def bound(cls, receiver: Any, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Invocation:
        return cls(InvocationShape.BOUND, args, kwargs, receiver)

    @classmethod
    def construct(cls, args: tuple[Any, ...], kwargs: dict[str, Any]) -> Invocation:
        return cls(InvocationShape.CONSTRUCT, args, kwargs, MockInstance())

    @property
    def call(self) -> Call:
        return Call(self.args, dict(self.kwargs))

    @property
    def positional(self) -> tuple[Any, ...]:
        """Arguments as passed to a body: receiver first when one is bound."""
        if self.shape is InvocationShape.PLAIN:
            return self.args
        return (self.receiver, *self.args)

    def constructed(self, value: Any) -> Any:
        """The instance a construct call produces, given the body's return value."""
        if isinstance(value, _PRIMITIVES):
            return self.receiver
        return value
