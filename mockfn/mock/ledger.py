"""
Per-mock invocation ledger.

``calls``, ``results`` and ``contexts`` are index-aligned: a slot is reserved
in all three when an invocation starts and the result is overwritten in
place once it completes.  ``instances`` only grows for construct-shaped
invocations.
"""

from __future__ import annotations

import itertools
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, NamedTuple

# Shared across every mock so call order can be compared between mocks.
_invocation_counter = itertools.count(1)


class Call(NamedTuple):
    """Arguments of one invocation."""

    args: tuple[Any, ...]
    kwargs: dict[str, Any]


class ResultType(Enum):
    RETURN = "return"
    THROW = "throw"
    INCOMPLETE = "incomplete"


@dataclass(frozen=True, slots=True)
class MockResult:
    """Recorded outcome of one invocation."""

    type: ResultType
    value: Any = None

    @classmethod
    def returned(cls, value: Any) -> MockResult:
        return cls(ResultType.RETURN, value)

    @classmethod
    def thrown(cls, error: BaseException) -> MockResult:
        return cls(ResultType.THROW, error)

    @property
    def is_incomplete(self) -> bool:
        return self.type is ResultType.INCOMPLETE


INCOMPLETE = MockResult(ResultType.INCOMPLETE)


@dataclass(slots=True)
class MockState:
    """
    Ledger of everything observable about a mock's invocations.

    Holders of these lists see live state; ``mock_clear()`` swaps in a new
    ``MockState`` so previously read lists keep their old contents.
    """

    calls: list[Call] = field(default_factory=list)
    results: list[MockResult] = field(default_factory=list)
    contexts: list[Any] = field(default_factory=list)
    instances: list[Any] = field(default_factory=list)
    invocation_call_order: list[int] = field(default_factory=list)

    @property
    def last_call(self) -> Call | None:
        return self.calls[-1] if self.calls else None

    def reserve(self, call: Call, receiver: Any) -> int:
        """Append a pending slot and return its handle."""
        handle = len(self.calls)
        self.calls.append(call)
        self.contexts.append(receiver)
        self.results.append(INCOMPLETE)
        self.invocation_call_order.append(next(_invocation_counter))
        return handle

    def finalize(self, handle: int, result: MockResult) -> None:
        self.results[handle] = result

    def record_constructed(self, instance: Any) -> None:
        self.instances.append(instance)

    def __len__(self) -> int:
        return len(self.calls)
