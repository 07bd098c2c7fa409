"""
Non-owning registry of live mocks.

Backs the "clear/reset/restore every mock" conveniences.  Mocks are held
through weak references, so registering a mock never keeps it alive.
"""

from __future__ import annotations

import itertools
import weakref
from collections.abc import Iterator
from typing import TYPE_CHECKING

from ..core.logging import get_logger

if TYPE_CHECKING:
    from .function import MockFunction

logger = get_logger(__name__)


class MockRegistry:
    """Tracks mocks in creation order without owning them."""

    def __init__(self, name: str = "default") -> None:
        self.name = name
        self._mocks: weakref.WeakValueDictionary[int, MockFunction] = weakref.WeakValueDictionary()
        self._sequence = itertools.count()

    def register(self, mock: MockFunction) -> MockFunction:
        self._mocks[next(self._sequence)] = mock
        return mock

    def mocks(self) -> list[MockFunction]:
        """Live mocks, oldest first."""
        items = sorted(self._mocks.items())
        return [mock for _, mock in items]

    def clear_all_mocks(self) -> None:
        mocks = self.mocks()
        logger.debug("Clearing %d mock(s) in registry %s", len(mocks), self.name)
        for mock in mocks:
            mock.mock_clear()

    def reset_all_mocks(self) -> None:
        mocks = self.mocks()
        logger.debug("Resetting %d mock(s) in registry %s", len(mocks), self.name)
        for mock in mocks:
            mock.mock_reset()

    def restore_all_mocks(self) -> None:
        # Newest first so stacked spies unwind to the true original.
        mocks = self.mocks()
        logger.debug("Restoring %d mock(s) in registry %s", len(mocks), self.name)
        for mock in reversed(mocks):
            mock.mock_restore()

    def __iter__(self) -> Iterator[MockFunction]:
        return iter(self.mocks())

    def __len__(self) -> int:
        return len(self._mocks)

    def __contains__(self, mock: object) -> bool:
        return any(m is mock for m in self._mocks.values())


_default_registry = MockRegistry()


def get_default_registry() -> MockRegistry:
    return _default_registry


def clear_all_mocks() -> None:
    """``mock_clear()`` every mock in the default registry."""
    _default_registry.clear_all_mocks()


def reset_all_mocks() -> None:
    """``mock_reset()`` every mock in the default registry."""
    _default_registry.reset_all_mocks()


def restore_all_mocks() -> None:
    """``mock_restore()`` every mock in the default registry."""
    _default_registry.restore_all_mocks()
