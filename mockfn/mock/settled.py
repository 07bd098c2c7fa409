"""
Already-settled awaitables for resolved/rejected mock values.

``SettledResult`` is returned synchronously by the mock and recorded as a
normal return.  Whether it succeeded or failed is only observed by the code
that awaits it.

Example::

    mock = fn().mock_resolved_value_once("first").mock_rejected_value_once(ValueError("no"))
    assert await mock() == "first"
    with pytest.raises(ValueError):
        await mock()
"""

from __future__ import annotations

from collections.abc import Generator
from typing import Any

from ..core.exceptions import MockRejection


class SettledResult:
    """An awaitable that is fulfilled or failed before anyone awaits it."""

    __slots__ = ("_value", "_error")

    def __init__(self, value: Any = None, error: BaseException | None = None) -> None:
        self._value = value
        self._error = error

    @classmethod
    def fulfilled(cls, value: Any) -> SettledResult:
        return cls(value=value)

    @classmethod
    def failed(cls, reason: Any) -> SettledResult:
        if not isinstance(reason, BaseException):
            reason = MockRejection(reason)
        return cls(error=reason)

    def done(self) -> bool:
        return True

    def result(self) -> Any:
        """Return the fulfilled value, or raise the failure."""
        if self._error is not None:
            raise self._error
        return self._value

    def exception(self) -> BaseException | None:
        return self._error

    async def _settle(self) -> Any:
        return self.result()

    def __await__(self) -> Generator[Any, None, Any]:
        return self._settle().__await__()

    def __repr__(self) -> str:
        if self._error is not None:
            return f"<SettledResult failed {self._error!r}>"
        return f"<SettledResult fulfilled {self._value!r}>"
