"""
Spies: mocks installed over an existing attribute.

Until a behavior is configured, a spy delegates every call to the original
while recording it like any other invocation.  ``mock_restore()`` puts the
original attribute back.

Example::

    import os.path
    from mockfn import spy_on

    spy = spy_on(os.path, "exists")
    os.path.exists("/tmp")          # real result, recorded
    spy.mock_return_value(False)
    assert os.path.exists("/tmp") is False
    spy.mock_restore()
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from typing import Any, Callable, Literal

from ..core.exceptions import MissingAttributeError, NotCallableError, SpyError
from ..core.logging import get_logger
from .function import MockFunction, is_mock_function
from .invocation import Invocation
from .registry import MockRegistry, get_default_registry

logger = get_logger(__name__)

AccessKind = Literal["get", "set"]

_MISSING = object()


@dataclass
class SpyBinding:
    """Where a spy is installed and what it replaced."""

    owner: Any
    name: str
    original: Any  # attribute as stored on the owner, written back on restore
    target: Callable[..., Any]  # callable the spy delegates to
    binds_receiver: bool = False  # target expects the receiver as first argument
    owned: bool = True  # False when the original was inherited rather than set on owner
    restored: bool = False
    access: str | None = None  # property accessor replaced, for property spies

    def invoke(self, invocation: Invocation) -> Any:
        if self.binds_receiver:
            return self.target(*invocation.positional, **invocation.kwargs)
        return self.target(*invocation.args, **invocation.kwargs)

    def restore(self) -> bool:
        """Write the original back; returns False if already restored."""
        if self.restored:
            return False
        merged = self._merged_property() if self.access is not None else None
        if merged is not None:
            setattr(self.owner, self.name, merged)
        elif self.owned:
            setattr(self.owner, self.name, self.original)
        else:
            delattr(self.owner, self.name)
        self.restored = True
        return True

    def _merged_property(self) -> property | None:
        """
        The property with only this spy's accessor put back.

        The other accessor is taken from the installed property, so a spy on
        it that is still active survives.  Returns None when that yields the
        original property.
        """
        current = vars(self.owner).get(self.name)
        if not isinstance(current, property):
            return None
        if self.access == "get":
            fget, fset = self.original.fget, current.fset
        else:
            fget, fset = current.fget, self.original.fset
        if fget is self.original.fget and fset is self.original.fset:
            return None
        return property(fget, fset, self.original.fdel, self.original.__doc__)

    def describe(self) -> str:
        owner = getattr(self.owner, "__name__", type(self.owner).__name__)
        return f"{owner}.{self.name}"


def _owns(owner: Any, name: str) -> bool:
    try:
        return name in vars(owner)
    except TypeError:
        # No __dict__ (slots or builtins): assume the attribute lives on it.
        return True


def _copy_identity(mock: MockFunction, target: Any) -> None:
    for attr in ("__name__", "__qualname__", "__doc__"):
        value = getattr(target, attr, None)
        if value is not None:
            setattr(mock, attr, value)


def spy_on(
    owner: Any,
    name: str,
    access: AccessKind | None = None,
    *,
    registry: MockRegistry | None = None,
) -> MockFunction:
    """
    Replace ``owner.name`` with a recording mock that calls through.

    Args:
        owner: Module, class or instance holding the attribute
        name: Attribute name
        access: ``"get"`` or ``"set"`` to spy on a property accessor
        registry: Registry to track the spy in (defaults to the global one)

    Returns:
        The installed mock, or the existing one if ``owner.name`` is already a mock

    Raises:
        SpyError: If the attribute cannot be spied on
    """
    if owner is None:
        raise SpyError(f"Cannot spy on `{name}` of None")
    if access is not None:
        return _spy_on_property(owner, name, access, registry)

    raw = inspect.getattr_static(owner, name, _MISSING)
    if raw is _MISSING:
        raise MissingAttributeError(name)
    if is_mock_function(raw):
        return raw
    if isinstance(raw, staticmethod) and is_mock_function(raw.__func__):
        return raw.__func__

    owned = _owns(owner, name)
    on_class = isinstance(owner, type)
    if on_class and inspect.isfunction(raw):
        binding = SpyBinding(owner, name, raw, raw, binds_receiver=True, owned=owned)
        mock = MockFunction()
        installed: Any = mock
    else:
        target = getattr(owner, name)
        if not callable(target):
            raise NotCallableError(name, target)
        binding = SpyBinding(owner, name, raw, target, owned=owned)
        mock = MockFunction(constructs=isinstance(target, type))
        # Only plain functions on a class are bound on instance access.
        installed = staticmethod(mock) if on_class else mock

    _copy_identity(mock, binding.target)
    mock._attach_spy(binding)
    setattr(owner, name, installed)
    if registry is None:
        registry = get_default_registry()
    registry.register(mock)
    logger.debug("Spying on %s", binding.describe())
    return mock


def _spy_on_property(
    owner: Any,
    name: str,
    access: str,
    registry: MockRegistry | None,
) -> MockFunction:
    if access not in ("get", "set"):
        raise SpyError(f"Unknown access kind {access!r} for `{name}`; use 'get' or 'set'", name)

    cls = owner if isinstance(owner, type) else type(owner)
    raw = inspect.getattr_static(cls, name, _MISSING)
    if raw is _MISSING:
        raise MissingAttributeError(name)
    if not isinstance(raw, property):
        raise SpyError(f"`{name}` is not declared as a property; cannot spy on its {access}ter", name)

    accessor = raw.fget if access == "get" else raw.fset
    if accessor is None:
        raise SpyError(f"Property `{name}` does not have a {access}ter", name)
    existing = getattr(accessor, "mock", None)
    if is_mock_function(existing):
        return existing

    mock = MockFunction()
    binding = SpyBinding(
        cls, name, raw, accessor, binds_receiver=True, owned=_owns(cls, name), access=access
    )
    _copy_identity(mock, accessor)
    mock._attach_spy(binding)

    if access == "get":
        def spied_get(obj: Any) -> Any:
            return mock.call_with(obj)

        spied_get.mock = mock  # type: ignore[attr-defined]
        installed = property(spied_get, raw.fset, raw.fdel, raw.__doc__)
    else:
        def spied_set(obj: Any, value: Any) -> None:
            mock.call_with(obj, value)

        spied_set.mock = mock  # type: ignore[attr-defined]
        installed = property(raw.fget, spied_set, raw.fdel, raw.__doc__)

    setattr(cls, name, installed)
    if registry is None:
        registry = get_default_registry()
    registry.register(mock)
    logger.debug("Spying on %s (%s)", binding.describe(), access)
    return mock
