"""
Pytest configuration and fixtures for mockfn tests.
"""

import os

import pytest
from hypothesis import Verbosity, settings

from mockfn import MockRegistry

pytest_plugins = ["pytester"]

# Configure hypothesis settings for property-based testing
settings.register_profile(
    "default",
    max_examples=100,
    verbosity=Verbosity.normal,
    deadline=None,
)

settings.register_profile(
    "ci",
    max_examples=200,
    verbosity=Verbosity.normal,
    deadline=None,
)

settings.register_profile(
    "dev",
    max_examples=10,
    verbosity=Verbosity.verbose,
    deadline=None,
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "default"))


@pytest.fixture
def registry():
    """Private registry so tests never sweep mocks they did not create."""
    reg = MockRegistry(name="test")
    yield reg
    reg.restore_all_mocks()


class Calculator:
    """Small class with one of each kind of attribute a spy can replace."""

    def __init__(self, base: int = 0):
        self.base = base

    def add(self, x: int) -> int:
        return self.base + x

    @staticmethod
    def double(x: int) -> int:
        return x * 2

    @classmethod
    def create(cls, base: int) -> "Calculator":
        return cls(base)

    @property
    def label(self) -> str:
        return f"calc({self.base})"

    @label.setter
    def label(self, value: str) -> None:
        self.base = int(value)


@pytest.fixture
def calculator_cls():
    """A fresh Calculator subclass per test so spies never leak between tests."""

    class IsolatedCalculator(Calculator):
        pass

    # Own copies: spies on these are written back on restore, not deleted.
    for name in ("add", "double", "create", "label"):
        setattr(IsolatedCalculator, name, Calculator.__dict__[name])
    return IsolatedCalculator
