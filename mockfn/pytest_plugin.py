"""
pytest integration for mockfn.

ini options (``pytest.ini`` / ``pyproject.toml``)::

    [tool.pytest.ini_options]
    mockfn_config = "mockfn.yaml"   # optional YAML/JSON MockConfig
    mockfn_reset_mocks = "true"     # overrides the file

Before each test the default registry is cleared, reset and/or restored
according to the resolved ``MockConfig``.
"""

from pathlib import Path
from typing import Any, Callable, Iterator

import pytest

from .core.config import MockConfig, parse_bool
from .core.logging import get_logger, setup_logging
from .mock.function import MockFunction, fn
from .mock.registry import MockRegistry, get_default_registry
from .mock.spy import spy_on

logger = get_logger(__name__)

_config_key = pytest.StashKey[MockConfig]()

_FLAG_OPTIONS = ("clear_mocks", "reset_mocks", "restore_mocks")


def pytest_addoption(parser: pytest.Parser) -> None:
    parser.addini("mockfn_config", "Path to a mockfn YAML or JSON config file", default="")
    for name in _FLAG_OPTIONS:
        parser.addini(
            f"mockfn_{name}",
            f"Apply {name.replace('_mocks', '')} to every registered mock before each test",
            default="",
        )
    parser.addini("mockfn_log_level", "Log level for mockfn loggers", default="")


def resolve_config(config: pytest.Config) -> MockConfig:
    """Build the ``MockConfig`` for a session from the config file and ini options."""
    path = config.getini("mockfn_config")
    if path:
        config_path = Path(path)
        if not config_path.is_absolute():
            config_path = config.rootpath / config_path
        mock_config = MockConfig.load_from_file(config_path)
    else:
        mock_config = MockConfig()
        mock_config.apply_env_overrides()

    for name in _FLAG_OPTIONS:
        raw = config.getini(f"mockfn_{name}")
        if raw:
            setattr(mock_config, name, parse_bool(raw, name))
    level = config.getini("mockfn_log_level")
    if level:
        mock_config.log_level = level.upper()
    return mock_config


def pytest_configure(config: pytest.Config) -> None:
    mock_config = resolve_config(config)
    config.stash[_config_key] = mock_config
    logger.debug("Resolved mock config: %s", mock_config)
    if config.getini("mockfn_config") or config.getini("mockfn_log_level"):
        setup_logging(mock_config.log_level, rich=mock_config.rich_logging)


@pytest.hookimpl(tryfirst=True)
def pytest_runtest_setup(item: pytest.Item) -> None:
    mock_config = item.config.stash.get(_config_key, None)
    if mock_config is None:
        return
    registry = get_default_registry()
    if mock_config.clear_mocks:
        registry.clear_all_mocks()
    if mock_config.reset_mocks:
        registry.reset_all_mocks()
    if mock_config.restore_mocks:
        registry.restore_all_mocks()


@pytest.fixture
def mock_registry() -> Iterator[MockRegistry]:
    """A private registry whose mocks are restored when the test ends."""
    registry = MockRegistry(name="fixture")
    yield registry
    registry.restore_all_mocks()


@pytest.fixture
def mock_fn(mock_registry: MockRegistry) -> Callable[..., MockFunction]:
    """Factory like ``mockfn.fn`` that tracks mocks in ``mock_registry``."""

    def factory(implementation: Callable[..., Any] | None = None, **kwargs: Any) -> MockFunction:
        return fn(implementation, registry=mock_registry, **kwargs)

    return factory


@pytest.fixture
def spy(mock_registry: MockRegistry) -> Callable[..., MockFunction]:
    """``spy_on`` whose spies are restored when the test ends."""

    def factory(owner: Any, name: str, access: str | None = None) -> MockFunction:
        return spy_on(owner, name, access, registry=mock_registry)  # type: ignore[arg-type]

    return factory
