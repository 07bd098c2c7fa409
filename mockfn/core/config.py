"""
Configuration management for mockfn.

Example mockfn.yaml:
    clear_mocks: false
    reset_mocks: true
    restore_mocks: true
    log_level: DEBUG
    rich_logging: true
"""

import json
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .exceptions import ConfigurationError

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def parse_bool(value: Any, field_name: str) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
    raise ConfigurationError(f"Invalid boolean for '{field_name}': {value!r}")


@dataclass
class MockConfig:
    """Lifecycle switches applied between tests, plus logging preferences."""

    clear_mocks: bool = False  # mock_clear() every registered mock before each test
    reset_mocks: bool = False  # mock_reset() every registered mock before each test
    restore_mocks: bool = False  # mock_restore() every registered mock before each test
    log_level: str = "WARNING"
    rich_logging: bool = True

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> "MockConfig":
        """Build a config from a plain mapping, ignoring unknown keys."""
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration must be a mapping, got {type(data).__name__}"
            )

        valid_fields = {f.name for f in fields(cls)}
        filtered = {k: v for k, v in data.items() if k in valid_fields}

        for name in ("clear_mocks", "reset_mocks", "restore_mocks", "rich_logging"):
            if name in filtered:
                filtered[name] = parse_bool(filtered[name], name)
        if "log_level" in filtered:
            filtered["log_level"] = str(filtered["log_level"]).upper()

        return cls(**filtered)

    @classmethod
    def load_from_file(cls, config_path: Path) -> "MockConfig":
        """Load configuration from a YAML or JSON file."""
        config_path = Path(config_path)
        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        try:
            with open(config_path) as f:
                if config_path.suffix.lower() == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(f"Failed to load configuration: {e}") from e

        config = cls.from_dict(data)
        config.apply_env_overrides()
        return config

    def apply_env_overrides(self, environ: dict[str, str] | None = None) -> None:
        """Override fields from ``MOCKFN_*`` environment variables."""
        env = os.environ if environ is None else environ
        for name in ("clear_mocks", "reset_mocks", "restore_mocks", "rich_logging"):
            raw = env.get(f"MOCKFN_{name.upper()}")
            if raw is not None:
                setattr(self, name, parse_bool(raw, name))
        level = env.get("MOCKFN_LOG_LEVEL")
        if level:
            self.log_level = level.upper()

    def save_to_file(self, config_path: Path) -> None:
        """
        Save configuration to file.

        Args:
            config_path: Path to save the configuration file
        """
        config_path = Path(config_path)
        try:
            config_path.parent.mkdir(parents=True, exist_ok=True)
            data = asdict(self)
            with open(config_path, "w") as f:
                if config_path.suffix.lower() == ".json":
                    json.dump(data, f, indent=2)
                else:
                    yaml.dump(data, f, default_flow_style=False, indent=2)
        except OSError as e:
            raise ConfigurationError(f"Failed to save configuration: {e}") from e

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
