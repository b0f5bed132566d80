"""Build configuration loaded from YAML and the environment."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping

import yaml


class ConfigError(ValueError):
    """Raised when a configuration value cannot be used."""


@dataclass
class BuildConfig:
    """Tunables for a single build invocation."""

    max_workers: int = 8  # concurrent dependency probes
    log_file: str | None = None
    debug: bool = False

    def validate(self) -> None:
        if not isinstance(self.max_workers, int) or isinstance(self.max_workers, bool):
            raise ConfigError(f"max_workers must be an integer, got {self.max_workers!r}")
        if self.max_workers < 1:
            raise ConfigError(f"max_workers must be at least 1, got {self.max_workers}")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary."""
        return {
            "max_workers": self.max_workers,
            "log_file": self.log_file,
            "debug": self.debug,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "BuildConfig":
        """Create from dictionary."""
        unknown = set(data) - {"max_workers", "log_file", "debug"}
        if unknown:
            raise ConfigError(f"Unknown configuration keys: {sorted(unknown)}")

        config = cls(
            max_workers=data.get("max_workers", 8),
            log_file=data.get("log_file"),
            debug=_parse_bool(data.get("debug", False)),
        )
        config.validate()
        return config


_TRUE = ("1", "true", "yes", "on")
_FALSE = ("0", "false", "no", "off", "")


def _parse_bool(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        text = value.strip().lower()
        if text in _TRUE:
            return True
        if text in _FALSE:
            return False
    raise ConfigError(f"Expected a boolean, got {value!r}")


def apply_environment(config: BuildConfig, environ: Mapping[str, str] | None = None) -> BuildConfig:
    """Override configuration from ``BP_*`` environment variables."""
    env = os.environ if environ is None else environ

    if "BP_SCAN_WORKERS" in env:
        try:
            config.max_workers = int(env["BP_SCAN_WORKERS"])
        except ValueError:
            raise ConfigError(f"BP_SCAN_WORKERS must be an integer, got {env['BP_SCAN_WORKERS']!r}") from None
    if "BP_DEBUG" in env:
        config.debug = _parse_bool(env["BP_DEBUG"])

    config.validate()
    return config


def load_config(
    path: str | Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> BuildConfig:
    """Load configuration from an optional YAML file, then the environment."""
    if path is None:
        config = BuildConfig()
    else:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration in {path} must be a mapping")
        config = BuildConfig.from_dict(data)

    return apply_environment(config, environ)
