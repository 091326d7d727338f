"""Configuration loading for the window providers."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

import yaml

from core.errors import ConfigurationError

CONFIG_ENV_VAR = "WINSPECTOR_CONFIG"
DEFAULT_CONFIG_PATH = Path(__file__).resolve().with_name("defaults.yaml")


def load_yaml(path: Path) -> dict[str, Any]:
    """Load YAML from file, returning empty mapping when missing."""
    if not path.exists():
        return {}
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except (OSError, yaml.YAMLError) as exc:
        raise ConfigurationError(f"Unable to read config file {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"Config file must contain a mapping: {path}")
    return data


def merge_dicts(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Recursively merge dictionaries."""
    merged: dict[str, Any] = dict(base)
    for key, value in override.items():
        if key in merged and isinstance(merged[key], dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged


def load_effective_config(override_path: Path | None = None) -> dict[str, Any]:
    """Merge packaged defaults with an optional user override file.

    The override comes from ``override_path`` or, when not given, the
    ``WINSPECTOR_CONFIG`` environment variable.
    """
    config = load_yaml(DEFAULT_CONFIG_PATH)
    if override_path is None:
        env_path = os.environ.get(CONFIG_ENV_VAR)
        override_path = Path(env_path).expanduser() if env_path else None
    if override_path is None:
        return config
    if not override_path.exists():
        raise ConfigurationError(
            f"Config file not found: {override_path} (set via {CONFIG_ENV_VAR} or --config)"
        )
    return merge_dicts(config, load_yaml(override_path))


def section(config: dict[str, Any] | None, name: str) -> dict[str, Any]:
    """Return one provider section, empty when absent."""
    value = (config or {}).get(name, {})
    return dict(value) if isinstance(value, dict) else {}


def timeout(config: dict[str, Any] | None, key: str, default: float = 2.0) -> float:
    timeouts = section(config, "timeouts")
    return float(timeouts.get(key, default))
