"""Configuration loading for scaffold (.scaffold.yml)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

CONFIG_FILENAME = ".scaffold.yml"
DEFAULT_TESTS_DIR = "__tests__"
DEFAULT_SPY_HELPER = "test/safe_spy"


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class ScaffoldConfig:
    """Represents the settings defined in .scaffold.yml."""

    tests_dir: str = DEFAULT_TESTS_DIR
    spy_helper: str = DEFAULT_SPY_HELPER
    extension: Optional[str] = None


def load_config(config_path: Path) -> ScaffoldConfig:
    """Load configuration from disk, falling back to defaults when absent."""
    config_file = _resolve_config_path(config_path)

    if not config_file.exists():
        return ScaffoldConfig()

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{config_file.name} must contain a mapping at the root")

    config = ScaffoldConfig()

    tests_dir = _as_str(data.get("tests_dir"))
    if tests_dir is not None:
        if not tests_dir or "/" in tests_dir or "\\" in tests_dir or tests_dir in {".", ".."}:
            raise ConfigError(f"tests_dir must be a plain directory name, got {tests_dir!r}")
        config.tests_dir = tests_dir

    spy_helper = _as_str(data.get("spy_helper"))
    if spy_helper is not None:
        cleaned = spy_helper.strip().strip("/")
        if not cleaned:
            raise ConfigError("spy_helper must not be empty")
        config.spy_helper = cleaned

    extension = _as_str(data.get("extension"))
    if extension:
        config.extension = extension if extension.startswith(".") else f".{extension}"

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float)) and not isinstance(value, bool) else None


__all__ = ["CONFIG_FILENAME", "ConfigError", "ScaffoldConfig", "load_config"]
