"""Config loading and validation for Cachetrim runs."""

from __future__ import annotations

import difflib
from pathlib import Path

import yaml

from cachetrim.config.model import TrimConfig
from cachetrim.constants.config import (
    ALLOWED_CONFIG_KEYS,
    DEFAULT_EXEMPT_PINNED,
    DEFAULT_STRICT_INDEX,
)
from cachetrim.exceptions import ConfigError


def load_config(config_path: Path | None = None) -> TrimConfig:
    """Load trim config from an explicit YAML file, or return defaults."""
    if config_path is None:
        return TrimConfig()

    path = config_path.resolve()
    if not path.is_file():
        raise ConfigError(f"Config file not found: {path}")

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"Cannot read config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    unknown = sorted(str(key) for key in raw if key not in ALLOWED_CONFIG_KEYS)
    if unknown:
        raise ConfigError(_unknown_key_message(unknown[0]))

    return TrimConfig(
        exempt_pinned=_ensure_bool(raw.get("exempt_pinned", DEFAULT_EXEMPT_PINNED), "exempt_pinned"),
        strict_index=_ensure_bool(raw.get("strict_index", DEFAULT_STRICT_INDEX), "strict_index"),
    )


def _ensure_bool(value: object, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigError(f"{field_name} must be a boolean")
    return value


def _unknown_key_message(key: str) -> str:
    """Return an unknown-key message with a "did you mean" hint when one fits."""
    message = f"unknown config key: {key}"
    matches = difflib.get_close_matches(key, sorted(ALLOWED_CONFIG_KEYS), n=1, cutoff=0.6)
    if matches:
        message = f"{message} (did you mean `{matches[0]}`?)"
    return message
