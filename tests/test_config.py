"""Tests for YAML config loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from cachetrim.config import TrimConfig, load_config
from cachetrim.exceptions import ConfigError


def test_load_config_defaults_without_path() -> None:
    assert load_config(None) == TrimConfig()


def test_load_config_reads_values(tmp_path: Path) -> None:
    path = tmp_path / "cachetrim.yaml"
    path.write_text("exempt_pinned: true\nstrict_index: true\n", encoding="utf-8")

    config = load_config(path)

    assert config == TrimConfig(exempt_pinned=True, strict_index=True)


def test_load_config_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "cachetrim.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == TrimConfig()


@pytest.mark.parametrize(
    ("content", "message"),
    [
        pytest.param("- a\n- b\n", "must be a YAML mapping", id="not-mapping"),
        pytest.param("exempt_pinned: [\n", "Invalid YAML", id="bad-yaml"),
        pytest.param("strict_index: 1\n", "strict_index must be a boolean", id="wrong-type"),
        pytest.param("exempt_pined: true\n", "did you mean `exempt_pinned`", id="typo"),
    ],
)
def test_load_config_rejects_invalid_files(tmp_path: Path, content: str, message: str) -> None:
    path = tmp_path / "cachetrim.yaml"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        load_config(path)


def test_load_config_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "missing.yaml")
