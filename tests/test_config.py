"""Tests for scaffold.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from scaffold.config import ConfigError, ScaffoldConfig, load_config


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, ScaffoldConfig)
    assert config.tests_dir == "__tests__"
    assert config.spy_helper == "test/safe_spy"
    assert config.extension is None


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".scaffold.yml"
    config_file.write_text(
        """
tests_dir: spec
spy_helper: /support/safe_spy/
extension: tsx
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.tests_dir == "spec"
    assert config.spy_helper == "support/safe_spy"
    assert config.extension == ".tsx"


def test_load_config_accepts_empty_file(tmp_path: Path) -> None:
    (tmp_path / ".scaffold.yml").write_text("\n", encoding="utf-8")

    assert load_config(tmp_path).tests_dir == "__tests__"


@pytest.mark.parametrize(
    "content",
    [
        "- just\n- a list\n",
        "tests_dir: a/b\n",
        "tests_dir: '..'\n",
        "spy_helper: '/'\n",
        "tests_dir: [unclosed\n",
    ],
)
def test_load_config_rejects_invalid_files(tmp_path: Path, content: str) -> None:
    (tmp_path / ".scaffold.yml").write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
