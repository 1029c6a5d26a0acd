from __future__ import annotations

import sys
from pathlib import Path

import pytest

from rinit.config import (
    CONFIG_FILE_ENV,
    get_settings,
    load_settings,
    user_config_dir,
    user_template_dir,
)

linux_only = pytest.mark.skipif(
    not sys.platform.startswith("linux"), reason="XDG layout is Linux-specific"
)


def test_defaults_without_config_file() -> None:
    assert get_settings() == {"lang": "en", "git": True, "dvc": True}


def test_partial_config_keeps_defaults(monkeypatch, tmp_path: Path) -> None:
    config = tmp_path / "rinit.yml"
    config.write_text("dvc: false\n")
    monkeypatch.setenv(CONFIG_FILE_ENV, str(config))

    assert get_settings() == {"lang": "en", "git": True, "dvc": False}


def test_empty_config_file(tmp_path: Path) -> None:
    config = tmp_path / "rinit.yml"
    config.write_text("")

    assert load_settings(config)["lang"] == "en"


@pytest.mark.parametrize(
    "content",
    ["lang: 3\n", "git: maybe\n", "- a list\n"],
)
def test_invalid_config_is_rejected(tmp_path: Path, content: str) -> None:
    config = tmp_path / "rinit.yml"
    config.write_text(content)

    with pytest.raises(ValueError):
        load_settings(config)


def test_malformed_yaml_is_rejected_as_value_error(tmp_path: Path) -> None:
    config = tmp_path / "rinit.yml"
    config.write_text("lang: [unclosed\n")

    with pytest.raises(ValueError, match="invalid YAML"):
        load_settings(config)


@linux_only
def test_user_template_dir_is_the_data_dir(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    monkeypatch.delenv("XDG_DATA_HOME", raising=False)

    assert user_template_dir() == tmp_path / ".local" / "share" / "rinit"

    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    assert user_template_dir() == tmp_path / "data" / "rinit"


@linux_only
def test_settings_file_is_found_in_the_config_dir(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.delenv(CONFIG_FILE_ENV)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))
    config = user_config_dir() / "rinit.yml"
    config.parent.mkdir(parents=True)
    config.write_text("lang: zh\n")

    assert config == tmp_path / "config" / "rinit" / "rinit.yml"
    assert get_settings()["lang"] == "zh"
    assert not user_template_dir().exists()
