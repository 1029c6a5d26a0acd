from __future__ import annotations

from pathlib import Path

import pytest

import rinit.config.settings as settings_mod
from rinit.config import CONFIG_FILE_ENV, SHARE_DIR_ENV

README = "# __PROJECT_NAME__\n\nWelcome to __PROJECT_NAME__.\nRun __PROJECT_NAME__ with R.\n"


def write_file(path: Path, content: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path: Path):
    monkeypatch.delenv(SHARE_DIR_ENV, raising=False)
    monkeypatch.setenv(CONFIG_FILE_ENV, str(tmp_path / "no-such-rinit.yml"))
    settings_mod.get_settings.cache_clear()
    yield
    settings_mod.get_settings.cache_clear()


@pytest.fixture
def template_root(tmp_path: Path) -> Path:
    root = tmp_path / "share"
    write_file(root / "R" / "main.R", "# Main execution script\nsource('R/build/01.R')\n")
    write_file(root / "README.md", README)
    write_file(root / "gitignore", ".Rhistory\n.RData\n")
    write_file(root / "metadata" / "metadata_en.yml", "lang: en\ntitle: Report\n")
    return root
