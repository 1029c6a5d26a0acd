"""rinit configuration.

Fixed names and locations used across the package, plus the optional user
settings file:
- Template overrides live in the per-user data directory; `rinit.yml` lives
  in the per-user config directory, or at the path named by `RINIT_CONFIG`.
- Missing keys (or a missing file) fall back to built-in defaults.
- Expose a memoized getter so callers can treat it like a constant.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, TypedDict

import click
import platformdirs
import yaml

APP_NAME = "rinit"
SHARE_DIR_ENV = "RINIT_SHARE_DIR"
CONFIG_FILE_ENV = "RINIT_CONFIG"
PROJECT_NAME_MARKER = "__PROJECT_NAME__"
DEFAULT_VARIANT = "en"
SYSTEM_SHARE_DIRS: Tuple[Path, ...] = (
    Path("/usr/local/share/rinit"),
    Path("/usr/share/rinit"),
)


class Settings(TypedDict):
    """User preferences for new projects."""

    lang: str  # en
    git: bool  # run `git init` in new projects
    dvc: bool  # run `dvc init` in new projects


DEFAULT_SETTINGS = Settings(lang=DEFAULT_VARIANT, git=True, dvc=True)


def user_template_dir() -> Path:
    """Return the per-user template override directory."""
    return Path(platformdirs.user_data_dir(APP_NAME, appauthor=False))


def user_config_dir() -> Path:
    """Return the per-user directory holding `rinit.yml`."""
    return Path(click.get_app_dir(APP_NAME))


def _parse_settings(data: Dict[str, Any]) -> Settings:
    out = Settings(**DEFAULT_SETTINGS)
    lang = data.get("lang")
    if lang is not None:
        if not isinstance(lang, str) or not lang:
            raise ValueError("'lang' must be a non-empty string")
        out["lang"] = lang
    for key in ("git", "dvc"):
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, bool):
            raise ValueError(f"'{key}' must be true or false")
        out[key] = value  # type: ignore[literal-required]
    return out


def load_settings(path: Path) -> Settings:
    """Load settings from a YAML file path."""
    with path.open("r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return _parse_settings(data)


def discover_settings_path() -> Optional[Path]:
    """Return the settings file path if one exists."""
    explicit = os.environ.get(CONFIG_FILE_ENV)
    if explicit:
        return Path(explicit).expanduser()
    candidate = user_config_dir() / f"{APP_NAME}.yml"
    if candidate.is_file():
        return candidate
    return None


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return user settings, discovered or default (memoized)."""
    path = discover_settings_path()
    if path is None or not path.is_file():
        return Settings(**DEFAULT_SETTINGS)
    return load_settings(path)
