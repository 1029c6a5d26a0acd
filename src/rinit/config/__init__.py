"""Configuration management for rinit."""

from .settings import (
    APP_NAME,
    CONFIG_FILE_ENV,
    DEFAULT_VARIANT,
    PROJECT_NAME_MARKER,
    SHARE_DIR_ENV,
    SYSTEM_SHARE_DIRS,
    Settings,
    get_settings,
    load_settings,
    user_config_dir,
    user_template_dir,
)

__all__ = [
    "APP_NAME",
    "CONFIG_FILE_ENV",
    "DEFAULT_VARIANT",
    "PROJECT_NAME_MARKER",
    "SHARE_DIR_ENV",
    "SYSTEM_SHARE_DIRS",
    "Settings",
    "get_settings",
    "load_settings",
    "user_config_dir",
    "user_template_dir",
]
