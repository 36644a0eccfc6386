"""Configuration module."""

from .constants import (
    ABSENT_SENTINEL,
    CF_DATE_FORMAT,
    HIVE_DATE_FORMAT_12H,
    HIVE_DATE_FORMAT_24H,
    TOKEN_NAMES,
    W3C_DATE_FORMAT,
)
from .loader import load_config, read_yaml_file
from .settings import ParserSettings, clear_settings_cache, get_settings

__all__ = [
    # Grammar
    "ABSENT_SENTINEL",
    "TOKEN_NAMES",
    # Date formats
    "CF_DATE_FORMAT",
    "W3C_DATE_FORMAT",
    "HIVE_DATE_FORMAT_12H",
    "HIVE_DATE_FORMAT_24H",
    # Settings
    "ParserSettings",
    "get_settings",
    "clear_settings_cache",
    # Config loading
    "load_config",
    "read_yaml_file",
]
