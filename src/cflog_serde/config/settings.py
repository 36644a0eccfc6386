"""
Parser settings and configuration management.

Supports loading from:
1. Plain YAML files (cflog.yaml), under the ``parser:`` key
2. Environment variables (fallback)
"""

import codecs
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

from dateutil import tz

from .constants import (
    DEFAULT_ENCODING,
    DEFAULT_OUTPUT_TIMEZONE,
    ENV_PREFIX,
    VALID_ENCODING_ERRORS,
)


def _to_bool(value: Any) -> bool:
    """Parse a config flag; quoted YAML strings like "false" count as false."""
    if isinstance(value, str):
        return value.strip().lower() == "true"
    return bool(value)


@dataclass
class ParserSettings:
    """
    Configuration for CloudFront line parsing.

    reuse_record trades safety for throughput: the parser overwrites one
    record instance on every call, so a returned record is only valid until
    the next parse. Use one parser per thread in that mode.

    twelve_hour_output keeps the historical Hive output where the hour is
    rendered on a 12-hour clock with no AM/PM marker (15:00 -> "03").
    """

    reuse_record: bool = False
    nullify_hyphens: bool = False
    twelve_hour_output: bool = True
    output_timezone: str = DEFAULT_OUTPUT_TIMEZONE
    encoding: str = DEFAULT_ENCODING
    encoding_errors: str = "strict"

    def validate(self) -> list[str]:
        """Validate settings values. Returns list of errors."""
        errors = []

        if tz.gettz(self.output_timezone) is None:
            errors.append(f"output_timezone is not a known zone: {self.output_timezone!r}")

        try:
            codecs.lookup(self.encoding)
            # Binary codecs like rot13 and base64 look up fine but cannot decode bytes to str
            b"".decode(self.encoding)
        except LookupError:
            errors.append(f"encoding is not a known text codec: {self.encoding!r}")

        if self.encoding_errors not in VALID_ENCODING_ERRORS:
            errors.append(
                f"encoding_errors must be one of "
                f"{', '.join(sorted(VALID_ENCODING_ERRORS))}, got {self.encoding_errors!r}"
            )

        return errors

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            "reuse_record": self.reuse_record,
            "nullify_hyphens": self.nullify_hyphens,
            "twelve_hour_output": self.twelve_hour_output,
            "output_timezone": self.output_timezone,
            "encoding": self.encoding,
            "encoding_errors": self.encoding_errors,
        }

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "ParserSettings":
        """Create from configuration dictionary (e.g., the ``parser:`` YAML section)."""
        return cls(
            reuse_record=_to_bool(config.get("reuse_record", False)),
            nullify_hyphens=_to_bool(config.get("nullify_hyphens", False)),
            twelve_hour_output=_to_bool(config.get("twelve_hour_output", True)),
            output_timezone=config.get("output_timezone", DEFAULT_OUTPUT_TIMEZONE),
            encoding=config.get("encoding", DEFAULT_ENCODING),
            encoding_errors=config.get("encoding_errors", "strict"),
        )

    @classmethod
    def from_env(cls) -> "ParserSettings":
        """Create from environment variables."""

        def safe_bool(key: str, default: bool) -> bool:
            """Safely parse bool from env var."""
            return os.environ.get(ENV_PREFIX + key, str(default).lower()).lower() == "true"

        def env_str(key: str, default: str) -> str:
            return os.environ.get(ENV_PREFIX + key, default)

        return cls(
            reuse_record=safe_bool("REUSE_RECORD", False),
            nullify_hyphens=safe_bool("NULLIFY_HYPHENS", False),
            twelve_hour_output=safe_bool("TWELVE_HOUR_OUTPUT", True),
            output_timezone=env_str("OUTPUT_TIMEZONE", DEFAULT_OUTPUT_TIMEZONE),
            encoding=env_str("ENCODING", DEFAULT_ENCODING),
            encoding_errors=env_str("ENCODING_ERRORS", "strict"),
        )


# Default config file path
DEFAULT_CONFIG_PATH = Path("cflog.yaml")


@lru_cache
def get_settings(config_path: Optional[str] = None) -> ParserSettings:
    """
    Get cached settings instance.

    Loads from a YAML config file if available, otherwise from env vars.

    Args:
        config_path: Optional path to YAML config file

    Returns:
        ParserSettings instance

    Raises:
        ConfigurationError: If the config file exists but cannot be read
    """
    from .loader import load_config

    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH
    config = load_config(path)

    return ParserSettings.from_dict(config.get("parser") or {})


def clear_settings_cache() -> None:
    """Clear the cached settings (useful for testing)."""
    get_settings.cache_clear()
