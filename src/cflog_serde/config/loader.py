"""
YAML configuration loader.

Example cflog.yaml:

    parser:
      reuse_record: true
      twelve_hour_output: false
      output_timezone: UTC
"""

import logging
from pathlib import Path
from typing import Any, Optional

import yaml

from ..exceptions import ConfigurationError
from .settings import ParserSettings

logger = logging.getLogger(__name__)


def read_yaml_file(file_path: Path) -> dict[str, Any]:
    """
    Read a YAML config file and return it as a dictionary.

    Args:
        file_path: Path to the config file

    Returns:
        Parsed configuration (empty dict for an empty file)

    Raises:
        FileNotFoundError: If file doesn't exist
        ConfigurationError: If the file is not valid YAML or not a mapping
    """
    if not file_path.exists():
        raise FileNotFoundError(f"Config file not found: {file_path}")

    try:
        with open(file_path, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {file_path}", errors=[str(e)]) from e

    if config is None:
        return {}
    if not isinstance(config, dict):
        raise ConfigurationError(
            f"Config file {file_path} must contain a mapping, "
            f"got {type(config).__name__}"
        )
    return config


def load_config(
    config_path: Optional[Path] = None,
    fallback_to_env: bool = True,
) -> dict[str, Any]:
    """
    Load configuration from a YAML file or environment variables.

    Priority:
    1. YAML file (if provided and exists)
    2. Environment variables (if fallback_to_env=True)

    Args:
        config_path: Path to YAML config file
        fallback_to_env: Whether to fall back to environment variables

    Returns:
        Configuration dictionary with a ``parser`` section
    """
    if config_path and config_path.exists():
        logger.debug(f"Loading parser config from {config_path}")
        return read_yaml_file(config_path)

    if fallback_to_env:
        return {"parser": ParserSettings.from_env().to_dict()}

    return {}
