"""
Configuration Loader.

Responsible for reading and validating the optional YAML config file.
"""
import logging
import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from zsa_keymapp.errors import ConfigError
from zsa_keymapp.models import ClientSettings

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "zsa-keymapp.yaml"


def default_config_path(environ: Mapping[str, str] = os.environ) -> Optional[Path]:
    """
    Location of the config file next to Keymapp's own socket,
    or None when CONFIG_DIR is not set.
    """
    config_dir = environ.get("CONFIG_DIR")
    if not config_dir:
        return None
    return Path(config_dir) / ".keymapp" / CONFIG_FILE_NAME


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Loads the YAML configuration file.
    """
    path = Path(config_path)
    if not path.exists():
        logger.warning(f"Config file not found at {path}. Using defaults.")
        return {}

    try:
        with open(path, 'r') as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        logger.error(f"Failed to parse config file: {e}")
        raise ConfigError(f"failed to read {path}: {e}") from e

    if not isinstance(config, dict):
        raise ConfigError(f"{path}: top level must be a mapping, got {type(config).__name__}")
    logger.info(f"Loaded configuration from {path}")
    return config


def settings_from_config(config: Mapping[str, Any]) -> ClientSettings:
    """Validates the raw mapping and turns it into ClientSettings."""
    address = config.get("address")
    if address is not None and not isinstance(address, str):
        raise ConfigError(f"'address' must be a string, got {address!r}")

    timeout = config.get("timeout")
    if timeout is not None:
        if isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0:
            raise ConfigError(f"'timeout' must be a positive number, got {timeout!r}")
        timeout = float(timeout)

    logging_conf = config.get("logging") or {}
    if not isinstance(logging_conf, dict):
        raise ConfigError("'logging' must be a mapping")
    level = str(logging_conf.get("level", "INFO")).upper()
    if level not in logging.getLevelNamesMapping():
        raise ConfigError(f"unknown log level {level!r}")

    return ClientSettings(address=address, timeout=timeout, log_level=level)


def load_settings(config_path: Union[str, Path, None]) -> ClientSettings:
    if config_path is None:
        return ClientSettings()
    return settings_from_config(load_config(config_path))
