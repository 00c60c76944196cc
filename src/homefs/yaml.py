"""Load homefs configuration from a YAML file."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError
from yaml import YAMLError, safe_load

from homefs.config import Config
from homefs.helper.exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)

__all__ = ["ConfigurationError", "load_config", "load_yaml_file"]


def load_yaml_file(filename: Path) -> Any:
    with filename.open("r", encoding="utf-8") as stream:
        try:
            return safe_load(stream) or {}
        except YAMLError as exception:
            msg = ""
            mark = getattr(exception, "problem_mark", None)
            if mark is not None:
                msg = f" at line {mark.line + 1} column {mark.column + 1}"
            raise ConfigurationError(f"Error loading yaml{msg}") from exception


def load_config(config_file_path: Path | None = None) -> Config:
    """Load config file. Without a file path the defaults are used."""
    if config_file_path is None:
        _LOGGER.info("No config file given, using defaults.")
        return Config()
    if not config_file_path.is_file():
        raise ConfigurationError(f"Config file not found: {config_file_path}")
    try:
        data = load_yaml_file(config_file_path)
    except OSError as err:
        raise ConfigurationError(f"Can't read config file: {err}") from err
    if not isinstance(data, dict):
        raise ConfigurationError("Config file must contain a mapping")
    try:
        config = Config.model_validate(data)
    except ValidationError as err:
        raise ConfigurationError(f"Invalid configuration: {err}") from err
    return config
