"""Tests for YAML configuration loading and logging setup."""

import logging
from pathlib import Path

import pytest

from homefs.config import Config, LoggerConfig
from homefs.logger import configure_logger, get_log_level
from homefs.yaml import ConfigurationError, load_config


def test_named_missing_file_is_configuration_error(tmp_path: Path) -> None:
    """Test that a config file given but not present is an error."""
    with pytest.raises(ConfigurationError, match="Config file not found"):
        load_config(tmp_path / "missing.yaml")


def test_no_file_gives_defaults() -> None:
    """Test defaults without a config file path."""
    config = load_config(None)

    assert config == Config()
    assert config.root_dir == Path("target")
    assert config.web.port == 8090


def test_values_are_loaded(tmp_path: Path) -> None:
    """Test that YAML values are parsed into the config model."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "root_dir: /srv/files\n"
        "web:\n"
        "  host: 127.0.0.1\n"
        "  port: 9000\n"
        "logger:\n"
        "  default: warning\n"
        "  logs:\n"
        "    homefs.fs: debug\n",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.root_dir == Path("/srv/files")
    assert config.web.bind() == "127.0.0.1:9000"
    assert config.logger == LoggerConfig(
        default="warning", logs={"homefs.fs": "debug"}
    )


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """Test that an empty YAML document gives defaults."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("", encoding="utf-8")

    assert load_config(config_file) == Config()


def test_invalid_yaml_is_configuration_error(tmp_path: Path) -> None:
    """Test that YAML syntax errors carry the position."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("web:\n  port: [1, 2\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="at line"):
        load_config(config_file)


def test_invalid_value_is_configuration_error(tmp_path: Path) -> None:
    """Test that values failing validation are configuration errors."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("web:\n  port: 70000\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="Invalid configuration"):
        load_config(config_file)


def test_non_mapping_is_configuration_error(tmp_path: Path) -> None:
    """Test that a top level list is rejected."""
    config_file = tmp_path / "config.yaml"
    config_file.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(ConfigurationError, match="mapping"):
        load_config(config_file)


def test_get_log_level() -> None:
    """Test log level names."""
    assert get_log_level("debug") == logging.DEBUG
    assert get_log_level("WARNING") == logging.WARNING
    assert get_log_level("bogus") == logging.INFO


def test_configure_logger_applies_levels() -> None:
    """Test that per-logger levels from config are applied."""
    root_logger = logging.getLogger()
    previous = root_logger.level
    try:
        configure_logger(
            debug=0,
            log_config=LoggerConfig(default="error", logs={"homefs.test": "debug"}),
        )

        assert root_logger.level == logging.ERROR
        assert logging.getLogger("homefs.test").level == logging.DEBUG
    finally:
        root_logger.setLevel(previous)
        logging.getLogger("homefs.test").setLevel(logging.NOTSET)
