"""Shared logging configuration for homefs."""

import logging
import os
import tempfile
from logging import Formatter
from logging.handlers import RotatingFileHandler
from pathlib import Path

from colorlog import ColoredFormatter

from homefs.config import LoggerConfig
from homefs.const import HOMEFS_CONFIG
from homefs.version import __version__

_LOGGER = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s %(levelname)s (%(threadName)s) [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logger(debug: int, log_config: LoggerConfig | None = None) -> None:
    """Configure logger based on config yaml."""

    def debug_logger():
        if debug == 0:
            logging.getLogger().setLevel(logging.INFO)
        if debug > 0:
            logging.getLogger().setLevel(logging.DEBUG)
            logging.getLogger("hypercorn.access").setLevel(logging.WARN)
            _LOGGER.info("Debug mode active")
            _LOGGER.debug("Lib version is %s", __version__)
        if debug > 1:
            logging.getLogger("hypercorn.access").setLevel(logging.DEBUG)
            logging.getLogger("hypercorn.error").setLevel(logging.DEBUG)

    if log_config is None:
        debug_logger()
        return
    if log_config.default is not None:
        level = get_log_level(log_config.default)
        logging.getLogger().setLevel(level)
        if debug == 0:
            debug = -1

    for log_key, log_level in log_config.logs.items():
        _LOGGER.info("Setting %s log level to %s", log_key, log_level)
        logging.getLogger(log_key).setLevel(get_log_level(log_level))
    debug_logger()


def get_log_level(level_name: str) -> int:
    """Convert string log level to logging constant."""
    return logging.getLevelNamesMapping().get(level_name.upper(), logging.INFO)


def is_running_under_systemd():
    """Check if the process is running under systemd."""
    return os.getenv("JOURNAL_STREAM") is not None


def get_log_formatter(color: bool = True) -> Formatter:
    """Get log formatter with optional color support."""
    # journald adds its own timestamp
    if is_running_under_systemd():
        log_format = "%(levelname)s (%(threadName)s) [%(name)s] %(message)s"
    else:
        log_format = LOG_FORMAT

    if color:
        return ColoredFormatter(
            fmt="%(log_color)s" + log_format + "%(reset)s",
            datefmt=DATE_FORMAT,
            reset=True,
            log_colors={
                "DEBUG": "cyan",
                "INFO": "green",
                "WARNING": "yellow",
                "ERROR": "red",
                "CRITICAL": "red",
            },
        )
    return Formatter(log_format, datefmt=DATE_FORMAT)


def setup_logging(debug_level: int = 0) -> None:
    """Setup logging configuration."""
    logging.basicConfig(
        level=logging.INFO if debug_level == 0 else logging.DEBUG,
        format=LOG_FORMAT,
        datefmt=DATE_FORMAT,
    )
    logging.getLogger().handlers[0].setFormatter(get_log_formatter(color=True))

    if debug_level > 1:
        config_file = os.environ.get(HOMEFS_CONFIG)
        if config_file:
            log_dir = Path(config_file).parent
        else:
            log_dir = Path(tempfile.gettempdir()) / "homefs"
            log_dir.mkdir(exist_ok=True, mode=0o700)

        log_file = log_dir / "homefs.log"

        # 10MB, 3 backups
        file_handler = RotatingFileHandler(
            str(log_file),
            maxBytes=10 * 1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        file_handler.setLevel(logging.DEBUG)
        logging.getLogger().addHandler(file_handler)

        logging.info("File logging enabled at: %s", log_file)
