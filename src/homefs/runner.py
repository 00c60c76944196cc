"""Runner code for homefs."""

from __future__ import annotations

import logging
import signal
from typing import Any

import anyio

from homefs.config import Config
from homefs.fs import Root
from homefs.logger import configure_logger
from homefs.webui.web_server import WebServer

_LOGGER = logging.getLogger(__name__)


class ShutdownRequested(Exception):
    """SIGINT or SIGTERM received."""


async def handle_signals(root: Root) -> None:
    with anyio.open_signal_receiver(signal.SIGINT, signal.SIGTERM) as signals:
        async for signum in signals:
            signame = signal.Signals(signum).name
            _LOGGER.info("%s received, stop serving %s", signame, root)
            raise ShutdownRequested(signame)


async def start(config: Config, root: Root, debug: int = 0) -> None:
    """Serve root until a signal arrives."""
    configure_logger(log_config=config.logger, debug=debug)
    try:
        async with anyio.create_task_group() as tg:
            tg.start_soon(handle_signals, root)
            web_server = WebServer(config=config, root=root)
            await web_server.start_webserver()
    except* ShutdownRequested:
        _LOGGER.debug("Shutdown of %s complete", root)


def run(
    config: Config,
    root: Root,
    debug: int = 0,
    backend_options: dict[str, Any] | None = None,
) -> None:
    anyio.run(start, config, root, debug, backend_options=backend_options)
