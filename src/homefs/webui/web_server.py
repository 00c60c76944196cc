from __future__ import annotations

import logging
from dataclasses import dataclass

from anyio import Event
from hypercorn.asyncio import serve
from hypercorn.config import Config as HypercornConfig

from homefs.config import Config
from homefs.fs import Root

from .app import init_app

_LOGGER = logging.getLogger(__name__)


@dataclass
class WebServer:
    config: Config
    root: Root

    def __post_init__(self) -> None:
        """Initialize the web server."""
        self.app = init_app(root=self.root)

        self._hypercorn_config = HypercornConfig()
        self._hypercorn_config.bind = [self.config.web.bind()]
        self._hypercorn_config.use_reloader = False

        # Route Hypercorn's loggers through the root logger handlers
        hypercorn_logger = logging.getLogger("hypercorn.error")
        hypercorn_logger.handlers = []
        hypercorn_logger.propagate = True

        hypercorn_access_logger = logging.getLogger("hypercorn.access")
        hypercorn_access_logger.handlers = []
        hypercorn_access_logger.propagate = True

        self._hypercorn_config.accesslog = hypercorn_access_logger
        self._hypercorn_config.errorlog = hypercorn_logger

        self._hypercorn_config.graceful_timeout = 5.0

    @property
    def hypercorn_config(self) -> HypercornConfig:
        return self._hypercorn_config

    async def start_webserver(self) -> None:
        """Start the web server."""
        _LOGGER.info(
            "Starting HYPERCORN web server on %s serving %s",
            self.config.web.bind(),
            self.root,
        )
        try:
            await serve(
                self.app,
                self._hypercorn_config,
                shutdown_trigger=Event().wait,
            )
        finally:
            _LOGGER.info("HTTP server stopped")
