"""Tests for the service runner."""

import logging

import anyio
import pytest

from homefs import runner
from homefs.config import Config
from homefs.fs import Root


@pytest.fixture(autouse=True)
def restore_log_level():
    """Keep the root logger level configure_logger changes."""
    level = logging.getLogger().level
    yield
    logging.getLogger().setLevel(level)


def test_shutdown_request_ends_run_cleanly(
    root: Root, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Test that a shutdown request stops the server without an error."""
    served = []

    class StoppingWebServer:
        def __init__(self, config: Config, root: Root) -> None:
            served.append(root)

        async def start_webserver(self) -> None:
            raise runner.ShutdownRequested("SIGTERM")

    monkeypatch.setattr(runner, "WebServer", StoppingWebServer)

    runner.run(Config(), root)

    assert served == [root]


def test_server_failure_propagates(root: Root, monkeypatch: pytest.MonkeyPatch) -> None:
    """Test that other server errors are not swallowed."""

    class FailingWebServer:
        def __init__(self, config: Config, root: Root) -> None:
            pass

        async def start_webserver(self) -> None:
            raise OSError(98, "Address already in use")

    monkeypatch.setattr(runner, "WebServer", FailingWebServer)

    with pytest.raises(BaseExceptionGroup) as exc_info:
        anyio.run(runner.start, Config(), root)

    assert exc_info.group_contains(OSError)
