"""Root directory setup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from homefs.const import DEFAULT_ROOT_DIR
from homefs.helper.exceptions import ConfigurationError

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class Root:
    """Canonical absolute directory every served path is confined to."""

    path: Path

    def relative(self, path: Path) -> str:
        """Return ``path`` relative to root in POSIX form, ``""`` for root."""
        relative = path.relative_to(self.path).as_posix()
        return "" if relative == "." else relative

    def __str__(self) -> str:
        return str(self.path)


def resolve_root(root_dir: str | Path = DEFAULT_ROOT_DIR) -> Root:
    """Canonicalize root_dir, creating it when missing.

    Raises ConfigurationError when the path exists but is not a directory or
    when it can't be resolved or created.
    """
    try:
        path = Path(root_dir).expanduser().resolve()
        if not path.exists():
            _LOGGER.info("Creating root dir %s", path)
            path.mkdir(parents=True, exist_ok=True)
        elif not path.is_dir():
            _LOGGER.error("Supplied path is a file %s", root_dir)
            raise ConfigurationError(f"Supplied path is a file {root_dir}")
        path = path.resolve(strict=True)
    except (OSError, RuntimeError) as err:
        _LOGGER.error("Exception resolving root directory %s: %s", root_dir, err)
        raise ConfigurationError(
            f"Can't resolve root directory {root_dir}: {err}"
        ) from err
    _LOGGER.debug("Root directory is %s", path)
    return Root(path=path)
