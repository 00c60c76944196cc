"""Resolve untrusted request paths inside the root directory."""

from __future__ import annotations

import logging
from pathlib import Path

from homefs.fs.root import Root
from homefs.helper.exceptions import BadRequest

_LOGGER = logging.getLogger(__name__)


class PathGuard:
    """Translate request paths into canonical locations confined to root.

    Rejections never carry the resolved location, only the path the caller
    sent.
    """

    def __init__(self, root: Root) -> None:
        self._root = root

    @property
    def root(self) -> Root:
        return self._root

    def contains(self, path: Path) -> bool:
        """Check ``path`` is root itself or a true descendant of it."""
        return path.is_relative_to(self._root.path)

    def resolve(self, request_path: str) -> Path:
        """Resolve an existing entry. Empty path is root itself."""
        try:
            resolved = self._join(request_path).resolve(strict=True)
        except (OSError, RuntimeError, ValueError) as err:
            _LOGGER.info("Path not found for %s", request_path)
            raise BadRequest(f"Path not found: {request_path}") from err
        return self._check(request_path, resolved)

    def resolve_target(self, request_path: str) -> Path:
        """Resolve a path which may not exist yet, for write operations."""
        if not request_path.strip("/"):
            raise BadRequest("Root directory can't be a write target")
        try:
            resolved = self._join(request_path).resolve(strict=False)
        except (OSError, RuntimeError, ValueError) as err:
            _LOGGER.info("Can't resolve target %s", request_path)
            raise BadRequest(f"Invalid path: {request_path}") from err
        resolved = self._check(request_path, resolved)
        if resolved == self._root.path:
            raise BadRequest("Root directory can't be a write target")
        return resolved

    def _join(self, request_path: str) -> Path:
        return self._root.path / request_path

    def _check(self, request_path: str, resolved: Path) -> Path:
        if not self.contains(resolved):
            _LOGGER.warning("Rejected path escaping root: %s", request_path)
            raise BadRequest(f"Path not found: {request_path}")
        _LOGGER.debug("Path is %s", resolved)
        return resolved
