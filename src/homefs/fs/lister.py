"""Directory listing confined to the root directory."""

from __future__ import annotations

import logging
import os
import stat
from datetime import datetime, timezone
from pathlib import Path

from homefs.const import DIRECTORY, FILE
from homefs.fs.guard import PathGuard
from homefs.helper.exceptions import BadRequest, InternalError, NotFound
from homefs.models.files import DirectoryEntry, DirectoryListing, FileReference

_LOGGER = logging.getLogger(__name__)


def _modified(stat_result: os.stat_result) -> datetime:
    return datetime.fromtimestamp(stat_result.st_mtime, tz=timezone.utc)


class DirectoryLister:
    """Build listings and file references for already resolved paths."""

    def __init__(self, guard: PathGuard) -> None:
        self._guard = guard

    def list(self, path: Path) -> DirectoryListing:
        """List immediate children of ``path``, in enumeration order.

        Children whose real location is outside root, or which can't be
        resolved at all, are left out.
        """
        try:
            scanner = os.scandir(path)
        except (NotADirectoryError, FileNotFoundError) as err:
            raise NotFound(
                f"Not a directory: {self._guard.root.relative(path)}"
            ) from err
        except OSError as err:
            _LOGGER.error("Error opening %s: %s", path, err)
            raise InternalError("Directory listing failed") from err

        listing = DirectoryListing()
        try:
            with scanner as entries:
                for entry in entries:
                    item = self._entry(entry)
                    if item is None:
                        continue
                    if item.type == DIRECTORY:
                        listing.directories.append(item)
                    else:
                        listing.files.append(item)
        except OSError as err:
            _LOGGER.error("Error listing %s: %s", path, err)
            raise InternalError("Directory listing failed") from err
        _LOGGER.debug(
            "Listed %s: %d directories, %d files",
            path,
            len(listing.directories),
            len(listing.files),
        )
        return listing

    def describe(self, path: Path, with_content: bool = False) -> FileReference:
        """Reference to a resolved file, optionally with its text content.

        Only regular files are read. Content which isn't UTF-8 is not
        returned; the reference is flagged ``binary`` instead.
        """
        relative = self._guard.root.relative(path)
        content = None
        binary = False
        try:
            stat_result = path.stat()
            if stat.S_ISDIR(stat_result.st_mode):
                raise NotFound(f"Not a file: {relative}")
            if with_content:
                if not stat.S_ISREG(stat_result.st_mode):
                    raise BadRequest(f"Not a regular file: {relative}")
                data = path.read_bytes()
                try:
                    content = data.decode("utf-8")
                except UnicodeDecodeError:
                    _LOGGER.debug("Content of %s is not UTF-8 text", relative)
                    binary = True
        except FileNotFoundError as err:
            raise NotFound("File not found") from err
        except OSError as err:
            _LOGGER.error("Error reading %s: %s", path, err)
            raise InternalError("Reading file failed") from err
        return FileReference(
            name=path.name,
            path=relative,
            location=str(path),
            size=stat_result.st_size,
            modified=_modified(stat_result),
            content=content,
            binary=binary,
        )

    def _entry(self, entry: os.DirEntry) -> DirectoryEntry | None:
        try:
            real_path = Path(entry.path).resolve(strict=True)
        except (OSError, RuntimeError) as err:
            _LOGGER.debug("Skipping unresolvable entry %s: %s", entry.name, err)
            return None
        if not self._guard.contains(real_path):
            _LOGGER.debug("Skipping entry %s pointing outside root", entry.name)
            return None
        try:
            is_dir = entry.is_dir()
            stat_result = entry.stat()
        except OSError as err:
            # Removed or replaced between enumeration and stat.
            _LOGGER.debug("Skipping vanished entry %s: %s", entry.name, err)
            return None
        return DirectoryEntry(
            name=entry.name,
            type=DIRECTORY if is_dir else FILE,
            path=self._guard.root.relative(Path(entry.path)),
            size=None if is_dir else stat_result.st_size,
            modified=_modified(stat_result),
        )
