"""Root setup, path resolution and directory listing."""

from homefs.fs.guard import PathGuard
from homefs.fs.lister import DirectoryLister
from homefs.fs.root import Root, resolve_root

__all__ = ["DirectoryLister", "PathGuard", "Root", "resolve_root"]
