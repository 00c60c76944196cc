"""Shared fixtures for homefs tests."""

from pathlib import Path

import pytest

from homefs.fs import DirectoryLister, PathGuard, Root, resolve_root


@pytest.fixture
def root(tmp_path: Path) -> Root:
    """Fresh root directory inside the pytest temp dir."""
    return resolve_root(tmp_path / "root")


@pytest.fixture
def outside(tmp_path: Path) -> Path:
    """Directory next to root holding a secret file."""
    outside_dir = tmp_path / "outside"
    outside_dir.mkdir()
    (outside_dir / "secret.txt").write_text("secret", encoding="utf-8")
    return outside_dir.resolve()


@pytest.fixture
def guard(root: Root) -> PathGuard:
    return PathGuard(root)


@pytest.fixture
def lister(guard: PathGuard) -> DirectoryLister:
    return DirectoryLister(guard)
