"""Shared fixtures for lse tests."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from lse.scanner import Entry, FileInfo

# 2024-01-01 10:00 / 11:00 / 12:00 UTC
T_10 = 1_704_103_200 * 10**9
T_11 = T_10 + 3600 * 10**9
T_12 = T_11 + 3600 * 10**9


def set_mtime(path: Path, mtime_ns: int) -> None:
    """Set both access and modification time of ``path``."""
    os.utime(path, ns=(mtime_ns, mtime_ns))


def make_entry(name: str, is_dir: bool = False, mtime_ns: int = 0) -> Entry:
    """Return an in-memory Entry for ordering tests."""
    info = FileInfo(name=name, is_dir=is_dir, mtime_ns=mtime_ns, size=0, mode=0)
    return Entry(path=Path("d") / name, info=info)


@pytest.fixture
def sample_dir(tmp_path: Path) -> Path:
    """Create a small directory with known modification times.

    Structure::

        d/
        ├── a.txt      (10:00)
        ├── b.txt      (11:00)
        └── sub/       (12:00)
            └── inner.txt
    """
    root = tmp_path / "d"
    root.mkdir()
    (root / "a.txt").write_text("a")
    (root / "b.txt").write_text("b")
    (root / "sub").mkdir()
    (root / "sub" / "inner.txt").write_text("inner")
    set_mtime(root / "a.txt", T_10)
    set_mtime(root / "b.txt", T_11)
    set_mtime(root / "sub", T_12)
    return root


@pytest.fixture
def hidden_tree(tmp_path: Path) -> Path:
    """Tree with hidden files and a hidden directory.

    Structure::

        root/
        ├── .env
        ├── .git/
        │   └── config
        ├── README.md
        └── src/
            ├── .cache
            └── app.py
    """
    root = tmp_path / "root"
    root.mkdir()
    (root / ".env").write_text("env")
    (root / ".git").mkdir()
    (root / ".git" / "config").write_text("config")
    (root / "README.md").write_text("readme")
    (root / "src").mkdir()
    (root / "src" / ".cache").write_text("cache")
    (root / "src" / "app.py").write_text("app")
    return root
