"""Directory readers: one-level collection and recursive walking."""

from __future__ import annotations

import os
import stat
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from lse import FilesystemError
from lse.filter import is_hidden

PSEUDO_ENTRIES: tuple[str, ...] = (".", "..")


@dataclass(frozen=True, slots=True)
class FileInfo:
    """Metadata for one filesystem object.

    Attributes:
        name: Basename of the object.
        is_dir: Whether the object is a directory.
        mtime_ns: Modification time in integer nanoseconds since the epoch.
        size: Size in bytes.
        mode: Raw ``st_mode`` bits.
    """

    name: str
    is_dir: bool
    mtime_ns: int
    size: int
    mode: int

    @classmethod
    def from_stat(cls, name: str, st: os.stat_result) -> FileInfo:
        return cls(
            name=name,
            is_dir=stat.S_ISDIR(st.st_mode),
            mtime_ns=st.st_mtime_ns,
            size=st.st_size,
            mode=st.st_mode,
        )


@dataclass(frozen=True, slots=True)
class Entry:
    """A single listed filesystem object.

    Attributes:
        path: Display path of the entry.
        info: Metadata captured when the entry was collected.
    """

    path: Path
    info: FileInfo

    @property
    def name(self) -> str:
        return self.info.name

    @property
    def is_dir(self) -> bool:
        return self.info.is_dir


def _pseudo_entries() -> list[Entry]:
    """Stat ``.`` and ``..`` relative to the current working directory."""
    result: list[Entry] = []
    for name in PSEUDO_ENTRIES:
        try:
            st = os.stat(name)
        except OSError as exc:
            raise FilesystemError.from_os_error(name, exc) from exc
        result.append(Entry(path=Path(name), info=FileInfo.from_stat(name, st)))
    return result


def _sorted_children(directory: Path) -> list[os.DirEntry[str]]:
    """Read one directory level, sorted by name.

    Raises:
        FilesystemError: If the directory cannot be opened or read.
    """
    try:
        with os.scandir(directory) as it:
            children = list(it)
    except OSError as exc:
        raise FilesystemError.from_os_error(directory, exc) from exc
    children.sort(key=lambda e: e.name)
    return children


def _entry_info(dir_entry: os.DirEntry[str]) -> FileInfo:
    try:
        st = dir_entry.stat(follow_symlinks=False)
    except OSError as exc:
        raise FilesystemError.from_os_error(dir_entry.path, exc) from exc
    return FileInfo.from_stat(dir_entry.name, st)


def collect(directory: str | Path, include_hidden: bool = False) -> list[Entry]:
    """Collect the immediate children of ``directory``.

    When ``include_hidden`` is set, the ``.`` and ``..`` pseudo-entries are
    placed ahead of the real children. Hidden children are skipped otherwise.

    Args:
        directory: Directory to read.
        include_hidden: Whether to include hidden entries (``-a``).

    Returns:
        list[Entry]: Pseudo-entries (if any), then children sorted by name.

    Raises:
        FilesystemError: On the first unreadable directory or child.
    """
    root = Path(directory)
    children = _sorted_children(root)

    result: list[Entry] = _pseudo_entries() if include_hidden else []
    for dir_entry in children:
        if is_hidden(dir_entry.name, include_hidden):
            continue
        result.append(Entry(path=root / dir_entry.name, info=_entry_info(dir_entry)))
    return result


def walk(root: str | Path, include_hidden: bool = False) -> Iterator[Path]:
    """Yield every path under ``root`` in pre-order, ``root`` first.

    Siblings are visited in name order and symbolic links are not
    followed. A path is hidden when its own name or the name of any
    ancestor below ``root`` is hidden. Hidden paths are not yielded, but
    hidden directories are still descended into. ``root`` itself is only
    hidden when it is ``.`` or ``..``, like the pseudo-entries of a
    one-level listing, and its hiddenness is not inherited.

    Args:
        root: Top of the tree to walk.
        include_hidden: Whether to yield hidden paths (``-a``).

    Yields:
        Path: Each visible path as it is reached.

    Raises:
        FilesystemError: On the first path that cannot be stat'd or read.
    """
    root_path = Path(root)
    try:
        root_is_dir = stat.S_ISDIR(os.lstat(root_path).st_mode)
    except OSError as exc:
        raise FilesystemError.from_os_error(root, exc) from exc

    root_name = str(root_path)
    root_hidden = root_name in PSEUDO_ENTRIES and is_hidden(root_name, include_hidden)

    # Stack items: (path, hidden, is_dir)
    # Children are pushed in reverse so the first name is popped first.
    stack: list[tuple[Path, bool, bool]] = [(root_path, root_hidden, root_is_dir)]
    while stack:
        path, hidden, path_is_dir = stack.pop()
        if not hidden:
            yield path
        if not path_is_dir:
            continue

        children: list[tuple[Path, bool, bool]] = []
        for dir_entry in _sorted_children(path):
            info = _entry_info(dir_entry)
            inherited = hidden and path is not root_path
            child_hidden = inherited or is_hidden(dir_entry.name, include_hidden)
            children.append((path / dir_entry.name, child_hidden, info.is_dir))
        stack.extend(reversed(children))
