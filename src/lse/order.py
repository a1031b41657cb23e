"""Reordering of collected entries: by modification time, or kind."""

from __future__ import annotations

from collections.abc import Sequence

from lse.scanner import Entry


def order_by_time(entries: Sequence[Entry]) -> list[Entry]:
    """Return entries ordered most recently modified first.

    Timestamps are compared as integers. Entries with equal timestamps
    keep their input relative order.

    Args:
        entries: Collected entries.

    Returns:
        list[Entry]: A new list with the same entries.
    """
    return sorted(entries, key=lambda e: e.info.mtime_ns, reverse=True)


def partition_dirs_first(entries: Sequence[Entry]) -> list[Entry]:
    """Move directories ahead of everything else.

    Relative order inside each group is preserved, so applying this twice
    gives the same result as applying it once.

    Args:
        entries: Collected entries.

    Returns:
        list[Entry]: Directories, then non-directories.
    """
    dirs = [e for e in entries if e.is_dir]
    files = [e for e in entries if not e.is_dir]
    return dirs + files
