"""Hidden-entry classification."""

from __future__ import annotations

HIDDEN_PREFIX = "."


def is_hidden(name: str, include_hidden: bool) -> bool:
    """Return whether a name or path should be treated as hidden.

    Implements ``-a`` behavior: when ``include_hidden`` is set nothing is
    hidden. Otherwise a string is hidden iff it starts with a period.

    Args:
        name: Bare entry name, or a path relative to a walk root.
        include_hidden: Whether hidden entries are being shown.

    Returns:
        bool: ``True`` when the entry should be skipped for display.

    Raises:
        ValueError: If ``name`` is empty.
    """
    if include_hidden:
        return False
    if not name:
        raise ValueError("cannot classify an empty name")
    return name[0] == HIDDEN_PREFIX
