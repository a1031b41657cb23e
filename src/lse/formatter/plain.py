"""Plain one-path-per-line output formatter."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from lse.scanner import Entry


class Formatter(Protocol):
    """Protocol for the display step.

    Keeps rendering decoupled from collection and ordering: a formatter
    only ever sees the final ordered entries.
    """

    def format(self, entries: Sequence[Entry]) -> str: ...


@dataclass(frozen=True, slots=True)
class PlainOptions:
    """Options for the plain formatter.

    Attributes:
        quote: Whether to wrap each path in double quotes (``-Q``).
    """

    quote: bool = False


def _quote(text: str) -> str:
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def format_token(path: str | Path, options: PlainOptions | None = None) -> str:
    """Render a single path the way it appears in any listing.

    Args:
        path: Path to render.
        options: Plain rendering options.

    Returns:
        str: The rendered path, quoted when requested.
    """
    opts = options or PlainOptions()
    text = str(path)
    return _quote(text) if opts.quote else text


class PlainFormatter:
    """Render entries as newline-separated paths."""

    def __init__(self, options: PlainOptions | None = None) -> None:
        self._options = options or PlainOptions()

    def format(self, entries: Sequence[Entry]) -> str:
        """Return one line per entry, without a trailing newline.

        An empty sequence renders as an empty string.
        """
        return "\n".join(format_token(e.path, self._options) for e in entries)
