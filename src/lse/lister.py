"""Listing orchestration: pick one strategy and write its output."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from lse.formatter.plain import Formatter, PlainFormatter, PlainOptions, format_token
from lse.order import order_by_time, partition_dirs_first
from lse.scanner import Entry, collect, walk
from lse.structure import describe

logger = logging.getLogger(__name__)

WALK_SEPARATOR = "  "


@dataclass(frozen=True, slots=True)
class ModeConfig:
    """Options controlling a single listing.

    Attributes:
        include_hidden: Whether to include hidden entries (``-a``).
        directory_only: Whether to describe the target itself (``-d``).
        group_directories_first: Whether directories precede files.
        recursive: Whether to walk the whole subtree (``-R``).
        time_ordered: Whether to order by modification time (``-t``).
        quote_names: Whether to wrap paths in double quotes (``-Q``).
        tabular: Whether a detailed table was requested (``-l``).
    """

    include_hidden: bool = False
    directory_only: bool = False
    group_directories_first: bool = False
    recursive: bool = False
    time_ordered: bool = False
    quote_names: bool = False
    tabular: bool = False


class Lister:
    """Run exactly one listing strategy for a target path.

    Strategy priority is ``directory_only``, then ``recursive``, then the
    plain one-level listing.
    """

    def __init__(
        self,
        config: ModeConfig,
        out: TextIO,
        formatter: Formatter | None = None,
    ) -> None:
        """Initialize lister.

        Args:
            config: Mode configuration for this invocation.
            out: Stream receiving rendered output.
            formatter: Display step for one-level listings. Defaults to
                ``PlainFormatter``.
        """
        self.config = config
        self.out = out
        self._plain_options = PlainOptions(quote=config.quote_names)
        if formatter is None:
            if config.tabular:
                logger.debug("No tabular formatter available; using plain output")
            formatter = PlainFormatter(self._plain_options)
        self.formatter = formatter

    def list_dir(self, target: str | Path) -> None:
        """List ``target`` according to the configured mode.

        Raises:
            FilesystemError: On the first unreadable path.
        """
        if self.config.directory_only:
            logger.debug("Describing %s", target)
            self._show_structure(target)
        elif self.config.recursive:
            logger.debug("Walking %s", target)
            self._list_recursively(target)
        else:
            logger.debug("Listing %s", target)
            self._list_one_level(target)

    def ordered_entries(self, target: str | Path) -> list[Entry]:
        """Collect and reorder the immediate children of ``target``."""
        entries = collect(target, self.config.include_hidden)
        if self.config.time_ordered:
            return order_by_time(entries)
        if self.config.group_directories_first:
            return partition_dirs_first(entries)
        return entries

    def _show_structure(self, target: str | Path) -> None:
        line = describe(target)
        self.out.write(format_token(line, self._plain_options) + "\n")

    def _list_recursively(self, target: str | Path) -> None:
        root = Path(target)
        emitted = False
        for path in walk(target, self.config.include_hidden):
            # The root is printed exactly as given, trailing separator included.
            token = target if path == root else path
            self.out.write(format_token(token, self._plain_options) + WALK_SEPARATOR)
            emitted = True
        if emitted:
            self.out.write("\n")

    def _list_one_level(self, target: str | Path) -> None:
        entries = self.ordered_entries(target)
        logger.debug("Collected %d entries from %s", len(entries), target)
        output = self.formatter.format(entries)
        if output:
            self.out.write(output + "\n")
