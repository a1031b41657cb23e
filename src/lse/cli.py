"""CLI entry point for lse — I/O boundary only."""

from __future__ import annotations

import argparse
import io
import logging
import sys
from pathlib import Path

from lse import LseError, __version__
from lse.lister import Lister, ModeConfig

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Build and return the CLI argument parser.

    Returns:
        argparse.ArgumentParser: Configured parser for the ``lse`` command.
    """
    parser = argparse.ArgumentParser(
        prog="lse",
        description="a cross platform drop-in replacement for ls",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="Directory to list (default: current directory)",
    )

    # ls-compat options
    parser.add_argument(
        "-a",
        "--all",
        action="store_true",
        dest="all_files",
        help="Show all files including hidden files",
    )
    parser.add_argument(
        "-d",
        "--directory",
        action="store_true",
        dest="directory_only",
        help="Show the directory itself, not its contents",
    )
    parser.add_argument(
        "-R",
        "--recursive",
        action="store_true",
        help="Show all subdirectories encountered",
    )
    parser.add_argument(
        "-t",
        action="store_true",
        dest="time_ordered",
        help="Sort by modification time, newest first",
    )
    parser.add_argument(
        "--group-directories-first",
        action="store_true",
        dest="group_dirs",
        help="List directories before files (ignored with -t)",
    )
    parser.add_argument(
        "-Q",
        "--quote-name",
        action="store_true",
        dest="quote_names",
        help="Enclose entry names in double quotes",
    )
    parser.add_argument(
        "-l",
        "--tabular",
        action="store_true",
        help="Show detailed directory structure in tabular form (reserved)",
    )

    # lse extension options
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        default=None,
        dest="output_file",
        help="Write output to a file instead of stdout",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def build_config(args: argparse.Namespace) -> ModeConfig:
    """Translate parsed CLI arguments into a mode configuration.

    Args:
        args: Parsed CLI namespace.

    Returns:
        ModeConfig: Immutable configuration for one listing.
    """
    return ModeConfig(
        include_hidden=args.all_files,
        directory_only=args.directory_only,
        group_directories_first=args.group_dirs,
        recursive=args.recursive,
        time_ordered=args.time_ordered,
        quote_names=args.quote_names,
        tabular=args.tabular,
    )


def run_lse(argv: list[str] | None = None) -> str:
    """Run lse with provided CLI args and return rendered output.

    This function is intentionally side-effect free and is the primary
    test target for CLI behavior.

    Args:
        argv: Command-line argument list without program name. If ``None``,
            uses process arguments via ``argparse`` defaults.

    Returns:
        str: Final rendered output, including trailing newline.

    Raises:
        LseError: On any user-facing error.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    return _run_with_args(args)


def _run_with_args(args: argparse.Namespace) -> str:
    """Run the listing for parsed arguments into an in-memory buffer.

    Nothing is returned when the listing fails, so a failed run produces
    no output.

    Raises:
        LseError: On any user-facing error.
    """
    buffer = io.StringIO()
    Lister(build_config(args), buffer).list_dir(args.directory)
    return buffer.getvalue()


def main() -> None:
    """Run the CLI entry point with process arguments.

    Parses args exactly once. Listings to stdout are streamed; with ``-o``
    the output is rendered first and written only on success. Exits with
    code 1 on user-facing errors.
    """
    parser = build_parser()
    args = parser.parse_args()  # single parse

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(name)s: %(message)s",
        )

    try:
        if args.output_file:
            output = _run_with_args(args)
        else:
            Lister(build_config(args), sys.stdout).list_dir(args.directory)
    except LseError as exc:
        logger.debug("Listing failed", exc_info=True)
        sys.stdout.flush()
        sys.stderr.write(f"lse: {exc}\n")
        sys.exit(1)

    if args.output_file:
        try:
            Path(args.output_file).write_text(output, encoding="utf-8", newline="")
        except OSError as exc:
            sys.stderr.write(f"lse: cannot write to '{args.output_file}': {exc}\n")
            sys.exit(1)
