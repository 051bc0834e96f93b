from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from rich.console import Console
from rich.logging import RichHandler

from .errors import Tree2mdError
from .options import DEFAULT_IGNORE_FILE, DumpOptions
from .run import dump
from .source import resolve

log = logging.getLogger("tree2md")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tree2md",
        description=(
            "Append the text files of a directory (or Git repository) to a "
            "Markdown document, one fenced code block per file."
        ),
    )
    parser.add_argument(
        "root",
        help="Local directory, or a Git URL with an optional @branch suffix.",
    )
    parser.add_argument("output", help="Markdown file to create or append to.")
    parser.add_argument(
        "--ignore-file",
        default=DEFAULT_IGNORE_FILE,
        help=f"Ignore file name looked up in the root (default: {DEFAULT_IGNORE_FILE}).",
    )
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Extra ignore pattern; may be repeated.",
    )
    parser.add_argument(
        "--on-read-error",
        choices=("fail", "skip"),
        default="fail",
        help="Abort on an unreadable file (default) or warn and continue.",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log filter decisions.")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log warnings and errors.")
    return parser


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.WARNING if quiet else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[
            RichHandler(
                console=Console(stderr=True), rich_tracebacks=True, show_path=False
            )
        ],
        force=True,
    )


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose, args.quiet)

    options = DumpOptions(
        ignore_file=args.ignore_file,
        extra_patterns=tuple(args.exclude),
        on_read_error=args.on_read_error,
    )
    try:
        with resolve(args.root) as resolved:
            report = dump(resolved.path, args.output, options)
    except Tree2mdError as e:
        log.error("%s", e)
        return e.exit_code

    if report.skipped:
        log.warning("%d unreadable file(s) skipped.", len(report.skipped))
    log.info(
        "All files processed successfully and appended to %s (%d files).",
        args.output,
        report.count,
    )
    return 0


def run(argv: Optional[List[str]] = None) -> None:
    raise SystemExit(main(argv))
