"""CLI argument parsing and entry point."""

from __future__ import annotations

import argparse
import sys

from duplifinder.finder import run_scan
from duplifinder.logging import configure_logging


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="duplifinder",
        description="Find duplicate files in one or more directory trees by size and content hash.",
    )
    parser.add_argument(
        "directories", nargs="*", metavar="DIR", help="Directory to scan recursively",
    )
    parser.add_argument(
        "--progress", action="store_true", help="Show a progress bar while hashing",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug details to stderr",
    )
    verbosity.add_argument(
        "-q", "--quiet", action="store_true", help="Only log warnings and errors",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Main entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.directories:
        parser.print_usage(sys.stderr)
        return 1

    configure_logging(verbose=args.verbose, quiet=args.quiet)

    report = run_scan(args.directories, progress=args.progress)
    print(report.format())
    return report.exit_code
