"""CLI entrypoint for Cachetrim."""

from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import NoReturn

from cachetrim import __version__
from cachetrim.config import load_config
from cachetrim.constants.cli import (
    CLI_DESCRIPTION,
    EXIT_DIRTY_INDEX,
    EXIT_FATAL,
    EXIT_OK,
    EXIT_UNSUPPORTED_VERSION,
    EXIT_USAGE,
)
from cachetrim.exceptions import (
    CacheTrimError,
    ConfigError,
    DirtyIndexError,
    UnsupportedVersionError,
)
from cachetrim.trimmer import trim_cache


class _ArgumentParser(argparse.ArgumentParser):
    """Argument parser that reports usage errors with the CLI usage status."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def _target_kb(raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"could not parse target size: {raw!r}") from None
    if value < 0:
        raise argparse.ArgumentTypeError(f"target size must be non-negative, got {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    """Build top-level CLI parser."""
    parser = _ArgumentParser(
        prog="cachetrim",
        description=CLI_DESCRIPTION,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("profile", type=Path, help="Browser profile directory containing cache2/")
    parser.add_argument("target_kb", type=_target_kb, help="Target cache size in kilobytes")
    parser.add_argument("-c", "--config", type=Path, default=None, help="YAML config file")
    parser.add_argument(
        "-n",
        "--dry-run",
        action="store_true",
        help="Print the entries that would be evicted without deleting anything",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Log progress to stderr (repeat for debug output)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=_log_level(args.verbose), format="%(levelname)s %(message)s")

    if not args.profile.is_dir():
        print(f"Usage error: profile directory does not exist: {args.profile}", file=sys.stderr)
        return EXIT_USAGE
    if not os.access(args.profile, os.R_OK | os.X_OK):
        print(f"Usage error: profile directory is not readable: {args.profile}", file=sys.stderr)
        return EXIT_USAGE

    try:
        config = load_config(args.config)
    except ConfigError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return EXIT_USAGE

    try:
        trim_cache(
            args.profile,
            args.target_kb,
            config=config,
            dry_run=args.dry_run,
            report=_print_path,
        )
    except DirtyIndexError as exc:
        print(f"Precondition failed: {exc}", file=sys.stderr)
        return EXIT_DIRTY_INDEX
    except UnsupportedVersionError as exc:
        print(f"Precondition failed: {exc}", file=sys.stderr)
        return EXIT_UNSUPPORTED_VERSION
    except CacheTrimError as exc:
        print(f"Trim error: {exc}", file=sys.stderr)
        return EXIT_FATAL

    return EXIT_OK


def _print_path(path: Path) -> None:
    print(path, flush=True)


def _log_level(verbosity: int) -> int:
    if verbosity >= 2:
        return logging.DEBUG
    if verbosity == 1:
        return logging.INFO
    return logging.WARNING


if __name__ == "__main__":
    raise SystemExit(main())
