"""Logpager CLI entry point.

Allows running via `python -m logpager` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import argparse
import importlib.metadata
import logging
import sys
from typing import Optional, Sequence

from .config import get_settings_store


def get_version_string() -> str:
    try:
        return importlib.metadata.version("logpager")
    except importlib.metadata.PackageNotFoundError:
        return "unknown"


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="logpager",
        description="Page through a large plain-text file one fixed-size window at a time.",
    )
    parser.add_argument("file", nargs="?", help="text file to open")
    parser.add_argument("-V", "--version", action="store_true", help="print version and exit")
    parser.add_argument("--page-size", type=_positive_int, metavar="N",
                        help="characters per page (overrides settings.json)")
    parser.add_argument("--textual", action="store_true", help="use the Textual interface")
    parser.add_argument("--log-file", metavar="PATH", help="write debug log to PATH")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    if args.version:
        print(get_version_string())
        return

    if args.log_file:
        logging.basicConfig(
            filename=args.log_file,
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    settings = get_settings_store().load().with_overrides(page_size=args.page_size)

    # Lazy imports keep --version free of UI dependencies
    if args.textual:
        from .textual_app import LogPagerApp
        LogPagerApp(filename=args.file, settings=settings).run()
        return

    from .pager import Pager
    pager = Pager(settings)
    if args.file:
        pager.open_file(args.file)
    pager.run()


if __name__ == "__main__":  # pragma: no cover
    main(sys.argv[1:])
