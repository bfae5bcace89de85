"""Command-line generator: writes the stats card to a local SVG file."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .card import (
    CardParams,
    DEFAULT_LENGTH,
    DEFAULT_MODE,
    DEFAULT_THEME_NAME,
    DEFAULT_USERNAME,
    StatsCardService,
)
from .logger import configure_logging, get_logger
from .monkeytype_base import CLI_TIMEOUT
from .stats import StatsFetcher
from .themes import ThemeResolver

DEFAULT_OUTPUT = "stats.svg"

log = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="monkeytype-card",
        description="Generate a Monkeytype personal-best stats card as SVG.",
    )
    parser.add_argument("-username", "--username", default=DEFAULT_USERNAME, help="Monkeytype username")
    parser.add_argument("-theme", "--theme", default=DEFAULT_THEME_NAME, help="Theme name")
    parser.add_argument("-mode", "--mode", default=DEFAULT_MODE, help="Mode (time/words)")
    parser.add_argument("-length", "--length", default=DEFAULT_LENGTH, help="Length (15/60/10...)")
    parser.add_argument("-output", "--output", default=DEFAULT_OUTPUT, help="Output file (default: %(default)s)")
    return parser


def main(argv: Optional[List[str]] = None, service: Optional[StatsCardService] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    if service is None:
        service = StatsCardService(
            ThemeResolver(timeout=CLI_TIMEOUT),
            StatsFetcher(timeout=CLI_TIMEOUT),
        )

    print(f"Generating stats for {args.username} (Theme: {args.theme})...")
    params = CardParams(username=args.username, theme=args.theme, mode=args.mode, length=args.length)
    result = service.build(params)
    if result.error is not None:
        log.warning("Error fetching stats: %s. Setting to 0.", result.error)

    try:
        with open(args.output, "w", encoding="utf-8") as fh:
            fh.write(result.svg)
    except OSError as e:
        log.error("could not write %s: %s", args.output, e)
        return 1

    print(f"{args.output} generated successfully!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
