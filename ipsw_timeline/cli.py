"""
Command-line entry point.

Usage:
    ipsw-timeline
    ipsw-timeline --limit 30 --contains beta
    ipsw-timeline -f https://ipsw.me/timeline.rss -C never
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .config import LOG_LEVELS, Settings, load_settings
from .core import TimelineFetcher
from .exceptions import FeedFetchError, FeedParseError, UsageError
from .render import COLOR_MODES, render_table, should_enable_color


logger = logging.getLogger(__name__)


def create_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ipsw-timeline",
        description="Show recent Apple firmware releases from the IPSW timeline feed.",
    )
    parser.add_argument(
        "-f", "--feed-url",
        default=settings.feed_url,
        help="RSS feed URL (default: %(default)s)",
    )
    parser.add_argument(
        "-l", "--limit",
        type=int,
        default=settings.limit,
        help="Number of entries to show, 0 for all (default: %(default)s)",
    )
    parser.add_argument(
        "-c", "--contains",
        default="",
        help="Case-insensitive substring filter on title",
    )
    parser.add_argument(
        "-t", "--timeout",
        type=float,
        default=settings.timeout,
        help="HTTP timeout in seconds (default: %(default)s)",
    )
    parser.add_argument(
        "-C", "--color",
        default=settings.color,
        help="Color output: auto|always|never (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Logging verbosity on stderr (default: %(default)s)",
    )
    return parser


def validate_args(args: argparse.Namespace) -> None:
    """Normalize flags in place. Raises UsageError before any network access."""
    args.feed_url = (args.feed_url or "").strip()
    args.contains = (args.contains or "").strip()
    args.color = (args.color or "").strip().lower()

    if not args.feed_url:
        raise UsageError("feed-url cannot be empty")
    if args.color not in COLOR_MODES:
        raise UsageError("invalid color mode: use auto, always, or never")


def setup_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def main(argv: Optional[List[str]] = None) -> int:
    settings = load_settings()
    args = create_parser(settings).parse_args(argv)
    setup_logging(args.log_level)

    try:
        validate_args(args)
    except UsageError as e:
        logger.error("%s", e)
        return 1

    fetcher = TimelineFetcher(
        feed_url=args.feed_url,
        timeout=args.timeout,
        contains=args.contains,
        limit=args.limit,
    )

    try:
        releases = fetcher.fetch()
    except FeedFetchError as e:
        logger.error("fetch error (%s): %s", args.feed_url, e)
        return 1
    except FeedParseError as e:
        logger.error("parse error (%s): %s", args.feed_url, e)
        return 1

    if not releases:
        return 0

    render_table(releases, should_enable_color(args.color, sys.stdout), sys.stdout)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
