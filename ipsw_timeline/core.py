from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .fetcher import fetch_feed
from .models import Release
from .normalizer import to_release
from .parser import parse_feed


logger = logging.getLogger(__name__)

DEFAULT_FEED_URL = "https://ipsw.me/timeline.rss"
DEFAULT_LIMIT = 15
DEFAULT_TIMEOUT = 10.0


def filter_releases(releases: Iterable[Release], contains: Optional[str]) -> List[Release]:
    """Keep releases whose original title contains `contains` (case-insensitive)."""
    if not contains or not contains.strip():
        return list(releases)
    needle = contains.lower()
    return [r for r in releases if needle in r.title.lower()]


def sort_releases(releases: Iterable[Release]) -> List[Release]:
    """Newest first. Python's sort is stable, so equal timestamps keep feed order."""
    return sorted(releases, key=lambda r: r.published_at, reverse=True)


def limit_releases(releases: List[Release], limit: Optional[int]) -> List[Release]:
    if limit and limit > 0:
        return releases[:limit]
    return releases


@dataclass
class FetchOptions:
    feed_url: str = DEFAULT_FEED_URL
    timeout: float = DEFAULT_TIMEOUT
    contains: Optional[str] = None
    limit: Optional[int] = DEFAULT_LIMIT


class TimelineFetcher:
    """
    High-level API: fetch the firmware feed and return normalized releases.

    Pipeline: fetch → parse → normalize → filter → sort (newest first) → limit

    Fetch and parse failures propagate as FeedFetchError / FeedParseError;
    there are no partial results.
    """

    def __init__(
        self,
        *,
        feed_url: str = DEFAULT_FEED_URL,
        timeout: float = DEFAULT_TIMEOUT,
        contains: Optional[str] = None,
        limit: Optional[int] = DEFAULT_LIMIT,
    ) -> None:
        self.options = FetchOptions(
            feed_url=feed_url,
            timeout=timeout,
            contains=contains,
            limit=limit,
        )

    def fetch(self) -> List[Release]:
        data = fetch_feed(self.options.feed_url, self.options.timeout)
        entries = parse_feed(data)

        releases = [to_release(e) for e in entries]
        releases = filter_releases(releases, self.options.contains)
        releases = sort_releases(releases)
        releases = limit_releases(releases, self.options.limit)

        logger.info(
            "%d feed items -> %d releases shown", len(entries), len(releases)
        )
        return releases
