from __future__ import annotations

import logging

import requests

from .exceptions import FeedFetchError


logger = logging.getLogger(__name__)

USER_AGENT = "ipsw-timeline-cli/1.0 (+https://ipsw.me)"


def fetch_feed(url: str, timeout: float) -> bytes:
    """
    Fetch the feed URL with a single GET and return the raw response body.

    Raises FeedFetchError on transport failures, timeouts and non-2xx statuses.
    There is no retry; one failed request ends the run.
    """
    logger.debug("Fetching %s (timeout=%ss)", url, timeout)
    try:
        resp = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
    except requests.RequestException as e:
        raise FeedFetchError(str(e)) from e

    if resp.status_code < 200 or resp.status_code >= 300:
        raise FeedFetchError(f"unexpected status {resp.status_code}")

    logger.debug("Fetched %d bytes from %s", len(resp.content), url)
    return resp.content
