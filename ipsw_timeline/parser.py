from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, List

import feedparser

from .exceptions import FeedParseError
from .models import EPOCH, RawEntry


logger = logging.getLogger(__name__)

# Tried in order, first match wins. The second field marks layouts ending in a
# zone abbreviation. strptime only knows UTC/GMT and the local names for %Z, so
# the abbreviation is split off and the time is read as UTC.
_PUB_DATE_FORMATS = (
    ("%a, %d %b %Y %H:%M:%S %z", False),  # RFC 1123, numeric zone; %d also takes "2"
    ("%a, %d %b %Y %H:%M:%S", True),      # RFC 1123, zone name
    ("%A, %d-%b-%y %H:%M:%S", True),      # RFC 850
    ("%a %b %d %H:%M:%S %Y", False),      # ANSI C
)

_ZONE_NAME = re.compile(r"^(.*\S)\s+([A-Za-z]+)$")

# feedparser flags these as bozo but the document itself is still usable
_BENIGN_BOZO = (
    feedparser.CharacterEncodingOverride,
    feedparser.NonXMLContentType,
)


def parse_pub_date(value: str) -> datetime:
    """
    Convert an RSS pubDate string into a timezone-aware UTC datetime.

    Unparseable values return the EPOCH sentinel instead of failing.
    """
    s = (value or "").strip()
    zoned = _ZONE_NAME.match(s)
    for fmt, zone_name in _PUB_DATE_FORMATS:
        if zone_name:
            if not zoned:
                continue
            text = zoned.group(1)
        else:
            text = s
        try:
            dt = datetime.strptime(text, fmt)
        except ValueError:
            continue
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    return EPOCH


def _text(entry: Dict[str, Any], *keys: str) -> str:
    for k in keys:
        v = entry.get(k)
        if isinstance(v, str):
            return v
    return ""


def to_raw_entry(entry: Dict[str, Any]) -> RawEntry:
    """Map a feedparser entry to a RawEntry. Missing fields become empty strings."""
    return RawEntry(
        title=_text(entry, "title"),
        link=_text(entry, "link"),
        pub_date=_text(entry, "published", "updated"),
        guid=_text(entry, "id", "guid"),
        description=_text(entry, "description", "summary"),
    )


def parse_feed(data: bytes) -> List[RawEntry]:
    """
    Deserialize an RSS document (channel with a sequence of items).

    Raises FeedParseError when the document is malformed.
    """
    # Descriptions must reach the tag stripper untouched
    feed = feedparser.parse(data, sanitize_html=False, resolve_relative_uris=False)

    if getattr(feed, "bozo", 0):
        exc = getattr(feed, "bozo_exception", None)
        if not isinstance(exc, _BENIGN_BOZO):
            msg = "invalid RSS document"
            if exc:
                msg += f" ({exc})"
            raise FeedParseError(msg)
        logger.info("Ignoring feed warning: %s", exc)

    entries = getattr(feed, "entries", None)
    if not isinstance(entries, list):
        raise FeedParseError("feed has no items")

    logger.debug("Parsed %d feed items", len(entries))
    return [to_raw_entry(e) for e in entries]
