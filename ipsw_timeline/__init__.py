"""
ipsw_timeline

Fetches the IPSW firmware timeline RSS feed and turns each free-text entry into
a structured Release (platform, version, build, device/notes, pre-release flag).

Core ideas:
- Input: one RSS feed URL
- Process: fetch → parse → normalize → filter → sort (newest first) → limit
- Output: List[Release], optionally rendered as a terminal table

Example
-------
from ipsw_timeline import TimelineFetcher

fetcher = TimelineFetcher(contains="beta", limit=10)

for release in fetcher.fetch():
    print(release.display_date, release.platform_label, release.display_version)
"""
from .models import Platform, RawEntry, Release
from .core import TimelineFetcher
from .normalizer import to_release

__all__ = [
    "Platform",
    "RawEntry",
    "Release",
    "TimelineFetcher",
    "to_release",
]
