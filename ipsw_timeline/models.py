from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class Platform(Enum):
    """
    Operating-system families a release can belong to.

    The value is the platform key, `label` is the display string. This table is
    the single source of truth for both canonicalization and labeling.
    """
    IOS = ("ios", "iOS")
    IPADOS = ("ipados", "iPadOS")
    MACOS = ("macos", "macOS")
    WATCHOS = ("watchos", "watchOS")
    TVOS = ("tvos", "tvOS")
    VISIONOS = ("visionos", "visionOS")
    OTHER = ("other", "Other")

    def __init__(self, key: str, label: str) -> None:
        self.key = key
        self.label = label


@dataclass(frozen=True)
class RawEntry:
    """One unprocessed feed item, straight out of the RSS document."""
    title: str
    link: str
    pub_date: str
    guid: str
    description: str


@dataclass(frozen=True)
class Release:
    """
    Structured record derived from one RawEntry.

    WARNING: Do not change fields lightly. The renderer and CLI depend on them.
    """
    title: str
    link: str
    guid: str
    published_at: datetime
    platform_key: str
    platform_label: str
    version: str
    build: str
    device: str
    notes: str
    device_or_notes: str
    is_prerelease: bool
    description: str = ""
    display_date: str = ""
    display_version: str = ""
