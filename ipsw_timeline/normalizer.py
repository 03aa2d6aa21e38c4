from __future__ import annotations

from .descriptions import clean_description, normalize_space, notes_from_description
from .models import RawEntry, Release
from .parser import parse_pub_date
from .titles import normalize_title


# Shorter "device" strings are almost always a mis-split of the title.
_MIN_DEVICE_LEN = 4

DISPLAY_DATE_FORMAT = "%Y-%m-%d %H:%M UTC"


def compose_version(version: str, build: str) -> str:
    version = version.strip()
    build = build.strip()
    if not version:
        return build
    if not build:
        return version
    return f"{version} ({build})"


def combine_device_and_notes(device: str, notes: str) -> str:
    device = normalize_space(device)
    notes = normalize_space(notes)

    if not device and not notes:
        return ""
    if not device:
        return notes
    if len(device) < _MIN_DEVICE_LEN and notes:
        return notes
    if not notes:
        return device
    return f"{device} - {notes}"


def to_release(raw: RawEntry) -> Release:
    """
    Convert a RawEntry into a Release.

    Never raises on irregular text: unknown platforms map to "other", missing
    parts become empty strings and an unparseable date becomes EPOCH.
    """
    published_at = parse_pub_date(raw.pub_date)
    parts = normalize_title(raw.title)

    description = clean_description(raw.description)
    notes = notes_from_description(description)

    return Release(
        title=raw.title,
        link=raw.link,
        guid=raw.guid,
        published_at=published_at,
        platform_key=parts.platform_key,
        platform_label=parts.platform_label,
        version=parts.version,
        build=parts.build,
        device=parts.device,
        notes=notes,
        device_or_notes=combine_device_and_notes(parts.device, notes),
        is_prerelease=parts.is_prerelease,
        description=description,
        display_date=published_at.strftime(DISPLAY_DATE_FORMAT),
        display_version=compose_version(parts.version, parts.build),
    )
