"""
Title normalization.

Feed titles are free text such as "iOS 17.5.1 (21F90) has been released." or
"iOS 18.0 beta 3 for iPhone16,1". They are taken apart by a fixed sequence of
stages, each one working on the output of the previous:

    strip_release_suffix -> split_device -> split_build
        -> split_platform_version -> canonical_platform

Pre-release detection runs on the output of the first stage.
"""
from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

from .models import Platform


_RELEASE_SUFFIXES = (
    " has been released.",
    " has been released",
    " released.",
    " released",
)

_DEVICE_MARKER = " for "

_PRERELEASE_MARKERS = ("beta", "rc", "release candidate")

_PLATFORM_ALIASES: Dict[str, Platform] = {
    "ios": Platform.IOS,
    "iphone": Platform.IOS,
    "ipados": Platform.IPADOS,
    "ipad": Platform.IPADOS,
    "macos": Platform.MACOS,
    "mac": Platform.MACOS,
    "watchos": Platform.WATCHOS,
    "watch": Platform.WATCHOS,
    "tvos": Platform.TVOS,
    "audioos": Platform.TVOS,
    "homepod": Platform.TVOS,
    "appletv": Platform.TVOS,
    "visionos": Platform.VISIONOS,
    "vision": Platform.VISIONOS,
}


class TitleParts(NamedTuple):
    platform_key: str
    platform_label: str
    version: str
    build: str
    device: str
    is_prerelease: bool


def strip_release_suffix(title: str) -> str:
    """Remove at most one trailing "... released" phrase, case-insensitively."""
    t = title.strip()
    lower = t.lower()
    for suffix in _RELEASE_SUFFIXES:
        if lower.endswith(suffix):
            return t[: len(t) - len(suffix)].strip()
    return t


def split_device(title: str) -> Tuple[str, str]:
    """Split on the first " for " into (main part, device)."""
    idx = title.lower().find(_DEVICE_MARKER)
    if idx >= 0:
        return title[:idx].strip(), title[idx + len(_DEVICE_MARKER):].strip()
    return title.strip(), ""


def split_build(main: str) -> Tuple[str, str]:
    """
    Split a trailing "(build)" group off the main part.

    The last "(" only counts when it is not the first character and the
    enclosed text is non-empty with no nested parentheses.
    """
    main = main.strip()
    if main.endswith(")"):
        start = main.rfind("(")
        if 0 < start < len(main) - 1:
            content = main[start + 1:-1].strip()
            if content and "(" not in content and ")" not in content:
                return main[:start].strip(), content
    return main, ""


def split_platform_version(base: str) -> Tuple[str, str]:
    """First whitespace token is the platform, the rest is the version."""
    parts = base.split()
    if not parts:
        return "Other", ""
    return parts[0], " ".join(parts[1:])


def canonical_platform(label: str) -> Platform:
    return _PLATFORM_ALIASES.get(label.lower().replace(" ", ""), Platform.OTHER)


def is_prerelease(title: str) -> bool:
    lower = title.lower()
    return any(marker in lower for marker in _PRERELEASE_MARKERS)


def normalize_title(title: str) -> TitleParts:
    """Run the full title pipeline. Never raises on odd input."""
    stripped = strip_release_suffix(title)
    main, device = split_device(stripped)
    base, build = split_build(main)
    label, version = split_platform_version(base)
    platform = canonical_platform(label)

    return TitleParts(
        platform_key=platform.key,
        platform_label=platform.label,
        version=version,
        build=build,
        device=device.strip(),
        is_prerelease=is_prerelease(stripped),
    )
