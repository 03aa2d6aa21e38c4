"""
Terminal table output.

Color is applied here only, on top of text that is already laid out; Release
records never carry escape codes.
"""
from __future__ import annotations

import os
from datetime import timezone
from typing import IO, Iterable, Optional

from .models import Release


COLOR_MODES = ("auto", "always", "never")

DEFAULT_WIDTH = 100
INDENT = 2
DATE_WIDTH = 20
STRIPE_WIDTH = 1
PLATFORM_WIDTH = 12
VERSION_WIDTH = 24
GAP = 2
MIN_DEVICE_WIDTH = 16

STRIPE = "▌"

_PLATFORM_COLORS = {
    "ios": "31",
    "ipados": "36",
    "macos": "32",
}
_DEFAULT_COLOR = "35"


class Colorizer:
    def __init__(self, enabled: bool) -> None:
        self.enabled = enabled

    def wrap(self, code: str, s: str) -> str:
        if not self.enabled or not code or not s:
            return s
        return f"\033[{code}m{s}\033[0m"

    def dim(self, s: str) -> str:
        return self.wrap("2", s)

    def version(self, s: str, code: str, prerelease: bool) -> str:
        """Bold the whole version for pre-releases, otherwise bold only the digits."""
        if not s or not self.enabled:
            return s
        if prerelease:
            return self.wrap("1;" + code, s)
        out = [f"\033[{code}m"]
        for ch in s:
            if "0" <= ch <= "9":
                out.append(f"\033[1m{ch}\033[{code}m")
            else:
                out.append(ch)
        out.append("\033[0m")
        return "".join(out)


def platform_color(key: str) -> str:
    return _PLATFORM_COLORS.get(key, _DEFAULT_COLOR)


def should_enable_color(mode: str, stream: Optional[IO[str]] = None) -> bool:
    """Resolve auto/always/never. "auto" honors NO_COLOR and requires a TTY."""
    if mode == "always":
        return True
    if mode == "never":
        return False
    if os.environ.get("NO_COLOR"):
        return False
    isatty = getattr(stream, "isatty", None)
    try:
        return bool(isatty and isatty())
    except ValueError:
        # closed stream
        return False


def terminal_width() -> int:
    cols = os.environ.get("COLUMNS", "")
    try:
        n = int(cols)
    except ValueError:
        return DEFAULT_WIDTH
    return n if n > 0 else DEFAULT_WIDTH


def pad(s: str, width: int) -> str:
    if len(s) >= width:
        return s
    return s + " " * (width - len(s))


def truncate(s: str, width: int) -> str:
    return s if len(s) <= width else s[:width]


def fit(s: str, width: int) -> str:
    return pad(truncate(s, width), width)


def device_width(total_width: int) -> int:
    used = (
        INDENT + DATE_WIDTH + 1 + STRIPE_WIDTH + 1 + PLATFORM_WIDTH + 1
        + VERSION_WIDTH + GAP
    )
    return max(total_width - used, MIN_DEVICE_WIDTH)


def build_header(dev_width: int) -> str:
    return "{}{} {} {} {}  {}".format(
        " " * INDENT,
        pad("Published", DATE_WIDTH),
        " ",
        pad("Platform", PLATFORM_WIDTH),
        pad("Version (Build)", VERSION_WIDTH),
        pad("Device / Notes", dev_width),
    )


def day_divider(day: str, total_width: int) -> str:
    prefix = f" {day} "
    return prefix + "-" * max(total_width - len(prefix), 0)


def render_row(release: Release, dev_width: int, color: Colorizer) -> str:
    code = platform_color(release.platform_key)

    date_field = fit(release.display_date, DATE_WIDTH)
    platform_field = fit(release.platform_label, PLATFORM_WIDTH)
    version_field = fit(release.display_version, VERSION_WIDTH)
    device_field = fit(release.device_or_notes, dev_width)

    return "{}{} {} {} {}  {}".format(
        " " * INDENT,
        date_field,
        color.wrap(code, STRIPE),
        color.wrap(code, platform_field),
        color.version(version_field, code, release.is_prerelease),
        color.dim(device_field),
    )


def render_table(
    releases: Iterable[Release],
    enable_color: bool,
    out: IO[str],
    width: Optional[int] = None,
) -> None:
    """
    Write the header, then one row per release with a divider line whenever
    the UTC calendar day changes.
    """
    total_width = width if width and width > 0 else terminal_width()
    dev_width = device_width(total_width)
    color = Colorizer(enable_color)

    header = build_header(dev_width)
    out.write(header + "\n")
    out.write("-" * len(header) + "\n")

    last_day = None
    for r in releases:
        day = r.published_at.astimezone(timezone.utc).strftime("%Y-%m-%d")
        if day != last_day:
            last_day = day
            out.write(day_divider(day, total_width) + "\n")
        out.write(render_row(r, dev_width, color) + "\n")
