"""Unit tests for the terminal table renderer."""

import io
import os
import unittest
from dataclasses import replace
from datetime import datetime, timezone
from unittest.mock import MagicMock, patch

from ipsw_timeline.models import RawEntry
from ipsw_timeline.normalizer import to_release
from ipsw_timeline.render import (
    Colorizer,
    MIN_DEVICE_WIDTH,
    STRIPE,
    day_divider,
    device_width,
    fit,
    render_table,
    should_enable_color,
    terminal_width,
)


def make(title, pub_date, description=""):
    return to_release(RawEntry(title, "", pub_date, "", description))


class TestLayout(unittest.TestCase):
    def test_fit(self):
        self.assertEqual(fit("abc", 5), "abc  ")
        self.assertEqual(fit("abcdef", 3), "abc")
        self.assertEqual(fit("▌▌", 3), "▌▌ ")

    def test_device_width(self):
        self.assertEqual(device_width(100), 36)
        self.assertEqual(device_width(40), MIN_DEVICE_WIDTH)

    def test_day_divider(self):
        self.assertEqual(day_divider("2024-05-20", 20), " 2024-05-20 --------")
        self.assertEqual(day_divider("2024-05-20", 5), " 2024-05-20 ")

    @patch.dict(os.environ, {"COLUMNS": "120"})
    def test_terminal_width_from_env(self):
        self.assertEqual(terminal_width(), 120)

    @patch.dict(os.environ, {"COLUMNS": "wide"})
    def test_terminal_width_default(self):
        self.assertEqual(terminal_width(), 100)


class TestColor(unittest.TestCase):
    def test_disabled_is_plain(self):
        c = Colorizer(False)
        self.assertEqual(c.wrap("31", "x"), "x")
        self.assertEqual(c.version("17.5", "31", False), "17.5")

    def test_wrap(self):
        c = Colorizer(True)
        self.assertEqual(c.wrap("31", "x"), "\033[31mx\033[0m")
        self.assertEqual(c.wrap("31", ""), "")
        self.assertEqual(c.dim("n"), "\033[2mn\033[0m")

    def test_version_digits_bold(self):
        c = Colorizer(True)
        self.assertEqual(
            c.version("1.a", "32", False),
            "\033[32m\033[1m1\033[32m.a\033[0m",
        )
        self.assertEqual(c.version("1b", "32", True), "\033[1;32m1b\033[0m")

    def test_should_enable_color(self):
        tty = MagicMock()
        tty.isatty.return_value = True
        pipe = io.StringIO()

        self.assertTrue(should_enable_color("always", pipe))
        self.assertFalse(should_enable_color("never", tty))
        with patch.dict(os.environ, {}, clear=True):
            self.assertTrue(should_enable_color("auto", tty))
            self.assertFalse(should_enable_color("auto", pipe))
        with patch.dict(os.environ, {"NO_COLOR": "1"}):
            self.assertFalse(should_enable_color("auto", tty))


class TestRenderTable(unittest.TestCase):
    def setUp(self):
        self.releases = [
            make("iOS 18.0 beta 3 for iPhone16,1", "Tue, 09 Jul 2024 18:30:00 +0000"),
            make("macOS 14.6 (23G80)", "Tue, 09 Jul 2024 02:00:00 +0000"),
            make(
                "iOS 17.5.1 (21F90) has been released.",
                "Mon, 20 May 2024 17:00:00 +0000",
                "iOS 17.5.1 has been released. Fixes bugs.",
            ),
        ]

    def test_plain_output(self):
        out = io.StringIO()
        render_table(self.releases, False, out, width=100)
        lines = out.getvalue().splitlines()

        self.assertEqual(len(lines), 2 + 2 + 3)
        self.assertTrue(lines[0].startswith("  Published"))
        self.assertIn("Version (Build)", lines[0])
        self.assertIn("Device / Notes", lines[0])
        self.assertEqual(set(lines[1]), {"-"})
        self.assertEqual(lines[2], day_divider("2024-07-09", 100))
        expected = "  2024-07-09 18:30 UTC {} {} {}  iPhone16,1".format(
            STRIPE, "iOS".ljust(12), "18.0 beta 3".ljust(24)
        )
        self.assertEqual(lines[3].rstrip(), expected)
        self.assertIn("macOS", lines[4])
        self.assertIn("14.6 (23G80)", lines[4])
        self.assertEqual(lines[5], day_divider("2024-05-20", 100))
        self.assertIn("17.5.1 (21F90)", lines[6])
        self.assertTrue(lines[6].rstrip().endswith("Fixes bugs."))
        self.assertNotIn("\033[", out.getvalue())

    def test_color_output(self):
        out = io.StringIO()
        render_table(self.releases[:1], True, out, width=100)
        text = out.getvalue()
        self.assertIn("\033[31m" + STRIPE + "\033[0m", text)
        self.assertIn("\033[1;31m18.0 beta 3", text)
        self.assertIn("\033[2miPhone16,1", text)

    def test_row_uses_record_display_fields(self):
        r = replace(self.releases[0], platform_label="iPhone", display_version="18.0 b3 (22A5297f)")
        out = io.StringIO()
        render_table([r], False, out, width=100)
        row = out.getvalue().splitlines()[3]
        self.assertIn("iPhone       18.0 b3 (22A5297f)", row)

    def test_day_change_uses_utc(self):
        late = make("iOS 17.6", "Tue, 09 Jul 2024 23:30:00 -0400")
        out = io.StringIO()
        render_table([late], False, out, width=80)
        self.assertIn(" 2024-07-10 ", out.getvalue().splitlines()[2])


if __name__ == "__main__":
    unittest.main()
