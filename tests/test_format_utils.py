import sys
import os
import re
import unittest
from datetime import datetime, timedelta, timezone

# Add the parent directory to sys.path to import the kimaipy package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from kimaipy.utils.format_utils import format_hm, elapsed, sanitize_server_url
from kimaipy.utils.date_utils import now_iso, parse_timestamp


class TestFormatUtils(unittest.TestCase):
    """Test duration formatting and URL helpers."""

    def test_format_hm(self):
        """Test formatting seconds as HH:MM."""
        test_cases = [
            (0, "00:00"),
            (59, "00:00"),
            (60, "00:01"),
            (3600, "01:00"),
            (5400, "01:30"),
            (26 * 3600 + 5 * 60, "26:05"),
            (-1800, "-00:30"),
        ]

        for seconds, expected in test_cases:
            with self.subTest(seconds=seconds):
                self.assertEqual(format_hm(seconds), expected)

    def test_elapsed_between_timestamps(self):
        """Test elapsed time of finished measurements."""
        test_cases = [
            ("2023-01-01T10:00:00+0100", "2023-01-01T10:07:00+0100", "00:07"),
            ("2023-01-01T10:00:00+0100", "2023-01-01T12:30:59+0100", "02:30"),
            ("2023-01-01T10:00:00+0100", "2023-01-02T12:05:00+0100", "26:05"),
            ("2023-01-01T10:00:00+01:00", "2023-01-01T10:00:00Z", "01:00"),
            ("2023-01-01T10:00:00+0100", "2023-01-01T10:00:00+0100", "00:00"),
        ]

        for begin, end, expected in test_cases:
            with self.subTest(begin=begin, end=end):
                self.assertEqual(elapsed(begin, end), expected)

    def test_elapsed_format_is_padded(self):
        """Hours and minutes always have at least two digits, minutes stay below 60."""
        begin = datetime(2023, 3, 1, 8, 0, tzinfo=timezone.utc)
        for minutes in (0, 1, 9, 59, 60, 61, 599, 1439, 1441, 6000):
            with self.subTest(minutes=minutes):
                end = begin + timedelta(minutes=minutes)
                result = elapsed(begin.isoformat(), end.isoformat())
                match = re.fullmatch(r"(\d{2,}):(\d{2})", result)
                self.assertIsNotNone(match)
                self.assertLess(int(match.group(2)), 60)
                self.assertEqual(int(match.group(1)) * 60 + int(match.group(2)), minutes)

    def test_elapsed_until_now(self):
        """Without an end the duration runs until now."""
        now = datetime(2023, 1, 1, 12, 45, tzinfo=timezone.utc)
        self.assertEqual(elapsed("2023-01-01T10:00:00+0000", now=now), "02:45")
        self.assertEqual(elapsed("2023-01-01T10:00:00+0000", "", now=now), "02:45")

    def test_elapsed_invalid_begin(self):
        """An unreadable begin gives an empty duration."""
        self.assertEqual(elapsed("not a date"), "")

    def test_sanitize_server_url(self):
        """Trailing slashes are removed."""
        self.assertEqual(sanitize_server_url("https://kimai.example.com///"), "https://kimai.example.com")
        self.assertEqual(sanitize_server_url("https://kimai.example.com"), "https://kimai.example.com")
        self.assertEqual(sanitize_server_url("https://example.com/kimai/"), "https://example.com/kimai")


class TestDateUtils(unittest.TestCase):
    """Test timestamp parsing."""

    def test_parse_timestamp(self):
        """Test the timestamp forms the server sends."""
        expected = datetime(2023, 1, 1, 9, 0, tzinfo=timezone.utc)
        for value in ("2023-01-01T10:00:00+0100", "2023-01-01T10:00:00+01:00", "2023-01-01T09:00:00Z"):
            with self.subTest(value=value):
                self.assertEqual(parse_timestamp(value), expected)

    def test_parse_timestamp_invalid(self):
        """Missing or broken timestamps are None."""
        for value in (None, "", "yesterday", 12):
            with self.subTest(value=value):
                self.assertIsNone(parse_timestamp(value))

    def test_now_iso_has_offset(self):
        """The begin time carries an offset and no microseconds."""
        value = now_iso(datetime(2023, 5, 7, 10, 0, 0, 123456, tzinfo=timezone.utc))
        self.assertEqual(value, datetime(2023, 5, 7, 10, 0, 0, tzinfo=timezone.utc).astimezone().isoformat())
        self.assertIsNotNone(parse_timestamp(now_iso()).utcoffset())

if __name__ == '__main__':
    unittest.main()
