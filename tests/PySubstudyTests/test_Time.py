import unittest

from PySubstudy.Helpers.Time import format_time, parse_time
from PySubstudy.Helpers.TestCases import LoggedTestCase


class TestFormatTime(LoggedTestCase):
    test_cases = [
        (0.0, "00:00:00,000"),
        (1.5, "00:00:01,500"),
        (62.328, "00:01:02,328"),
        (72.839, "00:01:12,839"),
        (3681.5, "01:01:21,500"),
        (90000.0, "25:00:00,000"),
        (360000.25, "100:00:00,250"),
    ]

    def test_format_time(self):
        for seconds, expected in self.test_cases:
            with self.subTest(seconds=seconds):
                self.assertLoggedEqual(f"format_time({seconds})", expected, format_time(seconds), input_value=seconds)


class TestParseTime(LoggedTestCase):
    test_cases = [
        (("00", "00", "00", "000"), 0.0),
        (("00", "01", "02", "328"), 62.328),
        (("01", "01", "21", "500"), 3681.5),
        (("00", "00", "01", "5"), 1.5),
        (("00", "75", "00", "000"), 4500.0),
    ]

    def test_parse_time(self):
        for parts, expected in self.test_cases:
            with self.subTest(parts=parts):
                self.assertLoggedAlmostEqual(f"parse_time{parts}", expected, parse_time(*parts))

    def test_parsed_time_formats_back(self):
        result = format_time(parse_time("00", "01", "04", "664"))
        self.assertLoggedEqual("formatted parse result", "00:01:04,664", result)


if __name__ == '__main__':
    unittest.main()
