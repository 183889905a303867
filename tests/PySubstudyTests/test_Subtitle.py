import dataclasses
import unittest

from PySubstudy.Helpers.TestCases import LoggedTestCase
from PySubstudy.Period import Period
from PySubstudy.SrtGrammar import parse_subtitles
from PySubstudy.Subtitle import Subtitle


class TestSubtitle(LoggedTestCase):
    def setUp(self):
        super().setUp()
        self.subtitle = Subtitle(4, Period(61.5, 63.75), ["Line 1", "<i>Line 2</i>"])

    def test_to_string(self):
        expected = "4\n00:01:01,500 --> 00:01:03,750\nLine 1\n<i>Line 2</i>\n"
        self.assertLoggedEqual("subtitle text", expected, self.subtitle.to_string())
        self.assertLoggedEqual("str()", expected, str(self.subtitle))

    def test_plain_text(self):
        self.assertLoggedEqual("plain text", "Line 1 Line 2", self.subtitle.plain_text())

    def test_lines_are_immutable_sequence(self):
        self.assertLoggedEqual("lines", ("Line 1", "<i>Line 2</i>"), self.subtitle.lines)
        with self.assertRaises(dataclasses.FrozenInstanceError):
            self.subtitle.index = 5 # type: ignore[misc]

    def test_renumbered(self):
        renumbered = self.subtitle.renumbered(1)
        self.assertLoggedEqual("new index", 1, renumbered.index)
        self.assertLoggedEqual("period kept", self.subtitle.period, renumbered.period)
        self.assertLoggedEqual("original index", 4, self.subtitle.index)

    def test_shifted(self):
        shifted = self.subtitle.shifted(100.0)
        self.assertLoggedEqual("shifted period", Period(161.5, 163.75), shifted.period)
        self.assertLoggedEqual("index kept", 4, shifted.index)
        self.assertLoggedEqual("lines kept", self.subtitle.lines, shifted.lines)

    def test_equality(self):
        same = Subtitle(4, Period(61.5, 63.75), ("Line 1", "<i>Line 2</i>"))
        self.assertLoggedEqual("structurally equal", self.subtitle, same)

    def test_invalid_subtitle(self):
        self.assertLoggedRaises("no lines", ValueError, Subtitle, 1, Period(0.0, 1.0), [])
        self.assertLoggedRaises("negative index", ValueError, Subtitle, -1, Period(0.0, 1.0), ["Text"])

    def test_invalid_lines(self):
        for lines in [[""], ["Text", ""], ["Two\nlines"], ["Carriage\rreturn"]]:
            with self.subTest(lines=lines):
                self.assertLoggedRaises(repr(lines), ValueError, Subtitle, 1, Period(0.0, 1.0), lines)

    def test_whitespace_line_round_trip(self):
        subtitle = Subtitle(1, Period(0.0, 1.0), ["Hi", "   ", "there"])
        reparsed = parse_subtitles(subtitle.to_string())
        self.assertLoggedSequenceEqual("parsed back", [subtitle], reparsed)


if __name__ == '__main__':
    unittest.main()
