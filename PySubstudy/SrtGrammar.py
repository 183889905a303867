"""
Recursive-descent parser for the SRT subtitle format.

    file        := blank_lines? subtitle (blank_lines subtitle)* blank_lines?
    subtitle    := index NEWLINE time_range NEWLINE text_lines
    time_range  := time " --> " time
    time        := digits ":" digits ":" digits "," digits
    text_lines  := line (NEWLINE line)*
    line        := one or more characters other than CR and LF
    blank_lines := NEWLINE+
    NEWLINE     := "\\r"? "\\n"

An input with no subtitles at all (only blank lines) is accepted and yields an empty file.
The whole input must match: the first deviation raises SrtSyntaxError.
"""
from __future__ import annotations

import regex

from PySubstudy.Helpers.Localization import _
from PySubstudy.Helpers.Time import parse_time
from PySubstudy.Period import Period
from PySubstudy.Subtitle import Subtitle
from PySubstudy.SubtitleError import SrtSyntaxError

_DIGITS = regex.compile(r'[0-9]+')
_NEWLINE = regex.compile(r'\r?\n')
_LINE = regex.compile(r'[^\r\n]+')
_TIME = regex.compile(r'([0-9]+):([0-9]+):([0-9]+),([0-9]+)')
_ARROW = " --> "

# Length added to subtitles that begin and end at the same moment
ZERO_DURATION_FIX = 0.001

class SrtParser:
    """
    Parses decoded SRT text into a list of Subtitle.

    Positions are character offsets into the text, so multi-byte dialog is never split.
    """
    def __init__(self, text : str):
        self.text : str = text
        self.pos : int = 0

    def parse(self) -> list[Subtitle]:
        subtitles : list[Subtitle] = []
        self._blank_lines()

        if not self._at_end():
            subtitles.append(self._subtitle())
            while self._blank_lines() and not self._at_end():
                subtitles.append(self._subtitle())

        self._blank_lines()
        if not self._at_end():
            raise self._error(_("expected a blank line or end of file"))

        return subtitles

    def _subtitle(self) -> Subtitle:
        index = self._index()
        self._expect_newline()
        period = self._time_period()
        self._expect_newline()
        lines = self._lines()
        return Subtitle(index, period, lines)

    def _index(self) -> int:
        match = _DIGITS.match(self.text, self.pos)
        if not match:
            raise self._error(_("expected subtitle index"))
        self.pos = match.end()
        return int(match.group())

    def _time_period(self) -> Period:
        start = self.pos
        begin = self._time()
        if not self.text.startswith(_ARROW, self.pos):
            raise self._error(_("expected ' --> '"))
        self.pos += len(_ARROW)
        end = self._time()

        try:
            begin_time, end_time = parse_time(*begin), parse_time(*end)
            if begin_time == end_time:
                # Forced-alignment tools emit zero-length cues
                end_time += ZERO_DURATION_FIX

            return Period(begin_time, end_time)
        except ValueError as e:
            # Includes InvalidPeriodError, and hour fields too long to be a number
            raise self._error(_("invalid time period"), start) from e

    def _time(self) -> tuple[str, str, str, str]:
        match = _TIME.match(self.text, self.pos)
        if not match:
            raise self._error(_("expected timestamp HH:MM:SS,mmm"))
        self.pos = match.end()
        return match.group(1), match.group(2), match.group(3), match.group(4)

    def _lines(self) -> list[str]:
        lines = [ self._line() ]
        while True:
            mark = self.pos
            if not self._newline():
                break
            match = _LINE.match(self.text, self.pos)
            if not match:
                # The line break belongs to the separator after this subtitle
                self.pos = mark
                break
            lines.append(match.group())
            self.pos = match.end()
        return lines

    def _line(self) -> str:
        match = _LINE.match(self.text, self.pos)
        if not match:
            raise self._error(_("expected subtitle text"))
        self.pos = match.end()
        return match.group()

    def _newline(self) -> bool:
        match = _NEWLINE.match(self.text, self.pos)
        if not match:
            return False
        self.pos = match.end()
        return True

    def _expect_newline(self) -> None:
        if not self._newline():
            raise self._error(_("expected line break"))

    def _blank_lines(self) -> bool:
        found = False
        while self._newline():
            found = True
        return found

    def _at_end(self) -> bool:
        return self.pos >= len(self.text)

    def _error(self, message : str, position : int|None = None) -> SrtSyntaxError:
        position = self.pos if position is None else position
        line = self.text.count("\n", 0, position) + 1
        column = position - (self.text.rfind("\n", 0, position) + 1) + 1
        return SrtSyntaxError(message, position, line, column)

def parse_subtitles(text : str) -> list[Subtitle]:
    """
    Parse SRT text (without a byte-order mark) into a list of subtitles.

    Raises:
        SrtSyntaxError: if the text is not valid SRT
    """
    return SrtParser(text).parse()
