from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, replace

import regex

from PySubstudy.Helpers.Localization import _
from PySubstudy.Helpers.Text import strip_formatting
from PySubstudy.Helpers.Time import format_time
from PySubstudy.Period import Period

# A line of text holds at least one character and no line breaks
_LINE_PATTERN = regex.compile(r"[^\r\n]+")

@dataclass(frozen=True)
class Subtitle:
    """
    A single SRT subtitle: its sequence number, the period it is displayed and its lines of text.

    Attributes:
        index (int): Sequence number as written in the file. Not necessarily unique or contiguous.
        period (Period): Time period during which the subtitle is shown
        lines (tuple[str]): Lines of text, including any inline markup
    """
    index : int
    period : Period
    lines : tuple[str, ...]

    def __init__(self, index : int, period : Period, lines : Iterable[str]):
        object.__setattr__(self, 'index', index)
        object.__setattr__(self, 'period', period)
        object.__setattr__(self, 'lines', tuple(lines))

        if index < 0:
            raise ValueError(_("Subtitle index cannot be negative: {index}").format(index=index))
        if not self.lines:
            raise ValueError(_("Subtitle {index} has no text").format(index=index))
        for line in self.lines:
            if not _LINE_PATTERN.fullmatch(line):
                raise ValueError(_("Subtitle {index} has an empty or multi-line text line: {line}").format(index=index, line=repr(line)))

    @property
    def begin(self) -> float:
        return self.period.begin

    @property
    def end(self) -> float:
        return self.period.end

    def to_string(self) -> str:
        """
        Return the SRT representation of this subtitle, ending with a single line break.
        """
        text = "\n".join(self.lines)
        return f"{self.index}\n{format_time(self.period.begin)} --> {format_time(self.period.end)}\n{text}\n"

    def plain_text(self) -> str:
        """
        Return the text of the subtitle on a single line with markup removed.
        """
        return strip_formatting(" ".join(self.lines))

    def renumbered(self, index : int) -> Subtitle:
        return replace(self, index=index)

    def shifted(self, offset : float) -> Subtitle:
        return replace(self, period=self.period.shift(offset))

    def __str__(self) -> str:
        return self.to_string()
