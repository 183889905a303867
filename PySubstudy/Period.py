from __future__ import annotations

from dataclasses import dataclass
import math

from PySubstudy.Helpers.Localization import _

class InvalidPeriodError(ValueError):
    """ A period must begin strictly before it ends, at a finite time """
    pass

@dataclass(frozen=True)
class Period:
    """
    A half-open time interval [begin, end) in seconds.
    """
    begin : float
    end : float

    def __post_init__(self):
        if not (math.isfinite(self.begin) and math.isfinite(self.end)):
            raise InvalidPeriodError(_("Invalid period: {begin} --> {end} is not a finite time").format(begin=self.begin, end=self.end))
        if not self.begin < self.end:
            raise InvalidPeriodError(_("Invalid period: {begin} is not before {end}").format(begin=self.begin, end=self.end))

    @classmethod
    def _unchecked(cls, begin : float, end : float) -> Period:
        """
        Build a period without validation. Only shift() uses this: moved periods keep whatever endpoints the offset gives them.
        """
        period = cls.__new__(cls)
        object.__setattr__(period, 'begin', begin)
        object.__setattr__(period, 'end', end)
        return period

    @property
    def duration(self) -> float:
        return self.end - self.begin

    def shift(self, offset : float) -> Period:
        """
        Return a new period with both endpoints moved by offset seconds.

        Shifts deliberately skip the begin < end check, so merging never fails.
        """
        return Period._unchecked(self.begin + offset, self.end + offset)

    def __str__(self) -> str:
        return f"{self.begin:.3f} --> {self.end:.3f}"
