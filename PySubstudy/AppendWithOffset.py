from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from typing import Any, Protocol, TypeVar

from PySubstudy.Helpers.Localization import _

EntryT = TypeVar('EntryT', bound='OffsetEntry')
AppendableT = TypeVar('AppendableT', bound='AppendWithOffset')

class OffsetEntry(Protocol):
    """
    A numbered, timed entry in a time-indexed format
    """
    def renumbered(self : EntryT, index : int) -> EntryT: ...
    def shifted(self : EntryT, offset : float) -> EntryT: ...

class AppendWithOffset(ABC):
    """
    Interface for time-indexed formats that can be appended with a time offset.

    Used to reassemble independently transcribed segments into a single timeline.
    Implementations expose their entries and how to rebuild themselves from a list
    of entries, and share the append algorithm.
    """

    @property
    @abstractmethod
    def entries(self) -> Sequence[Any]:
        raise NotImplementedError

    @abstractmethod
    def with_entries(self : AppendableT, entries : Iterable[Any]) -> AppendableT:
        raise NotImplementedError

    def append_with_offset(self : AppendableT, other : AppendableT, time_offset : float) -> AppendableT:
        """
        Append another file after this one, shifting it by time_offset seconds.

        Entries of both files are renumbered from 1 in order. Entries of this file keep
        their times; entries of the other file have both endpoints moved by time_offset.
        Neither input is modified.
        """
        merged = [ entry.renumbered(number) for number, entry in enumerate(self.entries, start=1) ]
        next_number = len(merged) + 1
        merged.extend(entry.renumbered(number).shifted(time_offset) for number, entry in enumerate(other.entries, start=next_number))
        return self.with_entries(merged)

def stitch_segments(segments : Iterable[tuple[AppendableT, float]]) -> AppendableT:
    """
    Join a sequence of (file, start time) transcription segments into a single file.

    The offset of the first segment is applied too, so each segment ends up at its start time.
    """
    result : AppendableT|None = None
    for segment, offset in segments:
        if result is None:
            result = segment.with_entries([]).append_with_offset(segment, offset)
        else:
            result = result.append_with_offset(segment, offset)

    if result is None:
        raise ValueError(_("No segments to stitch"))

    return result
