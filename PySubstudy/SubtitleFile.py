from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import logging
import os

from PySubstudy.AppendWithOffset import AppendWithOffset
from PySubstudy.Helpers.Decode import smart_decode
from PySubstudy.Helpers.Localization import _
from PySubstudy.Lang import Lang
from PySubstudy.SettingsType import SettingsType
from PySubstudy.SrtGrammar import parse_subtitles
from PySubstudy.Subtitle import Subtitle
from PySubstudy.SubtitleError import SubtitleDecodeError, SubtitleParseError, SubtitleReadError

BOM = "\ufeff"

@dataclass(frozen=True)
class SubtitleFile(AppendWithOffset):
    """
    The contents of an SRT subtitle file, in file order.

    No ordering or uniqueness is enforced across subtitles: overlapping periods,
    out-of-order times and duplicate indices are all preserved as read.
    """
    subtitles : tuple[Subtitle, ...]

    def __init__(self, subtitles : Iterable[Subtitle] = ()):
        object.__setattr__(self, 'subtitles', tuple(subtitles))

    @classmethod
    def from_str(cls, data : str) -> SubtitleFile:
        """
        Parse decoded SRT text. Any leading byte-order marks are ignored.

        Raises:
            SubtitleParseError: if the text is not valid SRT
        """
        try:
            return cls(parse_subtitles(data.lstrip(BOM)))
        except SubtitleParseError as e:
            raise SubtitleParseError(_("could not parse subtitles"), e) from e

    @classmethod
    def from_path(cls, path : str|os.PathLike) -> SubtitleFile:
        """
        Read and parse the SRT file at path, whatever its text encoding.

        Raises:
            SubtitleReadError: if the file cannot be opened, read or decoded
            SubtitleParseError: if the contents are not valid SRT
        """
        try:
            file = open(path, 'rb')
        except OSError as e:
            raise SubtitleReadError(_("could not open {path}").format(path=path), e) from e

        with file:
            try:
                data = file.read()
            except OSError as e:
                raise SubtitleReadError(_("could not read {path}").format(path=path), e) from e

        try:
            text = smart_decode(data)
        except SubtitleDecodeError as e:
            raise SubtitleReadError(_("could not read {path}").format(path=path), e) from e

        try:
            subtitle_file = cls.from_str(text)
        except SubtitleParseError as e:
            raise SubtitleParseError(_("could not parse {path}").format(path=path), e) from e

        logging.debug(f"Loaded {len(subtitle_file.subtitles)} subtitles from {path}")
        return subtitle_file

    @classmethod
    def cleaned_from_path(cls, path : str|os.PathLike, settings : SettingsType|None = None) -> SubtitleFile:
        """
        Read the SRT file at path and normalise it with clean_subtitle_file.
        """
        from PySubstudy.Clean import clean_subtitle_file

        return clean_subtitle_file(cls.from_path(path), settings)

    def to_string(self) -> str:
        """
        Serialise the subtitles as SRT, preceded by a byte-order mark.

        Indices are written exactly as stored.
        """
        # Windows players use the BOM to recognise UTF-8 subtitles
        return BOM + "\n".join(subtitle.to_string() for subtitle in self.subtitles)

    def save(self, path : str|os.PathLike) -> None:
        """
        Write the subtitles to path as UTF-8 encoded SRT.
        """
        with open(path, 'w', encoding='utf-8', newline='') as f:
            f.write(self.to_string())

        logging.debug(f"Saved {len(self.subtitles)} subtitles to {path}")

    def find(self, index : int) -> Subtitle|None:
        """
        Return the first subtitle with the given index, or None if there is none.
        """
        return next((subtitle for subtitle in self.subtitles if subtitle.index == index), None)

    def detect_language(self) -> Lang|None:
        """
        Guess the language of the dialog from the plain text of every subtitle.
        """
        text = "\n".join(subtitle.plain_text() for subtitle in self.subtitles)
        return Lang.for_text(text)

    @property
    def entries(self) -> tuple[Subtitle, ...]:
        return self.subtitles

    def with_entries(self, entries : Iterable[Subtitle]) -> SubtitleFile:
        return SubtitleFile(entries)

    def __len__(self) -> int:
        return len(self.subtitles)

    def __str__(self) -> str:
        return self.to_string()
