"""
PySubstudy - SRT subtitle parsing, serialisation and merging

Basic Usage
-----------

# Load a subtitle file in any text encoding
subs = SubtitleFile.from_path("episode.es.srt")

# Look up a subtitle and detect the language of the dialog
first = subs.find(1)
language = subs.detect_language()

# Join two transcription segments, the second starting at 600 seconds
combined = part1.append_with_offset(part2, 600.0)
combined.save("episode.srt")
"""
from PySubstudy.AppendWithOffset import AppendWithOffset, stitch_segments
from PySubstudy.Clean import clean_subtitle_file
from PySubstudy.Helpers.Time import format_time
from PySubstudy.Lang import Lang
from PySubstudy.Period import InvalidPeriodError, Period
from PySubstudy.SettingsType import SettingsType
from PySubstudy.Subtitle import Subtitle
from PySubstudy.SubtitleError import (
    SrtSyntaxError,
    SubtitleDecodeError,
    SubtitleError,
    SubtitleParseError,
    SubtitleReadError,
)
from PySubstudy.SubtitleFile import SubtitleFile
from PySubstudy.version import __version__

__all__ = [
    'AppendWithOffset',
    'InvalidPeriodError',
    'Lang',
    'Period',
    'SettingsType',
    'SrtSyntaxError',
    'Subtitle',
    'SubtitleDecodeError',
    'SubtitleError',
    'SubtitleFile',
    'SubtitleParseError',
    'SubtitleReadError',
    '__version__',
    'clean_subtitle_file',
    'format_time',
    'stitch_segments',
]
