import logging

from PySubstudy.Helpers.Localization import _
from PySubstudy.SettingsType import SettingsType
from PySubstudy.Subtitle import Subtitle
from PySubstudy.SubtitleFile import SubtitleFile

default_cleanup_settings = SettingsType({
    'strip_whitespace': True,
    'remove_empty': True,
    'sort_by_time': False,
    'renumber': True,
})

def clean_subtitle_file(subtitle_file : SubtitleFile, settings : SettingsType|None = None) -> SubtitleFile:
    """
    Normalise a parsed subtitle file.

    Settings (all optional):
        strip_whitespace: remove surrounding whitespace from each line with text on it
            (whitespace-only lines stay as they are unless remove_empty is set)
        remove_empty: drop lines with no text, and subtitles left with no lines
        sort_by_time: order subtitles by start time (stable)
        renumber: number subtitles from 1 in output order
    """
    options = SettingsType(default_cleanup_settings)
    options.update(settings or {})

    strip_whitespace = options.get_bool('strip_whitespace')
    remove_empty = options.get_bool('remove_empty')

    subtitles : list[Subtitle] = []
    discarded = 0
    for subtitle in subtitle_file.subtitles:
        # A stripped whitespace-only line would be empty, which no subtitle may contain
        lines = [ (line.strip() or line) if strip_whitespace else line for line in subtitle.lines ]
        if remove_empty:
            lines = [ line for line in lines if line.strip() ]
            if not lines:
                discarded += 1
                continue

        subtitles.append(Subtitle(subtitle.index, subtitle.period, lines))

    if discarded:
        logging.warning(_("{count} subtitles had no text and were removed").format(count=discarded))

    if options.get_bool('sort_by_time'):
        subtitles.sort(key=lambda subtitle: subtitle.begin)

    if options.get_bool('renumber'):
        subtitles = [ subtitle.renumbered(number) for number, subtitle in enumerate(subtitles, start=1) ]

    return SubtitleFile(subtitles)
