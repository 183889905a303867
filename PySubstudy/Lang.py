from __future__ import annotations

from dataclasses import dataclass
import logging
import os

import regex
from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException

from PySubstudy.Helpers.Localization import _

# Fixed seed so that repeated runs classify the same text the same way
DetectorFactory.seed = 0

minimum_confidence = float(os.getenv('LANGUAGE_CONFIDENCE', '0.5'))

_CODE_PATTERN = regex.compile(r'^([a-z]{2,3})(?:[-_][a-z0-9]+)*$')

@dataclass(frozen=True)
class Lang:
    """
    A natural language, identified by its ISO 639 code (e.g. 'en', 'es').
    """
    code : str

    @classmethod
    def iso639(cls, code : str) -> Lang:
        """
        Look up a language by ISO 639-1 or ISO 639-3 code. Region suffixes are discarded ('zh-cn' -> 'zh').
        """
        match = _CODE_PATTERN.match(code.strip().lower())
        if not match:
            raise ValueError(_("Not an ISO 639 language code: {code}").format(code=code))
        return cls(match.group(1))

    @classmethod
    def for_text(cls, text : str) -> Lang|None:
        """
        Guess the language of a sample of text, or return None if no confident guess can be made.
        """
        try:
            candidates = detect_langs(text)
        except LangDetectException as e:
            logging.debug(f"No language detected: {e}")
            return None

        if not candidates or candidates[0].prob < minimum_confidence:
            return None

        best = candidates[0]
        logging.debug(f"Detected language {best.lang} (probability {best.prob:.2f})")
        return cls.iso639(best.lang)

    def __str__(self) -> str:
        return self.code
