import codecs
import logging
import os

import chardet

from PySubstudy.Helpers.Localization import _
from PySubstudy.SubtitleError import SubtitleDecodeError

# Encodings used when the data cannot be decoded as Unicode
default_encoding = os.getenv('DEFAULT_ENCODING', 'utf-8')
fallback_encoding = os.getenv('FALLBACK_ENCODING') or None

def smart_decode(data : bytes) -> str:
    """
    Decode subtitle data in an unknown encoding.

    UTF-16 is recognised by its byte-order mark. Otherwise the default encoding is tried first,
    then whatever encoding chardet detects, then the fallback encoding if one is configured.

    Raises:
        SubtitleDecodeError: if no encoding could decode the data
    """
    if data.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        try:
            return data.decode('utf-16')
        except UnicodeDecodeError as e:
            raise SubtitleDecodeError(_("Invalid UTF-16 data"), e) from e

    try:
        return data.decode(default_encoding)
    except UnicodeDecodeError:
        pass

    detected = chardet.detect(data)
    encoding = detected.get('encoding')
    if encoding:
        try:
            text = data.decode(encoding)
            logging.info(_("Decoded subtitles as {encoding} (confidence {confidence:.2f})").format(encoding=encoding, confidence=detected.get('confidence') or 0.0))
            return text
        except (UnicodeDecodeError, LookupError) as e:
            if not fallback_encoding:
                raise SubtitleDecodeError(_("Could not decode data as {encoding}").format(encoding=encoding), e) from e

    if fallback_encoding:
        try:
            return data.decode(fallback_encoding)
        except (UnicodeDecodeError, LookupError) as e:
            raise SubtitleDecodeError(_("Could not decode data as {encoding}").format(encoding=fallback_encoding), e) from e

    raise SubtitleDecodeError(_("Could not detect the text encoding"))
