import unittest
from unittest.mock import patch

from PySubstudy.Helpers.Decode import smart_decode
from PySubstudy.Helpers.TestCases import LoggedTestCase
from PySubstudy.Helpers.Tests import skip_if_debugger_attached
from PySubstudy.SubtitleError import SubtitleDecodeError


class TestSmartDecode(LoggedTestCase):
    text = "1\n00:00:01,000 --> 00:00:02,000\n¿Dónde has estado? Te estábamos buscando por todas partes, señor.\n"

    def test_utf8(self):
        self.assertLoggedEqual("utf-8", self.text, smart_decode(self.text.encode('utf-8')))

    def test_utf8_bom_kept(self):
        result = smart_decode(b"\xef\xbb\xbf" + self.text.encode('utf-8'))
        self.assertLoggedEqual("BOM left for the parser", "\ufeff" + self.text, result)

    def test_utf16(self):
        for encoding in ['utf-16-le', 'utf-16-be']:
            with self.subTest(encoding=encoding):
                data = ("\ufeff" + self.text).encode(encoding)
                result = smart_decode(data)
                self.assertLoggedEqual(encoding, self.text, result.lstrip("\ufeff"))

    def test_legacy_encoding(self):
        data = (self.text * 5).encode('latin-1')
        result = smart_decode(data)
        self.assertLoggedTrue("timestamps decoded", "00:00:01,000 --> 00:00:02,000" in result)
        self.assertLoggedTrue("ascii text decoded", "buscando por todas partes" in result)

    def test_fallback_encoding(self):
        data = self.text.encode('latin-1')
        with patch('PySubstudy.Helpers.Decode.chardet.detect', return_value={'encoding': None, 'confidence': 0.0}), \
             patch('PySubstudy.Helpers.Decode.fallback_encoding', 'iso-8859-1'):
            result = smart_decode(data)
        self.assertLoggedEqual("fallback", self.text, result)

    def test_no_encoding(self):
        if skip_if_debugger_attached("test_no_encoding"):
            return

        with patch('PySubstudy.Helpers.Decode.chardet.detect', return_value={'encoding': None, 'confidence': 0.0}), \
             patch('PySubstudy.Helpers.Decode.fallback_encoding', None):
            self.assertLoggedRaises("undetectable", SubtitleDecodeError, smart_decode, b"\xff\xfa\xfb")


if __name__ == '__main__':
    unittest.main()
