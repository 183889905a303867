import regex

_TAG_PATTERN = regex.compile(r'</?[A-Za-z][^<>]*>')
_OVERRIDE_PATTERN = regex.compile(r'\{\\[^{}]*\}')
_WHITESPACE_PATTERN = regex.compile(r'\s+')

def strip_formatting(text : str) -> str:
    """
    Remove inline markup from subtitle text, e.g. <i>italics</i>, <font color="red"> or {\\an8}.
    """
    text = _TAG_PATTERN.sub('', text)
    text = _OVERRIDE_PATTERN.sub('', text)
    return _WHITESPACE_PATTERN.sub(' ', text).strip()
