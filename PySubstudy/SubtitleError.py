class SubtitleError(Exception):
    """
    Base class for errors raised while reading, parsing or writing subtitles.

    Keeps a human-readable message and the lower-level error that caused it, so that
    the full context chain can be reported, e.g.

        could not parse movie.srt: could not parse subtitles: invalid time period at line 2, column 1
    """
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message : str|None = message
        self.error : Exception|None = error

    def __str__(self) -> str:
        if self.error is None:
            return str(self.message)
        if not self.message:
            return str(self.error)
        return f"{self.message}: {self.error}"

class SubtitleParseError(SubtitleError):
    """ The subtitle text does not match the expected format """
    pass

class SrtSyntaxError(SubtitleParseError):
    """
    Raised by the SRT grammar when the input does not match at a specific position.
    Line and column are 1-based and count characters rather than bytes.
    """
    def __init__(self, message : str, position : int, line : int, column : int):
        super().__init__(message)
        self.position : int = position
        self.line : int = line
        self.column : int = column

    def __str__(self) -> str:
        return f"{self.message} at line {self.line}, column {self.column}"

class SubtitleDecodeError(SubtitleError):
    """ No text encoding could be found for the raw subtitle data """
    pass

class SubtitleReadError(SubtitleError):
    """ A subtitle file could not be opened or read """
    pass
