class ChordsheetError(Exception):
    """Base exception for chordsheet."""


class ParseError(ChordsheetError):
    """Raised when markup cannot be decomposed into lines and directives."""

    def __init__(self, reason: str, line_number: int | None = None):
        self.reason = reason
        self.line_number = line_number
        if line_number is None:
            super().__init__(reason)
        else:
            super().__init__(f"Line {line_number}: {reason}")


class FetchError(ChordsheetError):
    """Raised when an HTTP request for a remote song fails."""

    def __init__(self, url: str, status_code: int):
        self.url = url
        self.status_code = status_code
        super().__init__(f"HTTP {status_code} fetching {url}")


class UnsupportedModeError(ChordsheetError):
    """Raised when no formatter matches the requested mode."""

    def __init__(self, mode: str):
        self.mode = mode
        super().__init__(f"No formatter found for mode: {mode}")
