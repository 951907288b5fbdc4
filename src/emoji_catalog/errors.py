#errors.py


class EmojiCatalogError(Exception):
    """Base class for errors raised while importing emoji data."""


class FetchError(EmojiCatalogError):
    """The server answered with a status that is neither 200 nor a redirect."""
    def __init__(self, status_code: int, reason: str):
        super().__init__(f"HTTP {status_code}: {reason}")
        self.status_code = status_code
        self.reason = reason


class FormatError(EmojiCatalogError, ValueError):
    """
    A data line split into three fields but its last field is not
    '<char> E<major>.<minor> <name>'. The source format has changed under us,
    so the whole run is aborted.
    """
    def __init__(self, line: str):
        super().__init__(f"Unrecognized emoji data line: {line!r}")
        self.line = line
