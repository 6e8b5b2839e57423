"""Error types raised by textmoderate."""

from typing import Optional


class ModerationError(Exception):
    pass


class ConfigurationError(ModerationError, ValueError):
    """Bad construction options or an unusable language entry."""


class UnknownLanguageError(ConfigurationError, LookupError):
    def __init__(self, code: str):
        super().__init__(f"No language registered for code: {code!r}")
        self.code = code


class TransportError(ModerationError):
    """The toxicity service could not be reached, refused us, or sent garbage."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code
