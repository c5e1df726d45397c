"""Exceptions raised for misuse of the API (never for malformed input)."""


class Utf8ViewError(Exception):
    """Base class for utf8view errors."""


class ReleasedBufferError(Utf8ViewError, ValueError):
    """An owned buffer was accessed after it was released."""


class InvalidReplacementError(Utf8ViewError, ValueError):
    """The configured replacement marker is not a valid UTF-8 sequence."""
