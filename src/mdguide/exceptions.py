"""Custom exceptions for mdguide."""


class MdguideError(Exception):
    """Base exception for mdguide operations."""


class ParseError(MdguideError):
    """Error during document parsing."""


class FetchError(MdguideError):
    """Error during document fetching."""


class DocumentNotFoundError(FetchError):
    """Remote document does not exist."""


class RateLimitError(FetchError):
    """Rate limited by the remote host."""


class DocumentTooLargeError(MdguideError):
    """Document exceeds the configured size limit."""


class AnchorCollisionWarning(UserWarning):
    """Two or more sections produced the same anchor."""
