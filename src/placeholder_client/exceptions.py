"""
Exception hierarchy for the placeholder client.

Transport, parse and decode failures are kept as separate types so callers can
tell a broken connection from malformed bytes from a payload that does not
match the expected record shape.
"""

from typing import Optional


class PlaceholderClientError(Exception):
    """Base class for every error raised by this package."""


class APIError(PlaceholderClientError):
    """Custom exception for API errors."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


class ParseError(PlaceholderClientError):
    """Raw body bytes are not valid JSON or not of the expected top-level shape."""


class DecodeError(PlaceholderClientError, ValueError):
    """
    A parsed mapping failed required-field validation for a record shape.

    Attributes:
        record_type: Name of the record class being decoded
        key: Wire key path of the first offending field (``None`` when the
            input itself had the wrong shape)
        reason: Short description of the failure
    """

    def __init__(self, record_type: str, key: Optional[str], reason: str):
        self.record_type = record_type
        self.key = key
        self.reason = reason
        if key is None:
            message = f"Cannot decode {record_type}: {reason}"
        else:
            message = f"Cannot decode {record_type}: field '{key}' is {reason}"
        super().__init__(message)
