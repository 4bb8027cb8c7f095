"""
Placeholder Client - typed access to the JSONPlaceholder REST API.

This package shows how to issue GET/POST/PUT/DELETE requests, model JSON
payloads as immutable records, and decode responses with all-or-nothing
validation.
"""

from .exceptions import APIError, DecodeError, ParseError, PlaceholderClientError

__version__ = "1.0.0"
__author__ = "Development Team"
__email__ = "dev@example.com"

__all__ = ["APIError", "DecodeError", "ParseError", "PlaceholderClientError"]
