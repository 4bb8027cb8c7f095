"""HTTP clients for the JSONPlaceholder API."""

from .async_client import PlaceholderAsyncClient
from .client import PlaceholderAPIClient

__all__ = ["PlaceholderAPIClient", "PlaceholderAsyncClient"]
