"""
Asyncio client for the JSONPlaceholder API.

Mirrors :class:`~placeholder_client.api.client.PlaceholderAPIClient` on top of
``httpx.AsyncClient``. :meth:`PlaceholderAsyncClient.dispatch` runs a request
in the background and hands its outcome to a completion callback exactly once.
"""

import asyncio
from typing import Any, Awaitable, Callable, Dict, List, Optional, Set, TypeVar

import httpx
from loguru import logger

from ..config import get_settings
from ..exceptions import APIError
from ..models import PlaceholderComment, PlaceholderTodo, PlaceholderUser
from ..parsing import parse_array, parse_object, serialize
from .client import JSONBody

T = TypeVar("T")
CompletionCallback = Callable[[Optional[T], Optional[BaseException]], None]


class PlaceholderAsyncClient:
    """
    Async HTTP client for the JSONPlaceholder API.

    Use as an async context manager, or call :meth:`aclose` when done.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        content_type: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the async API client.

        Args:
            base_url: Base URL for the JSONPlaceholder API
            timeout: Request timeout in seconds
            content_type: Content-Type sent with request bodies
            transport: Optional httpx transport (used by tests)
        """
        settings = get_settings()
        self.base_url = base_url or settings.placeholder_api_base_url
        self.timeout = timeout or settings.placeholder_api_timeout
        self.content_type = content_type or settings.default_content_type

        if not self.base_url.endswith('/'):
            self.base_url += '/'

        self._client = httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=transport)
        self._pending: Set[asyncio.Task] = set()

        logger.info(f"Initialized PlaceholderAsyncClient with base_url: {self.base_url}")

    async def __aenter__(self) -> "PlaceholderAsyncClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying connection pool."""
        await self._client.aclose()

    async def request(
        self,
        method: str,
        endpoint: str,
        body: Optional[JSONBody] = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> httpx.Response:
        """
        Make a single HTTP request.

        Raises:
            APIError: If the request fails or the status is not 2xx
        """
        method = method.upper()
        endpoint = endpoint.lstrip('/')

        request_headers: Dict[str, str] = {}
        content = None
        if body is not None:
            content = serialize(body)
            request_headers["Content-Type"] = self.content_type
        if headers:
            request_headers.update(headers)

        logger.debug(f"Making async {method} request to {endpoint}")

        try:
            response = await self._client.request(
                method,
                endpoint,
                params=params,
                content=content,
                headers=request_headers,
            )
        except httpx.HTTPError as e:
            raise APIError(f"{method} {endpoint} failed: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            raise APIError(f"HTTP {response.status_code}: {response.text}", response.status_code)

        return response

    def dispatch(self, operation: Awaitable[T], callback: CompletionCallback) -> "asyncio.Task[T]":
        """
        Run ``operation`` as a background task and report its outcome once.

        The callback receives ``(result, None)`` on success or
        ``(None, error)`` on failure or cancellation. Must be called from a
        running event loop.

        Returns:
            asyncio.Task: The scheduled task, for callers that want to await it
        """
        task = asyncio.ensure_future(operation)
        self._pending.add(task)

        def _deliver(done: "asyncio.Task[T]") -> None:
            self._pending.discard(done)
            if done.cancelled():
                callback(None, asyncio.CancelledError())
                return
            error = done.exception()
            if error is not None:
                logger.debug(f"Dispatched request failed: {error}")
                callback(None, error)
            else:
                callback(done.result(), None)

        task.add_done_callback(_deliver)
        return task

    async def get_raw(self, url: str, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """GET any URL and return its parsed JSON object without decoding it."""
        response = await self.request("GET", url, headers=headers)
        return parse_object(response.content)

    async def get_posts(self) -> List[Dict[str, Any]]:
        response = await self.request("GET", "posts")
        return parse_array(response.content)

    async def get_post(self, post_id: int) -> Dict[str, Any]:
        response = await self.request("GET", f"posts/{post_id}")
        return parse_object(response.content)

    async def create_post(self, user_id: int, title: str, body: str) -> Dict[str, Any]:
        payload = {"userId": user_id, "title": title, "body": body}
        response = await self.request("POST", "posts", body=payload)
        return parse_object(response.content)

    async def update_post(self, post_id: int, user_id: int, title: str, body: str) -> Dict[str, Any]:
        payload = {"id": post_id, "userId": user_id, "title": title, "body": body}
        response = await self.request("PUT", f"posts/{post_id}", body=payload)
        return parse_object(response.content)

    async def delete_post(self, post_id: int) -> Dict[str, Any]:
        response = await self.request("DELETE", f"posts/{post_id}")
        return parse_object(response.content)

    async def get_comments(self, post_id: Optional[int] = None) -> List[PlaceholderComment]:
        params = {"postId": post_id} if post_id is not None else None
        response = await self.request("GET", "comments", params=params)
        return PlaceholderComment.from_json_list(parse_array(response.content))

    async def create_comment(self, comment: PlaceholderComment) -> PlaceholderComment:
        response = await self.request("POST", "comments", body=comment.to_json())
        return PlaceholderComment.from_json(parse_object(response.content))

    async def update_comment(self, comment: PlaceholderComment) -> PlaceholderComment:
        response = await self.request("PUT", f"comments/{comment.id}", body=comment.to_json())
        return PlaceholderComment.from_json(parse_object(response.content))

    async def delete_comment(self, comment_id: int) -> Dict[str, Any]:
        response = await self.request("DELETE", f"comments/{comment_id}")
        return parse_object(response.content)

    async def get_todos(self, user_id: Optional[int] = None) -> List[PlaceholderTodo]:
        params = {"userId": user_id} if user_id is not None else None
        response = await self.request("GET", "todos", params=params)
        return PlaceholderTodo.from_json_list(parse_array(response.content))

    async def get_todo(self, todo_id: int) -> PlaceholderTodo:
        response = await self.request("GET", f"todos/{todo_id}")
        return PlaceholderTodo.from_json(parse_object(response.content))

    async def create_todo(self, todo: PlaceholderTodo) -> PlaceholderTodo:
        response = await self.request("POST", "todos", body=todo.to_json())
        return PlaceholderTodo.from_json(parse_object(response.content))

    async def get_users(self) -> List[PlaceholderUser]:
        response = await self.request("GET", "users")
        return PlaceholderUser.from_json_list(parse_array(response.content))

    async def get_user(self, user_id: int) -> PlaceholderUser:
        response = await self.request("GET", f"users/{user_id}")
        return PlaceholderUser.from_json(parse_object(response.content))
