"""
HTTP client for the JSONPlaceholder API.

This module provides a blocking client built on ``requests`` that issues
GET/POST/PUT/DELETE requests, parses the JSON body and decodes it into typed
records. Failures are never retried: transport errors surface as ``APIError``,
malformed bodies as ``ParseError`` and shape mismatches as ``DecodeError``.
"""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union
from urllib.parse import urljoin

import requests
from loguru import logger

from ..config import get_settings
from ..exceptions import APIError
from ..models import PlaceholderComment, PlaceholderTodo, PlaceholderUser
from ..parsing import parse_array, parse_object, serialize

JSONBody = Union[Mapping[str, Any], Sequence[Any]]


class PlaceholderAPIClient:
    """
    HTTP client for the JSONPlaceholder API.

    Every call issues exactly one request; the caller decides whether to log,
    retry or abort on failure.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[int] = None,
        content_type: Optional[str] = None,
    ):
        """
        Initialize the API client.

        Args:
            base_url: Base URL for the JSONPlaceholder API
            timeout: Request timeout in seconds
            content_type: Content-Type sent with request bodies
        """
        settings = get_settings()
        self.base_url = base_url or settings.placeholder_api_base_url
        self.timeout = timeout or settings.placeholder_api_timeout
        self.content_type = content_type or settings.default_content_type

        # Ensure base URL ends with /
        if not self.base_url.endswith('/'):
            self.base_url += '/'

        logger.info(f"Initialized PlaceholderAPIClient with base_url: {self.base_url}")

    def request(
        self,
        method: str,
        endpoint: str,
        body: Optional[JSONBody] = None,
        headers: Optional[Dict[str, str]] = None,
        params: Optional[Dict[str, Any]] = None,
    ) -> requests.Response:
        """
        Make a single HTTP request.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint path, or an absolute URL
            body: JSON-serializable request body
            headers: Extra headers; these override the default Content-Type
            params: Query parameters

        Returns:
            requests.Response: HTTP response with a 2xx status

        Raises:
            APIError: If the request fails or the status is not 2xx
        """
        method = method.upper()
        url = urljoin(self.base_url, endpoint.lstrip('/'))

        request_headers: Dict[str, str] = {}
        data = None
        if body is not None:
            data = serialize(body)
            request_headers["Content-Type"] = self.content_type
        if headers:
            request_headers.update(headers)

        logger.debug(f"Making {method} request to {url}")

        try:
            response = requests.request(
                method=method,
                url=url,
                params=params,
                data=data,
                headers=request_headers,
                timeout=self.timeout
            )
        except requests.exceptions.RequestException as e:
            raise APIError(f"{method} {url} failed: {str(e)}") from e

        if not 200 <= response.status_code < 300:
            raise APIError(f"HTTP {response.status_code}: {response.text}", response.status_code)

        logger.debug(f"Request successful: {method} {url} -> {response.status_code}")
        return response

    def get_raw(self, url: str, headers: Optional[Dict[str, str]] = None) -> Dict[str, Any]:
        """
        GET any URL and return its parsed JSON object without decoding it.

        Raises:
            APIError: If the request fails
            ParseError: If the body is not a JSON object
        """
        response = self.request("GET", url, headers=headers)
        return parse_object(response.content)

    # Posts

    def get_posts(self) -> List[Dict[str, Any]]:
        """
        Retrieve all posts as untyped mappings.

        Posts have no decode capability; build ``PlaceholderPost`` values from
        these mappings with explicit keyword arguments.
        """
        response = self.request("GET", "posts")
        return parse_array(response.content)

    def get_post(self, post_id: int) -> Dict[str, Any]:
        """Retrieve a single post as an untyped mapping."""
        response = self.request("GET", f"posts/{post_id}")
        return parse_object(response.content)

    def create_post(self, user_id: int, title: str, body: str) -> Dict[str, Any]:
        """
        Create a post.

        Returns:
            Dict[str, Any]: The created post echoed back by the API, including its new id
        """
        payload = {"userId": user_id, "title": title, "body": body}
        response = self.request("POST", "posts", body=payload)
        return parse_object(response.content)

    def update_post(self, post_id: int, user_id: int, title: str, body: str) -> Dict[str, Any]:
        """Replace a post with PUT."""
        payload = {"id": post_id, "userId": user_id, "title": title, "body": body}
        response = self.request("PUT", f"posts/{post_id}", body=payload)
        return parse_object(response.content)

    def delete_post(self, post_id: int) -> Dict[str, Any]:
        """Delete a post. The API answers with an empty object."""
        response = self.request("DELETE", f"posts/{post_id}")
        return parse_object(response.content)

    # Comments

    def get_comments(self, post_id: Optional[int] = None) -> List[PlaceholderComment]:
        """
        Retrieve comments, optionally only those of one post.

        Raises:
            APIError: If the request fails
            ParseError: If the body is not a JSON array of objects
            DecodeError: If any comment does not match the comment shape
        """
        params = {"postId": post_id} if post_id is not None else None
        response = self.request("GET", "comments", params=params)
        return PlaceholderComment.from_json_list(parse_array(response.content))

    def create_comment(self, comment: PlaceholderComment) -> PlaceholderComment:
        """Create a comment and decode the echoed result."""
        response = self.request("POST", "comments", body=comment.to_json())
        return PlaceholderComment.from_json(parse_object(response.content))

    def update_comment(self, comment: PlaceholderComment) -> PlaceholderComment:
        """Replace a comment with PUT and decode the echoed result."""
        response = self.request("PUT", f"comments/{comment.id}", body=comment.to_json())
        return PlaceholderComment.from_json(parse_object(response.content))

    def delete_comment(self, comment_id: int) -> Dict[str, Any]:
        """Delete a comment."""
        response = self.request("DELETE", f"comments/{comment_id}")
        return parse_object(response.content)

    # Todos

    def get_todos(self, user_id: Optional[int] = None) -> List[PlaceholderTodo]:
        """Retrieve todos, optionally only those of one user."""
        params = {"userId": user_id} if user_id is not None else None
        response = self.request("GET", "todos", params=params)
        return PlaceholderTodo.from_json_list(parse_array(response.content))

    def get_todo(self, todo_id: int) -> PlaceholderTodo:
        """Retrieve a single todo."""
        response = self.request("GET", f"todos/{todo_id}")
        return PlaceholderTodo.from_json(parse_object(response.content))

    def create_todo(self, todo: PlaceholderTodo) -> PlaceholderTodo:
        """Create a todo and decode the echoed result."""
        response = self.request("POST", "todos", body=todo.to_json())
        return PlaceholderTodo.from_json(parse_object(response.content))

    # Users

    def get_users(self) -> List[PlaceholderUser]:
        """Retrieve all users with their nested address and company."""
        response = self.request("GET", "users")
        return PlaceholderUser.from_json_list(parse_array(response.content))

    def get_user(self, user_id: int) -> PlaceholderUser:
        """Retrieve a single user."""
        response = self.request("GET", f"users/{user_id}")
        return PlaceholderUser.from_json(parse_object(response.content))
