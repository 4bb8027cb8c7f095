"""
Walkthrough of the request examples.

Each function demonstrates one concept against the live API: a plain GET, a
GET with custom headers, building posts from a list, POST, PUT, DELETE,
decoding an echoed comment, and background dispatch with a completion
callback. Run with ``python -m placeholder_client.playground``.
"""

import asyncio
from typing import Any, Callable, Dict, List, Mapping, Optional

from loguru import logger
from pydantic import ValidationError

from .api import PlaceholderAPIClient, PlaceholderAsyncClient
from .config import get_settings
from .exceptions import PlaceholderClientError
from .models import PlaceholderComment, PlaceholderPost, PlaceholderTodo
from .utils.logging import setup_logging


def baseline_session(client: PlaceholderAPIClient) -> Dict[str, Any]:
    """GET the random-user endpoint and make sure the body parses."""
    data = client.get_raw(get_settings().random_user_api_url)
    logger.info(f"Random user payload keys: {sorted(data)}")
    return data


def new_request(client: PlaceholderAPIClient) -> Dict[str, Any]:
    """Same GET, this time with an explicit header."""
    data = client.get_raw(
        get_settings().random_user_api_url,
        headers={"Content-Type": "application/json"},
    )
    logger.info(f"Random user payload keys: {sorted(data)}")
    return data


def build_posts(items: List[Mapping[str, Any]]) -> List[PlaceholderPost]:
    """
    Build posts from untyped mappings with explicit keyword arguments.

    Raises:
        KeyError: If an item lacks one of the post keys
        ValidationError: If a value has the wrong type
    """
    return [
        PlaceholderPost(
            user_id=item["userId"],
            id=item["id"],
            title=item["title"],
            body=item["body"],
        )
        for item in items
    ]


def get_placeholder_posts(client: PlaceholderAPIClient) -> List[PlaceholderPost]:
    posts = build_posts(client.get_posts())
    logger.info(f"Built {len(posts)} posts")
    for post in posts[:3]:
        logger.debug(str(post))
    return posts


def post_placeholder(client: PlaceholderAPIClient) -> Dict[str, Any]:
    created = client.create_post(
        user_id=5,
        title="Ride My Bicycle",
        body="I like to ride my bicycle, I like to ride my bike.",
    )
    logger.info(f"Created post: {created}")
    return created


def put_placeholder(client: PlaceholderAPIClient) -> Dict[str, Any]:
    updated = client.update_post(1, user_id=1, title="New Title", body="New Body")
    logger.info(f"Updated post: {updated}")
    return updated


def delete_placeholder(client: PlaceholderAPIClient) -> Dict[str, Any]:
    deleted = client.delete_post(1)
    logger.info(f"Deleted post 1: {deleted}")
    return deleted


def post_comment(client: PlaceholderAPIClient) -> PlaceholderComment:
    """POST a comment and decode the echoed body back into a record."""
    comment = PlaceholderComment(
        post_id=1,
        id=1,
        name="Tom",
        email="tom@here.com",
        body="Tom has a lovely body",
    )
    echoed = client.create_comment(comment)
    logger.info(f"Reconstructed comment: {echoed!r}")
    return echoed


async def fetch_todo_in_background(client: PlaceholderAsyncClient, todo_id: int = 1) -> Optional[PlaceholderTodo]:
    """
    Dispatch a todo fetch and receive it through a completion callback.

    Returns:
        The decoded todo, or None if the request failed (the failure is logged)
    """
    outcome: Dict[str, Any] = {}

    def on_complete(todo: Optional[PlaceholderTodo], error: Optional[BaseException]) -> None:
        if error is not None:
            logger.error(f"Background todo fetch failed: {error}")
        else:
            logger.info(f"Background todo fetch finished: {todo!r}")
        outcome["todo"] = todo

    task = client.dispatch(client.get_todo(todo_id), on_complete)
    # A task's done callbacks run on the loop after the task finishes.
    await asyncio.wait([task])
    await asyncio.sleep(0)
    return outcome.get("todo")


EXAMPLES: List[Callable[[PlaceholderAPIClient], Any]] = [
    baseline_session,
    new_request,
    get_placeholder_posts,
    post_placeholder,
    put_placeholder,
    delete_placeholder,
    post_comment,
]


async def _run_async_examples() -> int:
    """Run the background examples; returns the number that failed."""
    async with PlaceholderAsyncClient() as client:
        todo = await fetch_todo_in_background(client)
    return 0 if todo is not None else 1


def main() -> int:
    """Run every example in order; returns the number that failed."""
    setup_logging()
    client = PlaceholderAPIClient()

    failures = 0
    for example in EXAMPLES:
        logger.info(f"Running {example.__name__}")
        try:
            example(client)
        except (PlaceholderClientError, KeyError, ValidationError) as e:
            failures += 1
            logger.error(f"{example.__name__} failed: {e}")

    logger.info("Running fetch_todo_in_background")
    failures += asyncio.run(_run_async_examples())
    return failures


if __name__ == "__main__":
    raise SystemExit(1 if main() else 0)
