"""
Record shapes for the JSONPlaceholder resources.

Each shape covers one way a record can be built:

- ``PlaceholderPost``: keyword construction only, never decoded from a mapping.
- ``PlaceholderComment``: declares JSON capability in its class definition.
- ``PlaceholderPhoto``: plain member-wise construction.
- ``PlaceholderAlbum``: zero-argument construction from fixed defaults.
- ``PlaceholderTodo``: defined plainly, then given JSON capability afterwards
  while keeping its keyword constructor.
- ``PlaceholderUser``: nested records (address, geo, company).
"""

from pydantic import Field

from .base import Record
from .decoding import JSONable, jsonable


class PlaceholderPost(Record):
    """A blog post. Built only from explicitly typed arguments."""

    user_id: int = Field(alias="userId")
    id: int
    title: str
    body: str

    def __str__(self) -> str:
        return f"TITLE: {self.title} by USER: {self.user_id}"


class PlaceholderComment(Record, JSONable):
    """A comment on a post."""

    post_id: int = Field(alias="postId")
    id: int
    name: str
    email: str
    body: str


class PlaceholderPhoto(Record):
    """A photo inside an album."""

    album_id: int = Field(alias="albumId")
    id: int
    title: str
    url: str
    thumbnail_url: str = Field(alias="thumbnailUrl")


class PlaceholderAlbum(Record):
    """An album. ``PlaceholderAlbum()`` yields the fixed default album."""

    user_id: int = Field(default=-1, alias="userId")
    id: int = -1
    title: str = "Default Title"


class PlaceholderTodo(Record):
    """A todo item."""

    user_id: int = Field(alias="userId")
    id: int
    title: str
    completed: bool


# Decode capability is layered on separately; PlaceholderTodo(user_id=..., ...)
# keeps working unchanged.
jsonable(PlaceholderTodo)


class Geo(Record, JSONable):
    """Coordinates, transmitted as strings by the API."""

    lat: str
    lng: str


class Address(Record, JSONable):
    """Postal address of a user."""

    street: str
    suite: str
    city: str
    zipcode: str
    geo: Geo


class Company(Record, JSONable):
    """Employer of a user."""

    name: str
    catch_phrase: str = Field(alias="catchPhrase")
    bs: str


class PlaceholderUser(Record, JSONable):
    """A user with nested address and company records."""

    id: int
    name: str
    username: str
    email: str
    address: Address
    phone: str
    website: str
    company: Company
