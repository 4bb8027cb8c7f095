"""
Models package for the placeholder client.

This package contains the record shapes and the decode/encode machinery.
"""

from .base import Record
from .decoding import (
    FieldKind,
    FieldSpec,
    JSONable,
    decode_many,
    decode_record,
    encode_record,
    is_decodable,
    jsonable,
    schema_for,
)
from .records import (
    Address,
    Company,
    Geo,
    PlaceholderAlbum,
    PlaceholderComment,
    PlaceholderPhoto,
    PlaceholderPost,
    PlaceholderTodo,
    PlaceholderUser,
)

__all__ = [
    # Base
    "Record",
    # Decoding
    "FieldKind",
    "FieldSpec",
    "JSONable",
    "decode_many",
    "decode_record",
    "encode_record",
    "is_decodable",
    "jsonable",
    "schema_for",
    # Records
    "Address",
    "Company",
    "Geo",
    "PlaceholderAlbum",
    "PlaceholderComment",
    "PlaceholderPhoto",
    "PlaceholderPost",
    "PlaceholderTodo",
    "PlaceholderUser",
]
