"""JSON wire-format helpers: raw body bytes to untyped mappings and back."""

import json
from typing import Any, Dict, List, Mapping, Sequence, Union

from .exceptions import ParseError

RawBody = Union[bytes, bytearray, str]


def parse(raw: RawBody) -> Any:
    """
    Parse a raw JSON body.

    Args:
        raw: Response body bytes (or text)

    Returns:
        The decoded JSON value

    Raises:
        ParseError: If the body is not valid JSON
    """
    try:
        return json.loads(raw)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Body is not valid JSON: {str(e)}") from e


def parse_object(raw: RawBody) -> Dict[str, Any]:
    """Parse a body whose top-level value must be a JSON object."""
    value = parse(raw)
    if not isinstance(value, dict):
        raise ParseError(f"Expected a JSON object, got {type(value).__name__}")
    return value


def parse_array(raw: RawBody) -> List[Dict[str, Any]]:
    """Parse a body whose top-level value must be a JSON array of objects."""
    value = parse(raw)
    if not isinstance(value, list):
        raise ParseError(f"Expected a JSON array, got {type(value).__name__}")
    for index, item in enumerate(value):
        if not isinstance(item, dict):
            raise ParseError(f"Expected a JSON object at index {index}, got {type(item).__name__}")
    return value


def serialize(value: Union[Mapping[str, Any], Sequence[Any]]) -> bytes:
    """Serialize a mapping (or list of mappings) to UTF-8 JSON bytes."""
    return json.dumps(value).encode("utf-8")
