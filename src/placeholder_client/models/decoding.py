"""
Decode-or-fail mapping between untyped JSON objects and typed records.

Every decode-capable record shape is described by an ordered schema of
``(wire key, semantic kind)`` pairs derived from its declared fields. Decoding
walks the whole schema and validates every value before the record is built,
so a caller either gets a fully populated record or a ``DecodeError``.

Decode capability is opt-in. A record either inherits :class:`JSONable` in its
class body or is passed through :func:`jsonable` after it has been defined;
shapes that do neither can only be built from explicit keyword arguments.
"""

import typing
from abc import ABC
from enum import Enum
from functools import lru_cache
from typing import Any, Dict, List, Mapping, NamedTuple, Optional, Sequence, Tuple, Type, TypeVar

from loguru import logger

from ..exceptions import DecodeError
from .base import Record

R = TypeVar("R", bound=Record)


class FieldKind(str, Enum):
    """Semantic type of a record field."""

    INTEGER = "integer"
    TEXT = "text"
    BOOLEAN = "boolean"
    FLOAT = "floating-point"
    RECORD = "record"
    RECORD_LIST = "sequence of record"


class FieldSpec(NamedTuple):
    """One entry of a record schema."""

    key: str
    attribute: str
    kind: FieldKind
    record_type: Optional[Type[Record]] = None


_SCALAR_KINDS = {
    bool: FieldKind.BOOLEAN,
    int: FieldKind.INTEGER,
    float: FieldKind.FLOAT,
    str: FieldKind.TEXT,
}


def _is_record_type(value: Any) -> bool:
    return isinstance(value, type) and issubclass(value, Record)


def _field_kind(annotation: Any) -> Tuple[FieldKind, Optional[Type[Record]]]:
    if annotation in _SCALAR_KINDS:
        return _SCALAR_KINDS[annotation], None
    if _is_record_type(annotation):
        return FieldKind.RECORD, annotation
    if typing.get_origin(annotation) is list:
        args = typing.get_args(annotation)
        if len(args) == 1 and _is_record_type(args[0]):
            return FieldKind.RECORD_LIST, args[0]
    raise TypeError(f"Unsupported record field type: {annotation!r}")


@lru_cache(maxsize=None)
def schema_for(record_type: Type[Record]) -> Tuple[FieldSpec, ...]:
    """
    Build the ordered decode schema of a record shape.

    Args:
        record_type: Record subclass to describe

    Returns:
        Tuple[FieldSpec, ...]: One entry per declared field, in declaration order

    Raises:
        TypeError: If a field uses a type outside the supported semantic kinds
    """
    specs = []
    for name, info in record_type.model_fields.items():
        kind, nested = _field_kind(info.annotation)
        specs.append(FieldSpec(info.alias or name, name, kind, nested))
    return tuple(specs)


def _type_name(value: Any) -> str:
    return "null" if value is None else type(value).__name__


def _wrong_type(root: str, path: str, kind: FieldKind, value: Any) -> DecodeError:
    return DecodeError(root, path, f"of the wrong type (expected {kind.value}, got {_type_name(value)})")


def _read_value(spec: FieldSpec, value: Any, root: str, path: str) -> Any:
    kind = spec.kind
    if kind is FieldKind.INTEGER:
        # bool is a subclass of int but never a JSON number
        if isinstance(value, bool) or not isinstance(value, int):
            raise _wrong_type(root, path, kind, value)
        return value
    if kind is FieldKind.FLOAT:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _wrong_type(root, path, kind, value)
        try:
            return float(value)
        except OverflowError:
            raise DecodeError(root, path, f"out of range for {kind.value}") from None
    if kind is FieldKind.TEXT:
        if not isinstance(value, str):
            raise _wrong_type(root, path, kind, value)
        return value
    if kind is FieldKind.BOOLEAN:
        if not isinstance(value, bool):
            raise _wrong_type(root, path, kind, value)
        return value
    if kind is FieldKind.RECORD:
        return _read_nested(spec.record_type, value, root, path)
    if not isinstance(value, list):
        raise _wrong_type(root, path, kind, value)
    return [
        _read_nested(spec.record_type, item, root, f"{path}[{index}]")
        for index, item in enumerate(value)
    ]


def _read_nested(record_type: Type[R], value: Any, root: str, path: str) -> R:
    if not isinstance(value, Mapping):
        raise _wrong_type(root, path, FieldKind.RECORD, value)
    return _decode_into(record_type, value, root, path + ".")


def _decode_into(record_type: Type[R], mapping: Mapping[str, Any], root: str, prefix: str) -> R:
    values: Dict[str, Any] = {}
    for spec in schema_for(record_type):
        path = prefix + spec.key
        if spec.key not in mapping:
            raise DecodeError(root, path, "missing")
        values[spec.attribute] = _read_value(spec, mapping[spec.key], root, path)
    # Nothing is constructed until every field has passed
    return record_type(**values)


def _require_decodable(record_type: Any) -> None:
    if not is_decodable(record_type):
        raise TypeError(f"{getattr(record_type, '__name__', record_type)} has no JSON decode capability")


def decode_record(record_type: Type[R], mapping: Any) -> R:
    """
    Decode an untyped mapping into a record, all or nothing.

    Args:
        record_type: Record shape to build
        mapping: Parsed JSON object (untrusted)

    Returns:
        A fully populated, immutable record

    Raises:
        DecodeError: If the input is not a mapping, or any required field is
            missing or has the wrong semantic type
        TypeError: If ``record_type`` does not carry the JSONable capability
    """
    _require_decodable(record_type)
    root = record_type.__name__
    try:
        if not isinstance(mapping, Mapping):
            raise DecodeError(root, None, f"expected a JSON object, got {_type_name(mapping)}")
        return _decode_into(record_type, mapping, root, "")
    except DecodeError as e:
        logger.debug(f"Decode failed: {e}")
        raise


def decode_many(record_type: Type[R], items: Any) -> List[R]:
    """
    Decode a JSON array of objects; fails as a whole if any element fails.

    Raises:
        DecodeError: If ``items`` is not a list or any element does not decode
        TypeError: If ``record_type`` does not carry the JSONable capability
    """
    _require_decodable(record_type)
    root = record_type.__name__
    try:
        if not isinstance(items, list):
            raise DecodeError(root, None, f"expected a JSON array, got {_type_name(items)}")
        return [_read_nested(record_type, item, root, f"[{index}]") for index, item in enumerate(items)]
    except DecodeError as e:
        logger.debug(f"Decode failed: {e}")
        raise


def encode_record(record: Record) -> Dict[str, Any]:
    """
    Encode a record to an untyped mapping using its wire keys.

    Nested records and sequences of records are encoded recursively.
    """
    result: Dict[str, Any] = {}
    for spec in schema_for(type(record)):
        value = getattr(record, spec.attribute)
        if spec.kind is FieldKind.RECORD:
            value = encode_record(value)
        elif spec.kind is FieldKind.RECORD_LIST:
            value = [encode_record(item) for item in value]
        result[spec.key] = value
    return result


def _from_json(cls: Type[R], json: Mapping[str, Any]) -> R:
    return decode_record(cls, json)


def _from_json_list(cls: Type[R], items: Sequence[Mapping[str, Any]]) -> List[R]:
    return decode_many(cls, items)


def _to_json(self: Record) -> Dict[str, Any]:
    return encode_record(self)


class JSONable(ABC):
    """
    Capability marker for records that can be built from and rendered to JSON.

    Mix into a :class:`Record` subclass, or apply :func:`jsonable` to an
    existing one.
    """

    __slots__ = ()

    from_json = classmethod(_from_json)
    from_json_list = classmethod(_from_json_list)
    to_json = _to_json


def jsonable(record_type: Type[R]) -> Type[R]:
    """
    Add decode/encode capability to an already defined record shape.

    The record's keyword constructor is left untouched.

    Raises:
        TypeError: If ``record_type`` is not a Record subclass or declares an
            unsupported field type
    """
    if not _is_record_type(record_type):
        raise TypeError(f"jsonable() expects a Record subclass, got {record_type!r}")
    schema_for(record_type)
    record_type.from_json = classmethod(_from_json)
    record_type.from_json_list = classmethod(_from_json_list)
    record_type.to_json = _to_json
    JSONable.register(record_type)
    return record_type


def is_decodable(record_type: Any) -> bool:
    """Return True if ``record_type`` carries the JSONable capability."""
    return isinstance(record_type, type) and issubclass(record_type, JSONable)
