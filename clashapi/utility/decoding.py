from typing import Any, Type, TypeVar, Union

import msgspec

from clashapi.classes import Player
from clashapi.utility.errors import MalformedInputError, TypeMismatchError

T = TypeVar("T")

_TEXT = (str, bytes, bytearray, memoryview)


def decode(data: Any, type: Type[T] = Player) -> T:
    """
    Build a model from an upstream JSON document.

    :param data: Raw JSON text (``str`` or bytes-like), or an already parsed
        JSON value (``dict``, ``list``, ...).
    :param type: Root model to build, e.g. ``Player``, ``Clan`` or
        ``ItemList[ClanMember]``.
    :raises MalformedInputError: the text is not valid JSON.
    :raises TypeMismatchError: a value does not match its declared field type.
    """
    try:
        if isinstance(data, _TEXT):
            return msgspec.json.decode(data, type=type)
        return msgspec.convert(data, type=type)
    except msgspec.ValidationError as e:
        # ValidationError subclasses DecodeError, so it is checked first
        raise TypeMismatchError.from_validation_error(e) from e
    except (msgspec.DecodeError, UnicodeDecodeError) as e:
        raise MalformedInputError(str(e)) from e


def encode(model: Any) -> bytes:
    """Serialize a model back to compact JSON. Fields holding no value are left out."""
    return msgspec.json.encode(model)


def to_builtins(model: Any) -> Union[dict, list]:
    """Turn a model into plain dicts/lists, keyed like the upstream JSON."""
    return msgspec.to_builtins(model)
