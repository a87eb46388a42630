# -*- encoding: utf-8 -*-
"""
JSON Kind - tagged classification of decoded JSON values.

Values coming out of json.loads() are untyped. Recursive walks over them
dispatch on a JsonKind instead of scattering isinstance() checks, so every
walk states explicitly what it does with each of the six JSON kinds.

    null    -> None
    boolean -> bool (checked before number, bool is an int subclass)
    number  -> int, float
    string  -> str
    array   -> list, tuple
    object  -> dict (any Mapping)
    other   -> anything json.loads() could not have produced
"""

from collections.abc import Mapping
from enum import Enum
from typing import Any


class JsonKind(str, Enum):
    """Kind of a decoded JSON value."""
    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    OTHER = "other"


def classify(value: Any) -> JsonKind:
    """
    Classify a decoded JSON value.

    Args:
        value: Any Python value, typically the output of json.loads()

    Returns:
        The JsonKind of the value
    """
    if value is None:
        return JsonKind.NULL
    if isinstance(value, bool):
        return JsonKind.BOOLEAN
    if isinstance(value, (int, float)):
        return JsonKind.NUMBER
    if isinstance(value, str):
        return JsonKind.STRING
    if isinstance(value, (list, tuple)):
        return JsonKind.ARRAY
    if isinstance(value, Mapping):
        return JsonKind.OBJECT
    return JsonKind.OTHER


def is_object(value: Any) -> bool:
    """True if the value is a JSON object."""
    return classify(value) is JsonKind.OBJECT


def is_array(value: Any) -> bool:
    """True if the value is a JSON array."""
    return classify(value) is JsonKind.ARRAY


def is_present(value: Any) -> bool:
    """
    True unless the value is null, false, zero or the empty string.

    Empty objects and arrays are present: a request carrying "claims": {}
    has claims, it just lists none of them.
    """
    if classify(value) in (JsonKind.OBJECT, JsonKind.ARRAY):
        return True
    return bool(value)
