"""The dynamically typed value model used for feature properties and ids.

JSON numbers carry no type of their own, so `from_builtins` picks the
narrowest representation that round-trips exactly: `UInt` for integers in
``[0, 2**64)``, `Int` for negative integers down to ``-2**63``, and `Float` for
everything else. Integers outside both 64-bit ranges decode as `Float` and
lose precision.
"""
from __future__ import annotations

import math
from typing import Any, Dict, List, Union

import msgspec

from ._errors import EncodeError, TypeMismatchError
from ._utils import (
    DEFAULT_MAX_DEPTH,
    INT64_MAX,
    INT64_MIN,
    UINT64_MAX,
    check_max_depth,
    enter,
    enter_encode,
    json_kind,
    render_path,
)

__all__ = (
    "Null",
    "Bool",
    "Int",
    "UInt",
    "Float",
    "String",
    "Array",
    "Object",
    "Value",
    "Identifier",
    "from_builtins",
    "to_builtins",
)


def __dir__():
    return __all__


class Null(msgspec.Struct, frozen=True):
    """A JSON ``null``"""


class Bool(msgspec.Struct, frozen=True):
    value: bool


class Int(msgspec.Struct, frozen=True):
    """A signed 64-bit integer"""

    value: int


class UInt(msgspec.Struct, frozen=True):
    """An unsigned 64-bit integer"""

    value: int


class Float(msgspec.Struct, frozen=True):
    value: float


class String(msgspec.Struct, frozen=True):
    value: str


class Array(msgspec.Struct, frozen=True):
    value: List[Value]


class Object(msgspec.Struct, frozen=True):
    value: Dict[str, Value]


Value = Union[Null, Bool, Int, UInt, Float, String, Array, Object]

# The restricted set of values allowed as a feature ``id``
Identifier = Union[String, Int, UInt, Float]


def number_from_builtins(obj) -> Union[Int, UInt, Float]:
    if isinstance(obj, float):
        return Float(obj)
    if 0 <= obj <= UINT64_MAX:
        return UInt(obj)
    if INT64_MIN <= obj < 0:
        return Int(obj)
    try:
        return Float(float(obj))
    except OverflowError:
        # Past the float range, only the sign survives
        return Float(math.inf if obj > 0 else -math.inf)


def _from_builtins(obj, path, depth, max_depth):
    if obj is None:
        return Null()
    # bool is a subclass of int, check it first
    elif isinstance(obj, bool):
        return Bool(obj)
    elif isinstance(obj, (int, float)):
        return number_from_builtins(obj)
    elif isinstance(obj, str):
        return String(obj)
    elif isinstance(obj, (list, tuple)):
        depth = enter(depth, max_depth, path)
        return Array(
            [
                _from_builtins(item, (path, i), depth, max_depth)
                for i, item in enumerate(obj)
            ]
        )
    elif isinstance(obj, dict):
        depth = enter(depth, max_depth, path)
        out = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeMismatchError("str", json_kind(key), render_path(path))
            out[key] = _from_builtins(item, (path, key), depth, max_depth)
        return Object(out)
    raise TypeMismatchError("JSON value", json_kind(obj), render_path(path))


def from_builtins(obj: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Convert a tree of builtin JSON types into a `Value`.

    Parameters
    ----------
    obj : Any
        ``None``, ``bool``, ``int``, ``float``, ``str``, a ``list`` (or
        ``tuple``) of these, or a ``dict`` mapping ``str`` keys to these. This
        is the form ``msgspec.json.decode`` produces.
    max_depth : int, optional
        The maximum container nesting depth accepted.

    Returns
    -------
    value : Value

    Raises
    ------
    TypeMismatchError
        If ``obj`` contains an object that has no JSON representation.
    DepthLimitError
        If ``obj`` is nested deeper than ``max_depth``.

    See Also
    --------
    to_builtins
    """
    return _from_builtins(obj, None, 0, check_max_depth(max_depth))


def _to_builtins(value, depth, max_depth):
    typ = type(value)
    if typ is Null:
        return None
    elif typ is Bool:
        return value.value
    elif typ is UInt:
        if not 0 <= value.value <= UINT64_MAX:
            raise EncodeError(f"UInt value {value.value} is out of range")
        return value.value
    elif typ is Int:
        if not INT64_MIN <= value.value <= INT64_MAX:
            raise EncodeError(f"Int value {value.value} is out of range")
        return value.value
    elif typ is Float:
        return float(value.value)
    elif typ is String:
        return value.value
    elif typ is Array:
        depth = enter_encode(depth, max_depth)
        return [_to_builtins(item, depth, max_depth) for item in value.value]
    elif typ is Object:
        depth = enter_encode(depth, max_depth)
        return properties_to_builtins(value.value, depth, max_depth)
    raise TypeError(f"Encoding objects of type {typ.__name__} is unsupported")


def properties_to_builtins(mapping, depth, max_depth):
    out = {}
    for key, item in mapping.items():
        if not isinstance(key, str):
            raise EncodeError(f"Object keys must be strings, got {key!r}")
        out[key] = _to_builtins(item, depth, max_depth)
    return out


def to_builtins(value: Value, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """Convert a `Value` into a tree of builtin JSON types.

    This is the exact inverse of `from_builtins`. ``Int`` and ``UInt`` values
    both become ``int``, and are checked against their 64-bit ranges.

    Parameters
    ----------
    value : Value
        The value to convert.
    max_depth : int, optional
        The maximum container nesting depth accepted.

    Returns
    -------
    obj : Any

    Raises
    ------
    EncodeError
        If an integer is out of range, an ``Object`` key isn't a string, or
        the value is nested deeper than ``max_depth``.

    See Also
    --------
    from_builtins
    """
    return _to_builtins(value, 0, check_max_depth(max_depth))
