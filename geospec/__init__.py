import logging
from typing import Any

from ._decode import Converter as _Converter
from ._encode import to_builtins as _to_builtins
from ._errors import (
    DecodeError,
    DepthLimitError,
    EncodeError,
    GeoJSONError,
    InvalidFeatureTypeError,
    InvalidIdentifierError,
    JSONSyntaxError,
    MalformedGeometryError,
    MissingFieldError,
    TypeMismatchError,
    UnsupportedGeometryTypeError,
    UnsupportedTopLevelTypeError,
    ValidationError,
)
from ._types import (
    Feature,
    FeatureCollection,
    GeoJSON,
    Geometry,
    GeometryCollection,
    LinearRing,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from ._utils import DEFAULT_MAX_DEPTH, check_max_depth
from . import value as _value
from .value import Identifier, Value

logging.getLogger(__name__).addHandler(logging.NullHandler())

_VALUE_TYPES = (
    _value.Null,
    _value.Bool,
    _value.Int,
    _value.UInt,
    _value.Float,
    _value.String,
    _value.Array,
    _value.Object,
)


def convert(
    obj: Any,
    *,
    type: Any = GeoJSON,
    require_properties: bool = False,
    max_depth: int = DEFAULT_MAX_DEPTH,
):
    """Convert a JSON tree or a `Value` into a GeoJSON object.

    Parameters
    ----------
    obj : Any
        Either a tree of builtin JSON types (as returned by
        ``msgspec.json.decode``), or a `Value`. A ``String`` value is treated
        as GeoJSON text and decoded.
    type : type, optional
        The kind of object to produce, see `geospec.json.Decoder`. Defaults
        to `GeoJSON`.
    require_properties : bool, optional
        Whether features must have a ``properties`` member. Default is False.
    max_depth : int, optional
        The maximum nesting depth accepted. Default is 256.

    Returns
    -------
    obj : GeoJSON or None

    See Also
    --------
    to_builtins, to_value
    """
    if isinstance(obj, _value.String):
        return json.decode(
            obj.value,
            type=type,
            require_properties=require_properties,
            max_depth=max_depth,
        )
    if isinstance(obj, _VALUE_TYPES):
        try:
            obj = _value.to_builtins(obj, max_depth=max_depth)
        except RecursionError:
            raise DepthLimitError("Maximum recursion depth exceeded") from None
    return _Converter(
        require_properties=require_properties, max_depth=max_depth
    ).convert(obj, type)


def to_builtins(obj: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Any:
    """Convert a GeoJSON object into a tree of builtin JSON types.

    The output is suitable for passing to ``msgspec.json.encode``, or to any
    other JSON library.

    Parameters
    ----------
    obj : GeoJSON or None
        The object to convert.
    max_depth : int, optional
        The maximum nesting depth written. Default is 256.

    Returns
    -------
    obj : Any

    See Also
    --------
    convert
    """
    try:
        return _to_builtins(obj, check_max_depth(max_depth))
    except RecursionError:
        raise EncodeError("Maximum recursion depth exceeded") from None


def to_value(obj: Any, *, max_depth: int = DEFAULT_MAX_DEPTH) -> Value:
    """Convert a GeoJSON object into a `Value`.

    This is the inverse of calling `convert` on a `Value`.
    """
    tree = to_builtins(obj, max_depth=max_depth)
    return _value.from_builtins(tree, max_depth=max_depth)


from . import json, value
from ._version import __version__
