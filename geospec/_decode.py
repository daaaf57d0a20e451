from ._errors import (
    DepthLimitError,
    InvalidFeatureTypeError,
    InvalidIdentifierError,
    MalformedGeometryError,
    MissingFieldError,
    TypeMismatchError,
    UnsupportedGeometryTypeError,
    UnsupportedTopLevelTypeError,
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
from ._utils import (
    DEFAULT_MAX_DEPTH,
    check_max_depth,
    enter,
    is_number,
    json_kind,
    render_path,
)
from .value import String, number_from_builtins
from .value import _from_builtins as _value_from_builtins

_GEOMETRY_CLASSES = (
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
)


def _type_name(type):
    return "Geometry" if type == Geometry else type.__name__


def _is_array(obj):
    return isinstance(obj, (list, tuple))


class Converter:
    """Converts trees of builtin JSON types into GeoJSON objects.

    Every method takes the node to convert, the ``path`` to that node (see
    ``_utils.render_path``) and the container ``depth`` of its parent.

    Parameters
    ----------
    require_properties : bool, optional
        If True, a feature without a ``properties`` member is an error.
        Otherwise it decodes with empty properties. Default is False.
    max_depth : int, optional
        The maximum container nesting depth accepted.
    """

    def __init__(self, *, require_properties=False, max_depth=DEFAULT_MAX_DEPTH):
        self.require_properties = require_properties
        self.max_depth = check_max_depth(max_depth)

    def point(self, obj, path, depth):
        if not _is_array(obj):
            raise MalformedGeometryError(
                f"Expected position `array`, got `{json_kind(obj)}`", render_path(path)
            )
        enter(depth, self.max_depth, path)
        if len(obj) < 2:
            raise MalformedGeometryError(
                f"Position must have at least 2 elements, got {len(obj)}",
                render_path(path),
            )
        # Any elevation or measure values past the first two are ignored
        coords = []
        for i in (0, 1):
            item = obj[i]
            if not is_number(item):
                raise MalformedGeometryError(
                    f"Expected `number`, got `{json_kind(item)}`",
                    render_path((path, i)),
                )
            try:
                coords.append(float(item))
            except OverflowError:
                raise MalformedGeometryError(
                    "Number out of range", render_path((path, i))
                ) from None
        return Point(*coords)

    def sequence(self, obj, path, depth, convert):
        """Convert an array by calling ``convert`` on every element"""
        if not _is_array(obj):
            raise MalformedGeometryError(
                f"Expected `array`, got `{json_kind(obj)}`", render_path(path)
            )
        depth = enter(depth, self.max_depth, path)
        return [convert(item, (path, i), depth) for i, item in enumerate(obj)]

    def _points(self, obj, path, depth):
        return self.sequence(obj, path, depth, self.point)

    def _multi_point(self, obj, path, depth):
        return MultiPoint(self._points(obj, path, depth))

    def _line_string(self, obj, path, depth):
        return LineString(self._points(obj, path, depth))

    def _linear_ring(self, obj, path, depth):
        return LinearRing(self._points(obj, path, depth))

    def _multi_line_string(self, obj, path, depth):
        return MultiLineString(self.sequence(obj, path, depth, self._line_string))

    def _polygon(self, obj, path, depth):
        return Polygon(self.sequence(obj, path, depth, self._linear_ring))

    def _multi_polygon(self, obj, path, depth):
        return MultiPolygon(self.sequence(obj, path, depth, self._polygon))

    # Converters for the `coordinates` member of each geometry type
    _coordinates = {
        "Point": point,
        "MultiPoint": _multi_point,
        "LineString": _line_string,
        "MultiLineString": _multi_line_string,
        "Polygon": _polygon,
        "MultiPolygon": _multi_polygon,
    }

    def geometry(self, obj, path, depth):
        if not isinstance(obj, dict):
            raise MalformedGeometryError(
                f"Expected geometry `object`, got `{json_kind(obj)}`",
                render_path(path),
            )
        depth = enter(depth, self.max_depth, path)

        if "type" not in obj:
            raise MalformedGeometryError(
                "Geometry missing required field `type`", render_path(path)
            )
        type_name = obj["type"]
        if not isinstance(type_name, str):
            raise MalformedGeometryError(
                f"Expected `str`, got `{json_kind(type_name)}`",
                render_path((path, "type")),
            )

        if type_name == "GeometryCollection":
            if "geometries" not in obj:
                raise MissingFieldError("geometries", render_path(path))
            return GeometryCollection(
                self.sequence(
                    obj["geometries"], (path, "geometries"), depth, self.geometry
                )
            )

        convert = self._coordinates.get(type_name)
        if convert is None:
            raise UnsupportedGeometryTypeError(type_name, render_path((path, "type")))
        if "coordinates" not in obj:
            raise MissingFieldError("coordinates", render_path(path))
        return convert(self, obj["coordinates"], (path, "coordinates"), depth)

    def identifier(self, obj, path):
        if isinstance(obj, str):
            return String(obj)
        if is_number(obj):
            return number_from_builtins(obj)
        raise InvalidIdentifierError(
            f"Feature `id` must be a string or number, got `{json_kind(obj)}`",
            render_path(path),
        )

    def properties(self, obj, path, depth):
        if obj is None:
            return {}
        if not isinstance(obj, dict):
            raise TypeMismatchError("object", json_kind(obj), render_path(path))
        depth = enter(depth, self.max_depth, path)
        out = {}
        for key, item in obj.items():
            if not isinstance(key, str):
                raise TypeMismatchError("str", json_kind(key), render_path(path))
            out[key] = _value_from_builtins(item, (path, key), depth, self.max_depth)
        return out

    def feature(self, obj, path, depth):
        if not isinstance(obj, dict):
            raise TypeMismatchError("object", json_kind(obj), render_path(path))
        depth = enter(depth, self.max_depth, path)

        if "type" not in obj:
            raise MissingFieldError("type", render_path(path))
        if obj["type"] != "Feature":
            raise InvalidFeatureTypeError(obj["type"], render_path((path, "type")))

        if "geometry" not in obj:
            raise MissingFieldError("geometry", render_path(path))
        geometry = self.geometry(obj["geometry"], (path, "geometry"), depth)

        if "id" in obj:
            ident = self.identifier(obj["id"], (path, "id"))
        else:
            ident = None

        if "properties" in obj:
            properties = self.properties(obj["properties"], (path, "properties"), depth)
        elif self.require_properties:
            raise MissingFieldError("properties", render_path(path))
        else:
            properties = {}

        return Feature(geometry, properties, ident)

    def feature_collection(self, obj, path, depth):
        """Convert the ``features`` array of a feature collection"""
        if not _is_array(obj):
            raise TypeMismatchError("array", json_kind(obj), render_path(path))
        depth = enter(depth, self.max_depth, path)
        return FeatureCollection(
            [self.feature(item, (path, i), depth) for i, item in enumerate(obj)]
        )

    def geojson(self, obj, path=None, depth=0):
        if not isinstance(obj, dict):
            raise TypeMismatchError("object", json_kind(obj), render_path(path))

        type_name = obj.get("type")
        if not isinstance(type_name, str):
            raise UnsupportedTopLevelTypeError(type_name, render_path(path))

        if type_name == "FeatureCollection":
            inner = enter(depth, self.max_depth, path)
            if "features" not in obj:
                raise MissingFieldError("features", render_path(path))
            return self.feature_collection(obj["features"], (path, "features"), inner)
        if type_name == "Feature":
            return self.feature(obj, path, depth)
        if type_name == "GeometryCollection" or type_name in self._coordinates:
            return self.geometry(obj, path, depth)
        raise UnsupportedTopLevelTypeError(type_name, render_path((path, "type")))

    def convert(self, obj, type=GeoJSON):
        """Convert a whole document, checking the result against ``type``.

        A ``null`` document converts to ``None`` if ``type`` is `GeoJSON`.
        """
        check_type(type)
        try:
            if type == GeoJSON:
                return None if obj is None else self.geojson(obj)
            if obj is None:
                raise TypeMismatchError(_type_name(type), "null", "$")
            if type is Feature:
                return self.feature(obj, None, 0)
            if type == Geometry:
                return self.geometry(obj, None, 0)
            out = self.geojson(obj)
        except RecursionError:
            raise DepthLimitError("Maximum recursion depth exceeded") from None
        if not isinstance(out, type):
            raise TypeMismatchError(type.__name__, json_kind(out), "$")
        return out


def check_type(type):
    """Raise if ``type`` isn't something `Converter.convert` supports"""
    if (
        type == GeoJSON
        or type == Geometry
        or type is Feature
        or type is FeatureCollection
        or type in _GEOMETRY_CLASSES
    ):
        return type
    raise TypeError(f"Can't convert GeoJSON to {type!r}")
