from ._errors import EncodeError
from ._types import (
    Feature,
    FeatureCollection,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
)
from ._utils import enter_encode
from .value import Float, Int, String, UInt, properties_to_builtins
from .value import _to_builtins as _value_to_builtins

_IDENTIFIER_TYPES = (String, Int, UInt, Float)


# Coordinate writers count one depth level per array written, the same way
# decoding counts them


def _position(point, depth, max_depth):
    enter_encode(depth, max_depth)
    return [float(point.x), float(point.y)]


def _positions(points, depth, max_depth):
    depth = enter_encode(depth, max_depth)
    return [_position(p, depth, max_depth) for p in points]


def _lines(lines, depth, max_depth):
    depth = enter_encode(depth, max_depth)
    return [_positions(line.points, depth, max_depth) for line in lines]


def _polygons(polygons, depth, max_depth):
    depth = enter_encode(depth, max_depth)
    return [_lines(p.rings, depth, max_depth) for p in polygons]


# The `type` name and `coordinates` writer for each non-recursive geometry
_COORDINATES = {
    Point: ("Point", _position),
    MultiPoint: ("MultiPoint", lambda g, *d: _positions(g.points, *d)),
    LineString: ("LineString", lambda g, *d: _positions(g.points, *d)),
    MultiLineString: ("MultiLineString", lambda g, *d: _lines(g.lines, *d)),
    Polygon: ("Polygon", lambda g, *d: _lines(g.rings, *d)),
    MultiPolygon: ("MultiPolygon", lambda g, *d: _polygons(g.polygons, *d)),
}


def geometry_to_builtins(geometry, depth, max_depth):
    depth = enter_encode(depth, max_depth)
    typ = type(geometry)
    if typ is GeometryCollection:
        depth = enter_encode(depth, max_depth)
        return {
            "type": "GeometryCollection",
            "geometries": [
                geometry_to_builtins(g, depth, max_depth) for g in geometry.geometries
            ],
        }
    try:
        name, write = _COORDINATES[typ]
    except KeyError:
        raise TypeError(
            f"Expected a geometry, got an object of type {typ.__name__}"
        ) from None
    return {"type": name, "coordinates": write(geometry, depth, max_depth)}


def feature_to_builtins(feature, depth, max_depth):
    depth = enter_encode(depth, max_depth)
    out = {"type": "Feature"}
    if feature.id is not None:
        if type(feature.id) not in _IDENTIFIER_TYPES:
            raise EncodeError(
                "Feature `id` must be a String, Int, UInt or Float, "
                f"got {type(feature.id).__name__}"
            )
        out["id"] = _value_to_builtins(feature.id, depth, max_depth)
    out["geometry"] = geometry_to_builtins(feature.geometry, depth, max_depth)
    # Always written, even when empty
    out["properties"] = properties_to_builtins(
        feature.properties, enter_encode(depth, max_depth), max_depth
    )
    return out


def feature_collection_to_builtins(collection, depth, max_depth):
    depth = enter_encode(enter_encode(depth, max_depth), max_depth)
    return {
        "type": "FeatureCollection",
        "features": [
            feature_to_builtins(f, depth, max_depth) for f in collection.features
        ],
    }


def to_builtins(obj, max_depth):
    """Convert a GeoJSON object (or ``None``) to a tree of builtin types"""
    typ = type(obj)
    if obj is None:
        return None
    elif typ is Feature:
        return feature_to_builtins(obj, 0, max_depth)
    elif typ is FeatureCollection:
        return feature_collection_to_builtins(obj, 0, max_depth)
    elif typ is GeometryCollection or typ in _COORDINATES:
        return geometry_to_builtins(obj, 0, max_depth)
    raise TypeError(f"Encoding objects of type {typ.__name__} is unsupported")
