from __future__ import annotations

from typing import Dict, List, Optional, Union

import msgspec

from .value import Identifier, Value

__all__ = (
    "Point",
    "MultiPoint",
    "LineString",
    "LinearRing",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "Geometry",
    "Feature",
    "FeatureCollection",
    "GeoJSON",
)


class Point(msgspec.Struct, frozen=True):
    """A single position"""

    x: float
    y: float


class MultiPoint(msgspec.Struct, frozen=True):
    points: List[Point]


class LineString(msgspec.Struct, frozen=True):
    points: List[Point]


class LinearRing(msgspec.Struct, frozen=True):
    """A ring of a `Polygon`.

    Closure isn't checked or enforced, the points are kept exactly as given.
    """

    points: List[Point]


class MultiLineString(msgspec.Struct, frozen=True):
    lines: List[LineString]


class Polygon(msgspec.Struct, frozen=True):
    """A polygon. By convention the first ring is the exterior, and any
    remaining rings are holes."""

    rings: List[LinearRing]


class MultiPolygon(msgspec.Struct, frozen=True):
    polygons: List[Polygon]


class GeometryCollection(msgspec.Struct, frozen=True):
    geometries: List[Geometry]


Geometry = Union[
    Point,
    MultiPoint,
    LineString,
    MultiLineString,
    Polygon,
    MultiPolygon,
    GeometryCollection,
]


class Feature(msgspec.Struct, frozen=True):
    """A geometry with a mapping of properties and an optional id.

    Parameters
    ----------
    geometry : Geometry
        The feature geometry.
    properties : dict, optional
        A mapping of property names to `Value` objects. A ``null`` or missing
        ``properties`` member decodes as an empty mapping.
    id : Identifier, optional
        The feature identifier, or ``None`` if the feature has none.
    """

    geometry: Geometry
    properties: Dict[str, Value] = msgspec.field(default_factory=dict)
    id: Optional[Identifier] = None


class FeatureCollection(msgspec.Struct, frozen=True):
    features: List[Feature]


# Any object a GeoJSON document can hold
GeoJSON = Union[Geometry, Feature, FeatureCollection]
