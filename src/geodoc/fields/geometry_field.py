"""
fields/geometry_field.py

`GeometryField`: base class for ordered point sequences (LineString,
Polygon, Box). The value is a ``list`` of ``[x, y]`` float pairs, so it
compares equal to plain nested lists and serializes as itself. Two
different kinds (a LineString and a Polygon) never compare equal.

A value read from a document is a fresh list built from the stored wire
array: appending to it changes nothing on the document. Assign a new value
instead (``doc.course = doc.course + [[10, 10]]``).
"""
from typing import Any, Dict, List, Optional

from geodoc import geomath
from geodoc.config import GeoConfig
from geodoc.normalize import normalize_points


class GeometryField(list):
    geo_json_type = 'MultiPoint'

    def __init__(self, points=(), config: Optional[GeoConfig] = None):
        pairs = normalize_points(list(points), config)
        super().__init__(pairs or [])

    @classmethod
    def coerce(cls, value: Any, config: Optional[GeoConfig] = None):
        """Raw input -> instance, or None when the input is absent."""
        pairs = normalize_points(value, config)
        return None if pairs is None else cls(pairs)

    @classmethod
    def from_wire(cls, wire):
        if wire is None:
            return None
        return cls(wire)

    def to_wire(self) -> List[List[float]]:
        return [list(pair) for pair in self]

    def __eq__(self, other):
        # plain nested lists compare by value; another geometry kind never does
        if isinstance(other, GeometryField) and type(other) is not type(self):
            return False
        return list.__eq__(self, other)

    def __ne__(self, other):
        result = self.__eq__(other)
        return result if result is NotImplemented else not result

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({list.__repr__(self)})"

    def __str__(self):
        return '; '.join(f"{x!r}, {y!r}" for x, y in self)

    def to_lat_lon(self) -> List[Dict[str, float]]:
        return [{'latitude': y, 'longitude': x} for x, y in self]

    def reversed_axes(self) -> List[List[float]]:
        """Axis-swapped pairs (lat, lon); the order of the points is unchanged."""
        return [[y, x] for x, y in self]

    def to_geo_json(self) -> Dict[str, Any]:
        return {'type': self.geo_json_type, 'coordinates': self.to_wire()}

    # geometry math

    def bounding_box(self) -> List[List[float]]:
        return geomath.bounding_box(self)

    bbox = bounding_box

    def center(self) -> List[float]:
        return geomath.center(self)

    def bounding_polygon(self) -> List[List[float]]:
        return geomath.bounding_polygon(self)

    geom_box = bounding_polygon

    def radius(self, r=1) -> list:
        return geomath.radius(self, r)

    def radius_sphere(self, r=1, unit: str = 'km', config: Optional[GeoConfig] = None) -> list:
        return geomath.radius_sphere(self, r, unit=unit, config=config)
