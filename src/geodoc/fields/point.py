"""
fields/point.py

`Point`: an immutable (x, y) pair, conventionally (longitude, latitude).

Stored on the wire as ``[x, y]``. Build one from raw input with
`Point.coerce`, which returns None for absent input (None, ``""``, ``[]``).
"""
import json
from typing import Any, Dict, List, Optional

from geodoc.config import GeoConfig, resolve_config
from geodoc.geodesy import get_geodesy, get_geometry_builder
from geodoc.normalize import normalize_point


class Point:
    __slots__ = ('_x', '_y')

    def __init__(self, x, y):
        object.__setattr__(self, '_x', float(x))
        object.__setattr__(self, '_y', float(y))

    def __setattr__(self, name, value):
        raise AttributeError('Point is immutable; build a new Point instead')

    def __reduce__(self):
        return (Point, (self._x, self._y))

    @classmethod
    def coerce(cls, value: Any, config: Optional[GeoConfig] = None) -> Optional['Point']:
        if isinstance(value, cls):
            return value
        pair = normalize_point(value, config)
        return None if pair is None else cls(*pair)

    @classmethod
    def from_wire(cls, wire) -> Optional['Point']:
        if wire is None or len(wire) == 0:
            return None
        return cls(wire[0], wire[1])

    @property
    def x(self) -> float:
        return self._x

    @property
    def y(self) -> float:
        return self._y

    def to_wire(self) -> List[float]:
        return [self._x, self._y]

    to_list = to_wire

    def __iter__(self):
        yield self._x
        yield self._y

    def __len__(self):
        return 2

    def __getitem__(self, index):
        return (self._x, self._y)[index]

    def __eq__(self, other):
        if isinstance(other, Point):
            return self._x == other._x and self._y == other._y
        return NotImplemented

    def __hash__(self):
        return hash((self._x, self._y))

    def __repr__(self):
        return f"Point({self._x!r}, {self._y!r})"

    def __str__(self):
        return f"{self._x!r}, {self._y!r}"

    def to_json(self) -> str:
        return json.dumps(self.to_wire(), separators=(',', ':'))

    def to_dict(self, x_key: str = 'x', y_key: str = 'y') -> Dict[str, float]:
        return {x_key: self._x, y_key: self._y}

    def to_lat_lon(self) -> Dict[str, float]:
        return {'latitude': self._y, 'longitude': self._x}

    def to_geo_json(self) -> Dict[str, Any]:
        return {'type': 'Point', 'coordinates': self.to_wire()}

    def reverse(self) -> List[float]:
        """Axis-swapped pair, i.e. ``[lat, lon]``."""
        return [self._y, self._x]

    reversed_axes = reverse

    def radius(self, r=1) -> list:
        return [self.to_wire(), r]

    def radius_sphere(self, r=1, unit: str = 'km', config: Optional[GeoConfig] = None) -> list:
        return [self.to_wire(), r / resolve_config(config).earth_radius_for(unit)]

    def distance(self, other, config: Optional[GeoConfig] = None) -> float:
        """Distance to ``other`` using the configured geodesy provider.

        Without a provider this is planar distance in degrees; install one
        with `geodoc.geodesy.use_shapely` for meters on the ellipsoid.
        """
        other = Point.coerce(other, config)
        if other is None:
            raise ValueError('Cannot measure distance to an empty point')
        return get_geodesy(config).distance(self.to_wire(), other.to_wire())

    def to_geo(self, config: Optional[GeoConfig] = None):
        """Shapely Point for this pair."""
        return get_geometry_builder(config).point(self.to_wire())
