"""
fields/circle.py

`Circle`: a center point and a radius, stored as ``[[cx, cy], radius]``.

The radius is kept verbatim (no unit conversion, no range check). A circle
only exposes its center and radius; it takes no part in bounding-box math.
"""
from typing import Any, Optional

from geodoc.config import GeoConfig
from geodoc.fields.point import Point
from geodoc.normalize import normalize_circle


class Circle:
    __slots__ = ('_center', '_radius')

    def __init__(self, center, radius, config: Optional[GeoConfig] = None):
        wire = normalize_circle([center, radius], config)
        self._center = Point(*wire[0])
        self._radius = radius

    @classmethod
    def coerce(cls, value: Any, config: Optional[GeoConfig] = None) -> Optional['Circle']:
        wire = normalize_circle(value, config)
        return None if wire is None else cls(wire[0], wire[1])

    @classmethod
    def from_wire(cls, wire) -> Optional['Circle']:
        if wire is None or len(wire) == 0:
            return None
        return cls(wire[0], wire[1])

    @property
    def center(self) -> Point:
        return self._center

    point = center

    @property
    def radius(self):
        return self._radius

    def to_wire(self) -> list:
        return [self._center.to_wire(), self._radius]

    to_list = to_wire

    def __getitem__(self, index):
        return self.to_wire()[index]

    def __len__(self):
        return 2

    def __iter__(self):
        return iter(self.to_wire())

    def __eq__(self, other):
        if isinstance(other, Circle):
            return self._center == other._center and self._radius == other._radius
        return NotImplemented

    def __hash__(self):
        return hash((self._center, self._radius))

    def __repr__(self):
        return f"Circle({self._center.to_wire()!r}, {self._radius!r})"
