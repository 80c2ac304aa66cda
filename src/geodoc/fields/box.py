"""Box: two opposite corners.

No corner order is assumed; ``bounding_box()`` and ``center()`` compute the
min/max from both corners, so ``[[3, 4], [1, 2]]`` and ``[[1, 2], [3, 4]]``
describe the same rectangle.
"""
from typing import Any, Dict, Optional

from geodoc.config import GeoConfig
from geodoc.errors import MalformedGeometryInput
from geodoc.fields.geometry_field import GeometryField
from geodoc.geodesy import get_geometry_builder


class Box(GeometryField):
    geo_json_type = 'Polygon'

    def __init__(self, points=(), config: Optional[GeoConfig] = None):
        super().__init__(points, config)
        if len(self) not in (0, 2):
            raise MalformedGeometryInput(f"A box needs exactly two corners, got {len(self)}")

    def to_geo_json(self) -> Dict[str, Any]:
        return {'type': self.geo_json_type, 'coordinates': [self.bounding_polygon()]}

    def to_geo(self, config: Optional[GeoConfig] = None):
        return get_geometry_builder(config).polygon(self.bounding_polygon())
