"""Polygon: a single ring of points.

The ring is kept exactly as given. It is not closed automatically and its
winding or self-intersection is not checked; consumers that need a closed
ring must close it themselves.
"""
from typing import Any, Dict, Optional

from geodoc.config import GeoConfig
from geodoc.fields.geometry_field import GeometryField
from geodoc.geodesy import get_geometry_builder


class Polygon(GeometryField):
    geo_json_type = 'Polygon'

    def to_geo_json(self) -> Dict[str, Any]:
        return {'type': self.geo_json_type, 'coordinates': [self.to_wire()]}

    def to_geo(self, config: Optional[GeoConfig] = None):
        return get_geometry_builder(config).polygon(self)
