"""LineString: an open, ordered path of points."""
from typing import Optional

from geodoc.config import GeoConfig
from geodoc.fields.geometry_field import GeometryField
from geodoc.geodesy import get_geometry_builder


class LineString(GeometryField):
    geo_json_type = 'LineString'

    def to_geo(self, config: Optional[GeoConfig] = None):
        return get_geometry_builder(config).line_string(self)
