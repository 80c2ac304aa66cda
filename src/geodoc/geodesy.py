"""Optional geodesy capability for distances and shapely interop.

The normalizer and query translator never import this module's third-party
dependencies. `Point.distance` and the ``to_geo`` helpers look up the
provider on the active `GeoConfig` and fall back to `PlanarGeodesy`.

Providers:
- `PlanarGeodesy`     Euclidean distance in coordinate units (default)
- `HaversineGeodesy`  great-circle distance on a sphere, in a chosen unit
- `ShapelyGeodesy`    WGS84 ellipsoid distance via ``pyproj.Geod`` (meters)
                      and shapely Point/LineString/Polygon builders
"""
import logging
from typing import Optional, Protocol, Sequence

from geodoc.config import GeoConfig, resolve_config
from geodoc.geomath import haversine_distance, planar_distance

logger = logging.getLogger(__name__)


class GeodesyProvider(Protocol):
    def distance(self, a: Sequence[float], b: Sequence[float]) -> float:
        ...


class PlanarGeodesy:
    def distance(self, a, b) -> float:
        return planar_distance(a, b)


class HaversineGeodesy:
    """Spherical distance using the configured earth radius for ``unit``."""

    def __init__(self, unit: str = 'm', config: Optional[GeoConfig] = None):
        self.unit = unit
        self.config = config

    def distance(self, a, b) -> float:
        return haversine_distance(a, b, unit=self.unit, config=self.config)


class ShapelyGeodesy:
    """Ellipsoidal distance (pyproj) and geometry construction (shapely).

    Coordinates are (lon, lat) degrees; distances are meters on WGS84.
    """

    def __init__(self, ellps: str = 'WGS84'):
        self.ellps = ellps
        self._geod = None

    @property
    def geod(self):
        if self._geod is None:
            from pyproj import Geod

            self._geod = Geod(ellps=self.ellps)
        return self._geod

    def distance(self, a, b) -> float:
        _, _, dist = self.geod.inv(float(a[0]), float(a[1]), float(b[0]), float(b[1]))
        return float(dist)

    def point(self, pair):
        from shapely.geometry import Point as ShPoint

        return ShPoint(float(pair[0]), float(pair[1]))

    def line_string(self, pairs):
        from shapely.geometry import LineString as ShLineString

        return ShLineString([(float(x), float(y)) for x, y in pairs])

    def polygon(self, pairs):
        """Build a shapely Polygon from a ring. Shapely closes open rings; validity is not checked."""
        from shapely.geometry import Polygon as ShPolygon

        return ShPolygon([(float(x), float(y)) for x, y in pairs])


def get_geodesy(config: Optional[GeoConfig] = None):
    """Return the configured provider, or a `PlanarGeodesy` when none is set."""
    provider = resolve_config(config).geodesy
    return provider if provider is not None else PlanarGeodesy()


def get_geometry_builder(config: Optional[GeoConfig] = None) -> ShapelyGeodesy:
    """Return a provider able to build shapely geometries.

    Uses the configured provider when it can, otherwise a fresh `ShapelyGeodesy`.
    """
    provider = resolve_config(config).geodesy
    if provider is not None and hasattr(provider, 'polygon'):
        return provider
    return ShapelyGeodesy()


def use_shapely(config: Optional[GeoConfig] = None, ellps: str = 'WGS84') -> ShapelyGeodesy:
    """Install a `ShapelyGeodesy` on ``config`` (default config when omitted)."""
    config = resolve_config(config)
    config.geodesy = ShapelyGeodesy(ellps=ellps)
    logger.info('geodesy provider set to ShapelyGeodesy(%s)', ellps)
    return config.geodesy
