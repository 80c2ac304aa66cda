"""
geomath.py

Geometry helpers over canonical ``[[x, y], ...]`` point lists.

Public functions:
- `bounding_box(points)` -> ``[[min_x, min_y], [max_x, max_y]]``
- `center(points)` -> midpoint of the bounding box
- `bounding_polygon(points)` -> closed five-point rectangle around the points
- `radius(points, r)` / `radius_sphere(points, distance, unit)` -> ``[center, r]``
- `planar_distance(a, b)` / `haversine_distance(a, b, unit)`

`center` is the bounding-box midpoint, not the mean of the points and not a
polygon centroid. Every function raises `EmptyGeometry` for an empty list.
"""
import math
from typing import List, Optional, Sequence

import numpy as np

from geodoc.config import GeoConfig, RAD_PER_DEG, resolve_config
from geodoc.errors import EmptyGeometry


def _coords(points) -> np.ndarray:
    coords = np.asarray(points, dtype=float)
    if coords.size == 0:
        raise EmptyGeometry('Geometry math needs at least one point')
    if coords.ndim != 2 or coords.shape[1] != 2:
        raise ValueError(f"Expected an (N, 2) list of points, got shape {coords.shape}")
    return coords


def _extent(points):
    coords = _coords(points)
    mins = coords.min(axis=0)
    maxs = coords.max(axis=0)
    return float(mins[0]), float(mins[1]), float(maxs[0]), float(maxs[1])


def bounding_box(points: Sequence[Sequence[float]]) -> List[List[float]]:
    """Per-axis min/max over all points (not a convex hull)."""
    min_x, min_y, max_x, max_y = _extent(points)
    return [[min_x, min_y], [max_x, max_y]]


def center(points: Sequence[Sequence[float]]) -> List[float]:
    min_x, min_y, max_x, max_y = _extent(points)
    return [(min_x + max_x) / 2.0, (min_y + max_y) / 2.0]


def bounding_polygon(points: Sequence[Sequence[float]]) -> List[List[float]]:
    """Closed rectangle ring around the points; first and last point are equal."""
    min_x, min_y, max_x, max_y = _extent(points)
    return [
        [min_x, min_y],
        [min_x, max_y],
        [max_x, max_y],
        [max_x, min_y],
        [min_x, min_y],
    ]


def radius(points, r=1) -> list:
    return [center(points), r]


def radius_sphere(points, distance=1, unit: str = 'km', config: Optional[GeoConfig] = None) -> list:
    """Pair the center with ``distance`` expressed in radians.

    Radians are arc length over the earth radius for ``unit``, which is what
    ``$centerSphere`` and legacy ``$nearSphere`` expect.
    """
    config = resolve_config(config)
    return [center(points), distance / config.earth_radius_for(unit)]


def planar_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Euclidean distance in the coordinates' own units."""
    return float(math.hypot(float(b[0]) - float(a[0]), float(b[1]) - float(a[1])))


def haversine_distance(a: Sequence[float], b: Sequence[float], unit: str = 'm',
                       config: Optional[GeoConfig] = None) -> float:
    """Great-circle distance between two (lon, lat) pairs in degrees."""
    config = resolve_config(config)
    lon1, lat1 = float(a[0]) * RAD_PER_DEG, float(a[1]) * RAD_PER_DEG
    lon2, lat2 = float(b[0]) * RAD_PER_DEG, float(b[1]) * RAD_PER_DEG
    h = math.sin((lat2 - lat1) / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin((lon2 - lon1) / 2) ** 2
    # clamp for rounding noise on antipodal points
    c = 2 * math.asin(min(1.0, math.sqrt(h)))
    return config.earth_radius_for(unit) * c
