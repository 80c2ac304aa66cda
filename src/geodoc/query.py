"""
query.py

Builds MongoDB geospatial query fragments from canonical values.

Public functions:
- `near_operator_value(point, options)` -> value for ``$near`` / ``$nearSphere``
- `choose_operator(field_is_spherical, options)` -> ``'near'`` or ``'nearSphere'``
- `near_clause(field_name, point, options, field_is_spherical)` -> selector dict
- `build_geo_near_stage(field_name, point, options)` -> aggregation pipeline
- `build_polygon_within_clause(ring)` -> ``$geoWithin`` polygon clause
- `build_box_within_clause(box)` / `build_circle_within_clause(circle)` -> legacy
  ``$box`` / ``$center`` / ``$centerSphere`` clauses

Everything here is pure: no I/O, no database handle. Input the normalizer
rejects, or that normalizes to nothing, raises `InvalidCoordinates`.
"""
import logging
from typing import Any, Dict, List, Mapping, Optional

from geodoc import geomath
from geodoc.config import GeoConfig
from geodoc.errors import InvalidCoordinates, MalformedGeometryInput
from geodoc.normalize import normalize_circle, normalize_point, normalize_points

logger = logging.getLogger(__name__)

NEAR = 'near'
NEAR_SPHERE = 'nearSphere'

GEO_NEAR_DEFAULTS = {
    'distanceField': 'distance',
    'spherical': False,
}


def _query_point(point: Any, config: Optional[GeoConfig]) -> List[float]:
    try:
        pair = normalize_point(point, config)
    except MalformedGeometryInput as exc:
        logger.warning('rejected query point %r: %s', point, exc)
        raise InvalidCoordinates(f"Invalid coordinates provided: {point!r}") from exc
    if pair is None:
        raise InvalidCoordinates(f"Invalid coordinates provided: {point!r}")
    return pair


def _query_points(points: Any, config: Optional[GeoConfig]) -> List[List[float]]:
    try:
        pairs = normalize_points(points, config)
    except MalformedGeometryInput as exc:
        logger.warning('rejected query ring %r: %s', points, exc)
        raise InvalidCoordinates(f"Invalid coordinates provided: {points!r}") from exc
    if not pairs:
        raise InvalidCoordinates(f"Invalid coordinates provided: {points!r}")
    return pairs


def near_operator_value(point: Any, options: Optional[Mapping] = None,
                        config: Optional[GeoConfig] = None):
    """Value for a proximity operator.

    With ``max_distance`` in ``options`` the GeoJSON form is returned,
    otherwise the bare ``[x, y]`` pair.
    """
    options = options or {}
    pair = _query_point(point, config)
    max_distance = options.get('max_distance')
    if max_distance is None:
        return pair
    return {
        '$geometry': {'type': 'Point', 'coordinates': pair},
        '$maxDistance': float(max_distance),
    }


def choose_operator(field_is_spherical: bool, options: Optional[Mapping] = None) -> str:
    """An explicit ``spherical`` option wins; otherwise the field's sphere flag decides."""
    options = options or {}
    if 'spherical' in options:
        spherical = bool(options['spherical'])
    else:
        spherical = bool(field_is_spherical)
    return NEAR_SPHERE if spherical else NEAR


def near_clause(field_name: str, point: Any, options: Optional[Mapping] = None,
                field_is_spherical: bool = False, config: Optional[GeoConfig] = None) -> Dict[str, Any]:
    """Selector for documents near ``point``, sorted nearest first by the store.

    A ``query`` option is merged in as an extra filter.
    """
    options = options or {}
    operator = '$' + choose_operator(field_is_spherical, options)
    selector = dict(options.get('query') or {})
    selector[str(field_name)] = {operator: near_operator_value(point, options, config)}
    logger.debug('near clause on %s: %r', field_name, selector)
    return selector


def build_geo_near_stage(field_name: str, point: Any, options: Optional[Mapping] = None,
                         config: Optional[GeoConfig] = None) -> List[Dict[str, Any]]:
    """Aggregation pipeline with a ``$geoNear`` stage.

    Caller options override the defaults (``distanceField='distance'``,
    ``spherical=False``) but never ``key`` or ``near``. ``$geoNear`` has no
    result cap, so a ``limit`` option becomes a separate ``$limit`` stage.
    """
    stage = dict(GEO_NEAR_DEFAULTS)
    stage.update(options or {})
    limit = stage.pop('limit', None)
    stage['key'] = str(field_name)
    stage['near'] = _query_point(point, config)
    stage['spherical'] = bool(stage['spherical'])

    pipeline = [{'$geoNear': stage}]
    if limit is not None:
        pipeline.append({'$limit': int(limit)})
    logger.debug('geoNear pipeline on %s: %r', field_name, pipeline)
    return pipeline


def build_polygon_within_clause(bounding_polygon: Any, config: Optional[GeoConfig] = None) -> Dict[str, Any]:
    """``$geoWithin`` clause for a polygon ring (e.g. a ``geom_box()`` result).

    The ring is passed through as given; close it first if the store requires it.
    """
    ring = _query_points(bounding_polygon, config)
    return {'$geoWithin': {'$geometry': {'type': 'Polygon', 'coordinates': [ring]}}}


def build_box_within_clause(box: Any, config: Optional[GeoConfig] = None) -> Dict[str, Any]:
    """Legacy ``$box`` clause spanning the bounding box of ``box``."""
    corners = _query_points(box, config)
    return {'$geoWithin': {'$box': geomath.bounding_box(corners)}}


def build_circle_within_clause(circle: Any, spherical: bool = False,
                               config: Optional[GeoConfig] = None) -> Dict[str, Any]:
    """Legacy ``$center`` (planar) or ``$centerSphere`` (radians) clause."""
    try:
        wire = normalize_circle(circle, config)
    except MalformedGeometryInput as exc:
        raise InvalidCoordinates(f"Invalid circle provided: {circle!r}") from exc
    if wire is None:
        raise InvalidCoordinates(f"Invalid circle provided: {circle!r}")
    operator = '$centerSphere' if spherical else '$center'
    return {'$geoWithin': {operator: wire}}
