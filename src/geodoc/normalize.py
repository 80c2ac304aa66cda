"""
normalize.py

Coordinate normalizer: turns user-supplied coordinate input into the
canonical ``[x, y]`` float pair (or a list of such pairs).

Accepted shapes, see `InputShape`:
- ABSENT    None, empty list/tuple/array, empty or blank string
- PAIR      two numbers, e.g. ``[2.99, 3.99]`` or ``(2.99, 3.99)``
- POINT     anything exposing numeric ``x`` and ``y`` (geodoc or shapely points)
- MAPPING   ``{"lng": 3.99, "lat": 2.99}`` or a GeoJSON Point mapping
- TEXT      ``"2.99,3.99"``, ``"2.99 3.99"``, ``"2.99 , 3.99"``
- SEQUENCE  a list of pair-like items (line strings, polygons, boxes)

Absence is never an error. Anything structurally wrong raises
`MalformedGeometryInput`; nothing is silently replaced by a default point.
"""
import enum
import logging
import math
import numbers
import re
from collections.abc import Mapping
from typing import Any, List, Optional

import numpy as np

from geodoc.config import GeoConfig, resolve_config
from geodoc.errors import MalformedGeometryInput

logger = logging.getLogger(__name__)

_TOKEN_SPLIT = re.compile(r'\s*,\s*|\s+')
_NUMBER_TOKEN = re.compile(r'[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?')


class InputShape(enum.Enum):
    ABSENT = 'absent'
    PAIR = 'pair'
    POINT = 'point'
    MAPPING = 'mapping'
    TEXT = 'text'
    SEQUENCE = 'sequence'


def _is_number(value: Any) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


def _as_list(value: Any) -> Optional[list]:
    """Return list/tuple/ndarray input as a plain list, anything else as None."""
    if isinstance(value, np.ndarray):
        return value.tolist()
    if isinstance(value, (list, tuple)):
        return list(value)
    return None


def classify(value: Any) -> InputShape:
    """Classify raw input into one `InputShape`.

    Raises `MalformedGeometryInput` for types none of the shapes cover.
    """
    if value is None:
        return InputShape.ABSENT
    if isinstance(value, str):
        return InputShape.ABSENT if not value.strip() else InputShape.TEXT
    if isinstance(value, Mapping):
        return InputShape.MAPPING
    items = _as_list(value)
    if items is not None:
        if not items:
            return InputShape.ABSENT
        if len(items) == 2 and all(_is_number(v) for v in items):
            return InputShape.PAIR
        return InputShape.SEQUENCE
    if hasattr(value, 'x') and hasattr(value, 'y'):
        return InputShape.POINT
    raise MalformedGeometryInput(f"Unsupported coordinate input of type {type(value).__name__}: {value!r}")


def _pair_from_numbers(a: Any, b: Any, source: Any) -> List[float]:
    if not (_is_number(a) and _is_number(b)):
        raise MalformedGeometryInput(f"Coordinates must be numeric: {source!r}")
    pair = [float(a), float(b)]
    if not all(math.isfinite(v) for v in pair):
        raise MalformedGeometryInput(f"Coordinates must be finite: {source!r}")
    return pair


def _pair_from_text(text: str) -> List[float]:
    tokens = _TOKEN_SPLIT.split(text.strip())
    if len(tokens) != 2:
        raise MalformedGeometryInput(f"Expected two coordinates in {text!r}, found {len(tokens)}")
    bad = [t for t in tokens if not _NUMBER_TOKEN.fullmatch(t)]
    if bad:
        raise MalformedGeometryInput(f"Non-numeric coordinate in {text!r}: {bad!r}")
    return _pair_from_numbers(float(tokens[0]), float(tokens[1]), text)


def _axis_value(mapping: Mapping, symbols, axis: str) -> Any:
    hits = []
    for key, value in mapping.items():
        if str(key).lower() in symbols and value not in hits:
            hits.append(value)
    if not hits:
        raise MalformedGeometryInput(f"No {axis} axis key in {dict(mapping)!r}; accepted: {sorted(symbols)}")
    if len(hits) > 1:
        raise MalformedGeometryInput(f"Ambiguous {axis} axis in {dict(mapping)!r}: {hits!r}")
    return hits[0]


def _pair_from_mapping(mapping: Mapping, config: GeoConfig) -> Optional[List[float]]:
    lowered = {str(k).lower(): v for k, v in mapping.items()}
    if 'coordinates' in lowered and str(lowered.get('type', 'Point')).lower() == 'point':
        return normalize_point(lowered['coordinates'], config)
    x = _axis_value(mapping, config.x_symbols, 'x')
    y = _axis_value(mapping, config.y_symbols, 'y')
    return _pair_from_numbers(x, y, mapping)


def normalize_point(value: Any, config: Optional[GeoConfig] = None) -> Optional[List[float]]:
    """Normalize one point-like input to ``[x, y]`` floats, or None for absence."""
    config = resolve_config(config)
    shape = classify(value)
    if shape is InputShape.ABSENT:
        return None
    if shape is InputShape.PAIR:
        a, b = _as_list(value)
        return _pair_from_numbers(a, b, value)
    if shape is InputShape.POINT:
        return _pair_from_numbers(value.x, value.y, value)
    if shape is InputShape.MAPPING:
        return _pair_from_mapping(value, config)
    if shape is InputShape.TEXT:
        return _pair_from_text(value)
    raise MalformedGeometryInput(f"Expected a single point, got {value!r}")


def normalize_points(value: Any, config: Optional[GeoConfig] = None) -> Optional[List[List[float]]]:
    """Normalize a sequence of point-like items, preserving their order.

    Returns None for absent input. Each item follows `normalize_point`; an
    item that is itself absent is malformed.
    """
    config = resolve_config(config)
    shape = classify(value)
    if shape is InputShape.ABSENT:
        return None
    if shape is not InputShape.SEQUENCE:
        raise MalformedGeometryInput(f"Expected a sequence of points, got {value!r}")
    out = []
    for i, item in enumerate(_as_list(value)):
        pair = normalize_point(item, config)
        if pair is None:
            raise MalformedGeometryInput(f"Point {i} of {value!r} is empty")
        out.append(pair)
    logger.debug('normalized %d points', len(out))
    return out


def normalize_circle(value: Any, config: Optional[GeoConfig] = None) -> Optional[list]:
    """Normalize ``[center, radius]`` input to ``[[cx, cy], radius]``.

    The radius is kept exactly as given.
    """
    config = resolve_config(config)
    if hasattr(value, 'center') and hasattr(value, 'radius') and not isinstance(value, Mapping):
        return [normalize_point(value.center, config), value.radius]
    shape = classify(value)
    if shape is InputShape.ABSENT:
        return None
    items = _as_list(value)
    if items is None or len(items) != 2:
        raise MalformedGeometryInput(f"Expected [center, radius], got {value!r}")
    center = normalize_point(items[0], config)
    if center is None:
        raise MalformedGeometryInput(f"Circle center is empty in {value!r}")
    return [center, items[1]]
