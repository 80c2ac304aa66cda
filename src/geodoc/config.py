# -*- coding: utf-8 -*-

"""
geodoc/config.py

This module centralizes the configuration consumed by the coordinate
normalizer, the geometry math helpers and the query translator. Keeping the
axis aliases and earth radii in one place keeps map parsing and spherical
radius conversions consistent across field types, queries and tests.

Contents:
---------
1. AXIS ALIASES:
   - `LNG_SYMBOLS` / `LAT_SYMBOLS`: key names accepted as the X axis
     (longitude) and the Y axis (latitude) when a point is given as a map,
     e.g. ``{"lat": 40.7, "lng": -73.9}``.

2. EARTH RADIUS:
   - `EARTH_RADIUS_KM` is the value MongoDB uses for spherical queries.
   - `EARTH_RADIUS` maps a unit tag to the radius in that unit:
       • m   meters
       • km  kilometers
       • mi  statute miles
       • ft  feet
       • sm  sea (nautical) miles

3. GeoConfig:
   - A dataclass bundling the alias sets, the radius table and an optional
     geodesy provider. Every public function takes an explicit ``config=``
     and falls back to the process-wide default from `get_config()`.

Usage:
------
    from geodoc.config import configure, reset_config

    configure(x_symbols={"lat", "latitude", "y"}, y_symbols={"lng", "longitude", "x"})
    ...
    reset_config()   # restore library defaults (tests call this between runs)

The default instance is shared by the whole process and is not locked.
Set it once at start-up; callers that mutate it while other threads read it
must serialize that themselves.
"""
import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, Optional, Set

# ───────────────────────────────────────────────────────────────────────────────
# 1) AXIS ALIASES (matched case-insensitively against string keys)
# ───────────────────────────────────────────────────────────────────────────────
LNG_SYMBOLS = ('x', 'lon', 'long', 'lng', 'longitude')
LAT_SYMBOLS = ('y', 'lat', 'latitude')

# ───────────────────────────────────────────────────────────────────────────────
# 2) EARTH RADIUS PER UNIT
# ───────────────────────────────────────────────────────────────────────────────
EARTH_RADIUS_KM = 6371          # taken directly from mongodb
RAD_PER_DEG = math.pi / 180

EARTH_RADIUS = {
    'm': EARTH_RADIUS_KM * 1000,
    'km': EARTH_RADIUS_KM,
    'mi': EARTH_RADIUS_KM * 0.621371192,
    'ft': EARTH_RADIUS_KM * 5280 * 0.621371192,
    'sm': EARTH_RADIUS_KM * 0.53995680345572,   # sea mile
}


def _symbol_set(symbols: Iterable[str]) -> Set[str]:
    return {str(s).lower() for s in symbols}


# ───────────────────────────────────────────────────────────────────────────────
# 3) CONFIGURATION VALUE
# ───────────────────────────────────────────────────────────────────────────────
@dataclass
class GeoConfig:
    """Axis aliases, earth radii and the optional geodesy provider."""

    x_symbols: Set[str] = field(default_factory=lambda: _symbol_set(LNG_SYMBOLS))
    y_symbols: Set[str] = field(default_factory=lambda: _symbol_set(LAT_SYMBOLS))
    earth_radius: Dict[str, float] = field(default_factory=lambda: dict(EARTH_RADIUS))
    geodesy: Optional[Any] = None

    def __post_init__(self):
        self.x_symbols = _symbol_set(self.x_symbols)
        self.y_symbols = _symbol_set(self.y_symbols)

    def earth_radius_for(self, unit: str = 'km') -> float:
        """Return the earth radius for ``unit`` (``m``, ``km``, ``mi``, ``ft``, ``sm``)."""
        key = str(unit).lower()
        if key not in self.earth_radius:
            raise ValueError(f"Unknown distance unit {unit!r}; expected one of {sorted(self.earth_radius)}")
        return float(self.earth_radius[key])

    def swap_axes(self) -> 'GeoConfig':
        """Read map input as latitude-first: X takes the latitude aliases and Y the longitude ones."""
        self.x_symbols, self.y_symbols = self.y_symbols, self.x_symbols
        return self

    def copy(self, **changes) -> 'GeoConfig':
        # replace() re-runs __post_init__, so the alias sets are fresh copies
        out = replace(self, **changes)
        if 'earth_radius' not in changes:
            out.earth_radius = dict(self.earth_radius)
        return out


_default_config = GeoConfig()


def get_config() -> GeoConfig:
    """Return the process-wide default configuration."""
    return _default_config


def resolve_config(config: Optional[GeoConfig] = None) -> GeoConfig:
    return config if config is not None else _default_config


def configure(**changes) -> GeoConfig:
    """Update attributes of the default configuration in place and return it."""
    for name, value in changes.items():
        if not hasattr(_default_config, name):
            raise AttributeError(f"GeoConfig has no setting {name!r}")
        if name in ('x_symbols', 'y_symbols'):
            value = _symbol_set(value)
        setattr(_default_config, name, value)
    return _default_config


def reset_config() -> GeoConfig:
    """Restore the default configuration to library defaults."""
    fresh = GeoConfig()
    _default_config.x_symbols = fresh.x_symbols
    _default_config.y_symbols = fresh.y_symbols
    _default_config.earth_radius = fresh.earth_radius
    _default_config.geodesy = None
    return _default_config
