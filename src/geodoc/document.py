"""
document.py

A thin record layer that puts geodoc field types on document classes.

    class Bar(SpatialDocument):
        location = GeoField(Point, spatial=True)

    Bar.spatial_scope('location')
    Bar.nearby([1, 1])                        # {'location': {'$near': [1.0, 1.0]}}
    Bar.closest_to_location([1, 1], max_distance=500)
    Bar.geo_near('location', [1, 1], limit=10)

Nothing here talks to a database. Selectors and pipelines are returned for
whatever store adapter the caller uses.

Field values are kept as wire arrays. Every read builds a new value from the
stored array, so in-place changes to a value you read (``doc.course.append``)
are not seen by the document; only assignment is tracked in ``doc.changed``.
"""
import logging
from typing import Any, Dict, List, Optional

from geodoc.config import GeoConfig
from geodoc.errors import MalformedGeometryInput, UnconfiguredSpatialField, UnknownFieldDefinition
from geodoc.query import build_geo_near_stage, near_clause

logger = logging.getLogger(__name__)


class GeoField:
    """Descriptor for a geometry-typed attribute.

    - kind: a field type with ``coerce``, ``from_wire`` and ``to_wire``
      (Point, LineString, Polygon, Box, Circle)
    - spatial: register the field for planar (2d) proximity queries
    - sphere: register the field for spherical (2dsphere) proximity queries
    """

    def __init__(self, kind, spatial: bool = False, sphere: bool = False,
                 config: Optional[GeoConfig] = None):
        self.kind = kind
        self.spatial = bool(spatial)
        self.sphere = bool(sphere)
        self.config = config
        self.name = None

    def __set_name__(self, owner, name):
        self.name = name

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return self.kind.from_wire(instance._attributes.get(self.name))

    def __set__(self, instance, value):
        try:
            obj = self.kind.coerce(value, self.config)
        except MalformedGeometryInput:
            logger.debug('%s.%s rejected %r', type(instance).__name__, self.name, value)
            raise
        wire = None if obj is None else obj.to_wire()
        if instance._attributes.get(self.name) != wire or self.name not in instance._attributes:
            instance.changed.add(self.name)
        instance._attributes[self.name] = wire

    @property
    def index_type(self) -> Optional[str]:
        if self.sphere:
            return '2dsphere'
        if self.spatial:
            return '2d'
        return None


class SpatialDocument:
    fields: Dict[str, GeoField] = {}
    spatial_fields: List[str] = []

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        fields = dict(getattr(cls, 'fields', {}))
        for name, attr in cls.__dict__.items():
            if isinstance(attr, GeoField):
                fields[name] = attr
        cls.fields = fields
        cls.spatial_fields = [name for name, f in fields.items() if f.spatial or f.sphere]

    def __init__(self, **attributes):
        self._attributes = {}
        self._plain = {}
        self.changed = set()
        for name, value in attributes.items():
            if name in self.fields:
                setattr(self, name, value)
            else:
                self._plain[name] = value

    def __getattr__(self, name):
        plain = self.__dict__.get('_plain', {})
        if name in plain:
            return plain[name]
        raise AttributeError(f"{type(self).__name__!r} object has no attribute {name!r}")

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> 'SpatialDocument':
        """Rebuild a record from stored wire values without marking changes."""
        obj = cls()
        for name, value in document.items():
            if name in cls.fields:
                obj._attributes[name] = value
            else:
                obj._plain[name] = value
        return obj

    def to_document(self) -> Dict[str, Any]:
        doc = dict(self._plain)
        doc.update(self._attributes)
        return doc

    def changes(self) -> Dict[str, Any]:
        return {name: self._attributes.get(name) for name in sorted(self.changed)}

    def mark_saved(self):
        self.changed.clear()

    # class helpers

    @classmethod
    def field_definition(cls, field_name) -> GeoField:
        name = str(field_name)
        if name not in cls.fields:
            raise UnknownFieldDefinition(f"{cls.__name__} has no geometry field {name!r}")
        return cls.fields[name]

    @classmethod
    def index_specs(cls) -> List[Dict[str, str]]:
        """Index key documents for the spatial fields, e.g. ``{'location': '2d'}``."""
        return [{name: cls.fields[name].index_type} for name in cls.spatial_fields]

    @classmethod
    def nearby(cls, coordinates, **options) -> Dict[str, Any]:
        """Proximity selector on the first spatial field.

        ``$nearSphere`` is used when that field was declared with ``sphere=True``.
        """
        if not cls.spatial_fields:
            raise UnconfiguredSpatialField(
                f"No spatial fields defined for {cls.__name__} to use with nearby(); "
                "declare a GeoField with spatial=True or sphere=True")
        name = cls.spatial_fields[0]
        definition = cls.field_definition(name)
        return near_clause(name, coordinates, options, field_is_spherical=definition.sphere,
                           config=definition.config)

    @classmethod
    def spatial_scope(cls, field_name, **default_options):
        """Install ``closest_to_<field_name>(coordinates, **options)`` on the class.

        Call options are merged over ``default_options``.
        """
        name = str(field_name)
        definition = cls.field_definition(name)

        def closest(klass, coordinates, **options):
            merged = dict(default_options)
            merged.update(options)
            return near_clause(name, coordinates, merged, field_is_spherical=definition.sphere,
                               config=definition.config)

        method_name = f'closest_to_{name}'
        closest.__name__ = method_name
        setattr(cls, method_name, classmethod(closest))
        return getattr(cls, method_name)

    @classmethod
    def geo_near(cls, field_name, coordinates, **options) -> List[Dict[str, Any]]:
        """``$geoNear`` aggregation pipeline on ``field_name``."""
        definition = cls.field_definition(field_name)
        return build_geo_near_stage(str(field_name), coordinates, options, config=definition.config)
