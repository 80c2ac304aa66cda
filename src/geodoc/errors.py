"""Exception types raised by geodoc.

Every error is a `GeospatialError`; each also derives from the builtin that
callers would reach for first (``ValueError`` for bad input, ``KeyError`` for
a missing field) so existing ``except`` clauses keep working.
"""


class GeospatialError(Exception):
    pass


class MalformedGeometryInput(GeospatialError, ValueError):
    """Raw coordinate input that cannot be parsed into a canonical value."""


class InvalidCoordinates(GeospatialError, ValueError):
    """A query argument that does not describe a point or ring."""


class EmptyGeometry(GeospatialError, ValueError):
    """Geometry math requested on a sequence with no points."""


class UnconfiguredSpatialField(GeospatialError, RuntimeError):
    """A proximity helper was called on a document class with no spatial field."""


class UnknownFieldDefinition(GeospatialError, KeyError):
    """A helper referenced a field name the document class does not declare."""

    def __str__(self):
        return str(self.args[0]) if self.args else ''
