import copy
import pickle

import pytest

from geodoc.config import configure
from geodoc.errors import MalformedGeometryInput
from geodoc.fields.point import Point


def test_coerce_from_text_and_array():
    assert Point.coerce('2.99,3.99').to_wire() == [2.99, 3.99]
    assert Point.coerce([10, -9]) == Point(10, -9)


def test_coerce_absence():
    assert Point.coerce(None) is None
    assert Point.coerce('') is None
    assert Point.coerce([]) is None


def test_coerce_mapping_respects_configured_axes():
    assert Point.coerce({'latitude': 2.99, 'longitude': 3.99}).to_wire() == [3.99, 2.99]
    configure(x_symbols={'y', 'lat', 'latitude'}, y_symbols={'x', 'lon', 'long', 'lng', 'longitude'})
    assert Point.coerce({'latitude': 2.99, 'longitude': 3.99}).to_wire() == [2.99, 3.99]


def test_coerce_malformed():
    with pytest.raises(MalformedGeometryInput):
        Point.coerce('1 2 3')


def test_wire_roundtrip_and_absence():
    assert Point.from_wire([8.0, 9.0]).to_wire() == [8.0, 9.0]
    assert Point.from_wire(None) is None


def test_accessors():
    p = Point(3, 2)
    assert p.x == 3.0 and p.y == 2.0
    assert p[0] == 3.0
    assert list(p) == [3.0, 2.0]
    assert len(p) == 2


def test_immutable_and_hashable():
    p = Point(1, 2)
    with pytest.raises(AttributeError):
        p.x = 5
    assert {Point(1, 2), Point(1.0, 2.0)} == {p}


def test_equality_by_value():
    assert Point(1, 2) == Point(1.0, 2.0)
    assert Point(1, 2) != Point(2, 1)


def test_str_formats_floats():
    assert str(Point(1, 2)) == '1.0, 2.0'
    assert str(Point(1.0009, 21.009)) == '1.0009, 21.009'


def test_views():
    p = Point(1, 2)
    assert p.to_lat_lon() == {'latitude': 2.0, 'longitude': 1.0}
    assert p.to_dict('lon', 'lat') == {'lon': 1.0, 'lat': 2.0}
    assert p.reverse() == [2.0, 1.0]
    assert Point(1.0009, 21.009).to_geo_json() == {'type': 'Point', 'coordinates': [1.0009, 21.009]}
    assert Point(1.0009, 21.009).to_json() == '[1.0009,21.009]'


def test_radius_helpers():
    p = Point(3, 2)
    assert p.radius() == [[3.0, 2.0], 1]
    assert p.radius_sphere()[1] == pytest.approx(0.00015, abs=0.0001)
    assert p.radius_sphere(1000, 'm')[1] == pytest.approx(0.00015, abs=0.0001)
    assert p.radius_sphere(1, 'mi')[1] == pytest.approx(0.00025, abs=0.0001)


def test_radius_sphere_unknown_unit():
    with pytest.raises(ValueError):
        Point(1, 1).radius_sphere(1, 'parsec')


def test_distance_planar_fallback():
    assert Point(0, 0).distance(Point(3, 4)) == pytest.approx(5.0)
    assert Point(0, 0).distance('3 4') == pytest.approx(5.0)


def test_copy_and_pickle_keep_value():
    point = Point(1, 2)
    assert copy.copy(point) == point
    assert copy.deepcopy(point) == point
    restored = pickle.loads(pickle.dumps(point))
    assert restored == point
    with pytest.raises(AttributeError):
        restored._x = 5
