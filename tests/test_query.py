import pytest

from geodoc.errors import InvalidCoordinates, MalformedGeometryInput
from geodoc.fields.circle import Circle
from geodoc.fields.line_string import LineString
from geodoc.fields.point import Point
from geodoc import query


def test_near_value_bare_pair():
    assert query.near_operator_value([3, 3]) == [3.0, 3.0]
    assert query.near_operator_value(Point(3, 3), {}) == [3.0, 3.0]


def test_near_value_with_max_distance():
    value = query.near_operator_value('1 2', {'max_distance': 500})
    assert value == {
        '$geometry': {'type': 'Point', 'coordinates': [1.0, 2.0]},
        '$maxDistance': 500.0,
    }
    assert isinstance(value['$maxDistance'], float)


@pytest.mark.parametrize('bad', [None, '', 'a,b', [1, 2, 3], {'lat': 1}])
def test_near_value_rejects_bad_points(bad):
    with pytest.raises(InvalidCoordinates):
        query.near_operator_value(bad)


def test_invalid_coordinates_chains_cause():
    with pytest.raises(InvalidCoordinates) as info:
        query.near_operator_value('1 2 3')
    assert isinstance(info.value.__cause__, MalformedGeometryInput)


def test_choose_operator():
    assert query.choose_operator(False) == 'near'
    assert query.choose_operator(True) == 'nearSphere'
    assert query.choose_operator(False, {'spherical': True}) == 'nearSphere'
    # explicit option wins even when false
    assert query.choose_operator(True, {'spherical': False}) == 'near'


def test_near_clause_shapes():
    assert query.near_clause('location', [3, 3]) == {'location': {'$near': [3.0, 3.0]}}
    assert query.near_clause('spot', [3, 3], field_is_spherical=True) == {'spot': {'$nearSphere': [3.0, 3.0]}}
    clause = query.near_clause('location', [1, 2], {'max_distance': 10, 'query': {'name': 'jfk'}})
    assert clause == {
        'name': 'jfk',
        'location': {'$near': {'$geometry': {'type': 'Point', 'coordinates': [1.0, 2.0]}, '$maxDistance': 10.0}},
    }


def test_geo_near_defaults():
    pipeline = query.build_geo_near_stage('location', [10, 20], {})
    assert pipeline == [{'$geoNear': {
        'near': [10.0, 20.0],
        'key': 'location',
        'distanceField': 'distance',
        'spherical': False,
    }}]


def test_geo_near_limit_becomes_own_stage():
    pipeline = query.build_geo_near_stage('location', [10, 20], {'limit': 10})
    assert len(pipeline) == 2
    assert pipeline[1] == {'$limit': 10}
    assert 'limit' not in pipeline[0]['$geoNear']


def test_geo_near_caller_cannot_override_key_or_near():
    stage = query.build_geo_near_stage('location', [10, 20], {
        'key': 'other', 'near': [0, 0], 'distanceField': 'dist.calculated', 'maxDistance': 5000,
    })[0]['$geoNear']
    assert stage['key'] == 'location'
    assert stage['near'] == [10.0, 20.0]
    assert stage['distanceField'] == 'dist.calculated'
    assert stage['maxDistance'] == 5000


@pytest.mark.parametrize('given, expected', [(True, True), (False, False), (1, True), (0, False), (None, False)])
def test_geo_near_spherical_is_strict_bool(given, expected):
    stage = query.build_geo_near_stage('location', [10, 20], {'spherical': given})[0]['$geoNear']
    assert stage['spherical'] is expected


def test_geo_near_does_not_mutate_options():
    options = {'limit': 3}
    query.build_geo_near_stage('location', [1, 1], options)
    assert options == {'limit': 3}


def test_geo_near_rejects_bad_point():
    with pytest.raises(InvalidCoordinates):
        query.build_geo_near_stage('location', 'nowhere')


def test_polygon_within_clause_from_geom_box():
    ring = LineString([[-72.98, 41.75], [-74.98, 39.75]]).geom_box()
    clause = query.build_polygon_within_clause(ring)
    assert clause == {'$geoWithin': {'$geometry': {'type': 'Polygon', 'coordinates': [ring]}}}
    assert len(clause['$geoWithin']['$geometry']['coordinates'][0]) == 5


def test_polygon_within_clause_rejects_empty():
    with pytest.raises(InvalidCoordinates):
        query.build_polygon_within_clause([])
    with pytest.raises(InvalidCoordinates):
        query.build_polygon_within_clause([[1, 1], 'x'])


def test_legacy_box_and_circle_clauses():
    assert query.build_box_within_clause([[3, 4], [1, 2]]) == {'$geoWithin': {'$box': [[1.0, 2.0], [3.0, 4.0]]}}
    assert query.build_circle_within_clause(Circle([1, 2], 0.4)) == {'$geoWithin': {'$center': [[1.0, 2.0], 0.4]}}
    assert query.build_circle_within_clause([[1, 2], 0.1], spherical=True) == {
        '$geoWithin': {'$centerSphere': [[1.0, 2.0], 0.1]}}
    with pytest.raises(InvalidCoordinates):
        query.build_circle_within_clause('1 2')
