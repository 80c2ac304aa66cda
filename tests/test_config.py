import pytest

from geodoc.config import (EARTH_RADIUS, EARTH_RADIUS_KM, GeoConfig, configure, get_config,
                           reset_config)
from geodoc.geodesy import HaversineGeodesy


def test_default_alias_sets():
    config = get_config()
    assert config.x_symbols == {'x', 'lon', 'long', 'lng', 'longitude'}
    assert config.y_symbols == {'y', 'lat', 'latitude'}


def test_earth_radius_table():
    assert EARTH_RADIUS['m'] == EARTH_RADIUS_KM * 1000
    assert EARTH_RADIUS['km'] == 6371
    assert EARTH_RADIUS['mi'] == pytest.approx(3958.76, abs=0.01)
    assert EARTH_RADIUS['sm'] == pytest.approx(3440.07, abs=0.01)
    assert get_config().earth_radius_for('KM') == 6371.0


def test_unknown_unit():
    with pytest.raises(ValueError):
        get_config().earth_radius_for('furlong')


def test_configure_and_reset():
    configure(x_symbols={'East'}, geodesy=HaversineGeodesy())
    assert get_config().x_symbols == {'east'}
    get_config().earth_radius['km'] = 1.0
    reset_config()
    assert 'lng' in get_config().x_symbols
    assert get_config().earth_radius['km'] == 6371
    assert get_config().geodesy is None


def test_configure_rejects_unknown_setting():
    with pytest.raises(AttributeError):
        configure(projection='EPSG:3857')


def test_swap_axes():
    config = GeoConfig().swap_axes()
    assert 'latitude' in config.x_symbols
    assert 'longitude' in config.y_symbols


def test_copy_is_independent():
    base = get_config()
    copy = base.copy()
    copy.x_symbols.add('easting')
    copy.earth_radius['km'] = 1
    assert 'easting' not in base.x_symbols
    assert base.earth_radius['km'] == 6371
