import math

import pytest
from pytest import approx

from geoellipsoid import AngleUnit, DistanceUnit, Ellipsoid, InvalidArgument
from geoellipsoid.calc import *
from tests.functions import assert_latlon_equal

SFO = (37.619002, -122.374843)
LAX = (33.942536, -118.408074)


def test_intermediate():
    geo = Ellipsoid('WGS84', AngleUnit.DEGREES, DistanceUnit.METER, True, True)
    distance, bearing, points = geo.intermediate(*SFO, *LAX, 5)
    assert (distance, bearing) == geo.inverse(*SFO, *LAX)
    assert len(points) == 6

    assert_latlon_equal(points[0], SFO, abs_tol=1e-12)
    assert_latlon_equal(points[-1], LAX, abs_tol=1e-8)

    # Hops are equally spaced and cumulative distance never decreases
    travelled = [geo.distance(*SFO, *point) for point in points]
    assert travelled == sorted(travelled)
    for i, actual in enumerate(travelled):
        assert actual == approx(i * distance / 5, abs=1e-3)


def test_intermediate_single_step():
    geo = Ellipsoid('WGS84', longitude_symmetric=False)
    _, _, points = intermediate(geo, *SFO, *LAX, 1)
    assert len(points) == 2
    # Longitudes follow the ellipsoid's convention
    assert_latlon_equal(points[0], (SFO[0], SFO[1] + 360.), abs_tol=1e-12)
    assert_latlon_equal(points[1], (LAX[0], LAX[1] + 360.), abs_tol=1e-8)


def test_intermediate_invalid_steps():
    geo = Ellipsoid()
    with pytest.raises(InvalidArgument):
        geo.intermediate(*SFO, *LAX, 0)

    with pytest.raises(InvalidArgument):
        intermediate(geo, *SFO, *LAX, -3)

    # Non-integral steps are rejected at the call boundary
    with pytest.raises(ValueError):
        geo.intermediate(*SFO, *LAX, 2.5)

    with pytest.raises(ValueError):
        geo.intermediate(*SFO, *LAX, True)

    with pytest.raises(InvalidArgument):
        intermediate(geo, *SFO, *LAX, True)


def test_intermediate_coincident():
    geo = Ellipsoid()
    distance, bearing, points = geo.intermediate(*SFO, *SFO, 3)
    assert (distance, bearing) == (0., 0.)
    assert len(points) == 4
    for point in points:
        assert_latlon_equal(point, SFO, abs_tol=1e-12)


def test_displacement():
    geo = Ellipsoid('WGS84')
    x, y = geo.displacement(
        41.978744444444, 272.096858333333, 42.005419444444, 272.073286111111
    )
    assert x == approx(-1952.8108885261, abs=1e-4)
    assert y == approx(2963.14446772882, abs=1e-4)

    # Displacement agrees with range and bearing
    distance, bearing = geo.inverse(
        41.978744444444, 272.096858333333, 42.005419444444, 272.073286111111
    )
    assert math.hypot(x, y) == approx(distance)
    assert math.degrees(math.atan2(x, y)) == approx(bearing)

    # Reported in the ellipsoid's distance unit
    geo = Ellipsoid('WGS84', distance_unit=DistanceUnit.FOOT)
    x_ft, y_ft = displacement(
        geo, 41.978744444444, 272.096858333333, 42.005419444444, 272.073286111111
    )
    assert x_ft == approx(x / 0.3048)
    assert y_ft == approx(y / 0.3048)


def test_location():
    geo = Ellipsoid('WGS84', longitude_symmetric=False)
    actual = geo.location(41.978744444444, 272.096858333333, -1952.8108885261, 2963.14446772882)
    assert_latlon_equal(actual, (42.005419444444, 272.073286111111), abs_tol=1e-9)

    # Zero offset stays put
    assert_latlon_equal(location(geo, *SFO, 0., 0.), (SFO[0], SFO[1] + 360.), abs_tol=1e-12)

    # Due east, in radians
    geo = Ellipsoid('WGS84', AngleUnit.RADIANS)
    lat, lon = geo.location(0., 0., 1000., 0.)
    assert lat == approx(0., abs=1e-15)
    assert lon == approx(1000. / 6378137.0)


def test_displacement_location_round_trip():
    geo = Ellipsoid('WGS84', distance_unit=DistanceUnit.KILOMETER)
    for x, y in ((1.5, 2.), (-0.25, 3.), (-2., -2.), (4., -0.5)):
        lat, lon = geo.location(*SFO, x, y)
        actual_x, actual_y = geo.displacement(*SFO, lat, lon)
        assert actual_x == approx(x, abs=1e-9)
        assert actual_y == approx(y, abs=1e-9)


def test_flat_earth_warning(caplog, monkeypatch):
    monkeypatch.setattr(Ellipsoid, 'WARNED_ONCE', set())
    geo = Ellipsoid('WGS84')

    geo.displacement(*SFO, 37.62, -122.37)
    assert 'Flat-earth' not in caplog.text

    geo.displacement(*SFO, *LAX)
    assert 'Flat-earth displacement used beyond 10 km' in caplog.text

    geo.location(*SFO, 50_000., 50_000.)
    assert caplog.text.count('Flat-earth') == 1


def test_scale():
    geo = Ellipsoid('WGS84')

    lat_scale, lon_scale = geo.scale(0.)
    assert lat_scale == approx(110574.28, abs=0.01)
    assert lon_scale == approx(6378137.0 * math.pi / 180, rel=1e-12)

    lat_scale, lon_scale = geo.scale(45.)
    assert lat_scale == approx(111131.75, abs=0.05)
    assert lon_scale == approx(78847.0, abs=0.5)

    # Scales describe short hops along the meridian and the parallel
    assert geo.distance(45., 10., 45.001, 10.) == approx(scale(geo, 45.0005)[0] * 0.001, rel=1e-6)
    assert geo.distance(45., 10., 45., 10.001) == approx(scale(geo, 45.)[1] * 0.001, rel=1e-6)


def test_scale_units():
    lat_deg_m, lon_deg_m = Ellipsoid('WGS84').scale(30.)
    lat_rad_km, lon_rad_km = Ellipsoid('WGS84', 'radians', 'kilometer').scale(math.radians(30.))
    assert lat_rad_km == approx(lat_deg_m * 180 / math.pi / 1000)
    assert lon_rad_km == approx(lon_deg_m * 180 / math.pi / 1000)
