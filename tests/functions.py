from pytest import approx

from geoellipsoid import LatLon


def assert_latlon_equal(p1: LatLon, p2: LatLon, abs_tol=1e-7):
    """
    Asserts that two positions are equal within a specified absolute tolerance.

    Args:
        p1: The first position, as (latitude, longitude)
        p2: The second position, as (latitude, longitude)
        abs_tol: The absolute tolerance for floating point comparison.
                 Default is 1e-7 (approx 1.1cm at the equator, in degrees).
    """
    try:
        assert p1[0] == approx(p2[0], abs=abs_tol)
        assert p1[1] == approx(p2[1], abs=abs_tol)
    except AssertionError as e:
        print(p1)
        print(p2)
        raise e
