import math

from pytest import approx

from geoellipsoid.utils.functions import *


def test_normalize_angle_symmetric():
    assert normalize_angle(0., 360., True) == 0.
    assert normalize_angle(180., 360., True) == 180.
    assert normalize_angle(-180., 360., True) == 180.
    assert normalize_angle(190., 360., True) == approx(-170.)
    assert normalize_angle(-190., 360., True) == approx(170.)
    assert normalize_angle(720. + 45., 360., True) == approx(45.)
    assert normalize_angle(-math.pi, 2 * math.pi, True) == math.pi


def test_normalize_angle_positive():
    assert normalize_angle(0., 360., False) == 0.
    assert normalize_angle(360., 360., False) == 0.
    assert normalize_angle(-90., 360., False) == 270.
    assert normalize_angle(450., 360., False) == approx(90.)
    assert normalize_angle(-1e-17, 360., False) == 0.
    assert normalize_angle(-math.pi / 2, 2 * math.pi, False) == approx(3 * math.pi / 2)
