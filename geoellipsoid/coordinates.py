"""
Value types for points and ellipsoid shapes
"""

__all__ = ['EllipsoidShape', 'GeocentricPoint', 'GeodeticPoint', 'LatLon']

from typing import NamedTuple


class LatLon(NamedTuple):
    """
    A position on the surface of the ellipsoid.

    Angles are expressed in the angle unit of the Ellipsoid that produced the point.
    """
    latitude: float
    longitude: float


class GeodeticPoint(NamedTuple):
    """A latitude/longitude pair plus an elevation (meters) above the ellipsoid"""
    latitude: float
    longitude: float
    elevation: float = 0.0


class GeocentricPoint(NamedTuple):
    """An Earth-Centered-Earth-Fixed position in meters"""
    x: float
    y: float
    z: float


class EllipsoidShape(NamedTuple):
    """The size and shape of a reference ellipsoid"""
    equatorial_radius: float
    inverse_flattening: float

    @property
    def flattening(self) -> float:
        return 1.0 / self.inverse_flattening

    @property
    def semi_minor_axis(self) -> float:
        return self.equatorial_radius * (1.0 - self.flattening)

    @property
    def eccentricity_squared(self) -> float:
        f = self.flattening
        return f * (2.0 - f)
