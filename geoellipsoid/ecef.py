"""
Conversions between geodetic and Earth-Centered-Earth-Fixed (ECEF) coordinates.

Angles are in radians, lengths in meters.
"""

__all__ = ['ecef_to_geodetic', 'geodetic_to_ecef']

import math
from typing import Tuple

from geoellipsoid.exceptions import OnPolarAxis


def geodetic_to_ecef(
    equatorial_radius: float,
    flattening: float,
    lat: float,
    lon: float,
    elevation: float = 0.0,
) -> Tuple[float, float, float]:
    """
    Convert a geodetic position to ECEF coordinates (closed form).

    Args:
        equatorial_radius:
            Semi-major axis of the ellipsoid, in meters

        flattening:
            Flattening of the ellipsoid

        lat, lon:
            Geodetic latitude and longitude, in radians

        elevation:
            Height above the ellipsoid, in meters

    Returns:
        (x, y, z) in meters
    """
    a = equatorial_radius
    b = a * (1.0 - flattening)
    e_sq = (a * a - b * b) / (a * a)

    sin_lat, cos_lat = math.sin(lat), math.cos(lat)
    n = a / math.sqrt(1.0 - e_sq * sin_lat * sin_lat)

    x = (n + elevation) * cos_lat * math.cos(lon)
    y = (n + elevation) * cos_lat * math.sin(lon)
    z = (b * b / (a * a) * n + elevation) * sin_lat
    return x, y, z


def ecef_to_geodetic(
    equatorial_radius: float,
    flattening: float,
    x: float,
    y: float,
    z: float,
) -> Tuple[float, float, float]:
    """
    Convert ECEF coordinates to a geodetic position using Bowring's closed-form
    approximation (a single correction from the parametric latitude, no iteration).

    Args:
        equatorial_radius:
            Semi-major axis of the ellipsoid, in meters

        flattening:
            Flattening of the ellipsoid

        x, y, z:
            ECEF coordinates, in meters

    Raises:
        OnPolarAxis: if the point lies on the polar axis (x == y == 0)

    Returns:
        (latitude, longitude, elevation); angles in radians within (-pi, pi],
        elevation in meters
    """
    if x == 0 and y == 0:
        raise OnPolarAxis(x, y, z)

    a = equatorial_radius
    b = a * (1.0 - flattening)
    e_sq = (a * a - b * b) / (a * a)
    ep_sq = (a * a - b * b) / (b * b)

    p = math.hypot(x, y)
    theta = math.atan2(z * a, p * b)
    sin_th, cos_th = math.sin(theta), math.cos(theta)

    lon = math.atan2(y, x)
    lat = math.atan2(
        z + ep_sq * b * sin_th ** 3,
        p - e_sq * a * cos_th ** 3,
    )

    sin_lat = math.sin(lat)
    n = a / math.sqrt(1.0 - e_sq * sin_lat * sin_lat)
    elevation = p / math.cos(lat) - n
    return lat, lon, elevation
