""" Derived calculations built on the geodesic solvers """

from __future__ import annotations

__all__ = ['displacement', 'intermediate', 'location', 'scale']

import math
from typing import List, Tuple, TYPE_CHECKING

import numpy as np

from geoellipsoid._const import FLAT_EARTH_LIMIT_METERS
from geoellipsoid.coordinates import LatLon
from geoellipsoid.exceptions import InvalidArgument
from geoellipsoid.units import convert_to_meters, from_radians, to_radians

if TYPE_CHECKING:
    from geoellipsoid.ellipsoid import Ellipsoid


def _check_flat_earth_range(ellipsoid: Ellipsoid, distance: float):
    """Warns (once) when a tangent-plane calculation spans too great a distance"""
    if convert_to_meters(distance, ellipsoid.distance_unit) > FLAT_EARTH_LIMIT_METERS:
        ellipsoid.warn_once(
            'Flat-earth displacement used beyond %d km; results will be inaccurate. '
            '(this warning will not repeat)',
            FLAT_EARTH_LIMIT_METERS // 1000
        )


def intermediate(
    ellipsoid: Ellipsoid,
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
    steps: int,
) -> Tuple[float, float, List[LatLon]]:
    """
    Divides the path between two points into `steps` equal hops.

    The initial bearing is held constant and each waypoint is found with the direct
    solver at i * distance / steps. This is an approximation: a true geodesic's
    bearing varies along the path, so waypoints can drift for many steps over
    large distances.

    Args:
        ellipsoid:
            The Ellipsoid supplying shape and units

        lat1, lon1:
            The start point

        lat2, lon2:
            The end point

        steps:
            The number of hops; must be at least 1

    Returns:
        (distance, bearing, waypoints), where waypoints holds steps + 1 points
        including both ends
    """
    if isinstance(steps, bool) or steps < 1:
        raise InvalidArgument(f'steps must be a positive integer, got {steps}')

    distance, bearing = ellipsoid.inverse(lat1, lon1, lat2, lon2)
    hops = np.arange(steps + 1) * distance / steps

    return distance, bearing, [
        ellipsoid.direct(lat1, lon1, float(hop), bearing)
        for hop in hops
    ]


def displacement(
    ellipsoid: Ellipsoid,
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> Tuple[float, float]:
    """
    Returns the (x, y) displacement of the second point from the first on a plane
    tangent to the ellipsoid, x being east and y north. Only meaningful for short
    distances (a few kilometers).

    Args:
        ellipsoid:
            The Ellipsoid supplying shape and units

        lat1, lon1:
            The origin

        lat2, lon2:
            The displaced point

    Returns:
        (x, y) in the ellipsoid's distance unit
    """
    distance, bearing = ellipsoid.inverse(lat1, lon1, lat2, lon2)
    _check_flat_earth_range(ellipsoid, distance)

    bearing = to_radians(bearing, ellipsoid.angle_unit)
    return distance * math.sin(bearing), distance * math.cos(bearing)


def location(
    ellipsoid: Ellipsoid,
    lat1: float,
    lon1: float,
    x: float,
    y: float,
) -> LatLon:
    """
    Inverse of displacement(): the point found at an (x, y) offset, x east and y
    north, from an origin. Only meaningful for short distances.

    Args:
        ellipsoid:
            The Ellipsoid supplying shape and units

        lat1, lon1:
            The origin

        x, y:
            The offset, in the ellipsoid's distance unit

    Returns:
        LatLon
    """
    distance = math.hypot(x, y)
    _check_flat_earth_range(ellipsoid, distance)

    bearing = from_radians(math.atan2(x, y), ellipsoid.angle_unit)
    return ellipsoid.direct(lat1, lon1, distance, bearing)


def scale(ellipsoid: Ellipsoid, lat: float) -> Tuple[float, float]:
    """
    Local scale factors at a latitude: the distance covered by one unit of latitude
    (along the meridian) and by one unit of longitude (along the parallel).

    Args:
        ellipsoid:
            The Ellipsoid supplying shape and units

        lat:
            The latitude

    Returns:
        (latitude scale, longitude scale) in distance units per angle unit
    """
    phi = to_radians(lat, ellipsoid.angle_unit)
    e_sq = ellipsoid.eccentricity_squared
    w_sq = 1.0 - e_sq * math.sin(phi) ** 2

    lat_scale = ellipsoid.equatorial_radius * (1.0 - e_sq) / w_sq ** 1.5
    lon_scale = ellipsoid.equatorial_radius * math.cos(phi) / math.sqrt(w_sq)

    # meters per radian -> distance units per angle unit
    per_unit = to_radians(1.0, ellipsoid.angle_unit) / ellipsoid.distance_factor
    return lat_scale * per_unit, lon_scale * per_unit
