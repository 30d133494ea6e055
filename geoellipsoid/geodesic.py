"""
Vincenty's inverse and direct solutions of the geodesic on an ellipsoid.

Both solvers follow L. Pfeifer's NGS formulation of T. Vincenty's modified
Rainsford method with Helmert's elliptical terms ("Direct and Inverse Solutions
of Geodesics on the Ellipsoid with Application of Nested Equations", Survey
Review, April 1975). All angles are in radians and all distances in meters;
unit handling and output normalization belong to the Ellipsoid.
"""

__all__ = ['reduced_latitude_tangent', 'vincenty_direct', 'vincenty_inverse']

import math
from typing import Tuple

from geoellipsoid._const import (
    DIRECT_EPSILON, DIRECT_MAX_ITERATIONS,
    INVERSE_EPSILON, INVERSE_MAX_ITERATIONS, INVERSE_TOLERANCE,
)
from geoellipsoid.exceptions import NonConvergence, PoleSingularity
from geoellipsoid.utils.logging import LOGGER

_TWO_PI = 2.0 * math.pi

# Degree inputs rarely land exactly on pi/2 once converted to radians
_POLE_TOLERANCE = 1.0e-15


def reduced_latitude_tangent(latitude: float, flattening: float) -> float:
    """
    Tangent of the reduced (parametric) latitude, tan(U) = (1 - f) * tan(lat).

    Args:
        latitude:
            Geodetic latitude, in radians

        flattening:
            Flattening of the ellipsoid

    Raises:
        PoleSingularity: if the latitude lies on either pole

    Returns:
        float
    """
    cos_lat = math.cos(latitude)
    if cos_lat == 0 or abs(abs(latitude) - math.pi / 2) <= _POLE_TOLERANCE:
        raise PoleSingularity(latitude)

    return (1.0 - flattening) * math.sin(latitude) / cos_lat


def vincenty_inverse(
    equatorial_radius: float,
    flattening: float,
    lat1: float,
    lon1: float,
    lat2: float,
    lon2: float,
) -> Tuple[float, float]:
    """
    Calculate the distance and initial bearing between two points using Vincenty's
    inverse formula.

    The method is not valid for antipodal or nearly antipodal points; for those the
    longitude iteration does not settle and NonConvergence is raised.

    Args:
        equatorial_radius:
            Semi-major axis of the ellipsoid, in meters

        flattening:
            Flattening of the ellipsoid

        lat1, lon1:
            The start point, in radians

        lat2, lon2:
            The end point, in radians

    Raises:
        PoleSingularity: if either latitude lies on a pole
        NonConvergence: if the iteration cap is exhausted

    Returns:
        (distance in meters, forward azimuth in radians within (-pi, pi])
    """
    a, f = equatorial_radius, flattening
    r = 1.0 - f

    if lon1 < 0:
        lon1 += _TWO_PI
    if lon2 < 0:
        lon2 += _TWO_PI

    tu1 = reduced_latitude_tangent(lat1, f)
    tu2 = reduced_latitude_tangent(lat2, f)

    # Rounding would otherwise leave a residual distance and a flipped azimuth
    if lat1 == lat2 and lon1 == lon2:
        return 0.0, 0.0

    cu1 = 1.0 / math.sqrt(tu1 * tu1 + 1.0)
    su1 = cu1 * tu1
    cu2 = 1.0 / math.sqrt(tu2 * tu2 + 1.0)
    s = cu1 * cu2
    baz = s * tu2
    faz = baz * tu1
    dlon = lon2 - lon1

    # -------------------------------------------------------------------------
    # Iterate the longitude difference on the auxiliary sphere
    # -------------------------------------------------------------------------
    x = dlon
    delta = math.inf
    for iteration in range(1, INVERSE_MAX_ITERATIONS + 1):
        sx, cx = math.sin(x), math.cos(x)
        tu1 = cu2 * sx
        tu2 = baz - su1 * cu2 * cx

        sy = math.sqrt(tu1 * tu1 + tu2 * tu2)
        cy = s * cx + faz
        y = math.atan2(sy, cy)
        sa = 1.0 if sy == 0.0 else s * sx / sy

        c2a = 1.0 - sa * sa
        cz = faz + faz
        if c2a > 0.0:
            cz = -cz / c2a + cy
        e = 2.0 * cz * cz - 1.0
        c = ((-3.0 * c2a + 4.0) * f + 4.0) * c2a * f / 16.0

        d = x
        x = ((e * cy * c + cz) * sy * c + y) * sa
        x = (1.0 - c) * x * f + dlon
        delta = d - x

        if abs(delta) <= INVERSE_EPSILON:
            break
    else:
        # The epsilon is below double precision, so an exhausted cap is expected;
        # only a change that is still moving (or NaN) means divergence.
        if not abs(delta) <= INVERSE_TOLERANCE:
            raise NonConvergence('Vincenty inverse', INVERSE_MAX_ITERATIONS, delta)

    LOGGER.debug(
        'Vincenty inverse settled after %d iterations (last change %.3g)',
        iteration, delta
    )

    # -------------------------------------------------------------------------
    # Azimuth and Helmert's series for the distance
    # -------------------------------------------------------------------------
    faz = math.atan2(tu1, tu2)

    x = math.sqrt((1.0 / (r * r) - 1.0) * c2a + 1.0) + 1.0
    x = (x - 2.0) / x
    c = 1.0 - x
    c = (x * x / 4.0 + 1.0) / c
    d = (0.375 * x * x - 1.0) * x
    x = e * cy

    s = 1.0 - e - e
    s = ((((sy * sy * 4.0 - 3.0) * s * cz * d / 6.0 - x) * d / 4.0 + cz) * sy * d + y) * c * a * r

    return s, faz


def vincenty_direct(
    equatorial_radius: float,
    flattening: float,
    lat1: float,
    lon1: float,
    distance: float,
    bearing: float,
) -> Tuple[float, float]:
    """
    Calculate the destination reached from a start point, given a distance and an
    initial bearing, using Vincenty's direct formula.

    Args:
        equatorial_radius:
            Semi-major axis of the ellipsoid, in meters

        flattening:
            Flattening of the ellipsoid

        lat1, lon1:
            The start point, in radians

        distance:
            Distance travelled along the geodesic, in meters

        bearing:
            Initial bearing (clockwise from north), in radians

    Raises:
        PoleSingularity: if the start latitude lies on a pole
        NonConvergence: if the angular distance fails to settle

    Returns:
        (latitude, longitude) of the destination in radians; the longitude is
        not normalized
    """
    a, f = equatorial_radius, flattening
    r = 1.0 - f

    tu = reduced_latitude_tangent(lat1, f)
    sf, cf = math.sin(bearing), math.cos(bearing)

    baz = 0.0
    if cf != 0.0:
        baz = 2.0 * math.atan2(tu, cf)

    cu = 1.0 / math.sqrt(1.0 + tu * tu)
    su = tu * cu
    sa = cu * sf
    c2a = 1.0 - sa * sa
    x = 1.0 + math.sqrt((1.0 / (r * r) - 1.0) * c2a + 1.0)
    x = (x - 2.0) / x
    c = 1.0 - x
    c = (x * x / 4.0 + 1.0) / c
    d = x * (0.375 * x * x - 1.0)
    tu = distance / r / a / c
    y = tu

    # -------------------------------------------------------------------------
    # Iterate the angular distance on the auxiliary sphere
    # -------------------------------------------------------------------------
    for iteration in range(1, DIRECT_MAX_ITERATIONS + 1):
        sy, cy = math.sin(y), math.cos(y)
        cz = math.cos(baz + y)
        e = 2.0 * cz * cz - 1.0
        c = y
        x = e * cy
        y = 2.0 * e - 1.0
        y = (((sy * sy * 4.0 - 3.0) * y * cz * d / 6.0 + x) * d / 4.0 - cz) * sy * d + tu

        if abs(y - c) <= DIRECT_EPSILON:
            break
    else:
        raise NonConvergence('Vincenty direct', DIRECT_MAX_ITERATIONS, y - c)

    LOGGER.debug('Vincenty direct settled after %d iterations', iteration)

    baz = cu * cy * cf - su * sy
    c = r * math.sqrt(sa * sa + baz * baz)
    d = su * cy + cu * sy * cf
    lat2 = math.atan2(d, c)

    c = cu * cy - su * sy * cf
    x = math.atan2(sy * sf, c)
    c = ((-3.0 * c2a + 4.0) * f + 4.0) * c2a * f / 16.0
    d = ((e * cy * c + cz) * sy * c + y) * sa
    lon2 = lon1 + x - (1.0 - c) * d * f

    return lat2, lon2
