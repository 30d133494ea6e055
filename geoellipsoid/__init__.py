"""
geoellipsoid: distance, bearing and coordinate-frame calculations on the surface
of a reference ellipsoid
"""

from geoellipsoid._version import __version__  # noqa: F401
from geoellipsoid.utils.logging import LOGGER
from geoellipsoid.coordinates import EllipsoidShape, GeocentricPoint, GeodeticPoint, LatLon
from geoellipsoid.ellipsoid import Ellipsoid, ellipsoid_names, make_ellipsoid
from geoellipsoid.exceptions import (
    GeodesyError, InvalidArgument, InvalidEllipsoidName, NonConvergence,
    OnPolarAxis, PoleSingularity
)
from geoellipsoid.units import AngleUnit, DistanceUnit

__all__ = [
    'AngleUnit',
    'DistanceUnit',
    'Ellipsoid',
    'EllipsoidShape',
    'GeocentricPoint',
    'GeodesyError',
    'GeodeticPoint',
    'InvalidArgument',
    'InvalidEllipsoidName',
    'LatLon',
    'NonConvergence',
    'OnPolarAxis',
    'PoleSingularity',
    'ellipsoid_names',
    'make_ellipsoid',
    'LOGGER',
]
