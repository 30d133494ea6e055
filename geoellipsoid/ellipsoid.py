"""
Representation of a reference ellipsoid together with the unit conventions used
for every calculation made on it
"""

__all__ = ['Ellipsoid', 'ellipsoid_names', 'make_ellipsoid']

import math
from typing import List, Optional, Tuple, Union

from pydantic import StrictInt, validate_call

from geoellipsoid import calc
from geoellipsoid._const import ELLIPSOIDS
from geoellipsoid.coordinates import EllipsoidShape, GeocentricPoint, GeodeticPoint, LatLon
from geoellipsoid.ecef import ecef_to_geodetic, geodetic_to_ecef
from geoellipsoid.exceptions import InvalidArgument, InvalidEllipsoidName
from geoellipsoid.geodesic import vincenty_direct, vincenty_inverse
from geoellipsoid.units import AngleUnit, DistanceUnit, convert_from_meters, from_radians, to_radians
from geoellipsoid.utils.functions import normalize_angle
from geoellipsoid.utils.mixins import LoggingMixin


def ellipsoid_names() -> List[str]:
    """The names of the predefined reference ellipsoids"""
    return sorted(ELLIPSOIDS)


class Ellipsoid(LoggingMixin):
    """
    A reference ellipsoid and the units in which its calculations are expressed.

    Ellipsoids are immutable and may be shared freely. Latitudes, longitudes and
    bearings are given and returned in `angle_unit`; distances in `distance_unit`;
    elevations and geocentric coordinates always in meters.

    Example:
        >>> geo = Ellipsoid('WGS84', AngleUnit.DEGREES, DistanceUnit.METER)
        >>> distance, bearing = geo.inverse(37.619002, -122.374843, 33.942536, -118.408074)

    Args:
        shape:
            The name of a predefined ellipsoid (see ellipsoid_names(), case-insensitive)
            or a custom EllipsoidShape / (equatorial radius, inverse flattening) pair

        angle_unit:
            Unit of latitudes, longitudes and bearings

        distance_unit:
            Unit of distances

        longitude_symmetric:
            If True, output longitudes lie in (-180, 180]; otherwise [0, 360)

        bearing_symmetric:
            If True, output bearings lie in (-180, 180]; otherwise [0, 360)
    """

    @validate_call(config=dict(arbitrary_types_allowed=True))
    def __init__(
        self,
        shape: Union[str, EllipsoidShape] = 'WGS84',
        angle_unit: AngleUnit = AngleUnit.DEGREES,
        distance_unit: DistanceUnit = DistanceUnit.METER,
        longitude_symmetric: bool = True,
        bearing_symmetric: bool = True,
    ):
        super().__init__()
        name: Optional[str] = None
        if isinstance(shape, str):
            name = shape.upper()
            if name not in ELLIPSOIDS:
                raise InvalidEllipsoidName(shape)
            shape = EllipsoidShape(*ELLIPSOIDS[name])

        elif not 0 < shape.equatorial_radius < math.inf:
            raise InvalidArgument(
                f'Equatorial radius must be positive and finite, got {shape.equatorial_radius}'
            )
        elif not 1 < shape.inverse_flattening < math.inf:
            raise InvalidArgument(
                f'Inverse flattening must be finite and greater than 1, got {shape.inverse_flattening}'
            )

        self._name = name
        self._shape = shape
        self._angle_unit = angle_unit
        self._distance_unit = distance_unit
        self._longitude_symmetric = longitude_symmetric
        self._bearing_symmetric = bearing_symmetric

    def __eq__(self, other):
        if not isinstance(other, Ellipsoid):
            return False

        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        label = self._name or f'{self.equatorial_radius}, 1/{self.inverse_flattening}'
        return (
            f'<Ellipsoid({label}, {self._angle_unit.value}, {self._distance_unit.value})>'
        )

    def _key(self):
        return (
            self._shape, self._angle_unit, self._distance_unit,
            self._longitude_symmetric, self._bearing_symmetric
        )

    @property
    def name(self) -> Optional[str]:
        """The predefined ellipsoid name, or None for a custom shape"""
        return self._name

    @property
    def shape(self) -> EllipsoidShape:
        return self._shape

    @property
    def equatorial_radius(self) -> float:
        return self._shape.equatorial_radius

    @property
    def inverse_flattening(self) -> float:
        return self._shape.inverse_flattening

    @property
    def flattening(self) -> float:
        return self._shape.flattening

    @property
    def semi_minor_axis(self) -> float:
        return self._shape.semi_minor_axis

    @property
    def eccentricity_squared(self) -> float:
        return self._shape.eccentricity_squared

    @property
    def angle_unit(self) -> AngleUnit:
        return self._angle_unit

    @property
    def distance_unit(self) -> DistanceUnit:
        return self._distance_unit

    @property
    def distance_factor(self) -> float:
        """Meters per distance unit"""
        return self._distance_unit.factor

    @property
    def longitude_symmetric(self) -> bool:
        return self._longitude_symmetric

    @property
    def bearing_symmetric(self) -> bool:
        return self._bearing_symmetric

    def _radians(self, *angles: float) -> List[float]:
        return [to_radians(x, self._angle_unit) for x in angles]

    def _normalize(self, angle: float, symmetric: bool) -> float:
        return normalize_angle(
            from_radians(angle, self._angle_unit),
            self._angle_unit.full_turn,
            symmetric
        )

    def inverse(self, lat1: float, lon1: float, lat2: float, lon2: float) -> Tuple[float, float]:
        """
        Calculate the distance and initial bearing from one point to another
        (Vincenty's inverse method).

        Not valid for antipodal or nearly antipodal points.

        Args:
            lat1, lon1:
                The start point

            lat2, lon2:
                The end point

        Raises:
            PoleSingularity: if either latitude lies exactly on a pole
            NonConvergence: if the points are (nearly) antipodal

        Returns:
            (distance, bearing)
        """
        meters, azimuth = vincenty_inverse(
            self.equatorial_radius, self.flattening,
            *self._radians(lat1, lon1, lat2, lon2)
        )
        return (
            convert_from_meters(meters, self._distance_unit),
            self._normalize(azimuth, self._bearing_symmetric)
        )

    def distance(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """The distance from one point to another; see inverse()"""
        return self.inverse(lat1, lon1, lat2, lon2)[0]

    def bearing(self, lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """The initial bearing from one point to another; see inverse()"""
        return self.inverse(lat1, lon1, lat2, lon2)[1]

    def direct(self, lat1: float, lon1: float, distance: float, bearing: float) -> LatLon:
        """
        Calculate the point reached by travelling a distance along an initial bearing
        (Vincenty's direct method).

        Args:
            lat1, lon1:
                The start point

            distance:
                The distance travelled

            bearing:
                The initial bearing, clockwise from north

        Raises:
            PoleSingularity: if the start latitude lies exactly on a pole
            NonConvergence: if the angular distance fails to settle

        Returns:
            LatLon
        """
        lat1, lon1, bearing = self._radians(lat1, lon1, bearing)
        lat2, lon2 = vincenty_direct(
            self.equatorial_radius, self.flattening,
            lat1, lon1, distance * self.distance_factor, bearing
        )
        return LatLon(
            from_radians(lat2, self._angle_unit),
            self._normalize(lon2, self._longitude_symmetric)
        )

    # Geo::Ellipsoid names
    to = inverse
    at = direct

    def to_ecef(self, lat: float, lon: float, elevation: float = 0.0) -> GeocentricPoint:
        """
        Convert a geodetic position to Earth-Centered-Earth-Fixed coordinates.

        Args:
            lat, lon:
                The position

            elevation:
                Height above the ellipsoid, in meters

        Returns:
            GeocentricPoint, in meters
        """
        return GeocentricPoint(*geodetic_to_ecef(
            self.equatorial_radius, self.flattening,
            *self._radians(lat, lon), elevation
        ))

    def to_lla(self, x: float, y: float, z: float) -> GeodeticPoint:
        """
        Convert Earth-Centered-Earth-Fixed coordinates (meters) to a geodetic position.

        Raises:
            OnPolarAxis: if the point lies on the polar axis

        Returns:
            GeodeticPoint, with elevation in meters
        """
        lat, lon, elevation = ecef_to_geodetic(
            self.equatorial_radius, self.flattening, x, y, z
        )
        return GeodeticPoint(
            from_radians(lat, self._angle_unit),
            self._normalize(lon, self._longitude_symmetric),
            elevation
        )

    @validate_call
    def intermediate(
        self,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
        steps: StrictInt,
    ) -> Tuple[float, float, List[LatLon]]:
        """Equally spaced waypoints between two points; see calc.intermediate()"""
        return calc.intermediate(self, lat1, lon1, lat2, lon2, steps)

    def displacement(
        self,
        lat1: float,
        lon1: float,
        lat2: float,
        lon2: float,
    ) -> Tuple[float, float]:
        """Flat-earth (x, y) offset of one point from another; see calc.displacement()"""
        return calc.displacement(self, lat1, lon1, lat2, lon2)

    def location(self, lat1: float, lon1: float, x: float, y: float) -> LatLon:
        """The point at a flat-earth (x, y) offset from another; see calc.location()"""
        return calc.location(self, lat1, lon1, x, y)

    def scale(self, lat: float) -> Tuple[float, float]:
        """Local (latitude, longitude) scale factors; see calc.scale()"""
        return calc.scale(self, lat)


def make_ellipsoid(
    name: str,
    angle_unit: AngleUnit,
    distance_unit: DistanceUnit,
    longitude_symmetric: bool,
    bearing_symmetric: bool,
) -> Ellipsoid:
    """
    Create an Ellipsoid from a predefined name, requiring every option explicitly.

    Raises:
        InvalidEllipsoidName: if the name is not a predefined ellipsoid
    """
    return Ellipsoid(name, angle_unit, distance_unit, longitude_symmetric, bearing_symmetric)
