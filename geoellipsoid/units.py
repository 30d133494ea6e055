"""
Module for unit declarations and conversions
"""
__all__ = [
    'AngleUnit', 'DistanceUnit',
    'convert_from_meters', 'convert_to_meters', 'from_radians', 'to_radians',
]

from enum import Enum
import math
from typing import Union

from geoellipsoid._const import DISTANCE_FACTORS


class AngleUnit(str, Enum):
    """Unit in which latitudes, longitudes and bearings are given and returned"""
    DEGREES = 'degrees'
    RADIANS = 'radians'

    @property
    def full_turn(self) -> float:
        """One full revolution, expressed in this unit"""
        return 360.0 if self is AngleUnit.DEGREES else 2 * math.pi


class DistanceUnit(str, Enum):
    """Unit in which distances are given and returned"""
    METER = 'meter'
    FOOT = 'foot'
    KILOMETER = 'kilometer'
    MILE = 'mile'
    NAUTICAL_MILE = 'nautical_mile'

    @property
    def factor(self) -> float:
        """Meters per unit"""
        return DISTANCE_FACTORS[self.value]


def convert_to_meters(distance: float, unit: Union[DistanceUnit, str]) -> float:
    """
    Converts distance to meters.

    Args:
        distance (float): The distance value.
        unit (DistanceUnit): The unit of distance, or its name ('meter', 'foot',
            'kilometer', 'mile', 'nautical_mile').

    Returns:
        float: The distance in meters.
    """
    return distance * DistanceUnit(unit).factor


def convert_from_meters(distance: float, unit: Union[DistanceUnit, str]) -> float:
    """
    Converts a distance in meters to the given unit.

    Args:
        distance (float): The distance in meters.
        unit (DistanceUnit): The target unit of distance.

    Returns:
        float: The distance in the target unit.
    """
    return distance / DistanceUnit(unit).factor


def to_radians(angle: float, unit: AngleUnit) -> float:
    """Converts an angle given in `unit` to radians"""
    if unit is AngleUnit.DEGREES:
        return angle * math.pi / 180.0
    return angle


def from_radians(angle: float, unit: AngleUnit) -> float:
    """Converts an angle in radians to `unit`"""
    if unit is AngleUnit.DEGREES:
        return angle * 180.0 / math.pi
    return angle
