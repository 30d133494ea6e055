"""Exceptions raised by geoellipsoid calculations"""

__all__ = [
    'GeodesyError', 'InvalidArgument', 'InvalidEllipsoidName',
    'NonConvergence', 'OnPolarAxis', 'PoleSingularity',
]

from typing import Optional


class GeodesyError(ValueError):
    """Base class for every failure reported by geoellipsoid"""


class InvalidEllipsoidName(GeodesyError, KeyError):
    """The requested reference ellipsoid is not in the named ellipsoid table"""

    def __init__(self, name: str):
        super().__init__(f"Unknown ellipsoid '{name}'")
        self.name = name

    def __str__(self):
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class PoleSingularity(GeodesyError):
    """A latitude lies exactly on a pole, where the reduced latitude is undefined"""

    def __init__(self, latitude: float):
        super().__init__(f'Latitude {latitude} lies on a pole; the reduced latitude is undefined')
        self.latitude = latitude


class OnPolarAxis(GeodesyError):
    """A geocentric point lies on the polar axis, where longitude is undefined"""

    def __init__(self, x: float, y: float, z: float):
        super().__init__(f'Point ({x}, {y}, {z}) lies on the polar axis')
        self.point = (x, y, z)


class NonConvergence(GeodesyError):
    """
    An iterative solver failed to meet its tolerance within its iteration cap.

    For the inverse solver this almost always means the points are antipodal
    or nearly so.
    """

    def __init__(self, solver: str, iterations: int, delta: Optional[float] = None):
        msg = f'{solver} failed to converge after {iterations} iterations'
        if delta is not None:
            msg += f' (last change {delta:.3g})'
        super().__init__(msg)
        self.solver = solver
        self.iterations = iterations
        self.delta = delta


class InvalidArgument(GeodesyError):
    """An argument is outside the domain of the requested operation"""
