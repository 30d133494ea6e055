"""Module for miscellaneous multi-use functions"""

__all__ = ['normalize_angle']


import math


def normalize_angle(angle: float, full_turn: float, symmetric: bool) -> float:
    """
    Wraps an angle into a single revolution.

    Args:
        angle:
            The angle to wrap

        full_turn:
            One revolution in the angle's unit (360 or 2*pi)

        symmetric:
            If True, wrap into (-full_turn/2, full_turn/2]; otherwise into [0, full_turn)

    Returns:
        float
    """
    angle = math.fmod(angle, full_turn)
    if symmetric:
        half_turn = full_turn / 2
        if angle > half_turn:
            angle -= full_turn
        elif angle <= -half_turn:
            angle += full_turn
        return angle

    if angle < 0:
        angle += full_turn
    # A tiny negative angle can round up to a full turn
    if angle >= full_turn:
        angle -= full_turn
    return angle
