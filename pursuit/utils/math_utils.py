# pursuit/utils/math_utils.py
"""Scalar math helpers with NaN/Inf guards."""

import math

__all__ = ["MIN_DIVISOR", "is_valid_number", "clamp", "wrap_angle", "delta_angle"]

# Smallest interval used as a divisor anywhere in the engine
MIN_DIVISOR = 1e-6


def is_valid_number(value):
    """Check if a number is finite and not NaN.

    Args:
        value: Number to check

    Returns:
        bool: True if value is a valid finite number
    """
    return not (math.isnan(value) or math.isinf(value))


def clamp(value, min_value, max_value):
    """Clamp a value between min and max.

    Args:
        value: Value to clamp
        min_value: Minimum allowed value
        max_value: Maximum allowed value

    Returns:
        Clamped value
    """
    return max(min_value, min(max_value, value))



def wrap_angle(angle):
    """Wrap an angle in radians to [-pi, pi).

    Args:
        angle: Angle in radians

    Returns:
        float: Wrapped angle
    """
    return (angle + math.pi) % (2.0 * math.pi) - math.pi


def delta_angle(previous, current):
    """Shortest signed difference from one heading to another.

    Args:
        previous: Earlier heading in radians
        current: Later heading in radians

    Returns:
        float: Signed difference in [-pi, pi)
    """
    return wrap_angle(current - previous)
