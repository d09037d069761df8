"""Angle and arc-length helpers shared by the great-circle functions.

These are the leaf functions of the library: unit conversion with fixed
factors, a modulo that never returns a negative value, wrapping of angular
deltas, domain-clamped inverse trigonometry and the haversine building blocks.

Every inverse sine or cosine taken anywhere in the library goes through
``asin_real`` / ``acos_real``. Floating-point rounding routinely produces values
such as ``1.0000000000000002`` that would otherwise turn into NaN.

Example:
    >>> mod(-90.0, 360.0)
    270.0
    >>> wrap_delta(185.0)
    -175.0
    >>> acos_real(1.0000000000000002)
    0.0
"""

from __future__ import annotations

import math

from .config import ARC_MINUTES_PER_PI, DEGREES_TO_RADIANS, RADIANS_TO_DEGREES


def to_radians(degrees: float) -> float:
    """Convert degrees to radians.

    Args:
        degrees (float): Angle in degrees.

    Returns:
        float: The same angle in radians.
    """
    return DEGREES_TO_RADIANS * degrees


def to_degrees(radians: float) -> float:
    """Convert radians to degrees.

    Args:
        radians (float): Angle in radians.

    Returns:
        float: The same angle in degrees.
    """
    return RADIANS_TO_DEGREES * radians


def mod(x: float, y: float) -> float:
    """Return ``x`` modulo ``y`` in the range ``[0, y)``.

    Uses the IEEE remainder (rounded quotient), then shifts negative results up
    by ``y``.

    Args:
        x (float): Dividend.
        y (float): Positive modulus, e.g. 360.0 or ``TWO_PI``.

    Returns:
        float: Value in ``[0, y)``.
    """
    z = math.remainder(x, y)
    if z < 0:
        z += y
        # A tiny negative remainder rounds up to y itself.
        if z >= y:
            return 0.0
    return z


def wrap_delta(delta: float) -> float:
    """Map an angular difference in degrees onto the signed half circle.

    A single 360 degree correction is applied, which covers any difference of
    two angles that are each in ``[0, 360)``.

    Args:
        delta (float): Difference of two angles in degrees.

    Returns:
        float: Equivalent difference in ``[-180, 180]``.
    """
    if delta > 180.0:
        return delta - 360.0
    if delta < -180.0:
        return delta + 360.0
    return delta


def asin_real(x: float) -> float:
    """Inverse sine with ``x`` clamped to ``[-1, 1]``.

    Args:
        x (float): Sine value, possibly a rounding step outside the domain.

    Returns:
        float: Angle in radians in ``[-pi/2, pi/2]``.
    """
    return math.asin(max(-1.0, min(1.0, x)))


def acos_real(x: float) -> float:
    """Inverse cosine with ``x`` clamped to ``[-1, 1]``.

    Args:
        x (float): Cosine value, possibly a rounding step outside the domain.

    Returns:
        float: Angle in radians in ``[0, pi]``.
    """
    return math.acos(max(-1.0, min(1.0, x)))


def haversine(x: float) -> float:
    """Haversine of an angle, ``(1 - cos x) / 2``.

    Args:
        x (float): Angle in radians.

    Returns:
        float: Value in ``[0, 1]``.
    """
    return (1.0 - math.cos(x)) / 2.0


def ahaversine(x: float) -> float:
    """Inverse haversine; ``x`` is clamped to ``[0, 1]`` first.

    Args:
        x (float): Haversine value.

    Returns:
        float: Angle in radians in ``[0, pi]``.
    """
    return 2.0 * math.asin(math.sqrt(max(0.0, min(1.0, x))))


def distance_in_radians(nautical_miles: float) -> float:
    """Convert nautical miles to radians of great-circle arc (1 nm = 1 arc minute)."""
    return (math.pi / ARC_MINUTES_PER_PI) * nautical_miles


def radians_to_nm(radians: float) -> float:
    """Convert radians of great-circle arc to nautical miles."""
    return (ARC_MINUTES_PER_PI / math.pi) * radians
