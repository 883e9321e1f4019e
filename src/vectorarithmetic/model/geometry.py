"""
Geometric Derived Quantities
============================
Magnitude, direction and products of two-component values.

Angle conventions
-----------------
Two different zero references are in use and they are NOT inverses of each
other:

- :func:`angle_in_radians` measures from "up": (0, 1) is 0 and (1, 0) is -pi/2.
- :func:`angled` builds a value from the standard convention: an angle of 0
  points "right" and angles grow counter-clockwise.
"""
from __future__ import annotations

import logging
import math

from vectorarithmetic.config import ANGLE_ZERO_REFERENCE
from vectorarithmetic.model.accessor import T, U, ensure_vector_operatable
from vectorarithmetic.model.operators import divide_scalar, multiply_scalar

logger = logging.getLogger(__name__)


def length_squared(vector: T) -> float:
    ensure_vector_operatable(vector)
    return (vector.horizontal * vector.horizontal) + (vector.vertical * vector.vertical)


def magnitude(vector: T) -> float:
    return math.sqrt(length_squared(vector))


def length(vector: T) -> float:
    """Alias of :func:`magnitude`."""
    return magnitude(vector)


def normalized(vector: T) -> T:
    """
    Returns the value scaled to unit magnitude.

    The zero value has no direction and is returned unchanged (as a copy).
    """
    mag = magnitude(vector)
    if mag > 0.0:
        return divide_scalar(vector, mag)
    logger.debug(f"Normalizing zero-length {type(vector).__name__}, returned as is.")
    return type(vector).from_components(vector.horizontal, vector.vertical)


def angle_in_radians(vector: T) -> float:
    """Angle of the value in radians, 0 pointing up (+vertical)."""
    unit = normalized(vector)
    theta = math.atan2(unit.vertical, unit.horizontal)
    return theta - ANGLE_ZERO_REFERENCE


def reversed_vector(vector: T) -> T:
    return multiply_scalar(vector, -1)


def dot_product(vector: T, other: U) -> float:
    ensure_vector_operatable(vector)
    ensure_vector_operatable(other)
    return (vector.horizontal * other.horizontal) + (vector.vertical * other.vertical)


def cross_product(vector: T, other: U) -> float:
    """
    Scalar 2D cross product |v| * |w| * sin(angle(v) - angle(w)).

    Note the operand order of the angle difference: the sign is opposite to
    the determinant form ``v.h * w.v - v.v * w.h``.
    """
    delta_angle = math.sin(angle_in_radians(vector) - angle_in_radians(other))
    return magnitude(vector) * magnitude(other) * delta_angle


def distance_to(vector: T, other: U) -> float:
    ensure_vector_operatable(vector)
    ensure_vector_operatable(other)
    delta_h = abs(vector.horizontal - other.horizontal)
    delta_v = abs(vector.vertical - other.vertical)
    return magnitude(type(vector).from_components(delta_h, delta_v))


def limited(vector: T, scalar: float) -> T:
    """Clamps the magnitude to at most `scalar`, keeping the direction."""
    if magnitude(vector) > scalar:
        return multiply_scalar(normalized(vector), scalar)
    return type(vector).from_components(vector.horizontal, vector.vertical)


def scaled(vector: T, scalar: float) -> T:
    """Multiplies both components by `scalar`, unconditionally."""
    return multiply_scalar(vector, scalar)


def angled(vector: T, scalar: float) -> T:
    """
    Value with the magnitude of `vector` pointing at angle `scalar`.

    Uses the standard convention (0 = right, counter-clockwise positive),
    not the one of :func:`angle_in_radians`.
    """
    mag = magnitude(vector)
    return type(vector).from_components(math.cos(scalar) * mag, math.sin(scalar) * mag)
