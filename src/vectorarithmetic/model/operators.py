"""
Cross-Type Operators
====================
Component-wise arithmetic and relational operators defined once for any pair
of values implementing :class:`VectorOperatable`.

The two operands may be of different concrete types. Arithmetic results are
always built with the type of the left operand, e.g. ``add(Point, Vector)``
is a ``Point`` and ``add(Size, Point)`` is a ``Size``.

Division follows IEEE-754: dividing by a zero component yields ``inf`` or
``nan`` for that component instead of raising.
"""
from __future__ import annotations

import logging
import math

import numpy as np

from vectorarithmetic.config import DEFAULT_ABS_TOL, DEFAULT_REL_TOL
from vectorarithmetic.model.accessor import T, U, ensure_vector_operatable

logger = logging.getLogger(__name__)


def _ieee_divide(numerator: float, denominator: float) -> float:
    if denominator == 0.0:
        logger.debug(f"Division of {numerator} by zero, result is not finite.")
    with np.errstate(all="ignore"):
        return float(np.float64(numerator) / np.float64(denominator))


# ------------------------------
# Arithmetic
# ------------------------------

def add(lhs: T, rhs: U) -> T:
    ensure_vector_operatable(lhs)
    ensure_vector_operatable(rhs)
    return type(lhs).from_components(
        lhs.horizontal + rhs.horizontal,
        lhs.vertical + rhs.vertical,
    )


def subtract(lhs: T, rhs: U) -> T:
    ensure_vector_operatable(lhs)
    ensure_vector_operatable(rhs)
    return type(lhs).from_components(
        lhs.horizontal - rhs.horizontal,
        lhs.vertical - rhs.vertical,
    )


def multiply(lhs: T, rhs: U) -> T:
    ensure_vector_operatable(lhs)
    ensure_vector_operatable(rhs)
    return type(lhs).from_components(
        lhs.horizontal * rhs.horizontal,
        lhs.vertical * rhs.vertical,
    )


def divide(lhs: T, rhs: U) -> T:
    ensure_vector_operatable(lhs)
    ensure_vector_operatable(rhs)
    return type(lhs).from_components(
        _ieee_divide(lhs.horizontal, rhs.horizontal),
        _ieee_divide(lhs.vertical, rhs.vertical),
    )


def multiply_scalar(lhs: T, scalar: float) -> T:
    ensure_vector_operatable(lhs)
    return type(lhs).from_components(lhs.horizontal * scalar, lhs.vertical * scalar)


def divide_scalar(lhs: T, scalar: float) -> T:
    ensure_vector_operatable(lhs)
    return type(lhs).from_components(
        _ieee_divide(lhs.horizontal, scalar),
        _ieee_divide(lhs.vertical, scalar),
    )


# ------------------------------
# Relational
# ------------------------------

def equals(lhs: T, rhs: U) -> bool:
    """Exact component equality, no tolerance."""
    ensure_vector_operatable(lhs)
    ensure_vector_operatable(rhs)
    return lhs.horizontal == rhs.horizontal and lhs.vertical == rhs.vertical


def not_equals(lhs: T, rhs: U) -> bool:
    return not equals(lhs, rhs)


def less_than(lhs: T, rhs: U) -> bool:
    """
    True if EITHER component of `lhs` is smaller than the one of `rhs`.

    This is not a total order: (1, 5) < (2, 3) and (2, 3) < (1, 5) both hold.
    """
    ensure_vector_operatable(lhs)
    ensure_vector_operatable(rhs)
    return lhs.horizontal < rhs.horizontal or lhs.vertical < rhs.vertical


def less_equal(lhs: T, rhs: U) -> bool:
    return less_than(lhs, rhs) or equals(lhs, rhs)


def greater_than(lhs: T, rhs: U) -> bool:
    return not less_equal(lhs, rhs)


def greater_equal(lhs: T, rhs: U) -> bool:
    return greater_than(lhs, rhs) or equals(lhs, rhs)


def is_close(
    lhs: T,
    rhs: U,
    *,
    rel_tol: float = DEFAULT_REL_TOL,
    abs_tol: float = DEFAULT_ABS_TOL
) -> bool:
    """Component-wise :func:`math.isclose`, for comparing computed values."""
    ensure_vector_operatable(lhs)
    ensure_vector_operatable(rhs)
    return (
        math.isclose(lhs.horizontal, rhs.horizontal, rel_tol=rel_tol, abs_tol=abs_tol)
        and math.isclose(lhs.vertical, rhs.vertical, rel_tol=rel_tol, abs_tol=abs_tol)
    )
