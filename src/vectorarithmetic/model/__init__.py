"""
The MODEL layer contains the pure value types and the arithmetic engine.
It has no I/O and keeps no state between calls.
"""
from vectorarithmetic.model.accessor import VectorOperatable, components, is_vector_operatable
from vectorarithmetic.model.operators import (
    add,
    divide,
    divide_scalar,
    equals,
    greater_equal,
    greater_than,
    is_close,
    less_equal,
    less_than,
    multiply,
    multiply_scalar,
    not_equals,
    subtract,
)
from vectorarithmetic.model.geometry import (
    angle_in_radians,
    angled,
    cross_product,
    distance_to,
    dot_product,
    length,
    length_squared,
    limited,
    magnitude,
    normalized,
    reversed_vector,
    scaled,
)
from vectorarithmetic.model.primitives import Point, Size, Vector, VectorArithmetic

__all__ = [
    "VectorOperatable",
    "VectorArithmetic",
    "Point",
    "Size",
    "Vector",
    "components",
    "is_vector_operatable",
    "add",
    "subtract",
    "multiply",
    "divide",
    "multiply_scalar",
    "divide_scalar",
    "equals",
    "not_equals",
    "less_than",
    "less_equal",
    "greater_than",
    "greater_equal",
    "is_close",
    "length_squared",
    "magnitude",
    "length",
    "angle_in_radians",
    "normalized",
    "reversed_vector",
    "dot_product",
    "cross_product",
    "distance_to",
    "limited",
    "scaled",
    "angled",
]
