"""
Two-Component Primitives
========================
Concrete value types wired to the arithmetic engine.

Classes:
    VectorArithmetic: Mixin exposing the engine as operators, properties and
        methods. Subclasses only map their own field names onto
        ``horizontal`` / ``vertical`` and implement ``from_components``.
    Point: A location (x, y).
    Size: An extent (width, height).
    Vector: A displacement (dx, dy).

Any two of them interoperate: ``Point(1, 2) + Vector(3, 4)`` is
``Point(x=4.0, y=6.0)``, the result always takes the type of the left operand.
Compound assignment (``+=``, ``-=``, ``*=``, ``/=``) rebinds the name to a new
value and never mutates the original object.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import numbers
from typing import Any, Iterator, TYPE_CHECKING

import numpy as np

from vectorarithmetic.model import geometry, operators
from vectorarithmetic.model.accessor import is_vector_operatable

if TYPE_CHECKING:
    import numpy.typing as npt


def _is_scalar(value: Any) -> bool:
    return isinstance(value, numbers.Real)


class VectorArithmetic(ABC):
    """Operators and geometric helpers shared by all two-component types."""

    # Make numpy scalars defer to our reflected operators (2.0 * Point(...))
    __array_ufunc__ = None

    # --- accessor capability, provided by subclasses ---

    @property
    @abstractmethod
    def horizontal(self) -> float:
        pass

    @property
    @abstractmethod
    def vertical(self) -> float:
        pass

    @classmethod
    @abstractmethod
    def from_components(cls, horizontal: float, vertical: float) -> VectorArithmetic:
        pass

    # --- arithmetic ---

    def __add__(self, other: Any) -> Any:
        if not is_vector_operatable(other):
            return NotImplemented
        return operators.add(self, other)

    def __sub__(self, other: Any) -> Any:
        if not is_vector_operatable(other):
            return NotImplemented
        return operators.subtract(self, other)

    def __mul__(self, other: Any) -> Any:
        if is_vector_operatable(other):
            return operators.multiply(self, other)
        if _is_scalar(other):
            return operators.multiply_scalar(self, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Any:
        if _is_scalar(other):
            return operators.multiply_scalar(self, other)
        return NotImplemented

    def __truediv__(self, other: Any) -> Any:
        if is_vector_operatable(other):
            return operators.divide(self, other)
        if _is_scalar(other):
            return operators.divide_scalar(self, other)
        return NotImplemented

    def __neg__(self) -> Any:
        return geometry.reversed_vector(self)

    # --- comparison ---

    def __eq__(self, other: object) -> bool:
        if not is_vector_operatable(other):
            return NotImplemented
        return operators.equals(self, other)

    def __ne__(self, other: object) -> bool:
        if not is_vector_operatable(other):
            return NotImplemented
        return operators.not_equals(self, other)

    def __lt__(self, other: Any) -> bool:
        if not is_vector_operatable(other):
            return NotImplemented
        return operators.less_than(self, other)

    def __le__(self, other: Any) -> bool:
        if not is_vector_operatable(other):
            return NotImplemented
        return operators.less_equal(self, other)

    def __gt__(self, other: Any) -> bool:
        if not is_vector_operatable(other):
            return NotImplemented
        return operators.greater_than(self, other)

    def __ge__(self, other: Any) -> bool:
        if not is_vector_operatable(other):
            return NotImplemented
        return operators.greater_equal(self, other)

    # Mutable components and exact equality: not hashable
    __hash__ = None  # type: ignore[assignment]

    def is_close(self, other: Any, **tolerances: float) -> bool:
        return operators.is_close(self, other, **tolerances)

    # --- geometry ---

    @property
    def magnitude(self) -> float:
        return geometry.magnitude(self)

    @property
    def length(self) -> float:
        return geometry.length(self)

    @property
    def length_squared(self) -> float:
        return geometry.length_squared(self)

    @property
    def angle_in_radians(self) -> float:
        """Angle with 0 pointing up, see :func:`geometry.angle_in_radians`."""
        return geometry.angle_in_radians(self)

    @property
    def normalized(self) -> Any:
        return geometry.normalized(self)

    @property
    def reversed(self) -> Any:
        return geometry.reversed_vector(self)

    def dot_product(self, other: Any) -> float:
        return geometry.dot_product(self, other)

    def cross_product(self, other: Any) -> float:
        return geometry.cross_product(self, other)

    def distance_to(self, other: Any) -> float:
        return geometry.distance_to(self, other)

    def limited(self, scalar: float) -> Any:
        return geometry.limited(self, scalar)

    def scaled(self, scalar: float) -> Any:
        return geometry.scaled(self, scalar)

    def angled(self, scalar: float) -> Any:
        """Same magnitude, pointing at `scalar` radians (0 = right)."""
        return geometry.angled(self, scalar)

    # --- conversions ---

    def to_tuple(self) -> tuple[float, float]:
        return (self.horizontal, self.vertical)

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.horizontal, self.vertical], dtype=np.float64)

    @classmethod
    def from_array(cls, values: npt.ArrayLike) -> Any:
        arr = np.asarray(values, dtype=np.float64).ravel()
        if arr.size != 2:
            raise ValueError(
                f"{cls.__name__} needs exactly 2 components, got {arr.size}."
            )
        return cls.from_components(float(arr[0]), float(arr[1]))

    def copy(self) -> Any:
        return type(self).from_components(self.horizontal, self.vertical)

    def __iter__(self) -> Iterator[float]:
        yield self.horizontal
        yield self.vertical


@dataclass(eq=False)
class Point(VectorArithmetic):
    """A location relative to an implicit origin."""
    x: float = 0.0
    y: float = 0.0

    def __post_init__(self) -> None:
        self.x = float(self.x)
        self.y = float(self.y)

    @classmethod
    def from_components(cls, horizontal: float, vertical: float) -> Point:
        return cls(x=horizontal, y=vertical)

    @property
    def horizontal(self) -> float:
        return self.x

    @horizontal.setter
    def horizontal(self, value: float) -> None:
        self.x = float(value)

    @property
    def vertical(self) -> float:
        return self.y

    @vertical.setter
    def vertical(self, value: float) -> None:
        self.y = float(value)


@dataclass(eq=False)
class Size(VectorArithmetic):
    """An extent. Non-negative by convention, not enforced."""
    width: float = 0.0
    height: float = 0.0

    def __post_init__(self) -> None:
        self.width = float(self.width)
        self.height = float(self.height)

    @classmethod
    def from_components(cls, horizontal: float, vertical: float) -> Size:
        return cls(width=horizontal, height=vertical)

    @property
    def horizontal(self) -> float:
        return self.width

    @horizontal.setter
    def horizontal(self, value: float) -> None:
        self.width = float(value)

    @property
    def vertical(self) -> float:
        return self.height

    @vertical.setter
    def vertical(self, value: float) -> None:
        self.height = float(value)


@dataclass(eq=False)
class Vector(VectorArithmetic):
    """A displacement with direction and magnitude."""
    dx: float = 0.0
    dy: float = 0.0

    def __post_init__(self) -> None:
        self.dx = float(self.dx)
        self.dy = float(self.dy)

    @classmethod
    def from_components(cls, horizontal: float, vertical: float) -> Vector:
        return cls(dx=horizontal, dy=vertical)

    @property
    def horizontal(self) -> float:
        return self.dx

    @horizontal.setter
    def horizontal(self, value: float) -> None:
        self.dx = float(value)

    @property
    def vertical(self) -> float:
        return self.dy

    @vertical.setter
    def vertical(self, value: float) -> None:
        self.dy = float(value)
