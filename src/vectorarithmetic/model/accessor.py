"""
Component Accessor Capability
=============================
The single contract every two-component value must satisfy to take part in
the arithmetic engine.

A conforming type exposes a horizontal and a vertical scalar (readable and
writable) and can be built back from such a pair. The engine never looks at
the concrete field names (x/y, width/height, dx/dy); it only goes through
this protocol.
"""
from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable


@runtime_checkable
class VectorOperatable(Protocol):
    """Structural protocol for a value with two scalar components."""

    @property
    def horizontal(self) -> float: ...

    @horizontal.setter
    def horizontal(self, value: float) -> None: ...

    @property
    def vertical(self) -> float: ...

    @vertical.setter
    def vertical(self, value: float) -> None: ...

    @classmethod
    def from_components(cls, horizontal: float, vertical: float) -> VectorOperatable: ...


T = TypeVar("T", bound=VectorOperatable)
U = TypeVar("U", bound=VectorOperatable)


def is_vector_operatable(value: Any) -> bool:
    """True if `value` can be used as an operand of the engine."""
    # Classes satisfy the protocol by attribute lookup too, only instances count.
    return not isinstance(value, type) and isinstance(value, VectorOperatable)


def ensure_vector_operatable(value: Any) -> None:
    if not is_vector_operatable(value):
        raise TypeError(
            f"Expected a two-component value, got {type(value).__name__!r}."
        )


def components(value: VectorOperatable) -> tuple[float, float]:
    """Returns the (horizontal, vertical) pair of a conforming value."""
    return value.horizontal, value.vertical
