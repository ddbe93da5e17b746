"""Centralized math utilities for the Protozoa core.

Pure Python vector math. Pattern positions and group centers are expressed
as ``Vector3`` values.
"""

from __future__ import annotations

import math
from typing import Iterable, Iterator, Tuple


class Vector3:
    """A 3D vector class for mathematical operations."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        self.x: float = float(x)
        self.y: float = float(y)
        self.z: float = float(z)

    def __add__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, scalar: float) -> "Vector3":
        return Vector3(self.x * scalar, self.y * scalar, self.z * scalar)

    def __truediv__(self, scalar: float) -> "Vector3":
        return Vector3(self.x / scalar, self.y / scalar, self.z / scalar)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y
        yield self.z

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def distance_to(self, other: "Vector3") -> float:
        return (self - other).length()

    def lerp(self, other: "Vector3", t: float) -> "Vector3":
        """Linear interpolation towards ``other``; ``t`` is not clamped here."""
        return Vector3(
            self.x + (other.x - self.x) * t,
            self.y + (other.y - self.y) * t,
            self.z + (other.z - self.z) * t,
        )

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def copy(self) -> "Vector3":
        """Return a copy of this vector."""
        return Vector3(self.x, self.y, self.z)

    def __eq__(self, other: object) -> bool:
        """Check if two vectors are equal."""
        if other.__class__ is not Vector3:
            return False
        return (
            abs(self.x - other.x) < 1e-9
            and abs(self.y - other.y) < 1e-9
            and abs(self.z - other.z) < 1e-9
        )

    def __ne__(self, other: object) -> bool:
        return not self.__eq__(other)

    # Equality is tolerance based, so hashing is not meaningful.
    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Vector3({self.x}, {self.y}, {self.z})"


def centroid(points: Iterable[Vector3]) -> Vector3:
    """Arithmetic mean of ``points``; the origin for an empty input."""
    total_x = total_y = total_z = 0.0
    count = 0
    for point in points:
        total_x += point.x
        total_y += point.y
        total_z += point.z
        count += 1
    if count == 0:
        return Vector3()
    return Vector3(total_x / count, total_y / count, total_z / count)


__all__ = ["Vector3", "centroid"]
