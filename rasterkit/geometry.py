"""Small two- and three-dimensional vector types."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator, Union

Number = Union[int, float]


def _scale(value: Number, factor: float) -> Number:
    """Multiply, truncating toward zero when the component is an integer."""
    if isinstance(value, int):
        return int(value * factor)
    return value * factor


@dataclass(frozen=True)
class Vec2:
    """A 2D vector; integer components stay integers under scaling."""

    x: Number = 0
    y: Number = 0

    @property
    def u(self) -> Number:
        return self.x

    @property
    def v(self) -> Number:
        return self.y

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y

    def __add__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vec2") -> "Vec2":
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, factor: float) -> "Vec2":
        return Vec2(_scale(self.x, factor), _scale(self.y, factor))

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class Vec3:
    """A 3D vector with dot and cross products."""

    x: Number = 0
    y: Number = 0
    z: Number = 0

    def __iter__(self) -> Iterator[Number]:
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: "Vec3") -> "Vec3":
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def __mul__(self, other: Union["Vec3", float]):
        """Dot product with a vector, or scaling by a number."""
        if isinstance(other, Vec3):
            return self.dot(other)
        return Vec3(_scale(self.x, other), _scale(self.y, other), _scale(self.z, other))

    def __rmul__(self, factor: float) -> "Vec3":
        return self * factor

    def __xor__(self, other: "Vec3") -> "Vec3":
        return self.cross(other)

    def cross(self, other: "Vec3") -> "Vec3":
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def dot(self, other: "Vec3") -> Number:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def norm(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self, length: float = 1) -> "Vec3":
        """Return a vector in the same direction with the given length."""
        norm = self.norm()
        if norm == 0:
            raise ValueError("cannot normalize a zero vector")
        return self * (length / norm)

    def __str__(self) -> str:
        return f"({self.x}, {self.y}, {self.z})"