"""Two-dimensional vectors, rectangles and affine transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

Matrix = Tuple[float, float, float, float, float, float, float, float, float]

_IDENTITY: Matrix = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)


@dataclass(frozen=True)
class Vector2:
    """An immutable 2D vector."""

    x: float = 0.0
    y: float = 0.0

    def length_squared(self) -> float:
        return self.x * self.x + self.y * self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector2:
        return Vector2(self.x / scalar, self.y / scalar)

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)


@dataclass(frozen=True)
class FloatRect:
    """An axis-aligned rectangle given by its top-left corner and size."""

    left: float = 0.0
    top: float = 0.0
    width: float = 0.0
    height: float = 0.0


def _multiply(a: Matrix, b: Matrix) -> Matrix:
    return tuple(  # type: ignore[return-value]
        sum(a[row * 3 + k] * b[k * 3 + col] for k in range(3))
        for row in range(3)
        for col in range(3)
    )


@dataclass
class Transform:
    """A 3x3 affine transform stored row by row.

    translate, scale, rotate and combine change the transform in place and
    return it, so calls can be chained.
    """

    matrix: Matrix = _IDENTITY

    @classmethod
    def identity(cls) -> Transform:
        return cls(_IDENTITY)

    @classmethod
    def from_matrix(cls, a00, a01, a02, a10, a11, a12, a20, a21, a22) -> Transform:
        return cls(
            tuple(float(v) for v in (a00, a01, a02, a10, a11, a12, a20, a21, a22))
        )

    def combine(self, other: Transform) -> Transform:
        """Multiply this transform by another, on the right."""
        self.matrix = _multiply(self.matrix, other.matrix)
        return self

    def translate(self, x: float, y: float) -> Transform:
        return self.combine(Transform((1.0, 0.0, x, 0.0, 1.0, y, 0.0, 0.0, 1.0)))

    def scale(self, sx: float, sy: float) -> Transform:
        return self.combine(Transform((sx, 0.0, 0.0, 0.0, sy, 0.0, 0.0, 0.0, 1.0)))

    def rotate(self, angle: float) -> Transform:
        """Rotate by an angle given in degrees."""
        rad = math.radians(angle)
        cos, sin = math.cos(rad), math.sin(rad)
        return self.combine(Transform((cos, -sin, 0.0, sin, cos, 0.0, 0.0, 0.0, 1.0)))

    def inverse(self) -> Transform:
        """Return the inverse, or the identity when the matrix is singular."""
        a00, a01, a02, a10, a11, a12, a20, a21, a22 = self.matrix
        c00 = a11 * a22 - a12 * a21
        c01 = a12 * a20 - a10 * a22
        c02 = a10 * a21 - a11 * a20
        det = a00 * c00 + a01 * c01 + a02 * c02
        if det == 0.0:
            return Transform.identity()
        return Transform(
            (
                c00 / det,
                (a02 * a21 - a01 * a22) / det,
                (a01 * a12 - a02 * a11) / det,
                c01 / det,
                (a00 * a22 - a02 * a20) / det,
                (a02 * a10 - a00 * a12) / det,
                c02 / det,
                (a01 * a20 - a00 * a21) / det,
                (a00 * a11 - a01 * a10) / det,
            )
        )

    def transform_point(self, point: Vector2) -> Vector2:
        a00, a01, a02, a10, a11, a12 = self.matrix[:6]
        return Vector2(
            a00 * point.x + a01 * point.y + a02,
            a10 * point.x + a11 * point.y + a12,
        )

    def transform_rect(self, rect: FloatRect) -> FloatRect:
        """Return the bounding box of the transformed rectangle."""
        right = rect.left + rect.width
        bottom = rect.top + rect.height
        corners = [
            self.transform_point(Vector2(x, y))
            for x in (rect.left, right)
            for y in (rect.top, bottom)
        ]
        xs = [c.x for c in corners]
        ys = [c.y for c in corners]
        left, top = min(xs), min(ys)
        return FloatRect(left, top, max(xs) - left, max(ys) - top)

    def __matmul__(self, other: Transform) -> Transform:
        return Transform(_multiply(self.matrix, other.matrix))