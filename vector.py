"""Two-dimensional homogeneous vectors."""
from __future__ import annotations

import math
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterator, Optional

if TYPE_CHECKING:  # pragma: no cover
    from matrix import AffineMatrix


EPSILON = 1e-9


class DivisionByZeroError(ZeroDivisionError):
    """Raised when a vector is divided by zero or a zero-length vector is normalised."""


def almost_equal(a: float, b: float, eps: float = EPSILON) -> bool:
    return abs(a - b) <= eps


@dataclass(frozen=True)
class Vector2:
    """A 2D point (``w == 1``) or free direction (``w == 0``).

    Arithmetic only touches ``x`` and ``y``; ``w`` is carried through unchanged
    and only takes part in matrix multiplication.
    """

    x: float
    y: float
    w: float = 1.0

    @classmethod
    def point(cls, x: float, y: float) -> "Vector2":
        return cls(x, y, 1.0)

    @classmethod
    def direction(cls, x: float, y: float) -> "Vector2":
        """A vector unaffected by translation."""

        return cls(x, y, 0.0)

    @classmethod
    def polar_to_cartesian(cls, angle: float, radius: float) -> "Vector2":
        return cls(radius * math.cos(angle), radius * math.sin(angle))

    def __iter__(self) -> Iterator[float]:
        """Yield ``x`` then ``y`` so a vector unpacks into ``(tx, ty)`` arguments."""

        yield self.x
        yield self.y

    def _with(self, x: float, y: float) -> "Vector2":
        return replace(self, x=x, y=y)

    def add(self, other: "Vector2") -> "Vector2":
        return self._with(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        return self._with(self.x - other.x, self.y - other.y)

    def translate(self, tx: float, ty: float) -> "Vector2":
        return self._with(self.x + tx, self.y + ty)

    def scale(self, sx: float, sy: Optional[float] = None) -> "Vector2":
        """Scale uniformly by ``sx``, or per axis when ``sy`` is given."""

        if sy is None:
            sy = sx
        return self._with(self.x * sx, self.y * sy)

    def shear(self, sx: float, sy: float) -> "Vector2":
        return self._with(self.x + sx * self.y, self.y + sy * self.x)

    def div(self, k: float) -> "Vector2":
        if k == 0:
            raise DivisionByZeroError(f"Cannot divide {self} by zero.")
        return self._with(self.x / k, self.y / k)

    def negate(self) -> "Vector2":
        return self._with(-self.x, -self.y)

    def dot(self, other: "Vector2") -> float:
        return self.x * other.x + self.y * other.y

    def length(self) -> float:
        return math.hypot(self.x, self.y)

    def squared_length(self) -> float:
        """Squared norm, for comparisons that do not need the square root."""

        return self.x * self.x + self.y * self.y

    def normalize(self) -> "Vector2":
        length = self.length()
        if length == 0:
            raise DivisionByZeroError("Cannot normalise a zero-length vector.")
        return self.div(length)

    def rotate(self, theta: float) -> "Vector2":
        """Rotate counter-clockwise by ``theta`` radians (+x turns toward +y)."""

        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        return self._with(
            self.x * cos_t - self.y * sin_t,
            self.x * sin_t + self.y * cos_t,
        )

    def perpendicular(self) -> "Vector2":
        return self._with(-self.y, self.x)

    def angle(self) -> float:
        """Angle against the +x axis in ``(-pi, pi]``."""

        return math.atan2(self.y, self.x)

    def mul(self, matrix: "AffineMatrix") -> "Vector2":
        """Row-vector product ``self x matrix``."""

        return matrix.mul(self)

    def almost_equal(self, other: "Vector2", eps: float = EPSILON) -> bool:
        return almost_equal(self.x, other.x, eps) and almost_equal(self.y, other.y, eps)

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.sub(other)

    def __neg__(self) -> "Vector2":
        return self.negate()

    def __mul__(self, k: float) -> "Vector2":
        return self.scale(k)

    __rmul__ = __mul__

    def __truediv__(self, k: float) -> "Vector2":
        return self.div(k)

    def __matmul__(self, matrix: "AffineMatrix") -> "Vector2":
        return self.mul(matrix)

    def __str__(self) -> str:
        return f"({self.x:.2f}, {self.y:.2f})"
