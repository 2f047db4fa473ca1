"""3x3 homogeneous matrices for 2D affine transforms.

Points are row vectors and are transformed as ``point x matrix``. With that
convention ``a.mul(b)`` applies ``a`` first and ``b`` second, so a placement
chain reads left to right in application order::

    world = AffineMatrix.scale(2, 2).mul(AffineMatrix.rotate(theta)).mul(
        AffineMatrix.translate(tx, ty)
    )

Reversing the chain produces a different but plausible-looking transform.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence, Tuple, Union, overload

from vector import Vector2

Row = Tuple[float, float, float]
Rows = Tuple[Row, Row, Row]


@dataclass(frozen=True)
class AffineMatrix:
    """Immutable 3x3 matrix; every operation returns a new instance."""

    rows: Rows

    def __post_init__(self) -> None:
        if len(self.rows) != 3 or any(len(row) != 3 for row in self.rows):
            raise ValueError("An affine matrix requires exactly three rows of three values.")
        # Normalise nested sequences to tuples of floats so equality and hashing work.
        object.__setattr__(
            self, "rows", tuple(tuple(float(v) for v in row) for row in self.rows)
        )

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[float]]) -> "AffineMatrix":
        return cls(tuple(tuple(row) for row in rows))  # type: ignore[arg-type]

    @classmethod
    def zero(cls) -> "AffineMatrix":
        return cls(((0.0, 0.0, 0.0), (0.0, 0.0, 0.0), (0.0, 0.0, 0.0)))

    @classmethod
    def identity(cls) -> "AffineMatrix":
        return cls(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)))

    @classmethod
    def translate(cls, tx: float, ty: float) -> "AffineMatrix":
        return cls(((1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (tx, ty, 1.0)))

    @classmethod
    def scale(cls, sx: float, sy: float) -> "AffineMatrix":
        return cls(((sx, 0.0, 0.0), (0.0, sy, 0.0), (0.0, 0.0, 1.0)))

    @classmethod
    def shear(cls, sx: float, sy: float) -> "AffineMatrix":
        """Maps ``(x, y)`` to ``(x + sx*y, y + sy*x)``."""

        return cls(((1.0, sy, 0.0), (sx, 1.0, 0.0), (0.0, 0.0, 1.0)))

    @classmethod
    def rotate(cls, theta: float) -> "AffineMatrix":
        """Counter-clockwise rotation by ``theta`` radians."""

        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        return cls(((cos_t, sin_t, 0.0), (-sin_t, cos_t, 0.0), (0.0, 0.0, 1.0)))

    @property
    def is_affine(self) -> bool:
        return tuple(row[2] for row in self.rows) == (0.0, 0.0, 1.0)

    def __getitem__(self, index: Tuple[int, int]) -> float:
        row, col = index
        return self.rows[row][col]

    def add(self, other: "AffineMatrix") -> "AffineMatrix":
        return AffineMatrix(
            tuple(
                tuple(a + b for a, b in zip(row_a, row_b))
                for row_a, row_b in zip(self.rows, other.rows)
            )  # type: ignore[arg-type]
        )

    def sub(self, other: "AffineMatrix") -> "AffineMatrix":
        return AffineMatrix(
            tuple(
                tuple(a - b for a, b in zip(row_a, row_b))
                for row_a, row_b in zip(self.rows, other.rows)
            )  # type: ignore[arg-type]
        )

    @overload
    def mul(self, other: "AffineMatrix") -> "AffineMatrix":
        ...

    @overload
    def mul(self, other: Vector2) -> Vector2:
        ...

    def mul(self, other: Union["AffineMatrix", Vector2]) -> Union["AffineMatrix", Vector2]:
        """Compose with another matrix (self first) or transform a vector."""

        if isinstance(other, Vector2):
            return self._transform(other)
        if not isinstance(other, AffineMatrix):
            raise TypeError(f"Cannot multiply an AffineMatrix by {type(other).__name__}.")

        a, b = self.rows, other.rows
        return AffineMatrix(
            tuple(
                tuple(sum(a[i][k] * b[k][j] for k in range(3)) for j in range(3))
                for i in range(3)
            )  # type: ignore[arg-type]
        )

    def _transform(self, vec: Vector2) -> Vector2:
        m = self.rows
        x = vec.x * m[0][0] + vec.y * m[1][0] + vec.w * m[2][0]
        y = vec.x * m[0][1] + vec.y * m[1][1] + vec.w * m[2][1]
        # w uses the third column; affine matrices keep a point's w at 1.
        w = vec.x * m[0][2] + vec.y * m[1][2] + vec.w * m[2][2]
        return Vector2(x, y, w)

    def __add__(self, other: "AffineMatrix") -> "AffineMatrix":
        return self.add(other)

    def __sub__(self, other: "AffineMatrix") -> "AffineMatrix":
        return self.sub(other)

    def __matmul__(self, other):
        return self.mul(other)

    def __str__(self) -> str:
        return "\n".join("[" + ",\t".join(repr(v) for v in row) + "]" for row in self.rows)
