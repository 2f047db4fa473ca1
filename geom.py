"""Point-in-polygon classification under even-odd and nonzero winding rules."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Iterator, Sequence, Union

from matrix import AffineMatrix
from vector import Vector2


class WindingRule(str, Enum):
    """Rule deciding which crossings count toward the interior."""

    EVEN_ODD = "even-odd"
    NONZERO = "nonzero"

    @classmethod
    def from_flag(cls, winding: bool) -> "WindingRule":
        """Map a winding on/off toggle onto a rule."""

        return cls.NONZERO if winding else cls.EVEN_ODD


@dataclass(frozen=True)
class Polygon:
    """Ordered vertices; the closing edge from last to first is implicit."""

    vertices: Sequence[Vector2]

    def __post_init__(self) -> None:
        # Convert to tuple to avoid accidental mutation of the original sequence.
        object.__setattr__(self, "vertices", tuple(self.vertices))

    def __iter__(self) -> Iterator[Vector2]:
        return iter(self.vertices)

    def __len__(self) -> int:
        return len(self.vertices)

    @property
    def is_degenerate(self) -> bool:
        """True when the polygon has no interior (fewer than three vertices)."""

        return len(self.vertices) < 3

    def transformed(self, matrix: AffineMatrix) -> "Polygon":
        return Polygon([matrix.mul(vertex) for vertex in self.vertices])


PolygonLike = Union[Polygon, Iterable[Vector2]]


def _edges(vertices: Sequence[Vector2]) -> Iterator[tuple[Vector2, Vector2]]:
    """Yield edges starting with the closing edge (last vertex to first)."""

    start = vertices[-1]
    for end in vertices:
        yield start, end
        start = end


def _accumulate(point: Vector2, polygon: PolygonLike, rule: WindingRule) -> int:
    vertices = tuple(polygon)
    if len(vertices) < 3:
        return 0

    inside = 0
    for start, end in _edges(vertices):
        start_above = start.y >= point.y
        end_above = end.y >= point.y
        # Horizontal edges never straddle the ray and are skipped here.
        if start_above == end_above:
            continue

        if end.x == start.x:
            intercept = start.x
        else:
            intercept = start.x + (point.y - start.y) * (end.x - start.x) / (end.y - start.y)

        if intercept >= point.x:
            if rule is WindingRule.NONZERO:
                inside += 1 if start_above else -1
            else:
                inside ^= 1
    return inside


def winding_number(point: Vector2, polygon: PolygonLike) -> int:
    """Signed count of edges crossing the +x ray from ``point``."""

    return _accumulate(point, polygon, WindingRule.NONZERO)


def classify(
    point: Vector2, polygon: PolygonLike, rule: WindingRule = WindingRule.EVEN_ODD
) -> bool:
    """Return True when ``point`` lies inside ``polygon`` under ``rule``.

    A ray is cast toward +x and a crossing is registered when an edge's
    intercept is at or beyond ``point.x``. For a counter-clockwise square this
    puts points on the right and top edges inside and points on the left and
    bottom edges outside. Polygons with fewer than three vertices contain
    nothing.
    """

    return _accumulate(point, polygon, WindingRule(rule)) != 0
