"""Per-frame driver connecting input snapshots to the geometry kernel.

Windowing, painting and input capture live outside this module. A host loop
supplies a :class:`FrameInput` per frame through ``poll`` and receives a
:class:`FrameResult` through ``present``.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Tuple

import pandas as pd

from geom import Polygon, WindingRule, classify
from matrix import AffineMatrix
from vector import Vector2
from viewport import Viewport
from zone import MAX_POINTS, classify_dataframe, scatter_points

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FrameConfig:
    world_width: float = 2.0
    world_height: float = 2.0
    scatter_count: int = MAX_POINTS
    seed: Optional[int] = None


@dataclass(frozen=True)
class FrameInput:
    """Everything the kernel needs from the host for one frame."""

    pointer: Tuple[int, int]
    polygon: Tuple[Vector2, ...]
    screen_width: int
    screen_height: int
    winding: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "polygon", tuple(self.polygon))


@dataclass(frozen=True, eq=False)
class FrameResult:
    world_pointer: Vector2
    hovering: bool
    rule: WindingRule
    forward: AffineMatrix
    screen_polygon: Polygon
    scatter: pd.DataFrame


@dataclass
class PolygonEditor:
    """Mutable vertex list owned by the input side.

    Only :meth:`snapshot` should be handed to the kernel; it copies the list so
    later edits cannot leak into a frame that is being evaluated.
    """

    points: List[Vector2] = field(default_factory=list)

    def add(self, point: Vector2) -> None:
        self.points.append(point)

    def add_screen_point(self, x: int, y: int, viewport: Viewport) -> Vector2:
        point = viewport.to_world(Vector2(float(x), float(y)))
        self.add(point)
        return point

    def clear(self) -> None:
        self.points.clear()

    def snapshot(self) -> Tuple[Vector2, ...]:
        return tuple(self.points)


def evaluate_frame(frame: FrameInput, config: FrameConfig = FrameConfig()) -> FrameResult:
    viewport = Viewport(
        config.world_width, config.world_height, frame.screen_width, frame.screen_height
    )
    rule = WindingRule.from_flag(frame.winding)
    polygon = Polygon(frame.polygon)

    px, py = frame.pointer
    world_pointer = viewport.to_world(Vector2(float(px), float(py)))
    hovering = classify(world_pointer, polygon, rule)

    scatter = classify_dataframe(
        scatter_points(config.scatter_count, config.world_width, config.world_height, config.seed),
        polygon,
        rule,
    )

    forward = viewport.forward()
    return FrameResult(
        world_pointer=world_pointer,
        hovering=hovering,
        rule=rule,
        forward=forward,
        screen_polygon=polygon.transformed(forward),
        scatter=scatter,
    )


def run_frames(
    poll: Callable[[], Optional[FrameInput]],
    present: Callable[[FrameResult], None],
    config: FrameConfig = FrameConfig(),
) -> int:
    """Evaluate frames until ``poll`` returns None; return the frame count."""

    frames = 0
    while True:
        frame = poll()
        if frame is None:
            break
        present(evaluate_frame(frame, config))
        frames += 1
    logger.debug("Processed %d frames", frames)
    return frames
