"""World/screen mapping and aspect-preserving layout."""
from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Final, Tuple

from matrix import AffineMatrix
from vector import Vector2

logger = logging.getLogger(__name__)

DEFAULT_BORDER_SCALE: Final[float] = 0.75
"""Share of the container a letterboxed viewport may occupy before fitting the ratio."""


def _check_extents(
    world_width: float, world_height: float, screen_width: float, screen_height: float
) -> None:
    if world_width <= 0 or world_height <= 0:
        raise ValueError(
            f"World extent must be positive, got {world_width} x {world_height}."
        )
    # Pixel extents are measured as size - 1, so a single pixel would divide by zero.
    if screen_width < 2 or screen_height < 2:
        raise ValueError(
            f"Screen extent must be at least 2 x 2 pixels, got {screen_width} x {screen_height}."
        )


def forward(
    world_width: float, world_height: float, screen_width: float, screen_height: float
) -> AffineMatrix:
    """World (origin centred, y up) to screen (origin top-left, y down)."""

    _check_extents(world_width, world_height, screen_width, screen_height)
    sx = (screen_width - 1) / world_width
    sy = (screen_height - 1) / world_height
    tx = (screen_width - 1) / 2.0
    ty = (screen_height - 1) / 2.0
    return AffineMatrix.scale(sx, -sy).mul(AffineMatrix.translate(tx, ty))


def inverse(
    world_width: float, world_height: float, screen_width: float, screen_height: float
) -> AffineMatrix:
    """Exact inverse of :func:`forward`: undo the translation, then the scale."""

    _check_extents(world_width, world_height, screen_width, screen_height)
    sx = world_width / (screen_width - 1)
    sy = world_height / (screen_height - 1)
    tx = (screen_width - 1) / 2.0
    ty = (screen_height - 1) / 2.0
    return AffineMatrix.translate(-tx, -ty).mul(AffineMatrix.scale(sx, -sy))


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle in container pixels, origin top-left."""

    x: float
    y: float
    width: float
    height: float

    @property
    def aspect(self) -> float:
        return self.width / self.height

    def to_pixels(self) -> Tuple[int, int, int, int]:
        return int(self.x), int(self.y), int(self.width), int(self.height)


def letterbox(
    container_width: float,
    container_height: float,
    world_width: float,
    world_height: float,
    border_scale: float = DEFAULT_BORDER_SCALE,
) -> Rect:
    """Largest centred rectangle with the world's aspect ratio inside the border."""

    if container_width <= 0 or container_height <= 0:
        raise ValueError(
            f"Container size must be positive, got {container_width} x {container_height}."
        )
    if world_width <= 0 or world_height <= 0:
        raise ValueError(
            f"World extent must be positive, got {world_width} x {world_height}."
        )
    if not 0 < border_scale <= 1:
        raise ValueError(f"Border scale must lie in (0, 1], got {border_scale}.")

    max_width = container_width * border_scale
    max_height = container_height * border_scale

    width = max_width
    height = max_width * world_height / world_width
    if height > max_height:
        height = max_height
        width = max_height * world_width / world_height

    return Rect(
        x=(container_width - width) / 2.0,
        y=(container_height - height) / 2.0,
        width=width,
        height=height,
    )


@dataclass(frozen=True)
class Viewport:
    """Viewport configuration; matrices are derived on request, never stored."""

    world_width: float = 2.0
    world_height: float = 2.0
    screen_width: int = 640
    screen_height: int = 480

    def __post_init__(self) -> None:
        _check_extents(
            self.world_width, self.world_height, self.screen_width, self.screen_height
        )

    def resized(self, screen_width: int, screen_height: int) -> "Viewport":
        logger.debug(
            "Viewport resized from %sx%s to %sx%s",
            self.screen_width,
            self.screen_height,
            screen_width,
            screen_height,
        )
        return replace(self, screen_width=screen_width, screen_height=screen_height)

    def forward(self) -> AffineMatrix:
        return forward(self.world_width, self.world_height, self.screen_width, self.screen_height)

    def inverse(self) -> AffineMatrix:
        return inverse(self.world_width, self.world_height, self.screen_width, self.screen_height)

    def relative_inverse(self) -> AffineMatrix:
        """Screen-space deltas to world-space deltas (no translation, y flipped)."""

        sx = self.world_width / (self.screen_width - 1)
        sy = self.world_height / (self.screen_height - 1)
        return AffineMatrix.scale(sx, -sy)

    def to_screen(self, point: Vector2) -> Vector2:
        return self.forward().mul(point)

    def to_world(self, point: Vector2) -> Vector2:
        return self.inverse().mul(point)

    def letterbox(
        self,
        container_width: float,
        container_height: float,
        border_scale: float = DEFAULT_BORDER_SCALE,
    ) -> Rect:
        return letterbox(
            container_width, container_height, self.world_width, self.world_height, border_scale
        )
