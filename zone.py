"""Zone classification and scatter testing built on top of geometry primitives."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final, Iterable, List, Mapping, Optional, Union

import numpy as np
import pandas as pd

from geom import Polygon, PolygonLike, WindingRule, classify
from storage import FileLike, PathLike, normalize_columns, polygons_from_dataframe, read_csv
from vector import Vector2

logger = logging.getLogger(__name__)

MAX_POINTS: Final[int] = 10000
"""Number of random points classified per scatter test."""

UNKNOWN: Final[str] = "UNKNOWN"


@dataclass(frozen=True)
class Zone:
    """Named world-space polygon classified under its own winding rule."""

    name: str
    polygon: Polygon
    rule: WindingRule = WindingRule.EVEN_ODD

    def contains(self, point: Vector2) -> bool:
        return classify(point, self.polygon, self.rule)


def classify_point(point: Vector2, zones: Iterable[Zone]) -> str:
    """Return the name of the first zone that contains the point or UNKNOWN."""

    for zone in zones:
        if zone.contains(point):
            return zone.name
    return UNKNOWN


def scatter_points(
    count: int = MAX_POINTS,
    world_width: float = 2.0,
    world_height: float = 2.0,
    seed: Optional[int] = None,
) -> pd.DataFrame:
    """Uniform random points over the origin-centred world rectangle."""

    if count < 0:
        raise ValueError(f"Point count must be non-negative, got {count}.")

    rng = np.random.default_rng(seed)
    return pd.DataFrame(
        {
            "x": rng.uniform(-world_width / 2.0, world_width / 2.0, count),
            "y": rng.uniform(-world_height / 2.0, world_height / 2.0, count),
        }
    )


def classify_dataframe(
    df: pd.DataFrame,
    polygon: PolygonLike,
    rule: WindingRule = WindingRule.EVEN_ODD,
) -> pd.DataFrame:
    """Append an ``inside`` column by running each row through classify."""

    # One snapshot per batch; later edits to the caller's list do not apply.
    snapshot = Polygon(tuple(polygon))
    classified = df.copy()
    classified["inside"] = pd.Series(
        [
            classify(Vector2(float(x), float(y)), snapshot, rule)
            for x, y in zip(classified["x"], classified["y"])
        ],
        index=classified.index,
        dtype=bool,
    )
    return classified


def summarize(classified: pd.DataFrame) -> pd.DataFrame:
    """Inside/outside counts and share of a classified point set."""

    labels = classified["inside"].map({True: "inside", False: "outside"})
    summary = labels.value_counts().reindex(["inside", "outside"], fill_value=0)
    result = summary.rename("count").to_frame()
    total = int(result["count"].sum())
    result["share"] = (result["count"] / total).round(4) if total else 0.0
    return result


def load_zones(
    path_or_file: Union[PathLike, FileLike],
    rule: WindingRule = WindingRule.EVEN_ODD,
    mapping: Optional[Mapping[str, str]] = None,
) -> List[Zone]:
    """Create zones from a vertex CSV with ``x``, ``y`` and optional ``zone`` columns."""

    df = read_csv(path_or_file)
    if mapping is None:
        mapping = {name: name for name in ("x", "y", "zone") if name in df.columns}
    normalized = normalize_columns(df, mapping)

    zones = [
        Zone(name, polygon, rule)
        for name, polygon in polygons_from_dataframe(normalized).items()
    ]
    for zone in zones:
        if zone.polygon.is_degenerate:
            logger.warning(
                "Zone %s has %d vertices and will not contain any point",
                zone.name,
                len(zone.polygon),
            )
    return zones
