"""IO helpers for reading, cleaning, and exporting vertex and point data."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, IO, Mapping, Optional, Tuple, Union

import pandas as pd
from PIL import Image, UnidentifiedImageError

from geom import Polygon
from vector import Vector2

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
FileLike = Union[IO[str], IO[bytes]]

DEFAULT_ZONE = "default"


def read_csv(path_or_file: Union[PathLike, FileLike]) -> pd.DataFrame:
    """Load a CSV into a DataFrame and raise a ValueError on failure."""

    try:
        df = pd.read_csv(path_or_file)
    except FileNotFoundError as exc:
        raise FileNotFoundError("CSV file not found.") from exc
    except Exception as exc:  # pragma: no cover - pandas composes different errors
        raise ValueError(f"Failed to read CSV: {exc}") from exc

    if df.empty:
        raise ValueError("CSV is empty. Add vertex or point rows before importing.")
    logger.debug("Read %d rows with columns %s", len(df), list(df.columns))
    return df


def normalize_columns(df: pd.DataFrame, mapping: Mapping[str, str]) -> pd.DataFrame:
    """Rename and validate coordinate columns based on the provided mapping.

    ``x`` and ``y`` are required targets; ``zone`` is optional.
    """

    required = {"x", "y"}
    missing_targets = required.difference(mapping.keys())
    if missing_targets:
        raise ValueError(f"Missing mappings for: {', '.join(sorted(missing_targets))}.")

    rename_map: Dict[str, str] = {}
    for target, source in mapping.items():
        if source not in df.columns:
            raise ValueError(f"Source column '{source}' not found in the imported data.")
        rename_map[source] = target

    normalized = df.rename(columns=rename_map).copy()

    for coordinate in ("x", "y"):
        normalized[coordinate] = pd.to_numeric(
            normalized[coordinate], errors="coerce"
        )
        if normalized[coordinate].isna().any():
            raise ValueError(
                f"Column '{coordinate}' contains non-numeric values after conversion."
            )

    if "zone" in normalized.columns:
        normalized["zone"] = normalized["zone"].astype(str).str.strip()
    return normalized


def points_from_dataframe(df: pd.DataFrame) -> Tuple[Vector2, ...]:
    """Row order is vertex order."""

    return tuple(Vector2(float(x), float(y)) for x, y in zip(df["x"], df["y"]))


def polygons_from_dataframe(df: pd.DataFrame) -> Dict[str, Polygon]:
    """Group vertices by ``zone`` keeping first-appearance and row order."""

    if "zone" not in df.columns:
        return {DEFAULT_ZONE: Polygon(points_from_dataframe(df))}

    polygons: Dict[str, Polygon] = {}
    for zone, group in df.groupby("zone", sort=False):
        polygons[str(zone)] = Polygon(points_from_dataframe(group))
    return polygons


def polygon_to_dataframe(polygon: Polygon, zone: Optional[str] = None) -> pd.DataFrame:
    df = pd.DataFrame(
        {
            "x": [vertex.x for vertex in polygon],
            "y": [vertex.y for vertex in polygon],
        }
    )
    if zone is not None:
        df.insert(0, "zone", zone)
    return df


def write_csv(df: pd.DataFrame) -> bytes:
    """Serialise the DataFrame into UTF-8 encoded CSV bytes."""

    return df.to_csv(index=False).encode("utf-8")


def read_surface_size(image_path: PathLike) -> Tuple[int, int]:
    """Return the pixel ``(width, height)`` of an image used as a drawing surface."""

    path = Path(image_path)
    if not path.exists():
        raise FileNotFoundError(f"Surface image not found at {path}.")

    try:
        with Image.open(path) as image:
            width, height = image.size
    except UnidentifiedImageError as exc:
        raise ValueError(f"{path} is not a readable image.") from exc

    logger.debug("Surface %s is %dx%d", path, width, height)
    return width, height
