import io

import pandas as pd
import pytest
from PIL import Image

from geom import Polygon
from storage import (
    DEFAULT_ZONE,
    normalize_columns,
    polygon_to_dataframe,
    polygons_from_dataframe,
    read_csv,
    read_surface_size,
    write_csv,
)
from vector import Vector2


def test_read_csv_rejects_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_csv(tmp_path / "missing.csv")


def test_read_csv_rejects_empty_table():
    with pytest.raises(ValueError):
        read_csv(io.StringIO("x,y\n"))


def test_normalize_columns_renames_and_coerces():
    df = pd.DataFrame({"px": ["1.5", "2"], "py": [3, 4], "name": [" a ", "a"]})
    normalized = normalize_columns(df, {"x": "px", "y": "py", "zone": "name"})
    assert normalized["x"].tolist() == [1.5, 2.0]
    assert normalized["zone"].tolist() == ["a", "a"]


def test_normalize_columns_errors():
    df = pd.DataFrame({"x": ["1", "oops"], "y": [1, 2]})
    with pytest.raises(ValueError, match="Missing mappings"):
        normalize_columns(df, {"x": "x"})
    with pytest.raises(ValueError, match="not found"):
        normalize_columns(df, {"x": "x", "y": "z"})
    with pytest.raises(ValueError, match="non-numeric"):
        normalize_columns(df, {"x": "x", "y": "y"})


def test_polygons_grouped_in_row_order():
    df = pd.DataFrame(
        {
            "zone": ["b", "a", "b", "a", "b", "a"],
            "x": [0, 10, 1, 11, 1, 11],
            "y": [0, 0, 0, 0, 1, 1],
        }
    )
    polygons = polygons_from_dataframe(df)
    assert list(polygons) == ["b", "a"]
    assert polygons["b"].vertices == (Vector2(0.0, 0.0), Vector2(1.0, 0.0), Vector2(1.0, 1.0))


def test_polygon_without_zone_column_uses_default():
    polygons = polygons_from_dataframe(pd.DataFrame({"x": [0, 1, 1], "y": [0, 0, 1]}))
    assert list(polygons) == [DEFAULT_ZONE]


def test_write_csv_round_trips_vertices(unit_square):
    data = write_csv(polygon_to_dataframe(unit_square, zone="square"))
    restored = polygons_from_dataframe(read_csv(io.BytesIO(data)))
    assert restored["square"] == unit_square


def test_read_surface_size(tmp_path):
    path = tmp_path / "surface.png"
    Image.new("RGB", (320, 200)).save(path)
    assert read_surface_size(path) == (320, 200)


def test_read_surface_size_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_surface_size(tmp_path / "nope.png")
    bogus = tmp_path / "bogus.png"
    bogus.write_text("not an image")
    with pytest.raises(ValueError):
        read_surface_size(bogus)
