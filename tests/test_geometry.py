# tests/test_geometry.py
import pytest
import shapely

from citiesborder.export import borders_to_geodataframe, export_borders
from citiesborder.geometry import (
    coordinate_to_tuple,
    coordinates_to_linestring,
    get_border_length_m,
)
from citiesborder.providers import BorderProvider, StoreBorderProvider
from citiesborder.store import BorderStoreWriter


@pytest.fixture
def store_path(tmp_path):
    path = str(tmp_path / "borders.gz")
    with BorderStoreWriter(path) as writer:
        writer.write_record("Springfield", "0 0\n0 1")
        writer.write_record("Dot", "5 5")
    return path


def test_coordinate_to_tuple_is_lon_lat():
    assert coordinate_to_tuple("48.85 2.35") == (2.35, 48.85)


def test_coordinates_to_linestring():
    line = coordinates_to_linestring(["48.85 2.35", "48.86 2.36"])
    assert isinstance(line, shapely.LineString)
    assert list(line.coords) == [(2.35, 48.85), (2.36, 48.86)]


def test_coordinates_to_linestring_needs_two_points():
    with pytest.raises(ValueError):
        coordinates_to_linestring(["48.85 2.35"])


def test_border_length_on_equator():
    assert get_border_length_m(["0 0", "0 1"]) == pytest.approx(111319.5, abs=1.0)


def test_store_border_provider(store_path):
    provider = StoreBorderProvider(store_path)
    assert isinstance(provider, BorderProvider)
    assert list(provider.get_border("Springfield").coords) == [(0.0, 0.0), (1.0, 0.0)]
    with pytest.raises(KeyError):
        provider.get_border("Nowhere")
    with pytest.raises(ValueError):
        provider.get_border("Dot")


def test_borders_to_geodataframe_skips_missing(store_path):
    gdf = borders_to_geodataframe(
        StoreBorderProvider(store_path), ["Springfield", "Nowhere", "Dot"]
    )
    assert list(gdf["name"]) == ["Springfield"]
    assert gdf.crs.to_epsg() == 4326


def test_export_borders(store_path, tmp_path):
    out = str(tmp_path / "borders.geojson")
    assert export_borders(StoreBorderProvider(store_path), ["Springfield"], out) == 1
    assert (tmp_path / "borders.geojson").exists()
