from typing import Sequence, Tuple

import shapely

from citiesborder.crs import GEOD_WGS84

__all__ = [
    "coordinate_to_tuple",
    "coordinates_to_linestring",
    "get_border_length_m",
]


def coordinate_to_tuple(coordinate: str) -> Tuple[float, float]:
    lat, lon = coordinate.split(" ")
    return (float(lon), float(lat))


def coordinates_to_linestring(coordinates: Sequence[str]) -> shapely.LineString:
    if len(coordinates) < 2:
        raise ValueError(f"a border needs at least 2 points, got {len(coordinates)}")
    return shapely.LineString([coordinate_to_tuple(c) for c in coordinates])


def get_border_length_m(coordinates: Sequence[str]) -> float:
    return GEOD_WGS84.geometry_length(coordinates_to_linestring(coordinates))
