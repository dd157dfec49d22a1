from typing import Protocol, runtime_checkable

import shapely

from citiesborder.geometry import coordinates_to_linestring
from citiesborder.lookup import search

__all__ = [
    "BorderProvider",
    "StoreBorderProvider",
]


@runtime_checkable
class BorderProvider(Protocol):
    def get_border(self, border_name: str) -> shapely.LineString: ...


class StoreBorderProvider:
    """Serve borders from a border store, rescanning it on every request."""

    def __init__(self, path: str) -> None:
        self._path = path

    def get_border(self, border_name: str) -> shapely.LineString:
        coordinates = search(self._path, border_name)
        if not coordinates:
            raise KeyError(border_name)
        return coordinates_to_linestring(coordinates)

    def __repr__(self) -> str:
        return f"StoreBorderProvider({self._path!r})"
