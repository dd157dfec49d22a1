import pyproj

__all__ = [
    "CRS_WGS84",
    "GEOD_WGS84",
]

# https://epsg.io/4326
CRS_WGS84 = pyproj.CRS.from_authority("epsg", "4326")

GEOD_WGS84 = pyproj.Geod(ellps="WGS84")
