import logging
from typing import Iterable, List

import geopandas
import shapely

from citiesborder.crs import CRS_WGS84
from citiesborder.providers import BorderProvider

__all__ = ["borders_to_geodataframe", "export_borders"]


log = logging.getLogger(__name__)


def borders_to_geodataframe(
    border_provider: BorderProvider, names: Iterable[str]
) -> geopandas.GeoDataFrame:
    found_names: List[str] = []
    geometries: List[shapely.LineString] = []
    for name in names:
        try:
            border = border_provider.get_border(name)
        except KeyError:
            log.warning(f"no border named '{name}', skipping")
            continue
        except ValueError as e:
            log.warning(f"skipping border '{name}': {e}")
            continue
        found_names.append(name)
        geometries.append(border)
    return geopandas.GeoDataFrame(
        {"name": found_names, "geometry": geometries}, crs=CRS_WGS84
    )


def export_borders(
    border_provider: BorderProvider, names: Iterable[str], out_file_path: str
) -> int:
    gdf = borders_to_geodataframe(border_provider, names)
    gdf.to_file(out_file_path)
    log.info(f"Wrote {len(gdf)} borders to {out_file_path}")
    return len(gdf)
