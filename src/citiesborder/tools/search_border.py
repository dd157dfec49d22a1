import argparse
import logging

from citiesborder.export import export_borders
from citiesborder.geometry import get_border_length_m
from citiesborder.lookup import list_names, search
from citiesborder.providers import StoreBorderProvider

log = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)


def search_border(store_path: str, name: str, geometry_file_path: str | None) -> None:
    coordinates = search(store_path, name)
    if not coordinates:
        log.warning(f"no border named '{name}' in {store_path}")
        return
    for coordinate in coordinates:
        print(coordinate)
    if len(coordinates) >= 2:
        log.info(
            f"border '{name}': {len(coordinates)} points, {get_border_length_m(coordinates) / 1000:.1f}km"
        )
    if geometry_file_path:
        export_borders(StoreBorderProvider(store_path), [name], geometry_file_path)


def entrypoint():
    parser = argparse.ArgumentParser(description="Look up borders in a border store")
    parser.add_argument("store", help="Path to the border store")
    parser.add_argument("name", nargs="?", help="Exact name of the border to print")
    parser.add_argument(
        "--list", action="store_true", help="Print the names of all stored borders"
    )
    parser.add_argument(
        "--geometry-file",
        help="Path where to write the found border as a geometry file (e.g. .gpkg)",
    )
    args = parser.parse_args()
    if args.list:
        for name in list_names(args.store):
            print(name)
        return
    if args.name is None:
        parser.error("a border name is required unless --list is given")
    search_border(args.store, args.name, args.geometry_file)


if __name__ == "__main__":
    entrypoint()
