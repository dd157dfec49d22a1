import dataclasses
import gzip
import logging
import xml.sax

from citiesborder.graph_builder import GraphBuilder, OsmXmlHandler
from citiesborder.store import BorderStoreWriter

__all__ = [
    "BuildConfig",
    "build_border_store",
    "build_border_store_from_config",
]


log = logging.getLogger(__name__)


@dataclasses.dataclass
class BuildConfig:
    input_path: str
    output_path: str
    append: bool = False


def build_border_store(input_path: str, output_path: str, append: bool = False) -> int:
    """Write one border record per relation of an OSM XML file (plain or .gz)."""
    with BorderStoreWriter(output_path, append) as writer:
        builder = GraphBuilder(writer)
        parser = xml.sax.make_parser()
        parser.setContentHandler(OsmXmlHandler(builder))
        with _open_input(input_path) as input_file:
            parser.parse(input_file)
    log.info(f"Wrote {builder.regions_written} borders to {output_path}")
    return builder.regions_written


def build_border_store_from_config(config: BuildConfig) -> int:
    return build_border_store(config.input_path, config.output_path, config.append)


def _open_input(path: str):
    if path.endswith(".gz"):
        return gzip.open(path, "rb")
    return open(path, "rb")
