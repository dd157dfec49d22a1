import logging
import xml.sax.handler
from typing import Dict, List, Protocol

from citiesborder.assembler import assemble_border
from citiesborder.errors import MalformedEventStreamError

__all__ = [
    "GraphBuilder",
    "OsmXmlHandler",
    "RecordWriter",
]


log = logging.getLogger(__name__)


class RecordWriter(Protocol):
    def write_record(self, name: str, content: str) -> bool: ...


class _Segment:
    def __init__(self, segment_id: int) -> None:
        self.id = segment_id
        self.coordinates: List[str] = []

    def add(self, coordinate: str) -> None:
        if self.coordinates and self.coordinates[-1] == coordinate:
            return
        self.coordinates.append(coordinate)


class _Region:
    def __init__(self) -> None:
        self.name: str | None = None
        self.members: List[List[str]] = []


class GraphBuilder:
    """Collect points, segments and regions of one document.

    Each method handles one element event, in document order. When a region
    closes its member segments are assembled into a border and written as one
    record. References to unknown points or segments are ignored.
    """

    def __init__(self, writer: RecordWriter) -> None:
        self._writer = writer
        self._points: Dict[int, str] = {}
        self._segments: Dict[int, List[str]] = {}
        self._current_segment: _Segment | None = None
        self._current_region: _Region | None = None
        self.regions_written = 0

    def point(self, point_id: int, lat: str, lon: str) -> None:
        self._points[point_id] = f"{lat} {lon}"

    def segment_open(self, segment_id: int) -> None:
        self._current_segment = _Segment(segment_id)

    def segment_node_ref(self, ref: int) -> None:
        segment = self._require_segment("nd")
        coordinate = self._points.get(ref)
        if coordinate is None:
            log.debug(f"way {segment.id} references unknown node {ref}")
            return
        segment.add(coordinate)

    def segment_close(self) -> None:
        segment = self._require_segment("way end")
        self._segments[segment.id] = segment.coordinates
        self._current_segment = None

    def region_open(self) -> None:
        self._current_region = _Region()

    def region_member(self, member_type: str, ref: int) -> None:
        region = self._require_region("member")
        if member_type != "way":
            return
        coordinates = self._segments.get(ref)
        if coordinates is None:
            log.debug(f"relation references unknown way {ref}")
            return
        region.members.append(coordinates)

    def region_tag(self, key: str, value: str) -> None:
        region = self._require_region("tag")
        if key == "name":
            region.name = value

    def region_close(self) -> None:
        region = self._require_region("relation end")
        name = region.name if region.name is not None else ""
        content = assemble_border(region.members, name)
        if self._writer.write_record(name, content):
            self.regions_written += 1
            log.debug(f"wrote border '{name}' from {len(region.members)} way(s)")
        self._current_region = None

    def clear(self) -> None:
        self._current_segment = None
        self._current_region = None
        self._points.clear()
        self._segments.clear()

    @property
    def in_region(self) -> bool:
        return self._current_region is not None

    def _require_segment(self, event: str) -> _Segment:
        if self._current_segment is None:
            raise MalformedEventStreamError(f"'{event}' outside of a way")
        return self._current_segment

    def _require_region(self, event: str) -> _Region:
        if self._current_region is None:
            raise MalformedEventStreamError(f"'{event}' outside of a relation")
        return self._current_region


class OsmXmlHandler(xml.sax.handler.ContentHandler):
    """Feed the elements of an OSM XML document to a ``GraphBuilder``."""

    def __init__(self, builder: GraphBuilder) -> None:
        super().__init__()
        self._builder = builder

    def startElement(self, name, attrs):
        if name == "node":
            self._builder.point(int(attrs["id"]), attrs["lat"], attrs["lon"])
        elif name == "nd":
            self._builder.segment_node_ref(int(attrs["ref"]))
        elif name == "way":
            self._builder.segment_open(int(attrs["id"]))
        elif name == "relation":
            self._builder.region_open()
        elif name == "member":
            self._builder.region_member(attrs["type"], int(attrs["ref"]))
        elif name == "tag" and self._builder.in_region:
            self._builder.region_tag(attrs["k"], attrs["v"])

    def endElement(self, name):
        if name == "way":
            self._builder.segment_close()
        elif name == "relation":
            self._builder.region_close()

    def endDocument(self):
        self._builder.clear()
