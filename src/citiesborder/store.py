import enum
import gzip
import logging
import re
from typing import Iterator

from citiesborder.errors import StoreFormatError

__all__ = [
    "BorderStoreReader",
    "BorderStoreWriter",
    "ReaderState",
    "format_record",
    "parse_header",
]


log = logging.getLogger(__name__)


_HEADER_REGEX = re.compile(r"^\{(?P<name>.*)\}:(?P<count>\d+)$", re.DOTALL)

# a header is a single line
_LINE_BREAK_REGEX = re.compile(r"\r\n|[\r\n]")

# unread content is discarded in chunks of at most this many characters
_SKIP_CHUNK_SIZE = 64 * 1024


def format_record(name: str, content: str) -> str:
    if _LINE_BREAK_REGEX.search(name):
        log.warning(f"replacing line breaks in border name {name!r}")
        name = _LINE_BREAK_REGEX.sub(" ", name)
    return "{" + name + "}:" + str(len(content)) + "\n" + content + "\n"


def parse_header(line: str) -> tuple[str, int]:
    match = _HEADER_REGEX.fullmatch(line)
    if not match:
        raise StoreFormatError(f'invalid record header "{line}"')
    return match["name"], int(match["count"])


class BorderStoreWriter:
    """Append border records to a gzip compressed store.

    The target is truncated unless ``append`` is set, in which case a new gzip
    member is added after the existing ones.
    """

    def __init__(self, path: str, append: bool = False) -> None:
        self._path = path
        self._file = gzip.open(
            path, "at" if append else "wt", encoding="utf-8", newline="\n"
        )
        log.debug(f"opened border store {path} (append={append})")

    def write_record(self, name: str, content: str) -> bool:
        try:
            self._file.write(format_record(name, content))
        except OSError as e:
            log.error(f"failed to write border '{name}' to {self._path}: {e}")
            return False
        return True

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "BorderStoreWriter":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()


class ReaderState(enum.Enum):
    NO_ENTRY_LOADED = 0
    HEADER_LOADED = 1


class BorderStoreReader:
    """Forward-only cursor over a border store.

    ``read_entry`` loads the next record header and returns its name,
    ``read_data`` returns the content of the loaded record. Content that is not
    read is skipped by the following ``read_entry``.
    """

    def __init__(self, path: str) -> None:
        self._file = gzip.open(path, "rt", encoding="utf-8", newline="\n")
        self.state = ReaderState.NO_ENTRY_LOADED
        self._name: str | None = None
        self._count = 0

    def read_entry(self) -> str | None:
        if self.state is ReaderState.HEADER_LOADED:
            self._skip(self._count + 1)
            self._unload()
            return self.read_entry()
        line = self._file.readline()
        if not line:
            return None
        self._name, self._count = parse_header(line.removesuffix("\n"))
        self.state = ReaderState.HEADER_LOADED
        return self._name

    def read_data(self) -> str | None:
        if self.state is ReaderState.NO_ENTRY_LOADED:
            return None
        content = self._file.read(self._count)
        if len(content) != self._count:
            raise StoreFormatError(
                f"record '{self._name}' ends after {len(content)} of {self._count} characters"
            )
        terminator = self._file.read(1)
        if terminator != "\n":
            raise StoreFormatError(f"record '{self._name}' is not terminated by a newline")
        self._unload()
        return content

    def entries(self) -> Iterator[str]:
        while (name := self.read_entry()) is not None:
            yield name

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "BorderStoreReader":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _skip(self, count: int) -> None:
        remaining = count
        while remaining > 0:
            chunk = self._file.read(min(remaining, _SKIP_CHUNK_SIZE))
            if not chunk:
                raise StoreFormatError(
                    f"record '{self._name}' ends {remaining} characters early"
                )
            remaining -= len(chunk)

    def _unload(self) -> None:
        self.state = ReaderState.NO_ENTRY_LOADED
        self._name = None
        self._count = 0
