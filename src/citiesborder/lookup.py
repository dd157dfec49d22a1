import logging
from typing import List

from citiesborder.store import BorderStoreReader

__all__ = ["search", "list_names"]


log = logging.getLogger(__name__)


def search(path: str, name: str) -> List[str]:
    """Return the border coordinates stored for ``name``, or an empty list."""
    with BorderStoreReader(path) as reader:
        for entry_name in reader.entries():
            if entry_name == name:
                return reader.read_data().split("\n")
    log.debug(f"no border named '{name}' in {path}")
    return []


def list_names(path: str) -> List[str]:
    with BorderStoreReader(path) as reader:
        return list(reader.entries())
