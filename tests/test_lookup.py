# tests/test_lookup.py
import gzip

import pytest

from citiesborder.lookup import list_names, search
from citiesborder.store import BorderStoreWriter


@pytest.fixture
def store_path(tmp_path):
    path = str(tmp_path / "borders.gz")
    with BorderStoreWriter(path) as writer:
        writer.write_record("Shelbyville", "5 6\n7 8\n9 10")
        writer.write_record("Springfield", "1 2\n3 4")
        writer.write_record("Springfield", "0 0\n0 1")
        writer.write_record("Empty", "")
    return path


def test_search_present_name(store_path):
    assert search(store_path, "Springfield") == ["1 2", "3 4"]


def test_search_absent_name(store_path):
    assert search(store_path, "Nowhere") == []


def test_search_is_case_sensitive(store_path):
    assert search(store_path, "springfield") == []
    assert search(store_path, "Springfield ") == []


def test_search_rescans_every_call(store_path):
    assert search(store_path, "Shelbyville") == ["5 6", "7 8", "9 10"]
    assert search(store_path, "Shelbyville") == ["5 6", "7 8", "9 10"]


def test_search_record_without_content(store_path):
    assert search(store_path, "Empty") == [""]


def test_list_names(store_path):
    assert list_names(store_path) == ["Shelbyville", "Springfield", "Springfield", "Empty"]


def test_search_missing_store_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        search(str(tmp_path / "missing.gz"), "Springfield")


@pytest.fixture
def large_store_path(tmp_path):
    path = str(tmp_path / "large.gz")
    with BorderStoreWriter(path) as writer:
        for i in range(2000):
            writer.write_record(f"Region {i}", "\n".join(f"{i}.{j} -{j}.{i}" for j in range(20)))
    return path


def test_search_truncated_store_raises(large_store_path):
    with open(large_store_path, "rb") as f:
        data = f.read()
    with open(large_store_path, "wb") as f:
        f.write(data[: len(data) // 2])
    with pytest.raises(EOFError):
        search(large_store_path, "absent")


def test_search_corrupt_store_raises(tmp_path):
    path = tmp_path / "corrupt.gz"
    path.write_bytes(b"{Springfield}:3\n1 2\n is not compressed")
    with pytest.raises(gzip.BadGzipFile):
        search(str(path), "Springfield")
