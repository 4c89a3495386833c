# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import pytest

from mnttab.mounts.errors import WriteRejected
from mnttab.mounts.store import split_whitespace, TextRecordStore
from mnttab.schemas.mount import MNTTAB_FIELDS

LINES = [
    "# comment\n",
    "/dev/a / vxfs rw 0 1 991630001\n",
    "\n",
    "/dev/b   /home\tvxfs rw 0 2 991630002\n",
    "/dev/c /home/proj nfs\n",
    "/dev/d /home vxfs rw 0 2 991630004 extra\n",
]


def test_split_whitespace() -> None:
    assert split_whitespace("  a \t b  c\n") == ["a", "b", "c"]
    assert split_whitespace("   \n") is None
    assert split_whitespace("  # a comment") is None


def test_load() -> None:
    store = TextRecordStore()

    assert store.load(LINES, MNTTAB_FIELDS) == 4
    assert store.records[1] == {
        "dev": "/dev/b",
        "dir": "/home",
        "type": "vxfs",
        "opts": "rw",
        "freq": "0",
        "pass": "2",
        "mtime": "991630002",
    }
    # short line
    assert store.records[2]["type"] == "nfs"
    assert store.records[2]["opts"] == ""
    # extra columns are dropped
    assert store.records[3]["mtime"] == "991630004"


def test_load_with_filter() -> None:
    store = TextRecordStore()

    loaded = store.load(LINES, MNTTAB_FIELDS, match=lambda r: r["type"] == "nfs")

    assert loaded == 1
    assert [r["dev"] for r in store.records] == ["/dev/c"]


def test_index() -> None:
    store = TextRecordStore()
    store.load(LINES, MNTTAB_FIELDS)

    assert store.index("dir") == {"/": [0], "/home": [1, 3], "/home/proj": [2]}
    assert store.index("dir", match=lambda r: r["dir"] == "/home") == {"/home": [1, 3]}
    assert store.index("dev", match=lambda r: False) == {}


def test_save_is_rejected() -> None:
    store = TextRecordStore()
    store.load(LINES, MNTTAB_FIELDS)

    with pytest.raises(WriteRejected):
        store.save()
