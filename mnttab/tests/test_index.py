# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from mnttab.mounts.index import MountIndex
from mnttab.mounts.store import TextRecordStore
from mnttab.schemas.mount import MNTTAB_FIELDS, MountEntry, UNKNOWN

LINES = [
    "/dev/a / vxfs rw 0 1 991630001\n",
    "/dev/b /home vxfs rw 0 2 991630002\n",
    "/dev/c /home nfs rw 0 2 991630003\n",
    "/dev/d /data\n",
]


def _index() -> MountIndex:
    store = TextRecordStore()
    store.load(LINES, MNTTAB_FIELDS)
    return MountIndex(store)


def test_by_dir() -> None:
    index = _index()

    assert index.by_dir("/") == [0]
    assert index.by_dir("/home") == [1, 2]
    assert index.by_dir("/var") == []


def test_by_device() -> None:
    index = _index()

    assert index.by_device("/dev/c") == [2]
    assert index.by_device("/home") == []


def test_lookups_return_copies() -> None:
    index = _index()

    index.by_dir("/home").clear()

    assert index.by_dir("/home") == [1, 2]


def test_entry() -> None:
    index = _index()

    assert index.entry(1) == MountEntry(
        device="/dev/b",
        mount_dir="/home",
        fs_type="vxfs",
        options="rw",
        dump_freq="0",
        fsck_pass="2",
        mount_time="991630002",
    )
    # short lines load as empty fields
    assert index.entry(3).options == ""


def test_entry_missing_column() -> None:
    store = TextRecordStore()
    store.load(LINES, ("dev", "dir", "type"))

    entry = MountIndex(store).entry(0)

    assert entry.device == "/dev/a"
    assert entry.fs_type == "vxfs"
    assert entry.options == UNKNOWN
    assert entry.mount_time == UNKNOWN
