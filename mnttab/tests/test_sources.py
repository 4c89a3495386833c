# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from pathlib import Path
from typing import List, Optional

import pytest

from mnttab.mounts.errors import MalformedLine, UnsupportedSource
from mnttab.mounts.sources import (
    as_mount_info,
    get_source,
    register,
    split_fstab,
    split_mountinfo,
    unescape,
)
from mnttab.schemas.mount import MountInfo
from typeguard import typechecked


@pytest.mark.parametrize(
    "value, expected",
    [
        (
            "1299 29 0:25 /snapd/ns /run/snapd/ns rw,nosuid,nodev,noexec,relatime - tmpfs tmpfs rw,size=52826344k,mode=755",
            MountInfo(
                mount_id=1299,
                parent_id=29,
                device_id="0:25",
                root=Path("/snapd/ns"),
                mount_point=Path("/run/snapd/ns"),
                mount_options=["rw", "nosuid", "nodev", "noexec", "relatime"],
                optional_fields=[],
                filesystem_type="tmpfs",
                mount_source="tmpfs",
                super_options=["rw", "size=52826344k", "mode=755"],
            ),
        ),
        (
            "24 1 259:2 / / rw,relatime shared:1 main:1 - ext4 /dev/root rw,discard",
            MountInfo(
                mount_id=24,
                parent_id=1,
                device_id="259:2",
                root=Path("/"),
                mount_point=Path("/"),
                mount_options=["rw", "relatime"],
                optional_fields=["shared:1", "main:1"],
                filesystem_type="ext4",
                mount_source="/dev/root",
                super_options=["rw", "discard"],
            ),
        ),
    ],
)
@typechecked
def test_as_mount_info(value: str, expected: MountInfo) -> None:
    assert as_mount_info(value) == expected


@pytest.mark.parametrize(
    "line, expected",
    [
        (
            "24 1 259:2 / / rw,relatime shared:1 - ext4 /dev/root rw,discard\n",
            ["/dev/root", "/", "ext4", "rw,relatime", "0", "0", ""],
        ),
        (
            r"70 24 8:17 / /mnt/my\040disk rw - xfs /dev/sdb1 rw" + "\n",
            ["/dev/sdb1", "/mnt/my disk", "xfs", "rw", "0", "0", ""],
        ),
        ("\n", None),
    ],
)
@typechecked
def test_split_mountinfo(line: str, expected: Optional[List[str]]) -> None:
    assert split_mountinfo(line) == expected


def test_split_fstab() -> None:
    assert split_fstab(r"UUID=abc /srv/a\040b ext4 defaults 0 2" + "\n") == [
        "UUID=abc",
        "/srv/a b",
        "ext4",
        "defaults",
        "0",
        "2",
    ]
    assert split_fstab("# /etc/fstab\n") is None


@pytest.mark.parametrize(
    "line",
    [
        "/dev/sda2 none swap sw 0 0\n",
        "proc proc proc defaults 0 0\n",
        "/dev/sdc\n",
    ],
)
def test_split_fstab_skips_entries_without_mount_dir(line: str) -> None:
    assert split_fstab(line) is None


def test_split_mountinfo_malformed() -> None:
    with pytest.raises(MalformedLine) as e:
        split_mountinfo("garbage line\n")
    assert e.value.code == -7
    assert "garbage line" in e.value.message


def test_unescape() -> None:
    assert unescape(r"/a\040b\011c") == "/a b\tc"
    assert unescape("/plain") == "/plain"


@pytest.mark.parametrize(
    "name, default_path",
    [
        ("mnttab", "/etc/mnttab"),
        ("fstab", "/etc/fstab"),
        ("mounts", "/proc/mounts"),
        ("mountinfo", "/proc/self/mountinfo"),
    ],
)
def test_get_source(name: str, default_path: str) -> None:
    source = get_source(name)
    assert source.name == name
    assert source.default_path == default_path


def test_get_source_unsupported() -> None:
    with pytest.raises(UnsupportedSource) as e:
        get_source("automount")
    assert e.value.code == -6
    assert "automount" in e.value.message


def test_register_twice() -> None:
    with pytest.raises(RuntimeError):
        register("mnttab", default_path="/elsewhere")(split_fstab)
