# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from dataclasses import dataclass
from pathlib import Path
from typing import List, NamedTuple

from mnttab.schemas.dataclass import record_field

UNKNOWN = "*Unknown*"
INVALID_PATH = "*Invalid Path*"

# column names of a mount table record, in file order
MNTTAB_FIELDS = ("dev", "dir", "type", "opts", "freq", "pass", "mtime")


@dataclass(frozen=True)
class MountEntry:
    """One line of a mount table."""

    device: str = record_field("dev")
    mount_dir: str = record_field("dir")
    fs_type: str = record_field("type")
    options: str = record_field("opts")
    dump_freq: str = record_field("freq")
    fsck_pass: str = record_field("pass")
    mount_time: str = record_field("mtime")


class MountPoint(NamedTuple):
    mount_dir: str
    fs_type: str


@dataclass
class MountResult:
    """State of the last lookup made against a mount table.

    `fs_type` holds INVALID_PATH until a lookup succeeds.
    """

    path: str = ""
    device: str = ""
    mount_dir: str = ""
    fs_type: str = INVALID_PATH
    options: str = ""
    dump_freq: str = ""
    fsck_pass: str = ""
    mount_time: str = ""

    @classmethod
    def from_entry(cls, path: str, entry: MountEntry) -> "MountResult":
        return cls(
            path=path,
            device=entry.device or UNKNOWN,
            mount_dir=entry.mount_dir or UNKNOWN,
            fs_type=entry.fs_type or UNKNOWN,
            options=entry.options or UNKNOWN,
            dump_freq=entry.dump_freq or UNKNOWN,
            fsck_pass=entry.fsck_pass or UNKNOWN,
            mount_time=entry.mount_time or UNKNOWN,
        )

    @property
    def is_valid(self) -> bool:
        return not self.fs_type.startswith("*Invalid")


@dataclass
class MountInfo:
    """https://man7.org/linux/man-pages/man5/proc.5.html"""

    mount_id: int
    parent_id: int
    device_id: str
    root: Path
    mount_point: Path
    mount_options: List[str]
    optional_fields: List[str]
    filesystem_type: str
    mount_source: str
    super_options: List[str]
