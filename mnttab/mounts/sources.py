# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Mount table file formats.

Each format turns one line of its source file into the positional columns of
`MNTTAB_FIELDS`. Formats are looked up by name through `get_source`.
"""
import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Dict, List, Optional

from mnttab.mounts.errors import MalformedLine, UnsupportedSource
from mnttab.mounts.store import LineSplitter, split_whitespace
from mnttab.schemas.mount import MNTTAB_FIELDS, MountInfo

logger = logging.getLogger(__name__)

_OCTAL_ESCAPE = re.compile(r"\\([0-7]{3})")


@dataclass(frozen=True)
class MountSource:
    name: str
    default_path: str
    split: LineSplitter


registry: Dict[str, MountSource] = {}


def register(
    name: str, default_path: str
) -> Callable[[LineSplitter], LineSplitter]:
    def decorator(split: LineSplitter) -> LineSplitter:
        if (source := registry.get(name)) is not None:
            raise RuntimeError(f"'{name}' is already registered to {source}")
        registry[name] = MountSource(name=name, default_path=default_path, split=split)
        logger.debug(f"Registered '{name}' to {split.__name__}")
        return split

    return decorator


def get_source(name: str) -> MountSource:
    try:
        return registry[name]
    except KeyError:
        raise UnsupportedSource(
            f"Unsupported mount table source '{name}'. Known sources: {sorted(registry)}"
        ) from None


def unescape(value: str) -> str:
    r"""Decode the octal escapes the kernel uses for whitespace in mount paths.

    >>> unescape(r"/mnt/my\040disk")
    '/mnt/my disk'
    """
    return _OCTAL_ESCAPE.sub(lambda m: chr(int(m.group(1), 8)), value)


def as_mount_info(line: str) -> MountInfo:
    mount_info = line.split()
    separator_idx = mount_info.index("-")
    return MountInfo(
        mount_id=int(mount_info[0]),
        parent_id=int(mount_info[1]),
        device_id=mount_info[2],
        root=Path(unescape(mount_info[3])),
        mount_point=Path(unescape(mount_info[4])),
        mount_options=mount_info[5].split(","),
        optional_fields=mount_info[6:separator_idx],
        filesystem_type=mount_info[separator_idx + 1],
        mount_source=unescape(mount_info[separator_idx + 2]),
        super_options=mount_info[separator_idx + 3].split(","),
    )


@register("mnttab", default_path="/etc/mnttab")
def split_mnttab(line: str) -> Optional[List[str]]:
    return split_whitespace(line)


@register("fstab", default_path="/etc/fstab")
def split_fstab(line: str) -> Optional[List[str]]:
    values = split_whitespace(line)
    if values is None:
        return None
    # swap and pseudo filesystems have no mount directory
    if len(values) < 2 or not values[1].startswith("/"):
        logger.debug(f"Skipping entry without a mount directory: {line.strip()}")
        return None
    # fstab has no mount time column
    return [unescape(v) for v in values[: len(MNTTAB_FIELDS) - 1]]


@register("mounts", default_path="/proc/mounts")
def split_proc_mounts(line: str) -> Optional[List[str]]:
    return split_fstab(line)


@register("mountinfo", default_path="/proc/self/mountinfo")
def split_mountinfo(line: str) -> Optional[List[str]]:
    if not line.strip():
        return None
    try:
        info = as_mount_info(line)
    except (ValueError, IndexError) as e:
        raise MalformedLine(f"Malformed mountinfo line '{line.strip()}': {e}") from e
    return [
        info.mount_source,
        info.mount_point.as_posix(),
        info.filesystem_type,
        ",".join(info.mount_options),
        "0",
        "0",
        "",
    ]
