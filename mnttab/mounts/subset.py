# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
import re
from dataclasses import dataclass
from typing import Optional

from mnttab.mounts.paths import path_components
from mnttab.mounts.store import Record

logger = logging.getLogger(__name__)

_FIRST_DIR = re.compile(r"^(/[^/]*)")


@dataclass(frozen=True)
class SubsetFilter:
    """Accept the root entry and every entry whose mount directory starts with `prefix`."""

    prefix: str

    def __call__(self, record: Record) -> bool:
        mount_dir = record["dir"]
        return mount_dir == "/" or mount_dir.startswith(self.prefix)


def subset_filter(
    hint: Optional[str],
    depth: Optional[int] = None,
    follow_path: bool = False,
) -> Optional[SubsetFilter]:
    """Choose which mount table entries need loading to resolve paths under `hint`.

    Without a depth only the first directory of `hint` is used, e.g. "/home" for
    "/home/proj/src". A depth of n keeps the n directories nearest the root, so
    depth 2 gives "/home/proj". Returns None when the whole table must be loaded,
    which is always the case when following symlinks.
    """
    if not hint or follow_path:
        return None
    if not hint.startswith("/"):
        logger.debug(f"Ignoring relative hint '{hint}'")
        return None
    if depth is not None and depth < 0:
        raise ValueError(f"Expected non-negative depth, but got {depth}")

    if not depth:
        match = _FIRST_DIR.match(hint)
        prefix = match.group(1) if match else None
    else:
        components = path_components(hint)
        position = max(len(components) - depth, 0)
        prefix = components[position]

    if not prefix:
        return None
    logger.debug(f"Loading mount table entries under '{prefix}' for hint '{hint}'")
    return SubsetFilter(prefix=prefix)
