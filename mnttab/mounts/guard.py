# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Checks applied to a path before it is searched for in a mount table.

The textual ancestors of a path holding a symlink or ".." component need not be
the directories it lives under, so such paths are rejected unless the table
follows paths.
"""
import os
from typing import Iterable

from mnttab.mounts.errors import InvalidPath, RelativePathRejected, SymlinkRejected


def check_exists(path: str) -> None:
    if not (os.path.isdir(path) or os.path.islink(path)):
        raise InvalidPath(f"Invalid path '{path}'")


def check_path(path: str) -> None:
    """Reject a symlink, relative path or ".." component. Call after check_exists."""
    # a trailing "/." hides a symlink from this test; check_ancestors catches it
    if os.path.islink(path):
        raise SymlinkRejected(
            f"Symlink found in path '{path}' and path following is not enabled"
        )
    if not path.startswith("/"):
        raise RelativePathRejected(
            f"Relative path '{path}' used and path following is not enabled"
        )
    if ".." in path.split("/"):
        raise RelativePathRejected(
            f"Relative path '{path}' used and path following is not enabled"
        )


def check_ancestors(components: Iterable[str]) -> None:
    for component in components:
        if os.path.islink(component):
            raise SymlinkRejected(
                f"Symlink found in path at '{component}' and path following is not enabled"
            )
