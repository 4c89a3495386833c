# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import os
import re
from typing import List

_EMBEDDED = re.compile(r"/\./|//")
_TRAILING = re.compile(r"/\.?$")


def canonicalize(path: str) -> str:
    """Textually clean up a path without touching the filesystem.

    Collapses embedded "/./" and "//" and strips a trailing "/" or "/.". Symlinks
    and ".." are left alone; callers reject those separately.

    >>> canonicalize("/a/./b//c/")
    '/a/b/c'
    >>> canonicalize("/")
    '/'
    """
    while True:
        collapsed = _EMBEDDED.sub("/", path)
        if collapsed == path:
            break
        path = collapsed
    stripped = _TRAILING.sub("", path)
    if stripped == "" and path.startswith("/"):
        return "/"
    return stripped


def path_components(path: str, follow_path: bool = False) -> List[str]:
    """Return `path` and each of its parent directories, most specific first.

    The root directory itself is never included. When `follow_path` is set the
    path is expected to already be a real path and is used as is.

    >>> path_components("/ClearCase/be-staging/i80/")
    ['/ClearCase/be-staging/i80', '/ClearCase/be-staging', '/ClearCase']
    """
    if not follow_path:
        path = canonicalize(path)
    components = [path]
    while True:
        parent = os.path.dirname(path)
        if parent in ("/", "") or parent == path:
            break
        components.append(parent)
        path = parent
    return components
