# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
import os
import threading
from typing import Dict, Literal, Protocol, Type

from mnttab.mounts.errors import DirectoryChangeFailed, InvalidPath

logger = logging.getLogger(__name__)

PROBE = Literal["realpath", "chdir"]

# the process has a single working directory
_CWD_LOCK = threading.Lock()


class RealPathProbe(Protocol):
    """Resolve a directory path, relative or through symlinks, to its real location."""

    def resolve(self, path: str) -> str: ...


class OsRealPathProbe:
    def resolve(self, path: str) -> str:
        real = os.path.realpath(path)
        if not os.path.isdir(real):
            raise InvalidPath(f"Can't resolve '{path}' to a directory")
        return real


class ChdirRealPathProbe:
    """Enter the directory and read the working directory back, then return to
    where the process was."""

    def resolve(self, path: str) -> str:
        with _CWD_LOCK:
            original = _getcwd()
            try:
                os.chdir(path)
            except OSError as e:
                raise InvalidPath(f"Can't cd to '{path}': {e}") from e
            try:
                real = _getcwd()
            finally:
                try:
                    os.chdir(original)
                except OSError as e:
                    raise DirectoryChangeFailed(
                        f"Cannot restore original working directory '{original}': {e}",
                        fatal=True,
                    ) from e
        return real


def _getcwd() -> str:
    try:
        cwd = os.getcwd()
    except OSError as e:
        raise DirectoryChangeFailed(
            f"Cannot read the current working directory: {e}", fatal=True
        ) from e
    if not os.path.isabs(cwd):
        raise DirectoryChangeFailed(f"Invalid data from getcwd: '{cwd}'", fatal=True)
    return cwd


probes: Dict[str, Type[RealPathProbe]] = {
    "realpath": OsRealPathProbe,
    "chdir": ChdirRealPathProbe,
}
