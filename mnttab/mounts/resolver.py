# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Find the mount table entry governing a directory or device.

Example:
    table = MountTable()
    mount_dir, fs_type = table.find_mount_point("/some/dir/path")
    if table.mount_is_local():
        ...
    if table.find_mount_device("/dev/vg00/lvol6") is None:
        code, message = table.status()

Pass a hint path, and optionally a depth, when every path searched lives under
the same directory: only the entries under it, plus "/", are loaded.
"""
import logging
from typing import Iterator, List, Optional, Tuple

from mnttab.mounts.config import MnttabConfig
from mnttab.mounts.errors import AmbiguousMatch, MnttabError, NoMatch
from mnttab.mounts.guard import check_ancestors, check_exists, check_path
from mnttab.mounts.index import MountIndex
from mnttab.mounts.paths import path_components
from mnttab.mounts.realpath import probes, RealPathProbe
from mnttab.mounts.sources import get_source
from mnttab.mounts.store import RecordStore, TextRecordStore
from mnttab.mounts.subset import subset_filter, SubsetFilter
from mnttab.schemas.mount import MNTTAB_FIELDS, MountEntry, MountPoint, MountResult

logger = logging.getLogger(__name__)


class MountTable:
    def __init__(
        self,
        hint: Optional[str] = None,
        depth: Optional[int] = None,
        mnttab: Optional[str] = None,
        config: Optional[MnttabConfig] = None,
        store: Optional[RecordStore] = None,
        probe: Optional[RealPathProbe] = None,
    ) -> None:
        self.config = config if config is not None else MnttabConfig()
        source = get_source(self.config.source)
        self.path = mnttab or self.config.mnttab or source.default_path
        self.subset: Optional[SubsetFilter] = subset_filter(
            hint, depth, follow_path=self.config.follow_path
        )
        self.store: RecordStore = (
            store if store is not None else TextRecordStore(split=source.split)
        )
        self.probe: RealPathProbe = (
            probe if probe is not None else probes[self.config.probe]()
        )

        with open(self.path, "r") as f:
            loaded = self.store.load(f, MNTTAB_FIELDS, self.subset)
        logger.debug(
            f"Loaded {loaded} entries from {self.path} ({source.name}) with filter {self.subset}"
        )
        self.index = MountIndex(self.store)

        self._result = MountResult()
        self._error: Optional[MnttabError] = None

    def __iter__(self) -> Iterator[MountEntry]:
        return (self.index.entry(key) for key in range(len(self.store.records)))

    def __len__(self) -> int:
        return len(self.store.records)

    def find_mount_point(self, path: str) -> Optional[MountPoint]:
        """Find the entry whose mount directory is the nearest ancestor of `path`.

        Returns None, with the reason available from `status`, when `path` is
        rejected or no single entry matches.
        """
        self._reset(path)
        try:
            key = self._search_path(path)
        except MnttabError as e:
            self._fail(e)
            return None
        return self._found(path, key)

    def find_mount_device(self, device: str) -> Optional[MountPoint]:
        """Find the entry for the device special file `device`. Devices do not
        nest, so only an exact match counts."""
        self._reset(device)
        try:
            key = self._single(
                self.index.by_device(device),
                f"No mount table entry for device '{device}'",
                f"Several mount table entries for device '{device}'",
            )
        except MnttabError as e:
            self._fail(e)
            return None
        return self._found(device, key)

    def _search_path(self, path: str) -> int:
        follow_path = self.config.follow_path
        check_exists(path)
        if follow_path:
            path = self.probe.resolve(path)
        else:
            check_path(path)

        candidates = path_components(path, follow_path=follow_path)
        candidates.append("/")
        if not follow_path:
            check_ancestors(candidates)

        # the nearest ancestor with an entry is the mount point
        keys: List[int] = []
        for candidate in candidates:
            keys = self.index.by_dir(candidate)
            logger.debug(f"{len(keys)} entries for '{candidate}'")
            if keys:
                break
        return self._single(
            keys,
            f"No mount table entry for '{path}'",
            f"Several mount table entries for '{candidate}' matching '{path}'",
        )

    @staticmethod
    def _single(keys: List[int], missing: str, ambiguous: str) -> int:
        if not keys:
            raise NoMatch(missing)
        if len(keys) > 1:
            raise AmbiguousMatch(f"{ambiguous}: {len(keys)} entries")
        return keys[0]

    def _reset(self, path: str) -> None:
        self._result = MountResult(path=path)
        self._error = None

    def _fail(self, error: MnttabError) -> None:
        self._error = error
        if error.fatal:
            raise error
        logger.warning(error.message)

    def _found(self, path: str, key: int) -> MountPoint:
        self._result = MountResult.from_entry(path, self.index.entry(key))
        return MountPoint(self._result.mount_dir, self._result.fs_type)

    def list_mount_points(self) -> List[str]:
        """Mount directories loaded from the mount table, in file order. This is
        only a subset of the file when the table was built with a hint."""
        return [record["dir"] for record in self.store.records]

    def status(self) -> Tuple[int, str]:
        if self._error is None:
            return 0, ""
        return self._error.code, self._error.message

    def save(self) -> Tuple[int, str]:
        """Refuse to rewrite the mount table; the failure is reported by `status`."""
        try:
            self.store.save()
        except MnttabError as e:
            self._fail(e)
        return self.status()

    def mount_is_local(self) -> bool:
        return self._result.fs_type in self.config.local_fs_types

    def mount_not_local(self) -> bool:
        return not self.mount_is_local()

    def valid_mount_point(self) -> bool:
        return self._result.is_valid

    def get_mount_path(self) -> str:
        return self._result.path

    def get_mount_device(self) -> str:
        return self._result.device

    def get_mount_point(self) -> str:
        return self._result.mount_dir

    def get_mount_type(self) -> str:
        return self._result.fs_type

    def get_mount_opts(self) -> str:
        return self._result.options

    def get_mount_freq(self) -> str:
        return self._result.dump_freq

    def get_mount_pass(self) -> str:
        return self._result.fsck_pass

    def get_mount_time(self) -> str:
        return self._result.mount_time

    @property
    def result(self) -> MountResult:
        return self._result
