# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging
from dataclasses import dataclass, field
from typing import Dict, List

from mnttab.mounts.dataclass_utils import instantiate_dataclass
from mnttab.mounts.store import RecordStore
from mnttab.schemas.mount import MountEntry

logger = logging.getLogger(__name__)


@dataclass
class MountIndex:
    """Equality lookups over the mount directory and device of each loaded record.

    Both indices are built once. A value held by several records maps to all of
    their keys so callers can tell an ambiguous lookup from a missing one.
    """

    store: RecordStore
    _by_dir: Dict[str, List[int]] = field(init=False)
    _by_device: Dict[str, List[int]] = field(init=False)

    def __post_init__(self) -> None:
        self._by_dir = self.store.index("dir")
        self._by_device = self.store.index("dev")
        logger.debug(
            f"Indexed {len(self._by_dir)} mount directories and {len(self._by_device)} devices"
        )

    def by_dir(self, value: str) -> List[int]:
        return list(self._by_dir.get(value, []))

    def by_device(self, value: str) -> List[int]:
        return list(self._by_device.get(value, []))

    def entry(self, key: int) -> MountEntry:
        return instantiate_dataclass(MountEntry, self.store.records[key], logger)
