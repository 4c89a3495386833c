# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from __future__ import annotations

from typing import Any, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, field_validator

from mnttab.mounts.realpath import PROBE

# "local" filesystem types, everything else is treated as remote
LOCAL_FS_TYPES = (
    "hfs",
    "vxfs",
    "cdfs",
    "reiserfs",
    "ext2",
    "ext3",
    "ext4",
    "xfs",
    "btrfs",
)


class MnttabConfig(BaseModel):
    """How a mount table is loaded and searched.

    With `follow_path` set, symlinks and relative paths are resolved to their real
    location before searching, the whole table is always loaded and any hint path
    or depth is ignored.
    """

    model_config = ConfigDict(frozen=True)

    follow_path: bool = False
    # a name registered in mnttab.mounts.sources
    source: str = "mnttab"
    # overrides the default file of the source
    mnttab: Optional[str] = None
    local_fs_types: Tuple[str, ...] = LOCAL_FS_TYPES
    probe: PROBE = "realpath"

    @field_validator("local_fs_types", mode="before")
    @classmethod
    def _split_fs_types(cls, value: Any) -> Any:
        if isinstance(value, str):
            return tuple(t.strip() for t in value.split(",") if t.strip())
        return value

    @classmethod
    def from_env(cls, environ: Mapping[str, str]) -> MnttabConfig:
        """Construct from environment variables.

        Each value is read from the field name in uppercase prefixed with
        'MNTTAB_', e.g. 'MNTTAB_FOLLOW_PATH=1'. Unset variables keep their default.
        """
        kwargs = {}
        for f in cls.model_fields:
            key = f"MNTTAB_{f.upper()}"
            if key in environ:
                kwargs[f] = environ[key]
        return cls(**kwargs)
