# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from pathlib import Path

import pytest

from mnttab.tests.fakes import MountTree, write_mnttab


@pytest.fixture
def mount_tree(tmp_path: Path) -> MountTree:
    # tmp_path may itself sit below a symlink, e.g. /var on macOS
    base = tmp_path.resolve() / "root"
    for d in ("home/proj/src", "home/other", "etc"):
        (base / d).mkdir(parents=True)
    mnttab = write_mnttab(
        tmp_path / "mnttab",
        [
            ("/dev/a", "/", "vxfs"),
            ("/dev/b", str(base / "home"), "vxfs"),
            ("/dev/c", str(base / "home/proj"), "vxfs"),
            ("server:/export/etc", str(base / "etc"), "nfs"),
        ],
    )
    return MountTree(base=base, mnttab=mnttab)
