# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from typing import Optional

import pytest

from mnttab.mounts.subset import subset_filter, SubsetFilter
from typeguard import typechecked


@pytest.mark.parametrize(
    "hint, depth, expected",
    [
        (None, None, None),
        ("", 2, None),
        ("/home/proj/src", None, SubsetFilter("/home")),
        ("/home/proj/src", 0, SubsetFilter("/home")),
        ("/home/proj/src", 1, SubsetFilter("/home")),
        ("/home/proj/src", 2, SubsetFilter("/home/proj")),
        ("/home/proj/src", 3, SubsetFilter("/home/proj/src")),
        ("/home/proj/src", 10, SubsetFilter("/home/proj/src")),
        ("/home//proj/./src/", 2, SubsetFilter("/home/proj")),
        ("home/proj", None, None),
        ("home/proj", 2, None),
    ],
)
@typechecked
def test_subset_filter(
    hint: Optional[str], depth: Optional[int], expected: Optional[SubsetFilter]
) -> None:
    assert subset_filter(hint, depth) == expected


def test_subset_filter_follow_path_loads_everything() -> None:
    assert subset_filter("/home/proj", 2, follow_path=True) is None


def test_subset_filter_negative_depth() -> None:
    with pytest.raises(ValueError):
        subset_filter("/home/proj", -1)


def test_subset_always_includes_root() -> None:
    subset = subset_filter("/home/proj", 0)
    assert subset is not None

    assert subset({"dir": "/"})
    assert subset({"dir": "/home"})
    assert subset({"dir": "/home/proj/src"})
    assert not subset({"dir": "/etc"})
    assert not subset({"dir": "/var/home"})
