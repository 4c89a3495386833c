# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from dataclasses import field
from typing import Any


def record_field(field_name: str) -> Any:
    """
    Arguments:
        field_name (str): Name of the column in the mount table record holding this value.
    """
    return field(metadata={"field_name": field_name})
