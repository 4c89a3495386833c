# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import logging

from dataclasses import fields, is_dataclass
from typing import Any, cast, Hashable, Mapping, Type, TypeVar

from mnttab.schemas.mount import UNKNOWN


_TDataclass = TypeVar("_TDataclass")


def instantiate_dataclass(
    cls: Type[_TDataclass], data: Mapping[Hashable, Any], logger: logging.Logger
) -> _TDataclass:
    if not is_dataclass(cls):
        raise TypeError(f"{type(cls).__name__} is not a dataclass.")
    parsed_data = {}
    for field in fields(cls):
        field_name = field.metadata.get("field_name", field.name)
        class_name = field.name
        if field_name in data:
            parsed_data[class_name] = data[field_name]
        else:
            logger.debug(f"Missing {field_name=} when instantiating {cls.__name__=}")
            parsed_data[class_name] = UNKNOWN
    return cast(_TDataclass, cls(**parsed_data))
