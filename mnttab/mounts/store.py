# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Minimal line-oriented record store backing a mount table."""
import logging
from dataclasses import dataclass, field
from typing import (
    Callable,
    Dict,
    Iterable,
    List,
    Mapping,
    Optional,
    Protocol,
    Sequence,
)

from mnttab.mounts.errors import WriteRejected

logger = logging.getLogger(__name__)

Record = Mapping[str, str]
RecordFilter = Callable[[Record], bool]
LineSplitter = Callable[[str], Optional[List[str]]]


class RecordStore(Protocol):
    """An ordered sequence of records with named fields."""

    @property
    def records(self) -> Sequence[Record]: ...

    def load(
        self,
        lines: Iterable[str],
        fields: Sequence[str],
        match: Optional[RecordFilter] = None,
    ) -> int:
        """Append the records from `lines` accepted by `match`. Return the number loaded."""

    def index(
        self, field_name: str, match: Optional[RecordFilter] = None
    ) -> Dict[str, List[int]]:
        """Map each value of `field_name` to the positions of the records holding it,
        considering only records accepted by `match`."""

    def save(self) -> None:
        """Write the records back to their source."""


def split_whitespace(line: str) -> Optional[List[str]]:
    """Split on runs of whitespace. Blank lines and comments yield None."""
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None
    return stripped.split()


@dataclass
class TextRecordStore:
    split: LineSplitter = split_whitespace
    _records: List[Dict[str, str]] = field(default_factory=list, init=False)

    @property
    def records(self) -> Sequence[Record]:
        return self._records

    def load(
        self,
        lines: Iterable[str],
        fields: Sequence[str],
        match: Optional[RecordFilter] = None,
    ) -> int:
        loaded = 0
        skipped = 0
        for line in lines:
            values = self.split(line)
            if values is None:
                continue
            # short lines leave trailing fields empty, extra columns are dropped
            record = {name: "" for name in fields}
            record.update(zip(fields, values))
            if match is not None and not match(record):
                skipped += 1
                continue
            self._records.append(record)
            loaded += 1
        logger.debug(f"Loaded {loaded} records, filtered out {skipped}")
        return loaded

    def index(
        self, field_name: str, match: Optional[RecordFilter] = None
    ) -> Dict[str, List[int]]:
        index: Dict[str, List[int]] = {}
        for key, record in enumerate(self._records):
            if match is not None and not match(record):
                continue
            index.setdefault(record[field_name], []).append(key)
        return index

    def save(self) -> None:
        raise WriteRejected("this record store is read only")
