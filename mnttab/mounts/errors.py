# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Errors raised while loading or searching a mount table.

Every error carries an integer `code` which is what `MountTable.status` reports.
Lookups record non-fatal errors on the table and return None. Errors with
`fatal` set mean the process working directory can no longer be trusted and are
always raised to the caller.
"""
from typing import ClassVar


class MnttabError(Exception):
    code: ClassVar[int] = -1

    def __init__(self, message: str, *, fatal: bool = False) -> None:
        super().__init__(message)
        self.message = message
        self.fatal = fatal


class WriteRejected(MnttabError):
    code = -1


class InvalidPath(MnttabError):
    code = -2


class SymlinkRejected(InvalidPath):
    pass


class RelativePathRejected(InvalidPath):
    pass


class NoMatch(MnttabError):
    code = -3


class AmbiguousMatch(MnttabError):
    code = -4


class DirectoryChangeFailed(MnttabError):
    code = -5


class UnsupportedSource(MnttabError):
    code = -6


class MalformedLine(MnttabError):
    code = -7
