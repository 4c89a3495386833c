# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import json
import logging
from dataclasses import asdict
from typing import Optional

import click

from mnttab.mounts.config import MnttabConfig
from mnttab.mounts.errors import MnttabError
from mnttab.mounts.log import init_logger
from mnttab.mounts.resolver import MountTable

LOGGER_NAME = "mnttab"


def setup_logging(log_level: str, log_folder: str, stdout: bool) -> logging.Logger:
    logger, _ = init_logger(
        logger_name=LOGGER_NAME,
        log_dir=log_folder,
        log_name=LOGGER_NAME + ".log",
        log_stdout=stdout,
        log_level=getattr(logging, log_level),
    )
    return logger


def open_table(
    config: MnttabConfig, hint: Optional[str] = None, depth: Optional[int] = None
) -> MountTable:
    try:
        return MountTable(hint=hint, depth=depth, config=config)
    except (OSError, MnttabError) as e:
        raise click.ClickException(f"Could not load mount table: {e}") from e


def echo_result(table: MountTable) -> None:
    code, error = table.status()
    click.echo(
        json.dumps(
            {
                **asdict(table.result),
                "is_local": table.mount_is_local(),
                "status": code,
                "error": error,
            }
        )
    )
