# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import sys
from typing import Optional, Tuple

import click

from mnttab.cli.common import echo_result, open_table, setup_logging
from mnttab.mounts.click import (
    hint_options,
    LOG_LEVEL,
    logging_options,
    make_config,
    table_options,
)
from mnttab.mounts.errors import MnttabError
from typeguard import typechecked


@click.command()
@table_options
@hint_options
@logging_options
@click.argument("paths", nargs=-1, required=True)
@typechecked
def main(
    source: str,
    mnttab: Optional[str],
    follow_path: bool,
    probe: str,
    local_fs_types: Tuple[str, ...],
    hint: Optional[str],
    depth: Optional[int],
    log_level: LOG_LEVEL,
    log_folder: str,
    stdout: bool,
    paths: Tuple[str, ...],
) -> None:
    """Print the mount table entry governing each directory in PATHS as JSON."""
    logger = setup_logging(log_level, log_folder, stdout)
    config = make_config(source, mnttab, follow_path, probe, local_fs_types)
    table = open_table(config, hint=hint, depth=depth)

    failed = False
    for path in paths:
        logger.info(f"Looking up mount point of '{path}'")
        try:
            found = table.find_mount_point(path)
        except MnttabError as e:
            raise click.ClickException(str(e)) from e
        failed = failed or found is None
        echo_result(table)

    if failed:
        sys.exit(1)
