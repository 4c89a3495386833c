# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
from typing import Optional, Tuple

import click

from mnttab.cli.common import open_table, setup_logging
from mnttab.mounts.click import (
    hint_options,
    LOG_LEVEL,
    logging_options,
    make_config,
    table_options,
)
from typeguard import typechecked


@click.command()
@table_options
@hint_options
@logging_options
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
) -> None:
    """List the mount directories loaded from the mount table, one per line."""
    setup_logging(log_level, log_folder, stdout)
    config = make_config(source, mnttab, follow_path, probe, local_fs_types)
    for mount_dir in open_table(config, hint=hint, depth=depth).list_mount_points():
        click.echo(mount_dir)
