# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
import sys
from typing import Optional, Tuple

import click

from mnttab.cli.common import echo_result, open_table, setup_logging
from mnttab.mounts.click import LOG_LEVEL, logging_options, make_config, table_options
from typeguard import typechecked


@click.command()
@table_options
@logging_options
@click.argument("devices", nargs=-1, required=True)
@typechecked
def main(
    source: str,
    mnttab: Optional[str],
    follow_path: bool,
    probe: str,
    local_fs_types: Tuple[str, ...],
    log_level: LOG_LEVEL,
    log_folder: str,
    stdout: bool,
    devices: Tuple[str, ...],
) -> None:
    """Print the mount table entry of each device special file in DEVICES as JSON."""
    logger = setup_logging(log_level, log_folder, stdout)
    config = make_config(source, mnttab, follow_path, probe, local_fs_types)
    table = open_table(config)

    failed = False
    for device in devices:
        logger.info(f"Looking up mount point of device '{device}'")
        failed = table.find_mount_device(device) is None or failed
        echo_result(table)

    if failed:
        sys.exit(1)
