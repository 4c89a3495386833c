# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""A single entrypoint into the mount table lookup commands.

This file is intentionally lightweight and should not include any complex logic.
"""

import click

from mnttab._version import __version__
from mnttab.cli import list_mounts, mount_device, mount_point
from mnttab.mounts.click import toml_config_option


@click.group(epilog=f"mnttab Version: {__version__}")
@toml_config_option("mnttab")
@click.version_option(__version__)
def main() -> None:
    """Find which mounted filesystem governs a directory or device."""


main.add_command(mount_point.main, name="mount-point")
main.add_command(mount_device.main, name="mount-device")
main.add_command(list_mounts.main, name="list")

if __name__ == "__main__":
    main()
