# Copyright (c) Meta Platforms, Inc. and affiliates.
# All rights reserved.
"""Helper functionality for click commands"""
import logging
from functools import wraps
from pathlib import Path
from typing import Any, Callable, get_args, Literal, Optional, TypeVar, Union

import click

import tomli
from mnttab.mounts.coerce import ensure_dict
from mnttab.mounts.config import MnttabConfig
from mnttab.mounts.realpath import PROBE
from mnttab.mounts.sources import registry
from typeguard import typechecked
from typing_extensions import ParamSpec

logger = logging.getLogger(__name__)

LOG_LEVEL = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_CONFIG_PATH = "/etc/mnttab/config.toml"

P = ParamSpec("P")
R = TypeVar("R")

_Tv = TypeVar("_Tv")
_ClickCallback = Callable[[click.Context, click.Parameter, _Tv], None]


def _set_default_map(name: str) -> _ClickCallback[Path]:
    @typechecked
    def cb(ctx: click.Context, param: click.Parameter, path: Path) -> None:
        if not path.exists() or path == Path("/dev/null"):
            return

        logger.info(f"Reading config from {path}...")
        with path.open("rb") as f:
            try:
                conf = tomli.load(f)
            except tomli.TOMLDecodeError as e:
                raise click.BadParameter(
                    f"{path} does not contain valid TOML.",
                    ctx=ctx,
                    param=param,
                ) from e
        try:
            default_map = ensure_dict(conf[name])
        except KeyError as e:
            raise click.BadParameter(
                f"'{name}' is not a top-level table name in {path}. Valid names: {list(conf.keys())}",
                ctx=ctx,
                param=param,
            ) from e
        logger.info(f"Loaded table '{name}'.")

        ctx.default_map = {**(ctx.default_map or {}), **default_map}

    return cb


def toml_config_option(
    name: str,
    *,
    default_config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
) -> Callable[[Callable[P, R]], Callable[P, R]]:
    """Shared decorator for loading default option values from a TOML config file.
    Adds a `--config` option to the given command which takes a path. A non-existent
    path or `/dev/null` is treated as an empty dictionary.

    Precedence (lowest to highest):
    * `default` argument to `click.option`
    * the context's `default_map` setting
    * the value in the config file
    * value passed at the command line

    If used on a command group, subtables will configure subcommands, recursively.

    Parameters:
        name: The top-level table name in the config file containing the default values
            to use.
        default_config_path: The path from which to load the config if the option is
            omitted at the command line.
    """

    def decorator(f: Callable[P, R]) -> Callable[P, R]:
        return click.option(
            "--config",
            type=click.Path(dir_okay=False, path_type=Path),
            callback=_set_default_map(name),
            default=default_config_path,
            show_default=True,
            expose_value=False,
            is_eager=True,
            help=(
                f"Load option values from table '{name}' in the given TOML config file. "
                "A non-existent path or '/dev/null' are ignored and treated as empty tables."
            ),
        )(f)

    return decorator


def logging_options(f: Callable[P, R]) -> Callable[P, R]:
    @click.option(
        "--log-level",
        type=click.Choice(get_args(LOG_LEVEL)),
        default="WARNING",
        show_default=True,
        help="Logging verbosity level.",
    )
    @click.option(
        "--log-folder",
        type=click.Path(file_okay=False),
        default="mnttab_logs",
        help="The folder where logs will be stored.",
    )
    @click.option(
        "--stdout",
        is_flag=True,
        default=False,
        help="Whether to display logs to stdout.",
    )
    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        return f(*args, **kwargs)

    return wrapper


def table_options(f: Callable[P, R]) -> Callable[P, R]:
    @click.option(
        "--source",
        type=click.Choice(sorted(registry)),
        default="mnttab",
        show_default=True,
        help="Format of the mount table to read.",
    )
    @click.option(
        "--mnttab",
        type=click.Path(dir_okay=False, exists=True),
        default=None,
        help="Mount table file to read instead of the default file of the source.",
    )
    @click.option(
        "--follow/--no-follow",
        "follow_path",
        default=False,
        show_default=True,
        help=(
            "Resolve symlinks and relative paths to their real location. The whole "
            "mount table is loaded and --hint/--depth are ignored."
        ),
    )
    @click.option(
        "--probe",
        type=click.Choice(get_args(PROBE)),
        default="realpath",
        show_default=True,
        help="How real locations are resolved with --follow.",
    )
    @click.option(
        "--local-fs-type",
        "local_fs_types",
        multiple=True,
        help="Filesystem type considered local. May be repeated. Defaults to a built-in list.",
    )
    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        return f(*args, **kwargs)

    return wrapper


def hint_options(f: Callable[P, R]) -> Callable[P, R]:
    @click.option(
        "--hint",
        default=None,
        help="Only load mount table entries under the first directory of this path (and '/').",
    )
    @click.option(
        "--depth",
        type=click.IntRange(min=0),
        default=None,
        help="Number of leading directories of --hint to match on.",
    )
    @wraps(f)
    def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
        return f(*args, **kwargs)

    return wrapper


def make_config(
    source: str,
    mnttab: Optional[str],
    follow_path: bool,
    probe: str,
    local_fs_types: tuple[str, ...],
) -> MnttabConfig:
    kwargs: dict[str, Any] = {
        "source": source,
        "mnttab": mnttab,
        "follow_path": follow_path,
        "probe": probe,
    }
    if local_fs_types:
        kwargs["local_fs_types"] = local_fs_types
    return MnttabConfig(**kwargs)
