# topmark:header:start
#
#   project      : JavaStamp
#   file         : main.py
#   file_relpath : src/javastamp/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

r"""Command-line entry point: ``javastamp [OPTIONS] PATH``.

One invocation processes exactly one file; enumerating files is left to the
caller, e.g.::

    find src -name '*.java' -exec javastamp {} \;

Configuration layers are merged as defaults → config file → CLI options.
Pipeline failures are translated into `javastamp.cli.errors` exceptions whose
exit codes are listed in `javastamp.cli.exit_codes.ExitCode`.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from javastamp.cli.console import ClickConsole
from javastamp.cli.errors import to_cli_error
from javastamp.cli.exit_codes import ExitCode
from javastamp.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from javastamp.config.logging import get_logger, resolve_env_log_level, setup_logging
from javastamp.config.model import MutableConfig
from javastamp.constants import JAVASTAMP_VERSION
from javastamp.errors import StampError
from javastamp.licenses import BUILTIN_NOTICES
from javastamp.pipeline.runner import process_file
from javastamp.utils.diff import render_patch, unified_diff

if TYPE_CHECKING:
    from javastamp.config.logging import StampLogger
    from javastamp.config.model import Config
    from javastamp.pipeline.context import ProcessingContext

logger: StampLogger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> ClickConsole:
    """Initialize verbosity, logging and color state on the Click context.

    Returns:
        ClickConsole: The console stored in ``ctx.obj["console"]``.
    """
    ctx.obj = ctx.obj or {}
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Internal logging is configured from the environment only
    level_env: int | None = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    enable_color: bool | None = resolve_color_mode(color_mode, no_color=no_color)
    ctx.color = enable_color
    console = ClickConsole(enable_color=enable_color)
    ctx.obj["console"] = console
    return console


def report(console: ClickConsole, result: ProcessingContext, *, verbosity: int) -> None:
    """Print the per-file outcome according to ``verbosity``."""
    if verbosity < 1:
        return
    status = result.status
    console.print(
        f"{result.path}: {status.version.styled()}, {status.license.styled()}, "
        f"{status.write.styled()}"
    )
    if verbosity >= 2 and result.config.config_files:
        sources = ", ".join(str(p) for p in result.config.config_files)
        console.print(f"  config: {sources}")


@click.command(
    name="javastamp",
    context_settings={"help_option_names": ["-h", "--help"]},
    help=(
        "Ensure the Java source file PATH carries the license block and an "
        "up-to-date @version tag in the comment preceding its class or interface "
        "declaration. The file is rewritten in place."
    ),
)
@click.argument("path", type=click.Path(path_type=Path))
@click.option(
    "--version-tag",
    metavar="VERSION",
    default=None,
    help="Value written into the @version tag (default: 1.4).",
)
@click.option(
    "--license",
    "license_key",
    type=click.Choice(sorted(BUILTIN_NOTICES), case_sensitive=False),
    default=None,
    help="Built-in license notice to ensure (default: lgpl).",
)
@click.option(
    "--license-file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Read the license block from this file instead (needs --license-marker).",
)
@click.option(
    "--license-marker",
    metavar="PHRASE",
    default=None,
    help="Literal phrase identifying the custom license block.",
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(path_type=Path, dir_okay=False),
    default=None,
    help="Read settings from this TOML file (javastamp.toml or pyproject.toml).",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Do not look for javastamp.toml / pyproject.toml in the current directory.",
)
@click.option("--encoding", default=None, help="Text encoding of the file (default: utf-8).")
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Do not write; exit with 2 if the file would change.",
)
@click.option("--diff", "show_diff", is_flag=True, default=False, help="Show a unified diff.")
@common_verbose_options
@common_color_options
@click.version_option(JAVASTAMP_VERSION, "--version", prog_name="javastamp")
@click.pass_context
def cli(
    ctx: click.Context,
    path: Path,
    version_tag: str | None,
    license_key: str | None,
    license_file: Path | None,
    license_marker: str | None,
    config_file: Path | None,
    no_config: bool,
    encoding: str | None,
    check: bool,
    show_diff: bool,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Entry point for the JavaStamp CLI."""
    console: ClickConsole = init_common_state(
        ctx, verbose=verbose, quiet=quiet, color_mode=color_mode, no_color=no_color
    )
    verbosity: int = ctx.obj["verbosity_level"]

    try:
        draft: MutableConfig = MutableConfig.load_merged(
            config_file=config_file, no_config=no_config
        )
        draft.apply_overrides(
            version=version_tag,
            license_key=license_key,
            license_file=license_file,
            license_marker=license_marker,
            encoding=encoding,
            apply_changes=False if check else None,
        )
        config: Config = draft.freeze()
        result: ProcessingContext = process_file(path, config)
    except StampError as e:
        logger.debug("Processing %s failed: %r", path, e)
        raise to_cli_error(e) from e

    if show_diff and verbosity >= 0 and result.updated is not None:
        patch: list[str] = unified_diff(result.lines, result.updated, name=str(path))
        if patch:
            console.print(render_patch(patch))

    report(console, result, verbosity=verbosity)

    if check and result.would_change:
        if verbosity == 0:
            console.print(f"{path}: would change")
        ctx.exit(ExitCode.WOULD_CHANGE)


if __name__ == "__main__":
    cli()
