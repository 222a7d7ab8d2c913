# topmark:header:start
#
#   project      : JSON Anything
#   file         : main.py
#   file_relpath : src/jsonanything/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the JSON Anything CLI.

Group-level options (verbosity, color) are initialized once and placed into
``ctx.obj``; subcommands read the shared console and verbosity from there.
Internal logging is configured from the ``JSONANYTHING_LOG_LEVEL`` environment
variable and is kept separate from program output.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from jsonanything.cli.commands.convert import convert_command
from jsonanything.cli.commands.formats import formats_command
from jsonanything.cli.commands.version import version_command
from jsonanything.cli.console import ClickConsole
from jsonanything.cli.options import (
    ColorMode,
    common_color_options,
    common_verbose_options,
    resolve_color_mode,
    resolve_verbosity,
)
from jsonanything.config.logging import get_logger, resolve_env_log_level, setup_logging
from jsonanything.renderers import register_all_renderers

if TYPE_CHECKING:
    from jsonanything.cli.console_api import ConsoleLike

logger = get_logger(__name__)

register_all_renderers()


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
) -> None:
    """Initialize shared state (verbosity & color) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
    """
    ctx.obj = ctx.obj or {}

    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    ctx.obj["log_level"] = level_env
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(cli_mode=effective_color_mode)
    ctx.obj["color_enabled"] = enable_color
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="JSON Anything CLI: convert JSON records into CSV, SQL, struct definitions and more.",
)
@common_verbose_options
@common_color_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: str | None,
    no_color: bool,
) -> None:
    """Entry point for the JSON Anything CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=ColorMode(color_mode) if color_mode else None,
        no_color=no_color,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'jsonanything convert INPUT --to FORMAT' to convert a document.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(convert_command)

cli.add_command(formats_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
