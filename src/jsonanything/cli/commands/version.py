# topmark:header:start
#
#   project      : JSON Anything
#   file         : version.py
#   file_relpath : src/jsonanything/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON Anything `version` command.

Prints the current version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from jsonanything.cli.options import output_format_option
from jsonanything.constants import JSONANYTHING_VERSION
from jsonanything.core.formats import OutputFormat

if TYPE_CHECKING:
    from jsonanything.cli.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of JSON Anything.",
)
@output_format_option
def version_command(*, output_format: OutputFormat | None = None) -> None:
    """Show the current version of JSON Anything.

    Args:
        output_format (OutputFormat | None): Optional output format (text, markdown or json).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    fmt: OutputFormat = output_format or OutputFormat.TEXT
    if fmt == OutputFormat.JSON:
        console.print(json.dumps({"version": JSONANYTHING_VERSION}))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# JSON Anything Version\n")
        console.print(f"**JSON Anything version: {JSONANYTHING_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("JSON Anything version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(JSONANYTHING_VERSION, bold=True)}")
    else:
        console.print(console.styled(JSONANYTHING_VERSION, bold=True))
