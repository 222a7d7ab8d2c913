# topmark:header:start
#
#   project      : JSON Anything
#   file         : convert.py
#   file_relpath : src/jsonanything/cli/commands/convert.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON Anything `convert` command.

Reads a JSON document (a record or an array of records) from a path or STDIN,
converts it to the requested target format and writes the result to STDOUT or
to ``--output``.

Precedence for format, name and table: CLI options > explicit ``--config``
files > ``jsonanything.toml`` > ``[tool.jsonanything]`` in ``pyproject.toml`` >
runtime defaults.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from jsonanything import api
from jsonanything.cli.cli_types import EnumChoiceParam
from jsonanything.cli.errors import JsonAnythingConfigError
from jsonanything.cli.io import (
    parse_json_document,
    read_input_text,
    with_final_newline,
    write_output_text,
)
from jsonanything.config.io import resolve_config
from jsonanything.config.logging import get_logger
from jsonanything.config.model import ConfigError
from jsonanything.constants import STDIN_PATH
from jsonanything.core.formats import TargetFormat

if TYPE_CHECKING:
    from jsonanything.cli.console_api import ConsoleLike
    from jsonanything.config.model import Config

logger = get_logger(__name__)


@click.command(
    name="convert",
    help="Convert a JSON document (record or array of records) into a target format.",
)
@click.argument("source", metavar="[INPUT]", default=STDIN_PATH, required=False)
@click.option(
    "--to",
    "-t",
    "target",
    type=EnumChoiceParam(TargetFormat),
    default=None,
    help="Target format (key or alias, see 'jsonanything formats'). Default: js.",
)
@click.option("--name", "name", default=None, help="Class/struct/interface name.")
@click.option("--table", "table", default=None, help="SQL table name for INSERT targets.")
@click.option(
    "--output",
    "-o",
    "output",
    type=click.Path(dir_okay=False, writable=True, path_type=Path),
    default=None,
    help="Write to this file instead of STDOUT.",
)
@click.option(
    "--config",
    "config_files",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    multiple=True,
    help="Additional TOML configuration file(s), applied after discovered ones.",
)
@click.option(
    "--no-config",
    is_flag=True,
    default=False,
    help="Ignore pyproject.toml / jsonanything.toml in the working directory.",
)
def convert_command(
    *,
    source: str,
    target: TargetFormat | None,
    name: str | None,
    table: str | None,
    output: Path | None,
    config_files: tuple[Path, ...],
    no_config: bool,
) -> None:
    """Convert a JSON document into a target format.

    Args:
        source (str): Input path, or ``-`` for STDIN.
        target (TargetFormat | None): Target format override.
        name (str | None): Class/struct/interface name override.
        table (str | None): SQL table name override.
        output (Path | None): Output path; STDOUT when ``None``.
        config_files (tuple[Path, ...]): Explicit configuration files.
        no_config (bool): Skip configuration discovery.

    Raises:
        JsonAnythingConfigError: If a configuration source holds an invalid value.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]

    try:
        config: Config = resolve_config(
            Path.cwd(), extra_files=list(config_files), no_config=no_config
        )
    except ConfigError as e:
        raise JsonAnythingConfigError(str(e)) from e
    config = config.with_overrides(target=target, name=name, table=table)

    value = parse_json_document(read_input_text(source), source)
    text = with_final_newline(
        api.convert(value, config.target, name=config.name, table=config.table)
    )

    if output is None:
        console.print(text, nl=False)
        return

    write_output_text(text, output)
    if ctx.obj.get("verbosity_level", 0) > 0:
        console.print(console.styled(f"Wrote {config.target.key} output to {output}", dim=True))
