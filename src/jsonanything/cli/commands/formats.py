# topmark:header:start
#
#   project      : JSON Anything
#   file         : formats.py
#   file_relpath : src/jsonanything/cli/commands/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JSON Anything `formats` command.

Lists the registered target formats with their family and label, as aligned
text, a Markdown table, or a JSON document.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from jsonanything import api
from jsonanything.cli.options import output_format_option
from jsonanything.constants import JSONANYTHING_VERSION
from jsonanything.core.formats import OutputFormat
from jsonanything.renderers import get_renderer

if TYPE_CHECKING:
    from jsonanything.cli.console_api import ConsoleLike
    from jsonanything.core.formats import TargetFormat


def _family_of(target: TargetFormat) -> str:
    renderer = get_renderer(target)
    return renderer.family.value if renderer is not None else ""


@click.command(
    name="formats",
    help="List the available target formats.",
)
@output_format_option
def formats_command(*, output_format: OutputFormat | None = None) -> None:
    """List the available target formats.

    Args:
        output_format (OutputFormat | None): Presentation format (text by default).
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ConsoleLike = ctx.obj["console"]
    vlevel: int = ctx.obj.get("verbosity_level", 0)

    targets = api.list_formats()
    fmt: OutputFormat = output_format or OutputFormat.TEXT

    if fmt == OutputFormat.JSON:
        payload = {
            "meta": {"tool": "jsonanything", "version": JSONANYTHING_VERSION},
            "formats": [
                {
                    "key": t.key,
                    "family": _family_of(t),
                    "label": t.label,
                    "aliases": list(t.aliases),
                }
                for t in targets
            ],
        }
        console.print(json.dumps(payload, indent=2))
    elif fmt == OutputFormat.MARKDOWN:
        console.print("# Target formats\n")
        console.print("| Key | Family | Description | Aliases |")
        console.print("| --- | --- | --- | --- |")
        for t in targets:
            aliases = ", ".join(f"`{a}`" for a in t.aliases)
            console.print(f"| `{t.key}` | {_family_of(t)} | {t.label} | {aliases} |")
    else:
        if vlevel > 0:
            console.print(console.styled("Target formats:\n", bold=True, underline=True))
        width = max(len(t.key) for t in targets)
        for t in targets:
            line = f"{console.styled(t.key.ljust(width), bold=True)}  {t.label}"
            if vlevel > 0:
                line += f"  [{_family_of(t)}]"
                if t.aliases:
                    line += f"  (aliases: {', '.join(t.aliases)})"
            console.print(line)
