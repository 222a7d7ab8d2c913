# topmark:header:start
#
#   project      : JSON Anything
#   file         : console.py
#   file_relpath : src/jsonanything/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed console for the ``jsonanything`` commands.

Converted documents go to the output stream untouched, so they can be piped
into files or other tools. Error messages go to the error stream in bright
red when color is enabled.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from jsonanything.cli.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Console writing through `click.echo`.

    Args:
        enable_color (bool): Emit ANSI styling; plain text when False.
        out (TextIO | None): Stream for converted output (default: `sys.stdout`).
        err (TextIO | None): Stream for error messages (default: `sys.stderr`).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color = enable_color
        self.out: TextIO = out or sys.stdout
        self.err: TextIO = err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def error(self, text: str, *, nl: bool = True) -> None:
        click.echo(self.styled(text, fg="bright_red"), nl=nl, file=self.err, color=self.enable_color)

    def styled(self, text: str, **style_kwargs: Any) -> str:
        if not self.enable_color:
            return text
        return click.style(text, **style_kwargs)
