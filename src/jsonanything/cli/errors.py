# topmark:header:start
#
#   project      : JSON Anything
#   file         : errors.py
#   file_relpath : src/jsonanything/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the JSON Anything CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. The converters themselves never raise.

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from jsonanything.cli.exit_codes import ExitCode


class JsonAnythingError(click.ClickException):
    """Base class for all JSON Anything CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available.

        Falls back to Click's default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        console = None
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
        if console is None:
            super().show(file)
            return
        console.error(f"Error: {self.format_message()}")


class JsonAnythingUsageError(JsonAnythingError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


class JsonAnythingInputError(JsonAnythingError):
    """Error for input that is not a valid (UTF-8) JSON document."""

    exit_code = ExitCode.INPUT_ERROR


class JsonAnythingFileNotFoundError(JsonAnythingError):
    """Error when the input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class JsonAnythingIOError(JsonAnythingError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class JsonAnythingConfigError(JsonAnythingError):
    """Error for configuration errors (invalid/malformed config values)."""

    exit_code = ExitCode.CONFIG_ERROR
