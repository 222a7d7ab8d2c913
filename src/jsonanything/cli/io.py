# topmark:header:start
#
#   project      : JSON Anything
#   file         : io.py
#   file_relpath : src/jsonanything/cli/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Input/output helpers for the ``convert`` command.

This is the only place where JSON Anything performs I/O on user data: reading
the JSON document (from a path or STDIN) and writing the rendered text (to
STDOUT or a path). OS and decoding failures are translated into CLI errors
with sysexits-aligned exit codes.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import click

from jsonanything.cli.errors import (
    JsonAnythingFileNotFoundError,
    JsonAnythingInputError,
    JsonAnythingIOError,
)
from jsonanything.config.logging import get_logger
from jsonanything.constants import STDIN_PATH

logger = get_logger(__name__)


def read_input_text(source: str) -> str:
    """Read the raw input text from ``source`` (a path, or ``-`` for STDIN).

    Args:
        source (str): Input path, or ``-`` to read STDIN.

    Returns:
        str: The decoded text.

    Raises:
        JsonAnythingFileNotFoundError: If the path does not exist.
        JsonAnythingInputError: If the content is not valid UTF-8.
        JsonAnythingIOError: On any other OS error.
    """
    if source == STDIN_PATH:
        logger.debug("Reading JSON input from STDIN")
        try:
            return click.get_text_stream("stdin").read()
        except UnicodeDecodeError as e:
            raise JsonAnythingInputError(f"Input is not valid UTF-8: <stdin> ({e})") from e

    path = Path(source)
    logger.debug("Reading JSON input from %s", path)
    try:
        return path.read_text(encoding="utf-8")
    except FileNotFoundError as e:
        raise JsonAnythingFileNotFoundError(f"Input file not found: {source}") from e
    except UnicodeDecodeError as e:
        raise JsonAnythingInputError(f"Input is not valid UTF-8: {source} ({e})") from e
    except OSError as e:
        raise JsonAnythingIOError(f"Cannot read {source}: {e}") from e


def parse_json_document(text: str, source: str) -> Any:
    """Parse a JSON document.

    Args:
        text (str): The raw document.
        source (str): Human-readable origin used in messages.

    Returns:
        Any: The decoded value (typically a mapping or a list of mappings).

    Raises:
        JsonAnythingInputError: If ``text`` is not valid JSON.
    """
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        where = "<stdin>" if source == STDIN_PATH else source
        raise JsonAnythingInputError(
            f"Invalid JSON in {where} at line {e.lineno} column {e.colno}: {e.msg}"
        ) from e


def with_final_newline(text: str) -> str:
    """Return ``text`` ending with exactly one newline (empty text stays empty)."""
    if not text:
        return ""
    return text.rstrip("\n") + "\n"


def write_output_text(text: str, destination: Path) -> None:
    """Write the rendered text to ``destination`` (UTF-8).

    Raises:
        JsonAnythingIOError: If the file cannot be written.
    """
    logger.debug("Writing %d character(s) to %s", len(text), destination)
    try:
        destination.write_text(text, encoding="utf-8")
    except OSError as e:
        raise JsonAnythingIOError(f"Cannot write {destination}: {e}") from e
