# topmark:header:start
#
#   project      : JSON Anything
#   file         : console_api.py
#   file_relpath : src/jsonanything/cli/console_api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Console protocol shared by the JSON Anything commands.

Commands write converted documents and format listings through `print` and
failure messages through `error`; diagnostics go through `logging` instead.
"""

from __future__ import annotations

from typing import Protocol


class ConsoleLike(Protocol):
    """What a command needs to emit its results and its errors."""

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write converted output or a listing line."""
        ...

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a failure message, kept apart from converted output."""
        ...

    def styled(self, text: str, **style_kwargs: object) -> str:
        """Return ``text`` styled for the terminal (unchanged when color is off)."""
        ...
