# topmark:header:start
#
#   project      : JSON Anything
#   file         : keys.py
#   file_relpath : src/jsonanything/config/keys.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Canonical TOML section and key names used in JSON Anything configuration.

Keep this module behavior-free; it is a pure namespace for constants so it can
be imported from anywhere without causing cycles.
"""

from __future__ import annotations

from typing import Final


class Toml:
    """TOML section and key names.

    Layout (``jsonanything.toml``)::

        [convert]
        format = "csv"
        name = "Person"
        table = "people"

    In ``pyproject.toml`` the same table lives under ``[tool.jsonanything.convert]``.
    """

    SECTION_CONVERT: Final[str] = "convert"

    KEY_FORMAT: Final[str] = "format"
    KEY_NAME: Final[str] = "name"
    KEY_TABLE: Final[str] = "table"
