# topmark:header:start
#
#   project      : JSON Anything
#   file         : escaping.py
#   file_relpath : src/jsonanything/core/escaping.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Target-specific escaping of embedded values.

Every helper takes an arbitrary JSON-like value, renders it with
[`to_text`][jsonanything.core.values.to_text] where needed, and returns text
that is safe inside the target's literal syntax.
"""

from __future__ import annotations

import html
from typing import Any, Final
from urllib.parse import quote

from jsonanything.core.values import to_text

# Characters `encodeURIComponent` leaves alone (besides ASCII alphanumerics):
URI_COMPONENT_SAFE: Final[str] = "-_.!~*'()"

_CSV_SPECIALS: Final[tuple[str, ...]] = (",", '"', "\n")


def escape_csv(value: Any) -> str:
    """Return a CSV cell: quoted (inner quotes doubled) if it holds ``,``, ``"`` or a newline.

    ``None`` renders as an empty cell.
    """
    if value is None:
        return ""
    text = to_text(value)
    if any(ch in text for ch in _CSV_SPECIALS):
        return '"' + text.replace('"', '""') + '"'
    return text


def sql_literal(value: Any) -> str:
    """Return a SQL literal.

    Strings are single-quoted with inner quotes doubled, ``None`` is an unquoted
    ``NULL``, and everything else (numbers, booleans) is embedded unquoted.
    """
    if value is None:
        return "NULL"
    if isinstance(value, str):
        return "'" + value.replace("'", "''") + "'"
    return to_text(value)


def shell_single_quote(value: Any) -> str:
    """Return a single-quoted shell literal; ``'`` becomes ``'"'"'``."""
    return "'" + to_text(value).replace("'", "'\"'\"'") + "'"


def url_encode_component(value: Any) -> str:
    """Percent-encode a value the way ``encodeURIComponent`` does (UTF-8).

    Lone surrogates (valid in strings decoded from JSON ``\\uD800`` escapes) are
    encoded as their raw UTF-8 bytes.
    """
    return quote(to_text(value).encode("utf-8", "surrogatepass"), safe=URI_COMPONENT_SAFE)


def escape_html(text: str) -> str:
    """Escape ``&``, ``<`` and ``>`` for HTML element content."""
    return html.escape(text, quote=False)


def php_string(text: str) -> str:
    """Return a single-quoted PHP string literal (``\\`` and ``'`` escaped)."""
    return "'" + text.replace("\\", "\\\\").replace("'", "\\'") + "'"
