# topmark:header:start
#
#   project      : JSON Anything
#   file         : values.py
#   file_relpath : src/jsonanything/core/values.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""JavaScript-compatible rendering of JSON-like Python values.

Input records come from ``json.loads`` (or equivalent caller-built objects), so
every renderer must agree on how a Python value reads when embedded in text.
The conventions follow JavaScript's ``String(value)``:

- ``None`` -> ``"null"``
- ``True`` / ``False`` -> ``"true"`` / ``"false"``
- integral floats drop their fraction (``1.0`` -> ``"1"``); very large or small
  magnitudes use exponent form (``1e+21``, ``1e-7``)
- ``nan`` / ``inf`` -> ``"NaN"`` / ``"Infinity"`` / ``"-Infinity"``
- sequences join their items' text with ``","`` (``None`` items are empty)
- mappings -> ``"[object Object]"``
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from decimal import Decimal
from typing import Any, Final

OBJECT_TEXT: Final[str] = "[object Object]"
JS_EXPONENT_THRESHOLD: Final[float] = 1e21


def is_sequence(value: object) -> bool:
    """Return True for JSON arrays (``list`` / ``tuple``), never for strings."""
    return isinstance(value, (list, tuple))


def is_number(value: object) -> bool:
    """Return True for JSON numbers (``int`` / ``float``, excluding ``bool``)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_container(value: object) -> bool:
    """Return True for values a structure dump recurses into."""
    return isinstance(value, Mapping) or is_sequence(value)


def number_text(value: float) -> str:
    """Render a number the way JavaScript's ``String(number)`` does.

    Floats use their shortest round-trip digits. Magnitudes in ``[1e-6, 1e21)``
    are written in plain decimal notation, others in exponent form without
    zero padding (``1e+21``, ``1.5e-7``).
    """
    if isinstance(value, int):
        return str(value)
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign, digit_tuple, exponent = Decimal(repr(value)).normalize().as_tuple()
    digits = "".join(map(str, digit_tuple))
    k = len(digits)
    # Position of the decimal point relative to the first digit
    n = int(exponent) + k
    prefix = "-" if sign else ""
    if k <= n <= 21:
        return prefix + digits + "0" * (n - k)
    if 0 < n <= 21:
        return prefix + digits[:n] + "." + digits[n:]
    if -6 < n <= 0:
        return prefix + "0." + "0" * -n + digits
    e = n - 1
    mantissa = digits if k == 1 else digits[0] + "." + digits[1:]
    return f"{prefix}{mantissa}e{'+' if e >= 0 else '-'}{abs(e)}"


def to_text(value: Any) -> str:
    """Return the JavaScript ``String(value)`` rendering of a JSON-like value.

    Args:
        value (Any): Any JSON-like value.

    Returns:
        str: The textual rendering; never raises.
    """
    if value is None:
        return "null"
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if is_number(value):
        return number_text(value)
    if isinstance(value, Mapping):
        return OBJECT_TEXT
    if is_sequence(value):
        return ",".join("" if item is None else to_text(item) for item in value)
    return str(value)


def cell_text(value: Any) -> str:
    """Return the text of a table cell; ``None`` and missing values are empty."""
    return "" if value is None else to_text(value)


def to_json_compatible(value: Any) -> Any:
    """Normalize a JSON-like value into structures ``json.dumps`` renders like ``JSON.stringify``.

    Conversions:
      - Mapping -> dict with stringified keys (insertion order kept)
      - list/tuple -> list
      - integral float below 1e21 -> int, non-finite float -> None
      - anything else non-JSON -> its ``to_text`` rendering

    Args:
        value (Any): The value to normalize.

    Returns:
        Any: The JSON-serializable representation.
    """
    if value is None or isinstance(value, (str, bool, int)):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value) if value.is_integer() and abs(value) < JS_EXPONENT_THRESHOLD else value
    if isinstance(value, Mapping):
        return {str(k): to_json_compatible(v) for k, v in value.items()}
    if is_sequence(value):
        return [to_json_compatible(v) for v in value]
    return to_text(value)
