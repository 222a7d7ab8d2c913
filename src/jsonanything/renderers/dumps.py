# topmark:header:start
#
#   project      : JSON Anything
#   file         : dumps.py
#   file_relpath : src/jsonanything/renderers/dumps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pass-through renderers: recursive dumps of the whole structure.

These ignore the field-list shape entirely and walk arbitrary nesting:

- ``yaml``: naive YAML-like dump (strings unquoted, two-space indent).
- ``js``: pretty-printed JSON (``JSON.stringify(value, null, 2)``).
- ``php-array``: PHP short-array literal.

YAML layout: a nested block under a sequence item opens with a bare ``-`` (no
trailing space). ``None`` stays on its key's line as ``k: null``. Empty containers
are written inline (``k: []``). ``php-array`` emits PHP syntax, not JSON text.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, ClassVar

from jsonanything.core.escaping import php_string
from jsonanything.core.formats import FormatFamily, TargetFormat
from jsonanything.core.values import is_container, is_number, is_sequence, to_json_compatible, to_text
from jsonanything.renderers.base import FormatRenderer
from jsonanything.renderers.registry import register_format


class DumpRenderer(FormatRenderer):
    """Base class for the pass-through family."""

    family: ClassVar[FormatFamily] = FormatFamily.PASS_THROUGH
    indent: ClassVar[str] = "  "


@register_format(TargetFormat.YAML)
class YamlRenderer(DumpRenderer):
    """Naive YAML-like dump.

    Non-empty containers open a nested block one level deeper; empty ones are
    written inline as ``{}`` / ``[]``. Strings are written verbatim.
    """

    def render_value(self, value: Any, *, name: str, table: str) -> str:
        return self._dump(value, 0)

    def _dump(self, value: Any, level: int) -> str:
        pad = self.indent * level
        if isinstance(value, Mapping):
            if not value:
                return "{}"
            return "\n".join(self._entry(pad, str(k), v, level) for k, v in value.items())
        if is_sequence(value):
            if not value:
                return "[]"
            return "\n".join(self._item(pad, item, level) for item in value)
        return to_text(value)

    def _entry(self, pad: str, key: str, value: Any, level: int) -> str:
        if is_container(value) and value:
            return f"{pad}{key}:\n{self._dump(value, level + 1)}"
        return f"{pad}{key}: {self._dump(value, level + 1)}"

    def _item(self, pad: str, item: Any, level: int) -> str:
        if is_container(item) and item:
            return f"{pad}-\n{self._dump(item, level + 1)}"
        return f"{pad}- {self._dump(item, level + 1)}"


@register_format(TargetFormat.JS)
class JsonRenderer(DumpRenderer):
    """Pretty-printed JSON with two-space indentation (non-ASCII kept verbatim)."""

    def render_value(self, value: Any, *, name: str, table: str) -> str:
        return json.dumps(to_json_compatible(value), indent=len(self.indent), ensure_ascii=False)


@register_format(TargetFormat.PHP_ARRAY)
class PhpArrayRenderer(DumpRenderer):
    """PHP short-array literal; every element line carries a trailing comma."""

    def render_value(self, value: Any, *, name: str, table: str) -> str:
        return self._dump(to_json_compatible(value), 0)

    def _dump(self, value: Any, level: int) -> str:
        if value is None:
            return "null"
        if isinstance(value, bool):
            return "true" if value else "false"
        if is_number(value):
            return to_text(value)
        if isinstance(value, str):
            return php_string(value)
        if isinstance(value, Mapping):
            elements = [f"{php_string(str(k))} => {self._dump(v, level + 1)}" for k, v in value.items()]
        else:
            elements = [self._dump(v, level + 1) for v in value]
        if not elements:
            return "[]"
        inner = self.indent * (level + 1)
        lines = "".join(f"{inner}{element},\n" for element in elements)
        return f"[\n{lines}{self.indent * level}]"
