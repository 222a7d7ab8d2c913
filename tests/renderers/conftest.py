# topmark:header:start
#
#   project      : JSON Anything
#   file         : conftest.py
#   file_relpath : tests/renderers/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Shared helpers for renderer tests."""

from __future__ import annotations

from typing import Any

from jsonanything.core.formats import TargetFormat
from jsonanything.renderers import get_renderer


def render(
    target: TargetFormat,
    value: Any,
    *,
    name: str | None = None,
    table: str | None = None,
) -> str:
    """Render ``value`` with the renderer registered for ``target``.

    Args:
        target (TargetFormat): The target format.
        value (Any): The record set to render.
        name (str | None): Optional class/struct/interface name.
        table (str | None): Optional SQL table name.

    Returns:
        str: The rendered text.
    """
    renderer = get_renderer(target)
    assert renderer is not None, f"no renderer for {target.key}"
    return renderer.render(value, name=name, table=table)
