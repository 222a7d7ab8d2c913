# topmark:header:start
#
#   project      : JSON Anything
#   file         : tabular.py
#   file_relpath : src/jsonanything/renderers/tabular.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tabular renderers: CSV, HTML table and Markdown table.

All three union the keys across every record (first-seen order), emit one
header and one row per record, and render missing fields as empty cells. They
only differ in cell escaping and in how header and rows are framed.
"""

from __future__ import annotations

from abc import abstractmethod
from typing import Any, ClassVar

from jsonanything.core.escaping import escape_csv, escape_html
from jsonanything.core.formats import FormatFamily, TargetFormat
from jsonanything.core.records import key_union, normalize, record_get
from jsonanything.core.values import cell_text
from jsonanything.renderers.base import FormatRenderer
from jsonanything.renderers.registry import register_format


class TabularRenderer(FormatRenderer):
    """Base class for the tabular family.

    Subclasses implement `format_cell` and `render_table`.
    """

    family: ClassVar[FormatFamily] = FormatFamily.TABULAR

    def render_value(self, value: Any, *, name: str, table: str) -> str:
        records = normalize(value)
        keys = key_union(records)
        rows = [[self.format_cell(record_get(record, key)) for key in keys] for record in records]
        return self.render_table([str(key) for key in keys], rows)

    @abstractmethod
    def format_cell(self, value: Any) -> str:
        """Return the escaped text of one cell (``None`` means missing)."""
        ...

    @abstractmethod
    def render_table(self, keys: list[str], rows: list[list[str]]) -> str:
        """Frame the header ``keys`` and the already-escaped ``rows``."""
        ...


@register_format(TargetFormat.CSV)
class CsvRenderer(TabularRenderer):
    """Comma-separated values; quoting as per [`escape_csv`][jsonanything.core.escaping.escape_csv]."""

    def format_cell(self, value: Any) -> str:
        return escape_csv(value)

    def render_table(self, keys: list[str], rows: list[list[str]]) -> str:
        if not rows or not keys:
            return ""
        lines = [",".join(keys)]
        lines.extend(",".join(row) for row in rows)
        return "\n".join(lines)


@register_format(TargetFormat.HTML)
@register_format(TargetFormat.HTML_TABLE)
class HtmlTableRenderer(TabularRenderer):
    """Single-line HTML table with a ``jtab`` class.

    An empty record set still yields the (empty) table shell.
    """

    table_class: ClassVar[str] = "jtab"

    def format_cell(self, value: Any) -> str:
        return escape_html(cell_text(value))

    def render_table(self, keys: list[str], rows: list[list[str]]) -> str:
        head = "".join(f"<th>{escape_html(key)}</th>" for key in keys)
        body = "".join("<tr>" + "".join(f"<td>{cell}</td>" for cell in row) + "</tr>" for row in rows)
        return (
            f'<table class="{self.table_class}"><thead><tr>{head}</tr></thead>'
            f"<tbody>{body}</tbody></table>"
        )


@register_format(TargetFormat.MARKDOWN_TABLE)
class MarkdownTableRenderer(TabularRenderer):
    """GitHub-flavored Markdown table."""

    separator: ClassVar[str] = "---"

    def format_cell(self, value: Any) -> str:
        return cell_text(value)

    def render_table(self, keys: list[str], rows: list[list[str]]) -> str:
        if not rows or not keys:
            return ""
        lines = [
            self._row(keys),
            self._row([self.separator] * len(keys)),
        ]
        lines.extend(self._row(row) for row in rows)
        return "\n".join(lines)

    @staticmethod
    def _row(cells: list[str]) -> str:
        return "| " + " | ".join(cells) + " |"
