# topmark:header:start
#
#   project      : JSON Anything
#   file         : test_tabular.py
#   file_relpath : tests/renderers/test_tabular.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for the CSV, HTML table and Markdown table renderers."""

from __future__ import annotations

from jsonanything.core.formats import TargetFormat
from tests.conftest import PEOPLE
from tests.renderers.conftest import render


def test_csv_unions_keys_and_quotes_cells() -> None:
    """Header is the key union; missing and null cells are empty."""
    assert render(TargetFormat.CSV, PEOPLE) == (
        "id,name,admin,tags,manager,email\n"
        '1,Ada,true,"math,code",,\n'
        "2,O'Brien,,,,ob@example.com"
    )


def test_csv_single_record() -> None:
    """A single mapping renders as a one-row table."""
    assert render(TargetFormat.CSV, {"a": 1, "b": 'say "hi"'}) == 'a,b\n1,"say ""hi"""'


def test_csv_empty_inputs() -> None:
    """No records or no keys produce no output at all."""
    assert render(TargetFormat.CSV, []) == ""
    assert render(TargetFormat.CSV, None) == ""
    assert render(TargetFormat.CSV, [{}, {}]) == ""


def test_csv_non_mapping_records_are_blank_rows() -> None:
    """Items that are not records contribute no keys and empty cells."""
    assert render(TargetFormat.CSV, [{"a": 1}, "junk", {"a": 2}]) == "a\n1\n\n2"


def test_html_table_escapes_content() -> None:
    """Cells and headers are HTML-escaped; nulls are empty cells."""
    assert render(TargetFormat.HTML_TABLE, [{"a": "<b>", "b": None}]) == (
        '<table class="jtab"><thead><tr><th>a</th><th>b</th></tr></thead>'
        "<tbody><tr><td>&lt;b&gt;</td><td></td></tr></tbody></table>"
    )


def test_html_table_multiple_rows() -> None:
    """Rows are emitted in record order on a single line."""
    assert render(TargetFormat.HTML, [{"x": 1}, {"y": True}]) == (
        '<table class="jtab"><thead><tr><th>x</th><th>y</th></tr></thead>'
        "<tbody><tr><td>1</td><td></td></tr><tr><td></td><td>true</td></tr></tbody></table>"
    )


def test_html_and_html_table_agree() -> None:
    """``html`` is an alias of ``html-table``."""
    assert render(TargetFormat.HTML, PEOPLE) == render(TargetFormat.HTML_TABLE, PEOPLE)


def test_html_table_empty_shell() -> None:
    """An empty record set still yields the table skeleton."""
    assert render(TargetFormat.HTML_TABLE, []) == (
        '<table class="jtab"><thead><tr></tr></thead><tbody></tbody></table>'
    )


def test_markdown_table() -> None:
    """Header, separator and one row per record."""
    assert render(TargetFormat.MARKDOWN_TABLE, PEOPLE) == (
        "| id | name | admin | tags | manager | email |\n"
        "| --- | --- | --- | --- | --- | --- |\n"
        "| 1 | Ada | true | math,code |  |  |\n"
        "| 2 | O'Brien |  |  |  | ob@example.com |"
    )


def test_markdown_table_empty() -> None:
    """No keys means no table."""
    assert render(TargetFormat.MARKDOWN_TABLE, []) == ""
    assert render(TargetFormat.MARKDOWN_TABLE, {}) == ""
