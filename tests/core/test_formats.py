# topmark:header:start
#
#   project      : JSON Anything
#   file         : test_formats.py
#   file_relpath : tests/core/test_formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for the target format vocabulary and `KeyedStrEnum` parsing."""

from __future__ import annotations

from jsonanything.core.enum_mixins import KeyedStrEnum
from jsonanything.core.formats import OutputFormat, TargetFormat
from tests.conftest import parametrize


def test_all_targets_declared() -> None:
    """Every supported notation has exactly one target (HTML has two keys)."""
    assert len(TargetFormat) == 26
    assert len({t.key for t in TargetFormat}) == 26


def test_every_token_parses_to_its_own_member() -> None:
    """Keys, member names and aliases never collide across members."""
    for target in TargetFormat:
        for token in (target.key, target.name, *target.aliases):
            assert TargetFormat.parse(token) is target, token


@parametrize(
    "raw, expected",
    [
        ("ts", TargetFormat.TYPESCRIPT),
        ("TypeScript", TargetFormat.TYPESCRIPT),
        ("python_dataclass", TargetFormat.PYTHON_DATACLASS),
        ("  Go-Struct ", TargetFormat.GO_STRUCT),
        ("c#", TargetFormat.CSHARP),
        ("json", TargetFormat.JS),
        ("pg", TargetFormat.POSTGRES_INSERT),
    ],
)
def test_parse_is_lenient(raw: str, expected: TargetFormat) -> None:
    """Parsing ignores case, surrounding blanks and ``-``/``_`` differences."""
    assert TargetFormat.parse(raw) is expected


def test_parse_unknown_returns_none() -> None:
    """Unknown tokens and ``None`` parse to ``None``."""
    assert TargetFormat.parse("excel") is None
    assert TargetFormat.parse(None) is None


def test_str_and_key_are_the_value() -> None:
    """Members stringify to their stable key."""
    assert str(TargetFormat.SQL_INSERT) == "sql-insert"
    assert TargetFormat.SQL_INSERT.key == "sql-insert"
    assert TargetFormat.SQL_INSERT == "sql-insert"
    assert TargetFormat.SQL_INSERT.label == "SQL INSERT statements"


def test_keyed_str_enum_subclass() -> None:
    """`KeyedStrEnum` works for any enum declared with key/label/aliases."""

    class Mode(KeyedStrEnum):
        A = ("alpha", "First mode", ("a",))
        B = ("beta", "Second mode")

    assert Mode.parse("A") is Mode.A
    assert Mode.parse("alpha") is Mode.A
    assert Mode.B.aliases == ()
    assert Mode.B.label == "Second mode"


def test_output_formats() -> None:
    """Listing commands support text, markdown and json."""
    assert [f.value for f in OutputFormat] == ["text", "markdown", "json"]
