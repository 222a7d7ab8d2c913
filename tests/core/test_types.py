# topmark:header:start
#
#   project      : JSON Anything
#   file         : test_types.py
#   file_relpath : tests/core/test_types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for type tags and single-sample type inference."""

from __future__ import annotations

from typing import Any

import pytest

from jsonanything.core.types import ANY, NUMBER, STRING, TypeKind, TypeTag, infer_type
from tests.conftest import parametrize


@parametrize(
    "value, expected",
    [
        (None, "any"),
        ("x", "string"),
        ("", "string"),
        (True, "boolean"),
        (0, "number"),
        (2.5, "number"),
        ({"a": 1}, "object"),
        ({}, "object"),
        ([1, 2], "number[]"),
        (["a", 1], "string[]"),
        ([[True]], "boolean[][]"),
        ([{"a": 1}], "object[]"),
        ([], "any[]"),
        ([None], "any[]"),
        ((1,), "number[]"),
        (object(), "any"),
    ],
)
def test_infer_type(value: Any, expected: str) -> None:
    """Inference looks at one sample value (and the first item of arrays)."""
    assert str(infer_type(value)) == expected


def test_array_tags_carry_item_tags() -> None:
    """Array tags expose their item tag and compare structurally."""
    tag = infer_type([[1]])
    assert tag.is_array
    assert tag.kind is TypeKind.ARRAY
    assert tag.item == TypeTag.array_of(NUMBER)
    assert tag == TypeTag.array_of(TypeTag.array_of(NUMBER))


def test_tags_compare_with_their_spelling() -> None:
    """A tag equals its textual spelling and hashes consistently."""
    assert infer_type("x") == "string"
    assert infer_type("x") == STRING
    assert infer_type(None) != STRING
    assert len({infer_type([1]), TypeTag.array_of(NUMBER)}) == 1
    assert ANY.item is None


def test_item_tag_only_on_arrays() -> None:
    """Array tags need an item tag and scalar tags must not have one."""
    with pytest.raises(ValueError):
        TypeTag(TypeKind.ARRAY)
    with pytest.raises(ValueError):
        TypeTag(TypeKind.STRING, STRING)
