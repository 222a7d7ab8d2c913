# topmark:header:start
#
#   project      : JSON Anything
#   file         : test_fields.py
#   file_relpath : tests/core/test_fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for field descriptor construction."""

from __future__ import annotations

from jsonanything.core.fields import FieldDescriptor, build_field_descriptors
from jsonanything.core.types import infer_type
from tests.conftest import PEOPLE


def test_descriptors_follow_representative_record() -> None:
    """Descriptors list the first record's fields in insertion order."""
    fields = build_field_descriptors(PEOPLE)
    assert [f.name for f in fields] == ["id", "name", "admin", "tags", "manager"]
    assert [str(f.type_tag) for f in fields] == ["number", "string", "boolean", "string[]", "any"]


def test_descriptor_keeps_sample_value() -> None:
    """Each descriptor carries the sampled value and its inferred tag."""
    (field,) = build_field_descriptors({"nested": {"a": 1}})
    assert field == FieldDescriptor(name="nested", value={"a": 1}, type_tag=infer_type({}))
    assert field.type_tag == "object"


def test_no_fields_for_empty_input() -> None:
    """Empty or missing input yields no descriptors."""
    assert build_field_descriptors(None) == []
    assert build_field_descriptors([]) == []
    assert build_field_descriptors([{}, {"a": 1}]) == []
