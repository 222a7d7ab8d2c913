# topmark:header:start
#
#   project      : JSON Anything
#   file         : records.py
#   file_relpath : src/jsonanything/core/records.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shape sampler: normalize record sets and pick the shape to render.

A *record set* is either a single record (a mapping) or a sequence of records.
Struct/class renderers only need one representative record; tabular renderers
walk every record and compute the *key union* instead.

None of these helpers raise: ``None`` behaves like an empty record, and
non-mapping items behave like records without keys.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeAlias

from jsonanything.core.values import is_sequence

Record: TypeAlias = Mapping[str, Any]
RecordSet: TypeAlias = "Record | Sequence[Record] | None"

_EMPTY_RECORD: Record = {}


def normalize(value: Any) -> Sequence[Any]:
    """Return the record set as a sequence.

    A list or tuple is returned unchanged (aliased, not copied: callers must not
    mutate it). ``None`` becomes a single empty record. Anything else is wrapped
    into a one-element list.

    Args:
        value (Any): A record, a sequence of records, or ``None``.

    Returns:
        Sequence[Any]: The records to render.
    """
    if is_sequence(value):
        return value
    if value is None:
        return [{}]
    return [value]


def representative(value: Any) -> Record:
    """Return the record that drives field enumeration.

    Args:
        value (Any): A record, a sequence of records, or ``None``.

    Returns:
        Record: The first record, or an empty record when there is none (or it
            is not a mapping).
    """
    records = normalize(value)
    if not records:
        return _EMPTY_RECORD
    first = records[0]
    return first if isinstance(first, Mapping) else _EMPTY_RECORD


def record_keys(record: Any) -> list[str]:
    """Return the field names of a record in insertion order (empty for non-mappings)."""
    if not isinstance(record, Mapping):
        return []
    return list(record)


def record_get(record: Any, key: str) -> Any:
    """Return a field value, or ``None`` when the field (or the record) is missing."""
    if not isinstance(record, Mapping):
        return None
    return record.get(key)


def key_union(records: Sequence[Any]) -> list[str]:
    """Return every field name across ``records`` in first-seen order, deduplicated.

    Args:
        records (Sequence[Any]): Normalized records.

    Returns:
        list[str]: The ordered key union.
    """
    seen: dict[str, None] = {}
    for record in records:
        for key in record_keys(record):
            seen.setdefault(key, None)
    return list(seen)
