# topmark:header:start
#
#   project      : JSON Anything
#   file         : fields.py
#   file_relpath : src/jsonanything/core/fields.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field descriptors: the stable contract between shape inference and renderers.

Descriptors are built once per formatting call from the representative record's
direct fields. Nested mappings are not expanded into further descriptors.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from jsonanything.core.records import representative
from jsonanything.core.types import TypeTag, infer_type


@dataclass(frozen=True)
class FieldDescriptor:
    """One field of the representative record.

    Attributes:
        name (str): The field name.
        value (Any): The sample value.
        type_tag (TypeTag): The type inferred from ``value``.
    """

    name: str
    value: Any
    type_tag: TypeTag


def build_field_descriptors(value: Any) -> list[FieldDescriptor]:
    """Return one descriptor per field of the representative record, in insertion order.

    Args:
        value (Any): A record, a sequence of records, or ``None``.

    Returns:
        list[FieldDescriptor]: The descriptors (empty when there are no fields).
    """
    record = representative(value)
    return [
        FieldDescriptor(name=str(name), value=sample, type_tag=infer_type(sample))
        for name, sample in record.items()
    ]
