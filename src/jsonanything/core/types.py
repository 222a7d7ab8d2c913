# topmark:header:start
#
#   project      : JSON Anything
#   file         : types.py
#   file_relpath : src/jsonanything/core/types.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type tags and the single-sample type inferrer.

A ``TypeTag`` is a closed tagged union: a ``TypeKind`` plus, for arrays, the tag
of the item type. Tags are inferred from **one** sample value only; a field that
holds a number in one record and a string in another gets whatever the chosen
sample happens to hold. Target renderers map tags to concrete type names with
static lookup tables (see ``jsonanything.renderers.typemaps``).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from jsonanything.core.values import is_number, is_sequence


class TypeKind(str, Enum):
    """Closed set of coarse symbolic types."""

    STRING = "string"
    NUMBER = "number"
    BOOLEAN = "boolean"
    OBJECT = "object"
    ARRAY = "array"
    ANY = "any"


@dataclass(frozen=True, eq=False)
class TypeTag:
    """Inferred type of a sample value.

    Attributes:
        kind (TypeKind): The coarse kind.
        item (TypeTag | None): Item tag for ``TypeKind.ARRAY``, otherwise ``None``.

    Notes:
        ``str(tag)`` is the symbolic spelling (``"number"``, ``"string[][]"``), and a
        tag compares equal to its spelling as well as to other tags.
    """

    kind: TypeKind
    item: TypeTag | None = None

    def __post_init__(self) -> None:
        if (self.kind is TypeKind.ARRAY) != (self.item is not None):
            raise ValueError(f"Array tags (and only array tags) carry an item tag: {self!r}")

    def __str__(self) -> str:
        if self.item is not None:
            return f"{self.item}[]"
        return self.kind.value

    def __eq__(self, other: object) -> bool:
        if isinstance(other, TypeTag):
            return str(self) == str(other)
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    def __hash__(self) -> int:
        return hash(str(self))

    @property
    def is_array(self) -> bool:
        """Whether this tag describes an array."""
        return self.kind is TypeKind.ARRAY

    @classmethod
    def array_of(cls, item: TypeTag) -> TypeTag:
        """Return the array tag whose items have type ``item``."""
        return cls(TypeKind.ARRAY, item)


STRING = TypeTag(TypeKind.STRING)
NUMBER = TypeTag(TypeKind.NUMBER)
BOOLEAN = TypeTag(TypeKind.BOOLEAN)
OBJECT = TypeTag(TypeKind.OBJECT)
ANY = TypeTag(TypeKind.ANY)


def infer_type(value: Any) -> TypeTag:
    """Infer the ``TypeTag`` of a single sample value.

    Rules, in order:

    1. ``None`` -> ``any``
    2. list/tuple -> tag of the first item + ``[]`` (``any[]`` when empty)
    3. ``str`` -> ``string``; ``bool`` -> ``boolean``; ``int``/``float`` -> ``number``
    4. Mapping -> ``object``
    5. anything else -> ``any``

    Args:
        value (Any): The sample value.

    Returns:
        TypeTag: The inferred tag. The function is total.
    """
    if value is None:
        return ANY
    if is_sequence(value):
        return TypeTag.array_of(infer_type(value[0]) if value else ANY)
    if isinstance(value, str):
        return STRING
    if isinstance(value, bool):
        return BOOLEAN
    if is_number(value):
        return NUMBER
    if isinstance(value, Mapping):
        return OBJECT
    return ANY
