# topmark:header:start
#
#   project      : JSON Anything
#   file         : typemaps.py
#   file_relpath : src/jsonanything/renderers/typemaps.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Static lookup tables from generic type tags to target-language type names.

Only ``number`` and ``boolean`` have a dedicated mapping in each target; every
other tag (strings, objects, arrays, ``any``) falls back to the target's string
type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from jsonanything.core.types import TypeKind

if TYPE_CHECKING:
    from jsonanything.core.types import TypeTag


@dataclass(frozen=True)
class TypeMap:
    """Target type names for one language.

    Attributes:
        number (str): Type used for ``number`` tags.
        boolean (str): Type used for ``boolean`` tags.
        default (str): Type used for every other tag.
    """

    number: str
    boolean: str
    default: str

    def resolve(self, tag: TypeTag) -> str:
        """Return the declared type name for ``tag``."""
        if tag.kind is TypeKind.NUMBER:
            return self.number
        if tag.kind is TypeKind.BOOLEAN:
            return self.boolean
        return self.default


CSHARP_TYPES = TypeMap(number="int", boolean="bool", default="string")
JAVA_TYPES = TypeMap(number="int", boolean="boolean", default="String")
PYTHON_TYPES = TypeMap(number="int", boolean="bool", default="str")
GO_TYPES = TypeMap(number="int", boolean="bool", default="string")
RUST_TYPES = TypeMap(number="i32", boolean="bool", default="String")
DART_TYPES = TypeMap(number="int", boolean="bool", default="String")
PROTO_TYPES = TypeMap(number="int32", boolean="bool", default="string")
