# topmark:header:start
#
#   project      : JSON Anything
#   file         : declarations.py
#   file_relpath : src/jsonanything/renderers/declarations.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Declaration renderers: classes, structs, interfaces and UML class blocks.

Every declaration is an opening line, one member line per field of the
representative record, and a closing line. Nested objects are not expanded into
further declarations; their fields are typed with the target's fallback type.

Member types come either from the generic type tag (TypeScript) or from a
static [`TypeMap`][jsonanything.renderers.typemaps.TypeMap].
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from jsonanything.constants import DEFAULT_INTERFACE_NAME
from jsonanything.core.formats import FormatFamily, TargetFormat
from jsonanything.renderers.fieldlist import FieldListRenderer
from jsonanything.renderers.registry import register_format
from jsonanything.renderers.typemaps import (
    CSHARP_TYPES,
    DART_TYPES,
    GO_TYPES,
    JAVA_TYPES,
    PROTO_TYPES,
    PYTHON_TYPES,
    RUST_TYPES,
)

if TYPE_CHECKING:
    from jsonanything.core.fields import FieldDescriptor
    from jsonanything.renderers.typemaps import TypeMap


class DeclarationRenderer(FieldListRenderer):
    """Template for ``opening`` + member lines + ``closing``.

    Class attributes:
        type_map (TypeMap | None): Lookup table for member types; ``None`` uses
            the generic tag spelling.
        indent (str): Prefix of every member line.
    """

    family: ClassVar[FormatFamily] = FormatFamily.DECLARATION
    type_map: ClassVar[TypeMap | None] = None
    indent: ClassVar[str] = "  "

    def render_fields(self, fields: list[FieldDescriptor], *, name: str) -> str:
        out: list[str] = [self.opening(name)]
        for index, field in enumerate(fields, start=1):
            out.append(self.indent + self.member(field, self.type_name(field), index) + "\n")
        out.append(self.closing(name, fields))
        return "".join(out)

    def type_name(self, field: FieldDescriptor) -> str:
        """Return the declared type of ``field`` in the target language."""
        if self.type_map is None:
            return str(field.type_tag)
        return self.type_map.resolve(field.type_tag)

    def opening(self, name: str) -> str:
        """Text preceding the members (including its newline)."""
        return f"class {name} {{\n"

    def member(self, field: FieldDescriptor, type_name: str, index: int) -> str:
        """One member declaration, without indent and newline."""
        return field.name

    def closing(self, name: str, fields: list[FieldDescriptor]) -> str:
        """Text following the members (including its newline)."""
        return "}\n"


@register_format(TargetFormat.TYPESCRIPT)
class TypeScriptRenderer(DeclarationRenderer):
    """``export interface`` with generic tag spellings as member types."""

    default_name: ClassVar[str] = DEFAULT_INTERFACE_NAME

    def opening(self, name: str) -> str:
        return f"export interface {name} {{\n"

    def member(self, field: FieldDescriptor, type_name: str, index: int) -> str:
        return f"{field.name}: {type_name};"


@register_format(TargetFormat.CSHARP)
class CSharpRenderer(DeclarationRenderer):
    """C# class with auto-properties."""

    type_map: ClassVar[TypeMap | None] = CSHARP_TYPES

    def opening(self, name: str) -> str:
        return f"public class {name} {{\n"

    def member(self, field: FieldDescriptor, type_name: str, index: int) -> str:
        return f"public {type_name} {field.name} {{ get; set; }}"


@register_format(TargetFormat.JAVA)
class JavaRenderer(DeclarationRenderer):
    """Java class with public fields."""

    type_map: ClassVar[TypeMap | None] = JAVA_TYPES

    def opening(self, name: str) -> str:
        return f"public class {name} {{\n"

    def member(self, field: FieldDescriptor, type_name: str, index: int) -> str:
        return f"public {type_name} {field.name};"


@register_format(TargetFormat.PYTHON_DATACLASS)
class PythonDataclassRenderer(DeclarationRenderer):
    """Python ``@dataclass``; an empty record gets a ``pass`` body."""

    type_map: ClassVar[TypeMap | None] = PYTHON_TYPES

    def opening(self, name: str) -> str:
        return f"from dataclasses import dataclass\n\n@dataclass\nclass {name}:\n"

    def member(self, field: FieldDescriptor, type_name: str, index: int) -> str:
        return f"{field.name}: {type_name}"

    def closing(self, name: str, fields: list[FieldDescriptor]) -> str:
        return "" if fields else f"{self.indent}pass\n"


@register_format(TargetFormat.GO_STRUCT)
class GoStructRenderer(DeclarationRenderer):
    """Go struct with ``json`` tags."""

    type_map: ClassVar[TypeMap | None] = GO_TYPES

    def opening(self, name: str) -> str:
        return f"type {name} struct {{\n"

    def member(self, field: FieldDescriptor, type_name: str, index: int) -> str:
        return f'{field.name} {type_name} `json:"{field.name}"`'


@register_format(TargetFormat.RUST_STRUCT)
class RustStructRenderer(DeclarationRenderer):
    """Rust struct."""

    type_map: ClassVar[TypeMap | None] = RUST_TYPES

    def opening(self, name: str) -> str:
        return f"struct {name} {{\n"

    def member(self, field: FieldDescriptor, type_name: str, index: int) -> str:
        return f"{field.name}: {type_name},"


@register_format(TargetFormat.DART_CLASS)
class DartClassRenderer(DeclarationRenderer):
    """Dart class with ``final`` fields and a named-parameter constructor."""

    type_map: ClassVar[TypeMap | None] = DART_TYPES

    def member(self, field: FieldDescriptor, type_name: str, index: int) -> str:
        return f"final {type_name} {field.name};"

    def closing(self, name: str, fields: list[FieldDescriptor]) -> str:
        params = ", ".join(f"required this.{field.name}" for field in fields)
        return f"{self.indent}{name}({{{params}}});\n}}\n"


@register_format(TargetFormat.PROTO)
class ProtoRenderer(DeclarationRenderer):
    """proto3 message; field numbers follow field order starting at 1."""

    type_map: ClassVar[TypeMap | None] = PROTO_TYPES

    def opening(self, name: str) -> str:
        return f'syntax = "proto3";\nmessage {name} {{\n'

    def member(self, field: FieldDescriptor, type_name: str, index: int) -> str:
        return f"{type_name} {field.name} = {index};"


@register_format(TargetFormat.PLANTUML)
class PlantUmlRenderer(DeclarationRenderer):
    """PlantUML class block listing field names."""


@register_format(TargetFormat.MERMAID)
class MermaidRenderer(DeclarationRenderer):
    """Mermaid ``classDiagram`` with one class listing field names."""

    def opening(self, name: str) -> str:
        return f"classDiagram\nclass {name} {{\n"
