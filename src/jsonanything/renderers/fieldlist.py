# topmark:header:start
#
#   project      : JSON Anything
#   file         : fieldlist.py
#   file_relpath : src/jsonanything/renderers/fieldlist.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Field-list renderers: one entry per field of the representative record.

Covers the schema summary, ``.properties`` files, Bash exports and the two
URL-encoded notations (query string and form body). Declarations (classes,
structs, interfaces) build on the same base in
[`jsonanything.renderers.declarations`][jsonanything.renderers.declarations].
"""

from __future__ import annotations

from abc import abstractmethod
from typing import TYPE_CHECKING, Any, ClassVar

from jsonanything.core.escaping import shell_single_quote, url_encode_component
from jsonanything.core.fields import build_field_descriptors
from jsonanything.core.formats import FormatFamily, TargetFormat
from jsonanything.core.values import to_text
from jsonanything.renderers.base import FormatRenderer
from jsonanything.renderers.registry import register_format

if TYPE_CHECKING:
    from jsonanything.core.fields import FieldDescriptor


class FieldListRenderer(FormatRenderer):
    """Base class for renderers driven by the representative record's fields."""

    family: ClassVar[FormatFamily] = FormatFamily.FIELD_LIST

    def render_value(self, value: Any, *, name: str, table: str) -> str:
        return self.render_fields(build_field_descriptors(value), name=name)

    @abstractmethod
    def render_fields(self, fields: list[FieldDescriptor], *, name: str) -> str:
        """Render the field descriptors of one record."""
        ...


class LineFieldRenderer(FieldListRenderer):
    """Field list rendered as one line per field, joined with ``separator``."""

    separator: ClassVar[str] = "\n"

    def render_fields(self, fields: list[FieldDescriptor], *, name: str) -> str:
        return self.separator.join(self.render_field(field) for field in fields)

    @abstractmethod
    def render_field(self, field: FieldDescriptor) -> str:
        """Render a single field."""
        ...


@register_format(TargetFormat.SCHEMA_SUMMARY)
class SchemaSummaryRenderer(LineFieldRenderer):
    """``name: type`` per field."""

    def render_field(self, field: FieldDescriptor) -> str:
        return f"{field.name}: {field.type_tag}"


@register_format(TargetFormat.PROPERTIES)
class PropertiesRenderer(LineFieldRenderer):
    """``name=value`` per field (values are not escaped)."""

    def render_field(self, field: FieldDescriptor) -> str:
        return f"{field.name}={to_text(field.value)}"


@register_format(TargetFormat.BASH_EXPORT)
class BashExportRenderer(LineFieldRenderer):
    """``export name='value'`` per field, staying inside single-quoted literals."""

    def render_field(self, field: FieldDescriptor) -> str:
        return f"export {field.name}={shell_single_quote(field.value)}"


@register_format(TargetFormat.FORM_URLENCODED)
class FormUrlEncodedRenderer(LineFieldRenderer):
    """``application/x-www-form-urlencoded`` body; keys and values encoded independently."""

    separator: ClassVar[str] = "&"

    def render_field(self, field: FieldDescriptor) -> str:
        return f"{url_encode_component(field.name)}={url_encode_component(field.value)}"


@register_format(TargetFormat.QUERY)
class QueryStringRenderer(FormUrlEncodedRenderer):
    """URL query string: ``?`` + form encoding, or nothing when there are no fields."""

    def render_fields(self, fields: list[FieldDescriptor], *, name: str) -> str:
        encoded = super().render_fields(fields, name=name)
        return f"?{encoded}" if fields else ""
