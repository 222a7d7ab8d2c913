# topmark:header:start
#
#   project      : JSON Anything
#   file         : __init__.py
#   file_relpath : src/jsonanything/api/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public API for JSON Anything.

Every converter accepts a record (a mapping), a sequence of records, or
``None``, and returns a string. Converters are pure and total: they never
perform I/O, never mutate their input, and degrade to empty output instead of
raising.

Examples:
    ```python
    from jsonanything import api

    api.to_csv([{"a": 1, "b": "x,y"}, {"a": 2, "b": "z"}])
    # 'a,b\\n1,"x,y"\\n2,z'

    api.to_sql_insert([{"id": 1, "name": None}], "users")
    # 'INSERT INTO users (id,name) VALUES (1,NULL);'

    api.convert({"name": "Ada"}, "ts", name="Person")
    # 'export interface Person {\\n  name: string;\\n}\\n'
    ```
"""

from __future__ import annotations

from typing import Any

from jsonanything.config.logging import get_logger
from jsonanything.constants import DEFAULT_CLASS_NAME, DEFAULT_INTERFACE_NAME, DEFAULT_TABLE_NAME
from jsonanything.core.formats import TargetFormat
from jsonanything.renderers import get_renderer, iter_registered_targets

__all__ = [
    "UnknownFormatError",
    "convert",
    "list_formats",
    "resolve_target",
    "to_bash_export",
    "to_csharp",
    "to_csv",
    "to_dart_class",
    "to_form_urlencoded",
    "to_go_struct",
    "to_html",
    "to_html_table",
    "to_java",
    "to_js",
    "to_markdown_table",
    "to_mermaid",
    "to_mysql_insert",
    "to_php_array",
    "to_plantuml",
    "to_postgres_insert",
    "to_properties",
    "to_proto",
    "to_python_dataclass",
    "to_query",
    "to_rust_struct",
    "to_schema_summary",
    "to_sql_insert",
    "to_sqlite_insert",
    "to_typescript",
    "to_yaml",
]

logger = get_logger(__name__)


class UnknownFormatError(ValueError):
    """Raised by `convert` when the target does not name a registered format."""

    def __init__(self, target: object) -> None:
        valid = ", ".join(t.key for t in TargetFormat)
        super().__init__(f"Unknown target format '{target}' - valid choices: {valid}")
        self.target = target


def resolve_target(target: TargetFormat | str) -> TargetFormat:
    """Resolve a target key, member name or alias into a `TargetFormat`.

    Args:
        target (TargetFormat | str): The target or its textual spelling.

    Returns:
        TargetFormat: The resolved target.

    Raises:
        UnknownFormatError: If ``target`` matches no format.
    """
    if isinstance(target, TargetFormat):
        return target
    resolved = TargetFormat.parse(target)
    if resolved is None:
        raise UnknownFormatError(target)
    return resolved


def convert(
    value: Any,
    target: TargetFormat | str,
    *,
    name: str | None = None,
    table: str | None = None,
) -> str:
    """Convert a record set into ``target``.

    Args:
        value (Any): A record, a sequence of records, or ``None``.
        target (TargetFormat | str): Target format (key, name or alias).
        name (str | None): Class/struct/interface name; the target's placeholder if omitted.
        table (str | None): SQL table name; ``mytable`` if omitted.

    Returns:
        str: The rendered text.

    Raises:
        UnknownFormatError: If ``target`` is not a registered format.
    """
    resolved = resolve_target(target)
    renderer = get_renderer(resolved)
    if renderer is None:
        raise UnknownFormatError(target)
    logger.debug("Converting to '%s' with %s", resolved.key, renderer.__class__.__name__)
    return renderer.render(value, name=name, table=table)


def list_formats() -> list[TargetFormat]:
    """Return every registered target format in declaration order."""
    return iter_registered_targets()


# --- Tabular ---


def to_csv(value: Any) -> str:
    """Comma-separated values over the key union of all records."""
    return convert(value, TargetFormat.CSV)


def to_html_table(value: Any) -> str:
    """Single-line HTML ``<table>`` over the key union of all records."""
    return convert(value, TargetFormat.HTML_TABLE)


def to_html(value: Any) -> str:
    """Alias of `to_html_table`."""
    return convert(value, TargetFormat.HTML)


def to_markdown_table(value: Any) -> str:
    """Markdown table over the key union of all records."""
    return convert(value, TargetFormat.MARKDOWN_TABLE)


# --- Field lists ---


def to_schema_summary(value: Any) -> str:
    """``name: type`` per field of the representative record."""
    return convert(value, TargetFormat.SCHEMA_SUMMARY)


def to_properties(value: Any) -> str:
    """``name=value`` per field of the representative record."""
    return convert(value, TargetFormat.PROPERTIES)


def to_bash_export(value: Any) -> str:
    """``export name='value'`` per field of the representative record."""
    return convert(value, TargetFormat.BASH_EXPORT)


def to_query(value: Any) -> str:
    """URL query string (``?a=1&b=2``) of the representative record."""
    return convert(value, TargetFormat.QUERY)


def to_form_urlencoded(value: Any) -> str:
    """URL-encoded form body (``a=1&b=2``) of the representative record."""
    return convert(value, TargetFormat.FORM_URLENCODED)


# --- Declarations ---


def to_typescript(value: Any, name: str = DEFAULT_INTERFACE_NAME) -> str:
    """TypeScript interface of the representative record."""
    return convert(value, TargetFormat.TYPESCRIPT, name=name)


def to_csharp(value: Any, name: str = DEFAULT_CLASS_NAME) -> str:
    """C# class of the representative record."""
    return convert(value, TargetFormat.CSHARP, name=name)


def to_java(value: Any, name: str = DEFAULT_CLASS_NAME) -> str:
    """Java class of the representative record."""
    return convert(value, TargetFormat.JAVA, name=name)


def to_python_dataclass(value: Any, name: str = DEFAULT_CLASS_NAME) -> str:
    """Python dataclass of the representative record."""
    return convert(value, TargetFormat.PYTHON_DATACLASS, name=name)


def to_go_struct(value: Any, name: str = DEFAULT_CLASS_NAME) -> str:
    """Go struct (with ``json`` tags) of the representative record."""
    return convert(value, TargetFormat.GO_STRUCT, name=name)


def to_rust_struct(value: Any, name: str = DEFAULT_CLASS_NAME) -> str:
    """Rust struct of the representative record."""
    return convert(value, TargetFormat.RUST_STRUCT, name=name)


def to_dart_class(value: Any, name: str = DEFAULT_CLASS_NAME) -> str:
    """Dart class of the representative record."""
    return convert(value, TargetFormat.DART_CLASS, name=name)


def to_proto(value: Any, name: str = DEFAULT_CLASS_NAME) -> str:
    """proto3 message of the representative record."""
    return convert(value, TargetFormat.PROTO, name=name)


def to_plantuml(value: Any, name: str = DEFAULT_CLASS_NAME) -> str:
    """PlantUML class block of the representative record."""
    return convert(value, TargetFormat.PLANTUML, name=name)


def to_mermaid(value: Any, name: str = DEFAULT_CLASS_NAME) -> str:
    """Mermaid class diagram of the representative record."""
    return convert(value, TargetFormat.MERMAID, name=name)


# --- Statements ---


def to_sql_insert(value: Any, table: str = DEFAULT_TABLE_NAME) -> str:
    """One ``INSERT INTO`` statement per record."""
    return convert(value, TargetFormat.SQL_INSERT, table=table)


def to_sqlite_insert(value: Any, table: str = DEFAULT_TABLE_NAME) -> str:
    """SQLite flavor of `to_sql_insert` (currently identical output)."""
    return convert(value, TargetFormat.SQLITE_INSERT, table=table)


def to_mysql_insert(value: Any, table: str = DEFAULT_TABLE_NAME) -> str:
    """MySQL flavor of `to_sql_insert` (currently identical output)."""
    return convert(value, TargetFormat.MYSQL_INSERT, table=table)


def to_postgres_insert(value: Any, table: str = DEFAULT_TABLE_NAME) -> str:
    """PostgreSQL flavor of `to_sql_insert` (currently identical output)."""
    return convert(value, TargetFormat.POSTGRES_INSERT, table=table)


# --- Pass-through dumps ---


def to_yaml(value: Any) -> str:
    """Naive YAML-like dump of the whole structure."""
    return convert(value, TargetFormat.YAML)


def to_js(value: Any) -> str:
    """Pretty-printed JSON dump of the whole structure."""
    return convert(value, TargetFormat.JS)


def to_php_array(value: Any) -> str:
    """PHP short-array literal of the whole structure."""
    return convert(value, TargetFormat.PHP_ARRAY)
