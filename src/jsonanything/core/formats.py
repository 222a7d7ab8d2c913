# topmark:header:start
#
#   project      : JSON Anything
#   file         : formats.py
#   file_relpath : src/jsonanything/core/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Shared format vocabulary used across JSON Anything frontends.

This module centralizes the `TargetFormat` enum (what a record set is converted
into) and the `OutputFormat` enum (how CLI listings are presented), so the API,
the renderer registry and the CLI agree on the same keys without introducing
`Click` or console dependencies.
"""

from __future__ import annotations

from enum import Enum

from jsonanything.core.enum_mixins import KeyedStrEnum


class FormatFamily(str, Enum):
    """Behavioral family of a target format.

    Attributes:
        TABULAR: Key union across all records; one header plus one row per record.
        FIELD_LIST: One line per field of the representative record.
        DECLARATION: Class/struct/interface declaration of the representative record.
        STATEMENT: One statement per record (SQL inserts).
        PASS_THROUGH: Recursive dump of the whole structure.
    """

    TABULAR = "tabular"
    FIELD_LIST = "field-list"
    DECLARATION = "declaration"
    STATEMENT = "statement"
    PASS_THROUGH = "pass-through"


class TargetFormat(KeyedStrEnum):
    """Target notations a record set can be converted into.

    The `.value` is the stable key used by the CLI (``--to``) and configuration
    files; `TargetFormat.parse()` also accepts member names and aliases.
    """

    YAML = ("yaml", "Naive YAML-like dump", ("yml",))
    CSV = ("csv", "Comma-separated values")
    TYPESCRIPT = ("typescript", "TypeScript interface", ("ts",))
    JS = ("js", "Pretty-printed JSON", ("json", "javascript"))
    SCHEMA_SUMMARY = ("schema-summary", "Field: type summary", ("schema",))
    HTML_TABLE = ("html-table", "HTML table")
    QUERY = ("query", "URL query string", ("querystring",))
    FORM_URLENCODED = ("form-urlencoded", "URL-encoded form body", ("form",))
    PROPERTIES = ("properties", "Java .properties", ("props",))
    MARKDOWN_TABLE = ("markdown-table", "Markdown table", ("md", "markdown"))
    PLANTUML = ("plantuml", "PlantUML class", ("puml",))
    MERMAID = ("mermaid", "Mermaid class diagram")
    HTML = ("html", "HTML table (alias of html-table)")
    SQL_INSERT = ("sql-insert", "SQL INSERT statements", ("sql",))
    SQLITE_INSERT = ("sqlite-insert", "SQLite INSERT statements", ("sqlite",))
    MYSQL_INSERT = ("mysql-insert", "MySQL INSERT statements", ("mysql",))
    POSTGRES_INSERT = ("postgres-insert", "PostgreSQL INSERT statements", ("postgres", "pg"))
    BASH_EXPORT = ("bash-export", "Bash export variables", ("bash", "env"))
    CSHARP = ("csharp", "C# class", ("cs", "c#"))
    JAVA = ("java", "Java class")
    PYTHON_DATACLASS = ("python-dataclass", "Python dataclass", ("python", "py"))
    GO_STRUCT = ("go-struct", "Go struct", ("go",))
    RUST_STRUCT = ("rust-struct", "Rust struct", ("rust", "rs"))
    DART_CLASS = ("dart-class", "Dart class", ("dart",))
    PHP_ARRAY = ("php-array", "PHP array literal", ("php",))
    PROTO = ("proto", "Protocol Buffers (proto3) message", ("protobuf",))


class OutputFormat(str, Enum):
    """Presentation format for CLI listings (``formats``, ``version``).

    Attributes:
        TEXT: Human-friendly text output; may include ANSI color if enabled.
        MARKDOWN: A Markdown document.
        JSON: A single JSON document (machine-readable, colorless).
    """

    TEXT = "text"
    MARKDOWN = "markdown"
    JSON = "json"
