# topmark:header:start
#
#   project      : JSON Anything
#   file         : statements.py
#   file_relpath : src/jsonanything/renderers/statements.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Statement renderers: one SQL ``INSERT`` per record.

A single renderer serves the generic, SQLite, MySQL and PostgreSQL targets; the
bound target selects a [`SqlDialectPolicy`][jsonanything.renderers.statements.SqlDialectPolicy]
for identifier quoting and literal rendering. All dialects currently share the
same policy, so their output is byte-identical.

Each statement lists *that record's own* keys as columns (no key union).
Every record yields exactly one statement; a record without fields (or one
that is not a mapping) yields ``INSERT INTO t () VALUES ();``.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Final

from jsonanything.core.escaping import sql_literal
from jsonanything.core.formats import FormatFamily, TargetFormat
from jsonanything.core.records import normalize, record_keys
from jsonanything.renderers.base import FormatRenderer
from jsonanything.renderers.registry import register_format


class SqlDialect(str, Enum):
    """SQL dialects with a dedicated INSERT target."""

    GENERIC = "generic"
    SQLITE = "sqlite"
    MYSQL = "mysql"
    POSTGRES = "postgres"


def _bare_identifier(name: str) -> str:
    return name


@dataclass(frozen=True)
class SqlDialectPolicy:
    """How a dialect spells identifiers and literals.

    Attributes:
        quote_identifier (Callable[[str], str]): Renders a table or column name.
        literal (Callable[[Any], str]): Renders a value.
    """

    quote_identifier: Callable[[str], str] = _bare_identifier
    literal: Callable[[Any], str] = sql_literal


_SHARED_POLICY: Final[SqlDialectPolicy] = SqlDialectPolicy()

DIALECT_POLICIES: Final[dict[SqlDialect, SqlDialectPolicy]] = {
    SqlDialect.GENERIC: _SHARED_POLICY,
    SqlDialect.SQLITE: _SHARED_POLICY,
    SqlDialect.MYSQL: _SHARED_POLICY,
    SqlDialect.POSTGRES: _SHARED_POLICY,
}

TARGET_DIALECTS: Final[dict[TargetFormat, SqlDialect]] = {
    TargetFormat.SQL_INSERT: SqlDialect.GENERIC,
    TargetFormat.SQLITE_INSERT: SqlDialect.SQLITE,
    TargetFormat.MYSQL_INSERT: SqlDialect.MYSQL,
    TargetFormat.POSTGRES_INSERT: SqlDialect.POSTGRES,
}


def render_insert(record: Any, table: str, policy: SqlDialectPolicy) -> str:
    """Return the INSERT statement for one record."""
    columns = record_keys(record)
    cols = ",".join(policy.quote_identifier(str(column)) for column in columns)
    vals = ",".join(policy.literal(record[column]) for column in columns)
    return f"INSERT INTO {policy.quote_identifier(table)} ({cols}) VALUES ({vals});"


@register_format(TargetFormat.POSTGRES_INSERT)
@register_format(TargetFormat.MYSQL_INSERT)
@register_format(TargetFormat.SQLITE_INSERT)
@register_format(TargetFormat.SQL_INSERT)
class SqlInsertRenderer(FormatRenderer):
    """``INSERT INTO table (cols) VALUES (vals);`` per record, joined by newlines."""

    family: ClassVar[FormatFamily] = FormatFamily.STATEMENT

    @property
    def dialect(self) -> SqlDialect:
        """The dialect selected by the bound target."""
        if self.target is None:
            return SqlDialect.GENERIC
        return TARGET_DIALECTS.get(self.target, SqlDialect.GENERIC)

    def render_value(self, value: Any, *, name: str, table: str) -> str:
        policy = DIALECT_POLICIES[self.dialect]
        return "\n".join(render_insert(record, table, policy) for record in normalize(value))
