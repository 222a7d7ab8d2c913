# topmark:header:start
#
#   project      : JSON Anything
#   file         : model.py
#   file_relpath : src/jsonanything/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Immutable runtime configuration for the JSON Anything CLI.

`Config` is a frozen snapshot. Layers (runtime defaults, discovered TOML files,
explicit ``--config`` files, CLI options) are applied in order with
`Config.merged_with_toml` and `Config.with_overrides`, each returning a new
snapshot. Later layers win.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from jsonanything.config.keys import Toml
from jsonanything.config.logging import get_logger
from jsonanything.core.formats import TargetFormat

if TYPE_CHECKING:
    from jsonanything.config.io import TomlTable
    from jsonanything.config.logging import JsonAnythingLogger

logger: JsonAnythingLogger = get_logger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration source holds an invalid value."""


def _optional_str(section: TomlTable, key: str, source: str) -> str | None:
    raw: Any = section.get(key)
    if raw is None:
        return None
    if not isinstance(raw, str) or not raw.strip():
        raise ConfigError(f"{source}: '{key}' must be a non-empty string (got {raw!r})")
    return raw.strip()


@dataclass(frozen=True)
class Config:
    """Effective settings for a conversion.

    Attributes:
        target (TargetFormat): Target format used when ``--to`` is not given.
        name (str | None): Class/struct/interface name (``None``: target placeholder).
        table (str | None): SQL table name (``None``: ``mytable``).
        sources (tuple[str, ...]): Configuration sources applied, in order.
    """

    target: TargetFormat = TargetFormat.JS
    name: str | None = None
    table: str | None = None
    sources: tuple[str, ...] = ()

    @classmethod
    def from_defaults(cls) -> Config:
        """Return the runtime defaults."""
        return cls()

    def merged_with_toml(self, data: TomlTable, source: str) -> Config:
        """Return a new snapshot with the ``[convert]`` table of ``data`` applied.

        Args:
            data (TomlTable): A parsed configuration table (already un-nested
                from ``[tool.jsonanything]`` for ``pyproject.toml``).
            source (str): Human-readable origin used in messages.

        Returns:
            Config: The merged snapshot (``self`` values kept for absent keys).

        Raises:
            ConfigError: If a key holds an invalid value.
        """
        section_any: Any = data.get(Toml.SECTION_CONVERT, {})
        if not isinstance(section_any, dict):
            raise ConfigError(f"{source}: [{Toml.SECTION_CONVERT}] must be a table")
        section: TomlTable = section_any

        unknown = sorted(set(section) - {Toml.KEY_FORMAT, Toml.KEY_NAME, Toml.KEY_TABLE})
        if unknown:
            logger.warning("%s: ignoring unknown key(s) %s", source, ", ".join(unknown))

        target = self.target
        fmt = _optional_str(section, Toml.KEY_FORMAT, source)
        if fmt is not None:
            parsed = TargetFormat.parse(fmt)
            if parsed is None:
                raise ConfigError(f"{source}: unknown format '{fmt}'")
            target = parsed

        name = _optional_str(section, Toml.KEY_NAME, source)
        table = _optional_str(section, Toml.KEY_TABLE, source)

        logger.debug("Applying configuration from %s", source)
        return replace(
            self,
            target=target,
            name=name if name is not None else self.name,
            table=table if table is not None else self.table,
            sources=(*self.sources, source),
        )

    def with_overrides(
        self,
        *,
        target: TargetFormat | None = None,
        name: str | None = None,
        table: str | None = None,
    ) -> Config:
        """Return a new snapshot with explicit (CLI/API) overrides applied; ``None`` keeps."""
        return replace(
            self,
            target=target or self.target,
            name=name or self.name,
            table=table or self.table,
        )
