# topmark:header:start
#
#   project      : JSON Anything
#   file         : io.py
#   file_relpath : src/jsonanything/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load and layer TOML configuration sources.

Sources, in increasing precedence:

1. runtime defaults (`Config.from_defaults`)
2. ``[tool.jsonanything]`` in ``./pyproject.toml``
3. ``./jsonanything.toml``
4. explicit ``--config`` files, in the order given

Parsing is done with `tomlkit` and returned as plain `dict` structures.
Unreadable or malformed files are logged and skipped.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, TypeAlias, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from jsonanything.config.logging import get_logger
from jsonanything.config.model import Config
from jsonanything.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_SECTION

TomlTable: TypeAlias = dict[str, Any]

logger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Notes:
        - Errors are logged and an empty dict is returned on failure.
        - Encoding is assumed to be UTF-8.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
        data_any: Any = doc.unwrap()
        return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        return {}
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        return {}
    except (TypeError, ValueError) as e:
        logger.error("Unknown error while reading TOML from %s: %s", path, e)
        return {}


def extract_tool_section(data: TomlTable) -> TomlTable:
    """Return the ``[tool.jsonanything]`` table of a parsed ``pyproject.toml`` (or ``{}``)."""
    node: Any = data
    for part in PYPROJECT_TOOL_SECTION.split("."):
        if not isinstance(node, dict):
            return {}
        node = cast("TomlTable", node).get(part, {})
    return cast("TomlTable", node) if isinstance(node, dict) else {}


def discover_config_files(root: Path) -> list[tuple[Path, TomlTable]]:
    """Return the configuration tables found in ``root``, lowest precedence first.

    Args:
        root (Path): Directory to search (typically the working directory).

    Returns:
        list[tuple[Path, TomlTable]]: ``(path, table)`` pairs; ``pyproject.toml``
            tables are already un-nested from ``[tool.jsonanything]``.
    """
    found: list[tuple[Path, TomlTable]] = []

    pyproject = root / PYPROJECT_FILE_NAME
    if pyproject.is_file():
        section = extract_tool_section(load_toml_dict(pyproject))
        if section:
            found.append((pyproject, section))

    config_file = root / CONFIG_FILE_NAME
    if config_file.is_file():
        found.append((config_file, load_toml_dict(config_file)))

    logger.debug("Discovered %d configuration file(s) in %s", len(found), root)
    return found


def resolve_config(
    root: Path,
    *,
    extra_files: list[Path] | None = None,
    no_config: bool = False,
) -> Config:
    """Build the layered `Config` for a run.

    Args:
        root (Path): Directory searched for ``pyproject.toml`` / ``jsonanything.toml``.
        extra_files (list[Path] | None): Explicit configuration files (highest file precedence).
        no_config (bool): If True, skip discovered files (explicit files still apply).

    Returns:
        Config: The merged configuration snapshot.

    Raises:
        ConfigError: If any source holds an invalid value.
    """
    config = Config.from_defaults()
    layers: list[tuple[Path, TomlTable]] = [] if no_config else discover_config_files(root)
    layers.extend((path, load_toml_dict(path)) for path in extra_files or [])
    for path, table in layers:
        config = config.merged_with_toml(table, str(path))
    logger.trace("Resolved configuration: %s", config)
    return config
