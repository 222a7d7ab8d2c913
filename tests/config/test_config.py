# topmark:header:start
#
#   project      : JSON Anything
#   file         : test_config.py
#   file_relpath : tests/config/test_config.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

# pyright: strict

"""Tests for configuration loading and layering."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import pytest

from jsonanything.config.io import (
    discover_config_files,
    extract_tool_section,
    load_toml_dict,
    resolve_config,
)
from jsonanything.config.model import Config, ConfigError
from jsonanything.core.formats import TargetFormat

if TYPE_CHECKING:
    from pathlib import Path


def test_defaults() -> None:
    """Runtime defaults convert to pretty JSON with target placeholders."""
    config = Config.from_defaults()
    assert config.target is TargetFormat.JS
    assert config.name is None
    assert config.table is None
    assert config.sources == ()


def test_merge_applies_convert_table() -> None:
    """Keys of ``[convert]`` override the snapshot; aliases are accepted."""
    merged = Config.from_defaults().merged_with_toml(
        {"convert": {"format": "ts", "name": "Person", "table": "people"}}, "test.toml"
    )
    assert merged.target is TargetFormat.TYPESCRIPT
    assert merged.name == "Person"
    assert merged.table == "people"
    assert merged.sources == ("test.toml",)


def test_merge_keeps_absent_keys() -> None:
    """Later layers only replace the keys they set."""
    base = Config(target=TargetFormat.CSV, name="A", table="t")
    merged = base.merged_with_toml({"convert": {"name": "B"}}, "b.toml")
    assert merged == Config(target=TargetFormat.CSV, name="B", table="t", sources=("b.toml",))


def test_merge_without_convert_section() -> None:
    """A file without ``[convert]`` changes nothing but is recorded."""
    merged = Config.from_defaults().merged_with_toml({}, "empty.toml")
    assert merged.target is TargetFormat.JS
    assert merged.sources == ("empty.toml",)


def test_merge_rejects_unknown_format() -> None:
    """Unknown format keys are configuration errors."""
    with pytest.raises(ConfigError, match="unknown format 'excel'"):
        Config.from_defaults().merged_with_toml({"convert": {"format": "excel"}}, "bad.toml")


@pytest.mark.parametrize("value", [3, "", "   ", ["csv"]])
def test_merge_rejects_non_string_values(value: object) -> None:
    """Values must be non-empty strings."""
    with pytest.raises(ConfigError, match="must be a non-empty string"):
        Config.from_defaults().merged_with_toml({"convert": {"name": value}}, "bad.toml")


def test_merge_rejects_non_table_section() -> None:
    """``convert`` must be a table."""
    with pytest.raises(ConfigError, match="must be a table"):
        Config.from_defaults().merged_with_toml({"convert": "csv"}, "bad.toml")


def test_merge_warns_on_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    """Unknown keys are ignored with a warning."""
    with caplog.at_level(logging.WARNING):
        merged = Config.from_defaults().merged_with_toml(
            {"convert": {"format": "csv", "colour": "red"}}, "extra.toml"
        )
    assert merged.target is TargetFormat.CSV
    assert "colour" in caplog.text


def test_with_overrides() -> None:
    """Explicit overrides win; ``None`` keeps the configured value."""
    base = Config(target=TargetFormat.CSV, name="A", table="t")
    assert base.with_overrides(target=TargetFormat.YAML).target is TargetFormat.YAML
    assert base.with_overrides(name="B").name == "B"
    assert base.with_overrides() == base


def test_load_toml_dict(tmp_path: Path) -> None:
    """Valid TOML loads as plain dicts."""
    path = tmp_path / "x.toml"
    path.write_text('[convert]\nformat = "csv"\n', encoding="utf-8")
    data = load_toml_dict(path)
    assert data == {"convert": {"format": "csv"}}
    assert type(data["convert"]) is dict


def test_load_toml_dict_failures(tmp_path: Path) -> None:
    """Malformed and missing files load as empty tables."""
    bad = tmp_path / "bad.toml"
    bad.write_text("[convert\nformat =", encoding="utf-8")
    assert load_toml_dict(bad) == {}
    assert load_toml_dict(tmp_path / "missing.toml") == {}
    latin = tmp_path / "latin.toml"
    latin.write_bytes(b"\xff\xfe[convert]\n")
    assert load_toml_dict(latin) == {}


def test_extract_tool_section() -> None:
    """``[tool.jsonanything]`` is un-nested from pyproject data."""
    data = {"tool": {"jsonanything": {"convert": {"format": "md"}}, "other": {}}}
    assert extract_tool_section(data) == {"convert": {"format": "md"}}
    assert extract_tool_section({"project": {"name": "x"}}) == {}
    assert extract_tool_section({"tool": "oops"}) == {}


def test_discovery_order(tmp_path: Path) -> None:
    """pyproject.toml is discovered before jsonanything.toml."""
    (tmp_path / "pyproject.toml").write_text(
        '[tool.jsonanything.convert]\nformat = "csv"\n', encoding="utf-8"
    )
    (tmp_path / "jsonanything.toml").write_text('[convert]\nname = "Row"\n', encoding="utf-8")
    found = discover_config_files(tmp_path)
    assert [p.name for p, _ in found] == ["pyproject.toml", "jsonanything.toml"]


def test_pyproject_without_tool_section_is_ignored(tmp_path: Path) -> None:
    """A pyproject.toml without our table is not a configuration source."""
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
    assert discover_config_files(tmp_path) == []


def test_resolve_config_layering(tmp_path: Path) -> None:
    """Explicit files override jsonanything.toml, which overrides pyproject.toml."""
    (tmp_path / "pyproject.toml").write_text(
        '[tool.jsonanything.convert]\nformat = "csv"\nname = "FromPyproject"\ntable = "py"\n',
        encoding="utf-8",
    )
    (tmp_path / "jsonanything.toml").write_text(
        '[convert]\nformat = "yaml"\nname = "FromLocal"\n', encoding="utf-8"
    )
    extra = tmp_path / "extra.toml"
    extra.write_text('[convert]\nname = "FromExtra"\n', encoding="utf-8")

    config = resolve_config(tmp_path, extra_files=[extra])
    assert config.target is TargetFormat.YAML
    assert config.name == "FromExtra"
    assert config.table == "py"
    assert len(config.sources) == 3


def test_resolve_config_no_config(tmp_path: Path) -> None:
    """``no_config`` skips discovered files but keeps explicit ones."""
    (tmp_path / "jsonanything.toml").write_text('[convert]\nformat = "yaml"\n', encoding="utf-8")
    extra = tmp_path / "extra.toml"
    extra.write_text('[convert]\ntable = "t"\n', encoding="utf-8")

    config = resolve_config(tmp_path, extra_files=[extra], no_config=True)
    assert config.target is TargetFormat.JS
    assert config.table == "t"
    assert config.sources == (str(extra),)


def test_resolve_config_propagates_errors(tmp_path: Path) -> None:
    """Invalid values surface as ConfigError."""
    (tmp_path / "jsonanything.toml").write_text('[convert]\nformat = "nope"\n', encoding="utf-8")
    with pytest.raises(ConfigError):
        resolve_config(tmp_path)
