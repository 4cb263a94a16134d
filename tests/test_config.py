"""Tests for FlattenConfig."""

import pytest

from flatten_core import ConfigError, FlattenConfig, Style


def test_defaults():
    cfg = FlattenConfig()
    assert cfg.prefix == ""
    assert cfg.style is Style.DOT
    assert cfg.sorted is False
    assert cfg.mode == "map"

def test_style_name_is_parsed():
    assert FlattenConfig(style="rails").style is Style.RAILS

def test_bad_style():
    with pytest.raises(ConfigError):
        FlattenConfig(style="colon")

def test_bad_mode():
    with pytest.raises(ConfigError):
        FlattenConfig(mode="tree")

def test_bad_sorted_type():
    with pytest.raises(ConfigError):
        FlattenConfig(sorted="yes")

def test_bad_prefix_type():
    with pytest.raises(ConfigError):
        FlattenConfig(prefix=3)

def test_from_mapping_unknown_key():
    with pytest.raises(ConfigError, match="separator"):
        FlattenConfig.from_mapping({"separator": "."})

def test_replace_ignores_none():
    cfg = FlattenConfig(prefix="p:").replace(prefix=None, style=Style.SLASH)
    assert cfg.prefix == "p:"
    assert cfg.style is Style.SLASH


# ---------------------------------------------------------------------------
# load
# ---------------------------------------------------------------------------

def test_load(tmp_path):
    path = tmp_path / "flatten.yaml"
    path.write_text('prefix: "p:"\nstyle: slash\nmode: list\nsorted: true\n', encoding="utf-8")
    cfg = FlattenConfig.load(path)
    assert cfg == FlattenConfig(prefix="p:", style=Style.SLASH, mode="list", sorted=True)

def test_load_empty_file(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert FlattenConfig.load(path) == FlattenConfig()

def test_load_not_a_mapping(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- dot\n- rails\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        FlattenConfig.load(path)

def test_load_invalid_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("style: [dot\n", encoding="utf-8")
    with pytest.raises(ConfigError):
        FlattenConfig.load(path)
