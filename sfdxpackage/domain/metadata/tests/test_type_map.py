"""
Tests for type_map.py
"""
import logging
from pathlib import Path

import pytest

from sfdxpackage.domain.metadata.type_map import METADATA_TYPES, TypeMapRegistry, load_overrides
from sfdxpackage.exceptions.errors import TypeMapError


@pytest.fixture
def overrides_file(tmp_path: Path) -> Path:
    path = tmp_path / "types.yaml"
    path.write_text("flexipages: FlexiPage\nclasses: MyApexClass\n", encoding="utf-8")
    return path


def test_static_table_resolves():
    registry = TypeMapRegistry()
    assert registry.resolve("classes") == "ApexClass"
    assert registry.resolve("fields") == "CustomField"
    assert registry.resolve("objectWebLinks") == "WebLink"
    assert "classes" in registry


def test_overrides_file_extends_and_replaces(overrides_file: Path):
    registry = TypeMapRegistry(overrides_file=overrides_file)

    assert registry.resolve("flexipages") == "FlexiPage"
    assert registry.resolve("classes") == "MyApexClass"
    assert registry.resolve("triggers") == "ApexTrigger"


def test_overrides_do_not_touch_static_table(overrides_file: Path):
    TypeMapRegistry(overrides_file=overrides_file)
    assert METADATA_TYPES["classes"] == "ApexClass"


def test_unknown_folder_warns_once(caplog):
    registry = TypeMapRegistry()
    with caplog.at_level(logging.WARNING):
        assert registry.resolve("mystery") == "mystery"
        assert registry.resolve("mystery") == "mystery"

    assert caplog.text.count("mystery") == 1


def test_empty_file(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_overrides(path) == {}


def test_missing_file(tmp_path: Path):
    with pytest.raises(TypeMapError, match="Cannot read"):
        load_overrides(tmp_path / "nope.yaml")


def test_invalid_yaml(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("flexipages: [unclosed\n", encoding="utf-8")
    with pytest.raises(TypeMapError, match="Invalid YAML"):
        load_overrides(path)


def test_not_a_mapping(tmp_path: Path):
    path = tmp_path / "list.yaml"
    path.write_text("- flexipages\n- FlexiPage\n", encoding="utf-8")
    with pytest.raises(TypeMapError, match="mapping"):
        load_overrides(path)


def test_non_string_type_name(tmp_path: Path):
    path = tmp_path / "nested.yaml"
    path.write_text("flexipages:\n  name: FlexiPage\n", encoding="utf-8")
    with pytest.raises(TypeMapError, match="Invalid type map entry"):
        load_overrides(path)
