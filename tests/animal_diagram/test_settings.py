"""Tests for generator configuration."""

from pathlib import Path

import pytest

from animal_diagram.animals import ANIMAL_HIERARCHY
from animal_diagram.errors import ConfigurationError
from animal_diagram.settings import GeneratorConfig, load_config_file


class TestGeneratorConfig:
    """Tests for GeneratorConfig validation."""

    def test_defaults(self) -> None:
        """Test the default configuration."""
        config = GeneratorConfig()

        assert config.hierarchy == ANIMAL_HIERARCHY
        assert config.output_path == Path("ClassDiagram.xml")
        assert config.output_format == "xml"

    def test_from_properties(self) -> None:
        """Test creating configuration from a properties dict."""
        config = GeneratorConfig.from_properties(
            {"output_path": "out/diagram.json", "output_format": "json"}
        )

        assert config.output_path == Path("out/diagram.json")
        assert config.output_format == "json"

    def test_unknown_property_rejected(self) -> None:
        """Test that extra properties are rejected."""
        with pytest.raises(ConfigurationError, match="Invalid generator configuration"):
            GeneratorConfig.from_properties({"colour": "blue"})

    def test_unknown_format_rejected(self) -> None:
        """Test that unsupported formats are rejected."""
        with pytest.raises(ConfigurationError):
            GeneratorConfig.from_properties({"output_format": "svg"})

    def test_blank_hierarchy_rejected(self) -> None:
        """Test that a blank hierarchy marker is rejected."""
        with pytest.raises(ConfigurationError, match="hierarchy must not be empty"):
            GeneratorConfig.from_properties({"hierarchy": "  "})

    def test_with_overrides_ignores_none(self) -> None:
        """Test that None overrides keep the existing values."""
        config = GeneratorConfig(output_format="json")

        updated = config.with_overrides(output_format=None, output_path=Path("x.json"))

        assert updated.output_format == "json"
        assert updated.output_path == Path("x.json")


class TestLoadConfigFile:
    """Tests for loading configuration from YAML."""

    def test_load_valid_file(self, tmp_path: Path) -> None:
        """Test loading a YAML mapping."""
        path = tmp_path / "diagram.yaml"
        path.write_text("output_format: json\noutput_path: d.json\n", encoding="utf-8")

        config = load_config_file(path)

        assert config.output_format == "json"
        assert config.output_path == Path("d.json")

    def test_empty_file_gives_defaults(self, tmp_path: Path) -> None:
        """Test that an empty file yields the default configuration."""
        path = tmp_path / "empty.yaml"
        path.write_text("", encoding="utf-8")

        assert load_config_file(path) == GeneratorConfig()

    def test_non_mapping_rejected(self, tmp_path: Path) -> None:
        """Test that a top-level list is rejected."""
        path = tmp_path / "list.yaml"
        path.write_text("- a\n- b\n", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="must be a mapping"):
            load_config_file(path)

    def test_invalid_yaml_rejected(self, tmp_path: Path) -> None:
        """Test that unparsable YAML is reported."""
        path = tmp_path / "broken.yaml"
        path.write_text("invalid: yaml: content: [", encoding="utf-8")

        with pytest.raises(ConfigurationError, match="Failed to parse YAML"):
            load_config_file(path)

    def test_missing_file_rejected(self, tmp_path: Path) -> None:
        """Test that a missing file is reported."""
        with pytest.raises(ConfigurationError, match="Failed to read"):
            load_config_file(tmp_path / "absent.yaml")
