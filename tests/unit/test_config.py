#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for configuration file discovery and loading."""

import json
from pathlib import Path

import pytest

from ofmark.config import discover_config_file, load_config_file, load_options
from ofmark.exceptions import ConfigError, ValidationError


@pytest.mark.unit
class TestLoadConfigFile:
    """Test loading each supported format."""

    def test_toml(self, tmp_path: Path):
        """Test a TOML config file."""
        path = tmp_path / ".ofmark.toml"
        path.write_text("enableCheckbox = true\nmermaid = false\n", encoding="utf-8")
        assert load_config_file(path) == {"enableCheckbox": True, "mermaid": False}

    def test_yaml(self, tmp_path: Path):
        """Test a YAML config file."""
        path = tmp_path / ".ofmark.yaml"
        path.write_text("parse_tags: false\n", encoding="utf-8")
        assert load_config_file(path) == {"parse_tags": False}

    def test_empty_yaml(self, tmp_path: Path):
        """Test an empty YAML file loads as an empty mapping."""
        path = tmp_path / ".ofmark.yml"
        path.write_text("", encoding="utf-8")
        assert load_config_file(path) == {}

    def test_json(self, tmp_path: Path):
        """Test a JSON config file."""
        path = tmp_path / ".ofmark.json"
        path.write_text(json.dumps({"highlight": False}), encoding="utf-8")
        assert load_config_file(path) == {"highlight": False}

    def test_pyproject_section(self, tmp_path: Path):
        """Test the [tool.ofmark] table of pyproject.toml."""
        path = tmp_path / "pyproject.toml"
        path.write_text('[project]\nname = "vault"\n\n[tool.ofmark]\nenableCheckbox = true\n', encoding="utf-8")
        assert load_config_file(path) == {"enableCheckbox": True}

    def test_missing_file(self, tmp_path: Path):
        """Test a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="does not exist"):
            load_config_file(tmp_path / "absent.toml")

    def test_unsupported_extension(self, tmp_path: Path):
        """Test unknown extensions are rejected."""
        path = tmp_path / "config.ini"
        path.write_text("[x]\n", encoding="utf-8")
        with pytest.raises(ConfigError, match="Unsupported"):
            load_config_file(path)

    def test_malformed_toml(self, tmp_path: Path):
        """Test invalid TOML raises ConfigError with the original error."""
        path = tmp_path / ".ofmark.toml"
        path.write_text("enableCheckbox = \n", encoding="utf-8")
        with pytest.raises(ConfigError) as exc_info:
            load_config_file(path)
        assert exc_info.value.original_error is not None
        assert exc_info.value.config_path == str(path)

    def test_json_must_be_object(self, tmp_path: Path):
        """Test a JSON list is rejected."""
        path = tmp_path / ".ofmark.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ConfigError, match="object"):
            load_config_file(path)


@pytest.mark.unit
class TestDiscoverConfigFile:
    """Test configuration discovery."""

    def test_finds_file_in_parent(self, tmp_path: Path):
        """Test discovery walks up from a nested directory."""
        config = tmp_path / ".ofmark.toml"
        config.write_text("mermaid = false\n", encoding="utf-8")
        nested = tmp_path / "notes" / "daily"
        nested.mkdir(parents=True)
        assert discover_config_file(nested) == config.resolve()

    def test_prefers_dedicated_file_over_pyproject(self, tmp_path: Path):
        """Test dedicated files win over pyproject.toml in the same directory."""
        (tmp_path / "pyproject.toml").write_text("[tool.ofmark]\nmermaid = false\n", encoding="utf-8")
        config = tmp_path / ".ofmark.json"
        config.write_text("{}", encoding="utf-8")
        assert discover_config_file(tmp_path) == config.resolve()

    def test_pyproject_without_section_is_skipped(self, tmp_path: Path):
        """Test a pyproject.toml without [tool.ofmark] is not a config file."""
        vault = tmp_path / "vault"
        vault.mkdir()
        (vault / "pyproject.toml").write_text('[project]\nname = "x"\n', encoding="utf-8")
        found = discover_config_file(vault)
        assert found is None or found.parent != vault.resolve()


@pytest.mark.unit
class TestLoadOptions:
    """Test building options from files and overrides."""

    def test_defaults_without_file(self):
        """Test no file and no overrides yields defaults."""
        options = load_options()
        assert options.enable_checkbox is False

    def test_file_then_overrides(self, tmp_path: Path):
        """Test overrides are applied after the file."""
        path = tmp_path / ".ofmark.toml"
        path.write_text("enableCheckbox = true\nmermaid = false\n", encoding="utf-8")
        options = load_options(path, {"mermaid": True})
        assert options.enable_checkbox is True
        assert options.mermaid is True

    def test_unknown_key_in_file(self, tmp_path: Path):
        """Test unknown keys in a file raise ValidationError."""
        path = tmp_path / ".ofmark.yaml"
        path.write_text("sparkles: true\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_options(path)
