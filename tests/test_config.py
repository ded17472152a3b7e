"""Tests for config module."""

from pathlib import Path

import pytest

from increment_cargo_version.config import Config, ConfigError, get_config_path, load_config


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """Should fall back to Cargo.toml and Cargo.lock."""
        config = load_config(tmp_path / "nonexistent.yaml")

        assert config.manifest_path == Path("Cargo.toml")
        assert config.lock_path == Path("Cargo.lock")

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        """Should treat an empty file as all defaults."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("")

        assert load_config(config_file) == Config()

    def test_load_valid_config(self, tmp_path: Path) -> None:
        """Should load both paths from the file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("""
manifest_path: crates/core/Cargo.toml
lock_path: Cargo.lock
""")
        config = load_config(config_file)

        assert config.manifest_path == Path("crates/core/Cargo.toml")
        assert config.lock_path == Path("Cargo.lock")

    def test_partial_config_keeps_other_default(self, tmp_path: Path) -> None:
        """Should default fields not given in the file."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("lock_path: ../Cargo.lock\n")

        config = load_config(config_file)

        assert config.manifest_path == Path("Cargo.toml")
        assert config.lock_path == Path("../Cargo.lock")

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        """Should raise ConfigError for malformed YAML."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("manifest_path: [unclosed\n")

        with pytest.raises(ConfigError, match="Invalid YAML") as exc_info:
            load_config(config_file)

        assert "\n" not in str(exc_info.value)

    def test_non_mapping_raises(self, tmp_path: Path) -> None:
        """Should raise ConfigError when the document is not a mapping."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("- Cargo.toml\n")

        with pytest.raises(ConfigError, match="YAML mapping"):
            load_config(config_file)

    def test_unknown_field_raises(self, tmp_path: Path) -> None:
        """Should reject fields it does not know."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text("manifest: Cargo.toml\n")

        with pytest.raises(ConfigError, match="Unknown config fields: manifest"):
            load_config(config_file)

    @pytest.mark.parametrize("value", ['""', "42", "[]"])
    def test_invalid_path_raises(self, tmp_path: Path, value: str) -> None:
        """Should require paths to be non-empty strings."""
        config_file = tmp_path / "config.yaml"
        config_file.write_text(f"manifest_path: {value}\n")

        with pytest.raises(ConfigError, match="manifest_path must be a non-empty string"):
            load_config(config_file)


class TestConfigPaths:
    """Tests for config path utilities."""

    def test_default_config_path(self) -> None:
        """Should look for the config file in the working directory."""
        assert get_config_path() == Path("increment-cargo-version.yaml")
