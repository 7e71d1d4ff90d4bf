"""Unit tests for runtime configuration loading."""

from pathlib import Path

import pytest
from lps.core.config import LpsConfig, load_config
from lps.core.errors import ConfigError, ExitCode
from pydantic import ValidationError


class TestLpsConfig:
    """Tests for LpsConfig model."""

    def test_defaults(self) -> None:
        """Defaults point at the system pacman database."""
        config = LpsConfig()

        assert config.root == Path("/")
        assert config.dbpath == Path("/var/lib/pacman")
        assert config.repositories == ["core", "extra", "multilib"]
        assert config.default_keep == ["pacman", "glibc"]

    def test_rejects_unknown_keys(self) -> None:
        """Unknown settings are an error, not silently ignored."""
        with pytest.raises(ValidationError):
            LpsConfig.model_validate({"colour": "red"})

    def test_rejects_empty_repositories(self) -> None:
        """At least one repository is required."""
        with pytest.raises(ValidationError):
            LpsConfig(repositories=[])

    def test_rejects_duplicate_names(self) -> None:
        """Repository names must be unique."""
        with pytest.raises(ValidationError, match="unique"):
            LpsConfig(repositories=["core", "core"])

    def test_rejects_blank_names(self) -> None:
        """Blank keep names are invalid."""
        with pytest.raises(ValidationError, match="empty"):
            LpsConfig(default_keep=["pacman", " "])

    def test_strips_names(self) -> None:
        """Surrounding whitespace is removed from names."""
        config = LpsConfig(repositories=[" core ", "extra"])

        assert config.repositories == ["core", "extra"]


class TestLoadConfig:
    """Tests for load_config function."""

    def test_missing_file_returns_defaults(self, tmp_path: Path) -> None:
        """No config file means default settings."""
        assert load_config(tmp_path / "missing.toml") == LpsConfig()

    def test_default_location(self, config_home: Path) -> None:
        """Without a path the XDG config file is read."""
        config_file = config_home / "lps" / "config.toml"
        config_file.parent.mkdir()
        config_file.write_text('repositories = ["core"]\n')

        assert load_config().repositories == ["core"]

    def test_loads_values(self, tmp_path: Path) -> None:
        """Values from the file override the defaults."""
        config_file = tmp_path / "config.toml"
        config_file.write_text(
            'root = "/mnt"\n'
            'dbpath = "/mnt/var/lib/pacman"\n'
            'repositories = ["core-testing", "core"]\n'
            'default_keep = ["linux"]\n'
        )

        config = load_config(config_file)

        assert config.root == Path("/mnt")
        assert config.dbpath == Path("/mnt/var/lib/pacman")
        assert config.repositories == ["core-testing", "core"]
        assert config.default_keep == ["linux"]

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Syntax errors raise ConfigError."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("repositories = [\n")

        with pytest.raises(ConfigError, match="Invalid TOML") as exc_info:
            load_config(config_file)

        assert exc_info.value.exit_code == ExitCode.CONFIG_INVALID

    def test_invalid_content(self, tmp_path: Path) -> None:
        """Schema violations raise ConfigError."""
        config_file = tmp_path / "config.toml"
        config_file.write_text("repositories = []\n")

        with pytest.raises(ConfigError, match="Invalid config content"):
            load_config(config_file)

    def test_unreadable_path(self, tmp_path: Path) -> None:
        """A directory in place of the file raises ConfigError."""
        with pytest.raises(ConfigError, match="Failed to read"):
            load_config(tmp_path)
