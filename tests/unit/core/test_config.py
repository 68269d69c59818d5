"""Unit tests for cleanup configuration loading."""

from pathlib import Path

import pytest
from forceclean.core.config import (
    DEFAULT_IGNORED_DIRS,
    CleanupConfig,
    ConfigError,
    load_config,
    load_toml_section,
)
from pydantic import ValidationError


class TestCleanupConfig:
    """Tests for the CleanupConfig model."""

    def test_defaults(self) -> None:
        """Defaults reproduce the dataSourceObjects cleanup."""
        config = CleanupConfig()
        assert config.target_name == "dataSourceObjects"
        assert config.criterion_marker == "<objectType>Object</objectType>"
        assert config.ignore_list_filename == ".forceignore"
        assert config.ignored_dirs == DEFAULT_IGNORED_DIRS
        assert {"node_modules", ".git", ".sf", ".sfdx", ".vscode", ".svn"} <= config.ignored_dirs

    def test_ignored_dirs_from_list(self) -> None:
        """A list of ignored directories is accepted."""
        config = CleanupConfig.model_validate({"ignored_dirs": ["build", "dist"]})
        assert config.ignored_dirs == frozenset({"build", "dist"})

    def test_frozen(self) -> None:
        """Configuration values cannot be mutated."""
        config = CleanupConfig()
        with pytest.raises(ValidationError):
            config.target_name = "other"  # type: ignore[misc]

    @pytest.mark.parametrize("name", ["", "   ", "a/b", "a\\b"])
    def test_invalid_target_name(self, name: str) -> None:
        """Target names must be a single non-empty path component."""
        with pytest.raises(ValidationError):
            CleanupConfig(target_name=name)

    def test_empty_marker_rejected(self) -> None:
        """An empty marker would match every file."""
        with pytest.raises(ValidationError, match="criterion_marker"):
            CleanupConfig(criterion_marker="")

    def test_header_must_be_comment(self) -> None:
        """The managed header must start with the comment prefix."""
        with pytest.raises(ValidationError, match="comment prefix"):
            CleanupConfig(ignore_list_header="Entries added by forceclean")

    def test_unknown_field_rejected(self) -> None:
        """Unknown settings are rejected."""
        with pytest.raises(ValidationError):
            CleanupConfig.model_validate({"target": "x"})


class TestLoadTomlSection:
    """Tests for load_toml_section."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """A missing file returns None."""
        assert load_toml_section(tmp_path / "missing.toml", "cleanup") is None

    def test_missing_section(self, tmp_path: Path) -> None:
        """A file without the section returns an empty table."""
        path = tmp_path / "config.toml"
        path.write_text('[colors]\ninfo = "#000000"\n')
        assert load_toml_section(path, "cleanup") == {}

    def test_invalid_toml(self, tmp_path: Path) -> None:
        """Unparseable TOML raises ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text("[cleanup\n")
        with pytest.raises(ConfigError, match="Failed to parse"):
            load_toml_section(path, "cleanup")

    def test_section_not_a_table(self, tmp_path: Path) -> None:
        """A scalar in place of the table raises ConfigError."""
        path = tmp_path / "config.toml"
        path.write_text('cleanup = "yes"\n')
        with pytest.raises(ConfigError, match="Invalid 'cleanup' section"):
            load_toml_section(path, "cleanup")


class TestLoadConfig:
    """Tests for load_config."""

    def test_explicit_file(self, tmp_path: Path) -> None:
        """Settings from an explicit file override defaults."""
        path = tmp_path / "forceclean.toml"
        path.write_text(
            '[cleanup]\ntarget_name = "objects"\nignored_dirs = ["build"]\n'
        )

        config = load_config(path)

        assert config.target_name == "objects"
        assert config.ignored_dirs == frozenset({"build"})
        assert config.criterion_marker == "<objectType>Object</objectType>"

    def test_explicit_missing_file_raises(self, tmp_path: Path) -> None:
        """A missing explicit file is an error."""
        with pytest.raises(ConfigError, match="not found"):
            load_config(tmp_path / "missing.toml")

    def test_explicit_invalid_values_raise(self, tmp_path: Path) -> None:
        """Validation failures in an explicit file are errors."""
        path = tmp_path / "forceclean.toml"
        path.write_text('[cleanup]\ncriterion_marker = ""\n')
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(path)

    def test_no_user_file_uses_defaults(self) -> None:
        """Without a user config file, defaults are returned."""
        assert load_config() == CleanupConfig()

    def test_user_file_is_read(self, isolated_config_home: Path) -> None:
        """The user config file under XDG_CONFIG_HOME is applied."""
        user_dir = isolated_config_home / "forceclean"
        user_dir.mkdir(parents=True)
        (user_dir / "config.toml").write_text('[cleanup]\nignore_list_filename = ".ignore"\n')

        assert load_config().ignore_list_filename == ".ignore"

    def test_invalid_user_file_falls_back(
        self, isolated_config_home: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An invalid user config is logged and replaced by defaults."""
        user_dir = isolated_config_home / "forceclean"
        user_dir.mkdir(parents=True)
        (user_dir / "config.toml").write_text("[cleanup]\nunknown = 1\n")

        assert load_config() == CleanupConfig()
        assert "Ignoring user config" in caplog.text
