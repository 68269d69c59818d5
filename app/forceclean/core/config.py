"""Cleanup configuration loaded from a TOML file.

The configuration is an explicit value handed to the scanner, filter,
operator and ignore-list writer. Defaults reproduce the dataSourceObjects
cleanup; the ``[cleanup]`` table of ``~/.config/forceclean/config.toml``
(or a file passed via ``--config``) overrides individual fields.
"""

import logging
import tomllib
from pathlib import Path
from typing import Any, cast

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator

from forceclean.core.paths import get_config_path

logger = logging.getLogger(__name__)

DEFAULT_TARGET_NAME = "dataSourceObjects"
DEFAULT_CRITERION_MARKER = "<objectType>Object</objectType>"
DEFAULT_IGNORE_LIST_FILENAME = ".forceignore"
DEFAULT_IGNORE_LIST_HEADER = "# Entries added by forceclean"
DEFAULT_COMMENT_PREFIX = "#"

# Directory names never descended into while searching for target folders.
DEFAULT_IGNORED_DIRS: frozenset[str] = frozenset(
    {
        "node_modules",
        ".git",
        ".sf",
        ".sfdx",
        ".vscode",
        ".svn",
    }
)


class ConfigError(Exception):
    """Raised when a configuration file cannot be read or validated."""


class CleanupConfig(BaseModel):
    """Settings shared by every stage of a cleanup run.

    Attributes:
        target_name: Base name of the directories to inspect.
        criterion_marker: Literal substring that makes a file compliant.
        ignored_dirs: Directory names that are never recursed into.
        ignore_list_filename: Ignore-list file name, relative to the search root.
        ignore_list_header: Comment line marking the block managed by forceclean.
        comment_prefix: Prefix of comment lines in the ignore-list file.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    target_name: str = DEFAULT_TARGET_NAME
    criterion_marker: str = DEFAULT_CRITERION_MARKER
    ignored_dirs: frozenset[str] = DEFAULT_IGNORED_DIRS
    ignore_list_filename: str = DEFAULT_IGNORE_LIST_FILENAME
    ignore_list_header: str = DEFAULT_IGNORE_LIST_HEADER
    comment_prefix: str = DEFAULT_COMMENT_PREFIX

    @field_validator("target_name", "ignore_list_filename")
    @classmethod
    def validate_plain_name(cls, v: str, info: Any) -> str:
        """Validate that a name is a single, non-empty path component."""
        if not v.strip():
            msg = f"{info.field_name} cannot be empty"
            raise ValueError(msg)
        if "/" in v or "\\" in v:
            msg = f"{info.field_name} must be a plain name, got '{v}'"
            raise ValueError(msg)
        return v

    @field_validator("criterion_marker", "comment_prefix")
    @classmethod
    def validate_not_empty(cls, v: str, info: Any) -> str:
        """Validate that a marker string is not empty."""
        if not v:
            msg = f"{info.field_name} cannot be empty"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def validate_header_is_comment(self) -> "CleanupConfig":
        """Validate that the managed header is itself a comment line."""
        if not self.ignore_list_header.strip().startswith(self.comment_prefix):
            msg = (
                f"ignore_list_header must start with the comment prefix "
                f"'{self.comment_prefix}'"
            )
            raise ValueError(msg)
        return self


def load_toml_section(path: Path, section: str) -> dict[str, object] | None:
    """Load a single table from a TOML file.

    Args:
        path: Path to the TOML file.
        section: Name of the top-level table to extract.

    Returns:
        The table contents (empty if the table is absent), or None if the
        file does not exist.

    Raises:
        ConfigError: If the file cannot be read or parsed, or the section
            is not a table.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        msg = f"Failed to parse {path}: {e}"
        raise ConfigError(msg) from e
    except OSError as e:
        msg = f"Failed to read {path}: {e}"
        raise ConfigError(msg) from e

    raw: object = data.get(section, {})
    if not isinstance(raw, dict):
        msg = f"Invalid '{section}' section in {path}"
        raise ConfigError(msg)
    return cast(dict[str, object], raw)


def load_config(path: Path | None = None) -> CleanupConfig:
    """Load the cleanup configuration.

    An explicit path must exist and be valid. Without one, the user config
    file is used when present; problems with it are logged and the
    defaults are returned.

    Args:
        path: Optional explicit configuration file.

    Returns:
        Validated CleanupConfig.

    Raises:
        ConfigError: If an explicit configuration file is missing or invalid.
    """
    if path is not None:
        values = load_toml_section(path, "cleanup")
        if values is None:
            msg = f"Config file not found: {path}"
            raise ConfigError(msg)
        return _build_config(values, path)

    user_path = get_config_path()
    try:
        values = load_toml_section(user_path, "cleanup")
        if values is None:
            return CleanupConfig()
        logger.debug("Loaded cleanup settings from %s", user_path)
        return _build_config(values, user_path)
    except ConfigError as e:
        logger.warning("Ignoring user config, using defaults: %s", e)
        return CleanupConfig()


def _build_config(values: dict[str, object], path: Path) -> CleanupConfig:
    """Validate raw TOML values into a CleanupConfig."""
    try:
        return CleanupConfig.model_validate(values)
    except ValidationError as e:
        msg = f"Invalid configuration in {path}: {e}"
        raise ConfigError(msg) from e
