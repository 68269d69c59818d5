"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path

import pytest
from forceclean.core.config import CleanupConfig

from tests.helpers import ACTIONABLE_XML, COMPLIANT_XML


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at an empty directory so user config is never read."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def config() -> CleanupConfig:
    """Default cleanup configuration."""
    return CleanupConfig()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project with one target directory holding a compliant and an actionable file.

    Layout::

        proj/a/dataSourceObjects/x.xml   (contains the marker)
        proj/a/dataSourceObjects/y.xml   (no marker)
    """
    root = tmp_path / "proj"
    target = root / "a" / "dataSourceObjects"
    target.mkdir(parents=True)
    (target / "x.xml").write_text(COMPLIANT_XML)
    (target / "y.xml").write_text(ACTIONABLE_XML)
    return root
