"""Shared fixtures for qa-artifacts tests."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path) -> Iterator[Path]:
    """Point config lookups at an empty directory so user files never leak in."""
    config_root = tmp_path / "config-home"
    with (
        patch(
            "qa_artifacts.config.loader.get_home_config_path",
            return_value=config_root / "home" / "config.yaml",
        ),
        patch(
            "qa_artifacts.config.loader.get_local_config_path",
            return_value=config_root / "local" / "config.yaml",
        ),
    ):
        yield config_root


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty working directory."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd
