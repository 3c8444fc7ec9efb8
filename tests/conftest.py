"""Shared pytest fixtures for enskit tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from enskit.config.settings import EnsSettings
from enskit.services.names import NameService


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> EnsSettings:
    """Default settings with no config file in reach."""
    monkeypatch.delenv("ENSKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
    return EnsSettings.from_cli(search_root=tmp_path)


@pytest.fixture
def names(settings: EnsSettings) -> NameService:
    return NameService(settings)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run CLI tests from an empty temp dir so no enskit.toml is discovered.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv("ENSKIT_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)
