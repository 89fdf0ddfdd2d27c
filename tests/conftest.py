"""Shared test fixtures for new-component tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from tests.fakes.formatter import RecordingFormatter


@pytest.fixture
def formatter() -> RecordingFormatter:
    return RecordingFormatter()


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """An empty project directory used as cwd, with an isolated home directory."""
    project = tmp_path / "project"
    home = tmp_path / "home"
    project.mkdir()
    home.mkdir()
    monkeypatch.chdir(project)
    monkeypatch.setenv("HOME", str(home))
    return project
