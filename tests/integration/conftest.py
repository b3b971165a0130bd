"""Integration test fixtures for adrtool.

These fixtures build a working directory holding the templates shipped in
resources/, so commands run end to end against the real filesystem.
"""

import shutil
from pathlib import Path
from typing import Generator

import pytest

REPO_RESOURCES = Path(__file__).resolve().parents[2] / "resources"


@pytest.fixture
def project_dir(tmp_path: Path, monkeypatch) -> Generator[Path, None, None]:
    """A project directory with the bundled templates, used as the cwd."""
    project = tmp_path / "project"
    shutil.copytree(REPO_RESOURCES, project / "resources")
    monkeypatch.chdir(project)
    yield project
