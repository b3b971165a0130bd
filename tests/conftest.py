"""Pytest configuration and fixtures for adrtool tests."""

from pathlib import Path

import pytest
from click.testing import CliRunner

INIT_TEMPLATE = "# Architecture Decision Records\n"
RECORD_TEMPLATE = "# Title\n\n## Status\n\nProposed\n"


@pytest.fixture
def cli_runner():
    """Create a Click test runner."""
    return CliRunner()


@pytest.fixture
def workspace(tmp_path: Path, monkeypatch) -> Path:
    """An empty working directory with the bundled templates under resources/.

    The cwd is switched to it for the duration of the test, since both the
    marker file and the templates are resolved against the cwd.
    """
    resources = tmp_path / "resources"
    resources.mkdir()
    (resources / "init.md").write_text(INIT_TEMPLATE)
    (resources / "template.md").write_text(RECORD_TEMPLATE)
    monkeypatch.chdir(tmp_path)
    return tmp_path
