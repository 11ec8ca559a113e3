"""Shared pytest fixtures and configuration for the tailwind-build-hook test suite.

Guidelines
----------
* No test spawns the real Tailwind CLI.
* ``subprocess.run`` and ``shutil.which`` are mocked at the infra boundary.
* Filesystem tests use ``tmp_path`` only.
"""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from tailwind_hook.core.models import BuildOptions, ProcessResult


@pytest.fixture
def options() -> BuildOptions:
    return BuildOptions(
        in_file="src/tailwind.css",
        out_file="dist/static/tailwind.css",
    )


@pytest.fixture
def runner() -> MagicMock:
    """A ``CliRunner`` double reporting a clean run."""
    mock = MagicMock()
    mock.run.return_value = ProcessResult(stderr="Done in 120ms", returncode=0)
    return mock


@pytest.fixture
def config_initializer() -> MagicMock:
    mock = MagicMock()
    mock.ensure.return_value = False
    return mock
