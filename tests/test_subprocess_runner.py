"""Tests for the CLI runner (infra/subprocess_runner.py).

``subprocess.run`` and ``shutil.which`` are mocked — the real Tailwind
CLI is never spawned.
"""

from __future__ import annotations

import subprocess
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from tailwind_hook.core.models import ProcessResult
from tailwind_hook.exceptions import ProcessSpawnError
from tailwind_hook.infra.subprocess_runner import SubprocessCliRunner

WHICH = "tailwind_hook.infra.tailwind_detector.shutil.which"
RUN = "tailwind_hook.infra.subprocess_runner.subprocess.run"


def _completed(stderr: str | None = "", returncode: int = 0) -> MagicMock:
    completed = MagicMock(spec=subprocess.CompletedProcess)
    completed.stderr = stderr
    completed.returncode = returncode
    return completed


class TestSubprocessCliRunner:
    @patch(RUN)
    @patch(WHICH, return_value="/usr/local/bin/tailwindcli")
    def test_spawns_binary_with_args(self, _which: object, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed("Done in 120ms")
        runner = SubprocessCliRunner()

        runner.run(["build", "in.css", "-o", "out.css"])

        command = mock_run.call_args.args[0]
        assert Path(command[0]).name == "tailwindcli"
        assert command[1:] == ["build", "in.css", "-o", "out.css"]

    @patch(RUN)
    @patch(WHICH, return_value="/usr/local/bin/tailwindcli")
    def test_captures_stderr_as_text(self, _which: object, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed("Done in 120ms", returncode=0)

        result = SubprocessCliRunner().run(["build"])

        assert result == ProcessResult(stderr="Done in 120ms", returncode=0)
        kwargs = mock_run.call_args.kwargs
        assert kwargs["capture_output"] is True
        assert kwargs["encoding"] == "utf-8"
        assert kwargs["errors"] == "replace"
        assert kwargs["check"] is False
        assert "timeout" not in kwargs

    @patch(RUN)
    @patch(WHICH, return_value="/usr/local/bin/tailwindcli")
    def test_nonzero_exit_is_not_an_error(self, _which: object, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed("", returncode=1)

        result = SubprocessCliRunner().run(["build"])

        assert result.returncode == 1
        assert result.stderr == ""

    @patch(RUN)
    @patch(WHICH, return_value="/usr/local/bin/tailwindcli")
    def test_missing_stderr_normalised(self, _which: object, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed(None)
        assert SubprocessCliRunner().run(["build"]).stderr == ""

    @patch(RUN)
    @patch(WHICH, return_value="/usr/local/bin/tailwindcli")
    def test_runs_in_project_root(
        self, _which: object, mock_run: MagicMock, tmp_path: Path
    ) -> None:
        mock_run.return_value = _completed()
        SubprocessCliRunner(cwd=tmp_path).run(["build"])
        assert mock_run.call_args.kwargs["cwd"] == tmp_path

    @patch(RUN)
    @patch(WHICH, return_value=None)
    def test_missing_binary_raises_before_spawn(
        self, _which: object, mock_run: MagicMock
    ) -> None:
        with pytest.raises(ProcessSpawnError, match="must be present") as exc_info:
            SubprocessCliRunner().run(["build"])
        assert exc_info.value.hint is not None
        mock_run.assert_not_called()

    @patch(RUN, side_effect=FileNotFoundError("vanished"))
    @patch(WHICH, return_value="/usr/local/bin/tailwindcli")
    def test_binary_vanishing_raises_spawn_error(
        self, _which: object, _run: object
    ) -> None:
        with pytest.raises(ProcessSpawnError, match="must be present") as exc_info:
            SubprocessCliRunner().run(["build"])
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    @patch(RUN, side_effect=PermissionError("not executable"))
    @patch(WHICH, return_value="/usr/local/bin/tailwindcli")
    def test_os_error_raises_spawn_error(self, _which: object, _run: object) -> None:
        with pytest.raises(ProcessSpawnError, match="not executable") as exc_info:
            SubprocessCliRunner().run(["build"])
        assert exc_info.value.hint is not None

    @patch(RUN)
    @patch(WHICH, return_value="/opt/bin/tailwindcss")
    def test_custom_binary_name(self, mock_which: MagicMock, mock_run: MagicMock) -> None:
        mock_run.return_value = _completed()
        SubprocessCliRunner("tailwindcss").run(["build"])
        mock_which.assert_called_with("tailwindcss")


class TestLookupName:
    def test_bare_name_uses_path(self, tmp_path: Path) -> None:
        assert SubprocessCliRunner("tailwindcli", cwd=tmp_path).lookup_name == "tailwindcli"

    def test_relative_path_resolved_against_cwd(self, tmp_path: Path) -> None:
        runner = SubprocessCliRunner("node_modules/.bin/tailwindcss", cwd=tmp_path)
        assert runner.lookup_name == str(tmp_path / "node_modules/.bin/tailwindcss")

    def test_dot_relative_path_resolved_against_cwd(self, tmp_path: Path) -> None:
        runner = SubprocessCliRunner("./tailwindcli", cwd=tmp_path)
        assert Path(runner.lookup_name) == tmp_path / "tailwindcli"

    def test_absolute_path_unchanged(self, tmp_path: Path) -> None:
        runner = SubprocessCliRunner("/opt/bin/tailwindcss", cwd=tmp_path)
        assert runner.lookup_name == "/opt/bin/tailwindcss"

    def test_relative_path_without_cwd_unchanged(self) -> None:
        runner = SubprocessCliRunner("node_modules/.bin/tailwindcss")
        assert runner.lookup_name == "node_modules/.bin/tailwindcss"

    @patch(RUN)
    @patch(WHICH, return_value="/proj/node_modules/.bin/tailwindcss")
    def test_run_looks_up_project_relative_binary(
        self, mock_which: MagicMock, mock_run: MagicMock, tmp_path: Path
    ) -> None:
        mock_run.return_value = _completed()
        SubprocessCliRunner("node_modules/.bin/tailwindcss", cwd=tmp_path).run(["build"])
        mock_which.assert_called_with(str(tmp_path / "node_modules/.bin/tailwindcss"))
