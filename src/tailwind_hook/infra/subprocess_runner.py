"""``subprocess`` backed implementation of :class:`~tailwind_hook.core.protocols.CliRunner`.

This module is the **only** place in the codebase that spawns the
Tailwind CLI.  Spawn failures are caught here and re-raised as
:class:`~tailwind_hook.exceptions.ProcessSpawnError`.
"""

from __future__ import annotations

import os
import subprocess
from collections.abc import Sequence
from pathlib import Path

from tailwind_hook.core.models import ProcessResult
from tailwind_hook.exceptions import ProcessSpawnError
from tailwind_hook.infra.tailwind_detector import (
    DEFAULT_BINARY,
    detect_tailwind_cli,
    missing_binary_hint,
    require_tailwind_cli,
)
from tailwind_hook.log import get_logger

logger = get_logger(__name__)


class SubprocessCliRunner:
    """Runs the Tailwind CLI synchronously and captures its stderr.

    Parameters
    ----------
    binary:
        Executable name looked up on PATH, or a path to it.  A relative
        path (e.g. ``node_modules/.bin/tailwindcss``) is resolved against
        *cwd*, the directory the CLI runs in.
    cwd:
        Working directory for the process, normally the project root.
        ``None`` inherits the current directory.
    """

    def __init__(
        self,
        binary: str = DEFAULT_BINARY,
        cwd: Path | str | None = None,
    ) -> None:
        self.binary: str = binary
        self.cwd: Path | None = Path(cwd) if cwd is not None else None

    @property
    def lookup_name(self) -> str:
        """The name or path handed to :func:`shutil.which`."""
        candidate = Path(self.binary)
        if self.cwd is None or candidate.is_absolute() or not os.path.dirname(self.binary):
            return self.binary
        return str(self.cwd / candidate)

    def run(self, args: Sequence[str]) -> ProcessResult:
        """Run the CLI with *args* and block until it exits.

        stdout is captured and discarded.  stderr is decoded as UTF-8
        with undecodable bytes replaced.

        Raises
        ------
        ProcessSpawnError
            When the binary is missing or the OS refuses to start it.
        """
        executable = require_tailwind_cli(self.lookup_name)
        command = [str(executable), *args]
        logger.debug("Spawning %s", command)

        try:
            completed = subprocess.run(
                command,
                cwd=self.cwd,
                capture_output=True,
                encoding="utf-8",
                errors="replace",
                check=False,
            )
        except FileNotFoundError as exc:
            raise ProcessSpawnError(
                f"Failed to run Tailwind CLI '{self.binary}': {exc}. "
                "It must be present on PATH in the build environment.",
                hint=missing_binary_hint(detect_tailwind_cli(self.lookup_name)),
            ) from exc
        except OSError as exc:
            raise ProcessSpawnError(
                f"Failed to run Tailwind CLI '{self.binary}': {exc}",
                hint="Check that the binary is executable for the build user.",
            ) from exc

        return ProcessResult(
            stderr=completed.stderr or "",
            returncode=completed.returncode,
        )
