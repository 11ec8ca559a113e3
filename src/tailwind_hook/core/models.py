"""Domain models for tailwind-build-hook.

All models are **frozen** dataclasses or enums, immutable values with
no behaviour beyond data access.  They carry zero I/O and no
dependencies on external packages.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass


# ---------------------------------------------------------------------------
# Caller-supplied options
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class BuildOptions:
    """Input and output paths for the Tailwind CLI.

    Both paths are interpreted relative to the project root.

    ``out_file`` must not live inside a directory the host pipeline
    watches for source changes (e.g. ``static/``), or every CLI run
    retriggers the build.  Put it under ``dist/`` and serve it through a
    static alias instead.
    """

    in_file: str
    """Path to the input CSS file (e.g. ``src/tailwind.css``)."""

    out_file: str
    """Path of the CSS file written by the CLI (e.g. ``dist/static/tailwind.css``)."""


# ---------------------------------------------------------------------------
# Build mode
# ---------------------------------------------------------------------------

class BuildMode(enum.Enum):
    """Debug vs. optimised build, read from the ambient environment."""

    DEBUG = "debug"
    RELEASE = "release"

    @property
    def is_release(self) -> bool:
        return self is BuildMode.RELEASE


# ---------------------------------------------------------------------------
# Process outcome
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Captured output of one CLI run.

    ``returncode`` is recorded for diagnostics only; it does not take
    part in deciding whether the run failed.
    """

    stderr: str
    returncode: int


@dataclass(frozen=True, slots=True)
class Classification:
    """Verdict of the failure detector for one CLI run."""

    succeeded: bool
    message: str | None = None
    """Raw stderr text when the run failed, ``None`` on success."""

    @classmethod
    def success(cls) -> Classification:
        return cls(succeeded=True)

    @classmethod
    def failure(cls, message: str) -> Classification:
        return cls(succeeded=False, message=message)


# ---------------------------------------------------------------------------
# Build step lifecycle
# ---------------------------------------------------------------------------

class StepState(enum.Enum):
    """Progress of a single build-step invocation.

    ``NOT_STARTED → CONFIG_ENSURED → PROCESS_SPAWNED → OUTPUT_CAPTURED``
    followed by either ``SUCCEEDED`` or ``ABORTED``.  ``ABORTED`` may be
    entered from any non-terminal state and is final for that run.
    """

    NOT_STARTED = "not_started"
    CONFIG_ENSURED = "config_ensured"
    PROCESS_SPAWNED = "process_spawned"
    OUTPUT_CAPTURED = "output_captured"
    SUCCEEDED = "succeeded"
    ABORTED = "aborted"

    @property
    def is_terminal(self) -> bool:
        return self in (StepState.SUCCEEDED, StepState.ABORTED)
