"""Custom exception hierarchy for tailwind-build-hook.

Every failure raised by a build step inherits from
:class:`TailwindHookError`.  Raw OS exceptions (``OSError`` from the
filesystem or from ``subprocess``) must NEVER propagate beyond the
infrastructure layer. They are caught there and re-raised as a typed
subclass defined here.

All of these errors are fatal: the host pipeline treats a raised hook
error exactly like a failed build.  Nothing here is retried.

Hierarchy
---------
TailwindHookError
├── ConfigInitError
├── ProcessSpawnError
├── CliReportedError
├── SettingsError
└── BuildStepError
"""

from __future__ import annotations


class TailwindHookError(Exception):
    """Base exception for all tailwind-build-hook errors.

    The host pipeline surfaces ``str(exc)`` to the user, so the message
    must be self-contained.  :attr:`hint` carries optional guidance.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration file ----------------------------------------------------

class ConfigInitError(TailwindHookError):
    """Raised when the default ``tailwind.config.js`` cannot be written."""


# --- External process ------------------------------------------------------

class ProcessSpawnError(TailwindHookError):
    """Raised when the Tailwind CLI binary is missing or cannot be spawned."""


class CliReportedError(TailwindHookError):
    """Raised when the Tailwind CLI reports an error on stderr.

    The message is the captured stderr text, verbatim.
    """


# --- Ambient configuration -------------------------------------------------

class SettingsError(TailwindHookError):
    """Raised when an environment setting holds an unusable value."""


# --- Orchestration ---------------------------------------------------------

class BuildStepError(TailwindHookError):
    """Raised when a build step fails with a non-domain exception."""
