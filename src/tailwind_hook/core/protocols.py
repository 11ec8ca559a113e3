"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters must satisfy.
Core code depends ONLY on these protocols, never on concrete
implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from tailwind_hook.core.models import ProcessResult


class CliRunner(Protocol):
    """Contract for running the Tailwind CLI to completion."""

    def run(self, args: Sequence[str]) -> ProcessResult:
        """Run the CLI with *args* and return its captured stderr.

        The call blocks until the process exits.  There is no timeout.

        Raises
        ------
        ProcessSpawnError
            When the binary cannot be located or spawned.
        """
        ...  # pragma: no cover


class ConfigInitializer(Protocol):
    """Contract for guaranteeing the CLI configuration file exists."""

    def ensure(self) -> bool:
        """Create the configuration file if it is absent.

        Returns ``True`` when a file was written, ``False`` when one
        already existed.

        Raises
        ------
        ConfigInitError
            When the file cannot be created or written.
        """
        ...  # pragma: no cover
