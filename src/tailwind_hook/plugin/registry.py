"""Host pipeline extension points.

A minimal model of the two build phases the hook attaches to.  Each
registration carries the options value it was configured with, so the
callback receives its own options already typed; no payload downcasting
is involved.  Firing a phase runs every registration for it in order,
and the first exception aborts the phase.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

OptionsT = TypeVar("OptionsT")


class Phase(enum.Enum):
    """Pipeline phases a plugin can hook into."""

    BEFORE_BUILD = "before_build"
    BEFORE_EXPORT = "before_export"


@dataclass(frozen=True)
class Registration(Generic[OptionsT]):
    plugin_name: str
    callback: Callable[[OptionsT], None]
    options: OptionsT


class PluginActions(Generic[OptionsT]):
    """Per-phase registry of plugin callbacks."""

    def __init__(self) -> None:
        self._registrations: dict[Phase, list[Registration[OptionsT]]] = {
            phase: [] for phase in Phase
        }

    def register(
        self,
        phase: Phase,
        plugin_name: str,
        callback: Callable[[OptionsT], None],
        options: OptionsT,
    ) -> None:
        self._registrations[phase].append(Registration(plugin_name, callback, options))

    def registrations(self, phase: Phase) -> list[Registration[OptionsT]]:
        return list(self._registrations[phase])

    def fire(self, phase: Phase) -> None:
        """Run every callback registered for *phase* with its options."""
        for registration in self._registrations[phase]:
            registration.callback(registration.options)
