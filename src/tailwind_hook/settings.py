"""Ambient configuration read from the build environment.

The host build decides debug vs. release; this package only reads the
outcome from ``TAILWIND_HOOK_BUILD_MODE``.  The binary name and project
root can be overridden the same way, mostly for CI images that ship the
standalone CLI under a different name.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path

from tailwind_hook.core.models import BuildMode
from tailwind_hook.exceptions import SettingsError
from tailwind_hook.infra.tailwind_detector import DEFAULT_BINARY

ENV_BUILD_MODE = "TAILWIND_HOOK_BUILD_MODE"
ENV_BINARY = "TAILWIND_HOOK_BINARY"
ENV_PROJECT_ROOT = "TAILWIND_HOOK_PROJECT_ROOT"


def parse_build_mode(value: str | None) -> BuildMode:
    """Map an environment value to a :class:`BuildMode`.

    Unset or blank means debug.
    """
    if value is None or not value.strip():
        return BuildMode.DEBUG
    normalized = value.strip().lower()
    for mode in BuildMode:
        if mode.value == normalized:
            return mode
    choices = ", ".join(mode.value for mode in BuildMode)
    raise SettingsError(
        f"Invalid {ENV_BUILD_MODE} value: {value!r}",
        hint=f"Use one of: {choices}.",
    )


@dataclass(frozen=True, slots=True)
class HookSettings:
    """Immutable snapshot of the ambient configuration."""

    build_mode: BuildMode = BuildMode.DEBUG
    binary: str = DEFAULT_BINARY
    project_root: Path = field(default_factory=Path.cwd)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> HookSettings:
        """Build settings from *environ* (``os.environ`` by default)."""
        env = os.environ if environ is None else environ
        binary = env.get(ENV_BINARY, "").strip() or DEFAULT_BINARY
        root = env.get(ENV_PROJECT_ROOT, "").strip()
        return cls(
            build_mode=parse_build_mode(env.get(ENV_BUILD_MODE)),
            binary=binary,
            project_root=Path(root) if root else Path.cwd(),
        )
