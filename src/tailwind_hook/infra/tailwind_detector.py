"""Infrastructure: Tailwind CLI detection and platform guidance.

This module locates the Tailwind CLI binary on the system PATH and
provides installation guidance when it is missing.

Rules
-----
* Detection via :func:`shutil.which` only, no subprocess.
* No automatic installation: the binary is a build-environment
  precondition.
* No ``print()``; callers decide how to surface the status.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path

from tailwind_hook.exceptions import ProcessSpawnError

DEFAULT_BINARY = "tailwindcli"


# ---------------------------------------------------------------------------
# Detection result
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TailwindStatus:
    """Result of looking up the Tailwind CLI on PATH.

    Attributes
    ----------
    binary : str
        The executable name that was looked up.
    found : bool
        Whether the binary was located on PATH.
    path : Path | None
        Absolute path to the binary, or ``None``.
    version_hint : str
        Human-readable status string (``"found at …"`` or ``"not found"``).
    install_commands : tuple[str, ...]
        Suggested ways to obtain the binary on the current platform.
        Empty when the binary is already present.
    """

    binary: str
    found: bool
    path: Path | None
    version_hint: str
    install_commands: tuple[str, ...]


# ---------------------------------------------------------------------------
# Detection logic
# ---------------------------------------------------------------------------

def detect_tailwind_cli(binary: str = DEFAULT_BINARY) -> TailwindStatus:
    """Search PATH for *binary*.

    Returns a :class:`TailwindStatus` whether or not the binary exists;
    the caller decides whether to abort.
    """
    result = shutil.which(binary)

    if result is not None:
        resolved = Path(result).resolve()
        return TailwindStatus(
            binary=binary,
            found=True,
            path=resolved,
            version_hint=f"found at {resolved}",
            install_commands=(),
        )

    return TailwindStatus(
        binary=binary,
        found=False,
        path=None,
        version_hint="not found",
        install_commands=_platform_install_commands(binary),
    )


def require_tailwind_cli(binary: str = DEFAULT_BINARY) -> Path:
    """Locate *binary* or raise :class:`ProcessSpawnError`."""
    status = detect_tailwind_cli(binary)
    if not status.found or status.path is None:
        raise ProcessSpawnError(
            f"Tailwind CLI '{binary}' was not found. "
            "It must be present on PATH in the build environment.",
            hint=missing_binary_hint(status),
        )
    return status.path


def missing_binary_hint(status: TailwindStatus) -> str | None:
    """Render install guidance for a missing binary, if any is known."""
    if not status.install_commands:
        return None
    lines = [f"Install the Tailwind standalone CLI as '{status.binary}', e.g.:"]
    lines.extend(f"  {cmd}" for cmd in status.install_commands)
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# Platform-specific install guidance
# ---------------------------------------------------------------------------

_RELEASES = "https://github.com/tailwindlabs/tailwindcss/releases/latest/download"


def _platform_install_commands(binary: str) -> tuple[str, ...]:
    """Return install commands appropriate for the current OS."""
    system = platform.system().lower()
    arch = "arm64" if platform.machine().lower() in ("arm64", "aarch64") else "x64"
    if system == "windows":
        return (
            f"curl -sLo {binary}.exe {_RELEASES}/tailwindcss-windows-x64.exe",
        )
    if system == "linux":
        return (
            f"curl -sLo {binary} {_RELEASES}/tailwindcss-linux-{arch}",
            f"chmod +x {binary} && sudo mv {binary} /usr/local/bin/",
        )
    if system == "darwin":
        return (
            f"curl -sLo {binary} {_RELEASES}/tailwindcss-macos-{arch}",
            f"chmod +x {binary} && sudo mv {binary} /usr/local/bin/",
        )
    return (f"Download a standalone build from {_RELEASES}",)
