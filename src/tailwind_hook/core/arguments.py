"""Argument-vector construction for the Tailwind CLI."""

from __future__ import annotations

from tailwind_hook.core.models import BuildOptions

RELEASE_FLAGS: tuple[str, ...] = ("-m", "-p")
"""Minify and purge, appended in release mode only."""


def build_cli_args(options: BuildOptions, release_mode: bool) -> list[str]:
    """Return the positional argument vector for ``tailwindcli``.

    Paths are passed through untouched: no quoting, stripping or
    normalisation, so empty strings and paths with spaces reach the CLI
    exactly as configured.
    """
    args = ["build", options.in_file, "-o", options.out_file]
    if release_mode:
        args.extend(RELEASE_FLAGS)
    return args
