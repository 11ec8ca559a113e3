"""Core / service layer: pure decision logic for the build step.

Rules
-----
* No filesystem or subprocess access.
* No imports from ``infra`` or ``plugin``.
* All functions must be fully typed and deterministic.
"""

from tailwind_hook.core.arguments import build_cli_args
from tailwind_hook.core.build_step import BuildStepService
from tailwind_hook.core.classifier import classify, raise_for_classification
from tailwind_hook.core.models import (
    BuildMode,
    BuildOptions,
    Classification,
    ProcessResult,
    StepState,
)
from tailwind_hook.core.protocols import CliRunner, ConfigInitializer

__all__: list[str] = [
    "BuildMode",
    "BuildOptions",
    "BuildStepService",
    "Classification",
    "CliRunner",
    "ConfigInitializer",
    "ProcessResult",
    "StepState",
    "build_cli_args",
    "classify",
    "raise_for_classification",
]
