"""Plugin layer: attaches the build step to the host pipeline.

This package is the outermost layer.  It may import from ``core`` and
``infra``; no other layer imports from ``plugin``.
"""

from tailwind_hook.plugin.registry import Phase, PluginActions, Registration
from tailwind_hook.plugin.tailwind import (
    DEFAULT_PLUGIN_NAME,
    TailwindPlugin,
    get_tailwind_plugin,
    run_build_step,
)

__all__: list[str] = [
    "DEFAULT_PLUGIN_NAME",
    "Phase",
    "PluginActions",
    "Registration",
    "TailwindPlugin",
    "get_tailwind_plugin",
    "run_build_step",
]
