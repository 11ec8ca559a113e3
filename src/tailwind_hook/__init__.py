"""tailwind-build-hook: run the Tailwind CLI as a static-site build hook.

Before build and before export the hook makes sure a
``tailwind.config.js`` exists, runs ``tailwindcli build`` and fails the
phase when the CLI reports an error.
"""

from tailwind_hook.core.models import BuildMode, BuildOptions
from tailwind_hook.plugin.tailwind import get_tailwind_plugin, run_build_step
from tailwind_hook.version import __version__

__all__: list[str] = [
    "BuildMode",
    "BuildOptions",
    "__version__",
    "get_tailwind_plugin",
    "run_build_step",
]
