"""Infrastructure layer: filesystem and process integration.

Every raw ``OSError`` must be caught here and re-raised as a
:class:`~tailwind_hook.exceptions.TailwindHookError` subclass.

Rules
-----
* No imports from ``plugin``.
* Must expose clean, typed interfaces consumed by the core layer.
"""

from tailwind_hook.infra.config_initializer import (
    CONFIG_FILENAME,
    FileConfigInitializer,
    ensure_config,
    load_default_config,
)
from tailwind_hook.infra.subprocess_runner import SubprocessCliRunner
from tailwind_hook.infra.tailwind_detector import (
    DEFAULT_BINARY,
    TailwindStatus,
    detect_tailwind_cli,
    require_tailwind_cli,
)

__all__: list[str] = [
    "CONFIG_FILENAME",
    "DEFAULT_BINARY",
    "FileConfigInitializer",
    "SubprocessCliRunner",
    "TailwindStatus",
    "detect_tailwind_cli",
    "ensure_config",
    "load_default_config",
    "require_tailwind_cli",
]
