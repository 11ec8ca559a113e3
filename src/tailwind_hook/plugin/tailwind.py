"""The Tailwind plugin: runs the Tailwind CLI before build and export.

Usage::

    from tailwind_hook import BuildOptions, get_tailwind_plugin
    from tailwind_hook.plugin import PluginActions

    actions = PluginActions()
    get_tailwind_plugin(
        BuildOptions(
            in_file="src/tailwind.css",
            # Not under static/: that would trigger build loops.
            out_file="dist/static/tailwind.css",
        )
    ).register(actions)

Serve ``dist/static/tailwind.css`` through a static alias such as
``/static/tailwind.css``.
"""

from __future__ import annotations

from dataclasses import dataclass

from tailwind_hook.core.build_step import BuildStepService
from tailwind_hook.core.models import BuildOptions
from tailwind_hook.infra.config_initializer import FileConfigInitializer
from tailwind_hook.infra.subprocess_runner import SubprocessCliRunner
from tailwind_hook.log import get_logger
from tailwind_hook.plugin.registry import Phase, PluginActions
from tailwind_hook.settings import HookSettings

logger = get_logger(__name__)

DEFAULT_PLUGIN_NAME = "tailwind-plugin"

HOOK_PHASES: tuple[Phase, ...] = (Phase.BEFORE_BUILD, Phase.BEFORE_EXPORT)


def build_service(settings: HookSettings) -> BuildStepService:
    """Wire the infrastructure adapters described by *settings*."""
    return BuildStepService(
        runner=SubprocessCliRunner(settings.binary, cwd=settings.project_root),
        config_initializer=FileConfigInitializer(settings.project_root),
        build_mode=settings.build_mode,
    )


def run_build_step(
    options: BuildOptions,
    settings: HookSettings | None = None,
) -> None:
    """Run one Tailwind build step.

    *settings* defaults to a fresh read of the environment.
    """
    resolved = settings if settings is not None else HookSettings.from_env()
    build_service(resolved).run(options)


@dataclass(frozen=True)
class TailwindPlugin:
    """An immutable plugin value.

    Parameters
    ----------
    options:
        Paths handed to every build step.
    name:
        Identity under which the callbacks are registered.
    engine:
        Whether the plugin runs inside the build engine.  Outside it
        (e.g. in a client bundle context) registration is a no-op.
    settings:
        Ambient configuration.  ``None`` reads the environment each time
        a phase fires.
    """

    options: BuildOptions
    name: str = DEFAULT_PLUGIN_NAME
    engine: bool = True
    settings: HookSettings | None = None

    def register(
        self, actions: PluginActions[BuildOptions],
    ) -> PluginActions[BuildOptions]:
        """Attach the build step to both pipeline phases of *actions*."""
        if not self.engine:
            logger.debug("%s: not in engine context, no hooks registered", self.name)
            return actions
        for phase in HOOK_PHASES:
            actions.register(phase, self.name, self._on_phase, self.options)
        return actions

    def _on_phase(self, options: BuildOptions) -> None:
        run_build_step(options, self.settings)


def get_tailwind_plugin(
    options: BuildOptions,
    *,
    name: str = DEFAULT_PLUGIN_NAME,
    engine: bool = True,
    settings: HookSettings | None = None,
) -> TailwindPlugin:
    """Construct the Tailwind plugin for *options*."""
    return TailwindPlugin(options=options, name=name, engine=engine, settings=settings)
