"""Core build-step service: config bootstrap, CLI run, failure check.

The service drives one hook invocation through the three components in
order.  Its collaborators are injected at construction time:

* a :class:`~tailwind_hook.core.protocols.ConfigInitializer`,
* a :class:`~tailwind_hook.core.protocols.CliRunner`,
* the :class:`~tailwind_hook.core.models.BuildMode` in effect.

Guarantees
----------
* No filesystem or subprocess access of its own.
* Only :class:`~tailwind_hook.exceptions.TailwindHookError` subclasses
  escape.
* Any failure is terminal for the run; there is no retry.
"""

from __future__ import annotations

from tailwind_hook.core.arguments import build_cli_args
from tailwind_hook.core.classifier import classify, raise_for_classification
from tailwind_hook.core.models import BuildMode, BuildOptions, StepState
from tailwind_hook.core.protocols import CliRunner, ConfigInitializer
from tailwind_hook.exceptions import BuildStepError, TailwindHookError
from tailwind_hook.log import get_logger

logger = get_logger(__name__)


class BuildStepService:
    """Runs the Tailwind build step for one pipeline phase.

    The same instance is reused for both phases; every :meth:`run`
    starts again from :attr:`StepState.NOT_STARTED`.
    """

    def __init__(
        self,
        runner: CliRunner,
        config_initializer: ConfigInitializer,
        build_mode: BuildMode = BuildMode.DEBUG,
    ) -> None:
        self._runner: CliRunner = runner
        self._config_initializer: ConfigInitializer = config_initializer
        self._build_mode: BuildMode = build_mode
        self.state: StepState = StepState.NOT_STARTED

    @property
    def build_mode(self) -> BuildMode:
        return self._build_mode

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def run(self, options: BuildOptions) -> None:
        """Execute one build step for *options*.

        Raises
        ------
        ConfigInitError
            When the default configuration cannot be written.
        ProcessSpawnError
            When the CLI binary is missing or cannot be spawned.
        CliReportedError
            When the CLI reports an error on stderr.
        BuildStepError
            When a collaborator fails with a non-domain exception.
        """
        self.state = StepState.NOT_STARTED
        try:
            self._run(options)
        except TailwindHookError:
            self.state = StepState.ABORTED
            raise
        except Exception as exc:
            self.state = StepState.ABORTED
            raise BuildStepError(
                f"Unexpected error during Tailwind build step: {exc}",
            ) from exc
        self.state = StepState.SUCCEEDED

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def _run(self, options: BuildOptions) -> None:
        self._config_initializer.ensure()
        self.state = StepState.CONFIG_ENSURED

        args = build_cli_args(options, self._build_mode.is_release)
        logger.info(
            "Running Tailwind build (%s): %s -> %s",
            self._build_mode.value,
            options.in_file,
            options.out_file,
        )
        self.state = StepState.PROCESS_SPAWNED
        result = self._runner.run(args)
        self.state = StepState.OUTPUT_CAPTURED
        logger.debug("Tailwind CLI exited with status %d", result.returncode)

        classification = classify(result.stderr)
        if not classification.succeeded:
            logger.error("Tailwind CLI reported an error")
        raise_for_classification(classification)
