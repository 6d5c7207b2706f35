"""Ordered init pipeline for `nv init`.

Runs the directory, git, manifest, config, template and key steps
strictly in sequence. The pipeline advances one state per successful
step and stops at the first failure; steps that already completed are
left in place, so a failed run can simply be repeated.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any

import typer

from anvil.cli.output import InitLog
from anvil.execution.command import CommandError, CommandRunner, SubprocessRunner
from anvil.models.config import CLISettings
from anvil.scaffold import steps
from anvil.scaffold.errors import InitAborted, InitError, StepFailedError
from anvil.scaffold.steps import StepOutcome


class PipelineState(str, Enum):
    NOT_STARTED = "not_started"
    DIRECTORY = "directory"
    VCS = "vcs"
    MANIFEST = "manifest"
    DEV_CONFIG = "dev_config"
    PROD_CONFIG = "prod_config"
    TEMPLATES = "templates"
    KEYS = "keys"
    DONE = "done"
    ABORTED = "aborted"

    @property
    def label(self) -> str:
        """Human-readable state name for error messages."""
        return _STATE_LABELS[self]


_STATE_LABELS: dict[PipelineState, str] = {
    PipelineState.NOT_STARTED: "Start",
    PipelineState.DIRECTORY: "Directory",
    PipelineState.VCS: "Git",
    PipelineState.MANIFEST: "package.json",
    PipelineState.DEV_CONFIG: "Development config",
    PipelineState.PROD_CONFIG: "Production config",
    PipelineState.TEMPLATES: "Templates",
    PipelineState.KEYS: "RSA key pair",
    PipelineState.DONE: "Done",
    PipelineState.ABORTED: "Aborted",
}


@dataclass
class InitContext:
    """Run-scoped state shared by every step.

    All paths are resolved against base_dir; the process working
    directory is never changed.
    """

    directory: str
    base_dir: Path
    log: InitLog
    runner: CommandRunner
    settings: CLISettings
    confirm: Callable[[str], bool]
    flags: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def create(
        cls,
        directory: str = ".",
        *,
        flags: dict[str, Any] | None = None,
        log: InitLog | None = None,
        runner: CommandRunner | None = None,
        settings: CLISettings | None = None,
        confirm: Callable[[str], bool] | None = None,
    ) -> InitContext:
        """Build a context with real collaborators for anything not given."""
        return cls(
            directory=directory,
            base_dir=Path(directory).resolve(),
            log=log or InitLog(),
            runner=runner or SubprocessRunner(),
            settings=settings or CLISettings(),
            confirm=confirm or (lambda message: typer.confirm(message, default=False)),
            flags=dict(flags or {}),
        )


Step = Callable[[InitContext], StepOutcome]

DEFAULT_STEPS: list[tuple[PipelineState, Step]] = [
    (PipelineState.DIRECTORY, steps.init_directory),
    (PipelineState.VCS, steps.init_git),
    (PipelineState.MANIFEST, steps.init_manifest),
    (PipelineState.DEV_CONFIG, steps.init_development_config),
    (PipelineState.PROD_CONFIG, steps.init_production_config),
    (PipelineState.TEMPLATES, steps.init_templates),
    (PipelineState.KEYS, steps.init_keys),
]


@dataclass
class InitReport:
    """Final state of a pipeline run and the outcome of each completed step."""

    state: PipelineState
    outcomes: list[tuple[PipelineState, StepOutcome]] = field(default_factory=list)

    @property
    def generated(self) -> list[PipelineState]:
        return [state for state, outcome in self.outcomes if outcome is StepOutcome.GENERATED]


class InitPipeline:
    """Drives the init steps in order, halting on the first error.

    Args:
        context: Shared context passed to every step.
        steps: Ordered (state, step) pairs. Defaults to the full
            init sequence.
    """

    def __init__(
        self,
        context: InitContext,
        steps: list[tuple[PipelineState, Step]] | None = None,
    ) -> None:
        self.context = context
        self.steps = list(steps) if steps is not None else list(DEFAULT_STEPS)
        self.state = PipelineState.NOT_STARTED
        self.outcomes: list[tuple[PipelineState, StepOutcome]] = []

    def run(self) -> InitReport:
        """Execute every step and print the DONE banner.

        Returns:
            InitReport with state DONE and one outcome per step.

        Raises:
            InitAborted: If the user declined to reuse a non-empty
                directory. The pipeline state becomes ABORTED.
            StepFailedError: If any step raised. Later steps are not run.
        """
        log = self.context.log
        log.br()
        log.header("Initializing your new Anvil Connect instance.")
        log.br()

        for state, step in self.steps:
            self.state = state
            try:
                outcome = step(self.context)
            except InitAborted:
                self.state = PipelineState.ABORTED
                raise
            except (OSError, CommandError, InitError) as exc:
                raise StepFailedError(state, exc) from exc
            self.outcomes.append((state, outcome))

        self.state = PipelineState.DONE
        log.br()
        log.header("DONE")
        return InitReport(state=self.state, outcomes=list(self.outcomes))
