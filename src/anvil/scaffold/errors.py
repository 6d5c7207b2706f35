"""Errors raised while initializing a deployment project."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from anvil.scaffold.pipeline import PipelineState


class InitError(Exception):
    """Base class for `nv init` failures."""


class InitAborted(InitError):
    """Raised when the user declines to initialize a non-empty directory."""

    def __init__(self, directory: str) -> None:
        self.directory = directory
        super().__init__(f"Initialization of {directory} aborted")


class StepFailedError(InitError):
    """Raised by the pipeline when a step fails.

    Wraps the underlying error together with the state the pipeline
    was in, so the CLI can say which step broke.
    """

    def __init__(self, state: PipelineState, cause: Exception) -> None:
        self.state = state
        self.cause = cause
        super().__init__(f"{state.label} step failed: {cause}")
