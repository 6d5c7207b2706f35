"""Project scaffolding for `nv init`."""

from anvil.scaffold.errors import InitAborted, InitError, StepFailedError
from anvil.scaffold.pipeline import InitContext, InitPipeline, InitReport, PipelineState
from anvil.scaffold.steps import StepOutcome

__all__ = [
    "InitAborted",
    "InitContext",
    "InitError",
    "InitPipeline",
    "InitReport",
    "PipelineState",
    "StepFailedError",
    "StepOutcome",
]
