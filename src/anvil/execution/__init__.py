"""Anvil execution utilities - child process invocation."""

from anvil.execution.command import CommandError, CommandResult, CommandRunner, SubprocessRunner

__all__ = [
    "CommandError",
    "CommandResult",
    "CommandRunner",
    "SubprocessRunner",
]
