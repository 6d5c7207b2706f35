"""Child process invocation for external tools (git, openssl).

Wraps subprocess.run behind a small runner interface so steps that
shell out can be exercised with a fake runner in tests. Output is
always captured as text; stdout is what callers write to disk.
"""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol


@dataclass
class CommandResult:
    """Captured output of a finished child process."""

    args: list[str]
    returncode: int
    stdout: str = ""
    stderr: str = ""


class CommandError(Exception):
    """Raised when a child process cannot be spawned or exits non-zero."""

    def __init__(
        self,
        args: list[str],
        returncode: int | None = None,
        stdout: str = "",
        stderr: str = "",
    ) -> None:
        self.command = list(args)
        self.returncode = returncode
        self.stdout = stdout
        self.stderr = stderr
        cmd_str = " ".join(self.command)
        if returncode is None:
            message = f"Could not run command: {cmd_str}"
        else:
            message = f"Command failed with exit code {returncode}: {cmd_str}"
        if stderr.strip():
            message += f"\n{stderr.strip()}"
        super().__init__(message)


class CommandRunner(Protocol):
    """Anything that can run a command and return its captured output."""

    def run(self, args: list[str], cwd: Path | None = None) -> CommandResult: ...


class SubprocessRunner:
    """Run commands for real with subprocess.run.

    Non-zero exit codes and spawn failures (missing binary, permission
    denied) are both raised as CommandError.
    """

    def run(self, args: list[str], cwd: Path | None = None) -> CommandResult:
        try:
            completed = subprocess.run(
                args,
                cwd=str(cwd) if cwd is not None else None,
                capture_output=True,
                text=True,
                check=False,
            )
        except OSError as exc:
            raise CommandError(args, stderr=str(exc)) from exc

        if completed.returncode != 0:
            raise CommandError(
                args,
                returncode=completed.returncode,
                stdout=completed.stdout,
                stderr=completed.stderr,
            )

        return CommandResult(
            args=list(args),
            returncode=completed.returncode,
            stdout=completed.stdout,
            stderr=completed.stderr,
        )
