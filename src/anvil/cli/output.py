"""Rich terminal output for `nv init`.

Every step reports through an InitLog: skipped artifacts print an
"already initialized" line, generated ones a "Generated" line.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape


class InitLog:
    """Console log handle passed to every init step.

    Callable for plain lines, with header/error/br helpers for the
    banners around the pipeline.

    Args:
        console: Rich Console to print to. Defaults to stdout.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console()

    def __call__(self, message: str) -> None:
        self.info(message)

    def info(self, message: str) -> None:
        self.console.print(escape(message), highlight=False)

    def header(self, message: str) -> None:
        self.console.print(f"[bold]{escape(message)}[/bold]", highlight=False)

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]{escape(message)}[/bold red]", highlight=False)

    def br(self) -> None:
        self.console.print()
