"""nv init CLI command for bootstrapping a deployment project.

Creates the directory, a git repository, package.json, development
and production config, server/view/static templates, and an RSA key
pair. Safe to re-run: existing artifacts are left untouched.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from anvil.cli.output import InitLog
from anvil.models.config import load_settings
from anvil.scaffold.errors import InitAborted, StepFailedError
from anvil.scaffold.pipeline import InitContext, InitPipeline

err_console = Console(stderr=True)


def init(
    directory: str = typer.Argument(".", help="Directory to initialize"),
    yes: bool = typer.Option(
        False, "--yes", "-y", help="Proceed without asking if the directory is not empty"
    ),
    config: Optional[Path] = typer.Option(
        None,
        "--config",
        "-c",
        exists=True,
        dir_okay=False,
        help="YAML file with CLI settings",
    ),
) -> None:
    """Initialize a new Anvil Connect instance.

    Every artifact is only written if it does not exist yet, so running
    init again in the same directory changes nothing.
    """
    try:
        settings = load_settings(config)
    except (ValidationError, ValueError) as exc:
        err_console.print(f"[bold red]Settings error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    log = InitLog()
    context = InitContext.create(
        directory,
        flags={"yes": yes, "config": config},
        log=log,
        settings=settings,
    )

    try:
        InitPipeline(context).run()
    except InitAborted:
        log.br()
        log.error("ABORTED")
        raise typer.Exit(code=1)
    except StepFailedError as exc:
        log.br()
        err_console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1)
