"""Anvil CLI entry point."""

import typer

from anvil import __version__
from anvil.cli.init_cmd import init

app = typer.Typer(
    name="nv",
    help="Command line tool for Anvil Connect deployments",
    no_args_is_help=True,
)

# Register subcommands
app.command()(init)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"nv {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
) -> None:
    """Command line tool for Anvil Connect deployments."""
