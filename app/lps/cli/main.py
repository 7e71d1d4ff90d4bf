"""Main CLI application entry point.

Defines the Typer application and global options.
"""

from pathlib import Path
from typing import Annotated

import typer

from lps import __version__
from lps.cli.commands import candidates, closure, keep, select
from lps.utils.formatting import configure_logging

# Create main Typer app
app = typer.Typer(
    name="lps",
    help="Pick pacman upgrades while protecting what your keep list depends on.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"lps version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging on stderr.",
        ),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to config.toml (default: ~/.config/lps/config.toml).",
        ),
    ] = None,
    root: Annotated[
        Path | None,
        typer.Option(
            "--root",
            help="Installation root passed to pacman.",
        ),
    ] = None,
    dbpath: Annotated[
        Path | None,
        typer.Option(
            "--dbpath",
            help="pacman database directory.",
        ),
    ] = None,
    repositories: Annotated[
        list[str] | None,
        typer.Option(
            "--repo",
            "-r",
            help="Sync repository to take upgrades from (repeatable, in priority order).",
        ),
    ] = None,
) -> None:
    """lps - selective pacman upgrades.

    Packages your keep list depends on are never offered for upgrade,
    so picking upgrades cannot pull in a partial system update.
    """
    configure_logging(verbose)

    # Store options in context for subcommands
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path
    ctx.obj["root"] = root
    ctx.obj["dbpath"] = dbpath
    ctx.obj["repositories"] = repositories


# Register commands
app.add_typer(select.app, name="select")
app.add_typer(candidates.app, name="list")
app.add_typer(keep.app, name="keep")
app.add_typer(closure.app, name="closure")


if __name__ == "__main__":
    app()
