"""Closure command implementation.

Prints the packages protected by the keep list.
"""

from typing import Annotated

import typer

from lps.cli.types import fail, load_cli_config, report_unfound
from lps.core.closure import compute_closure
from lps.core.errors import LpsError
from lps.core.keeplist import KeepListStore
from lps.database.pacman import PacmanDatabase
from lps.utils.formatting import console, print_info

app = typer.Typer(
    help="Show the packages protected by the keep list.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_closure(
    ctx: typer.Context,
    count_only: Annotated[
        bool,
        typer.Option(
            "--count",
            "-c",
            help="Only show the number of protected packages.",
        ),
    ] = False,
) -> None:
    """Show the transitive dependency closure of the keep list.

    Only the local database is read; sync repositories are not needed.

    Examples:
        lps closure
        lps closure --count
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        config = load_cli_config(ctx)
        db = PacmanDatabase(root=config.root, dbpath=config.dbpath)
        db.initialize()
        store = KeepListStore(defaults=config.default_keep)
        store.open()
        result = compute_closure(store.read(), db.lookup)
    except LpsError as e:
        fail(e)

    report_unfound(result.unfound)

    if count_only:
        print_info(f"Protected packages: {len(result.closure)}")
        return

    for name in sorted(result.closure, key=lambda n: n.encode("utf-8")):
        console.print(f"[protected]{name}[/]", highlight=False)
    console.print(f"\n[dim]{len(result.closure)} packages protected[/]")
