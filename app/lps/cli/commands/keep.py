"""Keep command implementation.

Shows and edits the keep list whose dependency closure is protected
from upgrades.
"""

from typing import Annotated

import typer

from lps.cli.types import fail, load_cli_config
from lps.core.errors import LpsError
from lps.core.keeplist import KeepListStore
from lps.utils.formatting import console, print_success

app = typer.Typer(
    help="Show or edit the keep list.",
    no_args_is_help=True,
)


def _open_store(ctx: typer.Context) -> KeepListStore:
    try:
        config = load_cli_config(ctx)
        store = KeepListStore(defaults=config.default_keep)
        store.open()
    except LpsError as e:
        fail(e)
    return store


@app.command("show")
def show(ctx: typer.Context) -> None:
    """Print the keep list, one name per line."""
    store = _open_store(ctx)
    try:
        names = store.read()
    except LpsError as e:
        fail(e)

    for name in names:
        console.print(name, highlight=False)


@app.command("add")
def add(
    ctx: typer.Context,
    names: Annotated[list[str], typer.Argument(help="Package names to keep.")],
) -> None:
    """Add packages to the keep list.

    Examples:
        lps keep add linux nvidia
    """
    store = _open_store(ctx)
    try:
        kept = store.add(names)
    except LpsError as e:
        fail(e)
    print_success(f"Keep list now has {len(kept)} package(s).")


@app.command("remove")
def remove(
    ctx: typer.Context,
    names: Annotated[list[str], typer.Argument(help="Package names to stop keeping.")],
) -> None:
    """Remove packages from the keep list.

    Examples:
        lps keep remove nvidia
    """
    store = _open_store(ctx)
    try:
        kept = store.remove(names)
    except LpsError as e:
        fail(e)
    print_success(f"Keep list now has {len(kept)} package(s).")
