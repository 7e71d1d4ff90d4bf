"""Select command implementation.

Runs the interactive picker and prints the chosen package names.
"""

import logging

import typer

from lps.cli.types import fail, load_cli_config, report_unfound
from lps.core.errors import LpsError
from lps.core.keeplist import KeepListStore
from lps.core.planner import ensure_candidates, open_database, plan_upgrades
from lps.tui.app import run_picker
from lps.utils.formatting import print_error

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Pick packages to upgrade interactively.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def select_packages(ctx: typer.Context) -> None:
    """Pick upgrade candidates interactively.

    Outdated packages that the keep list depends on (directly or
    transitively) are never offered. Keys: j/k or arrows to move,
    space/enter to toggle, ctrl+d/ctrl+u to scroll half a page, q to quit.

    The selected names are printed space-separated on stdout, so the
    result can be fed straight to pacman.

    Examples:
        lps select
        sudo pacman -S $(lps select)
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        config = load_cli_config(ctx)
        db = open_database(config)
        store = KeepListStore(defaults=config.default_keep)
        store.open()
    except LpsError as e:
        fail(e)

    keep: list[str] | None = None
    try:
        keep = store.read()
        plan = plan_upgrades(db, keep)
        report_unfound(plan.closure.unfound)
        selected = run_picker(ensure_candidates(plan))
    except LpsError as e:
        fail(e)
    finally:
        if keep is not None:
            try:
                store.write(keep)
            except LpsError as e:
                print_error(str(e))

    logger.debug("Selected %d packages", len(selected))
    if selected:
        typer.echo(" ".join(selected))
