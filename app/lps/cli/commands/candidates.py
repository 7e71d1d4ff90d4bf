"""List command implementation.

Shows the upgrade candidates without starting the interactive picker.
"""

import json
from enum import Enum
from typing import Annotated

import typer

from lps.cli.types import fail, load_cli_config, report_unfound
from lps.core.errors import LpsError
from lps.core.keeplist import KeepListStore
from lps.core.planner import ensure_candidates, open_database, plan_upgrades
from lps.models.package import UpgradeCandidate
from lps.utils.formatting import console, create_candidate_table, format_candidate_row

app = typer.Typer(
    help="List upgrade candidates that are not protected.",
    invoke_without_command=True,
)


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def _candidate_to_dict(candidate: UpgradeCandidate) -> dict[str, object]:
    record = candidate.record
    return {
        "name": record.name,
        "version": record.version,
        "repository": record.repository,
        "installed_size": record.installed_size,
        "description": record.description,
    }


@app.callback(invoke_without_command=True)
def list_candidates(
    ctx: typer.Context,
    limit: Annotated[
        int | None,
        typer.Option(
            "--limit",
            "-n",
            help="Limit number of candidates to display.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """List upgrade candidates in display order (largest first).

    Examples:
        lps list                    # Table of all candidates
        lps list --limit 10         # Ten largest candidates
        lps list --format json      # JSON output for scripting
    """
    if ctx.invoked_subcommand is not None:
        return

    try:
        config = load_cli_config(ctx)
        db = open_database(config)
        store = KeepListStore(defaults=config.default_keep)
        store.open()
        plan = plan_upgrades(db, store.read())
        report_unfound(plan.closure.unfound)
        candidates = ensure_candidates(plan)
    except LpsError as e:
        fail(e)

    shown = candidates[:limit] if limit else candidates

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps([_candidate_to_dict(c) for c in shown]))
        return

    table = create_candidate_table()
    for candidate in shown:
        table.add_row(*format_candidate_row(candidate))
    console.print(table)

    summary = f"Showing {len(shown)} of {len(candidates)} candidates"
    summary += f" ({len(plan.closure.closure)} packages protected)"
    console.print(f"\n[dim]{summary}[/]")
