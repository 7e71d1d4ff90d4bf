"""Rich console formatting utilities.

Provides consistent formatting for CLI output using Rich.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from lps.core.theme import get_theme

if TYPE_CHECKING:
    from lps.models.package import UpgradeCandidate


def _detect_color_system() -> str | None:
    """Detect the best color system for the current terminal.

    Returns "truecolor" for interactive terminals to enable full hex color support,
    None otherwise to let Rich auto-detect.
    """
    if sys.stdout.isatty():
        return "truecolor"
    return None


# Shared console instances (theme loaded once at import)
console = Console(theme=get_theme(), color_system=_detect_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_detect_color_system())


def configure_logging(verbose: bool = False) -> None:
    """Route log records to stderr through Rich.

    Args:
        verbose: Log at DEBUG level instead of WARNING.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, rich_tracebacks=True)],
        force=True,
    )


def create_candidate_table(title: str = "Upgrade Candidates") -> Table:
    """Create a pre-configured table for displaying upgrade candidates.

    Args:
        title: Table title.

    Returns:
        Rich Table configured for candidate display.
    """
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        row_styles=["", "on grey7"],  # Zebra striping for readability
    )
    table.add_column("Package", no_wrap=True)
    table.add_column("Version", style="muted")
    table.add_column("Repository", style="muted")
    table.add_column("Size", style="info", justify="right")
    table.add_column("Description", style="text", overflow="ellipsis")
    return table


def format_candidate_row(candidate: UpgradeCandidate) -> tuple[str, str, str, str, str]:
    """Format a candidate as a table row with proper styling.

    Args:
        candidate: The upgrade candidate to format.

    Returns:
        Tuple of (name, version, repository, size, description) with Rich markup.
    """
    record = candidate.record
    return (
        f"[package.name]{escape(record.name)}[/]",
        f"[muted]{record.version or '-'}[/]",
        f"[muted]{record.repository or '-'}[/]",
        f"[info]{record.size_human}[/]",
        f"[text]{escape(record.description or '-')}[/]",
    )


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_warning(message: str) -> None:
    """Print a warning message."""
    err_console.print(f"[warning]Warning:[/] {message}")


def print_error(message: str) -> None:
    """Print an error message."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
