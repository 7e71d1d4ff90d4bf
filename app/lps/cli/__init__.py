"""CLI package for lps.

This package contains the Typer application and all subcommands.
"""

from lps.cli.main import app

__all__ = ["app"]
