"""CLI commands for lps.

This package contains all subcommand implementations.
"""

from lps.cli.commands import candidates, closure, keep, select

__all__ = ["candidates", "closure", "keep", "select"]
