"""Shared helpers for CLI commands.

This module provides the option plumbing and error reporting used
across multiple CLI command modules to avoid code duplication.
"""

from collections.abc import Iterable
from pathlib import Path
from typing import Any, NoReturn

import typer

from lps.core.config import LpsConfig, load_config
from lps.core.errors import LpsError
from lps.utils.formatting import print_error, print_warning


def load_cli_config(ctx: typer.Context) -> LpsConfig:
    """Load config.toml and apply the global command line overrides.

    Args:
        ctx: Typer context populated by the root callback.

    Returns:
        Effective configuration.

    Raises:
        ConfigError: If the config file is invalid.
    """
    options: dict[str, Any] = ctx.obj if isinstance(ctx.obj, dict) else {}
    config_path: Path | None = options.get("config_path")
    config = load_config(config_path)

    overrides: dict[str, Any] = {}
    if options.get("root") is not None:
        overrides["root"] = options["root"]
    if options.get("dbpath") is not None:
        overrides["dbpath"] = options["dbpath"]
    if options.get("repositories"):
        overrides["repositories"] = list(options["repositories"])

    if overrides:
        return config.model_copy(update=overrides)
    return config


def fail(error: LpsError) -> NoReturn:
    """Report a fatal error and exit with its distinguished code."""
    print_error(str(error))
    raise typer.Exit(code=int(error.exit_code)) from error


def report_unfound(names: Iterable[str]) -> None:
    """Warn about names missing from the local database."""
    for name in names:
        print_warning(f"'{name}' is not installed; its dependencies are not protected.")
