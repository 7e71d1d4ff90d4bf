"""Utility modules for lps.

This module exports commonly used utility functions.
"""

from lps.utils.formatting import (
    configure_logging,
    console,
    create_candidate_table,
    err_console,
    format_candidate_row,
    print_error,
    print_info,
    print_success,
    print_warning,
)
from lps.utils.shell import CommandResult, command_exists, run_command

__all__ = [
    "CommandResult",
    "command_exists",
    "configure_logging",
    "console",
    "create_candidate_table",
    "err_console",
    "format_candidate_row",
    "print_error",
    "print_info",
    "print_success",
    "print_warning",
    "run_command",
]
