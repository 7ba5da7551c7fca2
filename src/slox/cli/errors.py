"""
Unified CLI Error Handling
==========================

Provides consistent error handling and exit codes for the slox CLI.
Exit codes follow the BSD sysexits convention used by Lox interpreters.
"""

import sys
import traceback
from enum import IntEnum
from typing import NoReturn

import click


class ExitCode(IntEnum):
    """Exit codes for the slox CLI."""
    SUCCESS = 0
    USAGE = 64           # Wrong number of arguments
    DATA_ERROR = 65      # Source had lexical errors
    NO_INPUT = 66        # Script missing or unreadable
    INTERNAL_ERROR = 70  # Unexpected internal error


def handle_cli_exception(error: Exception, verbose: bool = False) -> NoReturn:
    """
    Unified exception handler for the CLI.

    Formats the error message, optionally prints a traceback in verbose
    mode, and exits with the matching exit code.

    Args:
        error: The exception that was raised
        verbose: If True, print full traceback for internal errors

    Raises:
        SystemExit: Always exits with an appropriate exit code
    """
    from slox.errors import LoxError

    if isinstance(error, LoxError):
        # Lox errors are already formatted as "[line N] Error: ..."
        click.echo(str(error), err=True)
        sys.exit(ExitCode.DATA_ERROR)

    elif isinstance(error, (FileNotFoundError, PermissionError, IsADirectoryError)):
        click.echo(f"Error: {error}", err=True)
        sys.exit(ExitCode.NO_INPUT)

    elif isinstance(error, UnicodeDecodeError):
        click.echo(f"Error: cannot decode script: {error}", err=True)
        sys.exit(ExitCode.DATA_ERROR)

    else:
        click.echo(f"Internal error: {error}", err=True)
        if verbose:
            traceback.print_exc()
        sys.exit(ExitCode.INTERNAL_ERROR)
