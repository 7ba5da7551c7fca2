"""
slox - Lox Scanner Command-Line Interface
=========================================

This module implements the command-line interface for the Lox scanner.
Given a script it prints every token of the script; without one it
starts an interactive prompt that scans each line as it is entered.

Usage Examples
--------------
Scan a script:
    $ slox hello.lox

Interactive prompt:
    $ slox
    > var x = 1;

Debug logging:
    $ slox -v hello.lox

Exit Codes
----------
0  - Success
64 - Too many arguments
65 - The script has lexical errors
66 - The script cannot be read
70 - Internal error
"""

import logging
import sys
from pathlib import Path

import click

from slox import __version__
from slox.cli.errors import ExitCode, handle_cli_exception
from slox.config import SloxConfig
from slox.runner import Lox


logger = logging.getLogger(__name__)


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s" if verbose else "%(message)s",
    )


# =============================================================================
# CLI Definition
# =============================================================================

@click.command()
@click.argument(
    "script",
    nargs=-1,
    type=click.Path(dir_okay=False, path_type=Path),
)
@click.option(
    "--tokens/--no-tokens",
    "echo_tokens",
    default=None,
    help="Print scanned tokens (default: on, or SLOX_ECHO_TOKENS)",
)
@click.option(
    "-v", "--verbose",
    is_flag=True,
    help="Verbose output (debug logging)",
)
@click.version_option(version=__version__, prog_name="slox")
def main(
    script: tuple[Path, ...],
    echo_tokens: bool | None,
    verbose: bool,
) -> None:
    """
    Scan Lox source code and print its tokens.

    SCRIPT is the Lox source file to scan. Without it, slox reads
    lines from standard input and scans each one.

    \b
    Examples:
        slox hello.lox           # Print the tokens of hello.lox
        slox                     # Interactive prompt
        slox -v hello.lox        # With debug logging
    """
    if len(script) > 1:
        click.echo("Usage: slox [script]", err=True)
        sys.exit(ExitCode.USAGE)

    setup_logging(verbose)

    config = SloxConfig.from_env()
    if echo_tokens is not None:
        config.echo_tokens = echo_tokens

    lox = Lox(config)

    try:
        if script:
            logger.debug(f"Running script {script[0]}")
            exit_code = lox.run_file(script[0])
        else:
            logger.debug("Starting interactive prompt")
            exit_code = lox.run_prompt(click.get_text_stream("stdin"))
    except Exception as e:
        handle_cli_exception(e, verbose)

    sys.exit(exit_code)


if __name__ == "__main__":
    main()
