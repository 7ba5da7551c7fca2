"""
slox Runner
===========

Glue between the outside world and the scanner: run a source string,
a script file, or an interactive prompt, printing every token and
reporting lexical errors to stderr.

Each Lox instance owns its ErrorReporter, so two runs never share
error state. The REPL clears the reporter after every line so a typo
on one line does not mark the next one as failed.
"""

import logging
from pathlib import Path
from typing import Optional, TextIO

import click

from slox.cli.errors import ExitCode
from slox.config import SloxConfig
from slox.errors import ErrorReporter
from slox.scanner import ScanResult, Scanner


logger = logging.getLogger(__name__)


class Lox:
    """
    Runs Lox source through the scanner.

    Usage:
        lox = Lox()
        exit_code = lox.run_file("hello.lox")

    Attributes:
        config: Runtime settings
        reporter: Error sink for the current run
    """

    def __init__(
        self,
        config: Optional[SloxConfig] = None,
        reporter: Optional[ErrorReporter] = None,
    ):
        self.config = config or SloxConfig()
        self.reporter = reporter if reporter is not None else ErrorReporter()

    def run(self, source: str) -> ScanResult:
        """
        Scan source and print its tokens.

        Args:
            source: Lox source text

        Returns:
            The ScanResult of this source
        """
        result = Scanner(source, on_error=self.reporter).result()

        if self.config.echo_tokens:
            for token in result.tokens:
                click.echo(str(token))

        return result

    def run_file(self, path: str | Path) -> ExitCode:
        """
        Scan a script file.

        Args:
            path: Path to the Lox script

        Returns:
            ExitCode.DATA_ERROR if any lexical error was reported,
            ExitCode.SUCCESS otherwise

        Raises:
            OSError: If the file cannot be read
        """
        path = Path(path)
        source = path.read_text(encoding=self.config.encoding)
        logger.debug(f"Loaded {path} ({len(source)} characters)")

        self.run(source)

        if self.reporter.had_error:
            logger.debug(f"{path}: {self.reporter.error_count()} lexical errors")
            return ExitCode.DATA_ERROR
        return ExitCode.SUCCESS

    def run_prompt(self, stream: TextIO) -> ExitCode:
        """
        Read-scan-print loop over lines of stream.

        Stops at end of input. Errors are reported but never end the loop.

        Args:
            stream: Text stream to read lines from (usually stdin)

        Returns:
            ExitCode.SUCCESS
        """
        while True:
            click.echo(self.config.prompt, nl=False)
            line = stream.readline()
            if not line:
                click.echo()
                break

            self.run(line)
            self.reporter.clear()

        return ExitCode.SUCCESS
