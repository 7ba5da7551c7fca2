"""
Lox Error Hierarchy
===================

This module defines the exception hierarchy for slox, plus the error
reporter that collects lexical diagnostics during a run.

Exception Hierarchy
-------------------
LoxError (base)
├── ScanError - lexical error at a source line
│   ├── UnexpectedCharacterError - character that starts no token
│   └── UnterminatedStringError - string literal missing its closing quote
└── ScanFailedError - aggregate of every error reported during a run

Lexical errors are not raised by the scanner. It builds them, records
them and hands them to an error sink, then keeps scanning. Whether a
reported error should fail the run is up to the caller; ErrorReporter
tracks that per run instead of through a process-wide flag.

Error messages follow this format:
    [line 3] Error: Unexpected character
"""

import logging
from typing import Callable, List, Optional

import click


logger = logging.getLogger(__name__)

# An error sink: called once per lexical error with (line, message)
ErrorSink = Callable[[int, str], None]


# =============================================================================
# Base Exception Class
# =============================================================================

class LoxError(Exception):
    """
    Base exception for all slox errors.

    Callers can catch every slox error with a single except clause:

        try:
            reporter.raise_if_errors()
        except LoxError as e:
            print(f"Error: {e}")
    """
    pass


# =============================================================================
# Lexical Errors
# =============================================================================

class ScanError(LoxError):
    """
    A lexical error at a given source line.

    Attributes:
        line: Line number where the error was detected (1-indexed)
        message: Short description of the error
    """

    def __init__(self, line: int, message: str):
        self.line = line
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format as '[line N] Error: message'."""
        return format_diagnostic(self.line, self.message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScanError):
            return NotImplemented
        return (type(self), self.line, self.message) == (type(other), other.line, other.message)

    def __hash__(self) -> int:
        return hash((type(self), self.line, self.message))


class UnexpectedCharacterError(ScanError):
    """
    A character that does not begin any Lox token.

    The scanner skips the character and carries on with the next one.

    Example:
        var x = 1 @ 2;    // '@' is not a Lox character
    """

    def __init__(self, line: int, char: str):
        self.char = char
        super().__init__(line, "Unexpected character")


class UnterminatedStringError(ScanError):
    """
    A string literal whose closing quote never appears.

    Strings may span lines, so this is only detected at end of input.
    The partial literal produces no token.

    Example:
        print "hello;
    """

    def __init__(self, line: int):
        super().__init__(line, "Unterminated string")


class ScanFailedError(LoxError):
    """
    Aggregate error raised when a run reported one or more lexical errors.

    The message is the reporter's formatted report, passed through as-is.
    """

    def __init__(self, report: str, errors: Optional[List[ScanError]] = None):
        self.errors = list(errors or [])
        super().__init__(report)


def format_diagnostic(line: int, message: str) -> str:
    """Render a (line, message) pair the way slox prints diagnostics."""
    return f"[line {line}] Error: {message}"


# =============================================================================
# Error Reporter
# =============================================================================

class ErrorReporter:
    """
    Collects the lexical errors reported during one run.

    An ErrorReporter is an error sink: the scanner calls it with
    (line, message) for every error it finds. Each call prints the
    diagnostic to stderr (unless echo is disabled), logs it and records
    it. After the scan the caller asks had_error to decide the exit code.

    Example:
        reporter = ErrorReporter()
        Scanner(source, on_error=reporter).scan_tokens()

        if reporter.had_error:
            sys.exit(65)
    """

    def __init__(self, echo: bool = True):
        """
        Initialize the reporter.

        Args:
            echo: Print each diagnostic to stderr as it is reported
        """
        self.errors: List[ScanError] = []
        self.echo = echo

    def __call__(self, line: int, message: str) -> None:
        """Report one error; never raises."""
        self.add(ScanError(line, message))

    def add(self, error: ScanError) -> None:
        """Record an already-built error."""
        self.errors.append(error)
        logger.debug(f"Reported: {error}")
        if self.echo:
            click.echo(str(error), err=True)

    @property
    def had_error(self) -> bool:
        """True if any error has been reported since the last clear()."""
        return len(self.errors) > 0

    def error_count(self) -> int:
        """Return the number of reported errors."""
        return len(self.errors)

    def report(self) -> str:
        """Format all errors plus a summary line."""
        lines = [str(error) for error in self.errors]
        error_word = "error" if len(self.errors) == 1 else "errors"
        lines.append(f"{len(self.errors)} {error_word}")
        return "\n".join(lines)

    def clear(self) -> None:
        """Forget all reported errors, e.g. between REPL lines."""
        self.errors.clear()

    def raise_if_errors(self) -> None:
        """Raise a ScanFailedError if any errors were reported."""
        if self.had_error:
            raise ScanFailedError(self.report(), self.errors)
