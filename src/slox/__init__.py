"""
slox - A Scanner for the Lox Language
=====================================

This package provides the lexical front end of the Lox scripting
language: it turns source text into a flat list of classified tokens
ready for a parser.

Main Components
---------------
- **tokens**: TokenType enumeration and the immutable Token record
- **keywords**: the reserved-word table
- **scanner**: the single-pass Scanner and the scan() helper
- **errors**: exception hierarchy and the ErrorReporter sink
- **runner**: run a string, a script file, or an interactive prompt
- **cli**: the ``slox`` command

Quick Start
-----------
Scan a string:
    >>> from slox import scan
    >>> result = scan('print "hi";')
    >>> [token.type.name for token in result.tokens]
    ['PRINT', 'STRING', 'SEMICOLON', 'EOF']

Collect errors with a reporter:
    >>> from slox import ErrorReporter, Scanner
    >>> reporter = ErrorReporter(echo=False)
    >>> tokens = Scanner("1 @ 2", on_error=reporter).scan_tokens()
    >>> reporter.had_error
    True

Or use the command-line tool:
    $ slox hello.lox
"""

__version__ = "1.0.0"

# =============================================================================
# Public API Exports
# =============================================================================

from slox.tokens import Token, TokenType, LiteralValue
from slox.keywords import KEYWORDS, lookup_keyword
from slox.scanner import Scanner, ScanResult, scan
from slox.errors import (
    LoxError,
    ScanError,
    UnexpectedCharacterError,
    UnterminatedStringError,
    ScanFailedError,
    ErrorReporter,
    format_diagnostic,
)
from slox.config import SloxConfig

__all__ = [
    # Version info
    "__version__",
    # Tokens
    "Token",
    "TokenType",
    "LiteralValue",
    "KEYWORDS",
    "lookup_keyword",
    # Scanner
    "Scanner",
    "ScanResult",
    "scan",
    # Exception hierarchy
    "LoxError",
    "ScanError",
    "UnexpectedCharacterError",
    "UnterminatedStringError",
    "ScanFailedError",
    "ErrorReporter",
    "format_diagnostic",
    # Configuration
    "SloxConfig",
]
