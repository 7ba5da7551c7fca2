"""
Lox Scanner (Lexer)
===================

This module implements the scanner for Lox. It converts source text into
a list of tokens for the parser in a single left-to-right pass with at
most two characters of lookahead.

Lexical Rules
-------------
- Punctuation: ( ) { } , . - + ; *
- Operators: ! != = == < <= > >=  (longest match wins)
- Comments: // to end of line, produce no token
- Whitespace: space, tab and carriage return are skipped; newline
  advances the line counter
- Strings: "..." and may span lines; no escape sequences
- Numbers: 123 or 123.45; a trailing '.' is not part of the number
- Identifiers: [A-Za-z_][A-Za-z0-9_]*, checked against the keyword table

Error Recovery
--------------
Malformed input never stops the scan. An unexpected character is
reported and skipped; an unterminated string is reported and dropped.
Every error is passed to the optional ``on_error(line, message)`` sink
and also kept on the scanner, so one scan's errors never leak into
another's.

Example Usage
-------------
>>> from slox.scanner import scan
>>> result = scan('var answer = 42;')
>>> for token in result.tokens:
...     print(token)
VAR var None
IDENTIFIER answer None
EQUAL = None
NUMBER 42 42.0
SEMICOLON ; None
EOF  None
"""

import logging
import string
from dataclasses import dataclass
from typing import List, Optional, Tuple

from slox.errors import (
    ErrorSink,
    ScanError,
    UnexpectedCharacterError,
    UnterminatedStringError,
)
from slox.keywords import lookup_keyword
from slox.tokens import LiteralValue, Token, TokenType


logger = logging.getLogger(__name__)


# =============================================================================
# Scan Result
# =============================================================================

@dataclass(frozen=True)
class ScanResult:
    """
    The output of one complete scan.

    Attributes:
        tokens: Tokens in source order, ending with exactly one EOF
        errors: Lexical errors in the order they were found
    """
    tokens: Tuple[Token, ...]
    errors: Tuple[ScanError, ...]

    @property
    def had_error(self) -> bool:
        """True if the scan reported any lexical error."""
        return len(self.errors) > 0


# =============================================================================
# Scanner Implementation
# =============================================================================

class Scanner:
    """
    Tokenizes Lox source code.

    A Scanner is built for one source string and scans it once.
    Calling scan_tokens() again returns the tokens of the first scan.

    Usage:
        scanner = Scanner(source_text, on_error=reporter)
        tokens = scanner.scan_tokens()

    Attributes:
        source: The source code being scanned
        errors: Lexical errors found so far
    """

    # Only ASCII letters and digits are significant to Lox
    ALPHA = frozenset(string.ascii_letters + "_")
    DIGITS = frozenset(string.digits)
    ALPHANUMERIC = ALPHA | DIGITS

    # Characters that map directly to a token type
    SINGLE_CHAR_TOKENS = {
        "(": TokenType.LEFT_PAREN,
        ")": TokenType.RIGHT_PAREN,
        "{": TokenType.LEFT_BRACE,
        "}": TokenType.RIGHT_BRACE,
        ",": TokenType.COMMA,
        ".": TokenType.DOT,
        "-": TokenType.MINUS,
        "+": TokenType.PLUS,
        ";": TokenType.SEMICOLON,
        "*": TokenType.STAR,
    }

    # Operators that become a two-character token when followed by '='
    # char -> (type alone, type with '=')
    EQUAL_OPERATORS = {
        "!": (TokenType.BANG, TokenType.BANG_EQUAL),
        "=": (TokenType.EQUAL, TokenType.EQUAL_EQUAL),
        "<": (TokenType.LESS, TokenType.LESS_EQUAL),
        ">": (TokenType.GREATER, TokenType.GREATER_EQUAL),
    }

    WHITESPACE = frozenset(" \r\t")

    def __init__(self, source: str, on_error: Optional[ErrorSink] = None):
        """
        Initialize the scanner with source code.

        Args:
            source: The Lox source code to scan
            on_error: Called with (line, message) for each lexical error
        """
        self.source = source
        self.on_error = on_error
        self.errors: List[ScanError] = []

        self._tokens: List[Token] = []
        self._scanned = False

        # Start of the current lexeme, next unconsumed character, line
        self._start = 0
        self._current = 0
        self._line = 1
        self._start_line = 1

    def scan_tokens(self) -> List[Token]:
        """
        Scan the whole source.

        Returns:
            Tokens in source order. The last token is always EOF.
        """
        if self._scanned:
            return list(self._tokens)

        while not self._at_end():
            # We are at the beginning of the next lexeme
            self._start = self._current
            self._start_line = self._line
            self._scan_token()

        self._tokens.append(Token(TokenType.EOF, "", None, self._line))
        self._scanned = True

        logger.debug(
            f"Scanned {len(self._tokens)} tokens from {len(self.source)} characters "
            f"({len(self.errors)} errors)"
        )
        return list(self._tokens)

    def result(self) -> ScanResult:
        """Scan if needed and return tokens and errors together."""
        tokens = self.scan_tokens()
        return ScanResult(tuple(tokens), tuple(self.errors))

    # =========================================================================
    # Character Access Methods
    # =========================================================================

    def _at_end(self) -> bool:
        """Check if we've reached the end of source."""
        return self._current >= len(self.source)

    def _advance(self) -> str:
        """Consume and return the next character."""
        char = self.source[self._current]
        self._current += 1
        return char

    def _peek(self) -> str:
        """Look at the next unconsumed character; empty string at end."""
        if self._at_end():
            return ""
        return self.source[self._current]

    def _peek_next(self) -> str:
        """Look one character past _peek(); empty string past the end."""
        if self._current + 1 >= len(self.source):
            return ""
        return self.source[self._current + 1]

    def _match(self, expected: str) -> bool:
        """Consume the next character only if it is expected."""
        if self._peek() != expected:
            return False
        self._current += 1
        return True

    # =========================================================================
    # Token and Error Creation
    # =========================================================================

    def _add_token(self, token_type: TokenType, literal: LiteralValue = None) -> None:
        """Append a token spanning the current lexeme."""
        lexeme = self.source[self._start:self._current]
        self._tokens.append(Token(token_type, lexeme, literal, self._start_line))

    def _error(self, error: ScanError) -> None:
        """Record a lexical error and pass it to the error sink."""
        logger.debug(f"Lexical error: {error}")
        self.errors.append(error)
        if self.on_error is not None:
            self.on_error(error.line, error.message)

    # =========================================================================
    # Token Scanning
    # =========================================================================

    def _scan_token(self) -> None:
        """Scan one lexeme starting at self._start."""
        char = self._advance()

        if char in self.SINGLE_CHAR_TOKENS:
            self._add_token(self.SINGLE_CHAR_TOKENS[char])
        elif char in self.EQUAL_OPERATORS:
            single, double = self.EQUAL_OPERATORS[char]
            self._add_token(double if self._match("=") else single)
        elif char == "/":
            if self._match("/"):
                self._skip_comment()
            else:
                self._add_token(TokenType.SLASH)
        elif char in self.WHITESPACE:
            pass
        elif char == "\n":
            self._line += 1
        elif char == '"':
            self._scan_string()
        elif char in self.DIGITS:
            self._scan_number()
        elif char in self.ALPHA:
            self._scan_identifier()
        else:
            self._error(UnexpectedCharacterError(self._line, char))

    def _skip_comment(self) -> None:
        """Skip a // comment, leaving the newline for the main loop."""
        while self._peek() != "\n" and not self._at_end():
            self._advance()

    def _scan_string(self) -> None:
        """
        Scan a string literal after its opening quote.

        The literal is the raw text between the quotes. Backslashes are
        ordinary characters.
        """
        while self._peek() != '"' and not self._at_end():
            if self._peek() == "\n":
                self._line += 1
            self._advance()

        if self._at_end():
            self._error(UnterminatedStringError(self._line))
            return

        self._advance()  # consume closing "

        value = self.source[self._start + 1:self._current - 1]
        self._add_token(TokenType.STRING, value)

    def _scan_number(self) -> None:
        """Scan an integer or decimal number literal."""
        while self._peek() in self.DIGITS:
            self._advance()

        # A fractional part needs a digit after the '.'
        if self._peek() == "." and self._peek_next() in self.DIGITS:
            self._advance()  # consume '.'
            while self._peek() in self.DIGITS:
                self._advance()

        self._add_token(TokenType.NUMBER, float(self.source[self._start:self._current]))

    def _scan_identifier(self) -> None:
        """Scan an identifier and check it against the keyword table."""
        while self._peek() in self.ALPHANUMERIC:
            self._advance()

        text = self.source[self._start:self._current]
        self._add_token(lookup_keyword(text))


# =============================================================================
# Convenience Function
# =============================================================================

def scan(source: str, on_error: Optional[ErrorSink] = None) -> ScanResult:
    """
    Scan source text in one call.

    Args:
        source: The Lox source code to scan
        on_error: Called with (line, message) for each lexical error

    Returns:
        ScanResult with the tokens and any lexical errors
    """
    return Scanner(source, on_error).result()
