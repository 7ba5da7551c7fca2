"""
Lox Tokens
==========

This module defines the lexical vocabulary of the Lox language: the closed
set of token types the scanner can produce, and the immutable token record
that pairs a type with the source text it came from.

Token Categories
----------------
- Single-character punctuation: ( ) { } , . - + ; / *
- One or two character operators: ! != = == > >= < <=
- Literals: identifiers, "strings", numbers (123, 1.5)
- Keywords: and, class, else, false, fun, for, if, nil, or,
  print, return, super, this, true, var, while
- EOF: synthetic end-of-input marker

Example
-------
>>> from slox.tokens import Token, TokenType
>>> token = Token(TokenType.NUMBER, "1.5", 1.5, 1)
>>> print(token)
NUMBER 1.5 1.5
"""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional, Union


# A token's derived value: the text of a STRING, the value of a NUMBER,
# or None for every other token type.
LiteralValue = Optional[Union[str, float]]


# =============================================================================
# Token Type Enumeration
# =============================================================================

class TokenType(Enum):
    """
    Token types for the Lox language.

    Keywords get their own types rather than being identifiers with a
    special spelling, so the parser can dispatch on type alone.
    """

    # === Single-character Tokens ===
    LEFT_PAREN = auto()     # (
    RIGHT_PAREN = auto()    # )
    LEFT_BRACE = auto()     # {
    RIGHT_BRACE = auto()    # }
    COMMA = auto()          # ,
    DOT = auto()            # .
    MINUS = auto()          # -
    PLUS = auto()           # +
    SEMICOLON = auto()      # ;
    SLASH = auto()          # /
    STAR = auto()           # *

    # === One or Two Character Tokens ===
    BANG = auto()           # !
    BANG_EQUAL = auto()     # !=
    EQUAL = auto()          # =
    EQUAL_EQUAL = auto()    # ==
    GREATER = auto()        # >
    GREATER_EQUAL = auto()  # >=
    LESS = auto()           # <
    LESS_EQUAL = auto()     # <=

    # === Literals ===
    IDENTIFIER = auto()
    STRING = auto()
    NUMBER = auto()

    # === Keywords ===
    AND = auto()
    CLASS = auto()
    ELSE = auto()
    FALSE = auto()
    FUN = auto()
    FOR = auto()
    IF = auto()
    NIL = auto()
    OR = auto()
    PRINT = auto()
    RETURN = auto()
    SUPER = auto()
    THIS = auto()
    TRUE = auto()
    VAR = auto()
    WHILE = auto()

    # === Structural ===
    EOF = auto()


# Types whose tokens carry a literal value
LITERAL_TYPES = frozenset({TokenType.STRING, TokenType.NUMBER})

# Reserved-word types, in declaration order from AND to WHILE
KEYWORD_TYPES = frozenset(
    t for t in TokenType if TokenType.AND.value <= t.value <= TokenType.WHILE.value
)


# =============================================================================
# Token Data Class
# =============================================================================

@dataclass(frozen=True)
class Token:
    """
    A single classified unit of Lox source text.

    Attributes:
        type: The TokenType classification
        lexeme: The exact source text of the token ("" for EOF)
        literal: str for STRING, float for NUMBER, None otherwise
        line: Line number of the token's first character (1-indexed)
    """
    type: TokenType
    lexeme: str
    literal: LiteralValue
    line: int

    def __str__(self) -> str:
        """Format as 'TYPE lexeme literal', one token per output line."""
        return f"{self.type.name} {self.lexeme} {self.literal}"

    def __repr__(self) -> str:
        if self.literal is not None:
            return f"Token({self.type.name}, {self.lexeme!r}, {self.literal!r}, line {self.line})"
        return f"Token({self.type.name}, {self.lexeme!r}, line {self.line})"

    def is_keyword(self) -> bool:
        """Return True if this token is a reserved word."""
        return self.type in KEYWORD_TYPES

    def is_literal(self) -> bool:
        """Return True if this token carries a literal value."""
        return self.type in LITERAL_TYPES
