"""
Lox Reserved Words
==================

The fixed table of reserved words. Lookup is an exact, case-sensitive
match: "class" is a keyword, "Class" and "classify" are identifiers.

The table is wrapped in a read-only mapping so it can be shared by any
number of scanners, including ones running on other threads.
"""

from types import MappingProxyType
from typing import Mapping

from slox.tokens import TokenType


KEYWORDS: Mapping[str, TokenType] = MappingProxyType({
    "and": TokenType.AND,
    "class": TokenType.CLASS,
    "else": TokenType.ELSE,
    "false": TokenType.FALSE,
    "for": TokenType.FOR,
    "fun": TokenType.FUN,
    "if": TokenType.IF,
    "nil": TokenType.NIL,
    "or": TokenType.OR,
    "print": TokenType.PRINT,
    "return": TokenType.RETURN,
    "super": TokenType.SUPER,
    "this": TokenType.THIS,
    "true": TokenType.TRUE,
    "var": TokenType.VAR,
    "while": TokenType.WHILE,
})


def lookup_keyword(text: str) -> TokenType:
    """Return the keyword type for text, or IDENTIFIER if it is not reserved."""
    return KEYWORDS.get(text, TokenType.IDENTIFIER)
