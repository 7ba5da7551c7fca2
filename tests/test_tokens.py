"""
Tests for Tokens and the Keyword Table
======================================

These tests verify the TokenType vocabulary, the Token record and the
read-only reserved-word table.
"""

import dataclasses

import pytest

from slox.keywords import KEYWORDS, lookup_keyword
from slox.tokens import KEYWORD_TYPES, LITERAL_TYPES, Token, TokenType


# =============================================================================
# Test TokenType
# =============================================================================

class TestTokenType:
    """Tests for the TokenType enumeration."""

    def test_member_count(self):
        """11 punctuation + 8 operators + 3 literals + 16 keywords + EOF."""
        assert len(TokenType) == 39

    def test_keyword_types(self):
        assert len(KEYWORD_TYPES) == 16
        assert TokenType.AND in KEYWORD_TYPES
        assert TokenType.WHILE in KEYWORD_TYPES
        assert TokenType.IDENTIFIER not in KEYWORD_TYPES
        assert TokenType.EOF not in KEYWORD_TYPES

    def test_literal_types(self):
        assert LITERAL_TYPES == {TokenType.STRING, TokenType.NUMBER}


# =============================================================================
# Test Token
# =============================================================================

class TestToken:
    """Tests for the Token record."""

    def test_fields(self):
        token = Token(TokenType.STRING, '"hi"', "hi", 3)
        assert token.type == TokenType.STRING
        assert token.lexeme == '"hi"'
        assert token.literal == "hi"
        assert token.line == 3

    def test_immutable(self):
        token = Token(TokenType.DOT, ".", None, 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.line = 2

    def test_equality(self):
        assert Token(TokenType.NUMBER, "1", 1.0, 1) == Token(TokenType.NUMBER, "1", 1.0, 1)
        assert Token(TokenType.NUMBER, "1", 1.0, 1) != Token(TokenType.NUMBER, "1", 1.0, 2)

    def test_hashable(self):
        tokens = {Token(TokenType.DOT, ".", None, 1), Token(TokenType.DOT, ".", None, 1)}
        assert len(tokens) == 1

    def test_str(self):
        """str() gives 'TYPE lexeme literal'."""
        assert str(Token(TokenType.NUMBER, "1.5", 1.5, 1)) == "NUMBER 1.5 1.5"
        assert str(Token(TokenType.VAR, "var", None, 1)) == "VAR var None"
        assert str(Token(TokenType.EOF, "", None, 1)) == "EOF  None"

    def test_repr(self):
        assert repr(Token(TokenType.STRING, '"a"', "a", 2)) == "Token(STRING, '\"a\"', 'a', line 2)"
        assert repr(Token(TokenType.COMMA, ",", None, 1)) == "Token(COMMA, ',', line 1)"

    def test_is_keyword(self):
        assert Token(TokenType.CLASS, "class", None, 1).is_keyword()
        assert not Token(TokenType.IDENTIFIER, "klass", None, 1).is_keyword()

    def test_is_literal(self):
        assert Token(TokenType.NUMBER, "1", 1.0, 1).is_literal()
        assert not Token(TokenType.TRUE, "true", None, 1).is_literal()


# =============================================================================
# Test Keyword Table
# =============================================================================

class TestKeywords:
    """Tests for the reserved-word table."""

    def test_sixteen_keywords(self):
        assert len(KEYWORDS) == 16

    def test_table_matches_keyword_types(self):
        assert set(KEYWORDS.values()) == KEYWORD_TYPES

    def test_spelling_matches_type_name(self):
        for spelling, token_type in KEYWORDS.items():
            assert token_type.name == spelling.upper()

    def test_read_only(self):
        with pytest.raises(TypeError):
            KEYWORDS["let"] = TokenType.VAR

    def test_lookup_keyword(self):
        assert lookup_keyword("while") == TokenType.WHILE
        assert lookup_keyword("While") == TokenType.IDENTIFIER
        assert lookup_keyword("whiles") == TokenType.IDENTIFIER
        assert lookup_keyword("") == TokenType.IDENTIFIER
