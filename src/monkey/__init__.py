"""Monkey programming language front end."""

from __future__ import annotations

from monkey.lexer import Lexer, located_tokens, tokenize
from monkey.tokens import Token, TokenType

__version__ = "0.1.0"

__all__ = ["Lexer", "Token", "TokenType", "located_tokens", "tokenize"]
