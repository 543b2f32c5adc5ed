"""Token types, data structures, and character classification helpers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType


class TokenType(Enum):
    ILLEGAL = "ILLEGAL"
    EOF = "EOF"

    # Identifiers and literals
    IDENT = "IDENT"  # add, foobar, x, y
    INT = "INT"  # 123456

    # Operators
    ASSIGN = "="
    PLUS = "+"
    MINUS = "-"
    BANG = "!"
    ASTERISK = "*"
    SLASH = "/"

    LT = "<"
    GT = ">"

    EQ = "=="
    NOT_EQ = "!="

    # Delimiters
    COMMA = ","
    SEMICOLON = ";"

    LPAREN = "("
    RPAREN = ")"
    LBRACE = "{"
    RBRACE = "}"

    # Keywords
    FUNCTION = "FUNCTION"
    LET = "LET"
    TRUE = "TRUE"
    FALSE = "FALSE"
    IF = "IF"
    ELSE = "ELSE"
    RETURN = "RETURN"


@dataclass(frozen=True, slots=True)
class Token:
    """A single lexer token: its kind and the source text it was read from."""

    type: TokenType
    literal: str

    def __str__(self) -> str:
        return f"Token({self.type.name}, {self.literal!r})"


@dataclass(frozen=True, slots=True)
class Position:
    """Source position, 1-based line and column, 0-based offset."""

    line: int
    column: int
    offset: int


KEYWORDS: MappingProxyType[str, TokenType] = MappingProxyType(
    {
        "fn": TokenType.FUNCTION,
        "let": TokenType.LET,
        "true": TokenType.TRUE,
        "false": TokenType.FALSE,
        "if": TokenType.IF,
        "else": TokenType.ELSE,
        "return": TokenType.RETURN,
    }
)

_WHITESPACE = frozenset(" \t\n\r")


def lookup_ident(ident: str) -> TokenType:
    """Return the keyword kind for ident, or IDENT if it is not reserved."""
    return KEYWORDS.get(ident, TokenType.IDENT)


def new_token(token_type: TokenType, ch: str) -> Token:
    """Build a token whose literal is the single character ch."""
    return Token(token_type, ch)


def is_letter(ch: str) -> bool:
    """Return True if ch may appear in an identifier (ASCII letters and '_')."""
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_whitespace(ch: str) -> bool:
    return ch in _WHITESPACE


def position_at(source: str, offset: int) -> Position:
    """Translate a 0-based offset into source into a line/column Position."""
    line = source.count("\n", 0, offset) + 1
    line_start = source.rfind("\n", 0, offset) + 1
    return Position(line, offset - line_start + 1, offset)
