"""Monkey lexer: converts source text into tokens, one call at a time."""

from __future__ import annotations

from collections.abc import Iterator

from monkey.errors import LexError
from monkey.tokens import (
    Position,
    Token,
    TokenType,
    is_digit,
    is_letter,
    is_whitespace,
    lookup_ident,
    new_token,
    position_at,
)

_SINGLE_CHAR_TOKENS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.ASTERISK,
    "/": TokenType.SLASH,
    "<": TokenType.LT,
    ">": TokenType.GT,
    ",": TokenType.COMMA,
    ";": TokenType.SEMICOLON,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "{": TokenType.LBRACE,
    "}": TokenType.RBRACE,
}

# Characters that form a two-character operator when followed by '='
_EQUALS_PAIRS = {
    "=": (TokenType.EQ, TokenType.ASSIGN),
    "!": (TokenType.NOT_EQ, TokenType.BANG),
}


class Lexer:
    """Scan Monkey source text into Token objects.

    The cursor is primed on construction, so ``current_char`` already holds
    the first character of the input (or ``""`` once past the end).
    Malformed input never raises: an unrecognised character comes back as an
    ILLEGAL token and scanning continues with the next character.
    """

    def __init__(self, source: str) -> None:
        self._source = source
        self._pos = 0
        self._read_pos = 0
        self._ch = ""
        self._read_char()

    @property
    def position(self) -> int:
        return self._pos

    @property
    def read_position(self) -> int:
        return self._read_pos

    @property
    def current_char(self) -> str:
        return self._ch

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including the first EOF."""
        while True:
            tok = self.next_token()
            yield tok
            if tok.type == TokenType.EOF:
                return

    def next_token(self) -> Token:
        """Scan and return the next token, advancing past its characters."""
        self._skip_whitespace()
        ch = self._ch

        if ch == "":
            # End of input is a fixed point: the cursor stays put
            return Token(TokenType.EOF, "")

        if ch in _EQUALS_PAIRS:
            double, single = _EQUALS_PAIRS[ch]
            if self._peek_char() == "=":
                self._read_char()
                tok = Token(double, ch + self._ch)
            else:
                tok = new_token(single, ch)
        elif ch in _SINGLE_CHAR_TOKENS:
            tok = new_token(_SINGLE_CHAR_TOKENS[ch], ch)
        elif is_letter(ch):
            # _read_identifier leaves the cursor on the first non-letter
            literal = self._read_identifier()
            return Token(lookup_ident(literal), literal)
        elif is_digit(ch):
            return Token(TokenType.INT, self._read_number())
        else:
            tok = new_token(TokenType.ILLEGAL, ch)

        self._read_char()
        return tok

    # ------------------------------------------------------------------
    # Cursor helpers
    # ------------------------------------------------------------------

    def _read_char(self) -> None:
        if self._read_pos >= len(self._source):
            self._ch = ""
        else:
            self._ch = self._source[self._read_pos]
        self._pos = self._read_pos
        self._read_pos += 1

    def _peek_char(self) -> str:
        if self._read_pos >= len(self._source):
            return ""
        return self._source[self._read_pos]

    def _skip_whitespace(self) -> None:
        while is_whitespace(self._ch):
            self._read_char()

    def _read_identifier(self) -> str:
        start = self._pos
        while is_letter(self._ch):
            self._read_char()
        return self._source[start : self._pos]

    def _read_number(self) -> str:
        start = self._pos
        while is_digit(self._ch):
            self._read_char()
        return self._source[start : self._pos]


def located_tokens(source: str) -> Iterator[tuple[Token, Position]]:
    """Yield each token of source together with its start position.

    After every scan the cursor sits just past the token it produced, so the
    token starts ``len(literal)`` characters before the cursor.
    """
    lexer = Lexer(source)
    for tok in lexer:
        offset = lexer.position - len(tok.literal)
        yield tok, position_at(source, offset)


def tokenize(source: str, strict: bool = False) -> list[Token]:
    """Convenience function: tokenize source text and return the token list.

    With strict=True the first ILLEGAL token raises LexError instead of being
    returned.
    """
    if not strict:
        return list(Lexer(source))

    tokens = []
    for tok, pos in located_tokens(source):
        if tok.type == TokenType.ILLEGAL:
            raise LexError(f"illegal character {tok.literal!r}", pos, source)
        tokens.append(tok)
    return tokens
