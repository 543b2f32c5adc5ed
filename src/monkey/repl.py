"""Read-eval-print loop: scan each input line and print its tokens."""

from __future__ import annotations

from typing import TextIO

from monkey.lexer import Lexer
from monkey.tokens import TokenType

PROMPT = ">>>"


def start(stdin: TextIO, stdout: TextIO, prompt: str = PROMPT) -> None:
    """Prompt for lines on stdin until end of stream, echoing tokens to stdout."""
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            return

        lexer = Lexer(line.rstrip("\r\n"))
        tok = lexer.next_token()
        while tok.type != TokenType.EOF:
            stdout.write(f"{tok}\n")
            tok = lexer.next_token()
