"""Test the read-eval-print loop against in-memory streams."""

from __future__ import annotations

import io

from monkey.repl import PROMPT, start


def _run(text: str, prompt: str = PROMPT) -> str:
    out = io.StringIO()
    start(io.StringIO(text), out, prompt=prompt)
    return out.getvalue()


class TestRepl:
    def test_empty_input_prints_prompt_only(self):
        assert _run("") == ">>>"

    def test_single_line(self):
        assert _run("let x = 5;\n") == (
            ">>>Token(LET, 'let')\n"
            "Token(IDENT, 'x')\n"
            "Token(ASSIGN, '=')\n"
            "Token(INT, '5')\n"
            "Token(SEMICOLON, ';')\n"
            ">>>"
        )

    def test_eof_not_printed(self):
        assert "EOF" not in _run("a\n")

    def test_line_without_trailing_newline(self):
        assert _run("10 == 10") == (
            ">>>Token(INT, '10')\nToken(EQ, '==')\nToken(INT, '10')\n>>>"
        )

    def test_blank_line_prints_no_tokens(self):
        assert _run("\n\n") == ">>>>>>>>>"

    def test_each_line_scanned_separately(self):
        output = _run("!\n=\n")
        assert output == ">>>Token(BANG, '!')\n>>>Token(ASSIGN, '=')\n>>>"

    def test_illegal_tokens_printed(self):
        assert "Token(ILLEGAL, '@')" in _run("@\n")

    def test_crlf_lines(self):
        assert _run("x\r\n") == ">>>Token(IDENT, 'x')\n>>>"

    def test_custom_prompt(self):
        assert _run("", prompt="monkey> ") == "monkey> "
