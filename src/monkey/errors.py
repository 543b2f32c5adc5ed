"""Error types with formatted source context."""

from __future__ import annotations

from monkey.tokens import Position


def _display_line(source: str, line: int) -> str:
    """Return 1-based source line *line*, split on "\\n" only as position_at counts.

    A trailing "\\r" is dropped and any other "\\r" shows as a space, so the
    quoted text keeps one column per character.
    """
    lines = source.split("\n")
    if not 1 <= line <= len(lines):
        return ""
    text = lines[line - 1]
    if text.endswith("\r"):
        text = text[:-1]
    return text.replace("\r", " ")


def _caret_pad(text: str, column: int) -> str:
    # Tabs stay tabs so the caret lines up under the quoted text
    return "".join("\t" if ch == "\t" else " " for ch in text[: column - 1]).ljust(column - 1)


class LexError(Exception):
    """Raised by strict tokenizing on the first illegal character."""

    def __init__(self, message: str, position: Position, source: str) -> None:
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self.format())

    def format(self, filename: str = "input.monkey") -> str:
        line, col = self.position.line, self.position.column
        source_line = _display_line(self.source, line)

        line_num = str(line)
        gutter = " " * len(line_num)

        return (
            f"error: {self.message}\n"
            f"{gutter} --> {filename}:{line}:{col}\n"
            f"{gutter} |\n"
            f"{line_num} | {source_line}\n"
            f"{gutter} | {_caret_pad(source_line, col)}^"
        )
