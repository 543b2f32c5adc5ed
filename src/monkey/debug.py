"""--debug token dump to stderr."""

from __future__ import annotations

import sys
from typing import TextIO

from monkey.lexer import located_tokens


def dump_tokens(source: str, *, file: TextIO = sys.stderr) -> None:
    """Print one line per token of source, EOF included, to *file*."""
    for tok, pos in located_tokens(source):
        loc = f"{pos.line}:{pos.column}"
        file.write(f"{loc:<8} {tok.type.name:<10} {tok.literal!r}\n")
