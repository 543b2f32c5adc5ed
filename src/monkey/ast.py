"""AST node types for Monkey programs.

Only the nodes needed for ``let`` statements exist so far; nothing builds
them yet.
"""

from __future__ import annotations

from dataclasses import dataclass

from monkey.tokens import Token


@dataclass(frozen=True, slots=True)
class Identifier:
    """A bound name, e.g. ``x`` in ``let x = 5;``."""

    token: Token
    value: str

    def token_literal(self) -> str:
        return self.token.literal


Expression = Identifier


@dataclass(frozen=True, slots=True)
class LetStatement:
    """``let <name> = <value>;``"""

    token: Token
    name: Identifier
    value: Expression | None = None

    def token_literal(self) -> str:
        return self.token.literal


Statement = LetStatement


@dataclass(frozen=True, slots=True)
class Program:
    """Root node: the statements of a source file in order."""

    statements: tuple[Statement, ...] = ()

    def token_literal(self) -> str:
        if self.statements:
            return self.statements[0].token_literal()
        return ""
