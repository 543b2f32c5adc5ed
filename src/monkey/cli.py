"""Command-line interface for the Monkey lexer."""

from __future__ import annotations

import argparse
import getpass
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from monkey.errors import LexError
from monkey.repl import PROMPT


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None
    output_file: Path | None
    prompt: str
    greeting: bool
    strict: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="monkey",
        description="Monkey programming language lexer and REPL",
    )
    p.add_argument("input", nargs="?", help="Source file to tokenize (default: start the REPL)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument("--prompt", default=None, metavar="TEXT", help=f"REPL prompt (default: {PROMPT!r})")
    p.add_argument(
        "--no-greeting",
        dest="greeting",
        action="store_false",
        default=None,
        help="Do not print the REPL greeting",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        default=None,
        help="Fail on the first illegal character instead of printing it as a token",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover monkey.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump located tokens to stderr")
    return p


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / "monkey.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input) if args.input else None
    search_dir = input_file.parent if input_file is not None else Path(".")
    if not search_dir.parts:
        search_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir)

    prompt = PROMPT
    greeting = True
    cfg_repl = config.get("repl")
    if isinstance(cfg_repl, dict):
        cfg_prompt = cfg_repl.get("prompt")
        if isinstance(cfg_prompt, str):
            prompt = cfg_prompt
        cfg_greeting = cfg_repl.get("greeting")
        if isinstance(cfg_greeting, bool):
            greeting = cfg_greeting
    if args.prompt is not None:
        prompt = args.prompt
    if args.greeting is not None:
        greeting = args.greeting

    strict = False
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_strict = cfg_lexer.get("strict")
        if isinstance(cfg_strict, bool):
            strict = cfg_strict
    if args.strict is not None:
        strict = args.strict

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        prompt=prompt,
        greeting=greeting,
        strict=strict,
        debug=args.debug,
    )


def tokenize_file(input_file: Path, options: CliOptions) -> str:
    """Read and tokenize a Monkey file, returning one token per line (EOF omitted)."""
    from monkey.debug import dump_tokens
    from monkey.lexer import tokenize
    from monkey.tokens import TokenType

    source = input_file.read_text(encoding="utf-8")

    if options.debug:
        dump_tokens(source, file=sys.stderr)

    tokens = tokenize(source, strict=options.strict)
    return "".join(f"{tok}\n" for tok in tokens if tok.type != TokenType.EOF)


def run_repl(options: CliOptions) -> None:
    """Greet the user and hand stdin/stdout to the REPL."""
    from monkey.repl import start

    if options.greeting:
        print(f"Hello {getpass.getuser()}! This is Monkey programming language!")
        print("Feel free to type in commands")
    start(sys.stdin, sys.stdout, prompt=options.prompt)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except tomllib.TOMLDecodeError as exc:
        print(f"error: invalid config file: {exc}", file=sys.stderr)
        return 2

    input_file = options.input_file
    if input_file is None:
        try:
            run_repl(options)
        except KeyboardInterrupt:
            print(file=sys.stderr)
        return 0

    try:
        text = tokenize_file(input_file, options)
    except LexError as exc:
        print(exc.format(str(input_file)), file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: cannot read {input_file}: {exc.strerror}", file=sys.stderr)
        return 1
    except UnicodeDecodeError as exc:
        print(f"error: cannot read {input_file}: not valid UTF-8 ({exc.reason})", file=sys.stderr)
        return 1

    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)

    return 0
