import argparse
import logging
import sys
from pathlib import Path
from typing import TextIO

from shap.diagnostics import SourceError
from shap.lexer import tokenize
from shap.parser import Parser
from shap.runtime import Walker

logger = logging.getLogger("shap.repl")

PROMPT = "> "


def run_source(source: str, out: TextIO) -> list[float]:
    """Parse and evaluate one unit of source, printing each statement's value to ``out``."""
    stmts = Parser(source).parse()
    walker = Walker()
    results: list[float] = []
    for stmt in stmts:
        value = walker.eval(stmt)
        print(value, file=out)
        results.append(value)
    return results


def dump_tokens(source: str, out: TextIO) -> None:
    for token in tokenize(source):
        print(repr(token), file=out)


def run_repl(tokens_only: bool = False) -> None:
    while True:
        try:
            line = input(PROMPT)
        except (EOFError, KeyboardInterrupt):
            print()
            return

        try:
            if tokens_only:
                dump_tokens(line, sys.stdout)
            else:
                run_source(line, sys.stdout)
        except SourceError as e:
            print(e.render(line))


def run_file(path: Path, tokens_only: bool = False) -> int:
    try:
        source = path.read_text()
    except OSError as e:
        print(f"{path}: {e.strerror}", file=sys.stderr)
        return 1
    logger.debug("Running %s (%d chars)", path, len(source))
    try:
        if tokens_only:
            dump_tokens(source, sys.stdout)
        else:
            run_source(source, sys.stdout)
    except SourceError as e:
        print(f"{path}:", file=sys.stderr)
        print(e.render(source), file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="shap", description="Evaluate arithmetic statements terminated by ';'.")
    parser.add_argument("file", nargs="?", type=Path, help="source file to evaluate; starts a REPL when omitted")
    parser.add_argument("--tokens", action="store_true", help="print the token stream instead of evaluating")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.file is None:
        run_repl(tokens_only=args.tokens)
        return 0
    return run_file(args.file, tokens_only=args.tokens)
