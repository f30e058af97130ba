"""Command-line driver: `loxpy [script]`."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Sequence, TextIO

from loxpy.diagnostics import DiagnosticSink, render_diagnostic
from loxpy.lexer import Token, scan_tokens
from loxpy.options import (
    EXIT_DATA_ERROR,
    EXIT_OK,
    EXIT_USAGE,
    RunMode,
    RunOptions,
    UsageError,
)

PROMPT = "> "


def run_source(source: str, sink: DiagnosticSink, *, show_tokens: bool = True) -> list[Token]:
    """Scan one source unit, print its tokens and any diagnostics."""
    tokens = scan_tokens(source, sink)
    if show_tokens:
        for token in tokens:
            print(token)
    for diagnostic in sink.diagnostics:
        print(render_diagnostic(diagnostic), file=sys.stderr)
    return tokens


def run_file(path: Path, options: RunOptions) -> int:
    source = path.read_text(encoding=options.encoding)
    sink = DiagnosticSink()
    run_source(source, sink, show_tokens=options.show_tokens)
    return EXIT_DATA_ERROR if sink.had_error else EXIT_OK


def run_prompt(options: RunOptions, stdin: TextIO | None = None) -> int:
    """Scan one line at a time until end of input.

    Each line is its own source unit, so constructs spanning lines (multi-line
    strings) are reported as unterminated. Errors on one line do not affect
    the next.
    """
    stream = stdin if stdin is not None else sys.stdin
    sink = DiagnosticSink()
    while True:
        print(PROMPT, end="", flush=True)
        line = stream.readline()
        if not line:
            print()
            break
        sink.reset()
        # the line terminator is not part of the source unit
        run_source(line.removesuffix("\n"), sink, show_tokens=options.show_tokens)
    return EXIT_OK


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="loxpy", description="Scan Lox source and print its tokens")
    parser.add_argument("scripts", nargs="*", metavar="script", help="Script to scan (omit for a prompt)")
    parser.add_argument(
        "--no-tokens",
        action="store_true",
        help="Only report diagnostics, do not print tokens",
    )
    parser.add_argument("--encoding", default="utf-8", help="Source file encoding (default: utf-8)")
    return parser


def main(argv: Sequence[str] | None = None, stdin: TextIO | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        options = RunOptions.from_args(args.scripts, show_tokens=not args.no_tokens, encoding=args.encoding)
    except UsageError as exc:
        print(str(exc))
        return EXIT_USAGE

    if options.mode == RunMode.FILE and options.path is not None:
        return run_file(options.path, options)
    return run_prompt(options, stdin=stdin)


if __name__ == "__main__":
    raise SystemExit(main())
