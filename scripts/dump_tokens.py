#!/usr/bin/env python
"""Write a token dump for one .lox file."""

import argparse
from pathlib import Path

from loxpy.lexer import format_token, scan


def main() -> None:
    parser = argparse.ArgumentParser(description="Dump scanner tokens for a Lox source file")
    parser.add_argument("input", type=Path)
    parser.add_argument("-o", "--output", type=Path, default=None, help="Output file (default: out/<name>_tokens.txt)")
    args = parser.parse_args()

    input_path: Path = args.input
    output_path: Path = args.output or Path("out") / f"{input_path.stem}_tokens.txt"

    result = scan(input_path.read_text(encoding="utf-8"))

    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", encoding="utf-8") as f:
        for idx, token in enumerate(result.tokens):
            f.write(format_token(idx, token) + "\n")

    print(f"Wrote {len(result.tokens)} tokens to {output_path}")
    if result.has_errors:
        print(f"{len(result.diagnostics)} diagnostic(s) reported")


if __name__ == "__main__":
    main()
