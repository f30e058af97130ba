#!/usr/bin/env python3
"""Quick perf benchmark for scanning a tree of .lox files."""

from loxpy.bench import main

if __name__ == "__main__":
    raise SystemExit(main())
