"""Scanner throughput benchmark over a directory of `.lox` files."""

from __future__ import annotations

import argparse
import cProfile
from dataclasses import dataclass
import io
from pathlib import Path
import pstats
import statistics
import time
from typing import Sequence

from tqdm import tqdm

from loxpy.diagnostics import DiagnosticSink
from loxpy.lexer import scan_tokens


@dataclass(frozen=True, slots=True)
class RunStats:
    duration: float
    files: int
    tokens: int
    diagnostics: int


def collect_sources(root: Path) -> list[Path]:
    return [path for path in sorted(root.rglob("*.lox")) if path.is_file()]


def run_once(files: list[Path], *, label: str, show_progress: bool) -> RunStats:
    start = time.perf_counter()
    total_tokens = 0
    total_diagnostics = 0
    iterator = tqdm(files, desc=label, unit="file") if show_progress else files
    for path in iterator:
        sink = DiagnosticSink()
        tokens = scan_tokens(path.read_text(encoding="utf-8"), sink)
        total_tokens += len(tokens)
        total_diagnostics += len(sink.diagnostics)
    duration = time.perf_counter() - start
    return RunStats(duration, len(files), total_tokens, total_diagnostics)


def benchmark(files: list[Path], *, runs: int, warmups: int, show_progress: bool) -> list[RunStats]:
    for warmup_idx in range(max(warmups, 0)):
        run_once(files, label=f"warmup {warmup_idx + 1}/{max(warmups, 0)}", show_progress=show_progress)

    return [
        run_once(files, label=f"run {run_idx + 1}/{max(runs, 1)}", show_progress=show_progress)
        for run_idx in range(max(runs, 1))
    ]


def main(argv: Sequence[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark scanner throughput")
    parser.add_argument("root", type=Path, help="Directory searched recursively for .lox files")
    parser.add_argument("--runs", type=int, default=5, help="Measured runs")
    parser.add_argument("--warmups", type=int, default=1, help="Warmup runs")
    parser.add_argument(
        "--no-progress",
        action="store_true",
        help="Disable tqdm progress bars (useful for pure timing)",
    )
    parser.add_argument(
        "--profile",
        action="store_true",
        help="Run cProfile and print top hotspots",
    )
    parser.add_argument(
        "--profile-top",
        type=int,
        default=30,
        help="Number of cProfile rows to print (default: 30)",
    )
    parser.add_argument(
        "--profile-sort",
        type=str,
        default="tottime",
        help="cProfile sort key (default: tottime, common: cumulative)",
    )
    args = parser.parse_args(argv)

    root: Path = args.root
    if not root.is_dir():
        raise SystemExit(f"Invalid root directory: {root}")

    files = collect_sources(root)
    if not files:
        raise SystemExit(f"No .lox files found under {root}")

    show_progress = not args.no_progress

    if args.profile:
        profiler = cProfile.Profile()
        profiler.enable()
        results = benchmark(files, runs=args.runs, warmups=args.warmups, show_progress=show_progress)
        profiler.disable()
        stream = io.StringIO()
        stats = pstats.Stats(profiler, stream=stream)
        stats.sort_stats(args.profile_sort).print_stats(max(args.profile_top, 1))
        print("\n[cProfile top functions]")
        print(stream.getvalue())
    else:
        results = benchmark(files, runs=args.runs, warmups=args.warmups, show_progress=show_progress)

    timings = [result.duration for result in results]
    last = results[-1]
    mean = statistics.mean(timings)

    print(f"Dataset: {root}")
    print(f"Files: {last.files}")
    print(f"Tokens: {last.tokens}")
    print(f"Diagnostics: {last.diagnostics}")
    print(f"Runs: {len(timings)} (warmups={max(args.warmups, 0)})")
    print(f"Best:   {min(timings):.4f}s")
    print(f"Median: {statistics.median(timings):.4f}s")
    print(f"Mean:   {mean:.4f}s")
    print(f"Worst:  {max(timings):.4f}s")
    if mean > 0:
        print(f"Files/s (mean):  {last.files / mean:.1f}")
        print(f"Tokens/s (mean): {last.tokens / mean:.1f}")
    return 0
