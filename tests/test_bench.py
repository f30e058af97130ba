from pathlib import Path

from loxpy.bench import benchmark, collect_sources, main, run_once


def _write_sources(root: Path) -> None:
    (root / "nested").mkdir()
    (root / "a.lox").write_text("var a = 1;\n", encoding="utf-8")
    (root / "nested" / "b.lox").write_text("print @;\n", encoding="utf-8")
    (root / "notes.txt").write_text("not lox", encoding="utf-8")


def test_collect_sources_finds_lox_files_recursively(tmp_path: Path) -> None:
    _write_sources(tmp_path)

    files = collect_sources(tmp_path)

    assert [path.name for path in files] == ["a.lox", "b.lox"]


def test_run_once_counts_tokens_and_diagnostics(tmp_path: Path) -> None:
    _write_sources(tmp_path)

    stats = run_once(collect_sources(tmp_path), label="run", show_progress=False)

    assert stats.files == 2
    # var a = 1 ; EOF + print ; EOF
    assert stats.tokens == 9
    assert stats.diagnostics == 1
    assert stats.duration >= 0


def test_benchmark_runs_with_progress_bars(tmp_path: Path) -> None:
    _write_sources(tmp_path)

    results = benchmark(collect_sources(tmp_path), runs=2, warmups=1, show_progress=True)

    assert len(results) == 2
    assert all(result.tokens == 9 for result in results)


def test_main_prints_summary(tmp_path: Path, capsys) -> None:
    _write_sources(tmp_path)

    code = main([str(tmp_path), "--runs", "1", "--warmups", "0", "--no-progress"])

    out = capsys.readouterr().out
    assert code == 0
    assert "Files: 2" in out
    assert "Tokens: 9" in out
    assert "Diagnostics: 1" in out
