"""Scan-once carrier for callers that want tokens and diagnostics together."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loxpy.diagnostics import DiagnosticSink, has_errors
from loxpy.lexer.scanner import scan_tokens

if TYPE_CHECKING:
    from loxpy.diagnostics import Diagnostic
    from loxpy.lexer.tokens import Token


@dataclass(slots=True)
class ScanResult:
    """Tokens and diagnostics from scanning one complete source unit."""

    source_text: str
    tokens: list[Token]
    sink: DiagnosticSink = field(repr=False)

    @property
    def diagnostics(self) -> list[Diagnostic]:
        return self.sink.diagnostics

    @property
    def has_errors(self) -> bool:
        return has_errors(self.sink.diagnostics)

    @property
    def significant_tokens(self) -> list[Token]:
        """Tokens without the trailing EOF marker."""
        return self.tokens[:-1]


def scan(source: str) -> ScanResult:
    """Scan `source` with a fresh sink."""
    sink = DiagnosticSink()
    tokens = scan_tokens(source, sink)
    return ScanResult(source_text=source, tokens=tokens, sink=sink)
