"""Caller-owned diagnostic collector."""

from __future__ import annotations

from typing import Protocol

from loxpy.diagnostics.codes import spec_for_message
from loxpy.diagnostics.diagnostic import Diagnostic


class Reporter(Protocol):
    """What the scanner needs from a sink: one `report` call per error."""

    def report(self, line: int, message: str) -> None: ...


class DiagnosticSink:
    """Records diagnostics for one scan at a time.

    The scanner only writes into the sink; the caller reads `had_error` after
    the scan returns to decide whether to hand tokens to the parser.
    """

    def __init__(self) -> None:
        self._diagnostics: list[Diagnostic] = []
        self._had_error = False

    @property
    def diagnostics(self) -> list[Diagnostic]:
        """Diagnostics in the order they were reported."""
        return self._diagnostics

    @property
    def had_error(self) -> bool:
        return self._had_error

    def report(self, line: int, message: str) -> None:
        """Record an error at `line`, tagged with the code its message belongs to."""
        spec = spec_for_message(message)
        self._push(
            Diagnostic(
                code=spec.code,
                message=message,
                line=line,
                severity=spec.severity,
                hint=spec.hint,
                category=spec.category,
            )
        )

    def reset(self) -> None:
        """Forget everything reported so far (used between prompt lines)."""
        self._diagnostics = []
        self._had_error = False

    def _push(self, diagnostic: Diagnostic) -> None:
        self._diagnostics.append(diagnostic)
        if diagnostic.severity == "error":
            self._had_error = True
