"""Diagnostics core types."""

from dataclasses import dataclass

from loxpy.diagnostics.codes import Severity


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic emitted by the scanner or its callers."""

    code: str
    message: str
    line: int
    severity: Severity = "error"
    hint: str | None = None
    category: str | None = None
