"""Diagnostics."""

from loxpy.diagnostics.codes import (
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    DiagnosticSpec,
)
from loxpy.diagnostics.diagnostic import Diagnostic, Severity
from loxpy.diagnostics.report import collect_diagnostics, has_errors, render_diagnostic
from loxpy.diagnostics.sink import DiagnosticSink, Reporter

__all__ = [
    "LEXER_UNEXPECTED_CHARACTER",
    "LEXER_UNTERMINATED_STRING",
    "Diagnostic",
    "DiagnosticSink",
    "DiagnosticSpec",
    "Reporter",
    "Severity",
    "collect_diagnostics",
    "has_errors",
    "render_diagnostic",
]
