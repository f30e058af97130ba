"""Lexical front end for the Lox scripting language."""

from loxpy.diagnostics import Diagnostic, DiagnosticSink
from loxpy.lexer import KEYWORDS, ScanResult, Scanner, Token, TokenKind, scan, scan_tokens

__version__ = "0.1.0"

__all__ = [
    "KEYWORDS",
    "Diagnostic",
    "DiagnosticSink",
    "ScanResult",
    "Scanner",
    "Token",
    "TokenKind",
    "__version__",
    "scan",
    "scan_tokens",
]
