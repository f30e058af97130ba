"""Lexer."""

from loxpy.lexer.result import ScanResult, scan
from loxpy.lexer.scanner import Scanner, dump_tokens, format_token, scan_tokens, token_text
from loxpy.lexer.tokens import KEYWORDS, LiteralValue, Token, TokenKind

__all__ = [
    "KEYWORDS",
    "LiteralValue",
    "ScanResult",
    "Scanner",
    "Token",
    "TokenKind",
    "dump_tokens",
    "format_token",
    "scan",
    "scan_tokens",
    "token_text",
]
