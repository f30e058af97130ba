"""Lexer tokens."""

from dataclasses import dataclass
from enum import IntEnum
from types import MappingProxyType
from typing import Final, Mapping

from loxpy.text import TextRange


class TokenKind(IntEnum):
    # -------------------------
    # Single-character punctuation
    # -------------------------
    LEFT_PAREN = 1  # (
    RIGHT_PAREN = 2  # )
    LEFT_BRACE = 3  # {
    RIGHT_BRACE = 4  # }
    COMMA = 5  # ,
    DOT = 6  # .
    MINUS = 7  # -
    PLUS = 8  # +
    SEMICOLON = 9  # ;
    SLASH = 10  # /
    STAR = 11  # *

    # -------------------------
    # One or two character operators
    # -------------------------
    BANG = 20  # !
    BANG_EQUAL = 21  # !=
    EQUAL = 22  # =
    EQUAL_EQUAL = 23  # ==
    GREATER = 24  # >
    GREATER_EQUAL = 25  # >=
    LESS = 26  # <
    LESS_EQUAL = 27  # <=

    # -------------------------
    # Literals
    # -------------------------
    IDENTIFIER = 30
    STRING = 31
    NUMBER = 32

    # -------------------------
    # Reserved words
    # -------------------------
    AND = 40
    CLASS = 41
    ELSE = 42
    FALSE = 43
    FUN = 44
    FOR = 45
    IF = 46
    NIL = 47
    OR = 48
    PRINT = 49
    RETURN = 50
    SUPER = 51
    THIS = 52
    TRUE = 53
    VAR = 54
    WHILE = 55

    # -------------------------
    # Special / sentinels
    # -------------------------
    EOF = 60

    @property
    def is_keyword(self) -> bool:
        return TokenKind.AND <= self <= TokenKind.WHILE

    @property
    def has_literal(self) -> bool:
        return self in (TokenKind.STRING, TokenKind.NUMBER)


# Built once at import; the proxy keeps the table read-only.
KEYWORDS: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        "and": TokenKind.AND,
        "class": TokenKind.CLASS,
        "else": TokenKind.ELSE,
        "false": TokenKind.FALSE,
        "for": TokenKind.FOR,
        "fun": TokenKind.FUN,
        "if": TokenKind.IF,
        "nil": TokenKind.NIL,
        "or": TokenKind.OR,
        "print": TokenKind.PRINT,
        "return": TokenKind.RETURN,
        "super": TokenKind.SUPER,
        "this": TokenKind.THIS,
        "true": TokenKind.TRUE,
        "var": TokenKind.VAR,
        "while": TokenKind.WHILE,
    }
)

LiteralValue = float | str | None


@dataclass(frozen=True, slots=True)
class Token:
    """A single scanned token.

    `lexeme` is the exact source slice covered by `range`. `literal` is only
    set for STRING (text between the quotes) and NUMBER (parsed float).
    """

    kind: TokenKind
    lexeme: str
    literal: LiteralValue
    line: int
    range: TextRange

    def __str__(self) -> str:
        return f"{self.kind.name} {self.lexeme} {self.literal}"
