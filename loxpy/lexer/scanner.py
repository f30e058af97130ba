"""Scanner."""

from types import MappingProxyType
from typing import Final, Mapping

from loxpy.diagnostics import (
    LEXER_UNEXPECTED_CHARACTER,
    LEXER_UNTERMINATED_STRING,
    Diagnostic,
    Reporter,
    render_diagnostic,
)
from loxpy.lexer.tokens import KEYWORDS, LiteralValue, Token, TokenKind
from loxpy.text import TextRange, TextSize, slice_text_range

_SINGLE_CHAR_KINDS: Final[Mapping[str, TokenKind]] = MappingProxyType(
    {
        "(": TokenKind.LEFT_PAREN,
        ")": TokenKind.RIGHT_PAREN,
        "{": TokenKind.LEFT_BRACE,
        "}": TokenKind.RIGHT_BRACE,
        ",": TokenKind.COMMA,
        ".": TokenKind.DOT,
        "-": TokenKind.MINUS,
        "+": TokenKind.PLUS,
        ";": TokenKind.SEMICOLON,
        "*": TokenKind.STAR,
    }
)

# first char -> (kind when followed by "=", bare kind)
_EQUAL_SUFFIXED_KINDS: Final[Mapping[str, tuple[TokenKind, TokenKind]]] = MappingProxyType(
    {
        "!": (TokenKind.BANG_EQUAL, TokenKind.BANG),
        "=": (TokenKind.EQUAL_EQUAL, TokenKind.EQUAL),
        "<": (TokenKind.LESS_EQUAL, TokenKind.LESS),
        ">": (TokenKind.GREATER_EQUAL, TokenKind.GREATER),
    }
)


def is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def is_alpha(ch: str) -> bool:
    # ASCII only; other letters are unexpected characters outside strings/comments.
    return ("a" <= ch <= "z") or ("A" <= ch <= "Z") or ch == "_"


def is_alphanumeric(ch: str) -> bool:
    return is_alpha(ch) or is_digit(ch)


class Scanner:
    """Single-pass maximal-munch scanner.

    Offsets are python string indices (code points). Lines are 1-based and
    advance on every `\\n`, including newlines inside string literals.
    Lexical errors go to the injected sink; scanning always runs to the end.
    """

    def __init__(self, source: str, sink: Reporter) -> None:
        self._source = source
        self._sink = sink
        self._tokens: list[Token] = []
        self._start = 0
        self._position = 0
        self._line = 1

    @property
    def source(self) -> str:
        """Original source text."""
        return self._source

    @property
    def sink(self) -> Reporter:
        return self._sink

    @property
    def line(self) -> int:
        return self._line

    @property
    def position(self) -> int:
        return self._position

    @property
    def is_eof(self) -> bool:
        return self._position >= len(self._source)

    @property
    def current_range(self) -> TextRange:
        return TextRange.new(TextSize.from_int(self._start), TextSize.from_int(self._position))

    def scan_tokens(self) -> list[Token]:
        """Scan the whole source; the result always ends with one EOF token."""
        self._tokens = []
        self._start = 0
        self._position = 0
        self._line = 1

        while not self.is_eof:
            self._start = self._position
            self._scan_token()

        end = TextSize.from_int(self._position)
        self._tokens.append(Token(TokenKind.EOF, "", None, self._line, TextRange.empty(end)))

        tokens, self._tokens = self._tokens, []
        return tokens

    def _scan_token(self) -> None:
        ch = self._advance()

        single = _SINGLE_CHAR_KINDS.get(ch)
        if single is not None:
            self._add_token(single)
            return

        pair = _EQUAL_SUFFIXED_KINDS.get(ch)
        if pair is not None:
            with_equal, bare = pair
            self._add_token(with_equal if self._match("=") else bare)
            return

        match ch:
            case "/":
                if self._match("/"):
                    self._skip_line_comment()
                else:
                    self._add_token(TokenKind.SLASH)
            case " " | "\r" | "\t":
                pass
            case "\n":
                self._line += 1
            case '"':
                self._lex_string()
            case _ if is_digit(ch):
                self._lex_number()
            case _ if is_alpha(ch):
                self._lex_identifier()
            case _:
                self._sink.report(self._line, LEXER_UNEXPECTED_CHARACTER.format(char=ch))

    def _skip_line_comment(self) -> None:
        # Stop before the newline so the main loop counts it.
        while not self.is_eof and self._current_char() != "\n":
            self._position += 1

    def _lex_string(self) -> None:
        while not self.is_eof and self._current_char() != '"':
            if self._current_char() == "\n":
                self._line += 1
            self._position += 1

        if self.is_eof:
            self._sink.report(self._line, LEXER_UNTERMINATED_STRING.message)
            return

        # closing quote
        self._advance()
        self._add_token(TokenKind.STRING, self._source[self._start + 1 : self._position - 1])

    def _lex_number(self) -> None:
        while is_digit(self._current_char()):
            self._position += 1

        # A trailing "." only belongs to the number when a digit follows it.
        if self._current_char() == "." and is_digit(self._peek_char()):
            self._position += 1
            while is_digit(self._current_char()):
                self._position += 1

        self._add_token(TokenKind.NUMBER, float(self._source[self._start : self._position]))

    def _lex_identifier(self) -> None:
        while is_alphanumeric(self._current_char()):
            self._position += 1

        text = self._source[self._start : self._position]
        self._add_token(KEYWORDS.get(text, TokenKind.IDENTIFIER))

    def _add_token(self, kind: TokenKind, literal: LiteralValue = None) -> None:
        text = self._source[self._start : self._position]
        self._tokens.append(Token(kind, text, literal, self._line, self.current_range))

    def _match(self, expected: str) -> bool:
        """Consume the current char iff it equals `expected`."""
        if self.is_eof or self._source[self._position] != expected:
            return False
        self._position += 1
        return True

    def _current_char(self) -> str:
        if self.is_eof:
            return "\0"
        return self._source[self._position]

    def _peek_char(self, ahead: int = 1) -> str:
        index = self._position + ahead
        if index >= len(self._source):
            return "\0"
        return self._source[index]

    def _advance(self) -> str:
        ch = self._source[self._position]
        self._position += 1
        return ch


def scan_tokens(source: str, sink: Reporter) -> list[Token]:
    """Scan `source`, reporting lexical errors into `sink`."""
    return Scanner(source, sink).scan_tokens()


def token_text(source: str, token: Token) -> str:
    """Get the text of a token from the source string based on its range."""
    if token.kind == TokenKind.EOF:
        return ""
    return slice_text_range(source, token.range)


def format_token(index: int, token: Token) -> str:
    return (
        f"{index:03d} {token.kind.name:<14} line={token.line} "
        f"range={token.range.as_tuple()} text={token.lexeme!r} literal={token.literal!r}"
    )


def dump_tokens(tokens: list[Token], diagnostics: list[Diagnostic] | None = None) -> None:
    """Print token list with kind, line, range, text and literal for debugging."""
    for i, tok in enumerate(tokens):
        print(format_token(i, tok))

    if diagnostics is not None:
        print("\nDiagnostics:")
        for d in diagnostics:
            print(f"- {d.code} {render_diagnostic(d)}")
