from loxpy import scan
from loxpy.lexer import TokenKind, dump_tokens, format_token


def test_scan_result_exposes_tokens_and_error_state() -> None:
    result = scan("var x = 1;")

    assert result.source_text == "var x = 1;"
    assert result.diagnostics == []
    assert result.has_errors is False
    assert [token.kind for token in result.significant_tokens] == [
        TokenKind.VAR,
        TokenKind.IDENTIFIER,
        TokenKind.EQUAL,
        TokenKind.NUMBER,
        TokenKind.SEMICOLON,
    ]


def test_scan_result_reports_errors() -> None:
    result = scan('"open')

    assert result.has_errors is True
    assert [d.code for d in result.diagnostics] == ["LEXER_UNTERMINATED_STRING"]
    assert result.significant_tokens == []


def test_each_scan_gets_its_own_sink() -> None:
    bad = scan("@")
    good = scan("1")

    assert bad.has_errors is True
    assert good.has_errors is False


def test_format_token_line() -> None:
    result = scan("print 1.5;")

    assert format_token(1, result.tokens[1]) == "001 NUMBER         line=1 range=(6, 9) text='1.5' literal=1.5"


def test_dump_tokens_prints_tokens_and_diagnostics(capsys) -> None:
    result = scan("a @")

    dump_tokens(result.tokens, result.diagnostics)

    out = capsys.readouterr().out
    assert "000 IDENTIFIER" in out
    assert "001 EOF" in out
    assert "Diagnostics:" in out
    assert "- LEXER_UNEXPECTED_CHARACTER [line 1] Error: Unexpected character @" in out
