"""Parse errors are raised for the first problem and stop the parse."""

import pytest

from uselesslang.exceptions import (
    InvalidNumberLiteralError,
    InvalidStringLiteralError,
    ParseError,
    UnexpectedEofError,
    UnexpectedTokenError,
)
from uselesslang.lexer import Token
from uselesslang.parser import Parser
from uselesslang.tests.utils import parse_source


def test_missing_identifier_in_let():
    with pytest.raises(UnexpectedTokenError) as exc_info:
        parse_source("let = 5;")
    assert exc_info.value.token.type == 'ASSIGN'
    assert "Unexpected token '='" in str(exc_info.value)
    assert "expected 'ID' (ID)" in str(exc_info.value)


def test_missing_semicolon_reports_end_of_input():
    with pytest.raises(UnexpectedTokenError) as exc_info:
        parse_source("let x = 5")
    assert exc_info.value.token.type == 'EOF'
    assert str(exc_info.value).startswith("Unexpected end of input, expected ';'")


def test_unterminated_block():
    with pytest.raises(UnexpectedEofError):
        parse_source("loop { print(1);")


def test_unterminated_array_and_object():
    with pytest.raises(UnexpectedEofError):
        parse_source("let a = [1, 2")
    with pytest.raises(UnexpectedEofError):
        parse_source('let o = {"a": 1,')


def test_statement_cut_off_after_directive_attribute():
    with pytest.raises(UnexpectedEofError):
        parse_source("#[inline]")


def test_number_outside_int64_range():
    parse_source("let big = 9223372036854775807;")
    with pytest.raises(InvalidNumberLiteralError):
        parse_source("let big = 9223372036854775808;")


def test_string_without_closing_quote():
    tokens = [
        Token('PRINT', 'print', 1),
        Token('LPAREN', '(', 1),
        Token('STRING', '"abc', 1),
        Token('RPAREN', ')', 1),
        Token('SEMICOLON', ';', 1),
    ]
    with pytest.raises(InvalidStringLiteralError):
        Parser(tokens, file="<test>").parse()


def test_parser_accepts_tokens_without_eof():
    tokens = [Token('LET', 'let', 1), Token('ID', 'x', 1), Token('ASSIGN', '=', 1),
              Token('NUMBER', '1', 1), Token('SEMICOLON', ';', 1)]
    assert len(Parser(tokens).parse()) == 1


def test_not_an_expression():
    with pytest.raises(UnexpectedTokenError) as exc_info:
        parse_source("print(;")
    assert "expected an expression" in str(exc_info.value)


def test_object_keys_must_be_strings():
    with pytest.raises(UnexpectedTokenError):
        parse_source("let o = {a: 1};")


def test_error_message_has_line_and_file():
    with pytest.raises(ParseError) as exc_info:
        parse_source("let x = 1;\nlet = 2;")
    message = str(exc_info.value)
    assert "on line 2" in message
    assert message.endswith("in <test>")
    assert exc_info.value.line == 2
    assert exc_info.value.file == "<test>"


def test_parse_errors_are_syntax_errors():
    with pytest.raises(SyntaxError):
        parse_source("loop print(1);")
