import pytest

from exprcc.errors import CompileError, ErrorKind
from exprcc.token import TokenType
from exprcc.tokenize import iter_tokens, tokenize


def _kinds(expression: str) -> list[tuple[TokenType, object]]:
    result = []
    for token in iter_tokens(tokenize(expression)):
        if token.kind == TokenType.Number:
            result.append((token.kind, token.value))
        else:
            result.append((token.kind, token.expression))
    return result


def test_whitespace_produces_no_tokens():
    assert _kinds("12+ 34 -5") == [
        (TokenType.Number, 12),
        (TokenType.Reserved, "+"),
        (TokenType.Number, 34),
        (TokenType.Reserved, "-"),
        (TokenType.Number, 5),
        (TokenType.EOF, ""),
    ]


def test_locations_point_into_input():
    tokens = list(iter_tokens(tokenize("12+ 34 -5")))
    assert [t.location for t in tokens] == [0, 2, 4, 7, 8, 9]
    assert tokens[0].length == 2
    assert all(t.original_expression == "12+ 34 -5" for t in tokens)


def test_empty_input_is_only_eof():
    token = tokenize("")
    assert token.kind == TokenType.EOF
    assert token.location == 0
    assert token.next_token is None


def test_tabs_and_newlines_are_whitespace():
    assert [k for k, _ in _kinds("\t1\n+\r2 ")] == [
        TokenType.Number,
        TokenType.Reserved,
        TokenType.Number,
        TokenType.EOF,
    ]


def test_eof_is_at_end_of_input():
    tokens = list(iter_tokens(tokenize("1 + 2   ")))
    assert tokens[-1].kind == TokenType.EOF
    assert tokens[-1].location == 8
    assert sum(1 for t in tokens if t.kind == TokenType.EOF) == 1


def test_invalid_character():
    with pytest.raises(CompileError) as exc_info:
        tokenize("1*2")
    assert exc_info.value.kind == ErrorKind.Lexical
    assert exc_info.value.location == 1
    assert exc_info.value.render() == "1*2\n ^ invalid token\n"


def test_non_ascii_digit_is_rejected():
    with pytest.raises(CompileError) as exc_info:
        tokenize("1+²")
    assert exc_info.value.location == 2


def test_number_too_large():
    tokenize("9223372036854775807")
    with pytest.raises(CompileError) as exc_info:
        tokenize("1 + 9223372036854775808")
    assert exc_info.value.kind == ErrorKind.Lexical
    assert exc_info.value.location == 4
    assert exc_info.value.message == "number too large"


def _locations(expression: str) -> list[int]:
    return [token.location for token in iter_tokens(tokenize(expression))]


def test_tokenize_is_repeatable():
    expression = "7 - 3+10" + "+1" * 5000
    assert _kinds(expression) == _kinds(expression)
    assert _locations(expression) == _locations(expression)
    assert len(_kinds(expression)) == 5 + 2 * 5000 + 1
