import logging
import string
from typing import Iterator

from exprcc.errors import ErrorKind, error_at
from exprcc.token import MAX_NUMBER, Token, TokenType, new_token

logger = logging.getLogger(__name__)

RESERVED = "+-"


def read_number(expression: str, index: int) -> tuple[Token, int]:
    end = index
    while end < len(expression) and expression[end] in string.digits:
        end += 1
    token = new_token(TokenType.Number, expression, index, end)
    token.value = int(token.expression)
    if token.value > MAX_NUMBER:
        error_at(expression, index, "number too large", ErrorKind.Lexical)
    return token, end


def tokenize(expression: str) -> Token:
    """Split ``expression`` into a chain of tokens ending with an EOF token.

    Returns the first real token; the chain is linked through ``next_token``.
    """
    head = Token()
    current = head
    index = 0
    while index < len(expression):
        if expression[index] in string.whitespace:
            index += 1
            continue
        if expression[index] in RESERVED:
            current.next_token = new_token(
                TokenType.Reserved, expression, index, index + 1
            )
            current = current.next_token
            index += 1
            continue
        if expression[index] in string.digits:
            current.next_token, index = read_number(expression, index)
            current = current.next_token
            continue
        error_at(expression, index, "invalid token", ErrorKind.Lexical)
    current.next_token = new_token(TokenType.EOF, expression, index, index)
    logger.debug("tokenized %r into %d tokens", expression, count(head.next_token))
    return head.next_token


def iter_tokens(token: Token) -> Iterator[Token]:
    while token is not None:
        yield token
        token = token.next_token


def count(token: Token) -> int:
    return sum(1 for _ in iter_tokens(token))
