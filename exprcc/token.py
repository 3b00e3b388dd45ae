from dataclasses import dataclass
from enum import IntEnum
from typing import Optional

MAX_NUMBER = 9223372036854775807


class TokenType(IntEnum):
    Reserved = 1
    Number = 2
    EOF = 3


@dataclass
class Token:
    kind: Optional[TokenType] = None
    value: Optional[int] = None
    location: Optional[int] = None
    length: Optional[int] = None
    expression: Optional[str] = None
    original_expression: Optional[str] = None
    next_token: Optional["Token"] = None


def new_token(
    token_type: TokenType, expression: str, start: int = 0, end: int = 0
) -> Token:
    return Token(
        token_type, None, start, end - start, expression[start:end], expression
    )


def equal(token: Token, expression: str) -> bool:
    return token.kind == TokenType.Reserved and token.expression == expression
