from exprcc.errors import error_at
from exprcc.token import Token, TokenType, equal


class Parse:
    token: Token

    def __init__(self, token: Token) -> None:
        self.token = token

    def advance(self) -> Token:
        token = self.token
        self.token = token.next_token
        return token

    def consume(self, op: str) -> bool:
        if not equal(self.token, op):
            return False
        self.advance()
        return True

    def expect(self, op: str) -> None:
        if not equal(self.token, op):
            error_at(
                self.token.original_expression,
                self.token.location,
                f"expected '{op}'",
            )
        self.advance()

    def expect_number(self) -> int:
        if self.token.kind != TokenType.Number:
            error_at(
                self.token.original_expression,
                self.token.location,
                "expected a number",
            )
        return self.advance().value

    def at_eof(self) -> bool:
        return self.token.kind == TokenType.EOF
