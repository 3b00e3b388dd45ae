from enum import IntEnum
from typing import NoReturn, Optional


class ErrorKind(IntEnum):
    Usage = 1
    Lexical = 2
    Syntax = 3


def error_message(expression: str, location: int, message: str) -> str:
    caret = " " * location + "^ "
    return f"{expression}\n{caret}{message}\n"


class CompileError(Exception):
    """A fatal diagnostic.

    Raised where the problem is detected and rendered once by the command
    line entry point, which then exits with status 1.
    """

    def __init__(
        self,
        kind: ErrorKind,
        message: str,
        expression: Optional[str] = None,
        location: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.message = message
        self.expression = expression
        self.location = location

    def render(self) -> str:
        if self.expression is None or self.location is None:
            return f"{self.message}\n"
        return error_message(self.expression, self.location, self.message)


def error_at(
    expression: str, location: int, message: str, kind: ErrorKind = ErrorKind.Syntax
) -> NoReturn:
    raise CompileError(kind, message, expression, location)
