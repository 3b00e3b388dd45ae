import logging

from exprcc.parse import Parse
from exprcc.token import Token
from exprcc.tokenize import tokenize

logger = logging.getLogger(__name__)

ACCUMULATOR = "rax"
SCRATCH = "rdi"
MAX_IMMEDIATE = 2147483647
PREAMBLE = [".intel_syntax noprefix\n", ".globl main\n", "main:\n"]


def emit(
    output: list[str], instruction: str, operand, register: str = ACCUMULATOR
) -> None:
    # add and sub only take a sign-extended 32-bit immediate.
    if instruction != "mov" and operand > MAX_IMMEDIATE:
        emit(output, "mov", operand, SCRATCH)
        operand = SCRATCH
    line = f"  {instruction} {register}, {operand}\n"
    logger.debug("emit %s", line.strip())
    output.append(line)


def codegen(token: Token) -> str:
    parser = Parse(token)
    output = list(PREAMBLE)

    # The first term must be a number.
    emit(output, "mov", parser.expect_number())

    while not parser.at_eof():
        if parser.consume("+"):
            emit(output, "add", parser.expect_number())
            continue
        parser.expect("-")
        emit(output, "sub", parser.expect_number())

    output.append("  ret\n")
    logger.debug("generated %d instructions", len(output) - len(PREAMBLE))
    return "".join(output)


def compile_expression(expression: str) -> str:
    return codegen(tokenize(expression))
