import logging
from typing import Optional

import click
import typer

from exprcc.codegen import compile_expression
from exprcc.errors import CompileError, ErrorKind

app = typer.Typer(add_completion=False)


def read_expression(expressions: Optional[list[str]]) -> str:
    if not expressions or len(expressions) != 1:
        program = click.get_current_context().find_root().info_name
        raise CompileError(
            ErrorKind.Usage, f"{program}: invalid number of arguments"
        )
    return expressions[0]


@app.command(context_settings={"ignore_unknown_options": True})
def main(
    expressions: Optional[list[str]] = typer.Argument(
        None,
        metavar="EXPRESSION",
        help="Expression to compile. Put it after -- if it is exactly -o or -v.",
    ),
    output: typer.FileTextWrite = typer.Option(
        "-", "--output", "-o", help="Write the listing here instead of stdout."
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Log debug output to stderr."
    ),
):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(name)s: %(message)s",
    )
    try:
        expression = read_expression(expressions)
        result = compile_expression(expression)
    except CompileError as e:
        click.echo(e.render(), err=True, nl=False)
        raise typer.Exit(code=1)

    output.write(result)


if __name__ == "__main__":
    app()
