"""Expression CLI commands: eval, postfix, tokens."""

import click

from infixcalc.config import CalculatorConfig
from infixcalc.converter import format_postfix, parse
from infixcalc.errors import CalculatorError, ErrorKind, InvalidExpressionError
from infixcalc.evaluator import evaluate
from infixcalc.lexer import tokenize

EXIT_CODES = {
    ErrorKind.INVALID_ARGUMENT: 1,
    ErrorKind.ARITHMETIC: 3,
}

# Expressions such as "-5" would otherwise be parsed as options
_EXPRESSION_SETTINGS = {"ignore_unknown_options": True}


def _join(expression: tuple[str, ...]) -> str:
    return " ".join(expression)


def _require(source: str) -> str:
    if not source.strip():
        _fail(InvalidExpressionError("Expression cannot be null or empty"))
    return source


def _fail(error: CalculatorError):
    click.echo(click.style(f"Error: {error}", fg="red"), err=True)
    raise SystemExit(EXIT_CODES[error.kind])


@click.command("eval", context_settings=_EXPRESSION_SETTINGS)
@click.argument("expression", nargs=-1, required=True, type=click.UNPROCESSED)
@click.pass_obj
def eval_cmd(config: CalculatorConfig, expression: tuple[str, ...]):
    """Evaluate EXPRESSION and print the integer result.

    Tokens must be separated by spaces; quote the expression so the shell
    does not expand '*':

        infixcalc eval "10 + 2 * -3 - 4 / 2"
    """
    try:
        result = evaluate(_join(expression), config)
    except CalculatorError as e:
        _fail(e)
    click.echo(result)


@click.command("postfix", context_settings=_EXPRESSION_SETTINGS)
@click.argument("expression", nargs=-1, required=True, type=click.UNPROCESSED)
def postfix_cmd(expression: tuple[str, ...]):
    """Print EXPRESSION in postfix (RPN) order."""
    source = _require(_join(expression))
    try:
        postfix = parse(source)
    except CalculatorError as e:
        _fail(e)
    click.echo(format_postfix(postfix))


@click.command("tokens", context_settings=_EXPRESSION_SETTINGS)
@click.argument("expression", nargs=-1, required=True, type=click.UNPROCESSED)
def tokens_cmd(expression: tuple[str, ...]):
    """Print the tokens of EXPRESSION, one per line."""
    try:
        tokens = tokenize(_require(_join(expression)))
    except CalculatorError as e:
        _fail(e)
    for token in tokens:
        click.echo(f"{token.type.name:<8} {token.value!s:<6} @{token.position}")
