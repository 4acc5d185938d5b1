"""infixcalc CLI entry point."""

import dataclasses
import logging

import click
from click.core import ParameterSource

from infixcalc.config import LOG_LEVELS, CalculatorConfig, parse_int_bits


def _int_bits_option(ctx, param, value):
    if value is None:
        return None
    try:
        return parse_int_bits(value)
    except ValueError as e:
        raise click.BadParameter(str(e)) from None


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (defaults to INFIXCALC_LOG_LEVEL or WARNING).",
)
@click.option(
    "--int-bits",
    default=None,
    callback=_int_bits_option,
    help="Signed integer width, or 'none' for unbounded (defaults to INFIXCALC_INT_BITS or 64).",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, int_bits: int | None):
    """infixcalc: evaluate integer arithmetic expressions."""
    try:
        config = CalculatorConfig.from_env()
    except ValueError as e:
        raise click.UsageError(str(e)) from None

    overrides = {}
    if log_level is not None:
        overrides["log_level"] = log_level.upper()
    if ctx.get_parameter_source("int_bits") == ParameterSource.COMMANDLINE:
        overrides["int_bits"] = int_bits
    try:
        config = dataclasses.replace(config, **overrides)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--int-bits") from None

    logging.basicConfig(
        level=config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = config


# Register subcommands
from infixcalc.cli.expression_cmd import eval_cmd, postfix_cmd, tokens_cmd  # noqa: E402

cli.add_command(eval_cmd)
cli.add_command(postfix_cmd)
cli.add_command(tokens_cmd)
