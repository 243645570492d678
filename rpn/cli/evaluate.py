"""Eval command for RPN CLI."""

import json
import logging

import click

from rpn.runtime.executor import Executor, ExecutionConfig
from rpn.runtime.state import DEFAULT_CAPACITY


@click.command(context_settings={"ignore_unknown_options": True,
                                  "allow_interspersed_args": False})
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.option('--capacity', '-c', type=click.IntRange(min=0), default=DEFAULT_CAPACITY,
              show_default=True, help='Operand stack capacity')
@click.option('--json-output', '-j', 'json_output', is_flag=True, help='Output as JSON')
@click.option('--verbose', '-v', is_flag=True, help='Log each evaluation step to stderr')
@click.pass_context
def evaluate_command(ctx, tokens, capacity, json_output, verbose):
    """Evaluate TOKENS as a postfix expression.

    Prints the result and exits with it reduced modulo 128. Failures exit
    with a status of 128 or more.
    """
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    executor = Executor(ExecutionConfig(capacity=capacity))
    result = executor.execute(tokens)

    if json_output:
        click.echo(json.dumps(result.to_dict(), indent=2))
    elif result.success:
        click.echo(result.value)
    else:
        click.echo(f"error: {result.error}", err=True)

    ctx.exit(result.status)
