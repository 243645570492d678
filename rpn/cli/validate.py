"""Validate command for RPN CLI."""

import json

import click

from rpn.runtime.tokens import check_tokens


@click.command(context_settings={"ignore_unknown_options": True,
                                  "allow_interspersed_args": False})
@click.argument('tokens', nargs=-1, type=click.UNPROCESSED)
@click.option('--json-output', '-j', 'json_output', is_flag=True, help='Output as JSON')
@click.pass_context
def validate_command(ctx, tokens, json_output):
    """Check that every token is an operator or a decimal literal."""
    classified, errors = check_tokens(tokens)
    operators = sum(1 for t in classified if t.is_operator)

    output = {
        "valid": not errors,
        "token_count": len(tokens),
        "operand_count": len(classified) - operators,
        "operator_count": operators,
        "errors": [
            {"index": e.index, "token": e.token, "kind": e.kind.value, "error": e.detail}
            for e in errors
        ],
    }

    if json_output:
        click.echo(json.dumps(output, indent=2))
    elif errors:
        for e in errors:
            click.echo(f"error: {e.describe()}", err=True)
    else:
        click.echo(f"valid: {output['operand_count']} operands, {operators} operators")

    ctx.exit(0 if not errors else 1)
