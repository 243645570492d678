"""RPN CLI Package - Command structure for the postfix evaluator"""

import click

from rpn import __version__
from rpn.cli.evaluate import evaluate_command
from rpn.cli.validate import validate_command


@click.group()
def main():
    """RPN CLI - Postfix integer evaluator."""
    pass


@click.command()
def version_command():
    """Print the package version."""
    click.echo(f"rpn {__version__}")


main.add_command(evaluate_command, "eval")
main.add_command(validate_command, "validate")
main.add_command(version_command, "version")

__all__ = [
    "main",
    "evaluate_command",
    "validate_command",
    "version_command",
]
