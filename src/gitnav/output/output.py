"""Output helpers separating human-facing messages from scrapeable results.

user_output goes to stderr: errors, warnings and usage text.
machine_output goes to stdout: the lines callers may parse.
"""

import sys

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, file=sys.stderr, nl=nl)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Write a result line to stdout."""
    click.echo(message, nl=nl)
