"""Output utilities for CLI commands with clear intent.

user_output() is for humans: progress, warnings and errors, written to stderr so
that stdout stays clean for the shell wrapper that evaluates it.

machine_output() is for stdout: the `cd ...` line and listings.
"""

from typing import Any

import click


def user_output(message: Any = "", nl: bool = True) -> None:
    """Write a human-facing message to stderr."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: Any = "", nl: bool = True) -> None:
    """Write output meant for the calling shell or scripts to stdout."""
    click.echo(message, nl=nl)
