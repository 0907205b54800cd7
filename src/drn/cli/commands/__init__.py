"""drn CLI commands."""

import sys

import click

from ..platform.auth import is_authenticated
from ..platform.errors import DrnError, NotLoggedInError, describe_error


def report_error(error: DrnError) -> None:
    """Print a failed call to stderr."""
    for line in describe_error(error):
        click.echo(line, err=True)


def require_login() -> None:
    """Exit with an error if no API key is stored."""
    if not is_authenticated():
        report_error(NotLoggedInError())
        sys.exit(1)
