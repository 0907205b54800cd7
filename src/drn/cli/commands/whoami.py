"""Show the account behind the stored API key."""

import sys

import click

from ..platform.client import RegistryClient
from ..platform.errors import DrnError
from . import report_error, require_login


@click.command()
def whoami() -> None:
    """Check who is logged in.

    \b
    Example:
        drn whoami
    """
    require_login()

    try:
        profile = RegistryClient().get_profile()
    except DrnError as e:
        report_error(e)
        sys.exit(1)

    click.echo("Logged in as:")
    click.echo(f"  Username: {profile.username}")
    click.echo(f"  Email:    {profile.email}")
