"""Log out from the drn registry.

The `drn logout` command removes the stored API key.

Usage:
    drn logout    # Remove the stored API key
"""

import click

from drn.cli.platform.auth import clear_api_key


@click.command()
def logout() -> None:
    """Remove the stored API key.

    Examples:
        drn logout
    """
    if not clear_api_key():
        click.echo("Not logged in.")
        return

    click.echo("Logged out successfully.")
