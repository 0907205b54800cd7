"""Store the registry API key.

The `drn login` command saves an API key to the local config file. No
request is made: the key is only checked for the expected prefix.

Usage:
    drn login sk-xxxxxxxxxxxxxxxxxxxxxxxx
"""

import sys

import click

from drn.cli.platform.auth import save_api_key
from drn.cli.platform.config import API_KEY_PREFIX


@click.command()
@click.argument("api_key", required=False)
def login(api_key: str | None) -> None:
    """Save your API key to log in.

    The key must start with 'sk-'. It is stored in ~/.drnconfig.json;
    other settings in that file are kept.

    Examples:
        drn login sk-xxxxxxxxxxxxxxxxxxxxxxxx
    """
    if not api_key or not api_key.startswith(API_KEY_PREFIX):
        click.echo(
            f"Error: Invalid API key. It must start with '{API_KEY_PREFIX}'.",
            err=True,
        )
        click.echo(
            f"Usage: drn login {API_KEY_PREFIX}xxxxxxxxxxxxxxxxxxxxxxxx", err=True
        )
        sys.exit(1)

    save_api_key(api_key)
    click.echo("API key saved. You are logged in.")
