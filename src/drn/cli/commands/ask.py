"""CLI command for one-shot chat messages."""

import sys

import click

from ..platform.client import RegistryClient
from ..platform.errors import DrnError
from ..utils import sanitize_terminal_output
from . import report_error, require_login


@click.command("ask")
@click.argument("message", nargs=-1)
def ask(message: tuple[str, ...]) -> None:
    """Send a message to the chat assistant (alias: chat).

    All arguments are joined into a single message.

    \b
    Example:
        drn ask "What is the capital of the DRC?"
        drn chat hello there
    """
    require_login()

    text = " ".join(message)
    if not text.strip():
        click.echo("Error: Please provide a message.", err=True)
        click.echo('Usage: drn ask "What is the capital of the DRC?"', err=True)
        sys.exit(1)

    click.echo("Thinking...", err=True)
    try:
        reply = RegistryClient().chat(text)
    except DrnError as e:
        report_error(e)
        sys.exit(1)

    click.echo(sanitize_terminal_output(reply.reply))
