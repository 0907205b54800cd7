#!/usr/bin/env python3
"""drn CLI - client for the drn package registry

Usage:
    drn login <api_key>
    drn logout
    drn whoami
    drn ask "<message>"      (alias: chat)
    drn init
    drn publish
    drn -h | --help | help
"""

import logging
import sys

import click

from drn import __version__

from .commands import report_error
from .commands.ask import ask
from .commands.init import init
from .commands.login import login
from .commands.logout import logout
from .commands.publish import publish
from .commands.whoami import whoami
from .platform.config import LOG_LEVEL
from .platform.errors import DrnError


class DrnGroup(click.Group):
    """Command group that reports unknown commands with the full help text."""

    def resolve_command(self, ctx, args):
        cmd_name = click.utils.make_str(args[0])
        if not cmd_name.startswith("-") and self.get_command(ctx, cmd_name) is None:
            click.echo(f"Error: Unknown command '{cmd_name}'", err=True)
            click.echo(ctx.get_help(), err=True)
            ctx.exit(1)
        return super().resolve_command(ctx, args)


@click.group(
    cls=DrnGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(version=__version__, prog_name="drn")
@click.pass_context
def cli(ctx):
    """drn CLI - publish packages and chat with the drn assistant"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command("help")
@click.pass_context
def help_command(ctx):
    """Show this message and exit."""
    click.echo(ctx.parent.get_help())


# Authentication
cli.add_command(login)
cli.add_command(logout)
cli.add_command(whoami)

# Packages
cli.add_command(init)
cli.add_command(publish)

# Chat
cli.add_command(ask)
cli.add_command(ask, name="chat")


def _configure_logging() -> None:
    """Send library logs to stderr at the level named by DRN_LOG_LEVEL."""
    level = logging.getLevelName(LOG_LEVEL.upper())
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(
        level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )


def main():
    """Main entry point for the CLI."""
    _configure_logging()
    try:
        rv = cli(standalone_mode=False)
    except DrnError as e:
        report_error(e)
        sys.exit(1)
    except click.ClickException as e:
        e.show()
        sys.exit(e.exit_code)
    except (click.Abort, KeyboardInterrupt):
        click.echo(err=True)
        sys.exit(130)
    except Exception as e:
        click.echo(f"Error: {e}", err=True)
        click.echo(
            "Hint: If this persists, try updating with 'pip install -U drn'.",
            err=True,
        )
        sys.exit(1)
    sys.exit(rv if isinstance(rv, int) else 0)


if __name__ == "__main__":
    main()
