"""Initialize a drn.json package manifest."""

from pathlib import Path

import click

from ..platform.config import MANIFEST_FILE
from ..platform.types import PackageManifest


@click.command()
def init() -> None:
    """Initialize a project and create a drn.json file.

    Asks for the package name, version, description and entry point.
    Press Enter to accept the default shown in brackets.

    \b
    Example:
        drn init
    """
    manifest_path = Path.cwd() / MANIFEST_FILE
    defaults = PackageManifest(name=Path.cwd().name)

    click.echo(f"Initializing {MANIFEST_FILE}")

    if manifest_path.exists() and not click.confirm(
        f"{MANIFEST_FILE} already exists. Overwrite it?", default=False
    ):
        click.echo("Aborted. Existing manifest left unchanged.")
        return

    manifest = PackageManifest(
        name=click.prompt("Package name", default=defaults.name),
        version=click.prompt("Version", default=defaults.version),
        description=click.prompt(
            "Description", default=defaults.description, show_default=False
        ),
        main=click.prompt("Entry point", default=defaults.main),
    )

    manifest_path.write_text(
        manifest.model_dump_json(indent=2) + "\n", encoding="utf-8"
    )
    click.echo(f"Created {MANIFEST_FILE}")
