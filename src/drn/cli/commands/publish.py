"""CLI command for publishing packages."""

import sys
from pathlib import Path

import click
from pydantic import ValidationError

from ..platform.client import RegistryClient
from ..platform.config import MANIFEST_FILE
from ..platform.errors import DrnError
from ..platform.packaging import build_archive
from ..platform.types import PackageManifest
from ..utils import format_size
from . import report_error, require_login


def _load_manifest(project_dir: Path) -> PackageManifest:
    """Load drn.json, exiting with an error if it is missing or invalid."""
    manifest_path = project_dir / MANIFEST_FILE
    try:
        return PackageManifest.model_validate_json(manifest_path.read_bytes())
    except FileNotFoundError:
        click.echo(
            f"Error: '{MANIFEST_FILE}' not found. Run 'drn init' first.", err=True
        )
        sys.exit(1)
    except (OSError, ValidationError):
        click.echo(
            f"Error: '{MANIFEST_FILE}' could not be read. "
            "Fix it or run 'drn init' again.",
            err=True,
        )
        sys.exit(1)


@click.command("publish")
def publish() -> None:
    """Publish the current directory to the registry.

    Reads drn.json, zips the current directory (skipping node_modules,
    drn.json, zip files and hidden files) and uploads it.

    \b
    Example:
        drn publish
    """
    require_login()

    project_path = Path.cwd()
    manifest = _load_manifest(project_path)

    click.echo(f"Publishing {manifest.name}@{manifest.version}...")
    archive = build_archive(project_path)
    click.echo(f"  Packaged {format_size(len(archive))}")

    try:
        result = RegistryClient().publish_package(manifest, archive)
    except DrnError as e:
        report_error(e)
        sys.exit(1)

    click.echo(result.message)
