"""Package archiving for publishing."""

from __future__ import annotations

import io
import logging
import zipfile
from pathlib import Path

from .config import MANIFEST_FILE

logger = logging.getLogger(__name__)

# Directories whose whole subtree is left out of the archive
EXCLUDE_DIRS = {"node_modules"}

EXCLUDE_FILE_SUFFIXES = (".zip",)

COMPRESS_LEVEL = 9


def _should_exclude(path: Path, root: Path) -> bool:
    """Check if a path should be excluded from the archive."""
    rel = path.relative_to(root)
    parts = rel.parts

    for part in parts:
        # Hidden entries are not matched by the package glob
        if part in EXCLUDE_DIRS or part.startswith("."):
            return True

    if rel.as_posix() == MANIFEST_FILE:
        return True

    return path.name.lower().endswith(EXCLUDE_FILE_SUFFIXES)


def collect_files(project_dir: Path) -> list[str]:
    """List the files that go into the package archive.

    Args:
        project_dir: Directory to package.

    Returns:
        Sorted POSIX paths relative to ``project_dir``.
    """
    files = []
    for item in sorted(project_dir.rglob("*")):
        if _should_exclude(item, project_dir):
            continue
        if item.is_file():
            files.append(item.relative_to(project_dir).as_posix())
    return files


def build_archive(project_dir: Path) -> bytes:
    """Package a project directory into a zip in memory.

    Args:
        project_dir: Directory to package.

    Returns:
        Zip archive bytes, deflated at maximum compression.
    """
    buf = io.BytesIO()
    files = collect_files(project_dir)
    with zipfile.ZipFile(
        buf, "w", zipfile.ZIP_DEFLATED, compresslevel=COMPRESS_LEVEL
    ) as zf:
        for arcname in files:
            zf.write(project_dir / arcname, arcname=arcname)
    archive = buf.getvalue()
    logger.debug("Archived %d files (%d bytes)", len(files), len(archive))
    return archive
