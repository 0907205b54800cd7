"""Shared fixtures for drn tests."""

from unittest.mock import patch

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner():
    """Provide a CLI runner."""
    return CliRunner()


@pytest.fixture
def config_file(tmp_path):
    """Point the config store at a temporary file."""
    path = tmp_path / "home" / ".drnconfig.json"
    with patch("drn.cli.platform.auth.CONFIG_FILE", path):
        yield path


@pytest.fixture
def mock_session():
    """Replace the requests session used by RegistryClient."""
    with patch("drn.cli.platform.client.requests.Session") as session_cls:
        yield session_cls.return_value


@pytest.fixture
def project_dir(tmp_path, monkeypatch):
    """Create a package directory with a fixed file tree and chdir into it."""
    root = tmp_path / "my-package"
    root.mkdir()
    (root / "index.js").write_text("console.log('hi');\n")
    (root / "README.md").write_text("# my-package\n")
    (root / "lib").mkdir()
    (root / "lib" / "util.js").write_text("module.exports = {};\n")
    (root / "lib" / "nested").mkdir()
    (root / "lib" / "nested" / "deep.txt").write_text("deep\n")
    (root / "lib" / "old.zip").write_bytes(b"PK\x05\x06" + b"\x00" * 18)
    (root / "node_modules" / "left-pad").mkdir(parents=True)
    (root / "node_modules" / "left-pad" / "index.js").write_text("// dep\n")
    (root / "release.ZIP").write_bytes(b"zip")
    (root / ".env").write_text("SECRET=1\n")
    (root / ".git").mkdir()
    (root / ".git" / "HEAD").write_text("ref: refs/heads/main\n")
    (root / "drn.json").write_text(
        '{\n  "name": "my-package",\n  "version": "2.1.0",\n'
        '  "description": "A test package",\n  "main": "index.js"\n}\n'
    )
    monkeypatch.chdir(root)
    return root
