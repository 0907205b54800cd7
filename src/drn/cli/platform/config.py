"""Registry client configuration constants."""

import os
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path

SERVER_URL = os.environ.get("DRN_SERVER_URL", "http://localhost:10000")
CONFIG_FILE = Path(
    os.environ.get("DRN_CONFIG_PATH", Path.home() / ".drnconfig.json")
).expanduser()
LOG_LEVEL = os.environ.get("DRN_LOG_LEVEL", "WARNING")

MANIFEST_FILE = "drn.json"
API_KEY_PREFIX = "sk-"

try:
    USER_AGENT = f"drn-cli/{version('drn')}"
except PackageNotFoundError:
    USER_AGENT = "drn-cli/unknown"
DEFAULT_TIMEOUT = 30  # seconds
