"""drn registry API client, local config store and packaging."""

from .auth import (
    clear_api_key,
    get_api_key,
    is_authenticated,
    load_config,
    save_api_key,
    save_config,
)
from .client import RegistryClient
from .config import CONFIG_FILE, MANIFEST_FILE, SERVER_URL
from .errors import (
    AuthError,
    DrnError,
    NetworkError,
    NotLoggedInError,
    OtherError,
    ServerError,
    describe_error,
)
from .packaging import build_archive, collect_files
from .types import ChatReply, PackageManifest, PublishResponse, UserProfile

__all__ = [
    # Config store
    "load_config",
    "save_config",
    "get_api_key",
    "save_api_key",
    "clear_api_key",
    "is_authenticated",
    # Client
    "RegistryClient",
    # Errors
    "DrnError",
    "NotLoggedInError",
    "AuthError",
    "ServerError",
    "NetworkError",
    "OtherError",
    "describe_error",
    # Config
    "SERVER_URL",
    "CONFIG_FILE",
    "MANIFEST_FILE",
    # Packaging
    "build_archive",
    "collect_files",
    # Types
    "PackageManifest",
    "UserProfile",
    "ChatReply",
    "PublishResponse",
]
