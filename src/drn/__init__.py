"""drn - command-line client for the drn package registry.

Commands:
    - login / logout: store or remove the local API key
    - whoami: show the account behind the stored API key
    - ask / chat: send a one-shot message to the chat endpoint
    - init: create a drn.json manifest interactively
    - publish: archive the current directory and upload it
"""

import importlib.metadata

try:
    __version__ = importlib.metadata.version(__name__)
except importlib.metadata.PackageNotFoundError:
    __version__ = "unknown"

__all__ = ["__version__"]
