"""Local config store holding the registry API key."""

import json
from typing import Any

from .config import CONFIG_FILE

API_KEY_FIELD = "apiKey"


def load_config() -> Any:
    """Load the local config file.

    Returns:
        Parsed JSON content, or None if the file is missing or unparsable.
    """
    try:
        return json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return None


def save_config(data: Any) -> None:
    """Overwrite the local config file with ``data`` as pretty JSON.

    Args:
        data: Any JSON-serializable value.
    """
    CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(json.dumps(data, indent=2), encoding="utf-8")
    # Restrict permissions to owner only
    CONFIG_FILE.chmod(0o600)


def get_api_key() -> str | None:
    """Return the stored API key, or None if there is none."""
    config = load_config()
    if not isinstance(config, dict):
        return None
    api_key = config.get(API_KEY_FIELD)
    if isinstance(api_key, str) and api_key:
        return api_key
    return None


def save_api_key(api_key: str) -> None:
    """Store the API key, keeping any other keys already in the config.

    Args:
        api_key: API key to store.
    """
    config = load_config()
    if not isinstance(config, dict):
        config = {}
    config[API_KEY_FIELD] = api_key
    save_config(config)


def clear_api_key() -> bool:
    """Remove the stored API key.

    The config file is deleted when the key was the only entry.

    Returns:
        True if a key was removed, False otherwise.
    """
    config = load_config()
    if not isinstance(config, dict) or API_KEY_FIELD not in config:
        return False
    del config[API_KEY_FIELD]
    if config:
        save_config(config)
    else:
        CONFIG_FILE.unlink(missing_ok=True)
    return True


def is_authenticated() -> bool:
    """Check if an API key is stored."""
    return get_api_key() is not None
