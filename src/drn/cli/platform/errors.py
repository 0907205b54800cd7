"""Error types raised by the registry client and their display text."""

from __future__ import annotations


class DrnError(Exception):
    """Base exception for all drn client errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NotLoggedInError(DrnError):
    """No API key is stored locally."""

    def __init__(
        self, message: str = "You are not logged in. Run 'drn login <api_key>' first."
    ) -> None:
        super().__init__(message)


class AuthError(DrnError):
    """The server rejected the API key (401 or 403)."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        super().__init__(message or "Access denied")


class ServerError(DrnError):
    """The server answered with any other error status."""

    def __init__(self, status_code: int, message: str | None = None) -> None:
        self.status_code = status_code
        self.detail = message
        super().__init__(message or "Unknown error")


class NetworkError(DrnError):
    """No response was received from the server."""


class OtherError(DrnError):
    """Failure before a request was sent, or an unusable response."""


def describe_error(error: DrnError) -> list[str]:
    """Build the lines shown to the user for a failed call.

    Args:
        error: Error raised by the registry client.

    Returns:
        Lines to print, one variant per error type.
    """
    if isinstance(error, NotLoggedInError):
        return [f"Error: {error.message}"]
    if isinstance(error, AuthError):
        return [
            f"Authentication failed ({error.status_code}): {error.message}. "
            "Your API key may be invalid.",
            "Hint: Try 'drn login <api_key>'.",
        ]
    if isinstance(error, ServerError):
        return [f"Server error ({error.status_code}): {error.message}"]
    if isinstance(error, NetworkError):
        return ["Network error: cannot reach the server. Is it running?"]
    return [f"Unexpected error: {error.message}"]
