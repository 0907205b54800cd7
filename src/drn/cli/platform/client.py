"""HTTP client for the drn registry and chat API."""

from __future__ import annotations

import json
import logging
from typing import Any, TypeVar

import requests
from pydantic import BaseModel, ValidationError

from .auth import get_api_key
from .config import DEFAULT_TIMEOUT, SERVER_URL, USER_AGENT
from .errors import (
    AuthError,
    NetworkError,
    NotLoggedInError,
    OtherError,
    ServerError,
)
from .types import ChatReply, PackageManifest, PublishResponse, UserProfile

logger = logging.getLogger(__name__)


class RegistryClient:
    """HTTP client for the drn registry."""

    def __init__(
        self, base_url: str = SERVER_URL, timeout: int = DEFAULT_TIMEOUT
    ) -> None:
        """Initialize the registry client.

        Args:
            base_url: Base URL of the registry server.
            timeout: Request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = requests.Session()

    def _get_headers(self) -> dict[str, str]:
        """Get request headers.

        Returns:
            Headers dictionary with the bearer credential.

        Raises:
            NotLoggedInError: If no API key is stored.
        """
        api_key = get_api_key()
        if not api_key:
            raise NotLoggedInError()
        return {
            "User-Agent": USER_AGENT,
            "Authorization": f"Bearer {api_key}",
        }

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: dict | None = None,
        files: dict | None = None,
        data: dict | None = None,
    ) -> requests.Response:
        """Make an authenticated request to the registry.

        Args:
            method: HTTP method.
            endpoint: API endpoint path.
            json_data: JSON body data.
            files: Files for multipart upload.
            data: Form data for multipart upload.

        Returns:
            Response object.

        Raises:
            AuthError: On 401 or 403.
            ServerError: On any other error status.
            NetworkError: When the server cannot be reached.
            OtherError: When the request could not be built or sent.
        """
        url = f"{self.base_url}{endpoint}"
        headers = self._get_headers()
        logger.debug("%s %s", method, url)

        try:
            response = self._session.request(
                method,
                url,
                headers=headers,
                json=json_data,
                files=files,
                data=data,
                timeout=self.timeout,
            )
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            raise NetworkError("Cannot connect to the drn server") from e
        except requests.exceptions.RequestException as e:
            raise OtherError(str(e)) from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        if response.status_code >= 400:
            message = self._error_message(response)
            if response.status_code in (401, 403):
                raise AuthError(response.status_code, message)
            raise ServerError(response.status_code, message)
        return response

    @staticmethod
    def _error_message(resp: requests.Response) -> str | None:
        """Extract the error message from a JSON error body, if any."""
        try:
            error_data = resp.json() if resp.content else {}
        except ValueError:
            return None
        if not isinstance(error_data, dict):
            return None
        detail = (
            error_data.get("error")
            or error_data.get("message")
            or error_data.get("detail")
        )
        if detail and not isinstance(detail, str):
            detail = json.dumps(detail)
        return detail or None

    _T = TypeVar("_T", bound=BaseModel)

    @staticmethod
    def _parse(model_cls: type[_T], resp: requests.Response) -> _T:
        """Validate a JSON response body, raising OtherError on failure."""
        try:
            data: Any = resp.json()
        except ValueError as e:
            raise OtherError("Unexpected response from server.") from e
        try:
            return model_cls.model_validate(data)
        except ValidationError as e:
            raise OtherError("Unexpected response format from server.") from e

    def get_profile(self) -> UserProfile:
        """Get the account behind the stored API key.

        Returns:
            Username and email of the account.
        """
        resp = self._request("GET", "/user/me")
        return self._parse(UserProfile, resp)

    def chat(self, message: str) -> ChatReply:
        """Send a one-shot message to the chat endpoint.

        Args:
            message: Message text.

        Returns:
            The server's reply.
        """
        resp = self._request("POST", "/chat-direct", json_data={"message": message})
        return self._parse(ChatReply, resp)

    def publish_package(
        self, manifest: PackageManifest, archive: bytes
    ) -> PublishResponse:
        """Upload a package archive with its manifest fields.

        Sends a multipart form upload to POST /packages/publish.

        Args:
            manifest: Manifest read from drn.json.
            archive: Zip archive bytes.

        Returns:
            Publish confirmation from the server.
        """
        resp = self._request(
            "POST",
            "/packages/publish",
            files={"package": (f"{manifest.name}.zip", archive, "application/zip")},
            data={
                "packageName": manifest.name,
                "version": manifest.version,
                "description": manifest.description,
            },
        )
        return self._parse(PublishResponse, resp)
