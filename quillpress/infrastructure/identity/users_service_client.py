"""Users service client — implements the IdentityProvider interface.

Resolves session tokens against the external users service over HTTP
using httpx. The service owns OAuth and session issuance; this client
only asks it who a session belongs to.
"""

import logging
from typing import Any

import httpx

from quillpress.application.interfaces.identity_provider import IdentityProvider
from quillpress.domain.entities import Identity
from quillpress.domain.exceptions import IdentityProviderError

logger = logging.getLogger(__name__)


class UsersServiceClient(IdentityProvider):
    """Infrastructure adapter — connects to the external users service."""

    def __init__(
        self,
        api_url: str,
        api_key: str = "",
        timeout: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ):
        self._api_url = api_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._http_client = http_client

    def _get_headers(self, session_token: str) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {session_token}",
            "x-api-key": self._api_key,
        }

    async def _get_client(self) -> httpx.AsyncClient:
        """Return the injected client or create a new one."""
        if self._http_client is not None:
            return self._http_client
        return httpx.AsyncClient(timeout=self._timeout)

    async def get_current_user(self, session_token: str) -> Identity | None:
        url = f"{self._api_url}/users/me"

        client = await self._get_client()
        should_close = self._http_client is None

        try:
            try:
                response = await client.get(url, headers=self._get_headers(session_token))
            except httpx.HTTPError as exc:
                logger.warning("Users service unreachable: %s", exc)
                raise IdentityProviderError(None, str(exc)) from exc

            if response.status_code in (401, 403):
                logger.debug("Users service rejected session (%d)", response.status_code)
                return None
            if response.status_code != 200:
                self._raise_provider_error(response)

            return self._parse_user(response.json())

        finally:
            if should_close:
                await client.aclose()

    @staticmethod
    def _parse_user(data: dict[str, Any]) -> Identity:
        """Map the users service payload to an Identity."""
        profile = data.get("google_user_data") or {}
        try:
            return Identity(
                id=str(data["id"]),
                email=data["email"],
                display_name=profile.get("name") or data.get("name"),
                avatar_url=profile.get("picture") or data.get("picture"),
            )
        except KeyError as exc:
            raise IdentityProviderError(200, f"Malformed user payload: missing {exc}") from exc

    @staticmethod
    def _raise_provider_error(response: httpx.Response) -> None:
        try:
            body = response.json()
            message = body.get("error") or body.get("message") or response.text
            if isinstance(message, dict):
                message = message.get("message", str(message))
        except Exception:
            message = response.text or "Unknown error"
        logger.warning("Users service error %d: %s", response.status_code, message)
        raise IdentityProviderError(response.status_code, str(message))
