"""Unit tests for the UsersServiceClient."""

import httpx
import pytest

from quillpress.domain.exceptions import IdentityProviderError
from quillpress.infrastructure.identity import UsersServiceClient


# ── Helpers ──


def _make_mock_transport(
    status_code: int = 200,
    json_data: dict | None = None,
    seen: list[httpx.Request] | None = None,
) -> httpx.MockTransport:
    """Create a mock transport that returns a fixed response."""

    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=json_data or {})

    return httpx.MockTransport(handler)


def _client(transport: httpx.MockTransport) -> UsersServiceClient:
    return UsersServiceClient(
        api_url="https://users.example.com/api/",
        api_key="service-key",
        http_client=httpx.AsyncClient(transport=transport),
    )


# ── Tests ──


@pytest.mark.asyncio
async def test_resolves_identity_and_sends_credentials():
    seen: list[httpx.Request] = []
    payload = {
        "id": "01H-user",
        "email": "ada@example.com",
        "google_user_data": {"name": "Ada Lovelace", "picture": "https://img/ada.png"},
    }
    client = _client(_make_mock_transport(json_data=payload, seen=seen))

    identity = await client.get_current_user("session-abc")

    assert identity is not None
    assert identity.id == "01H-user"
    assert identity.email == "ada@example.com"
    assert identity.display_name == "Ada Lovelace"
    assert identity.avatar_url == "https://img/ada.png"

    request = seen[0]
    assert str(request.url) == "https://users.example.com/api/users/me"
    assert request.headers["Authorization"] == "Bearer session-abc"
    assert request.headers["x-api-key"] == "service-key"


@pytest.mark.asyncio
async def test_identity_without_profile_data_has_no_display_name():
    client = _client(_make_mock_transport(json_data={"id": 7, "email": "x@example.com"}))
    identity = await client.get_current_user("t")
    assert identity.id == "7"
    assert identity.display_name is None
    assert identity.default_username == "x"


@pytest.mark.asyncio
@pytest.mark.parametrize("status_code", [401, 403])
async def test_rejected_session_resolves_to_none(status_code: int):
    client = _client(_make_mock_transport(status_code=status_code, json_data={"error": "invalid"}))
    assert await client.get_current_user("expired") is None


@pytest.mark.asyncio
async def test_service_failure_raises_identity_provider_error():
    client = _client(_make_mock_transport(status_code=503, json_data={"error": "maintenance"}))
    with pytest.raises(IdentityProviderError) as exc_info:
        await client.get_current_user("t")
    assert exc_info.value.status_code == 503
    assert "maintenance" in exc_info.value.message


@pytest.mark.asyncio
async def test_transport_failure_raises_identity_provider_error():
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = _client(httpx.MockTransport(handler))
    with pytest.raises(IdentityProviderError):
        await client.get_current_user("t")


@pytest.mark.asyncio
async def test_malformed_payload_raises_identity_provider_error():
    client = _client(_make_mock_transport(json_data={"email": "no-id@example.com"}))
    with pytest.raises(IdentityProviderError):
        await client.get_current_user("t")
