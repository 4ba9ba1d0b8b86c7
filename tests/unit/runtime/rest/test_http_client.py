"""Precise unit tests for HTTPClient.

Tests focus on session management, URL building, body encoding and the
mapping of statuses and transport failures to library exceptions.
"""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import aiohttp
import pytest

from metagenie.client.core import (
    APIError,
    AuthenticationError,
    MultipartField,
    RequestTimeoutError,
    TransportError,
)
from metagenie.client.runtime.rest import HTTPClient
from metagenie.client.runtime.rest.http_client import clean_query


def make_response(status=200, payload=None, content_type="application/json", text=""):
    mock_response = AsyncMock()
    mock_response.status = status
    mock_response.content_type = content_type
    mock_response.headers = {"Content-Type": content_type}
    mock_response.json = AsyncMock(return_value=payload)
    mock_response.text = AsyncMock(return_value=text)
    mock_response.__aenter__ = AsyncMock(return_value=mock_response)
    mock_response.__aexit__ = AsyncMock(return_value=None)
    return mock_response


def attach_session(client: HTTPClient, response=None, side_effect=None) -> MagicMock:
    mock_session = MagicMock()
    mock_session.closed = False  # Important: session property checks this
    mock_session.request = MagicMock(return_value=response, side_effect=side_effect)
    client._session = mock_session
    return mock_session


class TestHTTPClientSessionManagement:
    """Test HTTPClient session management."""

    def test_init(self):
        """Test HTTPClient initialization."""
        client = HTTPClient(timeout=10.0)
        assert client.timeout.total == 10.0
        assert client._session is None

    def test_default_timeout(self):
        """Test the default total timeout is 30 seconds."""
        assert HTTPClient().timeout.total == 30.0

    def test_init_with_base_url(self):
        """Test HTTPClient with base_url strips a trailing slash."""
        client = HTTPClient(base_url="https://api.example.com/", timeout=30.0)
        assert client.base_url == "https://api.example.com"

    @pytest.mark.asyncio
    async def test_session_property_creates_session(self):
        """Test session property creates session when needed."""
        client = HTTPClient()
        assert client._session is None

        session = client.session
        assert isinstance(session, aiohttp.ClientSession)
        assert client._session is session
        await client.close()

    @pytest.mark.asyncio
    async def test_session_property_recreates_closed_session(self):
        """Test session property recreates closed session."""
        client = HTTPClient()
        session1 = client.session
        await session1.close()

        session2 = client.session
        assert session1 is not session2
        assert not session2.closed
        await client.close()

    @pytest.mark.asyncio
    async def test_close_idempotent(self):
        """Test close() can be called multiple times."""
        client = HTTPClient()
        await client.close()
        await client.close()  # Should not raise

    @pytest.mark.asyncio
    async def test_context_manager(self):
        """Test HTTPClient as async context manager."""
        async with HTTPClient() as client:
            assert client.session is not None

        # Session should be closed after context exit
        assert client._session is None or client._session.closed


class TestHTTPClientRequest:
    """Test request dispatch and decoding."""

    def test_build_url(self):
        """Test relative paths are joined to the base URL."""
        client = HTTPClient(base_url="https://api.example.com")
        assert client.build_url("/api/posts") == "https://api.example.com/api/posts"
        assert client.build_url("https://other.example.com/x") == "https://other.example.com/x"
        assert HTTPClient().build_url("/api/posts") == "/api/posts"

    @pytest.mark.asyncio
    async def test_json_response(self):
        """Test a JSON body is decoded into APIResponse.data."""
        client = HTTPClient(base_url="https://api.example.com")
        session = attach_session(client, make_response(200, {"posts": []}))

        response = await client.request(
            "GET", "/api/posts/recent", params={"limit": 10}, headers={"x-team-id": "t"}
        )

        assert response.status == 200
        assert response.data == {"posts": []}
        assert response.ok
        session.request.assert_called_once_with(
            "GET",
            "https://api.example.com/api/posts/recent",
            params={"limit": "10"},
            headers={"x-team-id": "t"},
        )

    @pytest.mark.asyncio
    async def test_json_body_sent(self):
        """Test json_body is passed as aiohttp json."""
        client = HTTPClient()
        session = attach_session(client, make_response(201, {"id": "p1"}))

        await client.request("POST", "/api/posts", json_body={"caption": "hi"})

        assert session.request.call_args.kwargs["json"] == {"caption": "hi"}

    @pytest.mark.asyncio
    async def test_form_body_rebuilt(self):
        """Test multipart fields become a fresh FormData per call."""
        client = HTTPClient()
        session = attach_session(client, make_response(200, {"url": "u"}))
        fields = (MultipartField("file", b"bytes", filename="a.png", content_type="image/png"),)

        await client.request("POST", "/api/media/upload", form=fields)
        await client.request("POST", "/api/media/upload", form=fields)

        first = session.request.call_args_list[0].kwargs["data"]
        second = session.request.call_args_list[1].kwargs["data"]
        assert isinstance(first, aiohttp.FormData)
        assert first is not second
        assert "json" not in session.request.call_args.kwargs

    @pytest.mark.asyncio
    async def test_text_response(self):
        """Test non-JSON bodies fall back to text and empty bodies to None."""
        client = HTTPClient()
        attach_session(client, make_response(200, content_type="text/plain", text="pong"))
        assert (await client.request("GET", "/ping")).data == "pong"

        attach_session(client, make_response(204, content_type="", text=""))
        assert (await client.request("DELETE", "/api/posts/1")).data is None

    @pytest.mark.asyncio
    async def test_401_raises_authentication_error(self):
        """Test 401 maps to AuthenticationError with the error payload."""
        client = HTTPClient()
        attach_session(
            client, make_response(401, {"error": "Session expired", "code": "TOKEN_EXPIRED"})
        )

        with pytest.raises(AuthenticationError) as exc_info:
            await client.request("GET", "/api/dashboard")

        error = exc_info.value
        assert error.status_code == 401
        assert str(error) == "Session expired"
        assert error.code == "TOKEN_EXPIRED"
        assert error.payload.error == "Session expired"

    @pytest.mark.asyncio
    async def test_error_status_raises_api_error(self):
        """Test other error statuses map to APIError."""
        client = HTTPClient()
        attach_session(client, make_response(422, {"error": "Caption too long"}))

        with pytest.raises(APIError) as exc_info:
            await client.request("POST", "/api/posts")

        assert exc_info.value.status_code == 422
        assert not isinstance(exc_info.value, AuthenticationError)
        assert str(exc_info.value) == "Caption too long"

    @pytest.mark.asyncio
    async def test_error_without_payload(self):
        """Test a bare error status gets a generic message."""
        client = HTTPClient()
        attach_session(client, make_response(502, content_type="text/html", text="<html>"))

        with pytest.raises(APIError, match="HTTP 502") as exc_info:
            await client.request("GET", "/api/dashboard")

        assert exc_info.value.payload is None
        assert exc_info.value.data == "<html>"

    @pytest.mark.asyncio
    async def test_timeout_raises_request_timeout(self):
        """Test asyncio timeouts become RequestTimeoutError."""
        client = HTTPClient()
        attach_session(client, side_effect=asyncio.TimeoutError())

        with pytest.raises(RequestTimeoutError):
            await client.request("GET", "/api/dashboard")

    @pytest.mark.asyncio
    async def test_client_error_raises_transport_error(self):
        """Test aiohttp connection failures become TransportError."""
        client = HTTPClient()
        attach_session(client, side_effect=aiohttp.ClientConnectionError("reset"))

        with pytest.raises(TransportError) as exc_info:
            await client.request("GET", "/api/dashboard")

        assert not isinstance(exc_info.value, RequestTimeoutError)


class TestCleanQuery:
    """Test query parameter normalization."""

    def test_drops_none_and_stringifies(self):
        assert clean_query({"limit": 10, "cursor": None, "all": True}) == {
            "limit": "10",
            "all": "true",
        }

    def test_empty(self):
        assert clean_query(None) is None
        assert clean_query({}) is None
