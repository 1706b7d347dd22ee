"""
Tests for HttpxTransport - httpx implementation of IHttpTransport.

Uses respx to mock httpx calls and verifies:
- 2xx responses are returned as HttpResponse with decoded JSON
- non-2xx responses raise TransportError with the server status
- network failures raise TransportError with status 0
- the httpx client is created lazily and released by close()
"""

import json

import httpx
import pytest
import respx

from src.adapters.http.transport import HttpxTransport
from src.core.exceptions import TransportError
from src.core.ports.http import HttpResponse, IHttpTransport

BASE_URL = "https://api.example.test/3"


@pytest.fixture
def transport() -> HttpxTransport:
    return HttpxTransport(base_url=BASE_URL, timeout=2.0)


class TestHttpxTransportInterface:
    """Test HttpxTransport implements IHttpTransport."""

    def test_implements_interface(self, transport: HttpxTransport):
        assert isinstance(transport, IHttpTransport)

    def test_client_is_created_lazily(self, transport: HttpxTransport):
        """No httpx client exists before the first request."""
        assert transport._client is None


class TestHttpxTransportSuccess:
    """Tests for successful requests."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_returns_decoded_json(self, transport: HttpxTransport):
        respx.get(f"{BASE_URL}/movie/550").mock(
            return_value=httpx.Response(200, json={"id": 550, "title": "Fight Club"})
        )

        response = await transport.get("/movie/550")

        assert isinstance(response, HttpResponse)
        assert response.status == 200
        assert response.status_text == "OK"
        assert response.data == {"id": 550, "title": "Fight Club"}

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_sends_query_params(self, transport: HttpxTransport):
        route = respx.get(f"{BASE_URL}/search/movie").mock(
            return_value=httpx.Response(200, json={"results": []})
        )

        await transport.get("/search/movie", params={"query": "Inception", "page": 2})

        request = route.calls.last.request
        assert request.url.params["query"] == "Inception"
        assert request.url.params["page"] == "2"

    @pytest.mark.asyncio
    @respx.mock
    async def test_default_headers_are_sent(self, transport: HttpxTransport):
        route = respx.get(f"{BASE_URL}/configuration").mock(
            return_value=httpx.Response(200, json={})
        )

        await transport.get("/configuration")

        request = route.calls.last.request
        assert request.headers["accept"] == "application/json"

    @pytest.mark.asyncio
    @respx.mock
    async def test_post_sends_json_body(self, transport: HttpxTransport):
        route = respx.post(f"{BASE_URL}/movie/550/rating").mock(
            return_value=httpx.Response(201, json={"success": True})
        )

        response = await transport.post("/movie/550/rating", json={"value": 8.5})

        assert response.status == 201
        assert json.loads(route.calls.last.request.content) == {"value": 8.5}

    @pytest.mark.asyncio
    @respx.mock
    async def test_empty_body_gives_none(self, transport: HttpxTransport):
        respx.delete(f"{BASE_URL}/list/1").mock(return_value=httpx.Response(204))

        response = await transport.delete("/list/1")

        assert response.status == 204
        assert response.data is None


class TestHttpxTransportErrors:
    """Tests for error normalization into TransportError."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_success_raises_transport_error(self, transport: HttpxTransport):
        """The TMDB status_message is used as error message."""
        respx.get(f"{BASE_URL}/movie/0").mock(
            return_value=httpx.Response(
                404,
                json={"status_code": 34, "status_message": "The resource could not be found."},
            )
        )

        with pytest.raises(TransportError) as exc_info:
            await transport.get("/movie/0")

        assert exc_info.value.status == 404
        assert exc_info.value.message == "The resource could not be found."
        assert exc_info.value.data["status_code"] == 34

    @pytest.mark.asyncio
    @respx.mock
    async def test_non_json_error_uses_reason_phrase(self, transport: HttpxTransport):
        respx.get(f"{BASE_URL}/movie/1").mock(
            return_value=httpx.Response(503, text="upstream down")
        )

        with pytest.raises(TransportError) as exc_info:
            await transport.get("/movie/1")

        assert exc_info.value.status == 503
        assert exc_info.value.message == "Service Unavailable"
        assert exc_info.value.data == "upstream down"

    @pytest.mark.asyncio
    @respx.mock
    async def test_error_keeps_response_headers(self, transport: HttpxTransport):
        respx.get(f"{BASE_URL}/movie/popular").mock(
            return_value=httpx.Response(429, json={}, headers={"Retry-After": "10"})
        )

        with pytest.raises(TransportError) as exc_info:
            await transport.get("/movie/popular")

        assert exc_info.value.headers["retry-after"] == "10"

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_failure_has_status_zero(self, transport: HttpxTransport):
        respx.get(f"{BASE_URL}/movie/550").mock(
            side_effect=httpx.ConnectError("Connection refused")
        )

        with pytest.raises(TransportError) as exc_info:
            await transport.get("/movie/550")

        assert exc_info.value.status == 0
        assert "Network error" in exc_info.value.message

    @pytest.mark.asyncio
    @respx.mock
    async def test_timeout_has_status_zero(self, transport: HttpxTransport):
        respx.get(f"{BASE_URL}/movie/550").mock(side_effect=httpx.ReadTimeout("timed out"))

        with pytest.raises(TransportError) as exc_info:
            await transport.get("/movie/550")

        assert exc_info.value.status == 0


class TestHttpxTransportClose:
    """Tests for client lifecycle."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_close_releases_client(self, transport: HttpxTransport):
        respx.get(f"{BASE_URL}/movie/550").mock(return_value=httpx.Response(200, json={}))
        await transport.get("/movie/550")
        assert transport._client is not None

        await transport.close()

        assert transport._client is None

    @pytest.mark.asyncio
    async def test_close_without_client_is_noop(self, transport: HttpxTransport):
        await transport.close()
        assert transport._client is None
