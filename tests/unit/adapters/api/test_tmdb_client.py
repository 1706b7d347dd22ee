"""
Tests for TMDBClient - TMDB API client implementation.

Uses respx to mock httpx calls and verifies:
- api_key and language are added to every call
- explicit parameters override the defaults, None values are dropped
- HTTP failures are mapped to typed domain errors
- 429 responses raise RateLimitError without any retry
"""

import httpx
import pytest
import respx

from src.adapters.api.tmdb_client import TMDBClient
from src.adapters.http.transport import HttpxTransport
from src.core.exceptions import (
    ApiError,
    AuthenticationError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    UpstreamError,
)
from src.core.ports.api_clients import ITMDBClient
from tests.fixtures.tmdb_responses import (
    TMDB_NOT_FOUND_RESPONSE,
    TMDB_RATE_LIMIT_RESPONSE,
    TMDB_SEARCH_MOVIE_RESPONSE,
    TMDB_UNAUTHORIZED_RESPONSE,
)

TMDB_URL = "https://api.themoviedb.org/3"


class TestTMDBClientInterface:
    """Test TMDBClient implements ITMDBClient correctly."""

    def test_implements_interface(self, tmdb_client: TMDBClient):
        """TMDBClient should implement ITMDBClient."""
        assert isinstance(tmdb_client, ITMDBClient)

    def test_source_property_returns_tmdb(self, tmdb_client: TMDBClient):
        """source property should return 'tmdb'."""
        assert tmdb_client.source == "tmdb"


class TestTMDBClientParams:
    """Tests for default parameters handling."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_get_adds_api_key_and_language(self, tmdb_client: TMDBClient):
        route = respx.get(f"{TMDB_URL}/search/movie").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_MOVIE_RESPONSE)
        )

        data = await tmdb_client.get("/search/movie", {"query": "Inception"})

        params = route.calls.last.request.url.params
        assert params["api_key"] == "test_api_key"
        assert params["language"] == "en-US"
        assert params["query"] == "Inception"
        assert data["results"][0]["id"] == 27205

    @pytest.mark.asyncio
    @respx.mock
    async def test_explicit_language_overrides_default(self, tmdb_client: TMDBClient):
        route = respx.get(f"{TMDB_URL}/movie/27205").mock(
            return_value=httpx.Response(200, json={"id": 27205})
        )

        await tmdb_client.get("/movie/27205", {"language": "fr-FR"})

        assert route.calls.last.request.url.params["language"] == "fr-FR"

    @pytest.mark.asyncio
    @respx.mock
    async def test_none_params_are_not_sent(self, tmdb_client: TMDBClient):
        """A None value neither overrides the default nor appears in the query."""
        route = respx.get(f"{TMDB_URL}/search/movie").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_MOVIE_RESPONSE)
        )

        await tmdb_client.get(
            "/search/movie", {"query": "Inception", "year": None, "language": None}
        )

        params = route.calls.last.request.url.params
        assert "year" not in params
        assert params["language"] == "en-US"

    @pytest.mark.asyncio
    @respx.mock
    async def test_configured_default_language(self, http_transport: HttpxTransport):
        client = TMDBClient(transport=http_transport, api_key="k", default_language="fr-FR")
        route = respx.get(f"{TMDB_URL}/movie/popular").mock(
            return_value=httpx.Response(200, json={"results": []})
        )

        await client.get("/movie/popular")

        assert route.calls.last.request.url.params["language"] == "fr-FR"

    @pytest.mark.asyncio
    @respx.mock
    async def test_booleans_serialized_lowercase(self, tmdb_client: TMDBClient):
        route = respx.get(f"{TMDB_URL}/search/movie").mock(
            return_value=httpx.Response(200, json=TMDB_SEARCH_MOVIE_RESPONSE)
        )

        await tmdb_client.get("/search/movie", {"query": "x", "include_adult": False})

        assert route.calls.last.request.url.params["include_adult"] == "false"

    @pytest.mark.asyncio
    @respx.mock
    async def test_post_sends_body_and_defaults(self, tmdb_client: TMDBClient):
        route = respx.post(f"{TMDB_URL}/movie/27205/rating").mock(
            return_value=httpx.Response(201, json={"success": True})
        )

        data = await tmdb_client.post("/movie/27205/rating", {"value": 9})

        assert data == {"success": True}
        assert route.calls.last.request.url.params["api_key"] == "test_api_key"


class TestTMDBClientErrors:
    """Tests for HTTP error mapping."""

    @pytest.mark.asyncio
    @respx.mock
    async def test_401_raises_authentication_error(self, tmdb_client: TMDBClient):
        respx.get(f"{TMDB_URL}/movie/popular").mock(
            return_value=httpx.Response(401, json=TMDB_UNAUTHORIZED_RESPONSE)
        )

        with pytest.raises(AuthenticationError) as exc_info:
            await tmdb_client.get("/movie/popular")

        assert exc_info.value.status_code == 401
        assert "Invalid API key" in exc_info.value.message

    @pytest.mark.asyncio
    @respx.mock
    async def test_404_raises_not_found_error(self, tmdb_client: TMDBClient):
        respx.get(f"{TMDB_URL}/movie/999999999").mock(
            return_value=httpx.Response(404, json=TMDB_NOT_FOUND_RESPONSE)
        )

        with pytest.raises(NotFoundError) as exc_info:
            await tmdb_client.get("/movie/999999999")

        assert exc_info.value.status_code == 404
        assert exc_info.value.upstream_message == (
            "The resource you requested could not be found."
        )

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="<html>maintenance</html>"),
            httpx.Response(200),
            httpx.Response(204),
            httpx.Response(200, json=[1, 2, 3]),
        ],
        ids=["html", "empty", "no-content", "json-list"],
    )
    @respx.mock
    async def test_success_without_json_object_raises_upstream_error(
        self, tmdb_client: TMDBClient, response: httpx.Response
    ):
        """Un 2xx dont le corps n'est pas un objet JSON est une erreur typee."""
        respx.get(f"{TMDB_URL}/movie/popular").mock(return_value=response)

        with pytest.raises(UpstreamError) as exc_info:
            await tmdb_client.get("/movie/popular")

        assert exc_info.value.status_code == response.status_code
        assert exc_info.value.message == "Unexpected non-JSON response from TMDB"

    @pytest.mark.asyncio
    @respx.mock
    async def test_post_without_json_object_raises_upstream_error(self, tmdb_client: TMDBClient):
        respx.post(f"{TMDB_URL}/movie/27205/rating").mock(
            return_value=httpx.Response(201, text="created")
        )

        with pytest.raises(UpstreamError):
            await tmdb_client.post("/movie/27205/rating", {"value": 9})

    @pytest.mark.asyncio
    @respx.mock
    async def test_429_raises_rate_limit_error_without_retry(self, tmdb_client: TMDBClient):
        """A single request is sent, the error carries Retry-After."""
        route = respx.get(f"{TMDB_URL}/movie/popular").mock(
            return_value=httpx.Response(
                429, json=TMDB_RATE_LIMIT_RESPONSE, headers={"Retry-After": "10"}
            )
        )

        with pytest.raises(RateLimitError) as exc_info:
            await tmdb_client.get("/movie/popular")

        assert route.call_count == 1
        assert exc_info.value.status_code == 429
        assert exc_info.value.retry_after == 10

    @pytest.mark.asyncio
    @respx.mock
    async def test_429_without_retry_after_header(self, tmdb_client: TMDBClient):
        respx.get(f"{TMDB_URL}/movie/popular").mock(
            return_value=httpx.Response(429, json=TMDB_RATE_LIMIT_RESPONSE)
        )

        with pytest.raises(RateLimitError) as exc_info:
            await tmdb_client.get("/movie/popular")

        assert exc_info.value.retry_after is None

    @pytest.mark.asyncio
    @respx.mock
    async def test_500_raises_upstream_error_with_message(self, tmdb_client: TMDBClient):
        respx.get(f"{TMDB_URL}/movie/popular").mock(
            return_value=httpx.Response(
                500, json={"status_code": 11, "status_message": "Internal error."}
            )
        )

        with pytest.raises(UpstreamError) as exc_info:
            await tmdb_client.get("/movie/popular")

        assert exc_info.value.status_code == 500
        assert exc_info.value.message == "Internal error."

    @pytest.mark.asyncio
    @respx.mock
    async def test_unrecognized_status_raises_upstream_error(self, tmdb_client: TMDBClient):
        respx.get(f"{TMDB_URL}/movie/popular").mock(return_value=httpx.Response(418))

        with pytest.raises(UpstreamError) as exc_info:
            await tmdb_client.get("/movie/popular")

        assert exc_info.value.status_code == 418

    @pytest.mark.asyncio
    @respx.mock
    async def test_network_failure_raises_network_error(self, tmdb_client: TMDBClient):
        respx.get(f"{TMDB_URL}/movie/popular").mock(
            side_effect=httpx.ConnectError("Name or service not known")
        )

        with pytest.raises(NetworkError) as exc_info:
            await tmdb_client.get("/movie/popular")

        assert exc_info.value.status_code == 0
        assert isinstance(exc_info.value, ApiError)

    @pytest.mark.asyncio
    @respx.mock
    async def test_close_closes_transport(self, tmdb_client: TMDBClient, http_transport: HttpxTransport):
        respx.get(f"{TMDB_URL}/movie/popular").mock(
            return_value=httpx.Response(200, json={"results": []})
        )
        await tmdb_client.get("/movie/popular")

        await tmdb_client.close()

        assert http_transport._client is None
