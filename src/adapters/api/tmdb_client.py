"""
Client TMDB : authentification, langue par defaut et erreurs typees.

Implemente l'interface ITMDBClient au-dessus d'un IHttpTransport. Chaque
appel ajoute api_key et language aux parametres (une valeur explicite
l'emporte sur le defaut) et traduit les TransportError en erreurs du
domaine. Aucun retry n'est effectue : un 429 remonte immediatement en
RateLimitError.

Usage:
    transport = HttpxTransport(base_url="https://api.themoviedb.org/3")
    client = TMDBClient(transport=transport, api_key="your_key")
    data = await client.get("/search/movie", {"query": "Inception"})
    await client.close()
"""

from typing import Any, Optional

from loguru import logger

from src.adapters.api.params import clean_params
from src.core.exceptions import (
    ApiError,
    AuthenticationError,
    NetworkError,
    NotFoundError,
    RateLimitError,
    TransportError,
    UpstreamError,
)
from src.core.ports.api_clients import ITMDBClient
from src.core.ports.http import HttpResponse, IHttpTransport


class TMDBClient(ITMDBClient):
    """
    Client API TMDB.

    Attributes:
        DEFAULT_LANGUAGE: Langue utilisee si aucune n'est configuree

    Example:
        client = TMDBClient(transport=transport, api_key="xxx", default_language="fr-FR")
        page = await client.get("/movie/popular", {"page": 2})
        print(page["results"][0]["title"])
    """

    DEFAULT_LANGUAGE = "en-US"

    def __init__(
        self,
        transport: IHttpTransport,
        api_key: str,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> None:
        """
        Initialise le client TMDB.

        Args:
            transport: Transport HTTP (base_url deja configuree)
            api_key: Cle API TMDB v3, envoyee en parametre api_key
            default_language: Langue par defaut (parametre language)
        """
        self._transport = transport
        self._api_key = api_key
        self._default_language = default_language

    @property
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        return "tmdb"

    def _build_params(self, params: Optional[dict[str, Any]]) -> dict[str, Any]:
        """Fusionne les parametres par defaut et ceux de l'appel."""
        merged: dict[str, Any] = {
            "api_key": self._api_key,
            "language": self._default_language,
        }
        for key, value in (params or {}).items():
            if value is not None:
                merged[key] = value
        return clean_params(merged)

    async def get(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        logger.debug("Appel TMDB", method="GET", endpoint=endpoint)
        try:
            response = await self._transport.get(endpoint, params=self._build_params(params))
        except TransportError as e:
            raise self._map_error(e, endpoint) from e
        return self._json_object(response, endpoint)

    async def post(
        self,
        endpoint: str,
        body: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        logger.debug("Appel TMDB", method="POST", endpoint=endpoint)
        try:
            response = await self._transport.post(
                endpoint, json=body, params=self._build_params(params)
            )
        except TransportError as e:
            raise self._map_error(e, endpoint) from e
        return self._json_object(response, endpoint)

    @staticmethod
    def _json_object(response: HttpResponse, endpoint: str) -> dict[str, Any]:
        """Le corps d'une reponse 2xx TMDB est toujours un objet JSON."""
        if not isinstance(response.data, dict):
            logger.warning(
                "Reponse TMDB non JSON",
                endpoint=endpoint,
                status=response.status,
                body_type=type(response.data).__name__,
            )
            raise UpstreamError(response.status, "Unexpected non-JSON response from TMDB")
        return response.data

    @staticmethod
    def _map_error(error: TransportError, endpoint: str) -> ApiError:
        """
        Traduit un echec du transport en erreur du domaine.

        401 -> AuthenticationError, 404 -> NotFoundError, 429 ->
        RateLimitError, 0 -> NetworkError, tout le reste -> UpstreamError.
        Le message TMDB (status_message) est conserve quand il existe.
        """
        status = error.status
        logger.warning("Erreur TMDB", endpoint=endpoint, status=status, message=error.message)

        if status == 0:
            return NetworkError(error.message or "Network error: unable to reach TMDB API")
        if status == 401:
            return AuthenticationError(error.message or "Unauthorized: invalid API key")
        if status == 404:
            return NotFoundError(resource=endpoint, upstream_message=error.message or None)
        if status == 429:
            retry_after_header = error.headers.get("retry-after") or error.headers.get("Retry-After")
            retry_after = (
                int(retry_after_header)
                if retry_after_header and retry_after_header.isdigit()
                else None
            )
            return RateLimitError(
                error.message or "Rate limit exceeded. Please try again later.",
                retry_after=retry_after,
            )
        return UpstreamError(status, error.message or f"TMDB error (HTTP {status})")

    async def close(self) -> None:
        """Ferme le transport sous-jacent."""
        await self._transport.close()
