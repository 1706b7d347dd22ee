"""
Transport HTTP asynchrone base sur httpx.

Implemente IHttpTransport : une requete = une tentative, sans retry ni
cache. Toute reponse non-2xx et toute erreur reseau sont normalisees en
TransportError afin que le client TMDB n'ait qu'un seul type d'echec a
interpreter.

Usage:
    transport = HttpxTransport(base_url="https://api.themoviedb.org/3", timeout=10.0)
    response = await transport.get("/movie/550", params={"api_key": "xxx"})
    print(response.status, response.data["title"])
    await transport.close()
"""

from typing import Any, Optional

import httpx
from loguru import logger

from src.core.exceptions import TransportError
from src.core.ports.http import HttpResponse, IHttpTransport


class HttpxTransport(IHttpTransport):
    """
    Transport HTTP httpx.

    Le client httpx est cree paresseusement au premier appel et reutilise
    ensuite ; il peut etre partage par des appels concurrents car aucun
    appel ne modifie d'etat partage.

    Attributes:
        DEFAULT_HEADERS: En-tetes envoyes sur chaque requete
    """

    DEFAULT_HEADERS = {
        "Accept": "application/json",
        "Content-Type": "application/json",
    }

    def __init__(
        self,
        base_url: str = "",
        timeout: float = 10.0,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        """
        Initialise le transport.

        Args:
            base_url: URL de base prefixant les chemins relatifs
            timeout: Timeout par requete en secondes
            headers: En-tetes supplementaires
        """
        self._base_url = base_url
        self._timeout = timeout
        self._headers = {**self.DEFAULT_HEADERS, **(headers or {})}
        self._client: Optional[httpx.AsyncClient] = None

    def _get_client(self) -> httpx.AsyncClient:
        """Retourne le client HTTP, le cree si necessaire (lazy init)."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=self._headers,
                timeout=self._timeout,
            )
        return self._client

    async def request(
        self,
        method: str,
        url: str,
        headers: Optional[dict[str, str]] = None,
        params: Optional[dict[str, Any]] = None,
        json: Any = None,
        timeout: Optional[float] = None,
    ) -> HttpResponse:
        client = self._get_client()
        logger.debug("Requete HTTP", method=method, url=url, params=params)

        kwargs: dict[str, Any] = {"headers": headers, "params": params}
        if json is not None:
            kwargs["json"] = json
        if timeout is not None:
            kwargs["timeout"] = timeout

        try:
            response = await client.request(method, url, **kwargs)
        except httpx.HTTPError as e:
            # Aucune reponse recue : DNS, connexion refusee, timeout...
            logger.warning("Echec reseau", method=method, url=url, error=str(e))
            raise TransportError(0, f"Network error: {e}") from e

        data = _decode_body(response)
        headers_out = dict(response.headers)

        if not response.is_success:
            message = _error_message(data, response)
            logger.warning(
                "Reponse HTTP en erreur",
                method=method,
                url=url,
                status=response.status_code,
            )
            raise TransportError(response.status_code, message, data=data, headers=headers_out)

        return HttpResponse(
            data=data,
            status=response.status_code,
            status_text=response.reason_phrase,
            headers=headers_out,
        )

    async def close(self) -> None:
        """
        Ferme le client HTTP.

        Doit etre appele a la fin de l'utilisation pour liberer
        les ressources reseau.
        """
        if self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None


def _decode_body(response: httpx.Response) -> Any:
    """Decode le corps en JSON, sinon retourne le texte (None si vide)."""
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return response.text


def _error_message(data: Any, response: httpx.Response) -> str:
    """Extrait le status_message TMDB, sinon la phrase de statut HTTP."""
    if isinstance(data, dict) and data.get("status_message"):
        return str(data["status_message"])
    return response.reason_phrase or f"HTTP {response.status_code}"
