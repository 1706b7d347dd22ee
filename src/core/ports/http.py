"""
Port du transport HTTP.

Le transport execute une requete unique (aucun retry, aucun cache) et
normalise tous les echecs en TransportError.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class HttpResponse:
    """
    Reponse HTTP decodee.

    Attributs :
        data : Corps JSON decode (ou texte brut si non JSON, None si vide)
        status : Code HTTP
        status_text : Phrase de statut (ex: "OK")
        headers : En-tetes de la reponse
    """

    data: Any
    status: int
    status_text: str = ""
    headers: dict[str, str] = field(default_factory=dict)


class IHttpTransport(ABC):
    """
    Interface du transport HTTP.

    get/post/put/delete sont du sucre syntaxique au-dessus de request().
    """

    @abstractmethod
    async def request(
        self,
        method: str,
        url: str,
        headers: Optional[dict[str, str]] = None,
        params: Optional[dict[str, Any]] = None,
        json: Any = None,
        timeout: Optional[float] = None,
    ) -> HttpResponse:
        """
        Execute une requete HTTP.

        Retourne :
            HttpResponse pour toute reponse 2xx

        Leve :
            TransportError : reponse non-2xx (status du serveur) ou echec
                reseau (status 0)
        """
        ...

    async def get(
        self,
        url: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> HttpResponse:
        return await self.request("GET", url, headers=headers, params=params)

    async def post(
        self,
        url: str,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> HttpResponse:
        return await self.request("POST", url, headers=headers, params=params, json=json)

    async def put(
        self,
        url: str,
        json: Any = None,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> HttpResponse:
        return await self.request("PUT", url, headers=headers, params=params, json=json)

    async def delete(
        self,
        url: str,
        params: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> HttpResponse:
        return await self.request("DELETE", url, headers=headers, params=params)

    @abstractmethod
    async def close(self) -> None:
        """Libere les ressources reseau."""
        ...
