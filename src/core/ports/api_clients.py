"""
Interface port pour le client de l'API TMDB.

Le client ajoute l'authentification et la langue par defaut a chaque appel
et traduit les echecs du transport en erreurs du domaine
(AuthenticationError, NotFoundError, RateLimitError, UpstreamError,
NetworkError).
"""

from abc import ABC, abstractmethod
from typing import Any, Optional


class ITMDBClient(ABC):
    """
    Interface du client API TMDB.

    Les repositories ne dependent que de cette interface, jamais du
    transport HTTP.
    """

    @abstractmethod
    async def get(
        self,
        endpoint: str,
        params: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """
        Execute un GET sur un endpoint TMDB.

        Args :
            endpoint : Chemin relatif (ex: "/search/movie")
            params : Parametres de requete, les valeurs None sont ignorees

        Retourne :
            Corps JSON de la reponse
        """
        ...

    @abstractmethod
    async def post(
        self,
        endpoint: str,
        body: Any = None,
        params: Optional[dict[str, Any]] = None,
    ) -> dict[str, Any]:
        """Execute un POST sur un endpoint TMDB."""
        ...

    @property
    @abstractmethod
    def source(self) -> str:
        """Retourne l'identifiant de la source API."""
        ...
