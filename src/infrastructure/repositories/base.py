"""
Socle commun des repositories TMDB.

Fournit l'acces au client et la traduction des 404 de details en
NotFoundError nommant la ressource et l'identifiant demandes. Les erreurs
sont journalisees puis propagees, jamais avalees.
"""

from typing import Any, Optional

from loguru import logger

from src.core.exceptions import CineScopeError, NotFoundError
from src.core.ports.api_clients import ITMDBClient


class TMDBRepository:
    """
    Base des repositories adossees a l'API TMDB.

    Les sous-classes recoivent le client par injection explicite.
    """

    def __init__(self, client: ITMDBClient) -> None:
        """
        Initialise le repository.

        Args :
            client : Client TMDB partage
        """
        self._client = client

    async def _get(self, endpoint: str, params: Optional[dict[str, Any]] = None) -> dict[str, Any]:
        """Execute un GET, journalise et propage toute erreur."""
        try:
            return await self._client.get(endpoint, params)
        except CineScopeError as e:
            logger.debug(
                "Echec repository",
                repository=type(self).__name__,
                endpoint=endpoint,
                error=type(e).__name__,
            )
            raise

    async def _get_resource(self, resource: str, resource_id: int, endpoint: str) -> dict[str, Any]:
        """
        Recupere une ressource unique par identifiant.

        Raises:
            NotFoundError: "{resource} with id {resource_id} not found"
        """
        try:
            return await self._get(endpoint)
        except NotFoundError as e:
            raise NotFoundError(resource, resource_id, upstream_message=e.upstream_message) from e
