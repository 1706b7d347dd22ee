"""
Implementation TMDB du repository Person.

Implemente IPersonRepository : recherche, details, personnalites populaires
et credits (films et series) d'une personne.
"""

from src.adapters.api.mappers import (
    map_page,
    map_person,
    map_person_movie_credits,
    map_person_tv_credits,
)
from src.adapters.api.params import search_params
from src.core.entities.person import Person, PersonMovieCredits, PersonTvCredits
from src.core.entities.search_result import SearchResult
from src.core.ports.repositories import IPersonRepository
from src.core.value_objects.filters import SearchFilters
from src.infrastructure.repositories.base import TMDBRepository


class TMDBPersonRepository(TMDBRepository, IPersonRepository):
    """Repository TMDB pour les personnes."""

    async def search_people(self, filters: SearchFilters) -> SearchResult[Person]:
        data = await self._get("/search/person", search_params(filters))
        return map_page(data, map_person)

    async def get_person_details(self, person_id: int) -> Person:
        data = await self._get_resource("Person", person_id, f"/person/{person_id}")
        return map_person(data)

    async def get_popular_people(self, page: int = 1) -> SearchResult[Person]:
        data = await self._get("/person/popular", {"page": page})
        return map_page(data, map_person)

    async def get_person_movie_credits(self, person_id: int) -> PersonMovieCredits:
        data = await self._get_resource(
            "Person", person_id, f"/person/{person_id}/movie_credits"
        )
        return map_person_movie_credits(data)

    async def get_person_tv_credits(self, person_id: int) -> PersonTvCredits:
        data = await self._get_resource("Person", person_id, f"/person/{person_id}/tv_credits")
        return map_person_tv_credits(data)
