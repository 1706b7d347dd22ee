"""
Implementation TMDB du repository Movie.

Implemente IMovieRepository : construit les parametres de requete depuis
les filtres du domaine et convertit les reponses via les mappers films.
"""

from src.adapters.api.mappers import map_movie, map_movie_details, map_page
from src.adapters.api.params import discover_movie_params, search_params
from src.core.entities.media import Movie, MovieDetails
from src.core.entities.search_result import SearchResult
from src.core.ports.repositories import IMovieRepository
from src.core.value_objects.filters import DiscoverMovieFilters, SearchFilters
from src.infrastructure.repositories.base import TMDBRepository


class TMDBMovieRepository(TMDBRepository, IMovieRepository):
    """Repository TMDB pour les films."""

    async def search_movies(self, filters: SearchFilters) -> SearchResult[Movie]:
        params = search_params(filters, include_region=True, include_year=True)
        data = await self._get("/search/movie", params)
        return map_page(data, map_movie)

    async def discover_movies(self, filters: DiscoverMovieFilters) -> SearchResult[Movie]:
        data = await self._get("/discover/movie", discover_movie_params(filters))
        return map_page(data, map_movie)

    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        data = await self._get_resource("Movie", movie_id, f"/movie/{movie_id}")
        return map_movie_details(data)

    async def _list(self, endpoint: str, page: int) -> SearchResult[Movie]:
        data = await self._get(endpoint, {"page": page})
        return map_page(data, map_movie)

    async def get_popular_movies(self, page: int = 1) -> SearchResult[Movie]:
        return await self._list("/movie/popular", page)

    async def get_top_rated_movies(self, page: int = 1) -> SearchResult[Movie]:
        return await self._list("/movie/top_rated", page)

    async def get_upcoming_movies(self, page: int = 1) -> SearchResult[Movie]:
        return await self._list("/movie/upcoming", page)

    async def get_now_playing_movies(self, page: int = 1) -> SearchResult[Movie]:
        return await self._list("/movie/now_playing", page)

    async def get_similar_movies(self, movie_id: int, page: int = 1) -> SearchResult[Movie]:
        return await self._list(f"/movie/{movie_id}/similar", page)

    async def get_recommended_movies(self, movie_id: int, page: int = 1) -> SearchResult[Movie]:
        return await self._list(f"/movie/{movie_id}/recommendations", page)
