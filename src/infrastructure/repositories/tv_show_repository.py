"""
Implementation TMDB du repository TvShow.

Implemente ITvShowRepository. La recherche envoie first_air_date_year
(avec year en repli) ; la decouverte utilise la table DISCOVER_TV_PARAMS.
"""

from src.adapters.api.mappers import map_page, map_tv_show, map_tv_show_details
from src.adapters.api.params import discover_tv_params, search_params
from src.core.entities.media import TvShow, TvShowDetails
from src.core.entities.search_result import SearchResult
from src.core.ports.repositories import ITvShowRepository
from src.core.value_objects.filters import DiscoverTvFilters, SearchFilters
from src.infrastructure.repositories.base import TMDBRepository


class TMDBTvShowRepository(TMDBRepository, ITvShowRepository):
    """Repository TMDB pour les series TV."""

    async def search_tv_shows(self, filters: SearchFilters) -> SearchResult[TvShow]:
        params = search_params(filters, include_first_air_date_year=True)
        data = await self._get("/search/tv", params)
        return map_page(data, map_tv_show)

    async def discover_tv_shows(self, filters: DiscoverTvFilters) -> SearchResult[TvShow]:
        data = await self._get("/discover/tv", discover_tv_params(filters))
        return map_page(data, map_tv_show)

    async def get_tv_show_details(self, tv_id: int) -> TvShowDetails:
        data = await self._get_resource("TV show", tv_id, f"/tv/{tv_id}")
        return map_tv_show_details(data)

    async def _list(self, endpoint: str, page: int) -> SearchResult[TvShow]:
        data = await self._get(endpoint, {"page": page})
        return map_page(data, map_tv_show)

    async def get_popular_tv_shows(self, page: int = 1) -> SearchResult[TvShow]:
        return await self._list("/tv/popular", page)

    async def get_top_rated_tv_shows(self, page: int = 1) -> SearchResult[TvShow]:
        return await self._list("/tv/top_rated", page)

    async def get_airing_today_tv_shows(self, page: int = 1) -> SearchResult[TvShow]:
        return await self._list("/tv/airing_today", page)

    async def get_on_the_air_tv_shows(self, page: int = 1) -> SearchResult[TvShow]:
        return await self._list("/tv/on_the_air", page)

    async def get_similar_tv_shows(self, tv_id: int, page: int = 1) -> SearchResult[TvShow]:
        return await self._list(f"/tv/{tv_id}/similar", page)

    async def get_recommended_tv_shows(self, tv_id: int, page: int = 1) -> SearchResult[TvShow]:
        return await self._list(f"/tv/{tv_id}/recommendations", page)
