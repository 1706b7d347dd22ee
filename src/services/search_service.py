"""
Service de recherche : facade unique sur les quatre repositories.

Chaque methode delegue a exactement une methode de repository. Les erreurs
remontent inchangees vers la couche appelante.
"""

from typing import Optional

from src.core.entities.media import Movie, MovieDetails, TvShow, TvShowDetails
from src.core.entities.person import Person, PersonMovieCredits, PersonTvCredits
from src.core.entities.search_result import (
    MultiSearchResult,
    SearchResult,
    TrendingResult,
)
from src.core.ports.repositories import (
    IMovieRepository,
    IPersonRepository,
    ISearchRepository,
    ITvShowRepository,
)
from src.core.value_objects.enums import MediaType, TimeWindow
from src.core.value_objects.filters import (
    DiscoverMovieFilters,
    DiscoverTvFilters,
    SearchFilters,
)

DEFAULT_PAGE = 1


class SearchService:
    """
    Facade sur les repositories TMDB.

    Seule regle appliquee : une page absente vaut DEFAULT_PAGE.
    """

    def __init__(
        self,
        movie_repository: IMovieRepository,
        tv_show_repository: ITvShowRepository,
        person_repository: IPersonRepository,
        search_repository: ISearchRepository,
    ) -> None:
        self._movie_repo = movie_repository
        self._tv_repo = tv_show_repository
        self._person_repo = person_repository
        self._search_repo = search_repository

    # Recherche et decouverte

    async def search_movies(self, filters: SearchFilters) -> SearchResult[Movie]:
        return await self._movie_repo.search_movies(filters.with_defaults())

    async def search_tv_shows(self, filters: SearchFilters) -> SearchResult[TvShow]:
        return await self._tv_repo.search_tv_shows(filters.with_defaults())

    async def search_people(self, filters: SearchFilters) -> SearchResult[Person]:
        return await self._person_repo.search_people(filters.with_defaults())

    async def multi_search(self, filters: SearchFilters) -> SearchResult[MultiSearchResult]:
        return await self._search_repo.multi_search(filters.with_defaults())

    async def discover_movies(self, filters: DiscoverMovieFilters) -> SearchResult[Movie]:
        return await self._movie_repo.discover_movies(filters)

    async def discover_tv_shows(self, filters: DiscoverTvFilters) -> SearchResult[TvShow]:
        return await self._tv_repo.discover_tv_shows(filters)

    async def get_trending(
        self,
        media_type: MediaType,
        time_window: TimeWindow,
        page: Optional[int] = None,
    ) -> SearchResult[TrendingResult]:
        return await self._search_repo.get_trending(media_type, time_window, page or DEFAULT_PAGE)

    # Details

    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        return await self._movie_repo.get_movie_details(movie_id)

    async def get_tv_show_details(self, tv_id: int) -> TvShowDetails:
        return await self._tv_repo.get_tv_show_details(tv_id)

    async def get_person_details(self, person_id: int) -> Person:
        return await self._person_repo.get_person_details(person_id)

    async def get_person_movie_credits(self, person_id: int) -> PersonMovieCredits:
        return await self._person_repo.get_person_movie_credits(person_id)

    async def get_person_tv_credits(self, person_id: int) -> PersonTvCredits:
        return await self._person_repo.get_person_tv_credits(person_id)

    # Listes

    async def get_popular_movies(self, page: Optional[int] = None) -> SearchResult[Movie]:
        return await self._movie_repo.get_popular_movies(page or DEFAULT_PAGE)

    async def get_top_rated_movies(self, page: Optional[int] = None) -> SearchResult[Movie]:
        return await self._movie_repo.get_top_rated_movies(page or DEFAULT_PAGE)

    async def get_upcoming_movies(self, page: Optional[int] = None) -> SearchResult[Movie]:
        return await self._movie_repo.get_upcoming_movies(page or DEFAULT_PAGE)

    async def get_now_playing_movies(self, page: Optional[int] = None) -> SearchResult[Movie]:
        return await self._movie_repo.get_now_playing_movies(page or DEFAULT_PAGE)

    async def get_similar_movies(
        self, movie_id: int, page: Optional[int] = None
    ) -> SearchResult[Movie]:
        return await self._movie_repo.get_similar_movies(movie_id, page or DEFAULT_PAGE)

    async def get_recommended_movies(
        self, movie_id: int, page: Optional[int] = None
    ) -> SearchResult[Movie]:
        return await self._movie_repo.get_recommended_movies(movie_id, page or DEFAULT_PAGE)

    async def get_popular_tv_shows(self, page: Optional[int] = None) -> SearchResult[TvShow]:
        return await self._tv_repo.get_popular_tv_shows(page or DEFAULT_PAGE)

    async def get_top_rated_tv_shows(self, page: Optional[int] = None) -> SearchResult[TvShow]:
        return await self._tv_repo.get_top_rated_tv_shows(page or DEFAULT_PAGE)

    async def get_airing_today_tv_shows(self, page: Optional[int] = None) -> SearchResult[TvShow]:
        return await self._tv_repo.get_airing_today_tv_shows(page or DEFAULT_PAGE)

    async def get_on_the_air_tv_shows(self, page: Optional[int] = None) -> SearchResult[TvShow]:
        return await self._tv_repo.get_on_the_air_tv_shows(page or DEFAULT_PAGE)

    async def get_similar_tv_shows(
        self, tv_id: int, page: Optional[int] = None
    ) -> SearchResult[TvShow]:
        return await self._tv_repo.get_similar_tv_shows(tv_id, page or DEFAULT_PAGE)

    async def get_recommended_tv_shows(
        self, tv_id: int, page: Optional[int] = None
    ) -> SearchResult[TvShow]:
        return await self._tv_repo.get_recommended_tv_shows(tv_id, page or DEFAULT_PAGE)

    async def get_popular_people(self, page: Optional[int] = None) -> SearchResult[Person]:
        return await self._person_repo.get_popular_people(page or DEFAULT_PAGE)
