"""
Cas d'utilisation exposes a la couche de presentation (CLI).

Un cas d'utilisation par famille de ressources. Chacun construit les
filtres a partir d'arguments simples, applique les valeurs par defaut
(page=1, include_adult=False), valide les entrees (page >= 1, id > 0) et
delegue au SearchService. Aucune autre logique.
"""

from dataclasses import replace
from typing import Optional

from src.core.entities.media import Movie, MovieDetails, TvShow, TvShowDetails
from src.core.entities.person import Person, PersonMovieCredits, PersonTvCredits
from src.core.entities.search_result import (
    MultiSearchResult,
    SearchResult,
    TrendingResult,
)
from src.core.exceptions import ValidationError
from src.core.value_objects.enums import MediaType, TimeWindow
from src.core.value_objects.filters import (
    DiscoverMovieFilters,
    DiscoverTvFilters,
    SearchFilters,
)
from src.services.search_service import SearchService


def _check_page(page: int) -> int:
    if page < 1:
        raise ValidationError(f"Page must be >= 1 (got {page})", field="page")
    return page


def _check_id(resource_id: int) -> int:
    if resource_id <= 0:
        raise ValidationError(f"Id must be a positive integer (got {resource_id})", field="id")
    return resource_id


def _search_filters(
    query: str,
    page: int,
    include_adult: bool,
    options: Optional[SearchFilters],
) -> SearchFilters:
    if not query or not query.strip():
        raise ValidationError("Search query must not be empty", field="query")
    base = options or SearchFilters()
    return replace(
        base,
        query=query.strip(),
        page=_check_page(page),
        include_adult=include_adult,
    )


class MovieSearchUseCase:
    """Recherche, decouverte et listes de films."""

    def __init__(self, search_service: SearchService) -> None:
        self._service = search_service

    async def search_movies(
        self,
        query: str,
        page: int = 1,
        include_adult: bool = False,
        options: Optional[SearchFilters] = None,
    ) -> SearchResult[Movie]:
        """
        Recherche des films par titre.

        Args:
            query: Texte recherche (non vide)
            page: Numero de page
            include_adult: Inclure le contenu adulte
            options: Filtres complementaires (year, region, language, ...)
        """
        return await self._service.search_movies(
            _search_filters(query, page, include_adult, options)
        )

    async def discover_movies(self, filters: Optional[DiscoverMovieFilters] = None) -> SearchResult[Movie]:
        filters = filters or DiscoverMovieFilters()
        if filters.page is not None:
            _check_page(filters.page)
        return await self._service.discover_movies(filters)

    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        return await self._service.get_movie_details(_check_id(movie_id))

    async def get_popular_movies(self, page: int = 1) -> SearchResult[Movie]:
        return await self._service.get_popular_movies(_check_page(page))

    async def get_top_rated_movies(self, page: int = 1) -> SearchResult[Movie]:
        return await self._service.get_top_rated_movies(_check_page(page))

    async def get_upcoming_movies(self, page: int = 1) -> SearchResult[Movie]:
        return await self._service.get_upcoming_movies(_check_page(page))

    async def get_now_playing_movies(self, page: int = 1) -> SearchResult[Movie]:
        return await self._service.get_now_playing_movies(_check_page(page))

    async def get_similar_movies(self, movie_id: int, page: int = 1) -> SearchResult[Movie]:
        return await self._service.get_similar_movies(_check_id(movie_id), _check_page(page))

    async def get_recommended_movies(self, movie_id: int, page: int = 1) -> SearchResult[Movie]:
        return await self._service.get_recommended_movies(_check_id(movie_id), _check_page(page))


class TvShowSearchUseCase:
    """Recherche, decouverte et listes de series TV."""

    def __init__(self, search_service: SearchService) -> None:
        self._service = search_service

    async def search_tv_shows(
        self,
        query: str,
        page: int = 1,
        include_adult: bool = False,
        options: Optional[SearchFilters] = None,
    ) -> SearchResult[TvShow]:
        return await self._service.search_tv_shows(
            _search_filters(query, page, include_adult, options)
        )

    async def discover_tv_shows(self, filters: Optional[DiscoverTvFilters] = None) -> SearchResult[TvShow]:
        filters = filters or DiscoverTvFilters()
        if filters.page is not None:
            _check_page(filters.page)
        return await self._service.discover_tv_shows(filters)

    async def get_tv_show_details(self, tv_id: int) -> TvShowDetails:
        return await self._service.get_tv_show_details(_check_id(tv_id))

    async def get_popular_tv_shows(self, page: int = 1) -> SearchResult[TvShow]:
        return await self._service.get_popular_tv_shows(_check_page(page))

    async def get_top_rated_tv_shows(self, page: int = 1) -> SearchResult[TvShow]:
        return await self._service.get_top_rated_tv_shows(_check_page(page))

    async def get_airing_today_tv_shows(self, page: int = 1) -> SearchResult[TvShow]:
        return await self._service.get_airing_today_tv_shows(_check_page(page))

    async def get_on_the_air_tv_shows(self, page: int = 1) -> SearchResult[TvShow]:
        return await self._service.get_on_the_air_tv_shows(_check_page(page))

    async def get_similar_tv_shows(self, tv_id: int, page: int = 1) -> SearchResult[TvShow]:
        return await self._service.get_similar_tv_shows(_check_id(tv_id), _check_page(page))

    async def get_recommended_tv_shows(self, tv_id: int, page: int = 1) -> SearchResult[TvShow]:
        return await self._service.get_recommended_tv_shows(_check_id(tv_id), _check_page(page))


class PersonSearchUseCase:
    """Recherche de personnes, details et credits."""

    def __init__(self, search_service: SearchService) -> None:
        self._service = search_service

    async def search_people(
        self,
        query: str,
        page: int = 1,
        include_adult: bool = False,
        options: Optional[SearchFilters] = None,
    ) -> SearchResult[Person]:
        return await self._service.search_people(
            _search_filters(query, page, include_adult, options)
        )

    async def get_person_details(self, person_id: int) -> Person:
        return await self._service.get_person_details(_check_id(person_id))

    async def get_popular_people(self, page: int = 1) -> SearchResult[Person]:
        return await self._service.get_popular_people(_check_page(page))

    async def get_person_movie_credits(self, person_id: int) -> PersonMovieCredits:
        return await self._service.get_person_movie_credits(_check_id(person_id))

    async def get_person_tv_credits(self, person_id: int) -> PersonTvCredits:
        return await self._service.get_person_tv_credits(_check_id(person_id))


class GeneralSearchUseCase:
    """Recherche multi-types et tendances."""

    def __init__(self, search_service: SearchService) -> None:
        self._service = search_service

    async def multi_search(
        self,
        query: str,
        page: int = 1,
        include_adult: bool = False,
        options: Optional[SearchFilters] = None,
    ) -> SearchResult[MultiSearchResult]:
        return await self._service.multi_search(
            _search_filters(query, page, include_adult, options)
        )

    async def get_trending(
        self,
        media_type: MediaType,
        time_window: TimeWindow,
        page: int = 1,
    ) -> SearchResult[TrendingResult]:
        return await self._service.get_trending(media_type, time_window, _check_page(page))

    async def get_trending_movies(
        self, time_window: TimeWindow = TimeWindow.WEEK, page: int = 1
    ) -> SearchResult[TrendingResult]:
        return await self.get_trending(MediaType.MOVIE, time_window, page)

    async def get_trending_tv_shows(
        self, time_window: TimeWindow = TimeWindow.WEEK, page: int = 1
    ) -> SearchResult[TrendingResult]:
        return await self.get_trending(MediaType.TV, time_window, page)

    async def get_trending_people(
        self, time_window: TimeWindow = TimeWindow.WEEK, page: int = 1
    ) -> SearchResult[TrendingResult]:
        return await self.get_trending(MediaType.PERSON, time_window, page)

    async def get_trending_all(
        self, time_window: TimeWindow = TimeWindow.WEEK, page: int = 1
    ) -> SearchResult[TrendingResult]:
        return await self.get_trending(MediaType.ALL, time_window, page)
