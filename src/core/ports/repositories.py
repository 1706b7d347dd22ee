"""
Interfaces ports pour les repositories TMDB.

Un repository par famille de ressources (films, series, personnes,
recherche generale). Chaque methode correspond a un endpoint TMDB et
retourne des entites du domaine, jamais du JSON brut.

Les erreurs du client (NotFoundError, RateLimitError, ...) sont propagees
telles quelles : aucun repository ne les avale ni ne relance l'appel.
"""

from abc import ABC, abstractmethod

from src.core.entities.media import Movie, MovieDetails, TvShow, TvShowDetails
from src.core.entities.person import Person, PersonMovieCredits, PersonTvCredits
from src.core.entities.search_result import (
    MultiSearchResult,
    SearchResult,
    TrendingResult,
)
from src.core.value_objects.enums import MediaType, TimeWindow
from src.core.value_objects.filters import (
    DiscoverMovieFilters,
    DiscoverTvFilters,
    SearchFilters,
)


class IMovieRepository(ABC):
    """Interface d'acces aux films."""

    @abstractmethod
    async def search_movies(self, filters: SearchFilters) -> SearchResult[Movie]:
        """Recherche textuelle (/search/movie)."""
        ...

    @abstractmethod
    async def discover_movies(self, filters: DiscoverMovieFilters) -> SearchResult[Movie]:
        """Decouverte filtree (/discover/movie)."""
        ...

    @abstractmethod
    async def get_movie_details(self, movie_id: int) -> MovieDetails:
        """Details complets. Leve NotFoundError si le film n'existe pas."""
        ...

    @abstractmethod
    async def get_popular_movies(self, page: int = 1) -> SearchResult[Movie]:
        ...

    @abstractmethod
    async def get_top_rated_movies(self, page: int = 1) -> SearchResult[Movie]:
        ...

    @abstractmethod
    async def get_upcoming_movies(self, page: int = 1) -> SearchResult[Movie]:
        ...

    @abstractmethod
    async def get_now_playing_movies(self, page: int = 1) -> SearchResult[Movie]:
        ...

    @abstractmethod
    async def get_similar_movies(self, movie_id: int, page: int = 1) -> SearchResult[Movie]:
        ...

    @abstractmethod
    async def get_recommended_movies(self, movie_id: int, page: int = 1) -> SearchResult[Movie]:
        ...


class ITvShowRepository(ABC):
    """Interface d'acces aux series TV."""

    @abstractmethod
    async def search_tv_shows(self, filters: SearchFilters) -> SearchResult[TvShow]:
        """Recherche textuelle (/search/tv)."""
        ...

    @abstractmethod
    async def discover_tv_shows(self, filters: DiscoverTvFilters) -> SearchResult[TvShow]:
        """Decouverte filtree (/discover/tv)."""
        ...

    @abstractmethod
    async def get_tv_show_details(self, tv_id: int) -> TvShowDetails:
        """Details complets. Leve NotFoundError si la serie n'existe pas."""
        ...

    @abstractmethod
    async def get_popular_tv_shows(self, page: int = 1) -> SearchResult[TvShow]:
        ...

    @abstractmethod
    async def get_top_rated_tv_shows(self, page: int = 1) -> SearchResult[TvShow]:
        ...

    @abstractmethod
    async def get_airing_today_tv_shows(self, page: int = 1) -> SearchResult[TvShow]:
        ...

    @abstractmethod
    async def get_on_the_air_tv_shows(self, page: int = 1) -> SearchResult[TvShow]:
        ...

    @abstractmethod
    async def get_similar_tv_shows(self, tv_id: int, page: int = 1) -> SearchResult[TvShow]:
        ...

    @abstractmethod
    async def get_recommended_tv_shows(self, tv_id: int, page: int = 1) -> SearchResult[TvShow]:
        ...


class IPersonRepository(ABC):
    """Interface d'acces aux personnes."""

    @abstractmethod
    async def search_people(self, filters: SearchFilters) -> SearchResult[Person]:
        """Recherche textuelle (/search/person)."""
        ...

    @abstractmethod
    async def get_person_details(self, person_id: int) -> Person:
        """Details complets. Leve NotFoundError si la personne n'existe pas."""
        ...

    @abstractmethod
    async def get_popular_people(self, page: int = 1) -> SearchResult[Person]:
        ...

    @abstractmethod
    async def get_person_movie_credits(self, person_id: int) -> PersonMovieCredits:
        """Filmographie (cast et crew)."""
        ...

    @abstractmethod
    async def get_person_tv_credits(self, person_id: int) -> PersonTvCredits:
        """Credits TV (cast et crew)."""
        ...


class ISearchRepository(ABC):
    """Interface de recherche multi-types et des tendances."""

    @abstractmethod
    async def multi_search(self, filters: SearchFilters) -> SearchResult[MultiSearchResult]:
        """Recherche films, series et personnes en un appel (/search/multi)."""
        ...

    @abstractmethod
    async def get_trending(
        self,
        media_type: MediaType,
        time_window: TimeWindow,
        page: int = 1,
    ) -> SearchResult[TrendingResult]:
        """Tendances du jour ou de la semaine (/trending/{type}/{window})."""
        ...
