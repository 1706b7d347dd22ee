"""
Paginated results and the tagged union used by multi-search and trending.

MultiSearchResult and TrendingResult are unions over MovieResult,
TvShowResult and PersonResult. Each variant exposes its media_type tag as a
class constant; callers dispatch on isinstance or on media_type.
"""

from dataclasses import dataclass
from typing import ClassVar, Generic, TypeVar, Union

from src.core.entities.media import Movie, TvShow
from src.core.entities.person import Person

T = TypeVar("T")


@dataclass(frozen=True)
class SearchResult(Generic[T]):
    """
    One page of results.

    Attributes:
        page: Page number (1-based)
        results: Ordered items of the page
        total_pages: Total number of pages
        total_results: Total number of results across all pages
    """

    page: int
    results: tuple[T, ...]
    total_pages: int
    total_results: int

    @property
    def has_next_page(self) -> bool:
        return self.page < self.total_pages

    @property
    def has_previous_page(self) -> bool:
        return self.page > 1


@dataclass(frozen=True)
class MovieResult:
    """Movie entry of a multi-search or trending page."""

    media_type: ClassVar[str] = "movie"

    movie: Movie


@dataclass(frozen=True)
class TvShowResult:
    """TV show entry of a multi-search or trending page."""

    media_type: ClassVar[str] = "tv"

    tv_show: TvShow


@dataclass(frozen=True)
class PersonResult:
    """Person entry, with the movies and shows the person is known for."""

    media_type: ClassVar[str] = "person"

    person: Person
    known_for: tuple[Union[MovieResult, TvShowResult], ...] = ()


MultiSearchResult = Union[MovieResult, TvShowResult, PersonResult]
TrendingResult = Union[MovieResult, TvShowResult, PersonResult]
