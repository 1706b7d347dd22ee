"""
Domain entities built from TMDB responses.

Entities are immutable records: they are created once per API response and
never mutated afterwards.

Exports:
- Movie, MovieDetails: Movie summary and full record
- TvShow, TvShowDetails: TV show summary and full record
- Person: Person summary and detail record
- PersonMovieCredits, PersonTvCredits: Credits of a person
- SearchResult: One page of results
- MovieResult, TvShowResult, PersonResult: Tagged union variants
"""

from src.core.entities.media import (
    Collection,
    Creator,
    Genre,
    Movie,
    MovieDetails,
    Network,
    ProductionCompany,
    ProductionCountry,
    SpokenLanguage,
    TvShow,
    TvShowDetails,
)
from src.core.entities.person import (
    MovieCredit,
    Person,
    PersonMovieCredits,
    PersonTvCredits,
    TvCredit,
)
from src.core.entities.search_result import (
    MovieResult,
    MultiSearchResult,
    PersonResult,
    SearchResult,
    TrendingResult,
    TvShowResult,
)

__all__ = [
    "Collection",
    "Creator",
    "Genre",
    "Movie",
    "MovieDetails",
    "Network",
    "ProductionCompany",
    "ProductionCountry",
    "SpokenLanguage",
    "TvShow",
    "TvShowDetails",
    "MovieCredit",
    "Person",
    "PersonMovieCredits",
    "PersonTvCredits",
    "TvCredit",
    "MovieResult",
    "MultiSearchResult",
    "PersonResult",
    "SearchResult",
    "TrendingResult",
    "TvShowResult",
]
