"""
Movie and TV show entities.

Immutable records built from a single TMDB response. Image paths are kept
relative (e.g. "/abc.jpg"); absolute URLs are built at presentation time
with src.utils.formatters.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Genre:
    """Genre with its TMDB id and localized name."""

    id: int
    name: str


@dataclass(frozen=True)
class ProductionCompany:
    """Production company credited on a movie or a TV show."""

    id: int
    name: str
    logo_path: Optional[str] = None
    origin_country: str = ""


@dataclass(frozen=True)
class ProductionCountry:
    """Production country (ISO 3166-1 code and name)."""

    iso_3166_1: str
    name: str


@dataclass(frozen=True)
class SpokenLanguage:
    """Spoken language (ISO 639-1 code, english and native names)."""

    iso_639_1: str
    name: str
    english_name: str = ""


@dataclass(frozen=True)
class Collection:
    """Collection (saga) a movie belongs to."""

    id: int
    name: str
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None


@dataclass(frozen=True)
class Network:
    """Broadcast network of a TV show."""

    id: int
    name: str
    logo_path: Optional[str] = None
    origin_country: str = ""


@dataclass(frozen=True)
class Creator:
    """Creator of a TV show."""

    id: int
    name: str
    profile_path: Optional[str] = None


@dataclass(frozen=True)
class Movie:
    """
    Movie summary as returned by search, discover and list endpoints.

    Attributes:
        id: TMDB id
        title: Localized title
        original_title: Title in the original language
        overview: Plot summary
        release_date: Release date, None when unknown
        poster_path: Relative poster path
        backdrop_path: Relative backdrop path
        vote_average: Average rating (0 when absent)
        vote_count: Number of votes (0 when absent)
        popularity: TMDB popularity score
        adult: Adult content flag
        original_language: ISO 639-1 code
        genre_ids: Genre ids (empty when absent)
        video: True for video releases
    """

    id: int
    title: str
    original_title: str = ""
    overview: str = ""
    release_date: Optional[date] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    vote_average: float = 0.0
    vote_count: int = 0
    popularity: float = 0.0
    adult: bool = False
    original_language: str = ""
    genre_ids: tuple[int, ...] = ()
    video: bool = False


@dataclass(frozen=True)
class MovieDetails(Movie):
    """
    Full movie record from /movie/{id}.

    Extends Movie with runtime (minutes), genre objects, budget/revenue,
    production data, spoken languages and collection membership.
    """

    runtime: Optional[int] = None
    genres: tuple[Genre, ...] = ()
    budget: int = 0
    revenue: int = 0
    homepage: Optional[str] = None
    imdb_id: Optional[str] = None
    status: str = ""
    tagline: Optional[str] = None
    production_companies: tuple[ProductionCompany, ...] = ()
    production_countries: tuple[ProductionCountry, ...] = ()
    spoken_languages: tuple[SpokenLanguage, ...] = ()
    belongs_to_collection: Optional[Collection] = None


@dataclass(frozen=True)
class TvShow:
    """
    TV show summary as returned by search, discover and list endpoints.

    Attributes:
        id: TMDB id
        name: Localized name
        original_name: Name in the original language
        overview: Synopsis
        first_air_date: First air date, None when unknown
        poster_path: Relative poster path
        backdrop_path: Relative backdrop path
        genre_ids: Genre ids (empty when absent)
        popularity: TMDB popularity score
        vote_average: Average rating (0 when absent)
        vote_count: Number of votes (0 when absent)
        adult: Adult content flag
        original_language: ISO 639-1 code
        origin_country: ISO 3166-1 codes (empty when absent)
    """

    id: int
    name: str
    original_name: str = ""
    overview: str = ""
    first_air_date: Optional[date] = None
    poster_path: Optional[str] = None
    backdrop_path: Optional[str] = None
    genre_ids: tuple[int, ...] = ()
    popularity: float = 0.0
    vote_average: float = 0.0
    vote_count: int = 0
    adult: bool = False
    original_language: str = ""
    origin_country: tuple[str, ...] = ()


@dataclass(frozen=True)
class TvShowDetails(TvShow):
    """Full TV show record from /tv/{id}."""

    created_by: tuple[Creator, ...] = ()
    episode_run_time: tuple[int, ...] = ()
    genres: tuple[Genre, ...] = ()
    homepage: Optional[str] = None
    in_production: bool = False
    languages: tuple[str, ...] = ()
    last_air_date: Optional[date] = None
    number_of_episodes: int = 0
    number_of_seasons: int = 0
    networks: tuple[Network, ...] = ()
    production_companies: tuple[ProductionCompany, ...] = ()
    status: str = ""
    tagline: Optional[str] = None
    type: str = ""
