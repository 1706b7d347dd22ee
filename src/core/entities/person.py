"""
Person and credits entities.

A Person doubles as its own detail record: search results fill the fields
they carry and leave the rest to their defaults.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Person:
    """
    Actor, director or any other crew member.

    Attributes:
        id: TMDB id
        name: Display name
        biography: Free-text biography (empty in search results)
        birthday: Birth date, None when unknown
        deathday: Death date, None when alive or unknown
        gender: TMDB gender code (0 unknown, 1 female, 2 male, 3 non-binary)
        profile_path: Relative profile picture path
        known_for_department: Main department (Acting, Directing, ...)
        place_of_birth: Place of birth
        popularity: TMDB popularity score
        adult: Adult content flag
        also_known_as: Alternative names (empty when absent)
        homepage: Official website
        imdb_id: IMDb id (nmXXXXXXX)
    """

    id: int
    name: str
    biography: str = ""
    birthday: Optional[date] = None
    deathday: Optional[date] = None
    gender: int = 0
    profile_path: Optional[str] = None
    known_for_department: str = ""
    place_of_birth: Optional[str] = None
    popularity: float = 0.0
    adult: bool = False
    also_known_as: tuple[str, ...] = ()
    homepage: Optional[str] = None
    imdb_id: Optional[str] = None


@dataclass(frozen=True)
class MovieCredit:
    """
    Movie a person worked on.

    Cast entries carry character, crew entries carry job and department.
    """

    id: int
    title: str
    original_title: str = ""
    release_date: Optional[date] = None
    poster_path: Optional[str] = None
    vote_average: float = 0.0
    vote_count: int = 0
    popularity: float = 0.0
    genre_ids: tuple[int, ...] = ()
    credit_id: str = ""
    character: Optional[str] = None
    job: Optional[str] = None
    department: Optional[str] = None


@dataclass(frozen=True)
class TvCredit:
    """TV show a person worked on."""

    id: int
    name: str
    original_name: str = ""
    first_air_date: Optional[date] = None
    poster_path: Optional[str] = None
    vote_average: float = 0.0
    vote_count: int = 0
    popularity: float = 0.0
    genre_ids: tuple[int, ...] = ()
    origin_country: tuple[str, ...] = ()
    credit_id: str = ""
    character: Optional[str] = None
    job: Optional[str] = None
    department: Optional[str] = None
    episode_count: int = 0


@dataclass(frozen=True)
class PersonMovieCredits:
    """Result of /person/{id}/movie_credits."""

    id: int
    cast: tuple[MovieCredit, ...] = ()
    crew: tuple[MovieCredit, ...] = ()


@dataclass(frozen=True)
class PersonTvCredits:
    """Result of /person/{id}/tv_credits."""

    id: int
    cast: tuple[TvCredit, ...] = ()
    crew: tuple[TvCredit, ...] = ()
