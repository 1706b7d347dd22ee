"""
Schemas JSON externes de l'API TMDB, un par endpoint.

Ces TypedDict decrivent la forme brute des reponses (snake_case TMDB). Ils
restent strictement separes des entites du domaine : la conversion passe
toujours par une fonction de src.adapters.api.mappers. Tous les schemas
sont total=False car TMDB omet regulierement des champs.
"""

from typing import Optional, TypedDict


class TmdbGenre(TypedDict, total=False):
    id: int
    name: str


class TmdbProductionCompany(TypedDict, total=False):
    id: int
    name: str
    logo_path: Optional[str]
    origin_country: str


class TmdbProductionCountry(TypedDict, total=False):
    iso_3166_1: str
    name: str


class TmdbSpokenLanguage(TypedDict, total=False):
    english_name: str
    iso_639_1: str
    name: str


class TmdbCollection(TypedDict, total=False):
    id: int
    name: str
    poster_path: Optional[str]
    backdrop_path: Optional[str]


class TmdbNetwork(TypedDict, total=False):
    id: int
    name: str
    logo_path: Optional[str]
    origin_country: str


class TmdbCreator(TypedDict, total=False):
    id: int
    name: str
    profile_path: Optional[str]


class TmdbMovie(TypedDict, total=False):
    """Element de /search/movie, /discover/movie, /movie/popular, ..."""

    adult: bool
    backdrop_path: Optional[str]
    genre_ids: list[int]
    id: int
    original_language: str
    original_title: str
    overview: str
    popularity: float
    poster_path: Optional[str]
    release_date: str
    title: str
    video: bool
    vote_average: Optional[float]
    vote_count: Optional[int]


class TmdbMovieDetails(TmdbMovie, total=False):
    """Reponse de /movie/{id}."""

    belongs_to_collection: Optional[TmdbCollection]
    budget: int
    genres: list[TmdbGenre]
    homepage: Optional[str]
    imdb_id: Optional[str]
    production_companies: list[TmdbProductionCompany]
    production_countries: list[TmdbProductionCountry]
    revenue: int
    runtime: Optional[int]
    spoken_languages: list[TmdbSpokenLanguage]
    status: str
    tagline: Optional[str]


class TmdbTvShow(TypedDict, total=False):
    """Element de /search/tv, /discover/tv, /tv/popular, ..."""

    adult: bool
    backdrop_path: Optional[str]
    first_air_date: str
    genre_ids: list[int]
    id: int
    name: str
    origin_country: list[str]
    original_language: str
    original_name: str
    overview: str
    popularity: float
    poster_path: Optional[str]
    vote_average: Optional[float]
    vote_count: Optional[int]


class TmdbTvShowDetails(TmdbTvShow, total=False):
    """Reponse de /tv/{id}."""

    created_by: list[TmdbCreator]
    episode_run_time: list[int]
    genres: list[TmdbGenre]
    homepage: Optional[str]
    in_production: bool
    languages: list[str]
    last_air_date: Optional[str]
    networks: list[TmdbNetwork]
    number_of_episodes: int
    number_of_seasons: int
    production_companies: list[TmdbProductionCompany]
    status: str
    tagline: Optional[str]
    type: str


class TmdbPerson(TypedDict, total=False):
    """Element de /search/person ou reponse de /person/{id}."""

    adult: bool
    also_known_as: list[str]
    biography: str
    birthday: Optional[str]
    deathday: Optional[str]
    gender: int
    homepage: Optional[str]
    id: int
    imdb_id: Optional[str]
    known_for_department: str
    name: str
    place_of_birth: Optional[str]
    popularity: float
    profile_path: Optional[str]


class TmdbMovieCredit(TmdbMovie, total=False):
    """Element cast/crew de /person/{id}/movie_credits."""

    credit_id: str
    character: str
    job: str
    department: str


class TmdbTvCredit(TmdbTvShow, total=False):
    """Element cast/crew de /person/{id}/tv_credits."""

    credit_id: str
    character: str
    job: str
    department: str
    episode_count: int


class TmdbPersonMovieCredits(TypedDict, total=False):
    id: int
    cast: list[TmdbMovieCredit]
    crew: list[TmdbMovieCredit]


class TmdbPersonTvCredits(TypedDict, total=False):
    id: int
    cast: list[TmdbTvCredit]
    crew: list[TmdbTvCredit]


class TmdbMultiItem(TypedDict, total=False):
    """
    Element de /search/multi ou /trending, discrimine par media_type.

    Union des champs film, serie et personne.
    """

    media_type: str
    id: int
    adult: bool
    popularity: float
    # Film
    title: str
    original_title: str
    release_date: str
    video: bool
    # Serie
    name: str
    original_name: str
    first_air_date: str
    origin_country: list[str]
    # Personne
    known_for_department: str
    known_for: list["TmdbMultiItem"]
    profile_path: Optional[str]
    gender: int
    # Commun
    overview: str
    poster_path: Optional[str]
    backdrop_path: Optional[str]
    genre_ids: list[int]
    vote_average: Optional[float]
    vote_count: Optional[int]
    original_language: str


class TmdbMoviePage(TypedDict, total=False):
    page: int
    results: list[TmdbMovie]
    total_pages: int
    total_results: int


class TmdbTvShowPage(TypedDict, total=False):
    page: int
    results: list[TmdbTvShow]
    total_pages: int
    total_results: int


class TmdbPersonPage(TypedDict, total=False):
    page: int
    results: list[TmdbPerson]
    total_pages: int
    total_results: int


class TmdbMultiPage(TypedDict, total=False):
    page: int
    results: list[TmdbMultiItem]
    total_pages: int
    total_results: int
