"""
Conversion des reponses TMDB (schemas externes) en entites du domaine.

Une fonction de conversion par couple (schema externe, entite). Les
familles de ressources ne partagent aucune fonction, meme quand leurs
sous-objets se ressemblent (genres et societes de production des films et
des series), afin que chaque conversion reste testable independamment.

Regles communes :
- vote_average et vote_count absents ou null valent 0
- genre_ids, origin_country et also_known_as absents valent ()
- une date vide ("") ou absente signifie "inconnue" (None)
- adult absent vaut False
- les chemins d'images sont transmis tels quels (relatifs ou None)
"""

from datetime import date
from typing import Any, Callable, Mapping, Optional, TypeVar

from loguru import logger

from src.adapters.api.schemas import (
    TmdbCollection,
    TmdbCreator,
    TmdbGenre,
    TmdbMovie,
    TmdbMovieCredit,
    TmdbMovieDetails,
    TmdbMultiItem,
    TmdbNetwork,
    TmdbPerson,
    TmdbPersonMovieCredits,
    TmdbPersonTvCredits,
    TmdbProductionCompany,
    TmdbProductionCountry,
    TmdbSpokenLanguage,
    TmdbTvCredit,
    TmdbTvShow,
    TmdbTvShowDetails,
)
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
    TvShowResult,
)
from src.core.exceptions import ValidationError

T = TypeVar("T")

# Table cle TMDB -> attribut de l'entite, par entite resume.
MOVIE_FIELDS: dict[str, str] = {
    "id": "id",
    "title": "title",
    "original_title": "original_title",
    "overview": "overview",
    "release_date": "release_date",
    "poster_path": "poster_path",
    "backdrop_path": "backdrop_path",
    "vote_average": "vote_average",
    "vote_count": "vote_count",
    "popularity": "popularity",
    "adult": "adult",
    "original_language": "original_language",
    "genre_ids": "genre_ids",
    "video": "video",
}

TV_SHOW_FIELDS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "original_name": "original_name",
    "overview": "overview",
    "first_air_date": "first_air_date",
    "poster_path": "poster_path",
    "backdrop_path": "backdrop_path",
    "genre_ids": "genre_ids",
    "popularity": "popularity",
    "vote_average": "vote_average",
    "vote_count": "vote_count",
    "adult": "adult",
    "original_language": "original_language",
    "origin_country": "origin_country",
}

PERSON_FIELDS: dict[str, str] = {
    "id": "id",
    "name": "name",
    "biography": "biography",
    "birthday": "birthday",
    "deathday": "deathday",
    "gender": "gender",
    "profile_path": "profile_path",
    "known_for_department": "known_for_department",
    "place_of_birth": "place_of_birth",
    "popularity": "popularity",
    "adult": "adult",
    "also_known_as": "also_known_as",
    "homepage": "homepage",
    "imdb_id": "imdb_id",
}


def parse_date(value: Optional[str]) -> Optional[date]:
    """
    Convertit une date TMDB (YYYY-MM-DD) en date.

    Une chaine vide ou absente signifie "date inconnue" et donne None. Une
    chaine mal formee donne aussi None.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.debug("Date TMDB invalide ignoree", value=value)
        return None


def map_page(payload: Mapping[str, Any], item_mapper: Callable[[Any], T]) -> SearchResult[T]:
    """Convertit une page TMDB en SearchResult via item_mapper."""
    return SearchResult(
        page=payload.get("page") or 1,
        results=tuple(item_mapper(item) for item in payload.get("results") or ()),
        total_pages=payload.get("total_pages") or 0,
        total_results=payload.get("total_results") or 0,
    )


# ---------------------------------------------------------------------------
# Films
# ---------------------------------------------------------------------------


def map_movie(payload: TmdbMovie) -> Movie:
    """Convertit un film resume."""
    return Movie(
        id=payload["id"],
        title=payload.get("title") or payload.get("original_title") or "",
        original_title=payload.get("original_title") or "",
        overview=payload.get("overview") or "",
        release_date=parse_date(payload.get("release_date")),
        poster_path=payload.get("poster_path"),
        backdrop_path=payload.get("backdrop_path"),
        vote_average=payload.get("vote_average") or 0,
        vote_count=payload.get("vote_count") or 0,
        popularity=payload.get("popularity") or 0,
        adult=bool(payload.get("adult", False)),
        original_language=payload.get("original_language") or "",
        genre_ids=tuple(payload.get("genre_ids") or ()),
        video=bool(payload.get("video", False)),
    )


def map_movie_genre(payload: TmdbGenre) -> Genre:
    return Genre(id=payload["id"], name=payload.get("name") or "")


def map_movie_production_company(payload: TmdbProductionCompany) -> ProductionCompany:
    return ProductionCompany(
        id=payload["id"],
        name=payload.get("name") or "",
        logo_path=payload.get("logo_path"),
        origin_country=payload.get("origin_country") or "",
    )


def map_production_country(payload: TmdbProductionCountry) -> ProductionCountry:
    return ProductionCountry(
        iso_3166_1=payload.get("iso_3166_1") or "",
        name=payload.get("name") or "",
    )


def map_spoken_language(payload: TmdbSpokenLanguage) -> SpokenLanguage:
    return SpokenLanguage(
        iso_639_1=payload.get("iso_639_1") or "",
        name=payload.get("name") or "",
        english_name=payload.get("english_name") or "",
    )


def map_collection(payload: Optional[TmdbCollection]) -> Optional[Collection]:
    if not payload:
        return None
    return Collection(
        id=payload["id"],
        name=payload.get("name") or "",
        poster_path=payload.get("poster_path"),
        backdrop_path=payload.get("backdrop_path"),
    )


def map_movie_details(payload: TmdbMovieDetails) -> MovieDetails:
    """
    Convertit la reponse de /movie/{id}.

    TMDB ne renvoie pas genre_ids sur ce endpoint : ils sont deduits des
    objets genres.
    """
    genres = tuple(map_movie_genre(g) for g in payload.get("genres") or ())
    genre_ids = payload.get("genre_ids") or [g.id for g in genres]
    return MovieDetails(
        id=payload["id"],
        title=payload.get("title") or payload.get("original_title") or "",
        original_title=payload.get("original_title") or "",
        overview=payload.get("overview") or "",
        release_date=parse_date(payload.get("release_date")),
        poster_path=payload.get("poster_path"),
        backdrop_path=payload.get("backdrop_path"),
        vote_average=payload.get("vote_average") or 0,
        vote_count=payload.get("vote_count") or 0,
        popularity=payload.get("popularity") or 0,
        adult=bool(payload.get("adult", False)),
        original_language=payload.get("original_language") or "",
        genre_ids=tuple(genre_ids),
        video=bool(payload.get("video", False)),
        runtime=payload.get("runtime"),
        genres=genres,
        budget=payload.get("budget") or 0,
        revenue=payload.get("revenue") or 0,
        homepage=payload.get("homepage") or None,
        imdb_id=payload.get("imdb_id") or None,
        status=payload.get("status") or "",
        tagline=payload.get("tagline") or None,
        production_companies=tuple(
            map_movie_production_company(c) for c in payload.get("production_companies") or ()
        ),
        production_countries=tuple(
            map_production_country(c) for c in payload.get("production_countries") or ()
        ),
        spoken_languages=tuple(
            map_spoken_language(lang) for lang in payload.get("spoken_languages") or ()
        ),
        belongs_to_collection=map_collection(payload.get("belongs_to_collection")),
    )


# ---------------------------------------------------------------------------
# Series TV
# ---------------------------------------------------------------------------


def map_tv_show(payload: TmdbTvShow) -> TvShow:
    """Convertit une serie resume."""
    return TvShow(
        id=payload["id"],
        name=payload.get("name") or payload.get("original_name") or "",
        original_name=payload.get("original_name") or "",
        overview=payload.get("overview") or "",
        first_air_date=parse_date(payload.get("first_air_date")),
        poster_path=payload.get("poster_path"),
        backdrop_path=payload.get("backdrop_path"),
        genre_ids=tuple(payload.get("genre_ids") or ()),
        popularity=payload.get("popularity") or 0,
        vote_average=payload.get("vote_average") or 0,
        vote_count=payload.get("vote_count") or 0,
        adult=bool(payload.get("adult", False)),
        original_language=payload.get("original_language") or "",
        origin_country=tuple(payload.get("origin_country") or ()),
    )


def map_tv_genre(payload: TmdbGenre) -> Genre:
    return Genre(id=payload["id"], name=payload.get("name") or "")


def map_tv_production_company(payload: TmdbProductionCompany) -> ProductionCompany:
    return ProductionCompany(
        id=payload["id"],
        name=payload.get("name") or "",
        logo_path=payload.get("logo_path"),
        origin_country=payload.get("origin_country") or "",
    )


def map_network(payload: TmdbNetwork) -> Network:
    return Network(
        id=payload["id"],
        name=payload.get("name") or "",
        logo_path=payload.get("logo_path"),
        origin_country=payload.get("origin_country") or "",
    )


def map_creator(payload: TmdbCreator) -> Creator:
    return Creator(
        id=payload["id"],
        name=payload.get("name") or "",
        profile_path=payload.get("profile_path"),
    )


def map_tv_show_details(payload: TmdbTvShowDetails) -> TvShowDetails:
    """Convertit la reponse de /tv/{id}."""
    genres = tuple(map_tv_genre(g) for g in payload.get("genres") or ())
    genre_ids = payload.get("genre_ids") or [g.id for g in genres]
    return TvShowDetails(
        id=payload["id"],
        name=payload.get("name") or payload.get("original_name") or "",
        original_name=payload.get("original_name") or "",
        overview=payload.get("overview") or "",
        first_air_date=parse_date(payload.get("first_air_date")),
        poster_path=payload.get("poster_path"),
        backdrop_path=payload.get("backdrop_path"),
        genre_ids=tuple(genre_ids),
        popularity=payload.get("popularity") or 0,
        vote_average=payload.get("vote_average") or 0,
        vote_count=payload.get("vote_count") or 0,
        adult=bool(payload.get("adult", False)),
        original_language=payload.get("original_language") or "",
        origin_country=tuple(payload.get("origin_country") or ()),
        created_by=tuple(map_creator(c) for c in payload.get("created_by") or ()),
        episode_run_time=tuple(payload.get("episode_run_time") or ()),
        genres=genres,
        homepage=payload.get("homepage") or None,
        in_production=bool(payload.get("in_production", False)),
        languages=tuple(payload.get("languages") or ()),
        last_air_date=parse_date(payload.get("last_air_date")),
        number_of_episodes=payload.get("number_of_episodes") or 0,
        number_of_seasons=payload.get("number_of_seasons") or 0,
        networks=tuple(map_network(n) for n in payload.get("networks") or ()),
        production_companies=tuple(
            map_tv_production_company(c) for c in payload.get("production_companies") or ()
        ),
        status=payload.get("status") or "",
        tagline=payload.get("tagline") or None,
        type=payload.get("type") or "",
    )


# ---------------------------------------------------------------------------
# Personnes et credits
# ---------------------------------------------------------------------------


def map_person(payload: TmdbPerson) -> Person:
    """Convertit une personne (resultat de recherche ou detail)."""
    return Person(
        id=payload["id"],
        name=payload.get("name") or "",
        biography=payload.get("biography") or "",
        birthday=parse_date(payload.get("birthday")),
        deathday=parse_date(payload.get("deathday")),
        gender=payload.get("gender") or 0,
        profile_path=payload.get("profile_path"),
        known_for_department=payload.get("known_for_department") or "",
        place_of_birth=payload.get("place_of_birth") or None,
        popularity=payload.get("popularity") or 0,
        adult=bool(payload.get("adult", False)),
        also_known_as=tuple(payload.get("also_known_as") or ()),
        homepage=payload.get("homepage") or None,
        imdb_id=payload.get("imdb_id") or None,
    )


def map_movie_credit(payload: TmdbMovieCredit) -> MovieCredit:
    return MovieCredit(
        id=payload["id"],
        title=payload.get("title") or payload.get("original_title") or "",
        original_title=payload.get("original_title") or "",
        release_date=parse_date(payload.get("release_date")),
        poster_path=payload.get("poster_path"),
        vote_average=payload.get("vote_average") or 0,
        vote_count=payload.get("vote_count") or 0,
        popularity=payload.get("popularity") or 0,
        genre_ids=tuple(payload.get("genre_ids") or ()),
        credit_id=payload.get("credit_id") or "",
        character=payload.get("character"),
        job=payload.get("job"),
        department=payload.get("department"),
    )


def map_tv_credit(payload: TmdbTvCredit) -> TvCredit:
    return TvCredit(
        id=payload["id"],
        name=payload.get("name") or payload.get("original_name") or "",
        original_name=payload.get("original_name") or "",
        first_air_date=parse_date(payload.get("first_air_date")),
        poster_path=payload.get("poster_path"),
        vote_average=payload.get("vote_average") or 0,
        vote_count=payload.get("vote_count") or 0,
        popularity=payload.get("popularity") or 0,
        genre_ids=tuple(payload.get("genre_ids") or ()),
        origin_country=tuple(payload.get("origin_country") or ()),
        credit_id=payload.get("credit_id") or "",
        character=payload.get("character"),
        job=payload.get("job"),
        department=payload.get("department"),
        episode_count=payload.get("episode_count") or 0,
    )


def map_person_movie_credits(payload: TmdbPersonMovieCredits) -> PersonMovieCredits:
    return PersonMovieCredits(
        id=payload.get("id") or 0,
        cast=tuple(map_movie_credit(c) for c in payload.get("cast") or ()),
        crew=tuple(map_movie_credit(c) for c in payload.get("crew") or ()),
    )


def map_person_tv_credits(payload: TmdbPersonTvCredits) -> PersonTvCredits:
    return PersonTvCredits(
        id=payload.get("id") or 0,
        cast=tuple(map_tv_credit(c) for c in payload.get("cast") or ()),
        crew=tuple(map_tv_credit(c) for c in payload.get("crew") or ()),
    )


# ---------------------------------------------------------------------------
# Union etiquetee (multi-search, trending)
# ---------------------------------------------------------------------------


def _map_known_for(payload: TmdbMultiItem) -> MovieResult | TvShowResult:
    media_type = payload.get("media_type")
    if media_type == "movie":
        return MovieResult(movie=map_movie(payload))
    if media_type == "tv":
        return TvShowResult(tv_show=map_tv_show(payload))
    raise ValidationError(f"Unknown media type in known_for: {media_type!r}", field="media_type")


def map_media_item(payload: TmdbMultiItem, media_type: Optional[str] = None) -> MultiSearchResult:
    """
    Construit la variante correspondant au media_type de l'element.

    Args:
        payload: Element brut de /search/multi ou /trending
        media_type: Type a utiliser si l'element n'en porte pas (endpoint
            /trending/{movie|tv|person} ou le type est fixe par l'URL)

    Raises:
        ValidationError: media_type absent ou inconnu
    """
    tag = payload.get("media_type") or media_type
    if tag == "movie":
        return MovieResult(movie=map_movie(payload))
    if tag == "tv":
        return TvShowResult(tv_show=map_tv_show(payload))
    if tag == "person":
        return PersonResult(
            person=map_person(payload),
            known_for=tuple(_map_known_for(item) for item in payload.get("known_for") or ()),
        )
    raise ValidationError(f"Unknown media type: {tag!r}", field="media_type")
