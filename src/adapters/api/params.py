"""
Serialisation des filtres du domaine en parametres de requete TMDB.

Les tables DISCOVER_MOVIE_PARAMS et DISCOVER_TV_PARAMS donnent, pour chaque
attribut des filtres, le nom du parametre attendu par l'API. Les champs
laisses a None ne sont jamais emis. Les listes de types de sortie, de modes
de monetisation, de statuts et de types de serie sont jointes par "|"
(semantique OU cote TMDB).
"""

from dataclasses import fields
from enum import Enum
from typing import Any, Mapping, Optional

from src.core.value_objects.filters import (
    DiscoverMovieFilters,
    DiscoverTvFilters,
    SearchFilters,
)

PIPE_JOINED_FIELDS = frozenset(
    {
        "with_release_type",
        "with_watch_monetization_types",
        "with_status",
        "with_type",
    }
)

DISCOVER_MOVIE_PARAMS: dict[str, str] = {
    "page": "page",
    "language": "language",
    "region": "region",
    "sort_by": "sort_by",
    "include_adult": "include_adult",
    "include_video": "include_video",
    "primary_release_year": "primary_release_year",
    "primary_release_date_gte": "primary_release_date.gte",
    "primary_release_date_lte": "primary_release_date.lte",
    "release_date_gte": "release_date.gte",
    "release_date_lte": "release_date.lte",
    "with_release_type": "with_release_type",
    "year": "year",
    "vote_count_gte": "vote_count.gte",
    "vote_count_lte": "vote_count.lte",
    "vote_average_gte": "vote_average.gte",
    "vote_average_lte": "vote_average.lte",
    "with_cast": "with_cast",
    "with_crew": "with_crew",
    "with_people": "with_people",
    "with_companies": "with_companies",
    "without_companies": "without_companies",
    "with_genres": "with_genres",
    "without_genres": "without_genres",
    "with_keywords": "with_keywords",
    "without_keywords": "without_keywords",
    "with_runtime_gte": "with_runtime.gte",
    "with_runtime_lte": "with_runtime.lte",
    "with_original_language": "with_original_language",
    "with_watch_providers": "with_watch_providers",
    "watch_region": "watch_region",
    "with_watch_monetization_types": "with_watch_monetization_types",
}

DISCOVER_TV_PARAMS: dict[str, str] = {
    "page": "page",
    "language": "language",
    "sort_by": "sort_by",
    "air_date_gte": "air_date.gte",
    "air_date_lte": "air_date.lte",
    "first_air_date_gte": "first_air_date.gte",
    "first_air_date_lte": "first_air_date.lte",
    "first_air_date_year": "first_air_date_year",
    "timezone": "timezone",
    "vote_average_gte": "vote_average.gte",
    "vote_count_gte": "vote_count.gte",
    "with_genres": "with_genres",
    "without_genres": "without_genres",
    "with_networks": "with_networks",
    "with_runtime_gte": "with_runtime.gte",
    "with_runtime_lte": "with_runtime.lte",
    "include_null_first_air_dates": "include_null_first_air_dates",
    "with_original_language": "with_original_language",
    "with_keywords": "with_keywords",
    "without_keywords": "without_keywords",
    "screened_theatrically": "screened_theatrically",
    "with_companies": "with_companies",
    "without_companies": "without_companies",
    "with_watch_providers": "with_watch_providers",
    "watch_region": "watch_region",
    "with_watch_monetization_types": "with_watch_monetization_types",
    "with_status": "with_status",
    "with_type": "with_type",
}


def serialize_value(value: Any) -> Any:
    """
    Convertit une valeur Python en valeur de query string.

    Les enums donnent leur valeur, les booleens "true"/"false" (format
    attendu par TMDB), les sequences sont jointes par des virgules.
    """
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple, set, frozenset)):
        return ",".join(str(serialize_value(item)) for item in value)
    return value


def clean_params(params: Mapping[str, Any]) -> dict[str, Any]:
    """Retire les valeurs None et serialise le reste."""
    return {key: serialize_value(value) for key, value in params.items() if value is not None}


def _join_pipe(values: Any) -> str:
    return "|".join(str(serialize_value(value)) for value in values)


def _filters_to_params(filters: Any, table: Mapping[str, str]) -> dict[str, Any]:
    params: dict[str, Any] = {}
    for field in fields(filters):
        value = getattr(filters, field.name)
        if value is None:
            continue
        if field.name in PIPE_JOINED_FIELDS:
            value = _join_pipe(value)
        params[table[field.name]] = serialize_value(value)
    return params


def discover_movie_params(filters: DiscoverMovieFilters) -> dict[str, Any]:
    """
    Construit les parametres de /discover/movie.

    page vaut 1 et include_adult/include_video valent false s'ils ne sont
    pas renseignes.
    """
    params = _filters_to_params(filters, DISCOVER_MOVIE_PARAMS)
    params.setdefault("page", 1)
    params.setdefault("include_adult", "false")
    params.setdefault("include_video", "false")
    return params


def discover_tv_params(filters: DiscoverTvFilters) -> dict[str, Any]:
    """Construit les parametres de /discover/tv (page 1 par defaut)."""
    params = _filters_to_params(filters, DISCOVER_TV_PARAMS)
    params.setdefault("page", 1)
    return params


def search_params(
    filters: SearchFilters,
    *,
    include_region: bool = False,
    include_year: bool = False,
    include_first_air_date_year: bool = False,
) -> dict[str, Any]:
    """
    Construit les parametres d'une recherche textuelle.

    Args:
        filters: Filtres de recherche
        include_region: Emettre region (films)
        include_year: Emettre year et primary_release_year (films)
        include_first_air_date_year: Emettre first_air_date_year, avec year
            en repli (series)
    """
    params: dict[str, Optional[Any]] = {
        "query": filters.query,
        "page": filters.page or 1,
        "include_adult": bool(filters.include_adult),
        "language": filters.language,
    }
    if include_region:
        params["region"] = filters.region
    if include_year:
        params["year"] = filters.year
        params["primary_release_year"] = filters.primary_release_year
    if include_first_air_date_year:
        params["first_air_date_year"] = filters.first_air_date_year or filters.year
    return clean_params(params)
