"""
Objets valeur de filtrage pour les recherches et la decouverte TMDB.

Tous les champs sont optionnels : un champ laisse a None n'est jamais
envoye a l'API. Les objets sont immutables et consommes une seule fois
par appel de repository.
"""

from dataclasses import dataclass, replace
from typing import Optional

from src.core.value_objects.enums import (
    ReleaseType,
    SortBy,
    TvSortBy,
    TvStatus,
    TvType,
    WatchMonetizationType,
)


@dataclass(frozen=True)
class SearchFilters:
    """
    Filtres d'une recherche textuelle (/search/*).

    Attributs:
        query: Texte recherche
        page: Numero de page (1 par defaut cote repository)
        include_adult: Inclure le contenu adulte (False par defaut)
        region: Code region ISO 3166-1 (films uniquement)
        year: Annee (films: year, series: first_air_date_year)
        primary_release_year: Annee de sortie principale (films)
        language: Code langue, surcharge la langue par defaut du client
        first_air_date_year: Annee de premiere diffusion (series)
    """

    query: Optional[str] = None
    page: Optional[int] = None
    include_adult: Optional[bool] = None
    region: Optional[str] = None
    year: Optional[int] = None
    primary_release_year: Optional[int] = None
    language: Optional[str] = None
    first_air_date_year: Optional[int] = None

    def with_defaults(self, page: int = 1, include_adult: bool = False) -> "SearchFilters":
        """Retourne une copie ou page et include_adult sont renseignes."""
        return replace(
            self,
            page=self.page if self.page is not None else page,
            include_adult=self.include_adult if self.include_adult is not None else include_adult,
        )


@dataclass(frozen=True)
class DiscoverMovieFilters:
    """Filtres de /discover/movie (aucune requete texte)."""

    page: Optional[int] = None
    language: Optional[str] = None
    region: Optional[str] = None
    sort_by: Optional[SortBy] = None
    include_adult: Optional[bool] = None
    include_video: Optional[bool] = None
    primary_release_year: Optional[int] = None
    primary_release_date_gte: Optional[str] = None
    primary_release_date_lte: Optional[str] = None
    release_date_gte: Optional[str] = None
    release_date_lte: Optional[str] = None
    with_release_type: Optional[tuple[ReleaseType, ...]] = None
    year: Optional[int] = None
    vote_count_gte: Optional[int] = None
    vote_count_lte: Optional[int] = None
    vote_average_gte: Optional[float] = None
    vote_average_lte: Optional[float] = None
    with_cast: Optional[str] = None
    with_crew: Optional[str] = None
    with_people: Optional[str] = None
    with_companies: Optional[str] = None
    without_companies: Optional[str] = None
    with_genres: Optional[str] = None
    without_genres: Optional[str] = None
    with_keywords: Optional[str] = None
    without_keywords: Optional[str] = None
    with_runtime_gte: Optional[int] = None
    with_runtime_lte: Optional[int] = None
    with_original_language: Optional[str] = None
    with_watch_providers: Optional[str] = None
    watch_region: Optional[str] = None
    with_watch_monetization_types: Optional[tuple[WatchMonetizationType, ...]] = None


@dataclass(frozen=True)
class DiscoverTvFilters:
    """Filtres de /discover/tv (aucune requete texte)."""

    page: Optional[int] = None
    language: Optional[str] = None
    sort_by: Optional[TvSortBy] = None
    air_date_gte: Optional[str] = None
    air_date_lte: Optional[str] = None
    first_air_date_gte: Optional[str] = None
    first_air_date_lte: Optional[str] = None
    first_air_date_year: Optional[int] = None
    timezone: Optional[str] = None
    vote_average_gte: Optional[float] = None
    vote_count_gte: Optional[int] = None
    with_genres: Optional[str] = None
    without_genres: Optional[str] = None
    with_networks: Optional[str] = None
    with_runtime_gte: Optional[int] = None
    with_runtime_lte: Optional[int] = None
    include_null_first_air_dates: Optional[bool] = None
    with_original_language: Optional[str] = None
    with_keywords: Optional[str] = None
    without_keywords: Optional[str] = None
    screened_theatrically: Optional[bool] = None
    with_companies: Optional[str] = None
    without_companies: Optional[str] = None
    with_watch_providers: Optional[str] = None
    watch_region: Optional[str] = None
    with_watch_monetization_types: Optional[tuple[WatchMonetizationType, ...]] = None
    with_status: Optional[tuple[TvStatus, ...]] = None
    with_type: Optional[tuple[TvType, ...]] = None
