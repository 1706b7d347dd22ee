"""
Objets valeur immutables representant les parametres des requetes TMDB.

Exports :
- SearchFilters : Filtres d'une recherche textuelle
- DiscoverMovieFilters : Filtres de decouverte des films
- DiscoverTvFilters : Filtres de decouverte des series
- SortBy, TvSortBy : Cles de tri
- ReleaseType, WatchMonetizationType, TvStatus, TvType : Valeurs de filtres
- TimeWindow, MediaType : Parametres des tendances
"""

from src.core.value_objects.enums import (
    MediaType,
    ReleaseType,
    SortBy,
    TimeWindow,
    TvSortBy,
    TvStatus,
    TvType,
    WatchMonetizationType,
)
from src.core.value_objects.filters import (
    DiscoverMovieFilters,
    DiscoverTvFilters,
    SearchFilters,
)

__all__ = [
    "SearchFilters",
    "DiscoverMovieFilters",
    "DiscoverTvFilters",
    "SortBy",
    "TvSortBy",
    "ReleaseType",
    "WatchMonetizationType",
    "TvStatus",
    "TvType",
    "TimeWindow",
    "MediaType",
]
