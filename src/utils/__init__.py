"""
Utilitaires et constantes pour CineScope.

Ce module contient les constantes et fonctions de formatage partagees.
"""

from src.utils.constants import (
    BACKDROP_SIZE,
    POSTER_SIZE,
    PROFILE_SIZE,
    TMDB_GENRE_MAPPING,
    TMDB_TV_GENRE_MAPPING,
)

__all__ = [
    "POSTER_SIZE",
    "BACKDROP_SIZE",
    "PROFILE_SIZE",
    "TMDB_GENRE_MAPPING",
    "TMDB_TV_GENRE_MAPPING",
]
