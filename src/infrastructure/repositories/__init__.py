"""
Implementations TMDB des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans src/core/ports/repositories.py, adossees a l'API TMDB.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit le client TMDB via injection de dependances
- Convertit les reponses JSON en entites via src/adapters/api/mappers.py
"""

from src.infrastructure.repositories.movie_repository import TMDBMovieRepository
from src.infrastructure.repositories.person_repository import TMDBPersonRepository
from src.infrastructure.repositories.search_repository import TMDBSearchRepository
from src.infrastructure.repositories.tv_show_repository import TMDBTvShowRepository

__all__ = [
    "TMDBMovieRepository",
    "TMDBTvShowRepository",
    "TMDBPersonRepository",
    "TMDBSearchRepository",
]
