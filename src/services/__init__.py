"""
Application services layer (use cases).

Services expose the TMDB operations to the presentation layer. They
depend on repository ports from core/, never on concrete implementations.

This layer contains:
- SearchService: pass-through facade over the four repositories
- MovieSearchUseCase, TvShowSearchUseCase, PersonSearchUseCase,
  GeneralSearchUseCase: default filling and input validation
"""

from src.services.search_service import SearchService
from src.services.use_cases import (
    GeneralSearchUseCase,
    MovieSearchUseCase,
    PersonSearchUseCase,
    TvShowSearchUseCase,
)

__all__ = [
    "SearchService",
    "MovieSearchUseCase",
    "TvShowSearchUseCase",
    "PersonSearchUseCase",
    "GeneralSearchUseCase",
]
