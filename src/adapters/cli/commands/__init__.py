"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.movie_commands import (
    discover_movies,
    movie,
    now_playing_movies,
    popular_movies,
    recommended_movies,
    search_movies,
    similar_movies,
    top_rated_movies,
    upcoming_movies,
)
from src.adapters.cli.commands.tv_commands import (
    airing_today,
    discover_tv,
    on_the_air,
    popular_tv,
    search_tv,
    top_rated_tv,
    tv,
)
from src.adapters.cli.commands.person_commands import (
    person,
    person_credits,
    popular_people,
    search_people,
)
from src.adapters.cli.commands.search_commands import (
    search,
    trending,
)

__all__ = [
    # films
    "search_movies",
    "discover_movies",
    "movie",
    "popular_movies",
    "top_rated_movies",
    "upcoming_movies",
    "now_playing_movies",
    "similar_movies",
    "recommended_movies",
    # series
    "search_tv",
    "discover_tv",
    "tv",
    "popular_tv",
    "top_rated_tv",
    "airing_today",
    "on_the_air",
    # personnes
    "search_people",
    "person",
    "person_credits",
    "popular_people",
    # transverse
    "search",
    "trending",
]
