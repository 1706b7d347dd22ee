"""
Commandes CLI films : recherche, decouverte, fiche et listes.
"""

import asyncio
from typing import Annotated, Optional

import typer

from src.adapters.cli.helpers import with_container
from src.adapters.cli.rendering import render_movie_details, render_movie_page
from src.core.value_objects.enums import SortBy
from src.core.value_objects.filters import DiscoverMovieFilters, SearchFilters

PageOption = Annotated[int, typer.Option("--page", "-p", help="Numero de page")]

# Commande -> (methode du cas d'utilisation, titre du tableau)
MOVIE_LISTS = {
    "popular": ("get_popular_movies", "Films populaires"),
    "top_rated": ("get_top_rated_movies", "Films les mieux notes"),
    "upcoming": ("get_upcoming_movies", "Films a venir"),
    "now_playing": ("get_now_playing_movies", "Films a l'affiche"),
}


def search_movies(
    query: Annotated[str, typer.Argument(help="Titre recherche")],
    page: PageOption = 1,
    year: Annotated[
        Optional[int], typer.Option("--year", "-y", help="Annee de sortie")
    ] = None,
    language: Annotated[
        Optional[str], typer.Option("--language", "-l", help="Langue (ex: fr-FR)")
    ] = None,
    adult: Annotated[
        bool, typer.Option("--adult", help="Inclure le contenu adulte")
    ] = False,
) -> None:
    """Recherche des films par titre."""
    asyncio.run(_search_movies_async(query, page, year, language, adult))


@with_container()
async def _search_movies_async(
    container, query: str, page: int, year: Optional[int], language: Optional[str], adult: bool
) -> None:
    """Implementation async de la commande search-movies."""
    use_case = container.movie_use_case()
    result = await use_case.search_movies(
        query,
        page=page,
        include_adult=adult,
        options=SearchFilters(year=year, language=language),
    )
    render_movie_page(result, title=f"Films : {query}")


def discover_movies(
    page: PageOption = 1,
    sort_by: Annotated[
        Optional[SortBy], typer.Option("--sort-by", "-s", help="Critere de tri")
    ] = None,
    year: Annotated[
        Optional[int], typer.Option("--year", "-y", help="Annee de sortie principale")
    ] = None,
    genres: Annotated[
        Optional[str], typer.Option("--genres", "-g", help="Ids de genres (ex: 28,878 ou 28|878)")
    ] = None,
    min_rating: Annotated[
        Optional[float], typer.Option("--min-rating", help="Note minimale")
    ] = None,
    min_votes: Annotated[
        Optional[int], typer.Option("--min-votes", help="Nombre minimal de votes")
    ] = None,
    language: Annotated[
        Optional[str], typer.Option("--original-language", help="Langue originale (ex: fr)")
    ] = None,
) -> None:
    """Decouvre des films selon des criteres."""
    filters = DiscoverMovieFilters(
        page=page,
        sort_by=sort_by,
        primary_release_year=year,
        with_genres=genres,
        vote_average_gte=min_rating,
        vote_count_gte=min_votes,
        with_original_language=language,
    )
    asyncio.run(_discover_movies_async(filters))


@with_container()
async def _discover_movies_async(container, filters: DiscoverMovieFilters) -> None:
    result = await container.movie_use_case().discover_movies(filters)
    render_movie_page(result, title="Decouverte de films")


def movie(
    movie_id: Annotated[int, typer.Argument(help="Identifiant TMDB du film")],
) -> None:
    """Affiche la fiche complete d'un film."""
    asyncio.run(_movie_async(movie_id))


@with_container()
async def _movie_async(container, movie_id: int) -> None:
    details = await container.movie_use_case().get_movie_details(movie_id)
    render_movie_details(details, container.config().image_base_url)


@with_container()
async def _movie_list_async(container, kind: str, page: int) -> None:
    """Implementation commune des listes de films (populaires, a venir...)."""
    method, title = MOVIE_LISTS[kind]
    result = await getattr(container.movie_use_case(), method)(page)
    render_movie_page(result, title=title)


def popular_movies(page: PageOption = 1) -> None:
    """Liste les films populaires."""
    asyncio.run(_movie_list_async("popular", page))


def top_rated_movies(page: PageOption = 1) -> None:
    """Liste les films les mieux notes."""
    asyncio.run(_movie_list_async("top_rated", page))


def upcoming_movies(page: PageOption = 1) -> None:
    """Liste les films a venir."""
    asyncio.run(_movie_list_async("upcoming", page))


def now_playing_movies(page: PageOption = 1) -> None:
    """Liste les films actuellement a l'affiche."""
    asyncio.run(_movie_list_async("now_playing", page))


def similar_movies(
    movie_id: Annotated[int, typer.Argument(help="Identifiant TMDB du film")],
    page: PageOption = 1,
) -> None:
    """Liste les films similaires a un film."""
    asyncio.run(_related_movies_async(movie_id, page, recommended=False))


def recommended_movies(
    movie_id: Annotated[int, typer.Argument(help="Identifiant TMDB du film")],
    page: PageOption = 1,
) -> None:
    """Liste les films recommandes a partir d'un film."""
    asyncio.run(_related_movies_async(movie_id, page, recommended=True))


@with_container()
async def _related_movies_async(container, movie_id: int, page: int, recommended: bool) -> None:
    use_case = container.movie_use_case()
    if recommended:
        result = await use_case.get_recommended_movies(movie_id, page)
        render_movie_page(result, title=f"Recommandations pour le film {movie_id}")
    else:
        result = await use_case.get_similar_movies(movie_id, page)
        render_movie_page(result, title=f"Films similaires au film {movie_id}")
