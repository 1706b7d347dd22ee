"""
Commandes CLI series TV : recherche, decouverte, fiche et listes.
"""

import asyncio
from typing import Annotated, Optional

import typer

from src.adapters.cli.helpers import with_container
from src.adapters.cli.rendering import render_tv_details, render_tv_page
from src.core.value_objects.enums import TvSortBy
from src.core.value_objects.filters import DiscoverTvFilters, SearchFilters

PageOption = Annotated[int, typer.Option("--page", "-p", help="Numero de page")]

TV_LISTS = {
    "popular": ("get_popular_tv_shows", "Series populaires"),
    "top_rated": ("get_top_rated_tv_shows", "Series les mieux notees"),
    "airing_today": ("get_airing_today_tv_shows", "Series diffusees aujourd'hui"),
    "on_the_air": ("get_on_the_air_tv_shows", "Series en cours de diffusion"),
}


def search_tv(
    query: Annotated[str, typer.Argument(help="Nom recherche")],
    page: PageOption = 1,
    year: Annotated[
        Optional[int], typer.Option("--year", "-y", help="Annee de premiere diffusion")
    ] = None,
    adult: Annotated[
        bool, typer.Option("--adult", help="Inclure le contenu adulte")
    ] = False,
) -> None:
    """Recherche des series par nom."""
    asyncio.run(_search_tv_async(query, page, year, adult))


@with_container()
async def _search_tv_async(container, query: str, page: int, year: Optional[int], adult: bool) -> None:
    result = await container.tv_show_use_case().search_tv_shows(
        query,
        page=page,
        include_adult=adult,
        options=SearchFilters(first_air_date_year=year),
    )
    render_tv_page(result, title=f"Series : {query}")


def discover_tv(
    page: PageOption = 1,
    sort_by: Annotated[
        Optional[TvSortBy], typer.Option("--sort-by", "-s", help="Critere de tri")
    ] = None,
    year: Annotated[
        Optional[int], typer.Option("--year", "-y", help="Annee de premiere diffusion")
    ] = None,
    genres: Annotated[
        Optional[str], typer.Option("--genres", "-g", help="Ids de genres (ex: 18,10765)")
    ] = None,
    networks: Annotated[
        Optional[str], typer.Option("--networks", "-n", help="Ids de chaines (ex: 213)")
    ] = None,
    min_rating: Annotated[
        Optional[float], typer.Option("--min-rating", help="Note minimale")
    ] = None,
) -> None:
    """Decouvre des series selon des criteres."""
    filters = DiscoverTvFilters(
        page=page,
        sort_by=sort_by,
        first_air_date_year=year,
        with_genres=genres,
        with_networks=networks,
        vote_average_gte=min_rating,
    )
    asyncio.run(_discover_tv_async(filters))


@with_container()
async def _discover_tv_async(container, filters: DiscoverTvFilters) -> None:
    result = await container.tv_show_use_case().discover_tv_shows(filters)
    render_tv_page(result, title="Decouverte de series")


def tv(
    tv_id: Annotated[int, typer.Argument(help="Identifiant TMDB de la serie")],
) -> None:
    """Affiche la fiche complete d'une serie."""
    asyncio.run(_tv_async(tv_id))


@with_container()
async def _tv_async(container, tv_id: int) -> None:
    details = await container.tv_show_use_case().get_tv_show_details(tv_id)
    render_tv_details(details, container.config().image_base_url)


@with_container()
async def _tv_list_async(container, kind: str, page: int) -> None:
    method, title = TV_LISTS[kind]
    result = await getattr(container.tv_show_use_case(), method)(page)
    render_tv_page(result, title=title)


def popular_tv(page: PageOption = 1) -> None:
    """Liste les series populaires."""
    asyncio.run(_tv_list_async("popular", page))


def top_rated_tv(page: PageOption = 1) -> None:
    """Liste les series les mieux notees."""
    asyncio.run(_tv_list_async("top_rated", page))


def airing_today(page: PageOption = 1) -> None:
    """Liste les series diffusees aujourd'hui."""
    asyncio.run(_tv_list_async("airing_today", page))


def on_the_air(page: PageOption = 1) -> None:
    """Liste les series en cours de diffusion (7 prochains jours)."""
    asyncio.run(_tv_list_async("on_the_air", page))
