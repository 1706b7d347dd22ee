"""
Commandes CLI transverses : recherche multiple et tendances.
"""

import asyncio
from typing import Annotated

import typer

from src.adapters.cli.helpers import with_container
from src.adapters.cli.rendering import render_multi_page
from src.core.value_objects.enums import MediaType, TimeWindow

PageOption = Annotated[int, typer.Option("--page", "-p", help="Numero de page")]


def search(
    query: Annotated[str, typer.Argument(help="Texte recherche")],
    page: PageOption = 1,
    adult: Annotated[
        bool, typer.Option("--adult", help="Inclure le contenu adulte")
    ] = False,
) -> None:
    """Recherche simultanee de films, series et personnes."""
    asyncio.run(_search_async(query, page, adult))


@with_container()
async def _search_async(container, query: str, page: int, adult: bool) -> None:
    result = await container.general_use_case().multi_search(
        query, page=page, include_adult=adult
    )
    render_multi_page(result, title=f"Recherche : {query}")


def trending(
    media_type: Annotated[
        MediaType, typer.Option("--type", "-t", help="Type de media")
    ] = MediaType.ALL,
    time_window: Annotated[
        TimeWindow, typer.Option("--window", "-w", help="Fenetre temporelle")
    ] = TimeWindow.WEEK,
    page: PageOption = 1,
) -> None:
    """Affiche les tendances du jour ou de la semaine."""
    asyncio.run(_trending_async(media_type, time_window, page))


@with_container()
async def _trending_async(
    container, media_type: MediaType, time_window: TimeWindow, page: int
) -> None:
    result = await container.general_use_case().get_trending(media_type, time_window, page)
    render_multi_page(
        result, title=f"Tendances ({media_type.value}, {time_window.value})"
    )
