"""
Commandes CLI personnes : recherche, fiche, credits et populaires.
"""

import asyncio
from typing import Annotated

import typer

from src.adapters.cli.helpers import suppress_loguru, with_container
from src.adapters.cli.rendering import (
    render_person,
    render_person_credits,
    render_person_page,
)

PageOption = Annotated[int, typer.Option("--page", "-p", help="Numero de page")]
PersonIdArgument = Annotated[int, typer.Argument(help="Identifiant TMDB de la personne")]


def search_people(
    query: Annotated[str, typer.Argument(help="Nom recherche")],
    page: PageOption = 1,
) -> None:
    """Recherche des personnes par nom."""
    asyncio.run(_search_people_async(query, page))


@with_container()
async def _search_people_async(container, query: str, page: int) -> None:
    result = await container.person_use_case().search_people(query, page=page)
    render_person_page(result, title=f"Personnes : {query}")


def person(person_id: PersonIdArgument) -> None:
    """Affiche la fiche d'une personne."""
    asyncio.run(_person_async(person_id))


@with_container()
async def _person_async(container, person_id: int) -> None:
    details = await container.person_use_case().get_person_details(person_id)
    render_person(details, container.config().image_base_url)


def person_credits(
    person_id: PersonIdArgument,
    limit: Annotated[
        int, typer.Option("--limit", "-l", help="Nombre maximum de lignes par tableau")
    ] = 20,
) -> None:
    """Affiche la filmographie et les credits TV d'une personne."""
    asyncio.run(_person_credits_async(person_id, limit))


@with_container()
async def _person_credits_async(container, person_id: int, limit: int) -> None:
    use_case = container.person_use_case()
    with suppress_loguru():
        # Les deux appels se terminent avant la fermeture du transport
        results = await asyncio.gather(
            use_case.get_person_movie_credits(person_id),
            use_case.get_person_tv_credits(person_id),
            return_exceptions=True,
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        movie_credits, tv_credits = results
        render_person_credits(movie_credits, tv_credits, limit=limit)


def popular_people(page: PageOption = 1) -> None:
    """Liste les personnes populaires."""
    asyncio.run(_popular_people_async(page))


@with_container()
async def _popular_people_async(container, page: int) -> None:
    result = await container.person_use_case().get_popular_people(page)
    render_person_page(result, title="Personnes populaires")
