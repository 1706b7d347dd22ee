"""
Affichage Rich des entites TMDB.

Chaque fonction recoit une entite (ou une page de resultats) et l'affiche
sur la console partagee. Aucun appel reseau ici.
"""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from src.core.entities.media import Movie, MovieDetails, TvShow, TvShowDetails
from src.core.entities.person import Person, PersonMovieCredits, PersonTvCredits
from src.core.entities.search_result import (
    MovieResult,
    MultiSearchResult,
    SearchResult,
    TvShowResult,
)
from src.utils.formatters import (
    format_date,
    format_episode_run_time,
    format_money,
    format_runtime,
    format_vote_average,
    format_year,
    gender_label,
    genre_names,
    genre_names_from_ids,
    person_age,
    poster_url,
    profile_url,
    truncate,
)

console = Console()


def _page_caption(page: SearchResult) -> str:
    return f"Page {page.page}/{page.total_pages} - {page.total_results} resultat(s)"


def render_movie_page(page: SearchResult[Movie], title: str = "Films") -> None:
    """Affiche une page de films sous forme de tableau."""
    table = Table(title=title, caption=_page_caption(page))
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Titre", style="bold")
    table.add_column("Annee", justify="center")
    table.add_column("Note", justify="right", style="green")
    table.add_column("Genres", style="cyan")

    for movie in page.results:
        table.add_row(
            str(movie.id),
            movie.title,
            format_year(movie.release_date),
            format_vote_average(movie.vote_average),
            genre_names_from_ids(movie.genre_ids),
        )
    console.print(table)


def render_tv_page(page: SearchResult[TvShow], title: str = "Series") -> None:
    """Affiche une page de series sous forme de tableau."""
    table = Table(title=title, caption=_page_caption(page))
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Nom", style="bold")
    table.add_column("Annee", justify="center")
    table.add_column("Note", justify="right", style="green")
    table.add_column("Genres", style="cyan")

    for show in page.results:
        table.add_row(
            str(show.id),
            show.name,
            format_year(show.first_air_date),
            format_vote_average(show.vote_average),
            genre_names_from_ids(show.genre_ids, tv=True),
        )
    console.print(table)


def render_person_page(page: SearchResult[Person], title: str = "Personnes") -> None:
    table = Table(title=title, caption=_page_caption(page))
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Nom", style="bold")
    table.add_column("Departement", style="cyan")
    table.add_column("Popularite", justify="right")

    for person in page.results:
        table.add_row(
            str(person.id),
            person.name,
            person.known_for_department,
            f"{person.popularity:.1f}",
        )
    console.print(table)


def _describe_item(item: MultiSearchResult) -> tuple[str, str, str]:
    """Retourne (id, libelle, annee) d'un element de recherche multiple."""
    if isinstance(item, MovieResult):
        return str(item.movie.id), item.movie.title, format_year(item.movie.release_date)
    if isinstance(item, TvShowResult):
        return str(item.tv_show.id), item.tv_show.name, format_year(item.tv_show.first_air_date)
    known = ", ".join(_describe_item(k)[1] for k in item.known_for)
    return str(item.person.id), item.person.name, truncate(known, 40) if known else ""


def render_multi_page(page: SearchResult[MultiSearchResult], title: str = "Resultats") -> None:
    """Affiche une page heterogene (recherche multiple ou tendances)."""
    table = Table(title=title, caption=_page_caption(page))
    table.add_column("Type", style="magenta")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Titre / Nom", style="bold")
    table.add_column("Annee / Connu pour")

    for item in page.results:
        item_id, label, extra = _describe_item(item)
        table.add_row(item.media_type, item_id, label, extra)
    console.print(table)


def render_movie_details(movie: MovieDetails, image_base_url: str) -> None:
    """Affiche la fiche complete d'un film."""
    lines = [
        f"[bold]Titre original :[/bold] {movie.original_title}",
        f"[bold]Sortie :[/bold] {format_date(movie.release_date)}",
        f"[bold]Duree :[/bold] {format_runtime(movie.runtime)}",
        f"[bold]Genres :[/bold] {genre_names(movie.genres)}",
        f"[bold]Note :[/bold] {format_vote_average(movie.vote_average)} ({movie.vote_count} votes)",
        f"[bold]Budget :[/bold] {format_money(movie.budget)}",
        f"[bold]Recettes :[/bold] {format_money(movie.revenue)}",
    ]
    if movie.imdb_id:
        lines.append(f"[bold]IMDb :[/bold] {movie.imdb_id}")
    if movie.belongs_to_collection:
        lines.append(f"[bold]Collection :[/bold] {movie.belongs_to_collection.name}")
    poster = poster_url(image_base_url, movie.poster_path)
    if poster:
        lines.append(f"[bold]Affiche :[/bold] {poster}")
    if movie.tagline:
        lines.append(f"\n[italic]{movie.tagline}[/italic]")
    if movie.overview:
        lines.append(f"\n{movie.overview}")

    title = f"{movie.title} ({format_year(movie.release_date)})"
    console.print(Panel("\n".join(lines), title=title, border_style="cyan"))


def render_tv_details(show: TvShowDetails, image_base_url: str) -> None:
    """Affiche la fiche complete d'une serie."""
    lines = [
        f"[bold]Nom original :[/bold] {show.original_name}",
        f"[bold]Premiere diffusion :[/bold] {format_date(show.first_air_date)}",
        f"[bold]Derniere diffusion :[/bold] {format_date(show.last_air_date)}",
        f"[bold]Saisons / Episodes :[/bold] {show.number_of_seasons} / {show.number_of_episodes}",
        f"[bold]Duree des episodes :[/bold] {format_episode_run_time(show.episode_run_time)}",
        f"[bold]Genres :[/bold] {genre_names(show.genres)}",
        f"[bold]Note :[/bold] {format_vote_average(show.vote_average)} ({show.vote_count} votes)",
        f"[bold]Statut :[/bold] {show.status}",
    ]
    if show.networks:
        lines.append(f"[bold]Chaines :[/bold] {', '.join(n.name for n in show.networks)}")
    if show.created_by:
        lines.append(f"[bold]Createurs :[/bold] {', '.join(c.name for c in show.created_by)}")
    poster = poster_url(image_base_url, show.poster_path)
    if poster:
        lines.append(f"[bold]Affiche :[/bold] {poster}")
    if show.overview:
        lines.append(f"\n{show.overview}")

    title = f"{show.name} ({format_year(show.first_air_date)})"
    console.print(Panel("\n".join(lines), title=title, border_style="cyan"))


def render_person(person: Person, image_base_url: str) -> None:
    lines = [
        f"[bold]Departement :[/bold] {person.known_for_department}",
        f"[bold]Genre :[/bold] {gender_label(person.gender)}",
        f"[bold]Naissance :[/bold] {format_date(person.birthday)}",
    ]
    if person.deathday:
        lines.append(f"[bold]Deces :[/bold] {format_date(person.deathday)}")
    age = person_age(person)
    if age is not None:
        lines.append(f"[bold]Age :[/bold] {age}")
    if person.place_of_birth:
        lines.append(f"[bold]Lieu de naissance :[/bold] {person.place_of_birth}")
    photo = profile_url(image_base_url, person.profile_path)
    if photo:
        lines.append(f"[bold]Photo :[/bold] {photo}")
    if person.biography:
        lines.append(f"\n{person.biography}")

    console.print(Panel("\n".join(lines), title=person.name, border_style="cyan"))


def render_person_credits(
    movie_credits: PersonMovieCredits,
    tv_credits: Optional[PersonTvCredits] = None,
    limit: int = 20,
) -> None:
    """Affiche la filmographie (et les credits TV) d'une personne."""
    table = Table(title="Credits films")
    table.add_column("Annee", justify="center")
    table.add_column("Titre", style="bold")
    table.add_column("Role", style="cyan")

    cast = sorted(
        movie_credits.cast,
        key=lambda c: c.release_date.isoformat() if c.release_date else "",
        reverse=True,
    )
    for credit in cast[:limit]:
        table.add_row(format_year(credit.release_date), credit.title, credit.character or "")
    for credit in movie_credits.crew[:limit]:
        table.add_row(format_year(credit.release_date), credit.title, credit.job or "")
    console.print(table)

    if tv_credits is None:
        return

    tv_table = Table(title="Credits TV")
    tv_table.add_column("Annee", justify="center")
    tv_table.add_column("Serie", style="bold")
    tv_table.add_column("Role", style="cyan")
    tv_table.add_column("Episodes", justify="right")
    for credit in tv_credits.cast[:limit]:
        tv_table.add_row(
            format_year(credit.first_air_date),
            credit.name,
            credit.character or "",
            str(credit.episode_count),
        )
    console.print(tv_table)
