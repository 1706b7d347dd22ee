"""
Point d'entrée CLI de CineScope.

Configure le logging et fournit les commandes CLI de consultation TMDB.
"""

from typing import Annotated

import typer
from loguru import logger
from rich.markup import escape

from .adapters.cli.commands import (
    airing_today,
    discover_movies,
    discover_tv,
    movie,
    now_playing_movies,
    on_the_air,
    person,
    person_credits,
    popular_movies,
    popular_people,
    popular_tv,
    recommended_movies,
    search,
    search_movies,
    search_people,
    search_tv,
    similar_movies,
    top_rated_movies,
    top_rated_tv,
    trending,
    tv,
    upcoming_movies,
)
from .adapters.cli.rendering import console
from .config import Settings, read_settings
from .core.exceptions import ConfigurationError
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="cinescope",
    help="Consultation des films, series et personnes via l'API TMDB",
)

# Etat global pour les options de verbosite
state = {"verbose": 0, "quiet": False}


def _settings_or_exit() -> Settings:
    """Lit la configuration, ou affiche l'erreur et sort avec le code 1."""
    try:
        return read_settings()
    except ConfigurationError as e:
        console.print(f"[red]Erreur :[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e


def _setup_logging(log_level: str) -> None:
    configure_logging(_settings_or_exit(), log_level=log_level)


@app.callback()
def main_callback(
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
) -> None:
    """CineScope - Films, series et personnes depuis TMDB."""
    if quiet:
        state["quiet"] = True
        _setup_logging("ERROR")
    elif verbose:
        state["verbose"] = verbose
        _setup_logging("DEBUG")


# Commandes films
app.command(name="search-movies")(search_movies)
app.command(name="discover-movies")(discover_movies)
app.command()(movie)
app.command(name="popular-movies")(popular_movies)
app.command(name="top-rated-movies")(top_rated_movies)
app.command(name="upcoming-movies")(upcoming_movies)
app.command(name="now-playing-movies")(now_playing_movies)
app.command(name="similar-movies")(similar_movies)
app.command(name="recommended-movies")(recommended_movies)

# Commandes series
app.command(name="search-tv")(search_tv)
app.command(name="discover-tv")(discover_tv)
app.command()(tv)
app.command(name="popular-tv")(popular_tv)
app.command(name="top-rated-tv")(top_rated_tv)
app.command(name="airing-today")(airing_today)
app.command(name="on-the-air")(on_the_air)

# Commandes personnes
app.command(name="search-people")(search_people)
app.command()(person)
app.command(name="person-credits")(person_credits)
app.command(name="popular-people")(popular_people)

# Recherche multiple et tendances
app.command()(search)
app.command()(trending)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    settings = _settings_or_exit()
    logger.info("Configuration CineScope")
    typer.echo(f"API TMDB : {settings.base_url}")
    typer.echo(f"Images : {settings.image_base_url}")
    typer.echo(f"Cle API : {'configuree' if settings.api_key_configured else 'absente'}")
    typer.echo(f"Langue : {settings.default_language}")
    typer.echo(f"Region : {settings.default_region}")
    typer.echo(f"Timeout : {settings.timeout}s")
    typer.echo(f"Niveau de log : {settings.log_level}")
    typer.echo(f"Fichier de log : {settings.log_file}")
    if not settings.api_key_configured:
        console.print("[red]Erreur :[/red] TMDB_API_KEY is required")
        raise typer.Exit(code=1)


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"CineScope v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    try:
        settings = read_settings()
    except ConfigurationError as e:
        console.print(f"[red]Erreur :[/red] {escape(str(e))}")
        raise SystemExit(1) from e
    configure_logging(settings)

    logger.info("Démarrage de CineScope", version=__version__)

    # Lance la CLI
    app()


if __name__ == "__main__":
    main()
