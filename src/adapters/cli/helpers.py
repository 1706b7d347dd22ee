"""
Utilitaires partages pour les commandes CLI de CineScope.

Ce module fournit :
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- console : instance Rich Console partagee (reexportee depuis rendering)
"""

from contextlib import contextmanager
from functools import wraps

import typer
from loguru import logger as loguru_logger
from rich.markup import escape

from src.container import Container
from src.core.exceptions import CineScopeError

# Re-export console depuis rendering pour que tous les modules puissent l'importer ici
from src.adapters.cli.rendering import console


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("src")
    try:
        yield
    finally:
        loguru_logger.enable("src")


def with_container():
    """
    Decorateur qui injecte un container initialise en premier argument.

    La configuration est resolue avant l'appel (la cle API est verifiee),
    et le transport HTTP est ferme a la fin de la commande. Toute erreur
    CineScopeError est affichee en rouge et termine la commande avec le
    code de sortie 1.

    Usage:
        @with_container()
        async def my_command(container, ...):
            movies = container.movie_use_case()
    """
    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            container = Container()
            try:
                container.config()
                try:
                    return await func(container, *args, **kwargs)
                finally:
                    await container.http_transport().close()
            except CineScopeError as e:
                loguru_logger.debug("Commande en echec", error=type(e).__name__)
                console.print(f"[red]Erreur :[/red] {escape(str(e))}")
                raise typer.Exit(code=1) from e
        return wrapper
    return decorator
