"""
Container d'injection de dependances via dependency-injector.

Assemble, dans l'ordre : configuration -> transport HTTP -> client TMDB ->
repositories -> service de recherche -> cas d'utilisation. Chaque
dependance est passee explicitement par argument nomme ; il n'existe aucun
registre indexe par chaine de caracteres.
"""

from dependency_injector import containers, providers

from .adapters.api.tmdb_client import TMDBClient
from .adapters.http.transport import HttpxTransport
from .config import load_settings
from .infrastructure.repositories import (
    TMDBMovieRepository,
    TMDBPersonRepository,
    TMDBSearchRepository,
    TMDBTvShowRepository,
)
from .services.search_service import SearchService
from .services.use_cases import (
    GeneralSearchUseCase,
    MovieSearchUseCase,
    PersonSearchUseCase,
    TvShowSearchUseCase,
)


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Tous les providers sont des Singletons : chaque objet est construit une
    seule fois par processus puis reutilise. Instancier le container ne fait
    aucune I/O ; la configuration est chargee (et la cle API verifiee) au
    premier acces.

    Utilisation :
        container = Container()
        movies = container.movie_use_case()
        page = await movies.search_movies("Inception")
        await container.http_transport().close()

    Lève :
        ConfigurationError : a la premiere resolution si TMDB_API_KEY manque
    """

    # Configuration - singleton charge une seule fois, valide la cle API
    config = providers.Singleton(load_settings)

    # Transport HTTP - un seul httpx.AsyncClient partage
    http_transport = providers.Singleton(
        HttpxTransport,
        base_url=config.provided.base_url,
        timeout=config.provided.timeout,
    )

    # Client TMDB - ajoute api_key et language a chaque appel
    tmdb_client = providers.Singleton(
        TMDBClient,
        transport=http_transport,
        api_key=config.provided.api_key,
        default_language=config.provided.default_language,
    )

    # Repositories
    movie_repository = providers.Singleton(TMDBMovieRepository, client=tmdb_client)
    tv_show_repository = providers.Singleton(TMDBTvShowRepository, client=tmdb_client)
    person_repository = providers.Singleton(TMDBPersonRepository, client=tmdb_client)
    search_repository = providers.Singleton(TMDBSearchRepository, client=tmdb_client)

    # Services
    search_service = providers.Singleton(
        SearchService,
        movie_repository=movie_repository,
        tv_show_repository=tv_show_repository,
        person_repository=person_repository,
        search_repository=search_repository,
    )

    # Cas d'utilisation
    movie_use_case = providers.Singleton(MovieSearchUseCase, search_service=search_service)
    tv_show_use_case = providers.Singleton(TvShowSearchUseCase, search_service=search_service)
    person_use_case = providers.Singleton(PersonSearchUseCase, search_service=search_service)
    general_use_case = providers.Singleton(GeneralSearchUseCase, search_service=search_service)
