"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Port transport : Contrat du client HTTP bas niveau
- IHttpTransport : Requête unique, échecs normalisés en TransportError
- HttpResponse : Réponse décodée

Port client API : Contrat du client TMDB
- ITMDBClient : Authentification, langue par défaut, erreurs typées

Ports repository : Contrats d'accès aux ressources TMDB
- IMovieRepository : Films
- ITvShowRepository : Séries TV
- IPersonRepository : Personnes et crédits
- ISearchRepository : Recherche multi-types et tendances
"""

from src.core.ports.api_clients import ITMDBClient
from src.core.ports.http import HttpResponse, IHttpTransport
from src.core.ports.repositories import (
    IMovieRepository,
    IPersonRepository,
    ISearchRepository,
    ITvShowRepository,
)

__all__ = [
    # Transport
    "IHttpTransport",
    "HttpResponse",
    # Client API
    "ITMDBClient",
    # Repositories
    "IMovieRepository",
    "ITvShowRepository",
    "IPersonRepository",
    "ISearchRepository",
]
