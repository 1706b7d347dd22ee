"""
Client de l'API TMDB et conversion de ses reponses.

Ce module fournit :
- TMDBClient : authentification, langue par defaut, erreurs typees
- params : serialisation des filtres en parametres de requete
- schemas : formes JSON brutes de chaque endpoint
- mappers : conversion schemas -> entites du domaine

Le client implemente ITMDBClient defini dans core/ports/api_clients.py.
"""

from src.adapters.api.tmdb_client import TMDBClient

__all__ = ["TMDBClient"]
