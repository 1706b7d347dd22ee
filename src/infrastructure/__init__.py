"""
Couche infrastructure de CineScope.

Ce module contient les implementations concretes des interfaces definies
dans la couche domaine (ports) :

- repositories/ : Repositories films, series, personnes et recherche
  adossees a l'API TMDB

Architecture hexagonale : les repositories ici implementent les ports du
domaine et ne dependent que de l'interface ITMDBClient, ce qui permet de
les tester avec un client factice.
"""
