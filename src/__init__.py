"""
CineScope - Client asynchrone de l'API TMDB.

Ce package fournit la recherche, la découverte et la consultation des films,
séries TV et personnes de The Movie Database, ainsi qu'une CLI de consultation.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, objets valeur, erreurs)
- services/ : Couche application (cas d'utilisation)
- infrastructure/ : Repositories adossés à l'API TMDB
- adapters/ : Transport HTTP, client TMDB, CLI
"""
