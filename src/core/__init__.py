"""
Couche domaine (core).

Contient les entités, ports (interfaces abstraites), objets valeur et la
hiérarchie d'erreurs. Cette couche n'a AUCUNE dépendance vers
l'infrastructure (httpx, CLI, configuration).

Sous-packages :
- entities/ : Entités immutables (Movie, TvShow, Person, SearchResult)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- value_objects/ : Filtres de recherche et énumérations TMDB
- exceptions : Erreurs typées (NotFoundError, RateLimitError, ...)
"""
