"""
Hierarchie des erreurs du domaine CineScope.

Toutes les erreurs levees par le client heritent de CineScopeError, ce qui
permet a la couche de presentation de les intercepter en un seul point.

- ConfigurationError : configuration absente ou invalide (fatale au demarrage)
- TransportError : echec brut du transport HTTP (status 0 si aucune reponse)
- ApiError et ses sous-classes : erreurs TMDB typees par code HTTP
- ValidationError : entree appelant mal formee (type de media inconnu, etc.)
"""

from typing import Any, Optional


class CineScopeError(Exception):
    """Erreur de base de l'application."""


class ConfigurationError(CineScopeError):
    """Configuration manquante ou invalide."""


class ValidationError(CineScopeError):
    """
    Entree fournie par l'appelant invalide.

    Attributes:
        field: Nom du champ en cause (optionnel)
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)


class TransportError(CineScopeError):
    """
    Echec uniforme de la couche transport.

    Attributes:
        status: Code HTTP de la reponse, 0 si aucune reponse n'a ete recue
        message: Message d'erreur (status_message TMDB si disponible)
        data: Corps de la reponse decode, si present
        headers: En-tetes de la reponse
    """

    def __init__(
        self,
        status: int,
        message: str,
        data: Any = None,
        headers: Optional[dict[str, str]] = None,
    ) -> None:
        self.status = status
        self.message = message
        self.data = data
        self.headers = headers or {}
        super().__init__(message)


class ApiError(CineScopeError):
    """
    Erreur renvoyee (ou provoquee) par l'API TMDB.

    Attributes:
        status_code: Code HTTP d'origine (0 pour une erreur reseau)
        message: Message lisible
    """

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(message)


class NetworkError(ApiError):
    """Aucune reponse recue (DNS, connexion refusee, timeout)."""

    def __init__(self, message: str = "Network error: unable to reach TMDB API") -> None:
        super().__init__(0, message)


class AuthenticationError(ApiError):
    """Cle API refusee (401)."""

    def __init__(self, message: str = "Unauthorized: invalid API key") -> None:
        super().__init__(401, message)


class NotFoundError(ApiError):
    """
    Ressource introuvable (404).

    Attributes:
        resource: Type de ressource demandee (ex: "Movie")
        resource_id: Identifiant demande, ou None
        upstream_message: status_message renvoye par TMDB, ou None
    """

    def __init__(
        self,
        resource: str = "Resource",
        resource_id: Any = None,
        upstream_message: Optional[str] = None,
    ) -> None:
        self.resource = resource
        self.resource_id = resource_id
        self.upstream_message = upstream_message
        suffix = f" with id {resource_id}" if resource_id is not None else ""
        super().__init__(404, f"{resource}{suffix} not found")


class RateLimitError(ApiError):
    """
    Limite de requetes atteinte (429).

    Attributes:
        retry_after: Secondes a attendre (header Retry-After), ou None
    """

    def __init__(
        self,
        message: str = "Rate limit exceeded. Please try again later.",
        retry_after: Optional[int] = None,
    ) -> None:
        self.retry_after = retry_after
        super().__init__(429, message)


class UpstreamError(ApiError):
    """Erreur serveur TMDB (5xx) ou code non-2xx non reconnu."""
