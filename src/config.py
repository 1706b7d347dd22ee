"""
Configuration de l'application via pydantic-settings.

La configuration est chargée depuis les variables d'environnement avec le préfixe TMDB_,
et peut optionnellement être fournie via un fichier .env.

La clé API est obligatoire : load_settings() lève ConfigurationError si elle est absente,
avant tout appel réseau.
"""

from pathlib import Path
from typing import Any, Optional

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.core.exceptions import ConfigurationError

# Trouver le fichier .env à la racine du projet (parent de src/)
_PROJECT_ROOT = Path(__file__).parent.parent
_ENV_FILE = _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Paramètres de l'application avec support des variables d'environnement.

    Tous les paramètres peuvent être surchargés via des variables d'environnement
    avec le préfixe TMDB_.
    Exemple : TMDB_API_KEY=xxx, TMDB_DEFAULT_LANGUAGE=fr-FR

    retry_attempts et retry_delay sont exposés pour les appelants mais ne
    déclenchent aucun retry : chaque appel TMDB est une tentative unique.
    """

    model_config = SettingsConfigDict(
        env_prefix="TMDB_",
        env_file=_ENV_FILE if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # API TMDB
    api_key: Optional[str] = Field(default=None)
    base_url: str = Field(default="https://api.themoviedb.org/3")
    image_base_url: str = Field(default="https://image.tmdb.org/t/p/")
    default_language: str = Field(default="en-US")
    default_region: str = Field(default="US")
    default_page_size: int = Field(default=20, ge=1)

    # Réseau (secondes)
    timeout: float = Field(default=10.0, gt=0)
    retry_attempts: int = Field(default=3, ge=0)
    retry_delay: float = Field(default=1.0, ge=0)

    # Logging (fichier + stderr, rotation 10MB, 5 fichiers de rétention)
    log_level: str = Field(default="INFO")
    log_file: Path = Field(default=Path("logs/cinescope.log"))
    log_rotation_size: str = Field(default="10 MB")
    log_retention_count: int = Field(default=5)

    @field_validator("log_file", mode="before")
    @classmethod
    def expand_path(cls, v: str | Path) -> Path:
        """Étend ~ vers le répertoire home dans les chemins."""
        return Path(v).expanduser()

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Les endpoints commencent par /, l'URL de base ne doit pas finir par /."""
        return v.rstrip("/")

    @property
    def api_key_configured(self) -> bool:
        """Vérifie si une clé API non vide est définie."""
        return bool(self.api_key and self.api_key.strip())


def read_settings(**overrides: Any) -> Settings:
    """
    Lit la configuration sans exiger la cle API.

    Sert aux commandes qui n'appellent pas TMDB (info, mise en place du logging).

    Lève :
        ConfigurationError : valeur d'environnement invalide (ex: TMDB_TIMEOUT=abc)
    """
    try:
        return Settings(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid configuration: {e}") from e


def load_settings(**overrides: Any) -> Settings:
    """
    Charge et valide la configuration.

    Args :
        **overrides : Valeurs prioritaires sur l'environnement (tests)

    Retourne :
        Settings valides avec une clé API

    Lève :
        ConfigurationError : clé API absente ou valeur invalide
    """
    settings = read_settings(**overrides)
    if not settings.api_key_configured:
        raise ConfigurationError(
            "TMDB_API_KEY is required. Please set it in your environment or .env file."
        )
    return settings
