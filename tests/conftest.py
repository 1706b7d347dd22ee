"""
Fixtures pytest partagees pour les tests CineScope.

Ce module contient les fixtures communes utilisees dans les tests:
- Settings de test (cle API factice, log dans un repertoire temporaire)
- Transport httpx et client TMDB pointant vers l'URL TMDB (mockee par respx)
- Mocks des repositories et du SearchService
"""

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from src.adapters.api.tmdb_client import TMDBClient
from src.adapters.http.transport import HttpxTransport
from src.config import Settings, load_settings
from src.core.ports.repositories import (
    IMovieRepository,
    IPersonRepository,
    ISearchRepository,
    ITvShowRepository,
)
from src.services.search_service import SearchService

TMDB_BASE_URL = "https://api.themoviedb.org/3"
TEST_API_KEY = "test_api_key"


@pytest.fixture(autouse=True)
def clean_tmdb_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Isole les tests des variables TMDB_* de la machine."""
    for name in (
        "TMDB_API_KEY",
        "TMDB_BASE_URL",
        "TMDB_DEFAULT_LANGUAGE",
        "TMDB_TIMEOUT",
        "TMDB_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """
    Settings de test avec une cle API factice.

    Le fichier de log est place dans tmp_path, le .env local est ignore.
    """
    return load_settings(
        _env_file=None,
        api_key=TEST_API_KEY,
        log_file=tmp_path / "logs" / "cinescope.log",
    )


@pytest.fixture
def http_transport() -> HttpxTransport:
    """Transport httpx configure sur l'URL TMDB (client cree au premier appel)."""
    return HttpxTransport(base_url=TMDB_BASE_URL, timeout=5.0)


@pytest.fixture
def tmdb_client(http_transport: HttpxTransport) -> TMDBClient:
    """TMDBClient avec cle de test et langue par defaut en-US."""
    return TMDBClient(transport=http_transport, api_key=TEST_API_KEY)


@pytest.fixture
def mock_movie_repository() -> AsyncMock:
    return AsyncMock(spec=IMovieRepository)


@pytest.fixture
def mock_tv_show_repository() -> AsyncMock:
    return AsyncMock(spec=ITvShowRepository)


@pytest.fixture
def mock_person_repository() -> AsyncMock:
    return AsyncMock(spec=IPersonRepository)


@pytest.fixture
def mock_search_repository() -> AsyncMock:
    return AsyncMock(spec=ISearchRepository)


@pytest.fixture
def mock_search_service() -> AsyncMock:
    """
    Mock de SearchService pour les tests des cas d'utilisation.

    Les valeurs de retour doivent etre configurees dans chaque test.
    """
    return AsyncMock(spec=SearchService)
