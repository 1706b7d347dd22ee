"""
Configuration du logging de CineScope via loguru.

Deux sorties, toutes deux alimentees par Settings :
- stderr : lisible, coloree, au niveau demande (TMDB_LOG_LEVEL ou -v/-q)
- fichier : JSON serialise au niveau DEBUG, avec rotation, pour rejouer les appels TMDB

La cle API voyage en parametre de requete (api_key=...). Un patcher global
la masque dans le message et les extras avant qu'un handler ne l'ecrive.
"""

import re
import sys
from typing import Any, Optional

from loguru import logger

from src.config import Settings

REDACTED = "***"

_SECRET_KEYS = frozenset({"api_key"})
_SECRET_IN_TEXT = re.compile(r"(api_key=)[^&\s\"']+")

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level>"
)


def _mask(value: Any, key: Optional[str] = None) -> Any:
    if key in _SECRET_KEYS and value is not None:
        return REDACTED
    if isinstance(value, dict):
        return {k: _mask(v, k) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return type(value)(_mask(v) for v in value)
    if isinstance(value, str):
        return _SECRET_IN_TEXT.sub(rf"\g<1>{REDACTED}", value)
    return value


def redact_secrets(record: dict[str, Any]) -> None:
    """Patcher loguru : remplace la cle API par *** dans le message et les extras."""
    record["message"] = _mask(record["message"])
    for key, value in record["extra"].items():
        record["extra"][key] = _mask(value, key)


def configure_logging(settings: Settings, log_level: Optional[str] = None) -> None:
    """Installe les handlers loguru a partir de la configuration.

    Args :
        settings : Configuration chargee (niveau, fichier, rotation, retention)
        log_level : Niveau console impose par la CLI, prioritaire sur settings.log_level
    """
    level = (log_level or settings.log_level).upper()

    logger.remove()
    logger.configure(patcher=redact_secrets)

    logger.add(sys.stderr, level=level, format=CONSOLE_FORMAT, colorize=True)

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        "Logging configure",
        console_level=level,
        log_file=str(settings.log_file),
        rotation=settings.log_rotation_size,
    )
