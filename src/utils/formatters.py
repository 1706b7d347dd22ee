"""
Fonctions de formatage pour la presentation des entites.

Les entites restent des donnees brutes ; tout ce qui est affichage (URL
absolue d'image, annee, duree, note) est calcule ici a la demande.
"""

from datetime import date
from typing import Iterable, Optional

from src.core.entities.media import Genre
from src.core.entities.person import Person
from src.utils.constants import (
    BACKDROP_SIZE,
    GENDER_LABELS,
    NOT_AVAILABLE,
    POSTER_SIZE,
    PROFILE_SIZE,
    TMDB_GENRE_MAPPING,
    TMDB_TV_GENRE_MAPPING,
)


def build_image_url(base_url: str, path: Optional[str], size: str) -> Optional[str]:
    """
    Construit l'URL absolue d'une image TMDB.

    Format : {base_url}{size}{path}, ex:
    "https://image.tmdb.org/t/p/" + "w500" + "/abc.jpg".

    Retourne :
        L'URL, ou None si l'entite n'a pas d'image
    """
    if not path:
        return None
    return f"{base_url}{size}{path}"


def poster_url(base_url: str, path: Optional[str], size: str = POSTER_SIZE) -> Optional[str]:
    return build_image_url(base_url, path, size)


def backdrop_url(base_url: str, path: Optional[str], size: str = BACKDROP_SIZE) -> Optional[str]:
    return build_image_url(base_url, path, size)


def profile_url(base_url: str, path: Optional[str], size: str = PROFILE_SIZE) -> Optional[str]:
    return build_image_url(base_url, path, size)


def format_year(value: Optional[date]) -> str:
    """Annee sur 4 chiffres, ou "N/A" si la date est inconnue."""
    return str(value.year) if value else NOT_AVAILABLE


def format_date(value: Optional[date]) -> str:
    return value.isoformat() if value else NOT_AVAILABLE


def format_vote_average(vote_average: float) -> str:
    """Note avec une decimale (ex: 8.8)."""
    return f"{vote_average:.1f}"


def format_runtime(minutes: Optional[int]) -> str:
    """Duree en heures et minutes (ex: 148 -> "2h 28m")."""
    if minutes is None:
        return NOT_AVAILABLE
    hours, rest = divmod(minutes, 60)
    return f"{hours}h {rest}m"


def format_episode_run_time(run_times: Iterable[int]) -> str:
    """Durees d'episode (ex: (45, 50) -> "45, 50 minutes")."""
    values = list(run_times)
    if not values:
        return NOT_AVAILABLE
    return f"{', '.join(str(v) for v in values)} minutes"


def format_money(amount: int) -> str:
    """Montant en dollars avec separateurs (0 = inconnu)."""
    if not amount:
        return NOT_AVAILABLE
    return f"${amount:,}"


def genre_names(genres: Iterable[Genre]) -> str:
    return ", ".join(g.name for g in genres) or NOT_AVAILABLE


def genre_names_from_ids(genre_ids: Iterable[int], tv: bool = False) -> str:
    """Noms de genres depuis les ids d'un resultat de recherche."""
    mapping = TMDB_TV_GENRE_MAPPING if tv else TMDB_GENRE_MAPPING
    names = [mapping[gid] for gid in genre_ids if gid in mapping]
    return ", ".join(names) or NOT_AVAILABLE


def gender_label(gender: int) -> str:
    return GENDER_LABELS.get(gender, GENDER_LABELS[0])


def person_age(person: Person, today: Optional[date] = None) -> Optional[int]:
    """
    Age de la personne, ou age au deces.

    Retourne None si la date de naissance est inconnue.
    """
    if person.birthday is None:
        return None
    end = person.deathday or today or date.today()
    birth = person.birthday
    age = end.year - birth.year
    if (end.month, end.day) < (birth.month, birth.day):
        age -= 1
    return age


def truncate(text: str, width: int = 80) -> str:
    """Tronque un texte long avec des points de suspension."""
    if len(text) <= width:
        return text
    return text[: width - 1].rstrip() + "…"
