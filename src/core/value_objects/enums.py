"""
Enumerations du vocabulaire TMDB.

Les valeurs sont celles attendues telles quelles par l'API (tri, types de
sortie, modes de monetisation, statuts et types de series, fenetres de
tendance, types de media).
"""

from enum import Enum, IntEnum


class SortBy(str, Enum):
    """Cle de tri pour /discover/movie."""

    POPULARITY_ASC = "popularity.asc"
    POPULARITY_DESC = "popularity.desc"
    RELEASE_DATE_ASC = "release_date.asc"
    RELEASE_DATE_DESC = "release_date.desc"
    REVENUE_ASC = "revenue.asc"
    REVENUE_DESC = "revenue.desc"
    PRIMARY_RELEASE_DATE_ASC = "primary_release_date.asc"
    PRIMARY_RELEASE_DATE_DESC = "primary_release_date.desc"
    ORIGINAL_TITLE_ASC = "original_title.asc"
    ORIGINAL_TITLE_DESC = "original_title.desc"
    VOTE_AVERAGE_ASC = "vote_average.asc"
    VOTE_AVERAGE_DESC = "vote_average.desc"
    VOTE_COUNT_ASC = "vote_count.asc"
    VOTE_COUNT_DESC = "vote_count.desc"


class TvSortBy(str, Enum):
    """Cle de tri pour /discover/tv."""

    VOTE_AVERAGE_DESC = "vote_average.desc"
    VOTE_AVERAGE_ASC = "vote_average.asc"
    FIRST_AIR_DATE_DESC = "first_air_date.desc"
    FIRST_AIR_DATE_ASC = "first_air_date.asc"
    POPULARITY_DESC = "popularity.desc"
    POPULARITY_ASC = "popularity.asc"


class ReleaseType(IntEnum):
    """Type de sortie d'un film (with_release_type)."""

    PREMIERE = 1
    THEATRICAL_LIMITED = 2
    THEATRICAL = 3
    DIGITAL = 4
    PHYSICAL = 5
    TV = 6


class WatchMonetizationType(str, Enum):
    """Mode de diffusion chez un fournisseur de streaming."""

    FLATRATE = "flatrate"
    FREE = "free"
    ADS = "ads"
    RENT = "rent"
    BUY = "buy"


class TvStatus(IntEnum):
    """Statut de production d'une serie (with_status)."""

    RETURNING_SERIES = 0
    PLANNED = 1
    IN_PRODUCTION = 2
    ENDED = 3
    CANCELLED = 4
    PILOT = 5


class TvType(IntEnum):
    """Type de serie (with_type)."""

    DOCUMENTARY = 0
    NEWS = 1
    MINISERIES = 2
    REALITY = 3
    SCRIPTED = 4
    TALK_SHOW = 5
    VIDEO = 6


class TimeWindow(str, Enum):
    """Fenetre temporelle des tendances."""

    DAY = "day"
    WEEK = "week"


class MediaType(str, Enum):
    """Type de media pour /trending (ALL couvre les trois autres)."""

    ALL = "all"
    MOVIE = "movie"
    TV = "tv"
    PERSON = "person"
