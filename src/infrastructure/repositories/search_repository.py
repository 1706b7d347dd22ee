"""
Implementation TMDB du repository de recherche generale.

Recherche multi-types (/search/multi) et tendances
(/trending/{media_type}/{time_window}). Chaque element est reconstruit
selon son media_type ; un type inconnu leve ValidationError.
"""

from functools import partial

from src.adapters.api.mappers import map_media_item, map_page
from src.adapters.api.params import search_params
from src.core.entities.search_result import (
    MultiSearchResult,
    SearchResult,
    TrendingResult,
)
from src.core.exceptions import ValidationError
from src.core.ports.repositories import ISearchRepository
from src.core.value_objects.enums import MediaType, TimeWindow
from src.core.value_objects.filters import SearchFilters
from src.infrastructure.repositories.base import TMDBRepository


class TMDBSearchRepository(TMDBRepository, ISearchRepository):
    """Repository TMDB pour la recherche multi-types et les tendances."""

    async def multi_search(self, filters: SearchFilters) -> SearchResult[MultiSearchResult]:
        data = await self._get("/search/multi", search_params(filters))
        return map_page(data, map_media_item)

    async def get_trending(
        self,
        media_type: MediaType,
        time_window: TimeWindow,
        page: int = 1,
    ) -> SearchResult[TrendingResult]:
        try:
            media_type = MediaType(media_type)
        except ValueError as e:
            raise ValidationError(f"Unknown media type: {media_type!r}", field="media_type") from e
        try:
            time_window = TimeWindow(time_window)
        except ValueError as e:
            raise ValidationError(
                f"Unknown time window: {time_window!r}", field="time_window"
            ) from e

        data = await self._get(
            f"/trending/{media_type.value}/{time_window.value}", {"page": page}
        )
        # Pour un type fixe, l'URL fait foi si un element n'a pas de media_type
        fixed_type = None if media_type is MediaType.ALL else media_type.value
        return map_page(data, partial(map_media_item, media_type=fixed_type))
