"""
Tests unitaires pour la serialisation des filtres en parametres TMDB.

Verifie :
- les noms de parametres exacts (.gte/.lte) de /discover/movie et /discover/tv
- l'omission des champs non renseignes
- la jointure par "|" des listes d'enums
- les valeurs par defaut (page 1, include_adult false)
"""

from dataclasses import fields

from src.adapters.api.params import (
    DISCOVER_MOVIE_PARAMS,
    DISCOVER_TV_PARAMS,
    clean_params,
    discover_movie_params,
    discover_tv_params,
    search_params,
    serialize_value,
)
from src.core.value_objects.enums import (
    ReleaseType,
    SortBy,
    TvSortBy,
    TvStatus,
    TvType,
    WatchMonetizationType,
)
from src.core.value_objects.filters import (
    DiscoverMovieFilters,
    DiscoverTvFilters,
    SearchFilters,
)


class TestParamTables:
    """Les tables couvrent exactement les attributs des filtres."""

    def test_movie_table_covers_every_filter_field(self):
        assert set(DISCOVER_MOVIE_PARAMS) == {f.name for f in fields(DiscoverMovieFilters)}

    def test_tv_table_covers_every_filter_field(self):
        assert set(DISCOVER_TV_PARAMS) == {f.name for f in fields(DiscoverTvFilters)}


class TestSerializeValue:
    def test_enum_gives_its_value(self):
        assert serialize_value(SortBy.POPULARITY_DESC) == "popularity.desc"

    def test_bool_gives_lowercase_string(self):
        assert serialize_value(True) == "true"
        assert serialize_value(False) == "false"

    def test_sequence_is_comma_joined(self):
        assert serialize_value((28, 878)) == "28,878"

    def test_clean_params_drops_none(self):
        assert clean_params({"a": 1, "b": None, "c": False}) == {"a": 1, "c": "false"}


class TestDiscoverMovieParams:
    def test_defaults_when_empty(self):
        params = discover_movie_params(DiscoverMovieFilters())

        assert params == {"page": 1, "include_adult": "false", "include_video": "false"}

    def test_range_fields_use_dotted_names(self):
        params = discover_movie_params(
            DiscoverMovieFilters(
                primary_release_date_gte="2010-01-01",
                primary_release_date_lte="2010-12-31",
                vote_average_gte=7.5,
                vote_count_gte=1000,
                with_runtime_lte=180,
            )
        )

        assert params["primary_release_date.gte"] == "2010-01-01"
        assert params["primary_release_date.lte"] == "2010-12-31"
        assert params["vote_average.gte"] == 7.5
        assert params["vote_count.gte"] == 1000
        assert params["with_runtime.lte"] == 180
        assert "primary_release_date_gte" not in params

    def test_unset_fields_are_omitted(self):
        params = discover_movie_params(DiscoverMovieFilters(with_genres="28,878"))

        assert params["with_genres"] == "28,878"
        assert "sort_by" not in params
        assert "year" not in params
        assert "vote_average.gte" not in params

    def test_sort_by_and_explicit_flags(self):
        params = discover_movie_params(
            DiscoverMovieFilters(page=3, sort_by=SortBy.VOTE_AVERAGE_DESC, include_adult=True)
        )

        assert params["page"] == 3
        assert params["sort_by"] == "vote_average.desc"
        assert params["include_adult"] == "true"
        assert params["include_video"] == "false"

    def test_release_types_are_pipe_joined(self):
        params = discover_movie_params(
            DiscoverMovieFilters(with_release_type=(ReleaseType.THEATRICAL, ReleaseType.DIGITAL))
        )

        assert params["with_release_type"] == "3|4"

    def test_monetization_types_are_pipe_joined(self):
        params = discover_movie_params(
            DiscoverMovieFilters(
                watch_region="FR",
                with_watch_monetization_types=(
                    WatchMonetizationType.FLATRATE,
                    WatchMonetizationType.FREE,
                ),
            )
        )

        assert params["watch_region"] == "FR"
        assert params["with_watch_monetization_types"] == "flatrate|free"


class TestDiscoverTvParams:
    def test_defaults_to_first_page(self):
        assert discover_tv_params(DiscoverTvFilters()) == {"page": 1}

    def test_dotted_names_and_pipe_joined_enums(self):
        params = discover_tv_params(
            DiscoverTvFilters(
                sort_by=TvSortBy.FIRST_AIR_DATE_DESC,
                air_date_gte="2024-01-01",
                first_air_date_lte="2020-12-31",
                with_networks="213",
                with_status=(TvStatus.RETURNING_SERIES, TvStatus.ENDED),
                with_type=(TvType.SCRIPTED,),
                include_null_first_air_dates=False,
            )
        )

        assert params["sort_by"] == "first_air_date.desc"
        assert params["air_date.gte"] == "2024-01-01"
        assert params["first_air_date.lte"] == "2020-12-31"
        assert params["with_networks"] == "213"
        assert params["with_status"] == f"{TvStatus.RETURNING_SERIES.value}|{TvStatus.ENDED.value}"
        assert params["with_type"] == str(TvType.SCRIPTED.value)
        assert params["include_null_first_air_dates"] == "false"


class TestSearchParams:
    def test_defaults_page_and_include_adult(self):
        params = search_params(SearchFilters(query="Inception"))

        assert params == {"query": "Inception", "page": 1, "include_adult": "false"}

    def test_movie_search_emits_region_and_years(self):
        params = search_params(
            SearchFilters(query="Dune", region="FR", year=2021, primary_release_year=2021),
            include_region=True,
            include_year=True,
        )

        assert params["region"] == "FR"
        assert params["year"] == 2021
        assert params["primary_release_year"] == 2021

    def test_region_ignored_when_not_requested(self):
        params = search_params(SearchFilters(query="Dune", region="FR", year=2021))

        assert "region" not in params
        assert "year" not in params

    def test_tv_search_falls_back_to_year(self):
        params = search_params(
            SearchFilters(query="Dark", year=2017), include_first_air_date_year=True
        )

        assert params["first_air_date_year"] == 2017
        assert "year" not in params

    def test_language_override(self):
        params = search_params(SearchFilters(query="Amelie", language="fr-FR"))

        assert params["language"] == "fr-FR"
