"""
Mock TMDB API responses for testing.

Contains realistic responses from the TMDB API for search, details, lists,
credits, multi-search and trending endpoints.
These fixtures are used with respx to mock httpx calls in tests.
"""

# Search response for "Inception" query
# GET /search/movie?query=Inception&language=en-US
TMDB_SEARCH_MOVIE_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/8ZTVqvKDQ8emSGUEMjsS4yHAwrp.jpg",
            "genre_ids": [28, 878, 12],
            "id": 27205,
            "original_language": "en",
            "original_title": "Inception",
            "overview": "Cobb, a skilled thief who commits corporate espionage...",
            "popularity": 83.952,
            "poster_path": "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
            "release_date": "2010-07-15",
            "title": "Inception",
            "video": False,
            "vote_average": 8.4,
            "vote_count": 35000,
        },
        {
            "adult": False,
            "backdrop_path": None,
            "genre_ids": [99],
            "id": 64956,
            "original_language": "en",
            "original_title": "Inception: The Cobol Job",
            "overview": "",
            "popularity": 4.1,
            "poster_path": "/sNxqwtyHMNQwKWoFYDqcYTui5Ok.jpg",
            "release_date": "",
            "title": "Inception: The Cobol Job",
            "video": True,
        },
    ],
    "total_pages": 1,
    "total_results": 2,
}

# Empty search response
TMDB_SEARCH_EMPTY_RESPONSE = {
    "page": 1,
    "results": [],
    "total_pages": 0,
    "total_results": 0,
}

# Movie details for Inception
# GET /movie/27205
TMDB_MOVIE_DETAILS_RESPONSE = {
    "adult": False,
    "backdrop_path": "/8ZTVqvKDQ8emSGUEMjsS4yHAwrp.jpg",
    "belongs_to_collection": None,
    "budget": 160000000,
    "genres": [
        {"id": 28, "name": "Action"},
        {"id": 878, "name": "Science Fiction"},
    ],
    "homepage": "https://www.warnerbros.com/movies/inception",
    "id": 27205,
    "imdb_id": "tt1375666",
    "original_language": "en",
    "original_title": "Inception",
    "overview": "Cobb, a skilled thief who commits corporate espionage...",
    "popularity": 83.952,
    "poster_path": "/oYuLEt3zVCKq57qu2F8dT7NIa6f.jpg",
    "production_companies": [
        {
            "id": 923,
            "logo_path": "/5UQsZrfbfG2dYJbx8DxfoTr2Bvu.png",
            "name": "Legendary Pictures",
            "origin_country": "US",
        },
        {
            "id": 9996,
            "logo_path": None,
            "name": "Syncopy",
            "origin_country": "GB",
        },
    ],
    "production_countries": [
        {"iso_3166_1": "GB", "name": "United Kingdom"},
        {"iso_3166_1": "US", "name": "United States of America"},
    ],
    "release_date": "2010-07-15",
    "revenue": 825532764,
    "runtime": 148,
    "spoken_languages": [
        {"english_name": "English", "iso_639_1": "en", "name": "English"},
        {"english_name": "Japanese", "iso_639_1": "ja", "name": "日本語"},
    ],
    "status": "Released",
    "tagline": "Your mind is the scene of the crime.",
    "title": "Inception",
    "video": False,
    "vote_average": 8.8,
    "vote_count": 35000,
}

# Movie details belonging to a collection
# GET /movie/155
TMDB_MOVIE_DETAILS_WITH_COLLECTION_RESPONSE = {
    "id": 155,
    "title": "The Dark Knight",
    "original_title": "The Dark Knight",
    "release_date": "2008-07-16",
    "runtime": 152,
    "genres": [{"id": 18, "name": "Drama"}, {"id": 28, "name": "Action"}],
    "belongs_to_collection": {
        "id": 263,
        "name": "The Dark Knight Collection",
        "poster_path": "/poster.jpg",
        "backdrop_path": "/backdrop.jpg",
    },
    "vote_average": 8.5,
    "vote_count": 31000,
}

# Popular movies, page 2
# GET /movie/popular?page=2
TMDB_POPULAR_MOVIES_RESPONSE = {
    "page": 2,
    "results": [
        {
            "id": 550,
            "title": "Fight Club",
            "original_title": "Fight Club",
            "release_date": "1999-10-15",
            "genre_ids": [18],
            "vote_average": 8.4,
            "vote_count": 27000,
            "popularity": 61.4,
        }
    ],
    "total_pages": 500,
    "total_results": 10000,
}

# Search response for "Breaking Bad"
# GET /search/tv?query=Breaking Bad
TMDB_SEARCH_TV_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "backdrop_path": "/tsRy63Mu5cu8etL1X7ZLyf7UP1M.jpg",
            "first_air_date": "2008-01-20",
            "genre_ids": [18, 80],
            "id": 1396,
            "name": "Breaking Bad",
            "origin_country": ["US"],
            "original_language": "en",
            "original_name": "Breaking Bad",
            "overview": "Walter White, a New Mexico chemistry teacher...",
            "popularity": 254.3,
            "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
            "vote_average": 8.9,
            "vote_count": 13000,
        }
    ],
    "total_pages": 1,
    "total_results": 1,
}

# TV show details for Breaking Bad
# GET /tv/1396
TMDB_TV_DETAILS_RESPONSE = {
    "adult": False,
    "backdrop_path": "/tsRy63Mu5cu8etL1X7ZLyf7UP1M.jpg",
    "created_by": [
        {"id": 66633, "name": "Vince Gilligan", "profile_path": "/uFh3OrBvkwKSU3N5y0XnXOhqBJz.jpg"}
    ],
    "episode_run_time": [45, 47],
    "first_air_date": "2008-01-20",
    "genres": [{"id": 18, "name": "Drama"}, {"id": 80, "name": "Crime"}],
    "homepage": "https://www.sonypictures.com/tv/breakingbad",
    "id": 1396,
    "in_production": False,
    "languages": ["en"],
    "last_air_date": "2013-09-29",
    "name": "Breaking Bad",
    "networks": [
        {"id": 174, "logo_path": "/alqLicR1ZMHMaZGP3xRQxn9sq7p.png", "name": "AMC", "origin_country": "US"}
    ],
    "number_of_episodes": 62,
    "number_of_seasons": 5,
    "origin_country": ["US"],
    "original_language": "en",
    "original_name": "Breaking Bad",
    "overview": "Walter White, a New Mexico chemistry teacher...",
    "popularity": 254.3,
    "poster_path": "/ggFHVNu6YYI5L9pCfOacjizRGt.jpg",
    "production_companies": [
        {"id": 11073, "logo_path": None, "name": "Sony Pictures Television Studios", "origin_country": "US"}
    ],
    "status": "Ended",
    "tagline": "Change the equation.",
    "type": "Scripted",
    "vote_average": 8.9,
    "vote_count": 13000,
}

# Search response for "Leonardo DiCaprio"
# GET /search/person?query=Leonardo DiCaprio
TMDB_SEARCH_PERSON_RESPONSE = {
    "page": 1,
    "results": [
        {
            "adult": False,
            "gender": 2,
            "id": 6193,
            "known_for_department": "Acting",
            "name": "Leonardo DiCaprio",
            "popularity": 48.2,
            "profile_path": "/wo2hJpn04vbtmh0B9utCFdsQhxM.jpg",
            "known_for": [
                {"media_type": "movie", "id": 27205, "title": "Inception", "release_date": "2010-07-15"},
                {"media_type": "tv", "id": 1234, "name": "Growing Pains", "first_air_date": "1985-09-24"},
            ],
        }
    ],
    "total_pages": 1,
    "total_results": 1,
}

# Person details
# GET /person/6193
TMDB_PERSON_DETAILS_RESPONSE = {
    "adult": False,
    "also_known_as": ["Leo DiCaprio", "Λεονάρντο Ντι Κάπριο"],
    "biography": "Leonardo Wilhelm DiCaprio is an American actor...",
    "birthday": "1974-11-11",
    "deathday": None,
    "gender": 2,
    "homepage": None,
    "id": 6193,
    "imdb_id": "nm0000138",
    "known_for_department": "Acting",
    "name": "Leonardo DiCaprio",
    "place_of_birth": "Los Angeles, California, USA",
    "popularity": 48.2,
    "profile_path": "/wo2hJpn04vbtmh0B9utCFdsQhxM.jpg",
}

# Person movie credits
# GET /person/6193/movie_credits
TMDB_PERSON_MOVIE_CREDITS_RESPONSE = {
    "id": 6193,
    "cast": [
        {
            "id": 27205,
            "title": "Inception",
            "original_title": "Inception",
            "release_date": "2010-07-15",
            "character": "Dom Cobb",
            "credit_id": "52fe4534c3a368484e04de03",
            "genre_ids": [28, 878],
            "vote_average": 8.4,
            "vote_count": 35000,
            "popularity": 83.9,
        },
        {
            "id": 597,
            "title": "Titanic",
            "original_title": "Titanic",
            "release_date": "1997-11-18",
            "character": "Jack Dawson",
            "credit_id": "52fe425ac3a36847f80179cf",
        },
    ],
    "crew": [
        {
            "id": 1069,
            "title": "The Aviator",
            "release_date": "2004-12-17",
            "job": "Producer",
            "department": "Production",
            "credit_id": "52fe4381c3a36847f8059503",
        }
    ],
}

# Person TV credits
# GET /person/6193/tv_credits
TMDB_PERSON_TV_CREDITS_RESPONSE = {
    "id": 6193,
    "cast": [
        {
            "id": 1234,
            "name": "Growing Pains",
            "original_name": "Growing Pains",
            "first_air_date": "1985-09-24",
            "character": "Luke Brower",
            "episode_count": 24,
            "origin_country": ["US"],
            "credit_id": "525719f5760ee3776a1a3d5e",
        }
    ],
    "crew": [],
}

# Multi search response: one of each media type
# GET /search/multi?query=star
TMDB_MULTI_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "media_type": "movie",
            "id": 11,
            "title": "Star Wars",
            "original_title": "Star Wars",
            "release_date": "1977-05-25",
            "genre_ids": [12, 28, 878],
            "vote_average": 8.2,
            "vote_count": 20000,
        },
        {
            "media_type": "tv",
            "id": 1396,
            "name": "Breaking Bad",
            "original_name": "Breaking Bad",
            "first_air_date": "2008-01-20",
            "genre_ids": [18, 80],
            "origin_country": ["US"],
        },
        {
            "media_type": "person",
            "id": 6193,
            "name": "Leonardo DiCaprio",
            "known_for_department": "Acting",
            "known_for": [
                {"media_type": "movie", "id": 27205, "title": "Inception"},
            ],
        },
    ],
    "total_pages": 3,
    "total_results": 55,
}

# Multi search response with an unknown media type
TMDB_MULTI_SEARCH_UNKNOWN_TYPE_RESPONSE = {
    "page": 1,
    "results": [
        {"media_type": "collection", "id": 10, "name": "Star Wars Collection"},
    ],
    "total_pages": 1,
    "total_results": 1,
}

# Trending TV of the day, items without media_type
# GET /trending/tv/day
TMDB_TRENDING_TV_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 94997,
            "name": "House of the Dragon",
            "original_name": "House of the Dragon",
            "first_air_date": "2022-08-21",
            "genre_ids": [10765, 18],
            "vote_average": 8.4,
        }
    ],
    "total_pages": 1000,
    "total_results": 20000,
}

# Error payloads returned by TMDB
TMDB_NOT_FOUND_RESPONSE = {
    "success": False,
    "status_code": 34,
    "status_message": "The resource you requested could not be found.",
}

TMDB_UNAUTHORIZED_RESPONSE = {
    "success": False,
    "status_code": 7,
    "status_message": "Invalid API key: You must be granted a valid key.",
}

TMDB_RATE_LIMIT_RESPONSE = {
    "success": False,
    "status_code": 25,
    "status_message": "Your request count (41) is over the allowed limit of 40.",
}

# Single-result search page for "Inception"
# GET /search/movie?query=Inception&page=1
TMDB_INCEPTION_SEARCH_RESPONSE = {
    "page": 1,
    "results": [
        {
            "id": 27205,
            "title": "Inception",
            "vote_average": 8.8,
            "vote_count": 31000,
            "genre_ids": [28, 878],
            "release_date": "2010-07-16",
            "poster_path": "/9gk7adHYeDvHkCSEqAvQNLV5Uge.jpg",
            "adult": False,
        }
    ],
    "total_pages": 1,
    "total_results": 1,
}
