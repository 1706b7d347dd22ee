"""
Constantes partagees de CineScope.

Identifiants de genres TMDB (listes officielles /genre/movie/list et
/genre/tv/list, en anglais) et tailles d'images par defaut.
"""

# Tailles d'images TMDB utilisees par defaut
POSTER_SIZE = "w500"
BACKDROP_SIZE = "w780"
PROFILE_SIZE = "w500"
ORIGINAL_SIZE = "original"

# Valeur affichee pour une donnee inconnue
NOT_AVAILABLE = "N/A"

TMDB_GENRE_MAPPING = {
    28: "Action",
    12: "Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    14: "Fantasy",
    36: "History",
    27: "Horror",
    10402: "Music",
    9648: "Mystery",
    10749: "Romance",
    878: "Science Fiction",
    10770: "TV Movie",
    53: "Thriller",
    10752: "War",
    37: "Western",
}

TMDB_TV_GENRE_MAPPING = {
    10759: "Action & Adventure",
    16: "Animation",
    35: "Comedy",
    80: "Crime",
    99: "Documentary",
    18: "Drama",
    10751: "Family",
    10762: "Kids",
    9648: "Mystery",
    10763: "News",
    10764: "Reality",
    10765: "Sci-Fi & Fantasy",
    10766: "Soap",
    10767: "Talk",
    10768: "War & Politics",
    37: "Western",
}

# Codes de genre TMDB (personnes)
GENDER_LABELS = {
    0: "Not specified",
    1: "Female",
    2: "Male",
    3: "Non-binary",
}
