from enum import Enum


class MediaType(str, Enum):
    """Kind of catalog item a user media row points at"""
    MOVIE = "movie"
    TVSHOW = "tvshow"


class ListKind(str, Enum):
    """Logical user lists folded into the user_media table"""
    WATCHLIST = "watchlist"
    FAVORITES = "favorites"
    WATCHED = "watched"