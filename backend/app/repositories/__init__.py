from .base_repository import BaseRepository, upsert_statement
from .user_media_repository import UserMediaRepository
from .avatar_repository import AvatarRepository

__all__ = [
    "BaseRepository",
    "upsert_statement",
    "UserMediaRepository",
    "AvatarRepository"
]
