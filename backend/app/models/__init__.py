from app.db import Base
from .user_media import UserMedia, LIST_COLUMNS, list_item
from .avatar import Avatar, UserAvatar

__all__ = ['Base', 'UserMedia', 'LIST_COLUMNS', 'list_item', 'Avatar', 'UserAvatar']
