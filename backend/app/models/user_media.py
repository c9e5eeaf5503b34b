import uuid
from typing import Dict, Any, Tuple
from sqlalchemy import (
    Column, Integer, String, Boolean, DateTime, CheckConstraint, UniqueConstraint, Index, false, func,
)

from app.core.enums import ListKind, MediaType
from app.db import Base

# list kind -> (flag column, timestamp column)
LIST_COLUMNS: Dict[ListKind, Tuple[str, str]] = {
    ListKind.WATCHLIST: ("is_watchlist", "watchlist_added_at"),
    ListKind.FAVORITES: ("is_favorite", "favorite_added_at"),
    ListKind.WATCHED: ("is_watched", "watched_at"),
}

def new_media_entry_id() -> str:
    return str(uuid.uuid4())

def list_item(row, kind: ListKind) -> Dict[str, Any]:
    """Projection of a user_media row (model instance or result row) as seen through one list"""
    kind = ListKind(kind)
    _, added_at_name = LIST_COLUMNS[kind]
    return {
        "id": row.id,
        "source_text": kind,
        "user_id": row.user_id,
        "media_type": MediaType(row.media_type),
        "media_id": row.media_id,
        "added_at": getattr(row, added_at_name),
    }

class UserMedia(Base):
    """One row per (user, media) pair holding all list memberships"""
    __tablename__ = "user_media"
    __table_args__ = (
        UniqueConstraint("user_id", "media_id", name="uq_user_media_user_media"),
        CheckConstraint("media_type IN ('movie', 'tvshow')", name="ck_user_media_media_type"),
        Index("idx_user_media_user_id", "user_id"),
    )

    id = Column(String(36), primary_key=True, default=new_media_entry_id)
    user_id = Column(Integer, nullable=False)
    media_id = Column(String(50), nullable=False)
    media_type = Column(String(10), nullable=False)

    is_watchlist = Column(Boolean, nullable=False, default=False, server_default=false())
    is_favorite = Column(Boolean, nullable=False, default=False, server_default=false())
    is_watched = Column(Boolean, nullable=False, default=False, server_default=false())

    watchlist_added_at = Column(DateTime(timezone=True), nullable=True)
    favorite_added_at = Column(DateTime(timezone=True), nullable=True)
    watched_at = Column(DateTime(timezone=True), nullable=True)

    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())

    @staticmethod
    def list_columns(kind: ListKind) -> Tuple[Column, Column]:
        """Flag and timestamp columns backing a list kind"""
        flag_name, added_at_name = LIST_COLUMNS[ListKind(kind)]
        return getattr(UserMedia, flag_name), getattr(UserMedia, added_at_name)

    @classmethod
    def orphaned(cls):
        """Criteria matching rows that belong to no list"""
        return (
            cls.is_watchlist == False,
            cls.is_favorite == False,
            cls.is_watched == False,
        )

    def to_list_item(self, kind: ListKind) -> Dict[str, Any]:
        return list_item(self, kind)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "user_id": self.user_id,
            "media_id": self.media_id,
            "media_type": MediaType(self.media_type),
            "is_watchlist": self.is_watchlist,
            "is_favorite": self.is_favorite,
            "is_watched": self.is_watched,
            "watchlist_added_at": self.watchlist_added_at,
            "favorite_added_at": self.favorite_added_at,
            "watched_at": self.watched_at,
            "created_at": self.created_at,
            "updated_at": self.updated_at,
        }
