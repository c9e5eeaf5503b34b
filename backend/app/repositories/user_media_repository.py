import logging
from typing import Any, Dict, List, Optional
from sqlalchemy import select, update, delete

from app.core.enums import ListKind, MediaType
from app.core.transaction import transaction
from app.models.user_media import UserMedia, LIST_COLUMNS, list_item, new_media_entry_id
from app.repositories.base_repository import BaseRepository, upsert_statement

logger = logging.getLogger(__name__)

class UserMediaRepository(BaseRepository):
    """Watchlist, favorites and watched lists over the unified user_media table.

    Every list is a projection of the same row per (user_id, media_id): adding
    sets one flag and its timestamp, removing clears them and deletes the row
    once no flag is left.
    """

    def get_list(self, user_id: int, kind: ListKind) -> List[Dict[str, Any]]:
        """Items in one list, most recently added first"""
        kind = ListKind(kind)
        flag, added_at = UserMedia.list_columns(kind)
        stmt = (
            select(UserMedia)
            .where(UserMedia.user_id == user_id, flag == True)
            .order_by(added_at.desc())
        )
        with transaction(self.session_factory) as session:
            rows = session.execute(stmt).scalars().all()
            return [row.to_list_item(kind) for row in rows]

    def get_entry(self, user_id: int, media_id: str) -> Optional[Dict[str, Any]]:
        """Full row for a (user, media) pair, or None"""
        stmt = select(UserMedia).where(UserMedia.user_id == user_id, UserMedia.media_id == media_id)
        with transaction(self.session_factory) as session:
            row = session.execute(stmt).scalar_one_or_none()
            return row.to_dict() if row else None

    def add(self, user_id: int, media_id: str, media_type: MediaType, kind: ListKind) -> Dict[str, Any]:
        """Put an item on a list, creating the row or refreshing the list timestamp.

        An existing row keeps its media_type and its other list flags.
        """
        kind = ListKind(kind)
        media_type = MediaType(media_type)
        flag_name, added_at_name = LIST_COLUMNS[kind]
        now = self.clock()

        with transaction(self.session_factory) as session:
            stmt = upsert_statement(session, UserMedia).values(
                id=new_media_entry_id(),
                user_id=user_id,
                media_id=media_id,
                media_type=media_type.value,
                created_at=now,
                updated_at=now,
                **{flag_name: True, added_at_name: now},
            )
            stmt = stmt.on_conflict_do_update(
                index_elements=["user_id", "media_id"],
                set_={flag_name: True, added_at_name: now, "updated_at": now},
            ).returning(*UserMedia.__table__.columns)
            row = session.execute(stmt).one()
            item = list_item(row, kind)

        logger.info(f"Added media {media_id} to {kind.value} for user {user_id}")
        return item

    def remove(self, user_id: int, media_id: str, kind: ListKind) -> None:
        """Take an item off a list; deletes the row when no list holds it anymore"""
        kind = ListKind(kind)
        flag, added_at = UserMedia.list_columns(kind)
        now = self.clock()

        with transaction(self.session_factory) as session:
            cleared = session.execute(
                update(UserMedia)
                .where(UserMedia.user_id == user_id, UserMedia.media_id == media_id, flag == True)
                .values({flag: False, added_at: None, UserMedia.updated_at: now})
                .execution_options(synchronize_session=False)
            )
            deleted = session.execute(
                delete(UserMedia)
                .where(UserMedia.user_id == user_id, UserMedia.media_id == media_id, *UserMedia.orphaned())
                .execution_options(synchronize_session=False)
            )

        logger.debug(
            f"Removed media {media_id} from {kind.value} for user {user_id} "
            f"(cleared={cleared.rowcount}, deleted={deleted.rowcount})"
        )

    def remove_all(self, user_id: int, kind: ListKind) -> None:
        """Empty one list for a user and drop rows left without any list"""
        kind = ListKind(kind)
        flag, added_at = UserMedia.list_columns(kind)
        now = self.clock()

        with transaction(self.session_factory) as session:
            cleared = session.execute(
                update(UserMedia)
                .where(UserMedia.user_id == user_id, flag == True)
                .values({flag: False, added_at: None, UserMedia.updated_at: now})
                .execution_options(synchronize_session=False)
            )
            deleted = session.execute(
                delete(UserMedia)
                .where(UserMedia.user_id == user_id, *UserMedia.orphaned())
                .execution_options(synchronize_session=False)
            )

        logger.info(
            f"Cleared {kind.value} for user {user_id} "
            f"(cleared={cleared.rowcount}, deleted={deleted.rowcount})"
        )
