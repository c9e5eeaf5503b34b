import logging
from typing import Any, Dict, List
from sqlalchemy import select

from app.core.exceptions import NotFoundException
from app.core.transaction import transaction
from app.models.avatar import Avatar, UserAvatar
from app.repositories.base_repository import BaseRepository, upsert_statement

logger = logging.getLogger(__name__)

class AvatarRepository(BaseRepository):
    """Avatar catalog and per-user avatar assignment"""

    def list_catalog(self) -> List[Dict[str, Any]]:
        """All selectable avatars ordered by id"""
        with transaction(self.session_factory) as session:
            avatars = session.execute(select(Avatar).order_by(Avatar.avatar_id)).scalars().all()
            return [avatar.to_dict() for avatar in avatars]

    def get_assignment(self, user_id: int) -> Dict[str, Any]:
        """User's avatar, falling back to the catalog default"""
        with transaction(self.session_factory) as session:
            avatar = session.execute(
                select(Avatar)
                .join(UserAvatar, UserAvatar.avatar_id == Avatar.avatar_id)
                .where(UserAvatar.user_id == user_id)
            ).scalar_one_or_none()
            if avatar is None:
                avatar = session.execute(
                    select(Avatar)
                    .where(Avatar.is_default == True)
                    .order_by(Avatar.avatar_id)
                    .limit(1)
                ).scalar_one_or_none()
            if avatar is None:
                raise NotFoundException("No avatar found for user")
            return avatar.to_dict()

    def set_assignment(self, user_id: int, avatar_id: int) -> Dict[str, Any]:
        """Assign a catalog avatar to a user"""
        now = self.clock()
        with transaction(self.session_factory) as session:
            if session.get(Avatar, avatar_id) is None:
                raise NotFoundException("Avatar not found")

            stmt = upsert_statement(session, UserAvatar).values(
                user_id=user_id,
                avatar_id=avatar_id,
                created_at=now,
                updated_at=now,
            )
            stmt = stmt.on_conflict_do_update(
                index_elements=["user_id"],
                set_={"avatar_id": avatar_id, "updated_at": now},
            )
            session.execute(stmt)

            avatar = session.execute(
                select(Avatar)
                .where(Avatar.avatar_id == avatar_id)
                .execution_options(populate_existing=True)
            ).scalar_one()
            result = avatar.to_dict()

        logger.info(f"Assigned avatar {avatar_id} to user {user_id}")
        return result
