import sys
import os
import logging
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from sqlalchemy.orm import sessionmaker

from app.core.transaction import transaction
from app.models.avatar import Avatar
from app.repositories.base_repository import upsert_statement

logger = logging.getLogger(__name__)

# Exactly one entry is the default
DEFAULT_AVATARS = [
    {"avatar_id": 1, "avatar_name": "Default", "avatar_url": "/avatars/default.png", "is_default": True},
    {"avatar_id": 2, "avatar_name": "Popcorn", "avatar_url": "/avatars/popcorn.png", "is_default": False},
    {"avatar_id": 3, "avatar_name": "Clapperboard", "avatar_url": "/avatars/clapperboard.png", "is_default": False},
    {"avatar_id": 4, "avatar_name": "Film Reel", "avatar_url": "/avatars/film-reel.png", "is_default": False},
    {"avatar_id": 5, "avatar_name": "Director", "avatar_url": "/avatars/director.png", "is_default": False},
    {"avatar_id": 6, "avatar_name": "Television", "avatar_url": "/avatars/television.png", "is_default": False},
]

def seed_avatars(session_factory: sessionmaker, avatars=None) -> int:
    """Insert the avatar catalog, leaving existing rows untouched"""
    avatars = avatars if avatars is not None else DEFAULT_AVATARS
    inserted = 0
    with transaction(session_factory) as session:
        for avatar in avatars:
            stmt = upsert_statement(session, Avatar).values(**avatar).on_conflict_do_nothing(
                index_elements=["avatar_id"]
            )
            inserted += session.execute(stmt).rowcount
    logger.info(f"Seeded {inserted} avatars")
    return inserted

if __name__ == "__main__":
    from app.core.logging_config import configure_logging
    from app.db import init_db

    configure_logging()
    seed_avatars(init_db())
