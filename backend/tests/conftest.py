from datetime import datetime, timedelta

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from app.db import Base, make_session_factory
from app import models  # register tables
from app.repositories.avatar_repository import AvatarRepository
from app.repositories.user_media_repository import UserMediaRepository
from app.seed import seed_avatars


class FakeClock:
    """Strictly increasing clock, one second per reading"""

    def __init__(self, start=datetime(2024, 1, 1, 12, 0, 0)):
        self.current = start

    def __call__(self):
        self.current += timedelta(seconds=1)
        return self.current


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def media_repo(session_factory, clock):
    return UserMediaRepository(session_factory, clock=clock)


@pytest.fixture
def avatar_repo(session_factory, clock):
    seed_avatars(session_factory)
    return AvatarRepository(session_factory, clock=clock)
