from datetime import datetime
from types import SimpleNamespace

import pytest
from sqlalchemy import create_engine, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from app.core.exceptions import (
    ConnectionFailureException, ConstraintViolationException,
    NotFoundException, TransactionFailureException,
)
from app.core.enums import ListKind
from app.core.transaction import transaction, translate_db_errors
from app.models import UserMedia
from app.repositories.base_repository import upsert_statement
from app.repositories.user_media_repository import UserMediaRepository


class TrackingSession(Session):
    closed = 0

    def close(self):
        TrackingSession.closed += 1
        super().close()


@pytest.fixture
def tracking_factory(engine):
    TrackingSession.closed = 0
    return sessionmaker(bind=engine, class_=TrackingSession)


def media_row(media_id="tt1234567", user_id=456):
    now = datetime(2024, 1, 1)
    return UserMedia(
        user_id=user_id, media_id=media_id, media_type="movie",
        is_watchlist=True, watchlist_added_at=now,
    )


def count_rows(session_factory):
    with session_factory() as session:
        return len(session.execute(select(UserMedia)).scalars().all())


def test_commit_on_success(session_factory):
    with transaction(session_factory) as session:
        session.add(media_row())

    assert count_rows(session_factory) == 1


def test_rollback_on_application_error(session_factory):
    with pytest.raises(NotFoundException):
        with transaction(session_factory) as session:
            session.add(media_row())
            session.flush()
            raise NotFoundException("missing")

    assert count_rows(session_factory) == 0


def test_rollback_on_unexpected_error(session_factory):
    with pytest.raises(RuntimeError):
        with transaction(session_factory) as session:
            session.add(media_row())
            session.flush()
            raise RuntimeError("boom")

    assert count_rows(session_factory) == 0


def test_sqlalchemy_error_becomes_transaction_failure(session_factory):
    with pytest.raises(TransactionFailureException) as info:
        with transaction(session_factory) as session:
            session.add(media_row())
            session.flush()
            raise SQLAlchemyError("mid-transaction failure")

    assert isinstance(info.value.__cause__, SQLAlchemyError)
    assert info.value.is_infrastructure
    assert count_rows(session_factory) == 0


def test_integrity_error_becomes_constraint_violation(session_factory):
    with pytest.raises(ConstraintViolationException) as info:
        with transaction(session_factory) as session:
            session.add(media_row())
            session.add(media_row())

    assert info.value.status_code == 409
    assert not info.value.is_infrastructure
    assert count_rows(session_factory) == 0


def test_session_closed_on_every_exit(tracking_factory):
    with transaction(tracking_factory):
        pass
    with pytest.raises(RuntimeError):
        with transaction(tracking_factory):
            raise RuntimeError("boom")
    with pytest.raises(TransactionFailureException):
        with transaction(tracking_factory):
            raise SQLAlchemyError("boom")

    assert TrackingSession.closed == 3


def test_unreachable_database_becomes_connection_failure(tmp_path):
    engine = create_engine(f"sqlite:///{tmp_path / 'missing' / 'media.db'}")
    repo = UserMediaRepository(sessionmaker(bind=engine))

    with pytest.raises(ConnectionFailureException) as info:
        repo.get_list(456, ListKind.WATCHLIST)

    assert info.value.status_code == 503
    engine.dispose()


def test_translate_db_errors_passes_app_exceptions():
    with pytest.raises(NotFoundException):
        with translate_db_errors():
            raise NotFoundException()



def test_upsert_rejects_unsupported_dialect():
    bind = SimpleNamespace(dialect=SimpleNamespace(name="mysql"))
    session = SimpleNamespace(get_bind=lambda: bind)

    with pytest.raises(ValueError, match="mysql"):
        upsert_statement(session, UserMedia)
