import pytest
from sqlalchemy import func, select, update

from app.core.exceptions import NotFoundException
from app.models import Avatar, UserAvatar
from app.seed import DEFAULT_AVATARS, seed_avatars

USER = 456


def assignment_count(session_factory, user_id):
    with session_factory() as session:
        return session.execute(
            select(func.count()).select_from(UserAvatar).where(UserAvatar.user_id == user_id)
        ).scalar_one()


def test_list_catalog_ordered_by_id(avatar_repo):
    catalog = avatar_repo.list_catalog()

    assert [a["avatar_id"] for a in catalog] == sorted(a["avatar_id"] for a in DEFAULT_AVATARS)
    assert set(catalog[0]) == {"avatar_id", "avatar_name", "avatar_url"}


def test_get_assignment_falls_back_to_default(avatar_repo, session_factory):
    avatar = avatar_repo.get_assignment(USER)

    assert avatar["avatar_id"] == 1
    assert assignment_count(session_factory, USER) == 0


def test_set_assignment_then_get(avatar_repo):
    assigned = avatar_repo.set_assignment(USER, 5)

    assert assigned == {"avatar_id": 5, "avatar_name": "Director", "avatar_url": "/avatars/director.png"}
    assert avatar_repo.get_assignment(USER) == assigned


def test_set_assignment_updates_single_row(avatar_repo, session_factory, clock):
    avatar_repo.set_assignment(USER, 2)
    avatar_repo.set_assignment(USER, 3)

    assert assignment_count(session_factory, USER) == 1
    assert avatar_repo.get_assignment(USER)["avatar_id"] == 3
    with session_factory() as session:
        row = session.get(UserAvatar, USER)
        assert row.updated_at == clock.current
        assert row.created_at < row.updated_at


def test_set_unknown_avatar_leaves_assignment(avatar_repo, session_factory):
    avatar_repo.set_assignment(USER, 5)

    with pytest.raises(NotFoundException):
        avatar_repo.set_assignment(USER, 999)

    assert avatar_repo.get_assignment(USER)["avatar_id"] == 5
    assert assignment_count(session_factory, USER) == 1


def test_set_unknown_avatar_creates_nothing(avatar_repo, session_factory):
    with pytest.raises(NotFoundException):
        avatar_repo.set_assignment(USER, 999)

    assert assignment_count(session_factory, USER) == 0


def test_get_assignment_without_default_raises(avatar_repo, session_factory):
    with session_factory() as session:
        session.execute(update(Avatar).values(is_default=False))
        session.commit()

    with pytest.raises(NotFoundException):
        avatar_repo.get_assignment(USER)


def test_assignment_wins_over_default(avatar_repo):
    avatar_repo.set_assignment(USER, 4)

    assert avatar_repo.get_assignment(USER)["avatar_id"] == 4
    assert avatar_repo.get_assignment(789)["avatar_id"] == 1


def test_seed_is_idempotent(session_factory):
    assert seed_avatars(session_factory) == len(DEFAULT_AVATARS)
    assert seed_avatars(session_factory) == 0
