from typing import List
from fastapi import APIRouter, Depends, Path, Response, status
from sqlalchemy.orm import sessionmaker
from app.db import get_session_factory
from app.core.enums import ListKind
from app.core.exceptions import handle_exception
from app.repositories.user_media_repository import UserMediaRepository
from app.schemas.user_media import MediaItemCreate, MediaListItem

router = APIRouter(tags=["media lists"])

@router.get("/{user_id}/{kind}", response_model=List[MediaListItem])
def get_list(
    kind: ListKind,
    user_id: int = Path(..., gt=0),
    session_factory: sessionmaker = Depends(get_session_factory)
):
    """Get all items of a user's watchlist, favorites or watched list"""
    try:
        return UserMediaRepository(session_factory).get_list(user_id, kind)
    except Exception as e:
        raise handle_exception(e)

@router.post("/{user_id}/{kind}", response_model=MediaListItem, status_code=status.HTTP_201_CREATED)
def add_to_list(
    item: MediaItemCreate,
    kind: ListKind,
    user_id: int = Path(..., gt=0),
    session_factory: sessionmaker = Depends(get_session_factory)
):
    """Add an item to a list, or refresh its added date"""
    try:
        return UserMediaRepository(session_factory).add(user_id, item.media_id, item.media_type, kind)
    except Exception as e:
        raise handle_exception(e)

@router.delete("/{user_id}/{kind}/{media_id}", status_code=status.HTTP_204_NO_CONTENT)
def remove_from_list(
    kind: ListKind,
    user_id: int = Path(..., gt=0),
    media_id: str = Path(..., min_length=1, max_length=50),
    session_factory: sessionmaker = Depends(get_session_factory)
):
    """Remove a single item from a list"""
    try:
        UserMediaRepository(session_factory).remove(user_id, media_id, kind)
    except Exception as e:
        raise handle_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.delete("/{user_id}/{kind}", status_code=status.HTTP_204_NO_CONTENT)
def clear_list(
    kind: ListKind,
    user_id: int = Path(..., gt=0),
    session_factory: sessionmaker = Depends(get_session_factory)
):
    """Remove every item from a list"""
    try:
        UserMediaRepository(session_factory).remove_all(user_id, kind)
    except Exception as e:
        raise handle_exception(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
