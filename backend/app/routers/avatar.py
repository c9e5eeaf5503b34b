from typing import List
from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import sessionmaker
from app.db import get_session_factory
from app.core.exceptions import handle_exception
from app.repositories.avatar_repository import AvatarRepository
from app.schemas.avatar import AvatarResponse, AvatarUpdate

router = APIRouter(tags=["avatar"])

@router.get("/avatar/all", response_model=List[AvatarResponse])
def get_all_avatars(session_factory: sessionmaker = Depends(get_session_factory)):
    """Get all available avatars"""
    try:
        return AvatarRepository(session_factory).list_catalog()
    except Exception as e:
        raise handle_exception(e)

@router.get("/{user_id}/avatar", response_model=AvatarResponse)
def get_user_avatar(
    user_id: int = Path(..., gt=0),
    session_factory: sessionmaker = Depends(get_session_factory)
):
    """Get the user's avatar, or the default one"""
    try:
        return AvatarRepository(session_factory).get_assignment(user_id)
    except Exception as e:
        raise handle_exception(e)

@router.patch("/{user_id}/avatar", response_model=AvatarResponse)
def update_user_avatar(
    body: AvatarUpdate,
    user_id: int = Path(..., gt=0),
    session_factory: sessionmaker = Depends(get_session_factory)
):
    """Change the user's avatar"""
    try:
        return AvatarRepository(session_factory).set_assignment(user_id, body.avatar_id)
    except Exception as e:
        raise handle_exception(e)
