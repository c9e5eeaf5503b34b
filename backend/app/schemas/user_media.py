from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from app.core.enums import ListKind, MediaType

class MediaItemCreate(BaseModel):
    media_id: str = Field(..., min_length=1, max_length=50, description="External catalog id, e.g. tt1234567")
    media_type: MediaType

    @field_validator("media_id", mode="before")
    @classmethod
    def strip_media_id(cls, value):
        return value.strip() if isinstance(value, str) else value

class MediaListItem(BaseModel):
    """One entry of a user list"""
    id: str
    source_text: ListKind
    user_id: int
    media_type: MediaType
    media_id: str
    added_at: datetime
