from pydantic import BaseModel, Field

class AvatarResponse(BaseModel):
    avatar_id: int
    avatar_name: str
    avatar_url: str

class AvatarUpdate(BaseModel):
    avatar_id: int = Field(..., gt=0)
