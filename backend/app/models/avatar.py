from sqlalchemy import Column, Integer, String, Boolean, DateTime, ForeignKey, func, false
from app.db import Base

class Avatar(Base):
    __tablename__ = "avatars"
    avatar_id = Column(Integer, primary_key=True, autoincrement=False)
    avatar_name = Column(String(100), nullable=False)
    avatar_url = Column(String, nullable=False)
    is_default = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    def to_dict(self) -> dict:
        return {
            "avatar_id": self.avatar_id,
            "avatar_name": self.avatar_name,
            "avatar_url": self.avatar_url,
        }

class UserAvatar(Base):
    __tablename__ = "user_avatars"
    user_id = Column(Integer, primary_key=True, autoincrement=False)
    avatar_id = Column(Integer, ForeignKey("avatars.avatar_id"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now())
