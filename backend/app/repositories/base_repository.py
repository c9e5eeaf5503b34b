from datetime import datetime, timezone
from typing import Callable, Optional, Type
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session, sessionmaker
from app.db import Base

Clock = Callable[[], datetime]

def utc_now() -> datetime:
    return datetime.now(timezone.utc)

def upsert_statement(session: Session, model: Type[Base]):
    """INSERT construct supporting ON CONFLICT for the bound dialect"""
    dialect = session.get_bind().dialect.name
    if dialect == "postgresql":
        return postgresql.insert(model.__table__)
    if dialect == "sqlite":
        return sqlite.insert(model.__table__)
    raise ValueError(f"Upsert is not supported for database dialect '{dialect}'")

class BaseRepository:
    """Base repository bound to a session factory instead of a single session"""
    
    def __init__(self, session_factory: sessionmaker, clock: Optional[Clock] = None):
        self.session_factory = session_factory
        self.clock = clock or utc_now
