import logging
from typing import Optional, Dict, Any
from sqlalchemy import create_engine, text
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker, declarative_base
from dotenv import load_dotenv

from app.core.config import get_settings
from app.core.exceptions import ConnectionFailureException

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)

Base = declarative_base()

# Process-wide pool, owned by the application bootstrap
engine: Optional[Engine] = None
SessionLocal: Optional[sessionmaker] = None

def create_db_engine(url: Optional[str] = None, **overrides) -> Engine:
    """Build a pooled engine from settings"""
    settings = get_settings()
    url = url or settings.DATABASE_URL
    options: Dict[str, Any] = {"pool_pre_ping": True, "echo": settings.DB_ECHO}
    if not url.startswith("sqlite"):
        options.update(
            pool_size=settings.DB_POOL_SIZE,
            max_overflow=settings.DB_MAX_OVERFLOW,
            pool_timeout=settings.DB_POOL_TIMEOUT,
            pool_recycle=settings.DB_POOL_RECYCLE,
        )
    options.update(overrides)
    return create_engine(url, **options)

def make_session_factory(bind: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=bind)

def init_db(url: Optional[str] = None, **overrides) -> sessionmaker:
    """Initialize the connection pool once and test a connection"""
    global engine, SessionLocal
    if engine is not None:
        logger.warning("Database pool already exists, skipping initialization")
        return SessionLocal

    new_engine = create_db_engine(url, **overrides)
    try:
        with new_engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except SQLAlchemyError as e:
        new_engine.dispose()
        logger.error(f"Failed to connect to database: {type(e).__name__}")
        raise ConnectionFailureException("Failed to connect to database") from e

    engine = new_engine
    SessionLocal = make_session_factory(engine)
    logger.info("Connected to database")
    return SessionLocal

def dispose_db() -> None:
    """Close all pooled connections"""
    global engine, SessionLocal
    if engine is None:
        return
    engine.dispose()
    engine = None
    SessionLocal = None
    logger.info("Database connections closed")

def get_session_factory() -> sessionmaker:
    """Dependency to get the session factory"""
    if SessionLocal is None:
        raise RuntimeError("Database pool not initialized. Call init_db() first.")
    return SessionLocal

def get_pool_status() -> Dict[str, Any]:
    """Connection pool statistics for health reporting"""
    if engine is None:
        return {"connected": False}
    pool = engine.pool
    status = {"connected": True}
    for name in ("size", "checkedout", "overflow"):
        stat = getattr(pool, name, None)
        if callable(stat):
            status[name] = stat()
    return status
