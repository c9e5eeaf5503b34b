"""Transaction scope shared by the repositories.

``transaction`` borrows a session from the factory, commits when the block
finishes, rolls back on any exception and always hands the connection back
to the pool. Database errors leave the block as application exceptions.
"""
import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.exc import (
    DisconnectionError, IntegrityError, InterfaceError, OperationalError,
    SQLAlchemyError, TimeoutError as PoolTimeoutError,
)
from sqlalchemy.orm import Session, sessionmaker

from app.core.exceptions import (
    BaseAppException, ConnectionFailureException,
    ConstraintViolationException, TransactionFailureException,
)

logger = logging.getLogger(__name__)

@contextmanager
def translate_db_errors() -> Iterator[None]:
    """Map SQLAlchemy errors onto the application error kinds"""
    try:
        yield
    except BaseAppException:
        raise
    except IntegrityError as e:
        raise ConstraintViolationException(f"Constraint violation: {e.orig}") from e
    except (OperationalError, InterfaceError, DisconnectionError, PoolTimeoutError) as e:
        raise ConnectionFailureException(f"Database connection failed: {type(e).__name__}") from e
    except SQLAlchemyError as e:
        raise TransactionFailureException(f"Transaction failed: {type(e).__name__}") from e

@contextmanager
def transaction(session_factory: sessionmaker) -> Iterator[Session]:
    """Run the block in one transaction on a pooled connection"""
    session = session_factory()
    try:
        with translate_db_errors():
            yield session
            session.commit()
    except Exception as e:
        logger.warning(f"Rolling back transaction after {type(e).__name__}")
        try:
            session.rollback()
        except SQLAlchemyError:
            logger.exception("Rollback failed")
        raise
    finally:
        session.close()
