import logging
from fastapi import HTTPException, status

logger = logging.getLogger(__name__)

class BaseAppException(Exception):
    """Base exception for application"""
    error_code = "INTERNAL_ERROR"

    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

    @property
    def is_infrastructure(self) -> bool:
        """True when the caller cannot fix the request and may retry it"""
        return self.status_code >= 500

    def to_dict(self):
        """Return error response as dictionary with error code"""
        return {
            "error": self.message,
            "code": self.error_code,
            "status_code": self.status_code
        }

class NotFoundException(BaseAppException):
    """Raised when a referenced record does not exist"""
    error_code = "NOT_FOUND"

    def __init__(self, message: str = "Resource not found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)

class ConstraintViolationException(BaseAppException):
    """Raised when a write violates a database constraint"""
    error_code = "CONFLICT"

    def __init__(self, message: str = "Constraint violation"):
        super().__init__(message, status.HTTP_409_CONFLICT)

class TransactionFailureException(BaseAppException):
    """Raised when a transaction fails and has been rolled back"""
    error_code = "TRANSACTION_FAILED"

    def __init__(self, message: str = "Transaction failed"):
        super().__init__(message, status.HTTP_500_INTERNAL_SERVER_ERROR)

class ConnectionFailureException(BaseAppException):
    """Raised when no database connection can be acquired or it is lost"""
    error_code = "DATABASE_UNAVAILABLE"

    def __init__(self, message: str = "Database connection failed"):
        super().__init__(message, status.HTTP_503_SERVICE_UNAVAILABLE)

def handle_exception(e: Exception) -> HTTPException:
    """Handle exceptions and convert to HTTPException"""
    if isinstance(e, HTTPException):
        return e
    if isinstance(e, BaseAppException):
        if e.is_infrastructure:
            logger.error(f"{type(e).__name__}: {e.message}")
        return HTTPException(
            status_code=e.status_code,
            detail=e.to_dict()
        )
    logger.exception("Unhandled error")
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail="An internal server error occurred"
    )
