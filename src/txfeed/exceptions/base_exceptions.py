"""
Base exception classes for the txfeed publisher.
"""

from enum import Enum
from typing import Optional


class ExceptionCode(Enum):
    """Enumeration of all possible exception codes."""

    # Business rule errors (BIZ_XXXX)
    VALIDATION_ERROR = "BIZ_2003"

    # Publishing errors (PUB_XXXX)
    PUBLISH_FAILED = "PUB_3001"
    PUBLISH_TIMEOUT = "PUB_3002"

    # System errors (SYS_XXXX)
    CONFIGURATION_ERROR = "SYS_4001"
    INVALID_RETRY_STATE = "SYS_4006"


class BaseException(Exception):
    """Base exception for the txfeed publisher."""

    def __init__(
        self,
        message: str,
        code: ExceptionCode,
        details: Optional[dict] = None,
        original_exception: Optional[Exception] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code.value
        self.details = details or {}
        self.original_exception = original_exception

    def __str__(self):
        return f"[{self.code}] {self.message}"

    def to_dict(self):
        """Convert exception to dictionary for serialization."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "original_exception_type": (
                type(self.original_exception).__name__
                if self.original_exception
                else None
            ),
        }


class BusinessException(BaseException):
    """Base exception for business rule violations."""

    pass


class SystemException(BaseException):
    """Base exception for system-level errors."""

    pass


class ExternalServiceException(BaseException):
    """Base exception for external service-related errors."""

    pass
