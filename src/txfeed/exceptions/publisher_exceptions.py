"""
Publisher related exceptions.
"""

from datetime import date, datetime
from typing import Optional, Union

from txfeed.exceptions.base_exceptions import (
    BusinessException,
    ExceptionCode,
    ExternalServiceException,
    SystemException,
)


class InvalidRetryStateError(SystemException):
    """Raised when a retry state breaks its invariants (attempt < 1, negative delay)."""

    def __init__(self, attempt: int, max_attempts: int, delay_millis: int):
        super().__init__(
            message=(
                f"Invalid retry state: attempt={attempt}, "
                f"max_attempts={max_attempts}, delay_millis={delay_millis}"
            ),
            code=ExceptionCode.INVALID_RETRY_STATE,
            details={
                "attempt": attempt,
                "max_attempts": max_attempts,
                "delay_millis": delay_millis,
            },
        )


class ConfigurationError(SystemException):
    """Raised when a configured value is unusable (unknown timezone, missing hosts)."""

    def __init__(self, setting: str, message: str, original_exception: Exception = None):
        self.setting = setting
        super().__init__(
            message=f"Invalid configuration for {setting}: {message}",
            code=ExceptionCode.CONFIGURATION_ERROR,
            details={"setting": setting},
            original_exception=original_exception,
        )


class TransactionValidationError(BusinessException):
    """Raised when a transaction record cannot be built."""

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(
            message=f"Invalid transaction field '{field}': {message}",
            code=ExceptionCode.VALIDATION_ERROR,
            details={"field": field},
        )


class CalendarError(BusinessException):
    """Raised when a business date cannot be computed."""

    def __init__(
        self,
        message: str,
        now: Optional[Union[datetime, date]] = None,
    ):
        super().__init__(
            message=message,
            code=ExceptionCode.VALIDATION_ERROR,
            details={"now": str(now) if now is not None else None},
        )


class PublishError(ExternalServiceException):
    """Failure reported by a messaging client.

    Carried inside a failed ``PublishResult``; the publisher consumes it and
    never raises it to callers.
    """

    def __init__(
        self,
        topic: str,
        message: str = "Failed to publish message",
        timeout: bool = False,
        original_exception: Exception = None,
    ):
        self.topic = topic
        super().__init__(
            message=message,
            code=(
                ExceptionCode.PUBLISH_TIMEOUT if timeout else ExceptionCode.PUBLISH_FAILED
            ),
            details={"topic": topic},
            original_exception=original_exception,
        )
