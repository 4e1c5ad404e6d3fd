"""
Exception module for the txfeed publisher.
Contains custom exceptions for different error types.
"""

from txfeed.exceptions.base_exceptions import BaseException as BaseTxFeedException
from txfeed.exceptions.base_exceptions import (
    BusinessException,
    ExceptionCode,
    ExternalServiceException,
    SystemException,
)
from txfeed.exceptions.publisher_exceptions import (
    CalendarError,
    ConfigurationError,
    InvalidRetryStateError,
    PublishError,
    TransactionValidationError,
)

__all__ = [
    "BaseTxFeedException",
    "BusinessException",
    "SystemException",
    "ExternalServiceException",
    "ExceptionCode",
    "CalendarError",
    "ConfigurationError",
    "InvalidRetryStateError",
    "PublishError",
    "TransactionValidationError",
]
