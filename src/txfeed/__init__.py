"""
Core package for the txfeed transaction publisher.
Contains the publisher, its retry policy and the business calendar.
"""

import txfeed.logging  # noqa: F401  Ensures logging is configured
from txfeed.config import config
from txfeed.events import PublishedTransaction, Transaction
from txfeed.services import RetryState, TransactionPublisher
from txfeed.utils import BusinessCalendar, previous_business_day

__version__ = "1.0.0"

__all__ = [
    "config",
    "BusinessCalendar",
    "PublishedTransaction",
    "RetryState",
    "Transaction",
    "TransactionPublisher",
    "previous_business_day",
]
