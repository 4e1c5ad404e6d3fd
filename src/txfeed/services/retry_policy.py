"""
Retry policy for publishing a single transaction record.
"""

from dataclasses import dataclass
from enum import Enum

from txfeed.config import DEFAULT_DELAY_MILLIS, DEFAULT_MAX_ATTEMPTS, config
from txfeed.exceptions import InvalidRetryStateError


class RetryPhase(Enum):
    """Phase of a retry state, derived from its counters."""

    CAN_RETRY = "can_retry"
    LAST_TRY = "last_try"
    EXHAUSTED = "exhausted"


@dataclass(frozen=True)
class RetryState:
    """
    Immutable retry bookkeeping for one record.

    Attributes:
        attempt: Current attempt number, starting at 1
        max_attempts: Inclusive ceiling on attempts
        delay_millis: Delay to sleep before the next attempt
    """

    attempt: int = 1
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    delay_millis: int = DEFAULT_DELAY_MILLIS

    def __post_init__(self):
        if self.attempt < 1 or self.delay_millis < 0:
            raise InvalidRetryStateError(
                self.attempt, self.max_attempts, self.delay_millis
            )

    @property
    def is_exhausted(self) -> bool:
        return self.attempt > self.max_attempts

    @property
    def is_last_try(self) -> bool:
        return self.attempt == self.max_attempts

    @property
    def phase(self) -> RetryPhase:
        if self.is_exhausted:
            return RetryPhase.EXHAUSTED
        if self.is_last_try:
            return RetryPhase.LAST_TRY
        return RetryPhase.CAN_RETRY

    @property
    def delay_seconds(self) -> float:
        return self.delay_millis / 1000.0

    def next(self) -> "RetryState":
        """Following attempt, with the back-off delay doubled."""
        return RetryState(
            attempt=self.attempt + 1,
            max_attempts=self.max_attempts,
            delay_millis=self.delay_millis * 2,
        )


DEFAULT_RETRY_STATE = RetryState()


def default_retry_state() -> RetryState:
    """Fresh first-attempt state using the configured limits."""
    return RetryState(
        attempt=1,
        max_attempts=config.retry.max_attempts,
        delay_millis=config.retry.delay_millis,
    )
