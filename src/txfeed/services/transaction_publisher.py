"""
Transaction publisher with bounded exponential back-off.
"""

import time
from enum import Enum
from typing import Callable, Optional, Sequence, Union

from loguru import logger

from txfeed.config import config
from txfeed.events import PublishedTransaction, Transaction
from txfeed.exceptions import PublishError
from txfeed.logging import clear_ref_no, set_ref_no
from txfeed.messaging import MessagingClient, get_kafka_client
from txfeed.observability import (
    record_publish_attempt,
    record_retry_backoff,
    record_transaction_outcome,
)
from txfeed.services.record_serializer import serialize
from txfeed.services.retry_policy import RetryState, default_retry_state
from txfeed.utils import BusinessCalendar, Clock, SystemClock
from txfeed.utils.business_calendar import Zone


class RecordOutcome(Enum):
    """How a single record was settled."""

    PUBLISHED = "published"
    ABANDONED = "abandoned"  # last try failed
    EXHAUSTED = "exhausted"  # retry budget already spent, nothing sent


AbandonedHandler = Callable[
    [PublishedTransaction, RecordOutcome, Optional[PublishError]], None
]


class TransactionPublisher:
    """Publishes transaction records to a topic, one record at a time.

    Failures never reach the caller: each record is retried until it is
    published or its retry budget runs out, and the batch moves on either way.
    """

    def __init__(
        self,
        client: MessagingClient,
        topic: str,
        clock: Clock,
        *,
        zone: Optional[Zone] = None,
        sleep: Callable[[float], None] = time.sleep,
        default_retry: Optional[RetryState] = None,
        on_abandoned: Optional[AbandonedHandler] = None,
    ):
        """
        Initialize the publisher.

        Args:
            client: Messaging client exposing ``publish(topic, payload)``
            topic: Destination topic for every record
            clock: Source of "now" for close of business stamping
            zone: Timezone for the business calendar, defaults to configuration
            sleep: Blocking sleep taking seconds
            default_retry: Starting retry state for each record
            on_abandoned: Called for every record that is given up on
        """
        self._client = client
        self._topic = topic
        self._clock = clock
        self._calendar = BusinessCalendar(zone or config.calendar.timezone)
        self._sleep = sleep
        self._default_retry = default_retry
        self._on_abandoned = on_abandoned

    @property
    def topic(self) -> str:
        return self._topic

    @property
    def client(self) -> MessagingClient:
        return self._client

    def default_retry(self) -> RetryState:
        """Starting state for a record when none is supplied."""
        return self._default_retry or default_retry_state()

    def stamp(self, transaction: Transaction) -> PublishedTransaction:
        """Attach the close of business date for the publisher's current instant."""
        cob_date = self._calendar.close_of_business_date(self._clock)
        return PublishedTransaction.from_transaction(transaction, cob_date)

    def publish(
        self, records: Sequence[Union[Transaction, PublishedTransaction]]
    ) -> None:
        """Stamp and publish a batch of raw transactions."""
        stamped = [
            record if isinstance(record, PublishedTransaction) else self.stamp(record)
            for record in records
        ]
        logger.info(f"Publishing {len(stamped)} transaction(s) to {self._topic}")
        self.publish_stamped(stamped)

    def publish_one(self, record: PublishedTransaction) -> None:
        """Publish a single already-stamped record."""
        self.publish_stamped([record])

    def publish_stamped(
        self,
        records: Sequence[PublishedTransaction],
        index: int = 0,
        retry: Optional[RetryState] = None,
    ) -> None:
        """
        Publish ``records`` starting at ``index``.

        ``retry`` applies to ``records[index]`` only; every later record
        starts from a fresh default state.
        """
        if index < 0:
            raise ValueError(f"index must be >= 0, got {index}")

        state = retry
        for position in range(index, len(records)):
            self._publish_record(records[position], state or self.default_retry())
            state = None

    def _publish_record(
        self, record: PublishedTransaction, retry: RetryState
    ) -> RecordOutcome:
        set_ref_no(record.ref_no)
        try:
            payload = serialize(record)
            state = retry
            while True:
                if state.is_exhausted:
                    logger.warning(
                        f"Retry budget already spent (attempt {state.attempt} of "
                        f"{state.max_attempts}), record not sent"
                    )
                    return self._settle(record, RecordOutcome.EXHAUSTED, None)

                result = self._client.publish(self._topic, payload)
                if result.is_success:
                    record_publish_attempt(self._topic, "success")
                    logger.info(
                        f"Published record on attempt {state.attempt}, "
                        f"close of business {record.close_of_business_date}"
                    )
                    return self._settle(record, RecordOutcome.PUBLISHED, None)

                record_publish_attempt(self._topic, "failed")
                if state.is_last_try:
                    logger.error(
                        f"Giving up after attempt {state.attempt} of "
                        f"{state.max_attempts}: {result.error}"
                    )
                    return self._settle(record, RecordOutcome.ABANDONED, result.error)

                logger.warning(
                    f"Attempt {state.attempt} of {state.max_attempts} failed: "
                    f"{result.error}; retrying in {state.delay_millis} ms"
                )
                record_retry_backoff(self._topic, state.delay_seconds)
                self._sleep(state.delay_seconds)
                state = state.next()
        finally:
            clear_ref_no()

    def _settle(
        self,
        record: PublishedTransaction,
        outcome: RecordOutcome,
        error: Optional[PublishError],
    ) -> RecordOutcome:
        record_transaction_outcome(self._topic, outcome.value)
        if outcome is not RecordOutcome.PUBLISHED and self._on_abandoned:
            self._on_abandoned(record, outcome, error)
        return outcome


# Global publisher instance
_transaction_publisher: Optional[TransactionPublisher] = None


def get_transaction_publisher() -> TransactionPublisher:
    """Get the global publisher wired to Kafka and the system clock."""
    global _transaction_publisher
    if _transaction_publisher is None:
        _transaction_publisher = TransactionPublisher(
            client=get_kafka_client(),
            topic=config.kafka.topic,
            clock=SystemClock(),
        )
    return _transaction_publisher
