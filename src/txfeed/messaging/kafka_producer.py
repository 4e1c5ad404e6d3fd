"""
Kafka messaging client for transaction payloads.
"""

from typing import Optional

from kafka import KafkaProducer
from kafka.errors import KafkaError, KafkaTimeoutError
from loguru import logger

from txfeed.config import config
from txfeed.exceptions import PublishError
from txfeed.messaging.result import PublishResult


class KafkaMessagingClient:
    """Synchronous Kafka client: every publish waits for the broker ack."""

    def __init__(
        self,
        bootstrap_servers: str = None,
        client_id: str = None,
        send_timeout_seconds: float = None,
    ):
        self.bootstrap_servers = bootstrap_servers or config.kafka.bootstrap_servers
        self.client_id = client_id or config.kafka.client_id
        self.send_timeout_seconds = (
            send_timeout_seconds
            if send_timeout_seconds is not None
            else config.kafka.send_timeout_seconds
        )
        self._producer: Optional[KafkaProducer] = None

    def _get_producer(self) -> KafkaProducer:
        """Get or create Kafka producer instance."""
        if self._producer is None:
            # Retries are handled by TransactionPublisher, not the producer
            self._producer = KafkaProducer(
                bootstrap_servers=self.bootstrap_servers,
                client_id=self.client_id,
                value_serializer=lambda v: v.encode("utf-8"),
                retries=0,
                acks="all",
            )
            logger.info(f"Kafka producer connected to {self.bootstrap_servers}")
        return self._producer

    def is_connected(self) -> bool:
        """True once a producer exists and reaches a bootstrap broker."""
        return self._producer is not None and self._producer.bootstrap_connected()

    def publish(self, topic: str, payload: str) -> PublishResult:
        """Send ``payload`` to ``topic`` and wait for the acknowledgment."""
        try:
            producer = self._get_producer()
            future = producer.send(topic, value=payload)
            record_metadata = future.get(timeout=self.send_timeout_seconds)

            logger.debug(
                f"Message published: topic={record_metadata.topic}, "
                f"partition={record_metadata.partition}, offset={record_metadata.offset}"
            )
            return PublishResult.ok(record_metadata)

        except KafkaTimeoutError as e:
            logger.warning(f"Timed out publishing to {topic}: {e}")
            return PublishResult.failed(
                PublishError(
                    topic,
                    f"Timed out after {self.send_timeout_seconds}s",
                    timeout=True,
                    original_exception=e,
                )
            )
        except KafkaError as e:
            logger.warning(f"Kafka error publishing to {topic}: {e}")
            return PublishResult.failed(
                PublishError(topic, f"Kafka error: {e}", original_exception=e)
            )
        except Exception as e:
            logger.error(f"Error publishing to {topic}: {e}")
            return PublishResult.failed(
                PublishError(topic, str(e), original_exception=e)
            )

    def close(self):
        """Close the Kafka producer."""
        if self._producer:
            try:
                self._producer.close()
                logger.info("Kafka producer closed")
            except Exception as e:
                logger.error(f"Error closing Kafka producer: {e}")
            finally:
                self._producer = None


# Global client instance
_kafka_client: Optional[KafkaMessagingClient] = None


def get_kafka_client() -> KafkaMessagingClient:
    """Get the global Kafka client instance."""
    global _kafka_client
    if _kafka_client is None:
        _kafka_client = KafkaMessagingClient()
    return _kafka_client


def close_kafka_client() -> None:
    """Close and forget the global Kafka client."""
    global _kafka_client
    if _kafka_client is not None:
        _kafka_client.close()
        _kafka_client = None
