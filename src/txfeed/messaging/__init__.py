"""
Messaging module for Kafka integration.
"""

from txfeed.messaging.kafka_producer import (
    KafkaMessagingClient,
    close_kafka_client,
    get_kafka_client,
)
from txfeed.messaging.result import MessagingClient, PublishResult

__all__ = [
    "KafkaMessagingClient",
    "MessagingClient",
    "PublishResult",
    "close_kafka_client",
    "get_kafka_client",
]
