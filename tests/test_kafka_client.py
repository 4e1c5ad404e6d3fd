"""
Test suite for the Kafka messaging client.
"""

from unittest.mock import Mock, patch

import pytest
from kafka.errors import KafkaTimeoutError, NoBrokersAvailable

from txfeed.exceptions import ExceptionCode, PublishError
from txfeed.messaging import KafkaMessagingClient


@pytest.fixture
def producer_cls():
    with patch("txfeed.messaging.kafka_producer.KafkaProducer") as mock_cls:
        yield mock_cls


def _client():
    return KafkaMessagingClient(
        bootstrap_servers="broker:9092", client_id="txfeed-test", send_timeout_seconds=2
    )


class TestKafkaMessagingClient:
    """Result values instead of raised errors."""

    def test_successful_send_returns_ok(self, producer_cls):
        metadata = Mock(topic="transactions", partition=0, offset=42)
        producer_cls.return_value.send.return_value.get.return_value = metadata

        result = _client().publish("transactions", '{"refNo":"TX-1"}')

        assert result.is_success
        assert result.metadata is metadata
        producer_cls.return_value.send.assert_called_once_with(
            "transactions", value='{"refNo":"TX-1"}'
        )
        producer_cls.return_value.send.return_value.get.assert_called_once_with(
            timeout=2
        )

    def test_producer_is_created_lazily_once(self, producer_cls):
        client = _client()
        producer_cls.assert_not_called()

        client.publish("transactions", "{}")
        client.publish("transactions", "{}")

        producer_cls.assert_called_once()
        kwargs = producer_cls.call_args.kwargs
        assert kwargs["bootstrap_servers"] == "broker:9092"
        assert kwargs["client_id"] == "txfeed-test"
        assert kwargs["value_serializer"]("é") == "é".encode("utf-8")

    def test_timeout_becomes_failed_result(self, producer_cls):
        producer_cls.return_value.send.return_value.get.side_effect = (
            KafkaTimeoutError("no ack")
        )

        result = _client().publish("transactions", "{}")

        assert result.is_failure
        assert isinstance(result.error, PublishError)
        assert result.error.code == ExceptionCode.PUBLISH_TIMEOUT.value
        assert result.error.topic == "transactions"

    def test_unreachable_broker_becomes_failed_result(self, producer_cls):
        producer_cls.side_effect = NoBrokersAvailable()

        result = _client().publish("transactions", "{}")

        assert result.is_failure
        assert result.error.code == ExceptionCode.PUBLISH_FAILED.value
        assert isinstance(result.error.original_exception, NoBrokersAvailable)

    def test_unexpected_error_becomes_failed_result(self, producer_cls):
        producer_cls.return_value.send.side_effect = RuntimeError("boom")

        result = _client().publish("transactions", "{}")

        assert result.is_failure
        assert "boom" in result.error.message

    def test_close_releases_producer(self, producer_cls):
        client = _client()
        client.publish("transactions", "{}")

        client.close()

        producer_cls.return_value.close.assert_called_once()
        assert client._producer is None

    def test_close_without_producer_is_safe(self, producer_cls):
        client = _client()
        client.close()
        producer_cls.return_value.close.assert_not_called()

    def test_not_connected_before_first_publish(self, producer_cls):
        assert _client().is_connected() is False

    def test_connection_state_comes_from_producer(self, producer_cls):
        producer_cls.return_value.bootstrap_connected.return_value = True
        client = _client()
        client.publish("transactions", "{}")

        assert client.is_connected() is True

        producer_cls.return_value.bootstrap_connected.return_value = False
        assert client.is_connected() is False
