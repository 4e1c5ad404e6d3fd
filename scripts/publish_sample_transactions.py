#!/usr/bin/env python3
"""
Simple helper to manually publish a few sample transactions to Kafka.

Usage:
    python scripts/publish_sample_transactions.py [topic]

Uses KAFKA_BOOTSTRAP_SERVERS and TXFEED_TOPIC from the environment (.env is
honoured). Records that cannot be published are listed at the end.
"""

from __future__ import annotations

import sys
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import List

from loguru import logger

# Ensure src/ is on sys.path when running the script directly
REPO_ROOT = Path(__file__).resolve().parents[1]
SRC_PATH = REPO_ROOT / "src"
if SRC_PATH.exists():
    sys.path.append(str(SRC_PATH))

from txfeed.config import config  # noqa: E402
from txfeed.events import Transaction  # noqa: E402
from txfeed.messaging import KafkaMessagingClient  # noqa: E402
from txfeed.services import TransactionPublisher  # noqa: E402
from txfeed.utils import SystemClock  # noqa: E402


def _sample_transactions() -> List[Transaction]:
    today = date.today()
    return [
        Transaction(
            ref_no="SAMPLE-0001",
            ap_no="AP-100",
            cusip="037833100",
            quantity=Decimal("100"),
            amount=Decimal("17250.00"),
            settlement_date=today,
            trade_date=today,
            fmu="DTC",
        ),
        Transaction(ref_no="SAMPLE-0002", cusip="594918104"),
        Transaction(ref_no="SAMPLE-0003"),
    ]


def main(argv: List[str]) -> int:
    topic = argv[1] if len(argv) > 1 else config.kafka.topic
    failed: List[str] = []

    client = KafkaMessagingClient()
    publisher = TransactionPublisher(
        client,
        topic,
        SystemClock(),
        on_abandoned=lambda record, outcome, error: failed.append(record.ref_no),
    )

    try:
        publisher.publish(_sample_transactions())
    finally:
        client.close()

    if failed:
        logger.error(f"Not published: {', '.join(failed)}")
        return 1

    logger.info(f"All sample transactions published to {topic}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv))
