"""
Test suite for transaction records and their JSON payload.
"""

import json
from datetime import date
from decimal import Decimal

import pytest

from txfeed.events import PublishedTransaction, Transaction
from txfeed.exceptions import TransactionValidationError
from txfeed.services import serialize, to_payload


def _full_transaction():
    return Transaction(
        ref_no="TX-1",
        ap_no="AP-9",
        cusip="037833100",
        quantity=Decimal("100"),
        amount=Decimal("17250.50"),
        settlement_date=date(2025, 4, 24),
        trade_date=date(2025, 4, 22),
        fmu="DTC",
    )


class TestTransactionModels:
    """Record construction and stamping."""

    def test_only_ref_no_is_required(self):
        transaction = Transaction(ref_no="TX-2")

        assert transaction.cusip is None
        assert transaction.amount is None

    @pytest.mark.parametrize("ref_no", ["", "   ", None])
    def test_blank_ref_no_is_rejected(self, ref_no):
        with pytest.raises(TransactionValidationError) as exc_info:
            Transaction(ref_no=ref_no)
        assert exc_info.value.field == "ref_no"

    def test_from_transaction_copies_every_field(self):
        transaction = _full_transaction()
        published = PublishedTransaction.from_transaction(transaction, "2025-04-22")

        assert published.close_of_business_date == "2025-04-22"
        assert published.to_transaction() == transaction

    def test_stamping_does_not_touch_the_input(self):
        transaction = Transaction(ref_no="TX-3")
        PublishedTransaction.from_transaction(transaction, "2025-04-22")

        assert not hasattr(transaction, "close_of_business_date")

    def test_close_of_business_date_must_be_iso(self):
        with pytest.raises(TransactionValidationError):
            PublishedTransaction(ref_no="TX-4", close_of_business_date="22/04/2025")

    @pytest.mark.parametrize(
        "stamped", ["20250422", "2025-W17-2", "2025-4-22", "2025-04-22T00:00", " 2025-04-22"]
    )
    def test_close_of_business_date_rejects_other_iso_forms(self, stamped):
        with pytest.raises(TransactionValidationError) as exc_info:
            PublishedTransaction(ref_no="TX-4", close_of_business_date=stamped)

        assert exc_info.value.field == "close_of_business_date"

    def test_close_of_business_date_must_exist(self):
        with pytest.raises(TransactionValidationError):
            PublishedTransaction(ref_no="TX-4", close_of_business_date="2025-02-30")


class TestSerialize:
    """Payload contract."""

    def test_full_record(self):
        published = PublishedTransaction.from_transaction(
            _full_transaction(), "2025-04-22"
        )

        assert json.loads(serialize(published)) == {
            "refNo": "TX-1",
            "apNo": "AP-9",
            "cusip": "037833100",
            "quantity": "100",
            "amount": "17250.50",
            "settlementDate": "2025-04-24",
            "tradeDate": "2025-04-22",
            "fmu": "DTC",
            "closeOfBusinessDate": "2025-04-22",
        }

    def test_absent_fields_are_omitted(self):
        published = PublishedTransaction(ref_no="TX-5", close_of_business_date="2025-04-22")

        assert serialize(published) == (
            '{"refNo":"TX-5","closeOfBusinessDate":"2025-04-22"}'
        )

    def test_key_order_is_fixed(self):
        published = PublishedTransaction(
            ref_no="TX-6",
            close_of_business_date="2025-04-22",
            fmu="DTC",
            cusip="037833100",
        )

        assert list(json.loads(serialize(published))) == [
            "refNo",
            "cusip",
            "fmu",
            "closeOfBusinessDate",
        ]

    def test_decimal_scale_is_preserved(self):
        published = PublishedTransaction(
            ref_no="TX-7", close_of_business_date="2025-04-22", amount=Decimal("10.00")
        )

        assert to_payload(published)["amount"] == "10.00"

    def test_repeated_calls_are_identical(self):
        published = PublishedTransaction.from_transaction(
            _full_transaction(), "2025-04-22"
        )

        assert len({serialize(published) for _ in range(10)}) == 1
