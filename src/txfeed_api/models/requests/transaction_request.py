"""
Transaction publishing request models.
"""

from datetime import date
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from txfeed.events import Transaction


class TransactionPayload(BaseModel):
    """A single raw transaction as received over HTTP (camelCase keys)."""

    ref_no: str = Field(..., alias="refNo", min_length=1, description="Unique reference")
    ap_no: Optional[str] = Field(None, alias="apNo")
    cusip: Optional[str] = Field(None, description="CUSIP security identifier")
    quantity: Optional[Decimal] = None
    amount: Optional[Decimal] = None
    settlement_date: Optional[date] = Field(None, alias="settlementDate")
    trade_date: Optional[date] = Field(None, alias="tradeDate")
    fmu: Optional[str] = Field(None, description="FMU identifier")

    class Config:
        populate_by_name = True

    def to_transaction(self) -> Transaction:
        return Transaction(
            ref_no=self.ref_no,
            ap_no=self.ap_no,
            cusip=self.cusip,
            quantity=self.quantity,
            amount=self.amount,
            settlement_date=self.settlement_date,
            trade_date=self.trade_date,
            fmu=self.fmu,
        )


class PublishTransactionsRequest(BaseModel):
    """Batch of transactions to stamp and publish."""

    transactions: List[TransactionPayload] = Field(..., min_length=1)

    class Config:
        json_schema_extra = {
            "example": {
                "transactions": [
                    {
                        "refNo": "TX-20250423-0001",
                        "apNo": "AP-778",
                        "cusip": "037833100",
                        "quantity": "100",
                        "amount": "17250.00",
                        "settlementDate": "2025-04-24",
                        "tradeDate": "2025-04-22",
                        "fmu": "DTC",
                    }
                ]
            }
        }
