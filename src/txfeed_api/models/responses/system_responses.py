"""
System health and publishing response models.
"""

from datetime import datetime
from typing import Dict, Optional

from pydantic import BaseModel, Field

from txfeed import __version__


class HealthCheckResponse(BaseModel):
    """Health check response model."""

    status: str = Field("healthy", description="Service health status")
    timestamp: datetime = Field(default_factory=datetime.now)
    version: str = Field(__version__, description="API version")
    services: Dict[str, str] = Field(
        default_factory=dict, description="Status of dependent services"
    )
    topic: Optional[str] = Field(None, description="Topic the publisher writes to")


class PublishResponse(BaseModel):
    """Publish batch response model.

    Per-record failures are not reported here; they surface through logs and
    the ``transaction_records_total`` metric.
    """

    submitted: int = Field(..., description="Number of records handed to the publisher")
    topic: str = Field(..., description="Destination topic")
    message: str = Field("Batch processed", description="Summary of the operation")

    class Config:
        json_schema_extra = {
            "example": {
                "submitted": 2,
                "topic": "transactions",
                "message": "Batch processed",
            }
        }
