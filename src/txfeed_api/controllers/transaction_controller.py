"""
Transaction controller handling HTTP requests/responses only.
"""

from fastapi import APIRouter, Depends, status
from loguru import logger

from txfeed.services import TransactionPublisher, get_transaction_publisher
from txfeed_api.models.requests import PublishTransactionsRequest
from txfeed_api.models.responses import PublishResponse

router = APIRouter(
    prefix="/transactions",
    tags=["transactions"],
)


@router.post(
    "/publish",
    response_model=PublishResponse,
    status_code=status.HTTP_200_OK,
    summary="Publish transactions",
    description="Stamp each transaction with its close of business date and publish it "
    "to the configured topic. Records are processed in order; a record that exhausts "
    "its retries does not stop the rest of the batch. Requires X-API-Token header.",
    responses={
        401: {
            "description": "Authentication failed - Invalid or missing X-API-Token header"
        },
        422: {"description": "Validation error - Invalid transaction data"},
        503: {"description": "Service unavailable - API token not configured"},
    },
)
def publish_transactions(
    publish_request: PublishTransactionsRequest,
    publisher: TransactionPublisher = Depends(get_transaction_publisher),
):
    """Publish a batch; runs in the threadpool since retries block."""
    transactions = [item.to_transaction() for item in publish_request.transactions]
    logger.info(f"Received {len(transactions)} transaction(s) for publishing")

    publisher.publish(transactions)

    return PublishResponse(submitted=len(transactions), topic=publisher.topic)
