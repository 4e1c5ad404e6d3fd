"""
Logging helpers for the txfeed package.
"""

from txfeed.logging.setup import (
    clear_ref_no,
    clear_request_id,
    configure_logging,
    get_ref_no,
    get_request_id,
    set_ref_no,
    set_request_id,
)

configure_logging()

__all__ = [
    "configure_logging",
    "set_request_id",
    "clear_request_id",
    "get_request_id",
    "set_ref_no",
    "clear_ref_no",
    "get_ref_no",
]
