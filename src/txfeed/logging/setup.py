"""
Centralized logging configuration with request_id and ref_no propagation.
"""

from __future__ import annotations

import sys
from contextvars import ContextVar
from typing import Optional

from loguru import logger

from txfeed.config import config

CONTEXT_DEFAULT = "-"
_request_id_var: ContextVar[str] = ContextVar("request_id", default=CONTEXT_DEFAULT)
_ref_no_var: ContextVar[str] = ContextVar("ref_no", default=CONTEXT_DEFAULT)
_is_configured = False

LOG_FORMAT = (
    "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level:<8} | "
    "request_id={extra[request_id]} | ref_no={extra[ref_no]} | "
    "{name}:{function}:{line} - {message}"
)


def _patch_record(record):
    """Inject the contextual request_id and ref_no into every log record."""
    record["extra"]["request_id"] = _request_id_var.get(CONTEXT_DEFAULT)
    record["extra"]["ref_no"] = _ref_no_var.get(CONTEXT_DEFAULT)


def configure_logging(level: Optional[str] = None):
    """Configure Loguru once with the standard format and patcher."""
    global _is_configured
    log_level = (level or config.log_level).upper()

    if _is_configured:
        # Allow dynamic level updates by re-adding sink when requested
        logger.remove()
    else:
        logger.remove()
        logger.configure(
            extra={"request_id": CONTEXT_DEFAULT, "ref_no": CONTEXT_DEFAULT},
            patcher=_patch_record,
        )

    logger.add(
        sys.stdout,
        level=log_level,
        format=LOG_FORMAT,
        enqueue=True,
        backtrace=False,
        diagnose=False,
    )

    _is_configured = True


def set_request_id(request_id: Optional[str]) -> None:
    """Set the contextual request_id for subsequent log statements."""
    _request_id_var.set(request_id or CONTEXT_DEFAULT)


def clear_request_id() -> None:
    _request_id_var.set(CONTEXT_DEFAULT)


def get_request_id() -> str:
    return _request_id_var.get(CONTEXT_DEFAULT)


def set_ref_no(ref_no: Optional[str]) -> None:
    """Set the transaction reference number being processed."""
    _ref_no_var.set(ref_no or CONTEXT_DEFAULT)


def clear_ref_no() -> None:
    _ref_no_var.set(CONTEXT_DEFAULT)


def get_ref_no() -> str:
    return _ref_no_var.get(CONTEXT_DEFAULT)
