"""Utility modules for shared functionality."""

from .constants import (
    DEFAULT_DEDUP_CAPACITY,
    DEFAULT_POLL_INTERVAL,
    EVENTS_PAGE_SIZE,
    UPDATE_EVENT_KINDS,
)
from .retry import retry_on_rate_limit

__all__ = [
    "DEFAULT_DEDUP_CAPACITY",
    "DEFAULT_POLL_INTERVAL",
    "EVENTS_PAGE_SIZE",
    "UPDATE_EVENT_KINDS",
    "retry_on_rate_limit",
]
