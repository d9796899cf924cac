"""Utility modules for Hevy Trainer."""

from .dates import (
    Timeframe,
    get_start_date_for_timeframe,
    is_within_range,
    parse_date_bound,
)
from .validation import (
    MAX_PAGE_SIZE,
    validate_limit,
    validate_pagination,
    validate_search_term,
)

__all__ = [
    "Timeframe",
    "get_start_date_for_timeframe",
    "is_within_range",
    "parse_date_bound",
    "MAX_PAGE_SIZE",
    "validate_limit",
    "validate_pagination",
    "validate_search_term",
]
