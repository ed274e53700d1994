"""Utility functions."""

from .formatting import (
    format_discount,
    format_price,
    format_rating,
    format_status,
    truncate_text,
)
from .scrolling import last_visible_index, should_fetch_more

__all__ = [
    "format_discount",
    "format_price",
    "format_rating",
    "format_status",
    "truncate_text",
    "last_visible_index",
    "should_fetch_more",
]
