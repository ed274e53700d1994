"""Infinite scroll trigger policy."""

import math

DEFAULT_PREFETCH_THRESHOLD = 3


def should_fetch_more(
    total_rendered_items: int,
    last_visible_index: int,
    threshold: int = DEFAULT_PREFETCH_THRESHOLD,
) -> bool:
    """Return True when the viewport is within ``threshold`` rows of the end.

    This only signals intent; the controller decides whether a fetch starts.
    """
    if total_rendered_items <= 0:
        return False
    return last_visible_index >= total_rendered_items - threshold


def last_visible_index(
    scroll_value: float,
    page_height: float,
    content_height: float,
    item_count: int,
) -> int:
    """Estimate the index of the last visible row from adjustment values.

    Assumes rows of uniform height. Returns -1 for an empty list.
    """
    if item_count <= 0 or content_height <= 0:
        return -1
    row_height = content_height / item_count
    bottom = min(scroll_value + page_height, content_height)
    index = math.ceil(bottom / row_height) - 1
    return max(0, min(index, item_count - 1))
