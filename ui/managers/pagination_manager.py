"""Pagination state management for infinite scroll."""

from ui.core.models import Cursor


class PaginationManager:
    def __init__(self, page_size: int = 20):
        if page_size <= 0:
            raise ValueError("page_size must be > 0")
        self.page_size = page_size
        self.offset = 0
        self.total = 0
        self.has_more = True
        self.loading = False

    def can_load_more(self) -> bool:
        return self.has_more and not self.loading

    def start_loading(self) -> None:
        self.loading = True

    def finish_loading(self, items_loaded: int, total: int) -> None:
        self.loading = False
        self.offset += items_loaded
        self.total = total
        self.has_more = self.offset < total

    def fail_loading(self) -> None:
        # Cursor stays put so the same offset can be requested again
        self.loading = False

    def reset(self) -> None:
        self.offset = 0
        self.total = 0
        self.has_more = True
        self.loading = False

    def cursor(self) -> Cursor:
        return Cursor(
            next_offset=self.offset,
            page_size=self.page_size,
            has_more=self.has_more,
        )
