"""Protocol definitions for dependency injection."""

from typing import Callable, Protocol

from ui.core.models import Page


class PageFetcherPort(Protocol):
    async def fetch_page(self, limit: int, offset: int) -> Page: ...


class ViewStateListener(Protocol):
    def __call__(self, view_state) -> None: ...


Unsubscribe = Callable[[], None]
