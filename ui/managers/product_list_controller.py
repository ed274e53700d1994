"""Incremental pagination controller for the product list."""

import asyncio
import logging
from typing import List, Optional, Set

from ui.core.errors import FetchError
from ui.core.models import ControllerState, Page, Phase, Product
from ui.core.protocols import PageFetcherPort, Unsubscribe, ViewStateListener
from ui.managers.pagination_manager import PaginationManager
from ui.state.view_state import UNKNOWN_ERROR_MESSAGE, ViewState, project

logger = logging.getLogger("ProductFeed.ProductListController")


class ProductListController:
    """Owns the loaded products and the cursor, and publishes view states.

    Every method must be called from the thread running the controller's
    asyncio loop. At most one fetch is in flight at any time; each fetch is
    tagged with a generation so results arriving after ``reset`` are dropped.
    """

    def __init__(self, fetcher: PageFetcherPort, page_size: int = 20):
        self._fetcher = fetcher
        self._pagination = PaginationManager(page_size=page_size)
        self._items: List[Product] = []
        self._seen_ids: Set[int] = set()
        self._phase = Phase.INITIAL
        self._last_error: Optional[FetchError] = None
        self._generation = 0
        self._task: Optional[asyncio.Task] = None
        self._listeners: List[ViewStateListener] = []
        self._disposed = False
        self._view_state = project(self.snapshot())

    @property
    def generation(self) -> int:
        return self._generation

    def snapshot(self) -> ControllerState:
        return ControllerState(
            phase=self._phase,
            items=tuple(self._items),
            cursor=self._pagination.cursor(),
            fetching=self._pagination.loading,
            last_error=self._last_error,
            total_available=self._pagination.total,
        )

    def current_view_state(self) -> ViewState:
        return self._view_state

    def subscribe(self, listener: ViewStateListener) -> Unsubscribe:
        """Register a listener; it is called with the current state right away.

        Returns a callable that removes the listener.
        """
        self._listeners.append(listener)
        self._deliver(listener, self._view_state)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def request_next_page(self) -> Optional[asyncio.Task]:
        if self._disposed or not self._pagination.can_load_more():
            return None

        limit = self._pagination.page_size
        offset = self._pagination.offset
        generation = self._generation

        self._pagination.start_loading()
        self._last_error = None
        self._phase = Phase.LOADING_FIRST_PAGE if offset == 0 else Phase.READY
        logger.info(f"Requesting page limit={limit} offset={offset} (gen {generation})")

        self._task = asyncio.get_running_loop().create_task(
            self._fetch(generation, limit, offset)
        )
        self._publish()
        return self._task

    def reset(self) -> Optional[asyncio.Task]:
        """Drop everything loaded so far and fetch the first page again."""
        self._invalidate()
        self._items.clear()
        self._seen_ids.clear()
        self._pagination.reset()
        self._last_error = None
        self._phase = Phase.INITIAL
        logger.info(f"Pagination reset (gen {self._generation})")
        return self.request_next_page()

    def retry(self) -> Optional[asyncio.Task]:
        """Retry after a failure.

        With nothing loaded this is a full ``reset``. Otherwise the failed
        offset is requested again and loaded items are kept.
        """
        if not self._items:
            return self.reset()
        self._last_error = None
        return self.request_next_page()

    def dispose(self) -> None:
        self._invalidate()
        self._pagination.fail_loading()
        self._listeners.clear()
        self._disposed = True
        logger.debug("Controller disposed")

    def _invalidate(self) -> None:
        self._generation += 1
        if self._task is not None and not self._task.done():
            self._task.cancel()
        self._task = None

    async def _fetch(self, generation: int, limit: int, offset: int) -> None:
        try:
            page = await self._fetcher.fetch_page(limit, offset)
        except FetchError as e:
            self._apply_failure(generation, e)
            return
        except Exception as e:
            logger.exception(f"Unexpected error fetching offset {offset}")
            self._apply_failure(generation, FetchError(str(e) or UNKNOWN_ERROR_MESSAGE))
            return
        self._apply_page(generation, page)

    def _apply_page(self, generation: int, page: Page) -> None:
        if generation != self._generation:
            logger.debug(
                f"Ignoring stale page offset={page.offset} (gen {generation}, current {self._generation})"
            )
            return

        added = 0
        for item in page.items:
            if item.id in self._seen_ids:
                continue
            self._seen_ids.add(item.id)
            self._items.append(item)
            added += 1

        self._pagination.finish_loading(len(page.items), page.total_available)
        self._phase = Phase.READY
        self._task = None
        logger.info(
            f"Loaded {added} products ({len(self._items)} of {page.total_available}), "
            f"has_more={self._pagination.has_more}"
        )
        self._publish()

    def _apply_failure(self, generation: int, error: FetchError) -> None:
        if generation != self._generation:
            logger.debug(f"Ignoring stale failure (gen {generation}): {error.message}")
            return

        self._pagination.fail_loading()
        self._last_error = error
        self._phase = Phase.FAILED
        self._task = None
        logger.warning(f"Page load failed at offset {self._pagination.offset}: {error.message}")
        self._publish()

    def _publish(self) -> None:
        self._view_state = project(self.snapshot())
        for listener in list(self._listeners):
            self._deliver(listener, self._view_state)

    @staticmethod
    def _deliver(listener: ViewStateListener, view_state: ViewState) -> None:
        try:
            listener(view_state)
        except Exception:
            logger.exception("View state listener failed")
