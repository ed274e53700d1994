"""ProductWindow - Main application window."""

import logging

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, GLib

from ui.builders.main_window_builder import MainWindowBuilder
from ui.config import AppSettings
from ui.managers.product_list_controller import ProductListController
from ui.rows.product_item_row import ProductItemRow
from ui.services.async_runner import BackgroundLoop
from ui.state.view_state import ErrorView, LoadingView, SuccessView, ViewState
from ui.utils.formatting import format_status
from ui.utils.scrolling import last_visible_index, should_fetch_more

logger = logging.getLogger("ProductFeed.UI")

NO_NEW_ITEMS_MESSAGE = "No new products were returned"


class ProductWindow(Adw.ApplicationWindow):
    """Main application window"""

    def __init__(
        self,
        app,
        controller: ProductListController,
        background_loop: BackgroundLoop,
        settings: AppSettings,
    ):
        super().__init__(application=app, title="Products")
        self.controller = controller
        self.background_loop = background_loop
        self.settings = settings
        self._rendered_ids = []
        self._load_failed = False
        # Set when a scroll-triggered request is outstanding; a completion that
        # adds no rows then stalls automatic loading until the list grows or
        # the user retries.
        self._awaiting_rows = False
        self._stalled = False
        self._unsubscribe = None

        self.set_default_size(
            settings.display.default_width, settings.display.default_height
        )

        widgets = MainWindowBuilder(self).build()
        self.main_stack = widgets.main_stack
        self.products_scrolled = widgets.products_scrolled
        self.products_listbox = widgets.products_listbox
        self.products_loader = widgets.products_loader
        self.status_label = widgets.status_label
        self.end_label = widgets.end_label
        self.error_banner = widgets.error_banner
        self.error_page = widgets.error_page
        self.set_content(widgets.main_box)

        self.connect("close-request", self._on_close_request)

        self.background_loop.call_soon(self._subscribe_and_load)

    def _subscribe_and_load(self):
        """Runs on the background loop."""
        self._unsubscribe = self.controller.subscribe(self._on_view_state)
        self.controller.request_next_page()

    def _on_view_state(self, view_state: ViewState):
        """Runs on the background loop; hand the snapshot to GTK."""
        GLib.idle_add(self._render, view_state)

    def _render(self, view_state: ViewState):
        if isinstance(view_state, (LoadingView, ErrorView)):
            self._awaiting_rows = False
            self._stalled = False

        if isinstance(view_state, LoadingView):
            self._clear_rows()
            self.main_stack.set_visible_child_name("loading")
        elif isinstance(view_state, ErrorView):
            self._clear_rows()
            self.error_page.set_description(view_state.message)
            self.main_stack.set_visible_child_name("error")
        elif isinstance(view_state, SuccessView):
            self._render_success(view_state)
        else:
            self.main_stack.set_visible_child_name("initial")
        return False  # Don't repeat

    def _render_success(self, view_state: SuccessView):
        ids = [product.id for product in view_state.items]
        if ids[: len(self._rendered_ids)] != self._rendered_ids:
            # Collection was replaced, not extended
            self._clear_rows()

        new_items = view_state.items[len(self._rendered_ids):]
        for product in new_items:
            self.products_listbox.append(ProductItemRow(product))
        self._rendered_ids = ids

        if new_items:
            self._stalled = False
        elif self._awaiting_rows and not view_state.is_loading_more and view_state.has_more:
            logger.warning(f"Page after item {len(ids)} was empty; pausing infinite scroll")
            self._stalled = True
        if not view_state.is_loading_more:
            self._awaiting_rows = False

        self.products_loader.set_visible(view_state.is_loading_more)
        self.end_label.set_visible(not view_state.has_more and bool(ids))
        self.status_label.set_label(format_status(len(ids), view_state.total))

        # A failed page is only retried from the banner, not by scrolling
        self._load_failed = bool(view_state.error_message)
        if view_state.error_message:
            self.error_banner.set_title(view_state.error_message)
            self.error_banner.set_revealed(True)
        elif self._stalled:
            self.error_banner.set_title(NO_NEW_ITEMS_MESSAGE)
            self.error_banner.set_revealed(True)
        else:
            self.error_banner.set_revealed(False)

        self.main_stack.set_visible_child_name("products")

    def _clear_rows(self):
        while True:
            row = self.products_listbox.get_row_at_index(0)
            if row is None:
                break
            self.products_listbox.remove(row)
        self._rendered_ids = []

    def _on_scroll_changed(self, adjustment):
        """Handle scroll events for infinite scrolling"""
        if self._load_failed or self._stalled:
            return

        item_count = len(self._rendered_ids)
        last_index = last_visible_index(
            adjustment.get_value(),
            adjustment.get_page_size(),
            adjustment.get_upper(),
            item_count,
        )
        if should_fetch_more(
            item_count, last_index, self.settings.display.prefetch_threshold
        ):
            self._awaiting_rows = True
            self.background_loop.call_soon(self.controller.request_next_page)

    def _on_retry_clicked(self):
        logger.info("Retry requested")
        self._stalled = False
        self._awaiting_rows = True
        self.background_loop.call_soon(self.controller.retry)

    def _on_close_request(self, window):
        self.background_loop.call_soon(self._dispose_controller)
        return False

    def _dispose_controller(self):
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        self.controller.dispose()
