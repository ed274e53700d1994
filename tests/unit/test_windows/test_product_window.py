"""Tests for ProductWindow rendering and the scroll trigger."""

import pytest


def _require_gtk():
    gi = pytest.importorskip("gi")
    try:
        gi.require_version("Gtk", "4.0")
        gi.require_version("Gdk", "4.0")
        gi.require_version("Adw", "1")
        from gi.repository import Adw, Gdk, Gtk  # noqa: F401
    except (ValueError, ImportError):
        pytest.skip("GTK 4 / libadwaita not available")
    if Gdk.Display.get_default() is None:
        pytest.skip("No display available")
    Adw.init()


class FakeController:
    def request_next_page(self):
        pass

    def retry(self):
        pass


class FakeLoop:
    def __init__(self):
        self.calls = []

    def call_soon(self, callback, *args):
        self.calls.append(callback)


class FakeAdjustment:
    """Adjustment scrolled to the very bottom."""

    def __init__(self, page_size=200.0, upper=1000.0):
        self.page_size = page_size
        self.upper = upper

    def get_value(self):
        return self.upper - self.page_size

    def get_page_size(self):
        return self.page_size

    def get_upper(self):
        return self.upper


def _window():
    from ui.config import AppSettings
    from ui.windows.product_window import ProductWindow

    controller = FakeController()
    loop = FakeLoop()
    window = ProductWindow(None, controller, loop, AppSettings())
    return window, controller, loop


def _rows(window):
    rows = []
    while True:
        row = window.products_listbox.get_row_at_index(len(rows))
        if row is None:
            return rows
        rows.append(row)


def _products(factory, start, stop):
    return tuple(factory(i) for i in range(start, stop))


def test_window_subscribes_through_background_loop():
    _require_gtk()

    window, controller, loop = _window()

    assert loop.calls == [window._subscribe_and_load]


def test_consecutive_pages_append_rows(product_factory):
    _require_gtk()
    from ui.state.view_state import SuccessView

    window, _, _ = _window()

    window._render(SuccessView(items=_products(product_factory, 1, 21), total=57))
    first_row = _rows(window)[0]
    window._render(SuccessView(items=_products(product_factory, 1, 41), total=57))

    rows = _rows(window)
    assert len(rows) == 40
    assert rows[0] is first_row
    assert [row.product.id for row in rows] == list(range(1, 41))
    assert window.status_label.get_label() == "Showing 40 of 57 items"
    assert window.main_stack.get_visible_child_name() == "products"


def test_replaced_collection_rebuilds_rows(product_factory):
    _require_gtk()
    from ui.state.view_state import SuccessView

    window, _, _ = _window()

    window._render(SuccessView(items=_products(product_factory, 1, 21), total=57))
    window._render(SuccessView(items=_products(product_factory, 101, 106), total=5))

    rows = _rows(window)
    assert [row.product.id for row in rows] == [101, 102, 103, 104, 105]


def test_loading_more_and_end_of_list(product_factory):
    _require_gtk()
    from ui.state.view_state import SuccessView

    window, _, _ = _window()
    items = _products(product_factory, 1, 21)

    window._render(SuccessView(items=items, is_loading_more=True, total=57))
    assert window.products_loader.get_visible() is True
    assert window.end_label.get_visible() is False

    window._render(SuccessView(items=items, has_more=False, total=20))
    assert window.products_loader.get_visible() is False
    assert window.end_label.get_visible() is True


def test_page_failure_shows_banner_and_blocks_scroll(product_factory):
    _require_gtk()
    from ui.state.view_state import SuccessView

    window, controller, loop = _window()
    items = _products(product_factory, 1, 21)

    window._render(SuccessView(items=items, total=57, error_message="No connection"))
    window._on_scroll_changed(FakeAdjustment())

    assert window.error_banner.get_revealed() is True
    assert window.error_banner.get_title() == "No connection"
    assert len(_rows(window)) == 20
    assert controller.request_next_page not in loop.calls

    window._render(SuccessView(items=items, total=57))

    assert window.error_banner.get_revealed() is False


def test_error_view_clears_rows(product_factory):
    _require_gtk()
    from ui.state.view_state import ErrorView, SuccessView

    window, _, _ = _window()

    window._render(SuccessView(items=_products(product_factory, 1, 21), total=57))
    window._render(ErrorView(message="Server returned HTTP 500"))

    assert _rows(window) == []
    assert window.error_page.get_description() == "Server returned HTTP 500"
    assert window.main_stack.get_visible_child_name() == "error"


def test_scroll_near_end_requests_next_page(product_factory):
    _require_gtk()
    from ui.state.view_state import SuccessView

    window, controller, loop = _window()

    window._render(SuccessView(items=_products(product_factory, 1, 21), total=57))
    window._on_scroll_changed(FakeAdjustment())

    assert loop.calls[-1] == controller.request_next_page


def test_empty_page_stops_automatic_requests(product_factory):
    _require_gtk()
    from ui.state.view_state import SuccessView
    from ui.windows.product_window import NO_NEW_ITEMS_MESSAGE

    window, controller, loop = _window()
    items = _products(product_factory, 1, 21)

    window._render(SuccessView(items=items, total=57))
    window._on_scroll_changed(FakeAdjustment())
    window._render(SuccessView(items=items, is_loading_more=True, total=57))
    window._render(SuccessView(items=items, total=57))
    requests_before = loop.calls.count(controller.request_next_page)

    # Loader visibility changes the adjustment again
    window._on_scroll_changed(FakeAdjustment())
    window._on_scroll_changed(FakeAdjustment(upper=1040.0))

    assert loop.calls.count(controller.request_next_page) == requests_before == 1
    assert window.error_banner.get_revealed() is True
    assert window.error_banner.get_title() == NO_NEW_ITEMS_MESSAGE


def test_retry_after_empty_page_resumes_scrolling(product_factory):
    _require_gtk()
    from ui.state.view_state import SuccessView

    window, controller, loop = _window()
    items = _products(product_factory, 1, 21)

    window._render(SuccessView(items=items, total=57))
    window._on_scroll_changed(FakeAdjustment())
    window._render(SuccessView(items=items, total=57))

    window._on_retry_clicked()
    window._render(SuccessView(items=_products(product_factory, 1, 41), total=57))
    window._on_scroll_changed(FakeAdjustment())

    assert loop.calls[-2:] == [controller.retry, controller.request_next_page]
    assert window.error_banner.get_revealed() is False
