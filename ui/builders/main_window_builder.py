"""Builds the product window UI."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gtk

if TYPE_CHECKING:
    from ui.windows.product_window import ProductWindow


@dataclass
class MainWindowWidgets:
    """Dataclass to hold the widgets of the main window."""

    main_box: Gtk.Box
    header: Adw.HeaderBar
    main_stack: Gtk.Stack
    products_scrolled: Gtk.ScrolledWindow
    products_listbox: Gtk.ListBox
    products_loader: Gtk.Widget
    status_label: Gtk.Label
    end_label: Gtk.Label
    error_banner: Adw.Banner
    error_page: Adw.StatusPage
    builder: "MainWindowBuilder" = field(repr=False)


class MainWindowBuilder:
    def __init__(self, window: "ProductWindow"):
        self.window = window

    def build(self) -> MainWindowWidgets:
        main_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)

        header = Adw.HeaderBar()
        header.set_title_widget(Gtk.Label(label="Products"))
        main_box.append(header)

        error_banner = Adw.Banner()
        error_banner.set_button_label("Retry")
        error_banner.set_revealed(False)
        error_banner.connect("button-clicked", lambda banner: self.window._on_retry_clicked())
        main_box.append(error_banner)

        main_stack = Gtk.Stack()
        main_stack.set_vexpand(True)
        main_stack.set_transition_type(Gtk.StackTransitionType.CROSSFADE)

        # Initial: nothing to show yet
        main_stack.add_named(Gtk.Box(), "initial")

        # Loading first page
        main_stack.add_named(self._create_loader(size=48), "loading")

        # Product list
        products_scrolled = Gtk.ScrolledWindow()
        products_scrolled.set_vexpand(True)
        products_scrolled.set_policy(Gtk.PolicyType.NEVER, Gtk.PolicyType.AUTOMATIC)

        products_box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=6)
        products_box.set_margin_top(8)
        products_box.set_margin_bottom(8)
        products_box.set_margin_start(8)
        products_box.set_margin_end(8)

        products_listbox = Gtk.ListBox()
        products_listbox.add_css_class("boxed-list")
        products_listbox.set_selection_mode(Gtk.SelectionMode.NONE)
        products_box.append(products_listbox)

        products_loader = self._create_loader()
        products_loader.set_visible(False)
        products_box.append(products_loader)

        end_label = Gtk.Label(label="No more products to load")
        end_label.add_css_class("dim-label")
        end_label.set_margin_top(16)
        end_label.set_margin_bottom(16)
        end_label.set_visible(False)
        products_box.append(end_label)

        footer = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=6)
        footer.set_margin_top(8)
        footer.set_margin_bottom(4)

        status_label = Gtk.Label()
        status_label.add_css_class("dim-label")
        status_label.add_css_class("caption")
        status_label.set_hexpand(True)
        status_label.set_halign(Gtk.Align.START)
        footer.append(status_label)
        products_box.append(footer)

        products_scrolled.set_child(products_box)

        vadj = products_scrolled.get_vadjustment()
        vadj.connect("value-changed", self.window._on_scroll_changed)
        vadj.connect("changed", self.window._on_scroll_changed)

        main_stack.add_named(products_scrolled, "products")

        # Error with nothing loaded
        error_page = Adw.StatusPage()
        error_page.set_icon_name("network-error-symbolic")
        error_page.set_title("Could not load products")
        retry_button = Gtk.Button(label="Retry")
        retry_button.add_css_class("pill")
        retry_button.add_css_class("suggested-action")
        retry_button.set_halign(Gtk.Align.CENTER)
        retry_button.connect("clicked", lambda btn: self.window._on_retry_clicked())
        error_page.set_child(retry_button)
        main_stack.add_named(error_page, "error")

        main_box.append(main_stack)

        return MainWindowWidgets(
            main_box=main_box,
            header=header,
            main_stack=main_stack,
            products_scrolled=products_scrolled,
            products_listbox=products_listbox,
            products_loader=products_loader,
            status_label=status_label,
            end_label=end_label,
            error_banner=error_banner,
            error_page=error_page,
            builder=self,
        )

    def _create_loader(self, size: int = 24) -> Gtk.Widget:
        spinner = Gtk.Spinner()
        spinner.set_size_request(size, size)
        spinner.set_halign(Gtk.Align.CENTER)
        spinner.set_valign(Gtk.Align.CENTER)
        spinner.start()
        return spinner
