"""Main ProductFeed application."""

import logging

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Adw", "1")

from gi.repository import Adw, Gio

from ui.application.css_loader import CssLoader
from ui.core.di_container import AppContainer
from ui.windows.product_window import ProductWindow

logger = logging.getLogger("ProductFeed.UI")


class ProductApp(Adw.Application):
    """Main application"""

    def __init__(self, container: AppContainer):
        super().__init__(
            application_id="org.productfeed.ProductFeed",
            flags=Gio.ApplicationFlags.DEFAULT_FLAGS,
        )
        self.container = container
        self.main_window = None

    def do_startup(self):
        Adw.Application.do_startup(self)

        if CssLoader().load(str(self.container.paths.css_path)):
            logger.info(f"Loaded custom CSS from {self.container.paths.css_path}")

        self.container.background_loop.start()

    def do_activate(self):
        if self.main_window is None:
            self.main_window = ProductWindow(
                self,
                controller=self.container.create_controller(),
                background_loop=self.container.background_loop,
                settings=self.container.settings,
            )
        self.main_window.present()

    def do_shutdown(self):
        try:
            self.container.shutdown()
        finally:
            Adw.Application.do_shutdown(self)


def main(argv=None):
    app = ProductApp(AppContainer.create())
    return app.run(argv)
