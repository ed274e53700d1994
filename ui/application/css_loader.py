"""CSS loading service."""

import logging
from pathlib import Path
from typing import Optional, Union

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Gdk", "4.0")
from gi.repository import Gdk, Gtk

logger = logging.getLogger("ProductFeed.CssLoader")


class CssLoader:
    def load(self, css_path: Optional[Union[str, Path]]) -> bool:
        if not css_path or not Path(css_path).is_file():
            return False

        display = Gdk.Display.get_default()
        if display is None:
            logger.debug("No display available, skipping custom CSS")
            return False

        provider = Gtk.CssProvider()
        provider.load_from_path(str(css_path))
        Gtk.StyleContext.add_provider_for_display(
            display,
            provider,
            Gtk.STYLE_PROVIDER_PRIORITY_APPLICATION,
        )
        return True
