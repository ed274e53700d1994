"""ProductItemRow - a single product in the list."""

import gi

gi.require_version("Gtk", "4.0")
gi.require_version("Pango", "1.0")

from gi.repository import Gtk, Pango

from ui.core.models import Product
from ui.utils.formatting import (
    format_discount,
    format_price,
    format_rating,
    truncate_text,
)


class ProductItemRow(Gtk.ListBoxRow):
    """Row displaying title, brand, price and rating of a product.

    Optional labels (brand, description, discount) are None when the product
    has no value for them.
    """

    DESCRIPTION_LENGTH = 90

    def __init__(self, product: Product):
        super().__init__()
        self.product = product
        self.brand_label = None
        self.description_label = None
        self.discount_label = None
        self.set_activatable(False)

        box = Gtk.Box(orientation=Gtk.Orientation.VERTICAL, spacing=4)
        box.set_margin_top(10)
        box.set_margin_bottom(10)
        box.set_margin_start(12)
        box.set_margin_end(12)

        self.title_label = Gtk.Label(label=product.title)
        self.title_label.add_css_class("heading")
        self.title_label.set_halign(Gtk.Align.START)
        self.title_label.set_ellipsize(Pango.EllipsizeMode.END)
        box.append(self.title_label)

        if product.brand:
            self.brand_label = Gtk.Label(label=product.brand)
            self.brand_label.add_css_class("dim-label")
            self.brand_label.add_css_class("caption")
            self.brand_label.set_halign(Gtk.Align.START)
            box.append(self.brand_label)

        if product.description:
            self.description_label = Gtk.Label(
                label=truncate_text(product.description, self.DESCRIPTION_LENGTH)
            )
            self.description_label.set_halign(Gtk.Align.START)
            self.description_label.set_wrap(True)
            self.description_label.set_xalign(0)
            box.append(self.description_label)

        meta = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=12)

        self.price_label = Gtk.Label(label=format_price(product.price))
        self.price_label.add_css_class("accent")
        meta.append(self.price_label)

        discount_text = format_discount(product.discount_percentage)
        if discount_text:
            self.discount_label = Gtk.Label(label=discount_text)
            self.discount_label.add_css_class("success")
            meta.append(self.discount_label)

        self.rating_label = Gtk.Label(label=format_rating(product.rating))
        self.rating_label.set_hexpand(True)
        self.rating_label.set_halign(Gtk.Align.END)
        meta.append(self.rating_label)

        box.append(meta)
        self.set_child(box)
