"""Application components."""

from .css_loader import CssLoader
from .product_app import ProductApp

__all__ = ["CssLoader", "ProductApp"]
