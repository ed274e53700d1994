"""Business logic services."""

from .async_runner import BackgroundLoop
from .product_api_client import ProductApiClient

__all__ = ["BackgroundLoop", "ProductApiClient"]
