"""Manager classes for application state."""

from .pagination_manager import PaginationManager
from .product_list_controller import ProductListController

__all__ = [
    "PaginationManager",
    "ProductListController",
]
