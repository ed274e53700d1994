"""Product list data model."""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional, Tuple

from ui.core.errors import FetchError


@dataclass(frozen=True)
class Product:
    id: int
    title: str
    price: Decimal
    rating: float
    thumbnail_url: str
    brand: Optional[str] = None
    description: str = ""
    category: Optional[str] = None
    discount_percentage: Optional[float] = None
    stock: Optional[int] = None


@dataclass(frozen=True)
class Page:
    items: Tuple[Product, ...]
    offset: int
    total_available: int

    @property
    def has_more(self) -> bool:
        return self.offset + len(self.items) < self.total_available


@dataclass(frozen=True)
class Cursor:
    next_offset: int = 0
    page_size: int = 20
    has_more: bool = True

    def __post_init__(self):
        if self.next_offset < 0:
            raise ValueError("next_offset must be >= 0")
        if self.page_size <= 0:
            raise ValueError("page_size must be > 0")


class Phase(Enum):
    INITIAL = "initial"
    LOADING_FIRST_PAGE = "loading_first_page"
    READY = "ready"
    FAILED = "failed"


@dataclass(frozen=True)
class ControllerState:
    """Immutable snapshot of a ProductListController."""

    phase: Phase = Phase.INITIAL
    items: Tuple[Product, ...] = field(default_factory=tuple)
    cursor: Cursor = field(default_factory=Cursor)
    fetching: bool = False
    last_error: Optional[FetchError] = None
    total_available: int = 0
