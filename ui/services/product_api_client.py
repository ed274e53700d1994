"""HTTP client for the remote product catalogue."""

import logging
from decimal import Decimal
from typing import List, Optional

import httpx
from pydantic import BaseModel, Field, ValidationError, field_validator

from ui.core.errors import DecodeError, NetworkError, ServerError
from ui.core.models import Page, Product

logger = logging.getLogger("ProductFeed.ProductApiClient")


class ProductPayload(BaseModel):
    id: int
    title: str
    brand: Optional[str] = None
    price: Decimal
    rating: float = 0.0
    thumbnail: str = ""
    description: str = ""
    category: Optional[str] = None
    discountPercentage: Optional[float] = None
    stock: Optional[int] = None

    @field_validator("price", mode="before")
    @classmethod
    def price_from_text(cls, v):
        # Decimal(str(x)) keeps 549.99 instead of its binary expansion
        if isinstance(v, float):
            return str(v)
        return v

    def to_product(self) -> Product:
        return Product(
            id=self.id,
            title=self.title,
            brand=self.brand,
            price=self.price,
            rating=self.rating,
            thumbnail_url=self.thumbnail,
            description=self.description,
            category=self.category,
            discount_percentage=self.discountPercentage,
            stock=self.stock,
        )


class ProductResponse(BaseModel):
    products: List[ProductPayload] = Field(default_factory=list)
    total: int = Field(ge=0)
    skip: int = Field(default=0, ge=0)
    limit: int = Field(default=0, ge=0)

    def to_page(self) -> Page:
        return Page(
            items=tuple(p.to_product() for p in self.products),
            offset=self.skip,
            total_available=self.total,
        )


class ProductApiClient:
    """
    Fetches product pages from a DummyJSON-style ``/products`` endpoint.

    Every failure is raised as a ``FetchError`` subclass:
    - NetworkError for connection problems, timeouts and redirect loops
    - ServerError for non-2xx responses
    - DecodeError for bodies that cannot be decoded or are not a product page
    """

    DEFAULT_TIMEOUT = 10.0

    def __init__(
        self,
        base_url: str,
        timeout: float = DEFAULT_TIMEOUT,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: API root, e.g. https://dummyjson.com
            timeout: HTTP timeout in seconds
            transport: Optional httpx transport (used by tests)
        """
        self.base_url = base_url.rstrip("/")
        self.client = httpx.AsyncClient(
            base_url=self.base_url, timeout=timeout, transport=transport
        )

    async def fetch_page(self, limit: int, offset: int) -> Page:
        try:
            response = await self.client.get(
                "/products", params={"limit": limit, "skip": offset}
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.warning(f"Product API returned {status} for skip={offset}")
            raise ServerError(status) from e
        except httpx.TimeoutException as e:
            logger.warning(f"Product API timed out for skip={offset}")
            raise NetworkError("The request timed out") from e
        except httpx.DecodingError as e:
            logger.warning(f"Undecodable response body for skip={offset}: {e}")
            raise DecodeError("Received a malformed product list") from e
        except httpx.RequestError as e:
            logger.warning(f"Product API unreachable: {e}")
            raise NetworkError(f"Network error: {e}") from e

        try:
            page = ProductResponse.model_validate_json(response.content).to_page()
        except ValidationError as e:
            logger.warning(f"Malformed product page for skip={offset}: {e.error_count()} errors")
            raise DecodeError("Received a malformed product list") from e

        logger.debug(
            f"Fetched {len(page.items)} products (skip={page.offset}, total={page.total_available})"
        )
        return page

    async def close(self) -> None:
        """Close HTTP client."""
        await self.client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
