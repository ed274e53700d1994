"""Pytest configuration and shared fixtures."""

from decimal import Decimal
from pathlib import Path

import pytest

from ui.core.models import Page, Product


def make_product(product_id: int, **overrides) -> Product:
    fields = {
        "id": product_id,
        "title": f"Product {product_id}",
        "brand": "Acme",
        "price": Decimal("9.99"),
        "rating": 4.5,
        "thumbnail_url": f"https://cdn.example.com/{product_id}.png",
    }
    fields.update(overrides)
    return Product(**fields)


class FakeFetcher:
    """In-memory page fetcher serving ``total`` products with ids 1..total.

    ``errors`` maps an offset to an exception raised once for that offset.
    When ``gate`` is set, every fetch waits on it before answering.
    """

    def __init__(self, total: int = 57):
        self.total = total
        self.calls = []
        self.errors = {}
        self.gate = None

    async def fetch_page(self, limit: int, offset: int) -> Page:
        self.calls.append((limit, offset))
        if self.gate is not None:
            await self.gate.wait()
        if offset in self.errors:
            raise self.errors.pop(offset)
        count = max(0, min(limit, self.total - offset))
        items = tuple(make_product(i) for i in range(offset + 1, offset + count + 1))
        return Page(items=items, offset=offset, total_available=self.total)


@pytest.fixture
def fake_fetcher() -> FakeFetcher:
    return FakeFetcher()


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def temp_config_path(tmp_path: Path) -> Path:
    return tmp_path / "settings.yml"


@pytest.fixture
def temp_css_path(tmp_path: Path) -> Path:
    css_path = tmp_path / "style.css"
    css_path.write_text("/* test css */")
    return css_path
