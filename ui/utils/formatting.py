"""Text formatting utilities."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Optional


def format_price(price: Decimal, currency_symbol: str = "$") -> str:
    amount = price.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP)
    return f"{currency_symbol}{amount:,}"


def format_rating(rating: float) -> str:
    return f"★ {rating:.1f}"


def format_discount(discount_percentage: Optional[float]) -> str:
    if not discount_percentage:
        return ""
    return f"-{discount_percentage:.0f}%"


def format_status(shown: int, total: int) -> str:
    return f"Showing {shown} of {total} items"


def truncate_text(text: str, max_length: int = 100) -> str:
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."
