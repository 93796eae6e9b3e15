"""
Pure display helpers for whatever renders the product cards.
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Dict, Iterable, List, Optional

from remix.models.product import ProductRecord


def rating_color(score: Optional[float]) -> Optional[str]:
    """Pill colour class for a review score; None means no pill."""
    if score is None:
        return None
    if score >= 4.5:
        return "dark-green"
    if score >= 4.2:
        return "light-green"
    if score >= 3.9:
        return "yellow"
    return "red"


def condense_number(number: Optional[int]) -> str:
    """
    Thousands-abbreviated count: 999 -> "999", 1000 -> "1k", 12500 -> "12.5k".
    Rounding is half-up on the exact value, so 1150 -> "1.2k".
    """
    if number is None:
        return ""
    if number >= 1000:
        # Tenths of a thousand, halves rounded up, in exact integer arithmetic
        whole, tenth = divmod((number + 50) // 100, 10)
        return f"{whole}k" if tenth == 0 else f"{whole}.{tenth}k"
    return str(number)


def format_review_score(score: Optional[float]) -> str:
    if score is None:
        return ""
    return str(Decimal(score).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def sort_attributes(attributes: Iterable[str]) -> List[str]:
    """Shortest attributes first; equal lengths keep their order."""
    return sorted(attributes, key=len)


def build_card(record: ProductRecord) -> Dict[str, Any]:
    """View model for one product card."""
    return {
        "id": record.id,
        "title": record.base_name,
        "product_url": record.product_url,
        "image_url": record.image_url,
        "rating": format_review_score(record.review_score) or None,
        "rating_color": rating_color(record.review_score),
        "num_ratings": condense_number(record.num_ratings) if record.num_ratings else "",
        "recent_purchases": (
            f"{condense_number(record.num_purchased)} recent purchases"
            if record.num_purchased else ""
        ),
        "price": f"${record.rounded_price}" if record.rounded_price is not None else None,
        "delivery": record.delivery_date,
        "attributes": sort_attributes(record.attributes)
    }
