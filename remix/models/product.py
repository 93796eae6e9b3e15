"""
Canonical normalized record.
Built once per listing, never mutated afterwards.
"""
from dataclasses import dataclass, field
from typing import Optional, Tuple, Dict


@dataclass(frozen=True)
class ProductRecord:
    """
    One normalized search result.
    `None` on any optional field means the source data was missing or unparsable.
    """
    id: Optional[str]
    raw_name: str
    base_name: str
    attributes: Tuple[str, ...] = field(default_factory=tuple)

    review_score: Optional[float] = None
    num_ratings: Optional[int] = None
    num_purchased: Optional[int] = None

    # Price text as rendered, plus the display value
    price: Optional[str] = None
    rounded_price: Optional[int] = None

    delivery_date: Optional[str] = None
    image_url: Optional[str] = None
    product_url: Optional[str] = None

    @property
    def has_price(self) -> bool:
        """Check if product has a usable price."""
        return self.rounded_price is not None

    @property
    def has_rating(self) -> bool:
        return self.review_score is not None

    def to_dict(self) -> Dict:
        """Convert to dictionary for serialization."""
        return {
            "id": self.id,
            "raw_name": self.raw_name,
            "base_name": self.base_name,
            "attributes": list(self.attributes),
            "review_score": self.review_score,
            "num_ratings": self.num_ratings,
            "num_purchased": self.num_purchased,
            "price": self.price,
            "rounded_price": self.rounded_price,
            "delivery_date": self.delivery_date,
            "image_url": self.image_url,
            "product_url": self.product_url
        }
