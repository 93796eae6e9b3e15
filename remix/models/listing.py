"""
Input boundary: one pre-isolated search result card.
Whoever walks the document tree builds these; the pipeline never sees markup.
"""
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

from remix.errors import DataContractError


# Accepted payload keys per field, camelCase first.
_KEY_ALIASES = {
    "asin": ("asin", "id", "dataAsin", "data_asin"),
    "title": ("title", "name"),
    "labels": ("labels", "ariaLabels", "aria_labels"),
    "purchase_text": ("purchaseText", "purchase_text"),
    "price_text": ("priceText", "price_text", "price"),
    "delivery_text": ("deliveryText", "delivery_text"),
    "image_src": ("imageSrc", "image_src", "image"),
    "link_href": ("linkHref", "link_href", "href", "url"),
}


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    return str(value)


@dataclass(frozen=True)
class ListingFragment:
    """Raw text and references scraped from one listing card. Every field may be missing."""
    asin: Optional[str] = None
    title: Optional[str] = None
    labels: Tuple[str, ...] = field(default_factory=tuple)
    purchase_text: Optional[str] = None
    price_text: Optional[str] = None
    delivery_text: Optional[str] = None
    image_src: Optional[str] = None
    link_href: Optional[str] = None

    def label_containing(self, needle: str, exclude: Optional[str] = None) -> Optional[str]:
        """First label containing `needle` (and not `exclude`), like an aria-label*= selector."""
        for label in self.labels:
            if needle in label and not (exclude and exclude in label):
                return label
        return None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "ListingFragment":
        """
        Build a fragment from a JSON payload.

        Raises:
            DataContractError: If the payload is not an object
        """
        if not isinstance(raw, Mapping):
            raise DataContractError(
                f"Listing fragment must be an object, got {type(raw).__name__}"
            )

        values: Dict[str, Any] = {}
        for attr, keys in _KEY_ALIASES.items():
            for key in keys:
                if raw.get(key) is not None:
                    values[attr] = raw[key]
                    break

        labels = values.pop("labels", ())
        if isinstance(labels, str):
            labels = (labels,)
        elif isinstance(labels, (list, tuple)):
            labels = tuple(str(label) for label in labels if label is not None)
        else:
            labels = ()

        return cls(
            labels=labels,
            **{name: _optional_text(value) for name, value in values.items()}
        )
