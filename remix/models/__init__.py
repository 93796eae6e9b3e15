from remix.models.listing import ListingFragment
from remix.models.product import ProductRecord

__all__ = ["ListingFragment", "ProductRecord"]
