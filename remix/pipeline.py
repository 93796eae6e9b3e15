"""
One extraction run: build records from listing fragments, then rank them.
"""
from typing import Iterable, List, Optional

from remix.models.listing import ListingFragment
from remix.models.product import ProductRecord
from remix.normalizers.listing import ListingNormalizer
from remix.ranking import rank_records


def run_pipeline(
    listings: Optional[Iterable[ListingFragment]],
    origin: Optional[str] = None
) -> List[ProductRecord]:
    """
    Normalize, deduplicate and rank one page of listings.

    Args:
        listings: Listing fragments in document order, or None if the page had no results container
        origin: Base for resolving relative URLs (defaults to config.DOCUMENT_ORIGIN)

    Returns:
        Ranked records; empty when there is nothing to show
    """
    normalizer = ListingNormalizer(origin=origin)
    return rank_records(normalizer.normalize_batch(listings))
