"""
Record builder.
Turns isolated listing fragments into ProductRecords, dropping repeated identities.
"""
from typing import Iterable, List, Optional

from remix.config import config
from remix.logger import logger
from remix.models.listing import ListingFragment
from remix.models.product import ProductRecord
from remix.normalizers import fields
from remix.normalizers.title import segment_title


STAR_LABEL_MARKER = "out of 5 stars"
RATINGS_LABEL_MARKER = "ratings"


class ListingNormalizer:
    """
    Builds one record per first-seen listing identity.
    Holds the seen-identity set for a single run: use a fresh instance per run.
    """

    def __init__(self, origin: Optional[str] = None):
        self.origin = origin or config.DOCUMENT_ORIGIN
        self.seen_ids = set()
        self.duplicates = 0

    def normalize_listing(self, fragment: ListingFragment) -> Optional[ProductRecord]:
        """
        Build a record for one listing.

        Returns:
            The record, or None if this identity was already seen in this run
        """
        asin = fragment.asin.strip() if fragment.asin and fragment.asin.strip() else None

        if asin in self.seen_ids:
            self.duplicates += 1
            logger.debug(f"Skipping duplicate listing {asin}")
            return None
        self.seen_ids.add(asin)

        raw_name = fragment.title.strip() if fragment.title else ""
        segments = segment_title(raw_name)
        price = fields.extract_price(fragment.price_text)

        return ProductRecord(
            id=asin,
            raw_name=raw_name,
            base_name=segments.base_name,
            attributes=tuple(segments.attributes),
            review_score=fields.extract_review_score(
                fragment.label_containing(STAR_LABEL_MARKER)
            ),
            num_ratings=fields.extract_num_ratings(
                fragment.label_containing(RATINGS_LABEL_MARKER, exclude=STAR_LABEL_MARKER)
            ),
            num_purchased=fields.extract_num_purchased(fragment.purchase_text),
            price=price,
            rounded_price=fields.round_price(price),
            delivery_date=fields.extract_delivery_date(fragment.delivery_text),
            image_url=fields.resolve_url(fragment.image_src, self.origin),
            product_url=fields.resolve_url(fragment.link_href, self.origin)
        )

    def normalize_batch(self, fragments: Optional[Iterable[ListingFragment]]) -> List[ProductRecord]:
        """
        Normalize listings in document order.

        Args:
            fragments: Listing fragments, or None when no result container was found

        Returns:
            Records for first-seen identities, in input order
        """
        if fragments is None:
            logger.info("No listing container found, nothing to normalize")
            return []

        records = []
        for fragment in fragments:
            record = self.normalize_listing(fragment)
            if record is not None:
                records.append(record)

        logger.info(
            f"Normalized {len(records)} listings, skipped {self.duplicates} duplicates",
            extra={"extra": {"records": len(records), "duplicates": self.duplicates}}
        )
        return records
