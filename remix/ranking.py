"""
Display ordering for normalized records.
"""
from typing import Iterable, List

from remix.models.product import ProductRecord


def rank_records(records: Iterable[ProductRecord]) -> List[ProductRecord]:
    """
    Order records by rating count, most-rated first.

    This is a display-priority heuristic, not a statistical ranking: a record
    with no rating count is treated exactly like one with zero ratings. The
    sort is stable, so ties keep their input order.
    """
    return sorted(records, key=lambda record: -(record.num_ratings or 0))
