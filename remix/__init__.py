"""
Listing Remix - turns scraped search result cards into clean, ranked product records.
"""

__version__ = "1.0.0"
__author__ = "Engineering Team"

# Export main components for easy import
from remix.errors import ConfigError, DataContractError
from remix.models.listing import ListingFragment
from remix.models.product import ProductRecord
from remix.normalizers.title import segment_title, TitleSegments
from remix.normalizers.listing import ListingNormalizer
from remix.ranking import rank_records
from remix.pipeline import run_pipeline

__all__ = [
    'ConfigError',
    'DataContractError',
    'ListingFragment',
    'ProductRecord',
    'segment_title',
    'TitleSegments',
    'ListingNormalizer',
    'rank_records',
    'run_pipeline'
]
