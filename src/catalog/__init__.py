"""
Design catalog: input models, validation and loading.

Quick start::

    from catalog import CatalogLoader

    loader = CatalogLoader()
    loader.load_designs("data/sample-designs.json")
    pairs = loader.get_random_pairs(count=10)
"""

from catalog.models import TAG_CATEGORIES, Design, DesignTags, Selection, TagCategory
from catalog.validator import DataValidator, ValidationResult
from catalog.loader import CatalogLoader, CatalogLoadError, pair_id

__all__ = [
    "TAG_CATEGORIES",
    "Design",
    "DesignTags",
    "Selection",
    "TagCategory",
    "DataValidator",
    "ValidationResult",
    "CatalogLoader",
    "CatalogLoadError",
    "pair_id",
]
