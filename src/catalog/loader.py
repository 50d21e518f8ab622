"""
Design catalog loader.

Reads the catalog JSON document once, validates it with DataValidator and
serves the quiz: lookups by id, random unseen pairs, tag filtering and
catalog statistics.
"""

import random
from pathlib import Path
from typing import Dict, List, Optional, Set, Tuple, Union

from catalog.models import TAG_CATEGORIES, Design, TagCategory
from catalog.validator import DataValidator
from config.settings import get_settings
from core.logging import LoggerMixin
from core.utils import most_common


class CatalogLoadError(RuntimeError):
    """The catalog document could not be read or failed validation."""


DesignPair = Tuple[Design, Design]


class CatalogLoader(LoggerMixin):
    """
    Loads and serves the design catalog.

    Usage:
        loader = CatalogLoader()
        loader.load_designs("data/sample-designs.json")

        pairs = loader.get_random_pairs(count=5)
        design = loader.get_design_by_id("design_001")
    """

    # Draw attempts per requested pair before giving up
    PAIR_ATTEMPTS_PER_PAIR = 10

    def __init__(
        self,
        validator: Optional[DataValidator] = None,
        rng: Optional[random.Random] = None,
    ):
        self.validator = validator or DataValidator()
        self.rng = rng or random.Random(get_settings().pair_seed)
        self.designs_data: Optional[Dict] = None
        self.is_loaded = False

    def load_designs(self, data_path: Optional[Union[str, Path]] = None) -> Dict:
        """
        Load design data from a JSON file with validation.

        Args:
            data_path: Path to the catalog; defaults to ``Settings.catalog_path``

        Returns:
            Cleaned catalog (``{"metadata": ..., "designs": [Design, ...]}``)

        Raises:
            CatalogLoadError: If the file cannot be read or validation fails
        """
        path = Path(data_path) if data_path is not None else get_settings().catalog_path
        self.logger.info("Loading design data", path=str(path))

        try:
            json_text = path.read_text(encoding="utf-8")
        except OSError as e:
            self.logger.error("Failed to read design data", path=str(path), error=str(e))
            raise CatalogLoadError(f"Failed to read catalog {path}: {e}") from e

        return self.load_json(json_text)

    def load_json(self, json_text: str) -> Dict:
        """Validate an in-memory catalog document and make it current."""
        result = self.validator.validate_json_string(json_text)

        if not result.is_valid:
            self.logger.error("Data validation failed", errors=result.errors)
            raise CatalogLoadError(f"Data validation failed: {', '.join(result.errors)}")

        if result.warnings:
            self.logger.warning("Data validation warnings", warnings=result.warnings)

        self.designs_data = result.cleaned_data
        self.is_loaded = True

        self.logger.info(
            "Loaded designs",
            count=len(result.designs),
            errors=len(result.errors),
            warnings=len(result.warnings),
        )
        return self.designs_data

    # =========================================================================
    # Lookups
    # =========================================================================

    def get_designs(self) -> Optional[Dict]:
        """Catalog data, or None before load_designs()."""
        if not self.is_loaded:
            self.logger.warning("Design data not loaded yet")
            return None
        return self.designs_data

    @property
    def designs(self) -> List[Design]:
        if not self.is_loaded or not self.designs_data:
            return []
        return self.designs_data["designs"]

    def get_design_by_id(self, design_id: str) -> Optional[Design]:
        for design in self.designs:
            if design.id == design_id:
                return design
        return None

    def is_ready(self) -> bool:
        return self.is_loaded and len(self.designs) > 0

    # =========================================================================
    # Pairs
    # =========================================================================

    def get_random_pairs(
        self,
        count: int = 1,
        used_pairs: Optional[Set[str]] = None,
    ) -> List[DesignPair]:
        """
        Draw random pairs of distinct designs not shown before.

        Args:
            count: Number of pairs wanted
            used_pairs: Keys (``"id_a|id_b"``, sorted) of pairs already shown;
                        updated in place with the pairs returned

        Returns:
            Up to ``count`` pairs; fewer if the attempt budget runs out
        """
        if used_pairs is None:
            used_pairs = set()

        if not self.is_loaded:
            self.logger.error("Design data not loaded")
            return []

        designs = self.designs
        if len(designs) < 2:
            self.logger.error("Need at least 2 designs to create pairs", count=len(designs))
            return []

        rng = self.rng
        pairs: List[DesignPair] = []
        attempts = 0
        max_attempts = count * self.PAIR_ATTEMPTS_PER_PAIR

        while len(pairs) < count and attempts < max_attempts:
            attempts += 1
            first, second = rng.sample(designs, 2)
            pair_key = pair_id(first.id, second.id)

            if pair_key not in used_pairs:
                pairs.append((first, second))
                used_pairs.add(pair_key)

        if len(pairs) < count:
            self.logger.warning("Could not generate all unique pairs", generated=len(pairs), requested=count)

        return pairs

    # =========================================================================
    # Filtering and statistics
    # =========================================================================

    def get_designs_by_tags(self, criteria: Optional[Dict[str, List[str]]] = None) -> List[Design]:
        """
        Designs matching every category in ``criteria``.

        Within a category any required tag may match; matching is a
        case-insensitive substring test. Empty tag lists are ignored.
        """
        criteria = criteria or {}
        matched = []
        for design in self.designs:
            if all(
                _matches_category(design, category, required)
                for category, required in criteria.items()
            ):
                matched.append(design)
        return matched

    def get_data_stats(self) -> Optional[Dict]:
        """Tag, color and author statistics for the loaded catalog."""
        if not self.is_loaded:
            return None

        designs = self.designs
        tag_stats = {}
        for category in TAG_CATEGORIES:
            if category == TagCategory.COLORS.value:
                continue
            all_tags = [tag for design in designs for tag in _tags_of(design, category)]
            tag_stats[category] = {
                "unique": len(set(all_tags)),
                "total": len(all_tags),
                "mostCommon": most_common(all_tags, 3),
            }

        all_colors = [c for design in designs for c in _tags_of(design, TagCategory.COLORS.value)]
        authors = {design.author for design in designs if design.author}

        return {
            "totalDesigns": len(designs),
            "tagStats": tag_stats,
            "averageColorsPerDesign": len(all_colors) / len(designs) if designs else 0,
            "uniqueAuthors": len(authors),
        }


def pair_id(first_id: str, second_id: str) -> str:
    """Order-independent key of a pair."""
    return "|".join(sorted((first_id, second_id)))


def _tags_of(design: Design, category: str) -> List[str]:
    if design.tags is None:
        return []
    return design.tags.get(category)


def _matches_category(design: Design, category: str, required: List[str]) -> bool:
    if not isinstance(required, list) or not required:
        return True
    design_tags = [t.lower() for t in _tags_of(design, category)]
    return any(tag.lower() in design_tag for tag in required for design_tag in design_tags)
