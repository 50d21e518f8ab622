"""
Catalog JSON validation and cleaning.

The catalog is produced by a gallery scraper, so tag lists arrive with
scraping leftovers (stray commas, "Claim this website", "PRO"), duplicate
tags in different cases, and colors in mixed formats. The validator
collects errors (design dropped or catalog rejected) and warnings (value
dropped, design kept) instead of failing fast, so one bad entry does not
sink the whole catalog.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from catalog.models import TAG_CATEGORIES, Design, DesignTags, TagCategory
from config.constants import SCRAPING_ARTIFACTS
from core.logging import LoggerMixin
from core.utils import is_hex_color, is_valid_url


@dataclass
class ValidationResult:
    """Outcome of validating one catalog document."""
    is_valid: bool
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)
    cleaned_data: Optional[Dict[str, Any]] = None

    @property
    def designs(self) -> List[Design]:
        if not self.cleaned_data:
            return []
        return self.cleaned_data["designs"]


class DataValidator(LoggerMixin):
    """
    Validates the designs document and returns a cleaned copy.

    Usage:
        validator = DataValidator()
        result = validator.validate_json_string(text)
        if result.is_valid:
            designs = result.designs
    """

    def __init__(self):
        self.errors: List[str] = []
        self.warnings: List[str] = []

    def validate_designs_data(self, data: Any) -> ValidationResult:
        """
        Validate the complete designs structure.

        Args:
            data: Parsed JSON document (``{"metadata": {...}, "designs": [...]}``)

        Returns:
            ValidationResult with cleaned metadata and ``Design`` objects
        """
        self.errors = []
        self.warnings = []

        if not isinstance(data, dict):
            self.errors.append("Data must be a valid object")
            return self._result(None)

        self._validate_metadata(data.get("metadata"))

        designs = data.get("designs")
        if not isinstance(designs, list):
            self.errors.append("designs must be an array")
            return self._result(None)

        if not designs:
            self.errors.append("designs array cannot be empty")
            return self._result(None)

        cleaned_designs: List[Design] = []
        for index, design in enumerate(designs):
            cleaned = self._validate_and_clean_design(design, index)
            if cleaned is not None:
                cleaned_designs.append(cleaned)

        if not cleaned_designs:
            self.errors.append("No valid designs found after validation")
            return self._result(None)

        metadata = data.get("metadata") if isinstance(data.get("metadata"), dict) else {}
        cleaned_data = {
            "metadata": {
                **metadata,
                "totalDesigns": len(cleaned_designs),
                "validationErrors": len(self.errors),
                "validationWarnings": len(self.warnings),
            },
            "designs": cleaned_designs,
        }
        return self._result(cleaned_data)

    def validate_json_string(self, json_string: str) -> ValidationResult:
        """Parse a JSON document and validate it."""
        try:
            data = json.loads(json_string)
        except json.JSONDecodeError as e:
            self.errors = [f"Invalid JSON format: {e.msg}"]
            self.warnings = []
            return self._result(None)
        return self.validate_designs_data(data)

    # -------------------------------------------------------------------------
    # Sections
    # -------------------------------------------------------------------------

    def _validate_metadata(self, metadata: Any) -> None:
        if not isinstance(metadata, dict):
            self.warnings.append("Missing or invalid metadata section")
            return

        if not metadata.get("generatedAt"):
            self.warnings.append("Missing generatedAt in metadata")

        total = metadata.get("totalDesigns")
        if not isinstance(total, (int, float)) or isinstance(total, bool):
            self.warnings.append("totalDesigns should be a number")

    def _validate_and_clean_design(self, design: Any, index: int) -> Optional[Design]:
        if not isinstance(design, dict):
            self.errors.append(f"Design at index {index} is not a valid object")
            return None

        design_id = design.get("id")
        if not design_id or not isinstance(design_id, str):
            self.errors.append(f"Design at index {index} missing valid id")
            return None

        image = design.get("image")
        if not image or not isinstance(image, str):
            self.errors.append(f"Design at index {index} missing valid image URL")
            return None
        if not is_valid_url(image):
            self.errors.append(f"Design at index {index} has invalid image URL: {image}")
            return None

        tags = self._validate_and_clean_tags(design.get("tags"), index)
        if tags is None:
            return None

        title = design.get("title")
        author = design.get("author")
        return Design(
            id=design_id.strip(),
            image=image.strip(),
            title=title.strip() if title and isinstance(title, str) else None,
            author=author.strip() if author and isinstance(author, str) else None,
            tags=tags,
        )

    def _validate_and_clean_tags(self, tags: Any, index: int) -> Optional[DesignTags]:
        if not tags or not isinstance(tags, dict):
            self.errors.append(f"Design at index {index} missing valid tags object")
            return None

        cleaned: Dict[str, List[str]] = {}
        for category in TAG_CATEGORIES:
            values = tags.get(category)
            if not values:
                cleaned[category] = []
            elif not isinstance(values, list):
                self.warnings.append(f"Design at index {index} has non-array {category} tags")
                cleaned[category] = []
            elif category == TagCategory.COLORS.value:
                cleaned[category] = self._clean_color_tags(values, index)
            else:
                cleaned[category] = self._clean_string_tags(values, index, category)

        return DesignTags(**cleaned)

    # -------------------------------------------------------------------------
    # Tag lists
    # -------------------------------------------------------------------------

    def _clean_string_tags(self, values: List[Any], index: int, category: str) -> List[str]:
        cleaned: List[str] = []
        seen = set()

        for position, tag in enumerate(values):
            if not isinstance(tag, str):
                self.warnings.append(
                    f"Design at index {index} has non-string tag in {category} at position {position}"
                )
                continue

            tag = tag.strip()
            if not tag or tag in SCRAPING_ARTIFACTS or "," in tag:
                continue
            if tag.lower() in seen:
                continue

            cleaned.append(tag)
            seen.add(tag.lower())

        return cleaned

    def _clean_color_tags(self, values: List[Any], index: int) -> List[str]:
        cleaned: List[str] = []
        seen = set()

        for position, color in enumerate(values):
            if not isinstance(color, str):
                self.warnings.append(f"Design at index {index} has non-string color at position {position}")
                continue

            normalized = color.strip().upper()
            if is_hex_color(normalized):
                if normalized not in seen:
                    cleaned.append(normalized)
                    seen.add(normalized)
            elif normalized:
                self.warnings.append(f"Design at index {index} has invalid color format: {color}")

        return cleaned

    def _result(self, cleaned_data: Optional[Dict[str, Any]]) -> ValidationResult:
        is_valid = not self.errors and cleaned_data is not None
        if self.errors:
            self.logger.debug("Catalog validation errors", count=len(self.errors))
        return ValidationResult(
            is_valid=is_valid,
            errors=list(self.errors),
            warnings=list(self.warnings),
            cleaned_data=cleaned_data,
        )
