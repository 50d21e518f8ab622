"""
Tag frequency calculation.

Counts, per category, how often each tag appeared on the winning design
of each choice. Percentages are against the total number of selections,
not against tag mentions, so a category's percentages can add up to more
than 100 when designs carry several tags in it.
"""

import warnings
from collections.abc import Mapping, Sequence
from typing import Any, Dict, List, Tuple

from catalog.models import TAG_CATEGORIES, Design, Selection
from core.logging import get_logger
from core.utils import percentage_of
from results.errors import EmptyInputError, MissingDesignWarning
from results.models import TagFrequency

logger = get_logger(__name__)


def coerce_selections(selections: Any) -> List[Selection]:
    """Validate and copy the selection log; raises EmptyInputError if unusable."""
    items = _require_sequence(selections, "selections")
    return [s if isinstance(s, Selection) else Selection.model_validate(s) for s in items]


def coerce_designs(designs: Any) -> List[Design]:
    """Validate and copy the catalog; raises EmptyInputError if unusable."""
    items = _require_sequence(designs, "designs")
    return [d if isinstance(d, Design) else Design.model_validate(d) for d in items]


def _require_sequence(value: Any, name: str) -> list:
    if value is None or isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        raise EmptyInputError(f"No {name} provided for analysis")
    if len(value) == 0:
        raise EmptyInputError(f"No {name} provided for analysis")
    return list(value)


def count_tags(
    selections: List[Selection],
    designs: List[Design],
) -> Tuple[Dict[str, Dict[str, int]], int]:
    """
    Count tags of winning designs.

    Returns:
        (counts, skipped): per-category ``{tag: count}`` in first-seen
        order, and the number of selections that could not be resolved
    """
    lookup = {design.id: design for design in designs}
    counts: Dict[str, Dict[str, int]] = {category: {} for category in TAG_CATEGORIES}
    skipped = 0

    for selection in selections:
        design = lookup.get(selection.selected_id)
        if design is None or design.tags is None:
            skipped += 1
            logger.warning(
                "Design not found or has no tags",
                design_id=selection.selected_id,
                round_number=selection.round_number,
            )
            warnings.warn(
                f"Design {selection.selected_id} not found or has no tags",
                MissingDesignWarning,
                stacklevel=3,
            )
            continue

        for category in TAG_CATEGORIES:
            category_counts = counts[category]
            # a tag counts once per win even if the design lists it twice
            for tag in dict.fromkeys(design.tags.get(category)):
                category_counts[tag] = category_counts.get(tag, 0) + 1

    return counts, skipped


def rank_counts(counts: Dict[str, int], total_selections: int) -> List[TagFrequency]:
    """Turn one category's counts into entries, most frequent first.

    sorted() is stable, so equal counts keep first-seen order.
    """
    entries = [
        TagFrequency(tag=tag, frequency=count, percentage=percentage_of(count, total_selections))
        for tag, count in counts.items()
    ]
    return sorted(entries, key=lambda entry: entry.frequency, reverse=True)


def calculate_tag_frequencies(selections: Any, designs: Any) -> Dict[str, List[TagFrequency]]:
    """
    Tag frequencies for each of the seven categories.

    Args:
        selections: Selection log (Selection objects or camelCase dicts)
        designs: Full design catalog (Design objects or dicts)

    Returns:
        ``{category: [TagFrequency, ...]}`` sorted by frequency descending

    Raises:
        EmptyInputError: If either input is missing or empty
    """
    selection_list = coerce_selections(selections)
    design_list = coerce_designs(designs)
    counts, _ = count_tags(selection_list, design_list)
    return _rank_all(counts, len(selection_list))


def _rank_all(counts: Dict[str, Dict[str, int]], total_selections: int) -> Dict[str, List[TagFrequency]]:
    frequencies = {
        category: rank_counts(counts[category], total_selections)
        for category in TAG_CATEGORIES
    }
    logger.debug("Tag frequency analysis completed", total_selections=total_selections)
    return frequencies


def frequencies_with_skips(
    selections: List[Selection],
    designs: List[Design],
) -> Tuple[Dict[str, List[TagFrequency]], int]:
    """Like calculate_tag_frequencies() on validated lists, also returning the skip count."""
    counts, skipped = count_tags(selections, designs)
    return _rank_all(counts, len(selections)), skipped
