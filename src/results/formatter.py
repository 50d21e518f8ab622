"""
Display formatting of analysis results.

Pure reshaping: labels, icons and bar widths for the rendering layer.
No new analysis happens here.
"""

import re
from collections.abc import Mapping
from datetime import datetime
from typing import Dict, List, Optional

from config.constants import (
    CATEGORY_DISPLAY_NAMES,
    CATEGORY_ICONS,
    DEFAULT_ANALYSIS_CONFIG,
    DEFAULT_CATEGORY_ICON,
    AnalysisConfig,
)
from core.logging import get_logger
from results import templates
from results.errors import InvalidProfileError
from results.models import (
    AnalysisResults,
    CategoryDiversity,
    CategoryPreference,
    DisplayCategory,
    DisplayItem,
    FormattedResults,
    InsightsBlock,
    ResultsHeader,
    Statistics,
    StrengthScore,
    StrongestCategory,
    TagFrequency,
    TitledList,
)

logger = get_logger(__name__)

_TAG_WORD_SPLIT = re.compile(r"[\s&]+")


# =============================================================================
# Field helpers
# =============================================================================

def format_category_name(category: str) -> str:
    """Human label for a category; unknown names are capitalized."""
    if category in CATEGORY_DISPLAY_NAMES:
        return CATEGORY_DISPLAY_NAMES[category]
    return category[:1].upper() + category[1:]


def get_category_icon(category: str) -> str:
    return CATEGORY_ICONS.get(category, DEFAULT_CATEGORY_ICON)


def format_tag_for_display(tag: str) -> str:
    """
    Display form of a tag.

    Hex colors are upper-cased; anything else is split on whitespace and
    ampersands and each word capitalized ("health & fitness" -> "Health Fitness").
    """
    if tag.startswith("#"):
        return tag.upper()
    return " ".join(word[:1].upper() + word[1:].lower() for word in _TAG_WORD_SPLIT.split(tag))


def bar_width(percentage: int, config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG) -> str:
    """CSS width for a preference bar, doubled so 10-50% reads well, capped at 100%."""
    return f"{min(100, percentage * config.BAR_SCALE)}%"


def format_date(value: datetime) -> str:
    """Short US-style date, e.g. 10/19/2026."""
    return f"{value.month}/{value.day}/{value.year}"


def find_strongest_category(strength_scores: Dict[str, StrengthScore]) -> StrongestCategory:
    """Category with the highest strength score; the first one wins ties."""
    strongest = StrongestCategory()
    for category, score in strength_scores.items():
        if score.score > strongest.score:
            strongest = StrongestCategory(
                category=category,
                score=score.score,
                strength=score.strength,
                top_choice=score.top_choice,
            )
    return strongest


def calculate_overall_diversity(
    diversity: Dict[str, CategoryDiversity],
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> str:
    varieties = [d.variety for d in diversity.values()]
    high = varieties.count("high")
    medium = varieties.count("medium")

    if high >= config.HIGH_DIVERSITY_CATEGORIES:
        return "high"
    if high >= 1 or medium >= config.MEDIUM_DIVERSITY_CATEGORIES:
        return "medium"
    return "low"


# =============================================================================
# Sections
# =============================================================================

def _display_item(entry: TagFrequency, config: AnalysisConfig) -> DisplayItem:
    return DisplayItem(
        tag=entry.tag,
        frequency=entry.frequency,
        percentage=entry.percentage,
        display_tag=format_tag_for_display(entry.tag),
        bar_width=bar_width(entry.percentage, config),
    )


def _display_category(
    category: str,
    preference: CategoryPreference,
    strength: Optional[StrengthScore],
    config: AnalysisConfig,
) -> DisplayCategory:
    return DisplayCategory(
        name=category,
        display_name=format_category_name(category),
        icon=get_category_icon(category),
        strength=strength,
        top_items=[_display_item(entry, config) for entry in preference.top],
        total_unique=preference.total_unique,
    )


def format_results(
    results: AnalysisResults,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> FormattedResults:
    """
    Reshape analysis results for display.

    Args:
        results: Output of analyze_selections()
        config: Analysis thresholds (bar scale, diversity cut-offs)

    Returns:
        FormattedResults with header, categories, recommendations,
        insights and statistics sections

    Raises:
        InvalidProfileError: If the results carry no profile or the
            profile has no preferences mapping
    """
    profile = getattr(results, "profile", None)
    if profile is None or not isinstance(getattr(profile, "preferences", None), Mapping):
        logger.error("Invalid analysis results provided")
        raise InvalidProfileError("Invalid analysis results provided")

    metadata = results.metadata
    total = metadata.total_selections

    categories: List[DisplayCategory] = [
        _display_category(category, preference, profile.strength_scores.get(category), config)
        for category, preference in profile.preferences.items()
    ]

    formatted = FormattedResults(
        header=ResultsHeader(
            title=templates.RESULTS_TITLE,
            subtitle=templates.results_subtitle(total),
            completed_at=format_date(metadata.completed_at),
            summary=profile.summary,
        ),
        categories=categories,
        recommendations=TitledList(
            title=templates.RECOMMENDATIONS_TITLE,
            items=list(profile.top_recommendations),
        ),
        insights=InsightsBlock(
            title=templates.INSIGHTS_TITLE,
            patterns=list(profile.insights.patterns),
            consistency=profile.insights.consistency,
            diversity=profile.insights.diversity,
        ),
        statistics=Statistics(
            total_choices=total,
            completed_at=metadata.completed_at.isoformat(),
            strongest_category=find_strongest_category(profile.strength_scores),
            diversity_score=calculate_overall_diversity(profile.insights.diversity, config),
        ),
    )

    logger.debug("Results formatted for display", categories=len(categories))
    return formatted
