"""
Diversity and consistency insights.

Diversity looks at how many distinct tags a user touched per category
(before the significance filter); consistency counts the categories with
one dominant tag.
"""

from typing import Dict, List, Sequence

from catalog.models import Selection, TagCategory
from config.constants import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig
from results import templates
from results.models import CategoryDiversity, CategoryPreference, Consistency, Insights


def variety_label(total_unique: int, config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG) -> str:
    if total_unique > config.HIGH_VARIETY_UNIQUE:
        return "high"
    if total_unique > config.MEDIUM_VARIETY_UNIQUE:
        return "medium"
    return "low"


def calculate_diversity(
    preferences: Dict[str, CategoryPreference],
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> Dict[str, CategoryDiversity]:
    return {
        category: CategoryDiversity(
            unique_choices=pref.total_unique,
            dominance=pref.top_percentage,
            variety=variety_label(pref.total_unique, config),
        )
        for category, pref in preferences.items()
    }


def calculate_consistency(
    preferences: Dict[str, CategoryPreference],
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> Consistency:
    strong = [
        category for category, pref in preferences.items()
        if pref.top_percentage >= config.CONSISTENCY_PERCENT
    ]

    if len(strong) >= config.HIGH_CONSISTENCY_CATEGORIES:
        overall = "high"
    elif strong:
        overall = "medium"
    else:
        overall = "low"

    return Consistency(strong_categories=strong, overall_consistency=overall)


def generate_design_insights(
    preferences: Dict[str, CategoryPreference],
    selections: Sequence[Selection],
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> Insights:
    """
    Diversity, consistency and pattern statements for a profile.

    ``selections`` is not read by the current rules; every signal comes
    from ``preferences``.
    """
    diversity = calculate_diversity(preferences, config)
    consistency = calculate_consistency(preferences, config)

    patterns: List[str] = []
    if consistency.strong_categories:
        patterns.append(templates.consistency_pattern(consistency.strong_categories))

    style = diversity.get(TagCategory.STYLE.value)
    if style is not None and style.variety == "high":
        patterns.append(templates.DIVERSE_STYLES_PATTERN)

    colors = diversity.get(TagCategory.COLORS.value)
    if colors is not None and colors.unique_choices > config.VARIED_COLORS_UNIQUE:
        patterns.append(templates.VARIED_COLORS_PATTERN)

    return Insights(patterns=patterns, diversity=diversity, consistency=consistency)
