"""
Preference profile builder.

Filters each category's frequency list down to significant tags, caps the
visible list, and assembles the full Profile from the strength scorer,
recommendation synthesizer, insight generator and summary writer.
"""

from typing import Dict, List, Sequence

from catalog.models import Selection
from config.constants import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig
from core.logging import get_logger
from results.insights import generate_design_insights
from results.models import CategoryPreference, Profile, TagFrequency
from results.recommendations import generate_top_recommendations
from results.strength import calculate_preference_strength
from results.summary import generate_profile_summary

logger = get_logger(__name__)


def significance_threshold(
    total_selections: int,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> int:
    """
    Minimum wins for a tag to count as significant.

    ceil(10% of selections), never below 1. Integer arithmetic keeps
    exact multiples exact (30 selections -> 3, not 4).
    """
    return max(1, -(-total_selections * config.SIGNIFICANCE_PERCENT // 100))


def build_category_preference(
    entries: List[TagFrequency],
    min_threshold: int,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> CategoryPreference:
    significant = [entry for entry in entries if entry.frequency >= min_threshold]
    return CategoryPreference(
        top=significant[:config.TOP_N],
        all=significant,
        total_unique=len(entries),
    )


def build_preferences(
    tag_frequencies: Dict[str, List[TagFrequency]],
    total_selections: int,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> Dict[str, CategoryPreference]:
    """Significant, ranked tags per category."""
    min_threshold = significance_threshold(total_selections, config)
    return {
        category: build_category_preference(entries, min_threshold, config)
        for category, entries in tag_frequencies.items()
    }


def generate_profile(
    tag_frequencies: Dict[str, List[TagFrequency]],
    selections: Sequence[Selection],
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> Profile:
    """
    Build the complete preference profile.

    Args:
        tag_frequencies: Output of calculate_tag_frequencies()
        selections: The selection log the frequencies were computed from
        config: Analysis thresholds

    Returns:
        Profile with preferences, recommendations, strength scores,
        insights and summary
    """
    total = len(selections)
    preferences = build_preferences(tag_frequencies, total, config)

    profile = Profile(
        preferences=preferences,
        top_recommendations=generate_top_recommendations(preferences, config),
        strength_scores=calculate_preference_strength(preferences, config),
        insights=generate_design_insights(preferences, selections, config),
        summary=generate_profile_summary(preferences, total, config),
    )

    logger.debug(
        "Preference profile generated",
        total_selections=total,
        min_threshold=significance_threshold(total, config),
        consistency=profile.insights.consistency.overall_consistency,
    )
    return profile
