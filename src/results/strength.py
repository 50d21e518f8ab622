"""
Preference strength per category, from the top tag's percentage.
"""

from typing import Dict

from config.constants import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig
from results import templates
from results.models import CategoryPreference, StrengthScore


def strength_label(percentage: int, config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG) -> str:
    """very strong >= 50, strong >= 35, moderate >= 20, otherwise weak."""
    if percentage >= config.VERY_STRONG_PERCENT:
        return "very strong"
    if percentage >= config.STRONG_PERCENT:
        return "strong"
    if percentage >= config.MODERATE_PERCENT:
        return "moderate"
    return "weak"


def score_category(
    preference: CategoryPreference,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> StrengthScore:
    leader = preference.leader
    if leader is None:
        return StrengthScore(strength="weak", score=0, description=templates.NO_CLEAR_PREFERENCE)

    strength = strength_label(leader.percentage, config)
    return StrengthScore(
        strength=strength,
        score=leader.percentage,
        description=templates.strength_description(strength, leader.tag),
        top_choice=leader.tag,
    )


def calculate_preference_strength(
    preferences: Dict[str, CategoryPreference],
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> Dict[str, StrengthScore]:
    """Strength score for every category in ``preferences``."""
    return {category: score_category(pref, config) for category, pref in preferences.items()}
