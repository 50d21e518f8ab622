"""One-paragraph synopsis of the strongest preferences."""

from typing import Dict

from config.constants import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig
from results import templates
from results.models import CategoryPreference


def generate_profile_summary(
    preferences: Dict[str, CategoryPreference],
    total_selections: int,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> str:
    fragments = []
    for category, pref in preferences.items():
        leader = pref.leader
        if leader and leader.percentage >= config.SUMMARY_PERCENT:
            fragments.append(templates.summary_fragment(category, leader.tag, leader.percentage))

    if not fragments:
        return templates.diverse_summary(total_selections)
    return templates.strongest_summary(total_selections, fragments)
