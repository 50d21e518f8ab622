"""
Top-level design recommendations.

Each category has its own percentage gate: high-cardinality categories
(style, industry) need a clear lead before they are worth a sentence,
while typography and colors are reported whenever a significant tag
exists. At most one sentence per category, in fixed priority order.
"""

from typing import Dict, List

from catalog.models import TagCategory
from config.constants import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig
from results import templates
from results.models import CategoryPreference


def generate_top_recommendations(
    preferences: Dict[str, CategoryPreference],
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> List[str]:
    """
    Recommendation sentences, strongest categories first.

    Returns:
        Up to MAX_RECOMMENDATIONS sentences; the two fallback sentences
        when no category clears its gate
    """
    recommendations: List[str] = []

    def leader(category: TagCategory):
        pref = preferences.get(category.value)
        return pref.leader if pref else None

    style = leader(TagCategory.STYLE)
    if style and style.percentage >= config.STYLE_GATE_PERCENT:
        recommendations.append(templates.style_recommendation(style.tag))

    industry = leader(TagCategory.INDUSTRY)
    if industry and industry.percentage >= config.INDUSTRY_GATE_PERCENT:
        recommendations.append(templates.industry_recommendation(industry.tag))

    typography = leader(TagCategory.TYPOGRAPHY)
    if typography:
        recommendations.append(templates.typography_recommendation(typography.tag))

    colors = preferences.get(TagCategory.COLORS.value)
    if colors and colors.top:
        palette = [entry.tag for entry in colors.top[:config.RECOMMENDED_COLORS]]
        recommendations.append(templates.color_recommendation(palette))

    platform = leader(TagCategory.PLATFORM)
    if platform and platform.percentage >= config.PLATFORM_GATE_PERCENT:
        recommendations.append(templates.platform_recommendation(platform.tag))

    if not recommendations:
        recommendations.extend(templates.FALLBACK_RECOMMENDATIONS)

    return recommendations[:config.MAX_RECOMMENDATIONS]
