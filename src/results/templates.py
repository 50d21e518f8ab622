"""
English sentence templates for the profile.

Every user-facing sentence the engine produces is built here, so the
wording can be changed (or localized) without touching aggregation code.
"""

from typing import List

# ── Recommendations ────────────────────────────────────────────────

FALLBACK_RECOMMENDATIONS = (
    "Appreciates diverse design approaches",
    "Values variety in visual aesthetics",
)


def style_recommendation(tag: str) -> str:
    return f"Strongly prefers {tag.lower()} design aesthetics"


def industry_recommendation(tag: str) -> str:
    return f"Shows preference for {tag.lower()} industry designs"


def typography_recommendation(tag: str) -> str:
    return f"Favors {tag.lower()} typography"


def color_recommendation(colors: List[str]) -> str:
    return f"Gravitates toward color palette including {', '.join(colors)}"


def platform_recommendation(tag: str) -> str:
    return f"Shows affinity for {tag} implementations"


# ── Strength ───────────────────────────────────────────────────────

NO_CLEAR_PREFERENCE = "No clear preference"

_STRENGTH_PREFIX = {
    "very strong": "Very strong",
    "strong": "Strong",
    "moderate": "Moderate",
    "weak": "Slight",
}


def strength_description(strength: str, tag: str) -> str:
    return f"{_STRENGTH_PREFIX[strength]} preference for {tag}"


# ── Insight patterns ───────────────────────────────────────────────

DIVERSE_STYLES_PATTERN = "Appreciates diverse visual styles"
VARIED_COLORS_PATTERN = "Drawn to varied color palettes"


def consistency_pattern(categories: List[str]) -> str:
    return f"Shows consistent preferences in {', '.join(categories)}"


# ── Summary ────────────────────────────────────────────────────────

def summary_fragment(category: str, tag: str, percentage: int) -> str:
    return f"{category}: {tag} ({percentage}%)"


def diverse_summary(total_selections: int) -> str:
    return (
        f"Based on {total_selections} choices, you show appreciation for diverse design "
        "approaches without strong categorical preferences."
    )


def strongest_summary(total_selections: int, fragments: List[str]) -> str:
    return f"Based on {total_selections} choices, your strongest preferences are: {', '.join(fragments)}."


# ── Formatter ──────────────────────────────────────────────────────

RESULTS_TITLE = "Your Design Preferences"
RECOMMENDATIONS_TITLE = "Design Direction Recommendations"
INSIGHTS_TITLE = "Your Design Profile Insights"


def results_subtitle(total_selections: int) -> str:
    return f"Based on {total_selections} choices"
