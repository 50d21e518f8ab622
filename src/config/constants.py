"""
Analysis constants and algorithm configuration.

These are values that don't change based on environment but may need
to be tuned or referenced across the codebase.
"""

from dataclasses import dataclass
from typing import Dict


# =============================================================================
# Results Analysis Configuration
# =============================================================================

@dataclass(frozen=True)
class AnalysisConfig:
    """Thresholds used when turning choices into a preference profile."""

    # Ranking
    TOP_N: int = 5
    SIGNIFICANCE_PERCENT: int = 10  # a tag must win in >= 10% of choices

    # Strength labels (top tag percentage)
    VERY_STRONG_PERCENT: int = 50
    STRONG_PERCENT: int = 35
    MODERATE_PERCENT: int = 20

    # Recommendation gates
    STYLE_GATE_PERCENT: int = 30
    INDUSTRY_GATE_PERCENT: int = 25
    PLATFORM_GATE_PERCENT: int = 20
    RECOMMENDED_COLORS: int = 3
    MAX_RECOMMENDATIONS: int = 5

    # Insights
    CONSISTENCY_PERCENT: int = 40
    HIGH_CONSISTENCY_CATEGORIES: int = 3
    HIGH_VARIETY_UNIQUE: int = 5    # variety is "high" above this
    MEDIUM_VARIETY_UNIQUE: int = 2  # variety is "medium" above this
    VARIED_COLORS_UNIQUE: int = 10

    # Summary
    SUMMARY_PERCENT: int = 25

    # Formatter
    BAR_SCALE: int = 2
    HIGH_DIVERSITY_CATEGORIES: int = 3
    MEDIUM_DIVERSITY_CATEGORIES: int = 3

    ANALYSIS_VERSION: str = "1.0"


DEFAULT_ANALYSIS_CONFIG = AnalysisConfig()


# =============================================================================
# Category display tables
# =============================================================================

CATEGORY_DISPLAY_NAMES: Dict[str, str] = {
    "style": "Visual Style",
    "industry": "Industry Focus",
    "typography": "Typography",
    "type": "Project Type",
    "category": "Site Category",
    "platform": "Technology Platform",
    "colors": "Color Preferences",
}

CATEGORY_ICONS: Dict[str, str] = {
    "style": "🎨",
    "industry": "🏢",
    "typography": "📝",
    "type": "🔧",
    "category": "📂",
    "platform": "💻",
    "colors": "🌈",
}

DEFAULT_CATEGORY_ICON = "📊"


# =============================================================================
# Catalog cleaning
# =============================================================================

# Strings the gallery scraper leaves behind in tag lists
SCRAPING_ARTIFACTS = frozenset({",", "Claim this website", "PRO"})
