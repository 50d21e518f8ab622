"""
Dataclasses for the analysis profile.

Everything here is derived fresh on each analysis call. ``to_dict()``
emits the camelCase JSON shape the rendering and export layers consume.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional

from catalog.models import Selection


@dataclass(frozen=True)
class TagFrequency:
    """How often a tag appeared on winning designs."""
    tag: str
    frequency: int
    percentage: int  # of all selections, 0-100

    def to_dict(self) -> Dict[str, Any]:
        return {"tag": self.tag, "frequency": self.frequency, "percentage": self.percentage}


@dataclass
class CategoryPreference:
    """Significant tags of one category."""
    top: List[TagFrequency] = field(default_factory=list)
    all: List[TagFrequency] = field(default_factory=list)
    total_unique: int = 0  # distinct tags seen, before the significance filter

    @property
    def leader(self) -> Optional[TagFrequency]:
        return self.top[0] if self.top else None

    @property
    def top_percentage(self) -> int:
        return self.top[0].percentage if self.top else 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "top": [t.to_dict() for t in self.top],
            "all": [t.to_dict() for t in self.all],
            "totalUnique": self.total_unique,
        }


@dataclass
class StrengthScore:
    strength: str
    score: int
    description: str
    top_choice: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"strength": self.strength, "score": self.score, "description": self.description}
        if self.top_choice is not None:
            data["topChoice"] = self.top_choice
        return data


@dataclass
class CategoryDiversity:
    unique_choices: int
    dominance: int
    variety: str  # "high" | "medium" | "low"

    def to_dict(self) -> Dict[str, Any]:
        return {"uniqueChoices": self.unique_choices, "dominance": self.dominance, "variety": self.variety}


@dataclass
class Consistency:
    strong_categories: List[str] = field(default_factory=list)
    overall_consistency: str = "low"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "strongCategories": list(self.strong_categories),
            "overallConsistency": self.overall_consistency,
        }


@dataclass
class Insights:
    patterns: List[str] = field(default_factory=list)
    diversity: Dict[str, CategoryDiversity] = field(default_factory=dict)
    consistency: Consistency = field(default_factory=Consistency)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "patterns": list(self.patterns),
            "diversity": {k: v.to_dict() for k, v in self.diversity.items()},
            "consistency": self.consistency.to_dict(),
        }


@dataclass
class Profile:
    """The complete analysis of one quiz session."""
    preferences: Dict[str, CategoryPreference]
    top_recommendations: List[str]
    strength_scores: Dict[str, StrengthScore]
    insights: Insights
    summary: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "preferences": {k: v.to_dict() for k, v in self.preferences.items()},
            "topRecommendations": list(self.top_recommendations),
            "strengthScores": {k: v.to_dict() for k, v in self.strength_scores.items()},
            "insights": self.insights.to_dict(),
            "summary": self.summary,
        }


@dataclass
class AnalysisMetadata:
    total_selections: int
    completed_at: datetime
    analysis_version: str
    skipped_selections: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalSelections": self.total_selections,
            "completedAt": self.completed_at.isoformat(),
            "analysisVersion": self.analysis_version,
            "skippedSelections": self.skipped_selections,
        }


@dataclass
class AnalysisResults:
    """Envelope returned by analyze_selections()."""
    metadata: AnalysisMetadata
    tag_frequencies: Dict[str, List[TagFrequency]]
    profile: Optional[Profile]
    selections: List[Selection] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "metadata": self.metadata.to_dict(),
            "tagFrequencies": {k: [t.to_dict() for t in v] for k, v in self.tag_frequencies.items()},
            "profile": self.profile.to_dict() if self.profile else None,
            "selections": [s.model_dump(mode="json", by_alias=True) for s in self.selections],
        }


# =============================================================================
# Display shapes (formatter output)
# =============================================================================

@dataclass
class DisplayItem:
    """A top tag annotated for the bar chart."""
    tag: str
    frequency: int
    percentage: int
    display_tag: str
    bar_width: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tag": self.tag,
            "frequency": self.frequency,
            "percentage": self.percentage,
            "displayTag": self.display_tag,
            "barWidth": self.bar_width,
        }


@dataclass
class DisplayCategory:
    name: str
    display_name: str
    icon: str
    strength: Optional[StrengthScore]
    top_items: List[DisplayItem]
    total_unique: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "displayName": self.display_name,
            "icon": self.icon,
            "strength": self.strength.to_dict() if self.strength else None,
            "topItems": [i.to_dict() for i in self.top_items],
            "totalUnique": self.total_unique,
        }


@dataclass
class ResultsHeader:
    title: str
    subtitle: str
    completed_at: str
    summary: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "subtitle": self.subtitle,
            "completedAt": self.completed_at,
            "summary": self.summary,
        }


@dataclass
class TitledList:
    title: str
    items: List[str]

    def to_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "items": list(self.items)}


@dataclass
class InsightsBlock:
    title: str
    patterns: List[str]
    consistency: Consistency
    diversity: Dict[str, CategoryDiversity]

    def to_dict(self) -> Dict[str, Any]:
        return {
            "title": self.title,
            "patterns": list(self.patterns),
            "consistency": self.consistency.to_dict(),
            "diversity": {k: v.to_dict() for k, v in self.diversity.items()},
        }


@dataclass
class StrongestCategory:
    category: Optional[str] = None
    score: int = 0
    strength: str = "weak"
    top_choice: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {"category": self.category, "score": self.score, "strength": self.strength}
        if self.top_choice is not None:
            data["topChoice"] = self.top_choice
        return data


@dataclass
class Statistics:
    total_choices: int
    completed_at: str
    strongest_category: StrongestCategory
    diversity_score: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "totalChoices": self.total_choices,
            "completedAt": self.completed_at,
            "strongestCategory": self.strongest_category.to_dict(),
            "diversityScore": self.diversity_score,
        }


@dataclass
class FormattedResults:
    """Display-ready results consumed by the rendering layer."""
    header: ResultsHeader
    categories: List[DisplayCategory]
    recommendations: TitledList
    insights: InsightsBlock
    statistics: Statistics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "header": self.header.to_dict(),
            "categories": [c.to_dict() for c in self.categories],
            "recommendations": self.recommendations.to_dict(),
            "insights": self.insights.to_dict(),
            "statistics": self.statistics.to_dict(),
        }
