"""
Results analysis entry points.

    selections + catalog
        -> tag frequencies -> preference profile
        -> {recommendations, strength scores, insights} -> summary
        -> Profile -> formatted results

Every call builds its state from scratch; inputs are copied on entry and
never mutated, so concurrent analyses need no locking. Output is
deterministic for the same inputs and ``completed_at``.

Usage::

    from results.analyzer import get_formatted_results, get_profile

    formatted = get_formatted_results(selections, designs)
    payload = formatted.to_dict()

    profile = get_profile(selections, designs)  # no presentation fields
"""

from datetime import datetime, timezone
from typing import Any, Optional

from config.constants import DEFAULT_ANALYSIS_CONFIG, AnalysisConfig
from core.logging import get_logger
from results.errors import AnalysisError
from results.formatter import format_results
from results.frequencies import coerce_designs, coerce_selections, frequencies_with_skips
from results.models import AnalysisMetadata, AnalysisResults, FormattedResults, Profile
from results.profile import generate_profile

logger = get_logger(__name__)


def analyze_selections(
    selections: Any,
    designs: Any,
    *,
    completed_at: Optional[datetime] = None,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> AnalysisResults:
    """
    Analyze a quiz session.

    Args:
        selections: Selection log (Selection objects or camelCase dicts)
        designs: Full design catalog (Design objects or dicts)
        completed_at: Completion time recorded in the metadata (default: now, UTC)
        config: Analysis thresholds

    Returns:
        AnalysisResults with metadata, tag frequencies, profile and the
        selection log

    Raises:
        EmptyInputError: If selections or designs are missing or empty
    """
    try:
        selection_list = coerce_selections(selections)
        design_list = coerce_designs(designs)
    except AnalysisError as e:
        logger.error("Failed to analyze selections", error=str(e))
        raise

    logger.info("Analyzing selections", total_selections=len(selection_list), total_designs=len(design_list))

    tag_frequencies, skipped = frequencies_with_skips(selection_list, design_list)
    profile = generate_profile(tag_frequencies, selection_list, config)

    results = AnalysisResults(
        metadata=AnalysisMetadata(
            total_selections=len(selection_list),
            completed_at=completed_at or datetime.now(timezone.utc),
            analysis_version=config.ANALYSIS_VERSION,
            skipped_selections=skipped,
        ),
        tag_frequencies=tag_frequencies,
        profile=profile,
        selections=selection_list,
    )

    logger.info("Selection analysis completed", skipped_selections=skipped)
    return results


def get_profile(
    selections: Any,
    designs: Any,
    *,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> Profile:
    """Analytical profile only, for print/export callers."""
    return analyze_selections(selections, designs, config=config).profile


def get_formatted_results(
    selections: Any,
    designs: Any,
    *,
    completed_at: Optional[datetime] = None,
    config: AnalysisConfig = DEFAULT_ANALYSIS_CONFIG,
) -> FormattedResults:
    """Analyze a session and format it for display."""
    results = analyze_selections(selections, designs, completed_at=completed_at, config=config)
    return format_results(results, config)
