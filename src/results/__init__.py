"""
Results Analysis Engine.

Turns a quiz session's binary choices into a ranked preference profile
and its display-ready form.

Quick start::

    from results import get_formatted_results, get_profile

    formatted = get_formatted_results(selections, designs)
    profile = get_profile(selections, designs)
"""

from results.analyzer import analyze_selections, get_formatted_results, get_profile
from results.errors import AnalysisError, EmptyInputError, InvalidProfileError, MissingDesignWarning
from results.formatter import format_results
from results.frequencies import calculate_tag_frequencies
from results.models import AnalysisResults, FormattedResults, Profile
from results.profile import generate_profile

__all__ = [
    "analyze_selections",
    "get_formatted_results",
    "get_profile",
    "AnalysisError",
    "EmptyInputError",
    "InvalidProfileError",
    "MissingDesignWarning",
    "format_results",
    "calculate_tag_frequencies",
    "AnalysisResults",
    "FormattedResults",
    "Profile",
    "generate_profile",
]
