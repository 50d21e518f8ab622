"""
Configuration module for the design preference engine.

This module provides centralized configuration management using pydantic-settings.
Environment-driven values live in ``config.settings``; analysis thresholds
that do not vary per environment live in ``config.constants``.

Usage:
    from config import get_settings, DEFAULT_ANALYSIS_CONFIG

    settings = get_settings()
    catalog_path = settings.catalog_path
    top_n = DEFAULT_ANALYSIS_CONFIG.TOP_N
"""

from config.constants import AnalysisConfig, DEFAULT_ANALYSIS_CONFIG
from config.settings import Settings, get_settings

__all__ = ["AnalysisConfig", "DEFAULT_ANALYSIS_CONFIG", "Settings", "get_settings"]
