"""
Tests for the configuration module.
"""

from pathlib import Path

import pytest


class TestSettings:
    """Tests for Settings class."""

    def test_defaults(self, monkeypatch):
        """Test default values without environment overrides."""
        from config.settings import Settings

        for var in ("ENVIRONMENT", "LOG_LEVEL", "JSON_LOGS", "CATALOG_PATH", "PAIR_SEED"):
            monkeypatch.delenv(var, raising=False)

        settings = Settings(_env_file=None)

        assert settings.environment == "development"
        assert settings.log_level == "INFO"
        assert settings.json_logs is False
        assert settings.catalog_path == Path("data/sample-designs.json")
        assert settings.pair_seed is None

    def test_settings_load_from_env(self, monkeypatch):
        """Test that settings load from environment variables."""
        from config.settings import Settings

        monkeypatch.setenv("CATALOG_PATH", "/srv/quiz/designs.json")
        monkeypatch.setenv("PAIR_SEED", "42")
        monkeypatch.setenv("JSON_LOGS", "true")

        settings = Settings(_env_file=None)

        assert settings.catalog_path == Path("/srv/quiz/designs.json")
        assert settings.pair_seed == 42
        assert settings.json_logs is True

    def test_get_settings_is_cached(self):
        from config.settings import get_settings

        assert get_settings() is get_settings()

    def test_get_settings_leaves_environment_untouched(self, monkeypatch):
        import os
        from config.settings import get_settings

        monkeypatch.delenv("ENV_FILE", raising=False)
        before = dict(os.environ)
        get_settings.cache_clear()

        try:
            get_settings()
            assert dict(os.environ) == before
        finally:
            get_settings.cache_clear()

    def test_is_development_property(self):
        """Test is_development property."""
        from config.settings import Settings

        for env in ["development", "dev", "local"]:
            assert Settings(environment=env).is_development is True

        assert Settings(environment="production").is_development is False

    def test_is_production_property(self):
        """Test is_production property."""
        from config.settings import Settings

        for env in ["production", "prod"]:
            assert Settings(environment=env).is_production is True

        assert Settings(environment="development").is_production is False

    def test_log_level_is_normalized(self):
        from config.settings import Settings

        assert Settings(log_level=" debug ").log_level == "DEBUG"

    def test_catalog_path_parsing(self):
        """Test that catalog_path can be parsed from string."""
        from config.settings import Settings

        settings = Settings(catalog_path="/tmp/designs.json")

        assert settings.catalog_path == Path("/tmp/designs.json")
        assert isinstance(settings.catalog_path, Path)

    def test_settings_for_testing(self):
        """Test get_settings_for_testing function."""
        from config.settings import get_settings_for_testing

        settings = get_settings_for_testing(pair_seed=7)

        assert settings.environment == "testing"
        assert settings.debug is True
        assert settings.pair_seed == 7


class TestConstants:
    """Tests for constants module."""

    def test_analysis_config_defaults(self):
        """Test AnalysisConfig default values."""
        from config.constants import DEFAULT_ANALYSIS_CONFIG

        assert DEFAULT_ANALYSIS_CONFIG.TOP_N == 5
        assert DEFAULT_ANALYSIS_CONFIG.SIGNIFICANCE_PERCENT == 10
        assert DEFAULT_ANALYSIS_CONFIG.STYLE_GATE_PERCENT == 30
        assert DEFAULT_ANALYSIS_CONFIG.INDUSTRY_GATE_PERCENT == 25
        assert DEFAULT_ANALYSIS_CONFIG.PLATFORM_GATE_PERCENT == 20
        assert DEFAULT_ANALYSIS_CONFIG.MAX_RECOMMENDATIONS == 5
        assert DEFAULT_ANALYSIS_CONFIG.ANALYSIS_VERSION == "1.0"

    def test_strength_bands_are_descending(self):
        from config.constants import DEFAULT_ANALYSIS_CONFIG as cfg

        assert cfg.VERY_STRONG_PERCENT > cfg.STRONG_PERCENT > cfg.MODERATE_PERCENT

    def test_analysis_config_is_frozen(self):
        from dataclasses import FrozenInstanceError
        from config.constants import DEFAULT_ANALYSIS_CONFIG

        with pytest.raises(FrozenInstanceError):
            DEFAULT_ANALYSIS_CONFIG.TOP_N = 3

    def test_display_tables_cover_all_categories(self):
        """Test every tag category has a label and an icon."""
        from catalog.models import TAG_CATEGORIES
        from config.constants import CATEGORY_DISPLAY_NAMES, CATEGORY_ICONS

        assert set(CATEGORY_DISPLAY_NAMES) == set(TAG_CATEGORIES)
        assert set(CATEGORY_ICONS) == set(TAG_CATEGORIES)

    def test_scraping_artifacts(self):
        from config.constants import SCRAPING_ARTIFACTS

        assert "Claim this website" in SCRAPING_ARTIFACTS
        assert "PRO" in SCRAPING_ARTIFACTS


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
