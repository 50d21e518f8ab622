"""
Pytest configuration and shared fixtures for the design preference engine tests.
"""
import os
import sys
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

import pytest

# Add src to path for imports
sys.path.insert(0, os.path.join(os.path.dirname(os.path.dirname(__file__)), "src"))

# Load environment variables
from dotenv import load_dotenv
load_dotenv(os.path.join(os.path.dirname(os.path.dirname(__file__)), ".env"))


SESSION_START = datetime(2025, 1, 30, 10, 0, 0, tzinfo=timezone.utc)
COMPLETED_AT = datetime(2025, 1, 30, 10, 15, 0, tzinfo=timezone.utc)


# ============================================================================
# Factories
# ============================================================================

def make_design(design_id: str, with_tags: bool = True, **tags: List[str]):
    """Create a Design; unspecified categories are empty."""
    from catalog.models import Design, DesignTags
    return Design(
        id=design_id,
        image=f"https://example.com/images/{design_id}.jpg",
        tags=DesignTags(**tags) if with_tags else None,
    )


def make_selections(winners: List[str], loser: str = "design_loser") -> list:
    """One Selection per winning design id, in round order."""
    from catalog.models import Selection
    return [
        Selection(
            selected_id=winner,
            rejected_id=loser,
            timestamp=SESSION_START + timedelta(seconds=15 * i),
            round_number=i + 1,
            time_to_decision=8.5,
        )
        for i, winner in enumerate(winners)
    ]


# ============================================================================
# Fixtures: Test Data
# ============================================================================

@pytest.fixture
def sample_designs() -> list:
    """Small catalog with overlapping tags."""
    return [
        make_design(
            "design_001",
            style=["Modern", "Minimal"],
            industry=["Technology"],
            typography=["Sans Serif"],
            type=["Web App"],
            category=["Landing"],
            platform=["React"],
            colors=["#FFFFFF", "#000000"],
        ),
        make_design(
            "design_002",
            style=["Bold"],
            industry=["Health & Fitness"],
            typography=["Serif"],
            type=["Website"],
            category=["Portfolio"],
            platform=["Webflow"],
            colors=["#FF5733", "#FFFFFF"],
        ),
        make_design(
            "design_003",
            style=["Modern"],
            industry=["Technology"],
            typography=["Sans Serif"],
            type=["Web App"],
            category=["SaaS"],
            platform=["React"],
            colors=["#000000", "#1A1A1A"],
        ),
        make_design("design_untagged", with_tags=False),
    ]


@pytest.fixture
def sample_selections() -> list:
    """Ten choices leaning toward modern technology designs."""
    winners = ["design_001"] * 5 + ["design_003"] * 3 + ["design_002"] * 2
    return make_selections(winners)


@pytest.fixture
def sample_catalog_document() -> Dict:
    """Raw catalog JSON as produced by the scraper."""
    return {
        "metadata": {"generatedAt": "2025-01-30T10:00:00.000Z", "totalDesigns": 3},
        "designs": [
            {
                "id": "design_001",
                "image": "https://example.com/image1.jpg",
                "title": "  Acme Landing  ",
                "author": "Studio One",
                "tags": {
                    "style": ["Modern", "Minimal"],
                    "industry": ["Technology"],
                    "typography": ["Sans Serif"],
                    "type": ["Web App"],
                    "category": ["Landing"],
                    "platform": ["React"],
                    "colors": ["#ffffff", "#000000"],
                },
            },
            {
                "id": "design_002",
                "image": "./images/design_002.webp",
                "author": "Studio Two",
                "tags": {
                    "style": ["Bold", "Modern"],
                    "industry": ["Health & Fitness"],
                    "platform": ["Webflow"],
                    "colors": ["#FF5733"],
                },
            },
            {
                "id": "design_003",
                "image": "images/design_003.webp",
                "author": "Studio One",
                "tags": {
                    "style": ["Modern"],
                    "industry": ["Technology"],
                    "colors": ["#000000", "#1A1A1A", "#FFFFFF"],
                },
            },
        ],
    }


@pytest.fixture
def completed_at() -> datetime:
    return COMPLETED_AT


# ============================================================================
# Markers auto-use
# ============================================================================

def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: marks tests as unit tests")
    config.addinivalue_line("markers", "slow: marks tests as slow")
