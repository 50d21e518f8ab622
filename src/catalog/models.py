"""
Pydantic models for the design catalog and the selection log.

These are the input shapes of the results engine. The catalog JSON is
cleaned by ``catalog.validator`` before it becomes ``Design`` objects;
selections come straight from the quiz session as camelCase JSON.
"""

from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


# ============================================================================
# Enums
# ============================================================================

class TagCategory(str, Enum):
    """The seven fixed tag dimensions, in display order."""
    STYLE = "style"
    INDUSTRY = "industry"
    TYPOGRAPHY = "typography"
    TYPE = "type"
    CATEGORY = "category"
    PLATFORM = "platform"
    COLORS = "colors"


TAG_CATEGORIES: List[str] = [c.value for c in TagCategory]


# ============================================================================
# Catalog
# ============================================================================

class DesignTags(BaseModel):
    """Tag lists of one design, one ordered list per category."""
    model_config = ConfigDict(frozen=True)

    style: List[str] = Field(default_factory=list)
    industry: List[str] = Field(default_factory=list)
    typography: List[str] = Field(default_factory=list)
    type: List[str] = Field(default_factory=list)
    category: List[str] = Field(default_factory=list)
    platform: List[str] = Field(default_factory=list)
    colors: List[str] = Field(default_factory=list, description="#RRGGBB, upper-case")

    def get(self, category: str) -> List[str]:
        """Tags for a category given as a TagCategory or its string value."""
        return getattr(self, TagCategory(category).value)


class Design(BaseModel):
    """A catalog entry shown in the quiz."""
    model_config = ConfigDict(frozen=True)

    id: str
    image: Optional[str] = None
    title: Optional[str] = None
    author: Optional[str] = None
    tags: Optional[DesignTags] = None


# ============================================================================
# Session
# ============================================================================

class Selection(BaseModel):
    """One recorded decision: ``selected_id`` won over ``rejected_id``."""
    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    selected_id: str
    rejected_id: str
    timestamp: Optional[datetime] = None
    round_number: int = Field(1, ge=1)
    time_to_decision: Optional[float] = Field(None, ge=0)
