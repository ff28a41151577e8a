"""Briefly Catalog Models

Closed enumerations for project categories and personality buckets, plus the
static per-category template bundle.
"""

from pydantic import BaseModel
from typing import Iterable, List, Optional
from enum import Enum


class ProjectCategory(str, Enum):
    """Project types with a dedicated template"""
    LOGO_DESIGN = "Logo Design"
    WEBSITE_DESIGN = "Website Design"
    BRAND_IDENTITY = "Brand Identity"

    @classmethod
    def default(cls) -> "ProjectCategory":
        return cls.LOGO_DESIGN

    @classmethod
    def resolve(cls, project_type: Optional[str]) -> "ProjectCategory":
        """Exact match on the display name, else the default category."""
        try:
            return cls(project_type)
        except ValueError:
            return cls.default()


class PersonalityBucket(str, Enum):
    """Tone keywords used to pick colours and fonts"""
    PROFESSIONAL = "professional"
    MODERN = "modern"
    TRUSTWORTHY = "trustworthy"
    CREATIVE = "creative"
    DEFAULT = "default"


# Ordered substring fallback used when the personality text is not an exact key
PERSONALITY_KEYWORDS = [
    (PersonalityBucket.PROFESSIONAL, ("professional", "corporate")),
    (PersonalityBucket.MODERN, ("modern", "contemporary")),
    (PersonalityBucket.TRUSTWORTHY, ("trust", "reliable")),
    (PersonalityBucket.CREATIVE, ("creative", "artistic")),
]


def resolve_personality(
    personality: Optional[str],
    available: Iterable[PersonalityBucket],
) -> PersonalityBucket:
    """Map free-text brand personality onto a bucket present in a table.

    Exact key first, then the ordered keyword rules. A rule is skipped when the
    table has no entry for its bucket. DEFAULT is always the last resort.
    """
    available = set(available)
    text = (personality or "").lower() or PersonalityBucket.DEFAULT.value

    for bucket in available:
        if bucket.value == text:
            return bucket

    for bucket, keywords in PERSONALITY_KEYWORDS:
        if bucket in available and any(keyword in text for keyword in keywords):
            return bucket

    return PersonalityBucket.DEFAULT


class ProjectPhase(BaseModel):
    """One step of the delivery timeline"""
    phase: str
    duration: str
    description: str

    model_config = {"frozen": True}


class CategoryTemplate(BaseModel):
    """Static deliverables/timeline/budget bundle for a project category."""
    category: ProjectCategory

    primary_deliverables: List[str]
    secondary_deliverables: List[str]
    technical_specs: List[str]

    phases: List[ProjectPhase]
    milestones: List[str]
    default_timeline: str

    suggested_budget: int
    visual_reference: str
    delivery_checklist: List[str]

    model_config = {"frozen": True}
