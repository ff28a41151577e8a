"""Briefly Brief Models

The synthesized creative brief and its fixed sections.
A Brief is created once by the composer and never mutated afterwards.
"""

from pydantic import BaseModel, Field
from typing import List, Optional, Union
from datetime import datetime, timezone

from briefly.models.catalog import ProjectPhase
from briefly.models.intake import ProjectIntake


FROZEN = {"frozen": True, "extra": "ignore"}


class PalettePick(BaseModel):
    """Four-colour palette with per-slot usage notes"""
    primary: str
    secondary: str
    accent: str
    neutral: str
    description: str
    usage: List[str]

    model_config = FROZEN


class TypographyPick(BaseModel):
    """Primary/secondary font pairing"""
    primary: str
    secondary: str
    description: str
    usage: List[str]
    licensing: str

    model_config = FROZEN


class BudgetLine(BaseModel):
    """One bucket of the budget breakdown.

    Amounts are rounded individually and may not add up to the total.
    """
    item: str
    percentage: int = Field(ge=0, le=100)
    amount: int
    description: str

    model_config = FROZEN


# ============================================================================
# Sections
# ============================================================================

class ExecutiveSummarySection(BaseModel):
    title: str = "Executive Summary"
    content: str
    key_points: List[str]

    model_config = FROZEN


class ContactInfo(BaseModel):
    email: Optional[str] = None

    model_config = FROZEN


class BusinessProfile(BaseModel):
    target_audience: str

    model_config = FROZEN


class ClientInfoSection(BaseModel):
    title: str = "Client Information"
    client_name: str
    contact_info: ContactInfo
    business_profile: BusinessProfile

    model_config = FROZEN


class ProjectOverviewSection(BaseModel):
    title: str = "Project Overview"
    content: str
    objectives: List[str]

    model_config = FROZEN


class DeliverablesSection(BaseModel):
    title: str = "Deliverables"
    primary_deliverables: List[str]
    secondary_deliverables: List[str]
    technical_specs: List[str]

    model_config = FROZEN


class DesignDirectionSection(BaseModel):
    title: str = "Design Direction"
    color_palette: PalettePick
    typography: TypographyPick
    style_guide: str
    visual_reference: str

    model_config = FROZEN


class TimelineSection(BaseModel):
    title: str = "Project Timeline"
    total_duration: str
    phases: List[ProjectPhase]
    milestones: List[str]

    model_config = FROZEN


class BudgetSection(BaseModel):
    title: str = "Project Budget"
    total_budget: Union[int, float]
    breakdown: List[BudgetLine]

    model_config = FROZEN


class SuccessSection(BaseModel):
    title: str = "Success Metrics"
    kpis: List[str]
    delivery_checklist: List[str]

    model_config = FROZEN


class BriefSections(BaseModel):
    """Ordered section mapping of a brief"""
    executive_summary: ExecutiveSummarySection
    client_info: ClientInfoSection
    project_overview: ProjectOverviewSection
    deliverables: DeliverablesSection
    design_direction: DesignDirectionSection
    timeline: TimelineSection
    budget: BudgetSection
    success: SuccessSection

    model_config = FROZEN


class Brief(BaseModel):
    """Generated creative brief.

    user_id and created_at are attached by the generation gateway through a
    copy of the composed brief.
    """
    brief_id: str
    title: str
    summary: str
    sections: BriefSections

    # What the client asked for
    intake: ProjectIntake
    category: str  # Resolved catalog category

    # Ownership
    user_id: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    model_config = FROZEN


class BriefListItem(BaseModel):
    """Brief listing item for the user's history"""
    brief_id: str
    title: str
    category: str
    created_at: datetime

    model_config = {"extra": "ignore"}
