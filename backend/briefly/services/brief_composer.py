"""Briefly Brief Composer

Orchestrates catalog lookup, design heuristics, budget allocation and
narrative assembly into a single Brief.

Pure aside from identifier and timestamp generation, both injectable so the
same intake can be composed twice with identical output.
"""

from datetime import datetime, timezone
from typing import Callable, Optional, Union
import itertools
import logging
import uuid

from briefly.errors import BrieflyError, CompositionFailure, InvalidIntake
from briefly.models.brief import (
    Brief,
    BriefSections,
    BudgetSection,
    BusinessProfile,
    ClientInfoSection,
    ContactInfo,
    DeliverablesSection,
    DesignDirectionSection,
    ExecutiveSummarySection,
    ProjectOverviewSection,
    SuccessSection,
    TimelineSection,
)
from briefly.models.intake import ProjectIntake
from briefly.services import budget_allocator, category_catalog, design_heuristics, narrative_service

logger = logging.getLogger(__name__)

CURRENCY_SYMBOL = "₦"
KEY_POINT_DEFAULT_TIMELINE = "2 weeks"

_brief_sequence = itertools.count(1)


def next_brief_id() -> str:
    """Process-monotonic sequence plus a random suffix.

    Unique under rapid repeated calls in one process and across processes.
    """
    return f"BRF-{next(_brief_sequence):06d}-{uuid.uuid4().hex[:10].upper()}"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def format_amount(amount: Optional[Union[int, float]]) -> str:
    """Group thousands with commas; whole floats print without decimals."""
    if amount is None:
        return "TBD"
    if isinstance(amount, float) and amount.is_integer():
        amount = int(amount)
    return f"{amount:,}"


class BriefComposer:
    """Turns a ProjectIntake into a Brief."""

    def __init__(
        self,
        id_factory: Callable[[], str] = next_brief_id,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.id_factory = id_factory
        self.clock = clock

    def compose(self, intake: ProjectIntake) -> Brief:
        """Compose a brief.

        Raises InvalidIntake when client_name or project_type is blank and
        CompositionFailure for any internal fault; never returns a partial brief.
        """
        missing = intake.missing_required_fields()
        if missing:
            raise InvalidIntake(
                f"Missing required fields: {', '.join(missing)}",
                fields=missing,
            )

        try:
            return self._build(intake)
        except BrieflyError:
            raise
        except Exception as e:
            logger.error(f"Brief composition failed for {intake.project_type!r}: {e}")
            raise CompositionFailure(f"Brief composition failed: {e}") from e

    def _build(self, intake: ProjectIntake) -> Brief:
        project_type = intake.project_type
        template = category_catalog.lookup(project_type)
        palette = design_heuristics.select_palette(project_type, intake.brand_personality)
        typography = design_heuristics.select_typography(project_type, intake.brand_personality)

        total_budget = intake.budget if intake.budget is not None else template.suggested_budget
        breakdown = budget_allocator.allocate(total_budget, project_type)

        narrative = narrative_service.assemble(intake)
        target_audience = intake.target_audience or "To be defined"

        sections = BriefSections(
            executive_summary=ExecutiveSummarySection(
                content=narrative.executive_summary,
                key_points=[
                    f"Project Type: {project_type}",
                    f"Client: {intake.client_name}",
                    f"Timeline: {intake.timeline or KEY_POINT_DEFAULT_TIMELINE}",
                    f"Budget: {CURRENCY_SYMBOL}{format_amount(intake.budget)}",
                    f"Target Audience: {target_audience}",
                ],
            ),
            client_info=ClientInfoSection(
                client_name=intake.client_name,
                contact_info=ContactInfo(email=intake.client_email),
                business_profile=BusinessProfile(target_audience=target_audience),
            ),
            project_overview=ProjectOverviewSection(
                content=narrative.project_overview,
                objectives=narrative.objectives,
            ),
            deliverables=DeliverablesSection(
                primary_deliverables=list(template.primary_deliverables),
                secondary_deliverables=list(template.secondary_deliverables),
                technical_specs=list(template.technical_specs),
            ),
            design_direction=DesignDirectionSection(
                color_palette=palette,
                typography=typography,
                style_guide=narrative.style_guide,
                visual_reference=template.visual_reference,
            ),
            timeline=TimelineSection(
                total_duration=intake.timeline or template.default_timeline,
                phases=list(template.phases),
                milestones=list(template.milestones),
            ),
            budget=BudgetSection(
                total_budget=total_budget,
                breakdown=breakdown,
            ),
            success=SuccessSection(
                kpis=narrative.success_metrics,
                delivery_checklist=list(template.delivery_checklist),
            ),
        )

        return Brief(
            brief_id=self.id_factory(),
            title=f"{project_type} Brief for {intake.client_name}",
            summary=narrative.summary,
            sections=sections,
            intake=intake,
            category=template.category.value,
            created_at=self.clock(),
        )
