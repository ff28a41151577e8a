"""Briefly Narrative Service

Builds the free-text parts of a brief by interpolating intake fields into
fixed prose. Every optional field has a canned fallback phrase.

Two fields are truncated when used as summary fragments:
- goals in the one-line summary: first 100 characters
- requirements in the executive summary: first 200 characters
Both are followed by "..." regardless of the original length.
"""

from dataclasses import dataclass
from typing import List, Optional

from briefly.models.intake import ProjectIntake

ELLIPSIS = "..."
SUMMARY_GOALS_LIMIT = 100
EXECUTIVE_REQUIREMENTS_LIMIT = 200

SUCCESS_METRICS = [
    "Brand recognition increase of 40%+ within 6 months",
    "User engagement improvement of 25%+",
    "Client satisfaction score of 95%+",
    "On-time delivery within agreed timeline",
    "Design consistency across all brand touchpoints",
]


@dataclass(frozen=True)
class NarrativeContent:
    """Prose sections of a brief"""
    summary: str
    executive_summary: str
    project_overview: str
    objectives: List[str]
    style_guide: str
    success_metrics: List[str]


def truncate(text: str, limit: int) -> str:
    """First `limit` characters followed by the ellipsis marker."""
    return text[:limit] + ELLIPSIS


def _or(value: Optional[str], fallback: str) -> str:
    return value if value else fallback


def build_summary(intake: ProjectIntake) -> str:
    if intake.goals:
        focus = f"Focused on {truncate(intake.goals, SUMMARY_GOALS_LIMIT)}"
    else:
        focus = (
            "Comprehensive design solution tailored to achieve business objectives "
            "and create lasting brand impact."
        )
    return f"Professional {intake.project_type} project for {intake.client_name}. {focus}"


def build_executive_summary(intake: ProjectIntake) -> str:
    project_type = intake.project_type
    client = intake.client_name

    opening = (
        f"This {project_type} project for {client} represents a strategic design initiative "
        f"aimed at {_or(intake.goals, 'establishing a strong brand presence and achieving business objectives')}."
    )
    positioning = (
        f"With a focus on {_or(intake.target_audience, 'target market engagement')} and embodying a "
        f"{_or(intake.brand_personality, 'professional and trustworthy')} brand personality, this project "
        f"will deliver {project_type.lower()} solutions that not only meet immediate business needs but "
        f"also position {client} for long-term success in their market."
    )
    if intake.requirements:
        closing = f"Key requirements include: {truncate(intake.requirements, EXECUTIVE_REQUIREMENTS_LIMIT)}"
    else:
        closing = (
            "The project will follow industry best practices and incorporate modern design "
            "principles to ensure maximum impact and effectiveness."
        )
    return "\n\n".join([opening, positioning, closing])


def build_project_overview(intake: ProjectIntake) -> str:
    client = intake.client_name
    scope = _or(
        intake.requirements,
        f"This {intake.project_type} project will deliver comprehensive design solutions that "
        f"align with {client}'s brand vision and business objectives.",
    )
    approach = (
        "The project scope encompasses strategic planning, creative development, and technical "
        "execution to ensure deliverables that exceed expectations. Our approach combines industry "
        "expertise with innovative design thinking to create solutions that resonate with "
        f"{_or(intake.target_audience, 'the target audience')} and drive meaningful business results."
    )
    focus = (
        "Key focus areas include brand consistency, user experience optimization, and scalable "
        f"design systems that will serve {client} well into the future."
    )
    return "\n\n".join([scope, approach, focus])


def build_objectives(intake: ProjectIntake) -> List[str]:
    return [
        f"Deliver exceptional {intake.project_type.lower()} that exceeds client expectations",
        f"Create designs that resonate with {_or(intake.target_audience, 'target audience')}",
        "Establish strong brand recognition and market presence",
        "Ensure scalability and long-term brand consistency",
        "Provide comprehensive documentation and guidelines",
    ]


def build_style_guide(intake: ProjectIntake) -> str:
    character = (
        f"Design approach will embody {_or(intake.brand_personality, 'professional and modern')} "
        "characteristics through carefully selected visual elements. The overall aesthetic will "
        "balance contemporary design trends with timeless appeal, ensuring longevity and broad "
        "market appeal."
    )
    hierarchy = (
        "Visual hierarchy will be established through strategic use of typography, color, and "
        "spacing to guide user attention and improve overall experience. All design elements will "
        f"work cohesively to reinforce {intake.client_name}'s brand message and values."
    )
    return "\n\n".join([character, hierarchy])


def assemble(intake: ProjectIntake) -> NarrativeContent:
    """All prose sections for an intake. Pure: same intake, same text."""
    return NarrativeContent(
        summary=build_summary(intake),
        executive_summary=build_executive_summary(intake),
        project_overview=build_project_overview(intake),
        objectives=build_objectives(intake),
        style_guide=build_style_guide(intake),
        success_metrics=list(SUCCESS_METRICS),
    )
