"""Briefly Category Catalog

Static per-project-type templates: deliverables, technical specs, phases,
milestones, default timeline, suggested budget and delivery checklist.

Loaded once at import and read-only for the process lifetime. Unknown project
types resolve to the Logo Design template so generation always succeeds
structurally.
"""

from typing import Dict, List, Optional

from briefly.models.catalog import CategoryTemplate, ProjectCategory, ProjectPhase


CATEGORY_TEMPLATES: Dict[ProjectCategory, CategoryTemplate] = {
    ProjectCategory.LOGO_DESIGN: CategoryTemplate(
        category=ProjectCategory.LOGO_DESIGN,
        primary_deliverables=[
            "Primary logo design (full color)",
            "Logo variations (horizontal, vertical, icon-only)",
            "Black and white versions",
            "Reversed/knockout versions for dark backgrounds",
            "Vector files (AI, EPS, SVG)",
            "Raster files (PNG, JPG) in multiple resolutions",
        ],
        secondary_deliverables=[
            "Social media profile optimized versions",
            "Favicon and app icon versions",
            "Watermark versions",
            "Brand style guide (10-15 pages)",
            "Usage guidelines document",
        ],
        technical_specs=[
            "Minimum size: 16px × 16px (favicon)",
            "Maximum scalability: Billboard size",
            "Color modes: CMYK, RGB, Pantone",
            "File formats: AI, EPS, SVG, PNG, JPG, PDF",
        ],
        phases=[
            ProjectPhase(phase="Discovery & Research", duration="2-3 days",
                         description="Brand research, competitor analysis, and client consultation"),
            ProjectPhase(phase="Concept Development", duration="3-5 days",
                         description="Initial logo concepts and design exploration"),
            ProjectPhase(phase="Refinement", duration="2-3 days",
                         description="Client feedback implementation and design refinements"),
            ProjectPhase(phase="Finalization", duration="1-2 days",
                         description="Final file preparation and documentation delivery"),
        ],
        milestones=[
            "Research completion and insights presentation",
            "Initial concepts presentation (3-5 options)",
            "Refined design approval",
            "Final files and guidelines delivery",
        ],
        default_timeline="2 weeks",
        suggested_budget=75000,
        visual_reference="Clean, memorable, scalable design that works across all applications",
        delivery_checklist=[
            "All file formats delivered",
            "Style guide completed",
            "Usage examples provided",
            "Client training completed",
        ],
    ),
    ProjectCategory.WEBSITE_DESIGN: CategoryTemplate(
        category=ProjectCategory.WEBSITE_DESIGN,
        primary_deliverables=[
            "Homepage design mockup",
            "5-7 interior page designs",
            "Mobile responsive layouts",
            "Interactive prototype",
            "Style guide and component library",
            "Developer handoff package",
        ],
        secondary_deliverables=[
            "User flow diagrams",
            "Wireframes and site architecture",
            "Icon set and imagery guidelines",
            "Animation and interaction specifications",
            "SEO optimization guidelines",
        ],
        technical_specs=[
            "Responsive breakpoints: 320px, 768px, 1024px, 1440px",
            "Page load speed: <3 seconds",
            "Browser compatibility: Chrome, Firefox, Safari, Edge",
            "Accessibility: WCAG 2.1 AA compliance",
        ],
        phases=[
            ProjectPhase(phase="Planning & Research", duration="3-5 days",
                         description="User research, site architecture, and content strategy"),
            ProjectPhase(phase="Design Development", duration="1-2 weeks",
                         description="Visual design and page layouts creation"),
            ProjectPhase(phase="Prototype & Testing", duration="3-5 days",
                         description="Interactive prototype and user testing"),
            ProjectPhase(phase="Finalization", duration="2-3 days",
                         description="Final assets and developer documentation"),
        ],
        milestones=[
            "Site architecture approval",
            "Homepage design approval",
            "Full site design completion",
            "Prototype testing and final delivery",
        ],
        default_timeline="1 month",
        suggested_budget=250000,
        visual_reference="Modern, user-friendly interface with intuitive navigation and engaging visuals",
        delivery_checklist=[
            "All page designs completed",
            "Responsive layouts verified",
            "Prototype tested and approved",
            "Developer documentation provided",
        ],
    ),
    ProjectCategory.BRAND_IDENTITY: CategoryTemplate(
        category=ProjectCategory.BRAND_IDENTITY,
        primary_deliverables=[
            "Logo design and complete variation suite",
            "Color palette with psychological considerations",
            "Typography system (primary and secondary fonts)",
            "Business stationery design package",
            "Brand guidelines manual (30-50 pages)",
            "Marketing collateral templates",
        ],
        secondary_deliverables=[
            "Social media brand templates",
            "Email signature designs",
            "Brand photography style guide",
            "Voice and tone guidelines",
            "Brand application examples",
        ],
        technical_specs=[
            "Logo scalability: Business card to billboard",
            "Color specifications: Pantone, CMYK, RGB, HEX",
            "Typography licensing and web font setup",
            "Print specifications and color profiles",
        ],
        phases=[
            ProjectPhase(phase="Brand Strategy", duration="1 week",
                         description="Brand positioning, personality, and strategy development"),
            ProjectPhase(phase="Visual Identity", duration="2 weeks",
                         description="Logo, colors, typography, and visual system creation"),
            ProjectPhase(phase="Brand Applications", duration="1 week",
                         description="Applying brand to various materials and touchpoints"),
            ProjectPhase(phase="Guidelines & Training", duration="3-5 days",
                         description="Brand manual creation and team training"),
        ],
        milestones=[
            "Brand strategy approval",
            "Visual identity system approval",
            "Application designs completed",
            "Brand manual and training delivered",
        ],
        default_timeline="2 months",
        suggested_budget=500000,
        visual_reference="Cohesive brand system that tells a compelling story and differentiates in the market",
        delivery_checklist=[
            "Complete brand manual delivered",
            "All brand applications completed",
            "Team training conducted",
            "Brand launch strategy provided",
        ],
    ),
}


def lookup(project_type: Optional[str]) -> CategoryTemplate:
    """Template for a project type, falling back to the default category."""
    return CATEGORY_TEMPLATES[ProjectCategory.resolve(project_type)]


def list_categories() -> List[Dict[str, object]]:
    """Catalog summary for display (name, default timeline, suggested budget)."""
    return [
        {
            "name": template.category.value,
            "default_timeline": template.default_timeline,
            "suggested_budget": template.suggested_budget,
            "is_default": template.category == ProjectCategory.default(),
        }
        for template in CATEGORY_TEMPLATES.values()
    ]
