"""Briefly Budget Allocator

Splits a total budget across fixed cost buckets per project category.

The caller supplies the total (the intake budget or the category's suggested
budget); zero and negative totals are allocated as-is.
"""

import math
from typing import Dict, List, Optional, Tuple, Union

from briefly.models.brief import BudgetLine
from briefly.models.catalog import ProjectCategory

# (item, percentage, description); each table sums to 100
BREAKDOWN_TEMPLATES: Dict[ProjectCategory, List[Tuple[str, int, str]]] = {
    ProjectCategory.LOGO_DESIGN: [
        ("Design Development", 50, "Concept creation and logo design"),
        ("Revisions & Refinements", 25, "Client feedback and adjustments"),
        ("File Preparation", 15, "Multiple formats and variations"),
        ("Style Guide Creation", 10, "Usage guidelines and documentation"),
    ],
    ProjectCategory.WEBSITE_DESIGN: [
        ("Design & Development", 60, "Visual design and page layouts"),
        ("Responsive Optimization", 20, "Mobile and tablet adaptations"),
        ("Testing & Refinements", 15, "User testing and improvements"),
        ("Documentation & Handoff", 5, "Developer assets and guidelines"),
    ],
    ProjectCategory.BRAND_IDENTITY: [
        ("Strategy & Research", 20, "Brand positioning and market analysis"),
        ("Visual Identity Design", 40, "Logo, colors, typography system"),
        ("Brand Applications", 25, "Stationery, templates, and materials"),
        ("Guidelines & Training", 15, "Brand manual and team training"),
    ],
}


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves towards positive infinity."""
    return int(math.floor(value + 0.5))


def allocate(total_budget: Union[int, float], project_type: Optional[str]) -> List[BudgetLine]:
    """Budget lines for a project type; amounts are rounded per line."""
    template = BREAKDOWN_TEMPLATES[ProjectCategory.resolve(project_type)]
    return [
        BudgetLine(
            item=item,
            percentage=percentage,
            amount=round_half_up(total_budget * (percentage / 100)),
            description=description,
        )
        for item, percentage, description in template
    ]
