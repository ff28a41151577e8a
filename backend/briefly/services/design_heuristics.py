"""Briefly Design Heuristics

Colour palette and typography selection from (project type, brand personality).

Two-level fallback:
1. Unknown project type -> default category tables
2. Personality text -> exact bucket, keyword bucket, or the category's default
"""

from typing import Dict, List, Optional, Tuple

from briefly.models.brief import PalettePick, TypographyPick
from briefly.models.catalog import PersonalityBucket, ProjectCategory, resolve_personality

P = PersonalityBucket

# (primary, secondary, accent, neutral)
COLOR_PSYCHOLOGY: Dict[ProjectCategory, Dict[PersonalityBucket, Tuple[str, str, str, str]]] = {
    ProjectCategory.LOGO_DESIGN: {
        P.PROFESSIONAL: ("#2C3E50", "#34495E", "#7F8C8D", "#95A5A6"),
        P.MODERN: ("#3498DB", "#9B59B6", "#E74C3C", "#F39C12"),
        P.TRUSTWORTHY: ("#2980B9", "#27AE60", "#16A085", "#8E44AD"),
        P.CREATIVE: ("#E67E22", "#E91E63", "#9C27B0", "#FF5722"),
        P.DEFAULT: ("#2C3E50", "#3498DB", "#E74C3C", "#F39C12"),
    },
    ProjectCategory.WEBSITE_DESIGN: {
        P.PROFESSIONAL: ("#1A202C", "#2D3748", "#4A5568", "#718096"),
        P.MODERN: ("#667EEA", "#764BA2", "#F093FB", "#F5576C"),
        P.TRUSTWORTHY: ("#4299E1", "#38B2AC", "#68D391", "#9F7AEA"),
        P.CREATIVE: ("#ED8936", "#F56565", "#EC4899", "#8B5CF6"),
        P.DEFAULT: ("#1A202C", "#4299E1", "#ED8936", "#38B2AC"),
    },
    ProjectCategory.BRAND_IDENTITY: {
        P.PROFESSIONAL: ("#1E293B", "#475569", "#64748B", "#94A3B8"),
        P.MODERN: ("#6366F1", "#8B5CF6", "#EC4899", "#F59E0B"),
        P.TRUSTWORTHY: ("#0369A1", "#059669", "#7C3AED", "#DC2626"),
        P.CREATIVE: ("#EA580C", "#DB2777", "#7C2D12", "#BE123C"),
        P.DEFAULT: ("#1E293B", "#6366F1", "#EA580C", "#059669"),
    },
}

# (primary, secondary, description); no trustworthy pairing exists for fonts
FONT_DATABASE: Dict[ProjectCategory, Dict[PersonalityBucket, Tuple[str, str, str]]] = {
    ProjectCategory.LOGO_DESIGN: {
        P.PROFESSIONAL: ("Montserrat", "Source Sans Pro",
                         "Clean, professional typefaces that convey reliability and sophistication"),
        P.MODERN: ("Poppins", "Inter",
                   "Contemporary fonts with geometric precision and excellent readability"),
        P.CREATIVE: ("Playfair Display", "Lato",
                     "Expressive typefaces that balance creativity with professional appeal"),
        P.DEFAULT: ("Open Sans", "Roboto",
                    "Versatile, highly readable fonts suitable for all applications"),
    },
    ProjectCategory.WEBSITE_DESIGN: {
        P.PROFESSIONAL: ("Source Sans Pro", "Georgia",
                         "Web-optimized fonts that ensure excellent readability across all devices"),
        P.MODERN: ("Inter", "Space Grotesk",
                   "Modern system fonts designed for digital interfaces and user experiences"),
        P.CREATIVE: ("Nunito", "Merriweather",
                     "Friendly, approachable fonts that add personality while maintaining usability"),
        P.DEFAULT: ("Roboto", "Open Sans",
                    "Google Fonts that provide reliable cross-platform consistency"),
    },
    ProjectCategory.BRAND_IDENTITY: {
        P.PROFESSIONAL: ("Helvetica Neue", "Times New Roman",
                         "Classic typefaces that convey established authority and timeless appeal"),
        P.MODERN: ("Avenir Next", "Proxima Nova",
                   "Contemporary fonts that project innovation and forward-thinking"),
        P.CREATIVE: ("Futura", "Caslon",
                     "Distinctive typefaces that create memorable brand experiences"),
        P.DEFAULT: ("Arial", "Verdana",
                    "Reliable system fonts with universal compatibility"),
    },
}

FONT_LICENSING_NOTE = "Ensure proper licensing for commercial use across all applications"


def select_palette(project_type: Optional[str], personality: Optional[str]) -> PalettePick:
    """Pick a four-colour palette for the project type and personality."""
    table = COLOR_PSYCHOLOGY[ProjectCategory.resolve(project_type)]
    primary, secondary, accent, neutral = table[resolve_personality(personality, table)]

    return PalettePick(
        primary=primary,
        secondary=secondary,
        accent=accent,
        neutral=neutral,
        description=(
            f"Carefully selected color palette that embodies {personality or 'professional'} "
            "characteristics while ensuring accessibility and brand recognition."
        ),
        usage=_palette_usage(primary, secondary, accent, neutral),
    )


def select_typography(project_type: Optional[str], personality: Optional[str]) -> TypographyPick:
    """Pick a font pairing for the project type and personality."""
    table = FONT_DATABASE[ProjectCategory.resolve(project_type)]
    primary, secondary, description = table[resolve_personality(personality, table)]

    return TypographyPick(
        primary=primary,
        secondary=secondary,
        description=description,
        usage=[
            f"Primary Font ({primary}): Headlines, logos, and main brand typography",
            f"Secondary Font ({secondary}): Body text, captions, and supporting content",
            "Font pairing selected for optimal hierarchy and brand consistency",
            "All fonts verified for web and print compatibility",
        ],
        licensing=FONT_LICENSING_NOTE,
    )


def _palette_usage(primary: str, secondary: str, accent: str, neutral: str) -> List[str]:
    return [
        f"Primary ({primary}): Main brand color for logos and key elements",
        f"Secondary ({secondary}): Supporting color for backgrounds and secondary elements",
        f"Accent ({accent}): Call-to-action buttons and highlights",
        f"Neutral ({neutral}): Text and subtle background elements",
    ]
