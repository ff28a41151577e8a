"""
Catalog lookup and colour/typography selection.

- Known project types map to their own template; anything else to Logo Design
- Personality text resolves exact key, then keywords, then default
- Typography has no trustworthy pairing, so trust-like text falls to default fonts
"""
import pytest

from briefly.models.catalog import PersonalityBucket, ProjectCategory, resolve_personality
from briefly.services import category_catalog, design_heuristics


class TestCategoryCatalog:

    @pytest.mark.parametrize("project_type,timeline,budget", [
        ("Logo Design", "2 weeks", 75000),
        ("Website Design", "1 month", 250000),
        ("Brand Identity", "2 months", 500000),
    ])
    def test_known_categories(self, project_type, timeline, budget):
        template = category_catalog.lookup(project_type)
        assert template.category.value == project_type
        assert template.default_timeline == timeline
        assert template.suggested_budget == budget
        assert len(template.phases) == 4

    @pytest.mark.parametrize("project_type", ["Podcast Artwork", "logo design", "", None])
    def test_unknown_type_falls_back_to_logo_design(self, project_type):
        template = category_catalog.lookup(project_type)
        assert template.category == ProjectCategory.LOGO_DESIGN

    def test_list_categories_marks_default(self):
        categories = category_catalog.list_categories()
        assert [c["name"] for c in categories] == ["Logo Design", "Website Design", "Brand Identity"]
        assert [c["is_default"] for c in categories] == [True, False, False]


class TestResolvePersonality:

    ALL = list(PersonalityBucket)

    def test_exact_key_is_case_insensitive(self):
        assert resolve_personality("Creative", self.ALL) == PersonalityBucket.CREATIVE

    def test_keyword_rules_in_order(self):
        # "corporate" hits the professional rule before "modern" is considered
        assert resolve_personality("Corporate yet modern", self.ALL) == PersonalityBucket.PROFESSIONAL
        assert resolve_personality("very contemporary", self.ALL) == PersonalityBucket.MODERN
        assert resolve_personality("reliable partner", self.ALL) == PersonalityBucket.TRUSTWORTHY
        assert resolve_personality("artistic flair", self.ALL) == PersonalityBucket.CREATIVE

    @pytest.mark.parametrize("text", [None, "", "playful"])
    def test_no_match_is_default(self, text):
        assert resolve_personality(text, self.ALL) == PersonalityBucket.DEFAULT

    def test_rule_skipped_when_bucket_missing(self):
        available = [b for b in self.ALL if b != PersonalityBucket.TRUSTWORTHY]
        assert resolve_personality("trustworthy", available) == PersonalityBucket.DEFAULT


class TestPalette:

    def test_professional_logo_palette(self):
        palette = design_heuristics.select_palette("Logo Design", "professional")
        assert (palette.primary, palette.secondary, palette.accent, palette.neutral) == (
            "#2C3E50", "#34495E", "#7F8C8D", "#95A5A6",
        )
        assert palette.usage[0] == "Primary (#2C3E50): Main brand color for logos and key elements"

    def test_trust_keyword_palette(self):
        palette = design_heuristics.select_palette("Brand Identity", "Trustworthy and warm")
        assert palette.primary == "#0369A1"

    def test_unknown_type_uses_logo_tables(self):
        palette = design_heuristics.select_palette("Menu Design", None)
        assert palette.primary == "#2C3E50"
        assert palette.accent == "#E74C3C"
        assert "embodies professional characteristics" in palette.description

    def test_description_echoes_personality(self):
        palette = design_heuristics.select_palette("Website Design", "Bold")
        assert "embodies Bold characteristics" in palette.description


class TestTypography:

    def test_modern_website_fonts(self):
        fonts = design_heuristics.select_typography("Website Design", "modern")
        assert (fonts.primary, fonts.secondary) == ("Inter", "Space Grotesk")
        assert len(fonts.usage) == 4
        assert fonts.licensing == design_heuristics.FONT_LICENSING_NOTE

    def test_trustworthy_falls_back_to_default_fonts(self):
        fonts = design_heuristics.select_typography("Logo Design", "trustworthy")
        assert (fonts.primary, fonts.secondary) == ("Open Sans", "Roboto")

    def test_palette_and_fonts_resolve_independently(self):
        palette = design_heuristics.select_palette("Logo Design", "reliable")
        fonts = design_heuristics.select_typography("Logo Design", "reliable")
        assert palette.primary == "#2980B9"
        assert fonts.primary == "Open Sans"
