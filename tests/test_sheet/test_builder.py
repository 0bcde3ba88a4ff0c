"""
Tests for sheet assembly (vte_sheet/sheet/builder.py).

Tests cover:
- Section order, omission of empty sections and vertical stacking
- Widget kind chosen per trait type
- AUTOHIDE and hidden-category traits
- Clamping of stale values when a bound variable is lowered
"""

import pytest

from vte_sheet.errors import InvalidArgument
from vte_sheet.models.constants import TemplateKey
from vte_sheet.sheet import build_sheet, trait_widget
from vte_sheet.traits.widgets import DropdownWidget, FreeTextWidget, IntegerWidget


def _trait(character, name):
    trait = character.find_trait(name)
    assert trait is not None, name
    return trait


# ============================================================================
# SECTIONS
# ============================================================================


@pytest.mark.unit
class TestSections:
    def test_mortal_sections(self, mortal):
        sheet = build_sheet(mortal, column_count=3)

        layout = [(s.title, s.starting_row, s.rows_consumed) for s in sheet.sections]
        assert layout == [
            ("Top", 1, 2),
            ("Attributes", 3, 3),
            ("Skills", 6, 8),
            ("Backgrounds", 14, 3),
            ("Path", 17, 1),
            ("Vital Statistics", 18, 3),
        ]
        assert sheet.total_rows == 20

    def test_hidden_traits_never_render(self, mortal):
        sheet = build_sheet(mortal)

        names = {w.name for s in sheet.sections for w in s.widgets}
        assert "Trait Max" not in names
        assert "Magic Max" not in names

    def test_autohide_power_appears_once_set(self, kindred):
        assert build_sheet(kindred).section("Powers") is None

        kindred.assign(_trait(kindred, "Auspex").unique_id, 2)
        powers = build_sheet(kindred).section("Powers")

        assert powers is not None
        assert [w.name for w in powers.widgets] == ["Auspex"]

    def test_kindred_top_section_grows(self, kindred):
        top = build_sheet(kindred).section("Top")

        assert len(top.widgets) == 8
        assert top.rows_consumed == 3

    def test_mage_progression(self, mage):
        progression = build_sheet(mage).section("Progression")

        assert [w.name for w in progression.widgets] == ["Arete", "Arcana"]

    def test_starting_row_offsets_every_section(self, mortal):
        sheet = build_sheet(mortal, starting_row=10)

        assert sheet.sections[0].starting_row == 10
        assert sheet.sections[1].starting_row == 12

    def test_single_column(self, mortal):
        sheet = build_sheet(mortal, column_count=1)

        attributes = sheet.section("Attributes")
        assert attributes.rows_consumed == 9
        assert {w.row for w in attributes.widgets} == {attributes.starting_row}

    def test_zero_columns_rejected(self, mortal):
        with pytest.raises(InvalidArgument):
            build_sheet(mortal, column_count=0)

    def test_templates_listed(self, make_character):
        sheet = build_sheet(make_character(TemplateKey.KINDRED, TemplateKey.MAGE))

        assert sheet.templates == ["kindred", "mage"]
        assert sheet.column_count == 3


# ============================================================================
# WIDGETS
# ============================================================================


@pytest.mark.unit
class TestTraitWidget:
    def test_attribute_is_integer(self, mortal):
        widget = trait_widget(_trait(mortal, "Strength"))

        assert isinstance(widget, IntegerWidget)
        assert (widget.min_value, widget.max_value, widget.value) == (1, 5, 1)

    def test_name_is_free_text(self, mortal):
        assert isinstance(trait_widget(_trait(mortal, "Name")), FreeTextWidget)

    def test_vital_statistic_is_free_text(self, mortal):
        widget = trait_widget(_trait(mortal, "Health"))

        assert isinstance(widget, FreeTextWidget)
        assert widget.value == ""

    def test_dropdown_lists_options(self, kindred):
        widget = trait_widget(_trait(kindred, "Clan"))

        assert isinstance(widget, DropdownWidget)
        assert "Brujah" in widget.valid_values
        assert widget.value == ""

    def test_path_uses_path_max(self, mortal):
        widget = trait_widget(_trait(mortal, "Path"))

        assert isinstance(widget, IntegerWidget)
        assert widget.max_value == 10

    def test_lowered_max_clamps_value(self, mortal):
        trait_max = _trait(mortal, "Trait Max").unique_id
        strength = _trait(mortal, "Strength")
        assert mortal.assign(trait_max, 7)
        assert mortal.assign(strength.unique_id, 7)

        mortal.assign(trait_max, 5)
        widget = trait_widget(strength)

        assert strength.value == 7
        assert widget.value == 5
        assert widget.max_value == 5
