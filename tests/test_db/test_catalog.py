"""
Tests for the YAML trait catalog (vte_sheet/db/catalog.py).

Tests cover:
- Loading the packaged catalog
- Template membership and the template x trait join
- Lookups by id, key and name
- Validation errors for malformed documents
- The shared catalog singleton and its config-driven path
"""

import pytest

from vte_sheet.config import use_catalog_path
from vte_sheet.db.catalog import (
    build_catalog,
    get_catalog,
    iter_template_traits,
    load_catalog,
    reset_catalog,
)
from vte_sheet.errors import CatalogError, UnknownTemplateError, UnknownTraitError
from vte_sheet.models.constants import TemplateKey, TraitCategory, TraitType

MINIMAL = {
    "traits": [
        {"name": "Strength", "type": "integer", "category": "attribute", "data": "MINMAX|1|5"},
        {"name": "Clan", "type": "dropdown", "category": "top_text", "values_from": "clans"},
    ],
    "option_lists": {"clans": ["Brujah", "Ventrue"]},
    "templates": [
        {"key": "mortal", "traits": ["Strength"]},
        {"key": "kindred", "traits": ["Clan"]},
    ],
}


# ============================================================================
# PACKAGED CATALOG
# ============================================================================


@pytest.mark.unit
class TestPackagedCatalog:
    def test_ids_are_sequential(self, catalog):
        assert sorted(catalog.traits) == list(range(len(catalog.traits)))

    def test_all_templates_present(self, catalog):
        assert set(catalog.templates) == set(TemplateKey)

    def test_mortal_has_nine_attributes(self, catalog):
        mortal = catalog.template(TemplateKey.MORTAL)
        attributes = [
            tid for tid in mortal.trait_ids
            if catalog.trait(tid).category == TraitCategory.ATTRIBUTE
        ]

        assert len(attributes) == 9

    def test_paths_loaded(self, catalog):
        paths = catalog.get_path_data()

        assert paths[0].name == "Humanity"
        assert all(len(p.hierarchy_of_sins) == 10 for p in paths)
        assert catalog.paths["Humanity"].sin_at(1) == "Selfish acts."

    def test_values_from_composes_values_line(self, catalog):
        clan = catalog.trait(catalog.trait_ids_by_name("Clan")[0])

        assert clan.type == TraitType.DROPDOWN
        assert "Brujah" in clan.parsed.possible_values

    def test_derived_option_composed(self, catalog):
        breed = catalog.trait(catalog.trait_ids_by_name("Breed")[0])

        assert breed.parsed.derived_options_lookup == {"[animal]": "BROOD"}
        assert breed.parsed.derived_options_switch["[animal]"]["Aragite"] == "Arachnes"

    def test_template_join_ordered(self, catalog):
        rows = catalog.get_character_template_data()

        assert rows == sorted(rows, key=lambda r: (r.template_id, r.trait_id))
        assert rows[0].template_name == "Mortal"

    def test_trait_data_in_id_order(self, catalog):
        ids = [info.unique_id for info in catalog.get_trait_data()]

        assert ids == sorted(ids)

    def test_iter_template_traits_unions(self, catalog):
        ids = iter_template_traits(catalog, [TemplateKey.KINDRED, TemplateKey.MAGE])

        assert ids == (
            catalog.template(TemplateKey.KINDRED).trait_ids
            | catalog.template(TemplateKey.MAGE).trait_ids
        )


@pytest.mark.unit
class TestLookups:
    @pytest.mark.parametrize("key", [TemplateKey.KINDRED, "kindred", "KINDRED", 1])
    def test_template_by_key(self, catalog, key):
        assert catalog.template(key).key is TemplateKey.KINDRED

    def test_unknown_template(self, catalog):
        with pytest.raises(UnknownTemplateError) as exc_info:
            catalog.template("werewolf")
        assert exc_info.value.context.key == "werewolf"
        assert "template" in str(exc_info.value)

    def test_unknown_trait(self, catalog):
        with pytest.raises(UnknownTraitError):
            catalog.trait(-1)

    def test_trait_ids_by_name(self, catalog):
        assert len(catalog.trait_ids_by_name("Strength")) == 1
        assert catalog.trait_ids_by_name("Nope") == []


# ============================================================================
# VALIDATION
# ============================================================================


@pytest.mark.unit
class TestBuildCatalog:
    def test_minimal_document(self):
        catalog = build_catalog(MINIMAL)

        assert len(catalog.traits) == 2
        assert catalog.template("kindred").trait_ids == frozenset({1})

    def test_not_a_mapping(self):
        with pytest.raises(CatalogError):
            build_catalog(["traits"])  # type: ignore[arg-type]

    def test_unknown_trait_type(self):
        raw = {**MINIMAL, "traits": [{"name": "X", "type": "sparkly", "category": "skill"}]}

        with pytest.raises(CatalogError, match="Invalid trait entry"):
            build_catalog(raw)

    def test_bad_data_keyword(self):
        raw = {
            **MINIMAL,
            "traits": [{"name": "X", "type": "integer", "category": "skill", "data": "NOPE"}],
            "templates": [],
        }

        with pytest.raises(CatalogError):
            build_catalog(raw)

    def test_unknown_option_list(self):
        raw = {**MINIMAL, "option_lists": {}}

        with pytest.raises(CatalogError, match="unknown option list"):
            build_catalog(raw)

    def test_template_references_unknown_trait(self):
        raw = {**MINIMAL, "templates": [{"key": "mortal", "traits": ["Dexterity"]}]}

        with pytest.raises(CatalogError, match="unknown trait"):
            build_catalog(raw)

    def test_duplicate_template(self):
        raw = {**MINIMAL, "templates": [{"key": "mortal"}, {"key": "MORTAL"}]}

        with pytest.raises(CatalogError, match="Duplicate template"):
            build_catalog(raw)

    def test_path_needs_ten_sins(self):
        raw = {
            **MINIMAL,
            "paths": [
                {"name": "Short", "virtues": "a", "bearing": "b", "hierarchy_of_sins": ["x"]}
            ],
        }

        with pytest.raises(CatalogError, match="Invalid path entry"):
            build_catalog(raw)


# ============================================================================
# LOADING
# ============================================================================


@pytest.mark.unit
class TestLoadCatalog:
    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "broken.yaml"
        path.write_text("traits: [unclosed", encoding="utf-8")

        with pytest.raises(CatalogError, match="not valid YAML"):
            load_catalog(path)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_catalog(tmp_path / "missing.yaml")

    def test_source_recorded(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "traits:\n  - {name: Wits, type: integer, category: attribute}\n", encoding="utf-8"
        )

        assert load_catalog(path).source == path

    def test_shared_catalog_uses_configured_path(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(
            "traits:\n  - {name: Wits, type: integer, category: attribute}\n"
            "templates:\n  - {key: mortal, traits: [Wits]}\n",
            encoding="utf-8",
        )
        reset_catalog(None)

        with use_catalog_path(path):
            catalog = get_catalog()

        assert catalog.source == path
        assert get_catalog() is catalog
