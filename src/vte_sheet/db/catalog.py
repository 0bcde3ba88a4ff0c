"""
Trait catalog, the in-memory stand-in for a trait database.

The catalog is loaded once from a YAML file (``vte_sheet/data/catalog.yaml``
by default, overridable with ``VTE_CATALOG_PATH``) and kept in memory. It
plays the role a SQL backend would normally play, with three "tables":

    - traits: one :class:`~vte_sheet.models.trait.TraitInfo` per definition
    - templates × traits: which traits each character template grants
    - paths: the moral Paths and their hierarchies of sins

Anything that needs catalog data depends on the :class:`DatabaseAccessLayer`
protocol, so a real database can be dropped in later.

Design notes:
- Trait ids are assigned in file order starting at 0.
- Templates list traits by *name*; a name maps to every id carrying it.
- :func:`load_catalog` raises :exc:`CatalogError` for any schema problem and
  :exc:`FileNotFoundError` when the file is missing. Neither is caught here.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, NamedTuple, Protocol

import yaml

from vte_sheet.errors import CatalogError, UnknownTemplateError, UnknownTraitError
from vte_sheet.models.constants import (
    Keywords,
    TemplateKey,
    TraitCategory,
    TraitSubCategory,
    TraitType,
    parse_enum,
)
from vte_sheet.models.moral_path import MoralPath
from vte_sheet.models.template import CharacterTemplate
from vte_sheet.models.trait import TraitInfo

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).parent.parent / "data" / "catalog.yaml"

# values_from name that refers to the paths section rather than option_lists.
PATHS_OPTION_LIST = "paths"


class TemplateTraitRow(NamedTuple):
    """One row of the template × trait join, ordered by template then trait."""

    template_id: int
    template_name: str
    trait_id: int


class DatabaseAccessLayer(Protocol):
    """Read access to trait, template and path data."""

    def get_trait_data(self) -> list[TraitInfo]: ...

    def get_character_template_data(self) -> list[TemplateTraitRow]: ...

    def get_path_data(self) -> list[MoralPath]: ...


# =============================================================================
# CATALOG
# =============================================================================


@dataclass(frozen=True)
class Catalog:
    """
    Loaded catalog data.

    Attributes:
        traits: Trait definitions keyed by id.
        templates: Character templates keyed by template key.
        paths: Moral Paths keyed by name, in file order.
        source: File the catalog was loaded from, if any.
    """

    traits: dict[int, TraitInfo]
    templates: dict[TemplateKey, CharacterTemplate]
    paths: dict[str, MoralPath] = field(default_factory=dict)
    source: Path | None = None

    # -- DatabaseAccessLayer --------------------------------------------------

    def get_trait_data(self) -> list[TraitInfo]:
        return [self.traits[trait_id] for trait_id in sorted(self.traits)]

    def get_character_template_data(self) -> list[TemplateTraitRow]:
        return [
            TemplateTraitRow(int(key), template.name, trait_id)
            for key, template in sorted(self.templates.items())
            for trait_id in sorted(template.trait_ids)
        ]

    def get_path_data(self) -> list[MoralPath]:
        return list(self.paths.values())

    # -- Lookups --------------------------------------------------------------

    def trait(self, trait_id: int) -> TraitInfo:
        try:
            return self.traits[trait_id]
        except KeyError:
            raise UnknownTraitError(trait_id) from None

    def template(self, key: TemplateKey | str | int) -> CharacterTemplate:
        try:
            resolved = key if isinstance(key, TemplateKey) else parse_enum(TemplateKey, key)
            return self.templates[resolved]  # type: ignore[index]
        except (KeyError, ValueError):
            raise UnknownTemplateError(key) from None

    def trait_ids_by_name(self, name: str) -> list[int]:
        """Return every trait id whose name is ``name``, in id order."""
        return sorted(tid for tid, info in self.traits.items() if info.name == name)


# =============================================================================
# LOADING
# =============================================================================


def _build_data(entry: dict[str, Any], option_lists: dict[str, list[str]],
                switches: dict[str, dict[str, str]]) -> str:
    """Compose a trait's data field from its raw data and helper keys."""
    lines = [line for line in str(entry.get("data") or "").splitlines() if line.strip()]

    derived = entry.get("derived_option")
    if derived:
        switch_name = derived.get("switch_from")
        if switch_name not in switches:
            raise CatalogError(f"{entry['name']}: unknown switch {switch_name!r}")
        pairs = [part for pair in switches[switch_name].items() for part in pair]
        lines.append(
            "|".join([Keywords.DERIVED_OPTION, derived["option"], derived["variable"], *pairs])
        )

    values_from = entry.get("values_from")
    if values_from:
        if values_from not in option_lists:
            raise CatalogError(f"{entry['name']}: unknown option list {values_from!r}")
        lines.append("|".join([Keywords.POSSIBLE_VALUES, *option_lists[values_from]]))

    return "\n".join(lines)


def _parse_traits(raw: dict[str, Any]) -> dict[int, TraitInfo]:
    option_lists: dict[str, list[str]] = {
        name: [str(value) for value in values]
        for name, values in (raw.get("option_lists") or {}).items()
    }
    option_lists[PATHS_OPTION_LIST] = [str(p["name"]) for p in raw.get("paths") or []]
    switches: dict[str, dict[str, str]] = {
        name: {str(k): str(v) for k, v in mapping.items()}
        for name, mapping in (raw.get("switches") or {}).items()
    }

    traits: dict[int, TraitInfo] = {}
    for trait_id, entry in enumerate(raw.get("traits") or []):
        try:
            info = TraitInfo(
                unique_id=trait_id,
                name=str(entry["name"]),
                type=parse_enum(TraitType, entry["type"]),  # type: ignore[arg-type]
                category=parse_enum(TraitCategory, entry["category"]),  # type: ignore[arg-type]
                subcategory=parse_enum(  # type: ignore[arg-type]
                    TraitSubCategory, entry.get("subcategory", "none")
                ),
                data=_build_data(entry, option_lists, switches),
            )
            # Parse eagerly so bad keywords fail at load time.
            info.parsed  # noqa: B018
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogError(f"Invalid trait entry #{trait_id} ({entry!r}): {exc}") from exc
        traits[trait_id] = info
    return traits


def _parse_templates(
    raw: dict[str, Any], traits: dict[int, TraitInfo]
) -> dict[TemplateKey, CharacterTemplate]:
    ids_by_name: dict[str, list[int]] = {}
    for info in traits.values():
        ids_by_name.setdefault(info.name, []).append(info.unique_id)

    templates: dict[TemplateKey, CharacterTemplate] = {}
    for entry in raw.get("templates") or []:
        try:
            key = parse_enum(TemplateKey, entry["key"])
        except (KeyError, ValueError) as exc:
            raise CatalogError(f"Invalid template entry {entry!r}: {exc}") from exc
        if key in templates:
            raise CatalogError(f"Duplicate template {key.name}")

        trait_ids: set[int] = set()
        for name in entry.get("traits") or []:
            if name not in ids_by_name:
                raise CatalogError(f"Template {key.name} references unknown trait {name!r}")
            trait_ids.update(ids_by_name[name])

        templates[key] = CharacterTemplate(  # type: ignore[arg-type]
            key=key,  # type: ignore[arg-type]
            name=str(entry.get("name") or key.name.title()),
            trait_ids=frozenset(trait_ids),
        )
    return templates


def _parse_paths(raw: dict[str, Any]) -> dict[str, MoralPath]:
    paths: dict[str, MoralPath] = {}
    for entry in raw.get("paths") or []:
        try:
            path = MoralPath(
                name=str(entry["name"]),
                virtues=str(entry["virtues"]),
                bearing=str(entry["bearing"]),
                hierarchy_of_sins=tuple(str(s) for s in entry["hierarchy_of_sins"]),
            )
        except (KeyError, TypeError, ValueError) as exc:
            raise CatalogError(f"Invalid path entry {entry!r}: {exc}") from exc
        if path.name in paths:
            raise CatalogError(f"Duplicate path {path.name!r}")
        paths[path.name] = path
    return paths


def build_catalog(raw: dict[str, Any], source: Path | None = None) -> Catalog:
    """Validate a parsed catalog document and build a :class:`Catalog`."""
    if not isinstance(raw, dict):
        raise CatalogError("Catalog document must be a mapping")
    traits = _parse_traits(raw)
    templates = _parse_templates(raw, traits)
    paths = _parse_paths(raw)
    return Catalog(traits=traits, templates=templates, paths=paths, source=source)


def load_catalog(path: Path | str | None = None) -> Catalog:
    """
    Load and validate the catalog file.

    Args:
        path: YAML file to load; defaults to the packaged catalog.

    Raises:
        FileNotFoundError: If the file does not exist.
        CatalogError: If the file is not valid YAML or fails validation.
    """
    file_path = Path(path) if path is not None else DEFAULT_CATALOG_PATH
    with file_path.open(encoding="utf-8") as fh:
        try:
            raw = yaml.safe_load(fh)
        except yaml.YAMLError as exc:
            raise CatalogError(f"Catalog {file_path} is not valid YAML: {exc}") from exc

    catalog = build_catalog(raw or {}, source=file_path)
    logger.info(
        "Loaded catalog from %s: %d traits, %d templates, %d paths",
        file_path,
        len(catalog.traits),
        len(catalog.templates),
        len(catalog.paths),
    )
    return catalog


# =============================================================================
# MODULE-LEVEL SINGLETON
# =============================================================================

_catalog: Catalog | None = None


def get_catalog() -> Catalog:
    """Return the shared catalog, loading it on first use."""
    global _catalog
    if _catalog is None:
        from vte_sheet.config import config

        _catalog = load_catalog(config.sheet.absolute_catalog_path)
    return _catalog


def reset_catalog(catalog: Catalog | None = None) -> None:
    """Replace (or clear) the shared catalog. Used by tests."""
    global _catalog
    _catalog = catalog


def iter_template_traits(catalog: Catalog, keys: Iterable[TemplateKey]) -> set[int]:
    """Union of trait ids granted by ``keys``."""
    ids: set[int] = set()
    for key in keys:
        ids.update(catalog.template(key).trait_ids)
    return ids
