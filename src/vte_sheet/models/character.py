"""
The Character aggregate.

A character is a set of templates (Mortal, Kindred, Kalebite...) plus the
traits those templates grant. Traits can publish their value as a named
character variable (``IS_VARIABLE|TRAITMAX``) which other traits use for
their bounds, and can register themselves as subtraits of a main trait whose
value is derived from them (``SUBTRAIT|Arcana``).

Template rules:
    - A character with no templates is Mortal.
    - Every character carries the Mortal traits, whatever its templates.
    - Mortal is never added once another template is present.
    - Adding any other template drops the Mortal key; Mortal traits stay.
    - Removing a template keeps every trait still granted by a remaining
      template or by Mortal, and removes the rest.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from vte_sheet.db.catalog import Catalog, get_catalog, iter_template_traits
from vte_sheet.errors import InvalidArgument, UnknownTraitError
from vte_sheet.models.constants import TemplateKey, TraitCategory, TraitSubCategory
from vte_sheet.models.trait import Trait, try_get_int

logger = logging.getLogger(__name__)


class Character:
    """
    A character sheet's data.

    Args:
        unique_id: Identifier of the character.
        *templates: Template keys to apply; none means Mortal.
        catalog: Catalog to draw traits from; defaults to the shared one.
    """

    def __init__(
        self,
        unique_id: str,
        *templates: TemplateKey,
        catalog: Catalog | None = None,
    ) -> None:
        self.unique_id = unique_id
        self.catalog = catalog or get_catalog()
        self._template_keys: set[TemplateKey] = set()
        self._traits: dict[int, Trait] = {}
        self._variables: dict[str, int] = {}
        self._sub_trait_registry: dict[str, set[int]] = {}

        for trait_id in sorted(self.catalog.template(TemplateKey.MORTAL).trait_ids):
            self.add_trait(trait_id)
        for key in templates or (TemplateKey.MORTAL,):
            self.add_template(key)

    def __repr__(self) -> str:
        keys = ", ".join(key.name for key in sorted(self._template_keys))
        return f"Character({self.unique_id!r}, templates=[{keys}], traits={len(self._traits)})"

    # -------------------------------------------------------------------------
    # Templates
    # -------------------------------------------------------------------------

    @property
    def template_keys(self) -> frozenset[TemplateKey]:
        return frozenset(self._template_keys)

    def add_template(self, key: TemplateKey) -> None:
        """Apply a template, adding every trait it grants."""
        key = TemplateKey(key)
        if key in self._template_keys:
            return
        if self._template_keys and key == TemplateKey.MORTAL:
            return

        template = self.catalog.template(key)
        self._template_keys.add(key)
        for trait_id in sorted(template.trait_ids):
            self.add_trait(trait_id)

        if key != TemplateKey.MORTAL:
            self._template_keys.discard(TemplateKey.MORTAL)
        logger.debug("Character %s gained template %s", self.unique_id, key.name)

    def remove_template(self, key: TemplateKey) -> None:
        """Remove a template and any traits no remaining template grants."""
        key = TemplateKey(key)
        if key not in self._template_keys:
            return
        self._template_keys.discard(key)

        keep = iter_template_traits(self.catalog, self._template_keys | {TemplateKey.MORTAL})
        for trait_id in [tid for tid in self._traits if tid not in keep]:
            self.remove_trait(trait_id)

        if not self._template_keys:
            self._template_keys.add(TemplateKey.MORTAL)
        logger.debug("Character %s lost template %s", self.unique_id, key.name)

    # -------------------------------------------------------------------------
    # Traits
    # -------------------------------------------------------------------------

    def add_trait(self, trait_id: int) -> None:
        if trait_id in self._traits:
            return
        trait = Trait(info=self.catalog.trait(trait_id), character=self)
        self._traits[trait_id] = trait

        parsed = trait.info.parsed
        if parsed.is_var:
            self.register_variable(parsed.is_var, trait)
        if parsed.sub_trait_of:
            self.register_sub_trait(parsed.sub_trait_of, trait)

    def remove_trait(self, trait_id: int) -> None:
        trait = self._traits.pop(trait_id, None)
        if trait is None:
            return

        self._variables = {
            name: tid for name, tid in self._variables.items() if tid != trait_id
        }
        for name in list(self._sub_trait_registry):
            members = self._sub_trait_registry[name]
            members.discard(trait_id)
            if not members:
                del self._sub_trait_registry[name]

    def has_trait(self, trait_id: int) -> bool:
        return trait_id in self._traits

    def get_trait(self, trait_id: int) -> Trait:
        try:
            return self._traits[trait_id]
        except KeyError:
            raise UnknownTraitError(trait_id) from None

    def find_trait(self, name: str) -> Trait | None:
        """Return the lowest-id trait called ``name``, if the character has one."""
        for trait in self.traits:
            if trait.name == name:
                return trait
        return None

    @property
    def traits(self) -> list[Trait]:
        """All traits in id order."""
        return [self._traits[tid] for tid in sorted(self._traits)]

    def assign(self, trait_id: int, value: Any) -> bool:
        """Try to set a trait's value; returns False if the trait rejects it."""
        accepted = self.get_trait(trait_id).try_assign(value)
        if not accepted:
            logger.info(
                "Character %s: trait %d rejected value %r", self.unique_id, trait_id, value
            )
        return accepted

    # -------------------------------------------------------------------------
    # Variables and subtraits
    # -------------------------------------------------------------------------

    def register_variable(self, variable_name: str, trait: Trait) -> None:
        """
        Publish ``trait``'s value under ``variable_name``.

        Empty and numeric names are ignored.

        Raises:
            InvalidArgument: If the name is already bound to another trait.
        """
        if not variable_name or try_get_int(variable_name) is not None:
            return
        bound = self._variables.get(variable_name)
        if bound is not None and bound != trait.unique_id:
            raise InvalidArgument(f"Variable {variable_name!r} is already registered")
        self._variables[variable_name] = trait.unique_id

    def get_variable(self, variable_name: str | None) -> Any:
        """
        Resolve a variable reference.

        Numeric strings are returned as ints. A leading ``-`` negates an
        integer variable. Unknown variables resolve to None.
        """
        if not variable_name:
            return None

        literal = try_get_int(variable_name)
        if literal is not None:
            return literal

        multiplier = 1
        if variable_name.startswith("-"):
            multiplier = -1
            variable_name = variable_name[1:]

        trait_id = self._variables.get(variable_name)
        if trait_id is None:
            return None

        value = self._traits[trait_id].value
        as_int = try_get_int(value)
        if as_int is not None:
            return as_int * multiplier
        return value

    def register_sub_trait(self, main_trait: str, sub_trait: Trait) -> None:
        self._sub_trait_registry.setdefault(main_trait, set()).add(sub_trait.unique_id)

    def get_max_sub_trait(self, main_trait: str) -> int:
        """Highest integer value among ``main_trait``'s subtraits (0 if none)."""
        members = self._sub_trait_registry.get(main_trait)
        if not members:
            return 0
        values = [try_get_int(self._traits[tid].value) for tid in members]
        return max((v for v in values if v is not None), default=0)

    def count_sub_traits(self, main_trait: str) -> int:
        return len(self._sub_trait_registry.get(main_trait, ()))

    # -------------------------------------------------------------------------
    # Category views
    # -------------------------------------------------------------------------

    def traits_in(
        self, category: TraitCategory, subcategory: TraitSubCategory | None = None
    ) -> Iterator[Trait]:
        """Traits in ``category`` (and ``subcategory`` when given), in id order."""
        for trait in self.traits:
            if trait.category != category:
                continue
            if subcategory is not None and trait.subcategory != subcategory:
                continue
            yield trait

    @property
    def top_text_traits(self) -> list[Trait]:
        return list(self.traits_in(TraitCategory.TOP_TEXT))

    @property
    def physical_attributes(self) -> list[Trait]:
        return list(self.traits_in(TraitCategory.ATTRIBUTE, TraitSubCategory.PHYSICAL))

    @property
    def social_attributes(self) -> list[Trait]:
        return list(self.traits_in(TraitCategory.ATTRIBUTE, TraitSubCategory.SOCIAL))

    @property
    def mental_attributes(self) -> list[Trait]:
        return list(self.traits_in(TraitCategory.ATTRIBUTE, TraitSubCategory.MENTAL))

    @property
    def physical_skills(self) -> list[Trait]:
        return list(self.traits_in(TraitCategory.SKILL, TraitSubCategory.PHYSICAL))

    @property
    def social_skills(self) -> list[Trait]:
        return list(self.traits_in(TraitCategory.SKILL, TraitSubCategory.SOCIAL))

    @property
    def mental_skills(self) -> list[Trait]:
        return list(self.traits_in(TraitCategory.SKILL, TraitSubCategory.MENTAL))

    @property
    def backgrounds(self) -> list[Trait]:
        return list(self.traits_in(TraitCategory.BACKGROUND))

    @property
    def powers(self) -> list[Trait]:
        return list(self.traits_in(TraitCategory.POWER))

    @property
    def vital_statistics(self) -> list[Trait]:
        return list(self.traits_in(TraitCategory.VITAL_STATISTIC))

    def to_dict(self) -> dict[str, Any]:
        return {
            "character_id": self.unique_id,
            "templates": [key.name.lower() for key in sorted(self._template_keys)],
            "traits": [trait.to_dict() for trait in self.traits],
        }
