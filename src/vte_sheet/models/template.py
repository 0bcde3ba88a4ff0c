"""Character templates: named bundles of trait ids."""

from __future__ import annotations

from dataclasses import dataclass, field

from vte_sheet.models.constants import TemplateKey


@dataclass(frozen=True)
class CharacterTemplate:
    """A character archetype (Mortal, Kindred...) and the traits it grants."""

    key: TemplateKey
    name: str
    trait_ids: frozenset[int] = field(default_factory=frozenset)

    def to_dict(self) -> dict[str, object]:
        return {
            "template_id": int(self.key),
            "key": self.key.name.lower(),
            "name": self.name,
            "trait_ids": sorted(self.trait_ids),
        }
