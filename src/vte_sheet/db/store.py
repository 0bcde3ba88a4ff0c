"""
In-memory character store.

Characters live in a process-local dictionary keyed by character id and are
lost when the server stops. There is no persistence layer and no locking;
the server handles one sheet editor at a time.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable

from vte_sheet.db.catalog import Catalog, get_catalog
from vte_sheet.errors import UnknownCharacterError
from vte_sheet.models.character import Character
from vte_sheet.models.constants import TemplateKey

logger = logging.getLogger(__name__)

# Id of the character served by the /playerpersistence endpoint.
DEMO_CHARACTER_ID = "demo"


class CharacterStore:
    """Dictionary-backed character repository."""

    def __init__(self, catalog: Catalog | None = None) -> None:
        self._catalog = catalog
        self._characters: dict[str, Character] = {}

    @property
    def catalog(self) -> Catalog:
        """Catalog new characters draw their traits from."""
        return self._catalog or get_catalog()

    def __len__(self) -> int:
        return len(self._characters)

    def __contains__(self, character_id: object) -> bool:
        return character_id in self._characters

    def create(
        self, templates: Iterable[TemplateKey] = (), character_id: str | None = None
    ) -> Character:
        """Create and store a character with the given templates."""
        character_id = character_id or uuid.uuid4().hex
        character = Character(character_id, *templates, catalog=self._catalog)
        self._characters[character_id] = character
        logger.info(
            "Created character %s (%s)",
            character_id,
            ", ".join(key.name for key in sorted(character.template_keys)),
        )
        return character

    def get(self, character_id: str) -> Character:
        try:
            return self._characters[character_id]
        except KeyError:
            raise UnknownCharacterError(character_id) from None

    def delete(self, character_id: str) -> None:
        if self._characters.pop(character_id, None) is None:
            raise UnknownCharacterError(character_id)
        logger.info("Deleted character %s", character_id)

    def ids(self) -> list[str]:
        return sorted(self._characters)

    def get_or_create_demo(self) -> Character:
        """Return the demo character, creating a Mortal one on first use."""
        if DEMO_CHARACTER_ID not in self._characters:
            self.create(character_id=DEMO_CHARACTER_ID)
        return self._characters[DEMO_CHARACTER_ID]
