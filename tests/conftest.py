"""
Shared pytest fixtures for the sheet test suite.

This module provides fixtures that are automatically available to all test files:
- The packaged trait catalog, loaded once per session
- Character factories for the common template mixes
- An in-memory CharacterStore and a FastAPI TestClient around it

The shared catalog singleton is pointed at the session catalog for every
test and cleared afterwards, so no test depends on configuration.
"""

from collections.abc import Callable, Generator

import pytest
from fastapi.testclient import TestClient

from vte_sheet.api.server import create_app
from vte_sheet.db.catalog import Catalog, load_catalog, reset_catalog
from vte_sheet.db.store import CharacterStore
from vte_sheet.models.character import Character
from vte_sheet.models.constants import TemplateKey

# ============================================================================
# CATALOG FIXTURES
# ============================================================================


@pytest.fixture(scope="session")
def catalog() -> Catalog:
    """The packaged catalog, loaded once for the whole session."""
    return load_catalog()


@pytest.fixture(autouse=True)
def shared_catalog(catalog: Catalog) -> Generator[Catalog, None, None]:
    """Install the session catalog as the shared singleton for each test."""
    reset_catalog(catalog)
    yield catalog
    reset_catalog(None)


# ============================================================================
# CHARACTER FIXTURES
# ============================================================================


@pytest.fixture
def make_character(catalog: Catalog) -> Callable[..., Character]:
    """
    Factory building characters from template keys.

    Example:
        def test_x(make_character):
            vampire = make_character(TemplateKey.KINDRED)
    """

    def _make(*templates: TemplateKey, unique_id: str = "test") -> Character:
        return Character(unique_id, *templates, catalog=catalog)

    return _make


@pytest.fixture
def mortal(make_character) -> Character:
    return make_character()


@pytest.fixture
def kindred(make_character) -> Character:
    return make_character(TemplateKey.KINDRED)


@pytest.fixture
def mage(make_character) -> Character:
    return make_character(TemplateKey.MAGE)


# ============================================================================
# FASTAPI TEST CLIENT FIXTURES
# ============================================================================


@pytest.fixture
def store(catalog: Catalog) -> CharacterStore:
    """An empty character store over the session catalog."""
    return CharacterStore(catalog)


@pytest.fixture
def test_client(store: CharacterStore) -> TestClient:
    """
    Create a FastAPI TestClient for API endpoint testing.

    Example:
        def test_health(test_client):
            response = test_client.get("/health")
    """
    return TestClient(create_app(store))
