"""Pytest configuration and shared fixtures."""

import pytest
from fastapi.testclient import TestClient

from recipebasket.dependencies import get_store
from recipebasket.main import app
from recipebasket.shopping.models import RawIngredient, RecipeListEntry
from recipebasket.shopping.store import ShoppingListStore
from recipebasket.storage.memory import InMemoryStorage

# =============================================================================
# Pytest Configuration
# =============================================================================


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "slow: marks tests as slow running")


# =============================================================================
# Storage Fixtures
# =============================================================================


@pytest.fixture
def storage():
    """Empty in-memory storage."""
    return InMemoryStorage()


@pytest.fixture
def store(storage):
    """Shopping list store backed by in-memory storage."""
    return ShoppingListStore(storage)


# =============================================================================
# Recipe Fixtures
# =============================================================================


@pytest.fixture
def garlic_bread():
    """Recipe A: garlic bread."""
    return RecipeListEntry(
        recipe_slug="garlic-bread",
        recipe_title="Garlic Bread",
        ingredients=[
            RawIngredient(name="Garlic", quantity="2", unit="clove", notes="crushed"),
            RawIngredient(name="Butter", quantity="50", unit="g", notes="softened"),
            RawIngredient(name="Salt", notes="to taste"),
        ],
    )


@pytest.fixture
def tomato_soup():
    """Recipe B: tomato soup."""
    return RecipeListEntry(
        recipe_slug="tomato-soup",
        recipe_title="Tomato Soup",
        ingredients=[
            RawIngredient(name="Tomatoes", quantity="400", unit="g"),
            RawIngredient(name="garlic", quantity="1", unit="tsp", notes="Crushed"),
            RawIngredient(name="salt", quantity="1/2", unit="tsp", notes="to taste"),
        ],
    )


@pytest.fixture
def two_recipes(garlic_bread, tomato_soup):
    """Both recipes, in the order they were added."""
    return [garlic_bread, tomato_soup]


@pytest.fixture
def filled_store(store, garlic_bread, tomato_soup):
    """Store holding both recipes."""
    store.add_recipe(garlic_bread)
    store.add_recipe(tomato_soup)
    return store


# =============================================================================
# API Fixtures
# =============================================================================


@pytest.fixture
def client(store):
    """Test client whose routes use the in-memory store."""
    app.dependency_overrides[get_store] = lambda: store
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
