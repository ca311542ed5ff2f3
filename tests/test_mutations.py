"""Unit tests for shopping list mutation functions."""

from recipebasket.shopping import mutations
from recipebasket.shopping.consolidation import consolidate
from recipebasket.shopping.models import RawIngredient, RecipeListEntry


def _names(entry: RecipeListEntry) -> list[str]:
    return [ing.name for ing in entry.ingredients]


class TestUpsertRecipe:
    """Tests for upsert_recipe function."""

    def test_appends_new_recipe(self, garlic_bread, tomato_soup):
        """Test adding a recipe that is not on the list."""
        result = mutations.upsert_recipe([garlic_bread], tomato_soup)

        assert [e.recipe_slug for e in result] == ["garlic-bread", "tomato-soup"]

    def test_replaces_in_place(self, two_recipes):
        """Test that re-adding a slug replaces it without moving it."""
        updated = RecipeListEntry("garlic-bread", "Cheesy Garlic Bread", [RawIngredient("Cheese")])
        result = mutations.upsert_recipe(two_recipes, updated)

        assert [e.recipe_slug for e in result] == ["garlic-bread", "tomato-soup"]
        assert result[0].recipe_title == "Cheesy Garlic Bread"
        assert _names(result[0]) == ["Cheese"]

    def test_does_not_share_state(self, garlic_bread):
        """Test that later changes to the added entry do not leak in."""
        result = mutations.upsert_recipe([], garlic_bread)
        garlic_bread.ingredients.clear()

        assert len(result[0].ingredients) == 3


class TestRemoveRecipe:
    """Tests for remove_recipe function."""

    def test_removes_all_occurrences(self, two_recipes):
        """Test that every ingredient of the recipe leaves the consolidated view."""
        result = mutations.remove_recipe(two_recipes, "garlic-bread")
        consolidated = {item.name: item for item in consolidate(result)}

        assert [e.recipe_slug for e in result] == ["tomato-soup"]
        assert "Butter" not in consolidated
        assert [q.from_recipe for q in consolidated["garlic"].quantities] == ["Tomato Soup"]
        assert "Tomatoes" in consolidated

    def test_unknown_slug_is_noop(self, two_recipes):
        """Test removing a recipe that is not on the list."""
        assert mutations.remove_recipe(two_recipes, "pancakes") == two_recipes


class TestRemoveIngredientFromRecipe:
    """Tests for remove_ingredient_from_recipe function."""

    def test_scoped_to_one_recipe(self, two_recipes):
        """Test that Salt removed from A still appears once, from B."""
        result = mutations.remove_ingredient_from_recipe(two_recipes, "Salt", "garlic-bread")
        salt = {item.name: item for item in consolidate(result)}["salt"]

        assert len(salt.quantities) == 1
        assert salt.quantities[0].from_recipe == "Tomato Soup"

    def test_case_insensitive(self, two_recipes):
        """Test that the name matches regardless of case and whitespace."""
        result = mutations.remove_ingredient_from_recipe(two_recipes, "  GARLIC ", "tomato-soup")

        assert _names(result[1]) == ["Tomatoes", "salt"]
        assert _names(result[0]) == ["Garlic", "Butter", "Salt"]

    def test_empty_recipe_stays_on_list(self):
        """Test that removing the last ingredient keeps the recipe."""
        entries = [RecipeListEntry("toast", "Toast", [RawIngredient("Bread", "2", "slices")])]
        result = mutations.remove_ingredient_from_recipe(entries, "bread", "toast")

        assert len(result) == 1
        assert result[0].ingredients == []
        assert consolidate(result) == []

    def test_no_match_is_noop(self, two_recipes):
        """Test removing an ingredient the recipe does not have."""
        assert mutations.remove_ingredient_from_recipe(two_recipes, "Tomatoes", "garlic-bread") == two_recipes
        assert mutations.remove_ingredient_from_recipe(two_recipes, "Salt", "pancakes") == two_recipes

    def test_input_not_modified(self, two_recipes):
        """Test that the original entries are untouched."""
        mutations.remove_ingredient_from_recipe(two_recipes, "Salt", "garlic-bread")

        assert _names(two_recipes[0]) == ["Garlic", "Butter", "Salt"]


class TestRemoveIngredientGlobally:
    """Tests for remove_ingredient_globally function."""

    def test_removes_group(self, two_recipes):
        """Test that the Salt group disappears entirely."""
        result = mutations.remove_ingredient_globally(two_recipes, "Salt")
        names = [item.name for item in consolidate(result)]

        assert "Salt" not in names
        assert "salt" not in names
        assert names == ["Garlic", "Butter", "Tomatoes"]

    def test_recipes_remain(self, two_recipes):
        """Test that recipes stay on the list after a global removal."""
        result = mutations.remove_ingredient_globally(two_recipes, "garlic")

        assert [e.recipe_slug for e in result] == ["garlic-bread", "tomato-soup"]

    def test_no_match_is_noop(self, two_recipes):
        """Test removing an ingredient nobody uses."""
        assert mutations.remove_ingredient_globally(two_recipes, "Saffron") == two_recipes
