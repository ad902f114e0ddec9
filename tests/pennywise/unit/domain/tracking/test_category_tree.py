"""Unit tests for CategoryTree."""

from pennywise.domain.tracking.services import CategoryTree

from tests.shared.fixtures.factories import default_categories, make_category


class TestCategoryTreeLookup:
    def test_contains_and_get(self):
        tree = CategoryTree.from_categories(default_categories())

        assert "food" in tree
        assert "unknown" not in tree
        assert tree.get("rent").name == "Rent"
        assert tree.get("unknown") is None
        assert len(tree) == 6

    def test_children_and_roots(self):
        tree = CategoryTree.from_categories(default_categories())

        assert [c.id for c in tree.children_of("food")] == ["groceries", "restaurants"]
        assert tree.children_of("rent") == []
        assert "groceries" not in {c.id for c in tree.roots()}

    def test_find_child_only_under_given_parent(self):
        tree = CategoryTree.from_categories(default_categories())

        assert tree.find_child("food", "groceries").name == "Groceries"
        assert tree.find_child("rent", "groceries") is None

    def test_coerce_reuses_tree(self):
        tree = CategoryTree.from_categories(default_categories())
        assert CategoryTree.coerce(tree) is tree


class TestDescendants:
    def test_includes_self_and_nested_children(self):
        categories = [
            *default_categories(),
            make_category("organic", parent_id="groceries"),
        ]
        tree = CategoryTree.from_categories(categories)

        assert tree.descendant_ids("food") == {
            "food",
            "groceries",
            "restaurants",
            "organic",
        }

    def test_unknown_id_returns_itself(self):
        tree = CategoryTree.from_categories(default_categories())
        assert tree.descendant_ids("deleted") == {"deleted"}

    def test_cycle_terminates(self):
        tree = CategoryTree.from_categories(
            [
                make_category("a", parent_id="b"),
                make_category("b", parent_id="a"),
            ],
        )

        assert tree.descendant_ids("a") == {"a", "b"}

    def test_expand_unions_selections(self):
        tree = CategoryTree.from_categories(default_categories())
        assert tree.expand(["rent", "groceries"]) == {"rent", "groceries"}
