"""Unit tests for the menu catalog (items, categories, builder)."""

import pytest

from rms.domain.exceptions import (
    EntityNotFoundError,
    UnsupportedForCategoryError,
    UnsupportedForLeafError,
    ValidationError,
)
from rms.domain.model.menu import MenuCategory, MenuItem, MenuItemBuilder
from rms.domain.model.value_objects import Money
from tests.fakes import make_item, sample_menu


class TestMenuItemBuilder:

    def test_builds_item(self):
        item = (
            MenuItemBuilder()
            .with_name("Cola")
            .with_description("Chilled")
            .with_price("1.99")
            .add_ingredient("Sugar")
            .add_ingredient("Caffeine")
            .build()
        )
        assert item.name == "Cola"
        assert item.description == "Chilled"
        assert item.price == Money.of("1.99")
        assert item.ingredients == ["Sugar", "Caffeine"]

    def test_accepts_money(self):
        item = MenuItemBuilder().with_name("Water").with_price(Money.zero()).build()
        assert item.price == Money.zero()

    def test_missing_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            MenuItemBuilder().with_price("1.00").build()

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            MenuItemBuilder().with_name("   ").with_price("1.00").build()

    def test_missing_price_rejected(self):
        with pytest.raises(ValidationError, match="Price is required"):
            MenuItemBuilder().with_name("Cola").build()

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="cannot be negative"):
            MenuItemBuilder().with_name("Cola").with_price("-1")

    def test_builder_produces_independent_items(self):
        builder = MenuItemBuilder().with_name("Cola").with_price("1.99").add_ingredient("Sugar")
        first = builder.build()
        second = builder.build()
        first.add_ingredient("Ice")
        assert second.ingredients == ["Sugar"]
        assert first.id != second.id


class TestMenuItem:

    def test_starts_without_ingredients(self):
        item = MenuItem(name="Burger", description="", price=Money.of("5"))
        assert item.ingredients == []

    def test_ingredients_cannot_be_edited_through_the_returned_list(self):
        menu = sample_menu()
        burger = menu.find_by_name("Classic Burger")
        burger.ingredients.clear()
        burger.ingredients.append("Pickles")
        assert menu.find_by_name("Classic Burger").ingredients == ["Beef Patty", "Bun"]

    def test_ingredients_is_not_settable(self):
        item = make_item()
        with pytest.raises(AttributeError):
            item.ingredients = ["Pickles"]

    def test_clone_gets_fresh_identity(self):
        item = make_item()
        copy = item.clone()
        assert copy.id != item.id
        assert copy.name == item.name
        assert copy.price == item.price

    def test_mutating_clone_leaves_original_untouched(self):
        item = make_item(ingredients=("Beef Patty", "Bun"))
        copy = item.clone()
        copy.add_ingredient("Onion")
        copy.rename("Onion Burger")
        copy.describe("With onion")
        assert item.ingredients == ["Beef Patty", "Bun"]
        assert item.name == "Classic Burger"
        assert item.description == ""
        assert copy.ingredients == ["Beef Patty", "Bun", "Onion"]

    def test_leaf_rejects_children_operations(self):
        item = make_item()
        with pytest.raises(UnsupportedForLeafError, match="Cannot add"):
            item.add(make_item("Cola"))
        with pytest.raises(UnsupportedForLeafError, match="Cannot remove"):
            item.remove(make_item("Cola"))
        with pytest.raises(UnsupportedForLeafError, match="no children"):
            item.children

    def test_capability_queries(self):
        item = make_item()
        assert item.as_item() is item
        assert item.as_category() is None

    def test_display_line(self):
        item = make_item("Cola", "1.99", description="Chilled")
        assert list(item.display(2)) == ["    Cola - $1.99 - Chilled"]


class TestMenuCategory:

    def test_children_keep_insertion_order(self):
        cat = MenuCategory("Drinks")
        a, b, c = make_item("Cola"), make_item("Tea"), make_item("Water")
        for item in (a, b, c):
            cat.add(item)
        assert cat.children == [a, b, c]

    def test_children_is_a_copy(self):
        cat = MenuCategory("Drinks")
        cat.children.append(make_item("Cola"))
        assert cat.children == []

    def test_remove_child(self):
        cat = MenuCategory("Drinks")
        cola = make_item("Cola")
        cat.add(cola)
        cat.remove(cola)
        assert cat.children == []

    def test_remove_unknown_child_rejected(self):
        cat = MenuCategory("Drinks")
        with pytest.raises(EntityNotFoundError, match="not a child"):
            cat.remove(make_item("Cola"))

    def test_adding_same_node_twice_rejected(self):
        cat = MenuCategory("Drinks")
        cola = make_item("Cola")
        cat.add(cola)
        with pytest.raises(ValidationError, match="already in category"):
            cat.add(cola)

    def test_cycles_rejected(self):
        outer = MenuCategory("Outer")
        inner = MenuCategory("Inner")
        outer.add(inner)
        with pytest.raises(ValidationError, match="cycle"):
            inner.add(outer)
        with pytest.raises(ValidationError, match="cycle"):
            outer.add(outer)

    def test_category_rejects_item_operations(self):
        cat = MenuCategory("Drinks")
        with pytest.raises(UnsupportedForCategoryError, match="Cannot clone"):
            cat.clone()
        with pytest.raises(UnsupportedForCategoryError, match="Cannot add ingredients"):
            cat.add_ingredient("Ice")

    def test_category_has_no_price(self):
        cat = MenuCategory("Drinks")
        with pytest.raises(UnsupportedForCategoryError, match="has no price"):
            cat.price

    def test_capability_queries(self):
        cat = MenuCategory("Drinks")
        assert cat.as_category() is cat
        assert cat.as_item() is None

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            MenuCategory(" ")


class TestMenuDisplay:

    def test_pre_order_with_two_space_indent(self):
        assert list(sample_menu().display()) == [
            "Menu - Everything",
            "  Burgers - Grilled to order",
            "    Classic Burger - $8.99 - Beef burger",
            "    Cheeseburger - $9.99 - With cheese",
            "  Drinks - Cold drinks",
            "    Cola - $1.99 - Chilled",
        ]

    def test_display_is_lazy(self):
        lines = sample_menu().display()
        assert next(lines) == "Menu - Everything"

    def test_display_at_depth(self):
        cat = MenuCategory("Drinks", "Cold")
        cat.add(make_item("Cola", "1.99", description="Chilled"))
        assert list(cat.display(1)) == ["  Drinks - Cold", "    Cola - $1.99 - Chilled"]

    def test_items_lists_every_leaf(self):
        names = [item.name for item in sample_menu().items()]
        assert names == ["Classic Burger", "Cheeseburger", "Cola"]


class TestFindByName:

    def test_case_insensitive(self):
        drinks = MenuCategory("Drinks")
        cola = make_item("Cola", "1.99")
        drinks.add(cola)
        assert drinks.find_by_name("cola") is cola
        assert drinks.find_by_name("COLA") is cola

    def test_finds_leaf_at_any_depth(self):
        root = MenuCategory("Root")
        level = root
        for depth in range(5):
            child = MenuCategory(f"Level {depth}")
            level.add(child)
            level = child
        deep = make_item("Deep Dish")
        level.add(deep)
        assert root.find_by_name("deep dish") is deep

    def test_missing_name_returns_none(self):
        assert sample_menu().find_by_name("Pizza") is None

    def test_categories_never_match(self):
        assert sample_menu().find_by_name("Burgers") is None

    def test_first_match_in_pre_order_wins(self):
        root = MenuCategory("Root")
        first = MenuCategory("First")
        second = MenuCategory("Second")
        root.add(first)
        root.add(second)
        early = make_item("Cola")
        late = make_item("Cola")
        first.add(early)
        second.add(late)
        assert root.find_by_name("Cola") is early

    def test_leaf_finds_itself(self):
        item = make_item("Cola")
        assert item.find_by_name("cola") is item
        assert item.find_by_name("Tea") is None
