"""Tests for static catalog data"""
from decimal import Decimal

from mappia.constant import CATEGORY_META_BY_ID, MENU_ITEMS_BY_CATEGORY
from mappia.data import (
    CATEGORIES,
    MENU_ITEM_BY_ID,
    ONBOARDING_PAGES,
    SLIDES,
    category_by_id,
    menu_for_category,
    menu_item_by_id,
)


def test_categories_follow_configured_order():
    assert [category.name for category in CATEGORIES] == ["Burger", "Fries", "Pizza", "Sushi", "Salad", "Drinks"]


def test_every_category_has_menu():
    for category in CATEGORIES:
        assert category.items, category.category_id
        assert list(category.items) == menu_for_category(category.category_id)


def test_menu_ids_unique():
    raw_ids = [raw["id"] for items in MENU_ITEMS_BY_CATEGORY.values() for raw in items]
    assert len(raw_ids) == len(set(raw_ids)) == len(MENU_ITEM_BY_ID)


def test_menu_categories_are_known():
    assert set(MENU_ITEMS_BY_CATEGORY) <= set(CATEGORY_META_BY_ID)


def test_prices_are_decimal():
    for item in MENU_ITEM_BY_ID.values():
        assert isinstance(item.unit_price, Decimal)
        assert item.unit_price >= 0


def test_lookups():
    assert menu_item_by_id(1).name == "Classic Burger"
    assert menu_item_by_id(12345) is None
    assert menu_for_category("unknown") == []
    assert category_by_id("sushi").name == "Sushi"
    assert category_by_id("unknown") is None


def test_menu_for_category_returns_copy():
    menu = menu_for_category("burger")
    menu.clear()
    assert menu_for_category("burger")


def test_onboarding_pages():
    assert [page.title for page in ONBOARDING_PAGES] == ["Welcome to Mappia!", "Fast Delivery", "Easy Payment"]


def test_slides_present():
    assert len(SLIDES) == 3
