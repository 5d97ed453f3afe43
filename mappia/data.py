"""Static catalog data."""

from __future__ import annotations

from mappia.constant import (
    CATEGORY_META_BY_ID,
    MENU_ITEMS_BY_CATEGORY,
    ONBOARDING_PAGES as _ONBOARDING_PAGES_RAW,
    SLIDES as _SLIDES_RAW,
)
from mappia.models import Category, MenuItem, OnboardingPage, Slide


def _build_menu_item(raw: dict[str, str | int]) -> MenuItem:
    return MenuItem(
        id=raw["id"],
        name=str(raw["name"]),
        unit_price=raw["price"],  # type: ignore[arg-type]
        image=str(raw["image"]) if raw.get("image") is not None else None,
    )


MENU_BY_CATEGORY: dict[str, list[MenuItem]] = {
    category_id: [_build_menu_item(raw) for raw in raw_items]
    for category_id, raw_items in MENU_ITEMS_BY_CATEGORY.items()
}

CATEGORIES: list[Category] = [
    Category(
        category_id=category_id,
        name=meta["name"],
        image=meta.get("image"),
        items=tuple(MENU_BY_CATEGORY.get(category_id, [])),
    )
    for category_id, meta in CATEGORY_META_BY_ID.items()
]

MENU_ITEM_BY_ID: dict[int | str, MenuItem] = {
    item.id: item for items in MENU_BY_CATEGORY.values() for item in items
}

ONBOARDING_PAGES: list[OnboardingPage] = [
    OnboardingPage(title=page["title"], description=page["description"], image=page.get("image"))
    for page in _ONBOARDING_PAGES_RAW
]

SLIDES: list[Slide] = [Slide(title=slide["title"], caption=slide["caption"]) for slide in _SLIDES_RAW]


def menu_for_category(category_id: str) -> list[MenuItem]:
    """Get the menu of a category, empty for unknown ids."""
    return list(MENU_BY_CATEGORY.get(category_id, []))


def menu_item_by_id(item_id: int | str) -> MenuItem | None:
    return MENU_ITEM_BY_ID.get(item_id)


def category_by_id(category_id: str) -> Category | None:
    for category in CATEGORIES:
        if category.category_id == category_id:
            return category
    return None
