"""Domain models for mappia."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal, InvalidOperation


class InvalidArgument(ValueError):
    """Raised when a caller passes an item the cart cannot accept."""


def to_price(value: object) -> Decimal:
    """Coerce a catalog price into a non-negative Decimal."""
    if isinstance(value, bool) or value is None:
        raise InvalidArgument(f"Invalid unit price: {value!r}")
    if isinstance(value, float):
        value = str(value)
    try:
        price = Decimal(value)  # type: ignore[arg-type]
    except (InvalidOperation, TypeError, ValueError):
        raise InvalidArgument(f"Invalid unit price: {value!r}") from None
    if not price.is_finite():
        raise InvalidArgument(f"Invalid unit price: {value!r}")
    if price < 0:
        raise InvalidArgument(f"Unit price must not be negative: {price}")
    return price


def check_item_id(value: object) -> int | str:
    """Return ``value`` if it is a usable catalog id (a non-blank str or a non-bool int)."""
    if value is None:
        raise InvalidArgument("Menu item id is required")
    # bool is an int subclass and would collide with ids 0 and 1.
    if isinstance(value, bool) or not isinstance(value, (int, str)):
        raise InvalidArgument(f"Menu item id must be an int or str: {value!r}")
    if isinstance(value, str) and not value.strip():
        raise InvalidArgument("Menu item id is required")
    return value


@dataclass(frozen=True)
class MenuItem:
    """An orderable catalog entry. Two items with the same id are the same entry."""

    id: int | str
    name: str = field(compare=False)
    unit_price: Decimal = field(compare=False)
    image: str | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        check_item_id(self.id)
        object.__setattr__(self, "unit_price", to_price(self.unit_price))


@dataclass(frozen=True)
class CartLine:
    """One (item, quantity) pair of a cart."""

    item: MenuItem
    quantity: int

    @property
    def subtotal(self) -> Decimal:
        return self.item.unit_price * self.quantity


@dataclass(frozen=True)
class Category:
    """A menu category shown on the home screen."""

    category_id: str
    name: str
    image: str | None = None
    items: tuple[MenuItem, ...] = ()


@dataclass(frozen=True)
class OnboardingPage:
    title: str
    description: str
    image: str | None = None


@dataclass(frozen=True)
class Slide:
    """A carousel banner."""

    title: str
    caption: str
